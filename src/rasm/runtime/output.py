from typing import List


class OutputStream:
    output: List[str]  # Informational log
    errors: List[str]

    def __init__(self):
        self.output = []
        self.errors = []

    def log(self, message: str):
        self.output.append(message)

    def error(self, message: str):
        self.errors.append(message)

    def should_compile(self) -> bool:
        return len(self.errors) == 0
