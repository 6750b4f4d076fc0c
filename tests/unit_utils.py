from pathlib import Path

import rasm.runtime.context as context
from rasm.runtime.trace import format_trace


def find_file(filename: str) -> Path:
    return Path(__file__).parent / filename


def load_file(filename: str) -> str:
    return find_file(filename).read_text()


def program_path(name: str) -> Path:
    return find_file(f'testdata/programs/{name}.asm')


def execute_program(name: str) -> context.ExecutionResult:
    return context.execute(program_path(name).read_text())


def expected_trace(name: str) -> str:
    return load_file(f'testdata/programs/{name}.log')


def trace_of(source: str) -> str:
    return format_trace(context.execute(source))
