import logging as lg
from dataclasses import dataclass
from typing import Dict, List, Any

from rasm.sasm.tokenizer import tokenize, signature_of
from rasm.runtime.errors import MachineError, UninitializedRegister, StackUnderflow
from rasm.runtime.output import OutputStream
from rasm.runtime.table import InstructionTable
from rasm.runtime.instructions import default_table


@dataclass(frozen=True)
class ExecutionResult:
    registers: Dict[str, int]
    stack: List[int]  # Bottom first
    output: List[str]
    errors: List[str]
    compiled: bool

    def json(self) -> Dict[str, Any]:
        return {
            'Compiled': self.compiled,
            'Stack': list(self.stack),
            'Registers': dict(self.registers),
            'Errors': list(self.errors),
            'Output': list(self.output)
        }


class Context:
    registers: Dict[str, int]
    stack: List[int]
    output: OutputStream
    table: InstructionTable

    def __init__(self, table: InstructionTable | None = None):
        self.registers = dict()
        self.stack = []
        self.output = OutputStream()
        self.table = table if table is not None else default_table()

    # - State - #

    def get_reg(self, name: str) -> int:
        if name not in self.registers:
            raise UninitializedRegister(name)

        return self.registers[name]

    def set_reg(self, name: str, value: int):
        self.registers[name] = value

    def push(self, value: int):
        self.stack.append(value)

    def pop(self) -> int:
        if not self.stack:
            raise StackUnderflow()

        return self.stack.pop()

    def debug_dump(self):
        lg.debug(f'STACK:{self.stack} REGS:{self.registers}')

    # - Dispatch - #

    def use(self, line: str, number: int = 0):
        parsed = tokenize(line)
        signature = signature_of(parsed.operands)

        try:
            handler = self.table.lookup(parsed.mnemonic, signature, parsed.operands)
            handler(self, parsed.operands)

        except MachineError as e:
            lg.debug(f'Line {number}: {e}')
            self.output.error(str(e))

        self.debug_dump()

    def run(self, program: str) -> ExecutionResult:
        for number, line in enumerate(program.splitlines(), start=1):
            if not line.strip():
                continue

            lg.debug(f'Line {number}: {line.strip()}')
            self.use(line, number)

        return self.result()

    def result(self) -> ExecutionResult:
        return ExecutionResult(
            registers=dict(self.registers),
            stack=list(self.stack),
            output=list(self.output.output),
            errors=list(self.output.errors),
            compiled=self.output.should_compile()
        )


def execute(program: str, table: InstructionTable | None = None) -> ExecutionResult:
    return Context(table).run(program)
