''' Baseline instruction set '''

from abc import ABC, abstractmethod
from functools import cache
from types import MappingProxyType
from typing import Callable, List, Mapping, TYPE_CHECKING, TypeAlias

from rasm.common.optypes import NUMBER, REGISTER, Signature, Operands
from rasm.sasm.tokenizer import signature_of
from rasm.runtime.errors import UnmatchedSignature
from rasm.runtime.table import InstructionTable, Handler

if TYPE_CHECKING:
    from rasm.runtime.context import Context


Variant: TypeAlias = Callable[..., None]


class Instruction:
    ''' One mnemonic and the operand signatures it accepts '''
    mnemonic: str
    VARIANTS: Mapping[Signature, Variant] = MappingProxyType({})

    def accepted_signatures(self) -> List[Signature]:
        return list(self.VARIANTS)

    def handler(self, signature: Signature) -> Handler:
        variant = self.VARIANTS[signature]

        def handle(context: 'Context', operands: Operands):
            variant(self, context, *operands)

        return handle

    def execute(self, context: 'Context', operands: Operands):
        signature = signature_of(operands)

        if signature not in self.VARIANTS:
            raise UnmatchedSignature(self.mnemonic, operands, signature)

        self.handler(signature)(context, operands)


class Mov(Instruction):
    mnemonic = 'mov'

    def load_const(self, context: 'Context', register: str, number: str):
        context.set_reg(register, int(number))

    def copy_reg(self, context: 'Context', register: str, source: str):
        context.set_reg(register, context.get_reg(source))

    VARIANTS = MappingProxyType({
        (REGISTER, NUMBER): load_const,
        (REGISTER, REGISTER): copy_reg
    })


class Push(Instruction):
    mnemonic = 'push'

    def push_const(self, context: 'Context', number: str):
        context.push(int(number))

    def push_reg(self, context: 'Context', register: str):
        context.push(context.get_reg(register))

    VARIANTS = MappingProxyType({
        (NUMBER,): push_const,
        (REGISTER,): push_reg
    })


class Pop(Instruction):
    mnemonic = 'pop'

    def pop_reg(self, context: 'Context', register: str):
        context.set_reg(register, context.pop())

    VARIANTS = MappingProxyType({
        (REGISTER,): pop_reg
    })


class Arithmetic(Instruction, ABC):
    ''' register <op>= operand, the target register must hold a value '''

    @abstractmethod
    def apply(self, a: int, b: int) -> int:
        ...

    def update(self, context: 'Context', register: str, value: int):
        current = context.get_reg(register)
        context.set_reg(register, self.apply(current, value))

    def with_const(self, context: 'Context', register: str, number: str):
        self.update(context, register, int(number))

    def with_reg(self, context: 'Context', register: str, source: str):
        self.update(context, register, context.get_reg(source))

    VARIANTS = MappingProxyType({
        (REGISTER, NUMBER): with_const,
        (REGISTER, REGISTER): with_reg
    })


class Add(Arithmetic):
    mnemonic = 'add'

    def apply(self, a: int, b: int) -> int:
        return a + b


class Sub(Arithmetic):
    mnemonic = 'sub'

    def apply(self, a: int, b: int) -> int:
        return a - b


class Print(Instruction):
    mnemonic = 'print'

    def print_reg(self, context: 'Context', register: str):
        context.output.log(str(context.get_reg(register)))

    def print_const(self, context: 'Context', number: str):
        # Literal text, leading zeros included
        context.output.log(number)

    VARIANTS = MappingProxyType({
        (REGISTER,): print_reg,
        (NUMBER,): print_const
    })


BASELINE: List[Instruction] = [Mov(), Push(), Pop(), Add(), Sub(), Print()]


def build_table(instructions: List[Instruction]) -> InstructionTable:
    table = InstructionTable()

    for instruction in instructions:
        table.install(instruction)

    return table.seal()


@cache
def default_table() -> InstructionTable:
    return build_table(BASELINE)
