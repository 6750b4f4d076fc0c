import logging as lg
from typing import Callable, Dict, List, TYPE_CHECKING, TypeAlias

from rasm.common.optypes import Signature, Operands, signature_str
from rasm.runtime.errors import UnknownInstruction, UnmatchedSignature, TableSealed

if TYPE_CHECKING:
    from rasm.runtime.context import Context
    from rasm.runtime.instructions import Instruction


Handler: TypeAlias = Callable[['Context', Operands], None]


class InstructionTable:
    ''' Mnemonic -> operand signature -> handler '''
    instructions: Dict[str, Dict[Signature, Handler]]
    sealed: bool

    def __init__(self):
        self.instructions = dict()
        self.sealed = False

    def register(self, mnemonic: str, signature: Signature, handler: Handler):
        if self.sealed:
            raise TableSealed(mnemonic)

        signature = tuple(signature)
        lg.debug(f'Registering {mnemonic} {signature_str(signature)}')
        self.instructions.setdefault(mnemonic, dict())[signature] = handler

    def install(self, instruction: 'Instruction'):
        for signature in instruction.accepted_signatures():
            self.register(instruction.mnemonic, signature, instruction.handler(signature))

        return self

    def seal(self):
        self.sealed = True
        return self

    def mnemonics(self) -> List[str]:
        return list(self.instructions)

    def signatures(self, mnemonic: str) -> List[Signature]:
        return list(self.instructions.get(mnemonic, {}))

    def lookup(self, mnemonic: str, signature: Signature, operands: Operands = ()) -> Handler:
        variants = self.instructions.get(mnemonic)

        if variants is None:
            raise UnknownInstruction(mnemonic)

        handler = variants.get(tuple(signature))

        if handler is None:
            raise UnmatchedSignature(mnemonic, operands, tuple(signature))

        return handler

    def __contains__(self, mnemonic: str) -> bool:
        return mnemonic in self.instructions
