from rasm.common.optypes import Signature, Operands


class MachineError(Exception):
    ''' Any error recorded against a program line '''
    pass


class UnknownInstruction(MachineError):
    def __init__(self, mnemonic: str):
        super().__init__(f'Unknown instruction "{mnemonic}"')
        self.mnemonic = mnemonic


class UnmatchedSignature(MachineError):
    def __init__(self, mnemonic: str, operands: Operands, signature: Signature):
        super().__init__(
            f'No matching operand pattern for "{mnemonic}" with operands {list(operands)}'
        )

        self.mnemonic = mnemonic
        self.operands = tuple(operands)
        self.signature = signature


class UninitializedRegister(MachineError):
    def __init__(self, name: str):
        super().__init__(f'Uninitialized register "{name}"')
        self.name = name


class StackUnderflow(MachineError):
    def __init__(self):
        super().__init__('Pop from empty stack')


class TableSealed(Exception):
    def __init__(self, mnemonic: str):
        super().__init__(f'Instruction table is sealed, cannot register "{mnemonic}"')
        self.mnemonic = mnemonic
