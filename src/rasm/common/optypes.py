from enum import Enum
from typing import Sequence, Tuple, TypeAlias


class TokenType(Enum):
    NUMBER = 'number'
    REGISTER = 'register'
    UNKNOWN = 'unknown'

    def __str__(self) -> str:
        return self.value


NUMBER = TokenType.NUMBER
REGISTER = TokenType.REGISTER
UNKNOWN = TokenType.UNKNOWN

Signature: TypeAlias = Tuple[TokenType, ...]
Operands: TypeAlias = Sequence[str]


def signature_str(signature: Signature) -> str:
    return '(' + ', '.join(str(t) for t in signature) + ')'
