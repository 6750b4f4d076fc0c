import logging as lg
from dataclasses import dataclass
from typing import Tuple

import pyparsing as pp

import rasm.sasm.grammar as g
from rasm.common.optypes import TokenType, Signature, Operands


@dataclass(frozen=True)
class Line:
    mnemonic: str
    operands: Tuple[str, ...]


def _full_match(expr: pp.ParserElement, token: str) -> bool:
    # Classes are exact: no surrounding whitespace is tolerated
    return token == token.strip() and expr.matches(token, parse_all=True)


def classify(token: str) -> TokenType:
    if _full_match(g.number, token):
        return TokenType.NUMBER

    if _full_match(g.register, token):
        return TokenType.REGISTER

    return TokenType.UNKNOWN


def signature_of(operands: Operands) -> Signature:
    return tuple(classify(operand) for operand in operands)


def split_operands(text: str) -> Tuple[str, ...]:
    if not text.strip():
        return ()

    parts = g.operands.parse_string(text, parse_all=True)
    return tuple(str(part).strip() for part in parts)


def tokenize(line: str) -> Line:
    if not line.strip():
        return Line('', ())

    tokens = g.statement.parse_string(line.strip())
    rest = tokens[1] if len(tokens) > 1 else ''
    parsed = Line(tokens[0], split_operands(rest))

    lg.debug(f'Tokenized {parsed.mnemonic} {list(parsed.operands)}')
    return parsed
