''' Operand grammar, one pyparsing expression per operand shape '''

from dataclasses import dataclass
from typing import Dict, Literal

import pyparsing as pp

from mipsi.runtime.errors import MalformedOperands


Shape = Literal['RRR', 'RRI', 'RR', 'R']


@dataclass(frozen=True)
class Operands:
    rd: str | None = None
    rs: str | None = None
    rt: str | None = None
    imm: int | None = None


def to_int(token: str) -> int:
    if 'x' in token.lower():
        return int(token, 16)

    return int(token, 10)


comma = pp.Suppress(',')
register = pp.Regex(r'\$[A-Za-z0-9]+')
immediate = pp.Regex(r'[+-]?(0[xX][0-9A-Fa-f]+|[0-9]+)').set_parse_action(lambda r: to_int(r[0]))

SHAPES: Dict[Shape, pp.ParserElement] = {
    'RRR': register('rd') + comma + register('rs') + comma + register('rt'),
    'RRI': register('rd') + comma + register('rs') + comma + immediate('imm'),
    'RR': register('rs') + comma + register('rt'),
    'R': register('rd'),
}

SHAPE_HINTS: Dict[Shape, str] = {
    'RRR': 'rd, rs, rt',
    'RRI': 'rd, rs, imm',
    'RR': 'rs, rt',
    'R': 'rd',
}


def parse(shape: Shape, opcode: str, operands: str) -> Operands:
    try:
        result = SHAPES[shape].parse_string(operands, parse_all=True)
    except pp.ParseException as e:
        raise MalformedOperands(opcode, operands, SHAPE_HINTS[shape]) from e

    return Operands(
        rd=result.get('rd'),
        rs=result.get('rs'),
        rt=result.get('rt'),
        imm=result.get('imm')
    )
