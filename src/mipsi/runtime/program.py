''' Program text -> (opcode, operands) statements '''

import logging as lg
from dataclasses import dataclass
from typing import Iterator

import pyparsing as pp

from mipsi.runtime.errors import MalformedStatement


@dataclass(frozen=True)
class Statement:
    lineno: int
    opcode: str
    operands: str


comment = pp.Suppress(pp.python_style_comment)
mnemonic = pp.Word(pp.alphas, pp.alphanums + '_')
operand_text = pp.Regex(r'[^#\s][^#]*').set_parse_action(lambda r: r[0].strip())

statement = mnemonic('opcode') + pp.Optional(operand_text('operands'), default='') + pp.Optional(comment)
blank = pp.Optional(comment)


def parse_line(lineno: int, line: str) -> Statement | None:
    try:
        blank.parse_string(line, parse_all=True)
        return None
    except pp.ParseException:
        pass

    try:
        result = statement.parse_string(line, parse_all=True)
    except pp.ParseException as e:
        raise MalformedStatement(lineno, line.strip()) from e

    return Statement(lineno, result['opcode'], result['operands'])


def iter_statements(source: str) -> Iterator[Statement | MalformedStatement]:
    ''' Yields statements, malformed lines are yielded as errors so a run can go on '''
    for lineno, line in enumerate(source.splitlines(), start=1):
        try:
            parsed = parse_line(lineno, line)
        except MalformedStatement as e:
            lg.debug(str(e))
            yield e
            continue

        if parsed is not None:
            yield parsed
