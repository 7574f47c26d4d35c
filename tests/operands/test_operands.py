import pytest

import mipsi.runtime.operands as opnds
from mipsi.runtime.errors import MalformedOperands


def test_three_registers():
    parsed = opnds.parse('RRR', 'add', '$t0,$t1,$t2')
    assert parsed == opnds.Operands(rd='$t0', rs='$t1', rt='$t2')


def test_whitespace_is_tolerated():
    parsed = opnds.parse('RRR', 'add', ' $t0 , $t1,  $t2 ')
    assert parsed == opnds.Operands(rd='$t0', rs='$t1', rt='$t2')


@pytest.mark.parametrize('text, value', [
    ('10', 10), ('-3', -3), ('+4', 4), ('0x1F', 31), ('-0x10', -16)
])
def test_immediates(text, value):
    parsed = opnds.parse('RRI', 'addi', f'$t0,$t1,{text}')
    assert parsed.imm == value
    assert parsed.rs == '$t1'


def test_two_and_one_register():
    assert opnds.parse('RR', 'div', '$t0,$t1') == opnds.Operands(rs='$t0', rt='$t1')
    assert opnds.parse('R', 'mfhi', '$t3') == opnds.Operands(rd='$t3')


@pytest.mark.parametrize('shape, text', [
    ('RRR', '$t0,$t1'),
    ('RRR', ''),
    ('RRR', '$t0,$t1,$t2,$t3'),
    ('RRR', '$t0,$t1,5'),
    ('RRI', '$t0,$t1,$t2'),
    ('RRI', '$t0,$t1,abc'),
    ('RR', '$t0'),
    ('R', '$t0,$t1'),
    ('R', 't0'),
])
def test_malformed(shape, text):
    with pytest.raises(MalformedOperands):
        opnds.parse(shape, 'op', text)
