import pytest

import mipsi.common.registers as regs
from mipsi.runtime.errors import ProtectedRegisterWrite, UnknownRegister
from mipsi.runtime.regfile import RegisterFile, SpecialRegisterFile, RegisterChange


def test_initial_state():
    gp = RegisterFile()
    special = SpecialRegisterFile()

    assert len(gp.dump()) == regs.NUMBER_OF_REGISTERS
    assert all(value == 0 for _, value in gp)
    assert special.dump() == [('hi', 0), ('lo', 0)]


def test_set_and_get():
    gp = RegisterFile()
    gp.set('$t0', 42)
    gp.set('$t0', -7)

    assert gp.get('$t0') == -7
    assert gp.get('$t1') == 0


def test_numeric_aliases():
    gp = RegisterFile()
    gp.set('$8', 3)

    assert gp.get('$t0') == 3
    assert '$31' in gp
    assert '$32' not in gp


def test_zero_is_protected():
    gp = RegisterFile()

    with pytest.raises(ProtectedRegisterWrite):
        gp.set('$zero', 5)

    with pytest.raises(ProtectedRegisterWrite):
        gp.set('$0', 5)

    assert gp.get('$zero') == 0


def test_unknown_register():
    gp = RegisterFile()

    with pytest.raises(UnknownRegister):
        gp.get('$t10')

    with pytest.raises(UnknownRegister):
        gp.set('hi', 1)


def test_update_reports_changes():
    gp = RegisterFile()
    gp.set('$s0', 1)

    changes = gp.update({'$s0': 2, '$s1': 3})

    assert changes == [RegisterChange('$s0', 1, 2), RegisterChange('$s1', 0, 3)]


def test_update_is_all_or_nothing():
    gp = RegisterFile()

    with pytest.raises(ProtectedRegisterWrite):
        gp.update({'$t0': 1, '$zero': 2})

    with pytest.raises(UnknownRegister):
        gp.update({'$t0': 1, '$nope': 2})

    assert gp.get('$t0') == 0


def test_special_registers_are_writable():
    special = SpecialRegisterFile()
    changes = special.update({'hi': 2, 'lo': 3})

    assert changes == [RegisterChange('hi', 0, 2), RegisterChange('lo', 0, 3)]
    assert special.get('hi') == 2

    with pytest.raises(UnknownRegister):
        special.get('$t0')
