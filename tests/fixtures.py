# type: ignore
import pytest

from mipsi.runtime.dispatcher import Dispatcher
from mipsi.runtime.regfile import RegisterFile, SpecialRegisterFile


@pytest.fixture
def with_registers():
    yield RegisterFile(), SpecialRegisterFile()


@pytest.fixture
def with_dispatcher(with_registers):
    gp, special = with_registers
    yield Dispatcher(gp, special)
