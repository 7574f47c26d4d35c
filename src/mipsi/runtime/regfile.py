import logging as lg
from typing import Dict, Iterator, List, Mapping, Tuple, TypeAlias
from dataclasses import dataclass

import mipsi.common.registers as regs
from mipsi.runtime.errors import ProtectedRegisterWrite, UnknownRegister


@dataclass(frozen=True)
class RegisterChange:
    name: str
    old: int
    new: int


Changes: TypeAlias = List[RegisterChange]


class RegisterStore:
    values: Dict[str, int]
    protected: Tuple[str, ...] = ()

    def __init__(self, names: List[str]):
        self.values = {name: 0 for name in names}

    def __iter__(self) -> Iterator[Tuple[str, int]]:
        return iter(self.values.items())

    def __contains__(self, name: str) -> bool:
        return self.resolve(name) in self.values

    def resolve(self, name: str) -> str:
        return name

    def get(self, name: str) -> int:
        resolved = self.resolve(name)

        if resolved not in self.values:
            raise UnknownRegister(name)

        return self.values[resolved]

    def check_writable(self, name: str) -> str:
        resolved = self.resolve(name)

        if resolved not in self.values:
            raise UnknownRegister(name)

        if resolved in self.protected:
            raise ProtectedRegisterWrite(resolved)

        return resolved

    def set(self, name: str, value: int):
        resolved = self.check_writable(name)
        lg.debug(f'{resolved} <- {value}')
        self.values[resolved] = value

    def update(self, changes: Mapping[str, int]) -> Changes:
        # Validate the whole batch first, so it is applied entirely or not at all
        resolved = [(self.check_writable(name), value) for name, value in changes.items()]

        applied = []

        for name, value in resolved:
            applied.append(RegisterChange(name, self.values[name], value))
            self.set(name, value)

        return applied

    def dump(self) -> List[Tuple[str, int]]:
        return list(self)


class RegisterFile(RegisterStore):
    ''' General purpose registers, $zero is hardwired to 0 '''
    protected = (regs.ZERO_REGISTER,)

    def __init__(self):
        super().__init__(regs.REGISTERS)

    def resolve(self, name: str) -> str:
        return regs.canonical(name)


class SpecialRegisterFile(RegisterStore):
    ''' hi/lo accumulators of multiply and divide '''

    def __init__(self):
        super().__init__(list(regs.SPECIAL_REGISTERS))
