from typing import List, Literal


REGISTERS: List[str] = [
    '$zero', '$at', '$v0', '$v1',
    '$a0', '$a1', '$a2', '$a3',
    '$t0', '$t1', '$t2', '$t3', '$t4', '$t5', '$t6', '$t7',
    '$s0', '$s1', '$s2', '$s3', '$s4', '$s5', '$s6', '$s7',
    '$t8', '$t9', '$k0', '$k1',
    '$gp', '$sp', '$fp', '$ra'
]
NUMBER_OF_REGISTERS = len(REGISTERS)
ZERO_REGISTER = '$zero'

SpecialRegister = Literal['hi', 'lo']
SPECIAL_REGISTERS: List[SpecialRegister] = ['hi', 'lo']
HI: SpecialRegister = 'hi'
LO: SpecialRegister = 'lo'


def canonical(name: str) -> str:
    ''' Maps numeric aliases ($0 .. $31) onto symbolic names '''
    index = name[1:]

    if name.startswith('$') and index.isdigit() and int(index) < NUMBER_OF_REGISTERS:
        return REGISTERS[int(index)]

    return name
