from typing import List, Literal


Opcode = Literal[
    'add', 'addi', 'addu', 'addiu', 'sub', 'subu',
    'mult', 'div', 'mfhi', 'mflo',
    'and', 'andi', 'or', 'ori', 'sll', 'srl',
    'slt', 'slti'
]

# Arithmetic
ADD = 'add'      # R2 +  R3 -> R1
ADDI = 'addi'    # R2 +  I3 -> R1
ADDU = 'addu'    # R2 +  R3 -> R1 (unsigned)
ADDIU = 'addiu'  # R2 +  I3 -> R1 (unsigned)
SUB = 'sub'      # R2 -  R3 -> R1
SUBU = 'subu'    # R2 -  R3 -> R1 (unsigned)
MULT = 'mult'    # R1 *  R2 -> HI:LO (not executed)
DIV = 'div'      # R1 %  R2 -> HI, R1 / R2 -> LO

# Data transfer
MFHI = 'mfhi'    # HI -> R1
MFLO = 'mflo'    # LO -> R1

# Logical
AND = 'and'      # R2 &  R3 -> R1
ANDI = 'andi'    # R2 &  I3 -> R1
OR = 'or'        # R2 |  R3 -> R1
ORI = 'ori'      # R2 |  I3 -> R1
SLL = 'sll'      # R2 << I3 -> R1
SRL = 'srl'      # R2 >> I3 -> R1 (zero fill)

# Comparison
SLT = 'slt'      # R2 <  R3 -> R1
SLTI = 'slti'    # R2 <  I3 -> R1

OPCODES: List[Opcode] = [
    ADD, ADDI, ADDU, ADDIU, SUB, SUBU, MULT, DIV,
    MFHI, MFLO,
    AND, ANDI, OR, ORI, SLL, SRL,
    SLT, SLTI
]
