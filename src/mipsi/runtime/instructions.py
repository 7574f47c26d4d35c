import logging as lg
from dataclasses import dataclass
from typing import Callable, Dict, Any, TypeAlias

import mipsi.common.ops as ops
import mipsi.common.registers as regs
import mipsi.runtime.kernels as k
import mipsi.runtime.operands as opnds
from mipsi.runtime.regfile import RegisterFile, SpecialRegisterFile


@dataclass(frozen=True)
class Single:
    target: str
    value: int


@dataclass(frozen=True)
class Pair:
    remainder: int
    quotient: int


KernelResult: TypeAlias = Single | Pair | None
Rule: TypeAlias = Callable[['Descriptor', opnds.Operands, RegisterFile, SpecialRegisterFile], KernelResult]


@dataclass(frozen=True)
class Descriptor:
    shape: opnds.Shape
    rule: Rule
    kernel: Callable[..., Any]
    unsigned: bool = False

    def interpret(
        self, opcode: str, operands: str,
        gp: RegisterFile, special: SpecialRegisterFile
    ) -> KernelResult:
        parsed = opnds.parse(self.shape, opcode, operands)
        return self.rule(self, parsed, gp, special)


# - Rules - #

def reg_reg(d: Descriptor, o: opnds.Operands, gp: RegisterFile, _: SpecialRegisterFile):
    assert o.rd is not None and o.rs is not None and o.rt is not None
    value = d.kernel(gp.get(o.rs), gp.get(o.rt), d.unsigned)
    return Single(o.rd, value)


def reg_imm(d: Descriptor, o: opnds.Operands, gp: RegisterFile, _: SpecialRegisterFile):
    assert o.rd is not None and o.rs is not None and o.imm is not None
    value = d.kernel(gp.get(o.rs), o.imm, d.unsigned)
    return Single(o.rd, value)


def hi_lo(d: Descriptor, o: opnds.Operands, gp: RegisterFile, _: SpecialRegisterFile):
    assert o.rs is not None and o.rt is not None
    remainder, quotient = d.kernel(gp.get(o.rs), gp.get(o.rt))
    return Pair(remainder, quotient)


def unexecuted(d: Descriptor, o: opnds.Operands, gp: RegisterFile, _: SpecialRegisterFile):
    # Operands are validated, nothing is computed
    lg.debug(f'{d.kernel.__name__} {o.rs},{o.rt} is not executed')
    return None


def from_special(name: regs.SpecialRegister) -> Rule:
    def rule(d: Descriptor, o: opnds.Operands, gp: RegisterFile, special: SpecialRegisterFile):
        assert o.rd is not None
        return Single(o.rd, d.kernel(special.get(name)))

    return rule


INSTRUCTIONS: Dict[ops.Opcode, Descriptor] = {
    ops.ADD: Descriptor('RRR', reg_reg, k.add),
    ops.ADDI: Descriptor('RRI', reg_imm, k.add),
    ops.ADDU: Descriptor('RRR', reg_reg, k.add, unsigned=True),
    ops.ADDIU: Descriptor('RRI', reg_imm, k.add, unsigned=True),
    ops.SUB: Descriptor('RRR', reg_reg, k.sub),
    ops.SUBU: Descriptor('RRR', reg_reg, k.sub, unsigned=True),

    ops.MULT: Descriptor('RR', unexecuted, k.mult),
    ops.DIV: Descriptor('RR', hi_lo, k.div),

    ops.MFHI: Descriptor('R', from_special(regs.HI), k.move_from_hi),
    ops.MFLO: Descriptor('R', from_special(regs.LO), k.move_from_lo),

    ops.AND: Descriptor('RRR', reg_reg, k.AND),
    ops.ANDI: Descriptor('RRI', reg_imm, k.AND),
    ops.OR: Descriptor('RRR', reg_reg, k.OR),
    ops.ORI: Descriptor('RRI', reg_imm, k.OR),
    ops.SLL: Descriptor('RRI', reg_imm, k.shift_left),
    ops.SRL: Descriptor('RRI', reg_imm, k.shift_right),

    ops.SLT: Descriptor('RRR', reg_reg, k.set_on_less_than),
    ops.SLTI: Descriptor('RRI', reg_imm, k.set_on_less_than),
}


def lookup(opcode: str) -> Descriptor | None:
    return INSTRUCTIONS.get(opcode)  # type: ignore
