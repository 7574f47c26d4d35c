import logging as lg
import threading
from typing import Literal

import mipsi.common.registers as regs
import mipsi.runtime.instructions as ins
from mipsi.runtime.errors import InterpreterError, UnknownOpcode
from mipsi.runtime.regfile import RegisterFile, SpecialRegisterFile
from mipsi.runtime.reporter import Reporter


Outcome = Literal['executed', 'ignored', 'failed']
EXECUTED: Outcome = 'executed'
IGNORED: Outcome = 'ignored'
FAILED: Outcome = 'failed'


class Dispatcher:
    gp: RegisterFile
    special: SpecialRegisterFile
    reporter: Reporter

    def __init__(
        self,
        gp: RegisterFile | None = None,
        special: SpecialRegisterFile | None = None,
        reporter: Reporter | None = None
    ):
        self.gp = gp if gp is not None else RegisterFile()
        self.special = special if special is not None else SpecialRegisterFile()
        self.reporter = reporter if reporter is not None else Reporter()

        # Serialises dispatch so that hi/lo are never seen half updated
        self.lock = threading.RLock()

    def dispatch(self, opcode: str, operands: str) -> Outcome:
        with self.lock:
            self.reporter.report_instruction(opcode, operands)

            try:
                return self.execute(opcode, operands)

            except InterpreterError as e:
                lg.warning(f'{opcode} {operands}: {e}')
                self.reporter.report_error(str(e))
                return FAILED

    def execute(self, opcode: str, operands: str) -> Outcome:
        descriptor = ins.lookup(opcode)

        if descriptor is None:
            raise UnknownOpcode(opcode)

        lg.debug(f'Dispatching {opcode} ({descriptor.shape}, {descriptor.kernel.__name__})')
        result = descriptor.interpret(opcode, operands, self.gp, self.special)

        if result is None:
            return IGNORED

        if isinstance(result, ins.Single):
            changes = self.gp.update({result.target: result.value})
        elif isinstance(result, ins.Pair):
            changes = self.special.update({regs.HI: result.remainder, regs.LO: result.quotient})
        else:
            raise TypeError(f'Unexpected kernel result {result!r}')

        self.reporter.report_changes(changes)
        return EXECUTED
