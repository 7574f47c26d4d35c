from typing import Iterable, Sequence, TextIO, Tuple

from tabulate import tabulate

from mipsi.common.conf import DEFAULT_TABLE_FORMAT
from mipsi.runtime.regfile import RegisterChange


CHANGE_HEADERS = ['Reg Name', 'Old Value', 'New Value']
DUMP_HEADERS = ['Reg Name', 'Value']


class Reporter:
    stream: TextIO | None
    table_format: str

    def __init__(self, stream: TextIO | None = None, table_format: str = DEFAULT_TABLE_FORMAT):
        # None means whatever sys.stdout is at the time of writing
        self.stream = stream
        self.table_format = table_format

    def emit(self, text: str):
        print(text, file=self.stream)

    def report_instruction(self, opcode: str, operands: str):
        self.emit(f'\nINSTRUCTION: {opcode} {operands}')

    def report_changes(self, changes: Sequence[RegisterChange]):
        rows = [[c.name, c.old, c.new] for c in changes]
        self.emit(tabulate(rows, headers=CHANGE_HEADERS, tablefmt=self.table_format))

    def report_error(self, message: str):
        self.emit(f'[ERR]: {message}')

    def report_registers(self, registers: Iterable[Tuple[str, int]]):
        rows = [[name, value] for name, value in registers]
        self.emit(tabulate(rows, headers=DUMP_HEADERS, tablefmt=self.table_format))
