from pathlib import Path
from typing import Dict, TypeAlias
import tomllib


WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1
SIGN_BIT = 1 << (WORD_BITS - 1)
SHAMT_LIMIT = WORD_BITS - 1

# Accepted as either signed or unsigned words
WORD_MIN = -SIGN_BIT
WORD_MAX = WORD_MASK

DEFAULT_TABLE_FORMAT = 'grid'
PROMPT = 'mipsi> '

InitialValues: TypeAlias = Dict[str, int]


class Settings:
    verbose: bool
    table_format: str
    dump: bool
    init: Path | None

    def __init__(self):
        self.verbose = False
        self.table_format = DEFAULT_TABLE_FORMAT
        self.dump = False
        self.init = None

    def update(
        self,
        verbose: bool | None = None,
        table_format: str | None = None,
        dump: bool | None = None,
        init: Path | None = None
    ):
        if verbose is not None:
            self.verbose = verbose

        if table_format is not None:
            self.table_format = table_format

        if dump is not None:
            self.dump = dump

        if init is not None:
            self.init = init

        return self


def load_initial_values(path: Path) -> tuple[InitialValues, InitialValues]:
    ''' Reads [registers] and [special] tables from a TOML file '''
    config = tomllib.loads(path.read_text())
    registers = config.get('registers', {})
    special = config.get('special', {})

    for section, table in (('registers', registers), ('special', special)):
        if not isinstance(table, dict):
            raise UserWarning(f'[{section}] must be a table, got {table!r}')

        for name, value in table.items():
            if not isinstance(value, int) or isinstance(value, bool):
                raise UserWarning(f'Initial value of {name} must be an integer, got {value!r}')

            if not WORD_MIN <= value <= WORD_MAX:
                raise UserWarning(
                    f'Initial value of {name} does not fit {WORD_BITS} bits, got {value}'
                )

    return registers, special
