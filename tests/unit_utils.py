from pathlib import Path
from typing import List, Tuple

from mipsi.runtime.dispatcher import Dispatcher


def find_file(filename: str) -> Path:
    return Path(__file__).parent / filename


def load_file(filename: str) -> str:
    return find_file(filename).read_text()


def table_rows(output: str) -> List[Tuple[str, ...]]:
    ''' Data rows of every grid table in the output, headers skipped '''
    rows = []

    for line in output.splitlines():
        if not line.startswith('|'):
            continue

        cells = tuple(cell.strip() for cell in line.strip('|').split('|'))

        if cells[0] == 'Reg Name':
            continue

        rows.append(cells)

    return rows


def table_count(output: str) -> int:
    return sum(1 for line in output.splitlines() if line.startswith('+='))


def preset(dispatcher: Dispatcher, **values: int):
    ''' preset(d, t1=5) writes $t1 without reporting '''
    dispatcher.gp.update({f'${name}': value for name, value in values.items()})
