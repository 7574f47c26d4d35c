''' Semantic kernels: pure 32-bit arithmetic, logic and comparison '''

from typing import Tuple

from mipsi.common.conf import WORD_BITS, WORD_MASK, SIGN_BIT, SHAMT_LIMIT
from mipsi.runtime.errors import KernelError


def to_unsigned32(value: int) -> int:
    return value & WORD_MASK


def to_signed32(value: int) -> int:
    value &= WORD_MASK
    return value - (1 << WORD_BITS) if value & SIGN_BIT else value


def to_word(value: int, unsigned: bool) -> int:
    return to_unsigned32(value) if unsigned else to_signed32(value)


def check_shamt(shamt: int) -> int:
    if not 0 <= shamt <= SHAMT_LIMIT:
        raise KernelError(f'Shift amount {shamt} out of range 0..{SHAMT_LIMIT}')

    return shamt


# - Arithmetic - #

def add(lhs: int, rhs: int, unsigned: bool = False) -> int:
    return to_word(to_word(lhs, unsigned) + to_word(rhs, unsigned), unsigned)


def sub(lhs: int, rhs: int, unsigned: bool = False) -> int:
    return to_word(to_word(lhs, unsigned) - to_word(rhs, unsigned), unsigned)


def mult(lhs: int, rhs: int, unsigned: bool = False) -> Tuple[int, int]:
    ''' 64-bit product split into (hi, lo) words '''
    product = to_word(lhs, unsigned) * to_word(rhs, unsigned)
    return to_word(product >> WORD_BITS, unsigned), to_word(product, unsigned)


def div(lhs: int, rhs: int, unsigned: bool = False) -> Tuple[int, int]:
    '''
    Returns (remainder, quotient). The quotient is truncated toward zero,
    so the remainder takes the sign of the dividend.
    '''
    dividend = to_word(lhs, unsigned)
    divisor = to_word(rhs, unsigned)

    if divisor == 0:
        raise KernelError('Division by zero')

    quotient = abs(dividend) // abs(divisor)

    if (dividend < 0) != (divisor < 0):
        quotient = -quotient

    remainder = dividend - quotient * divisor
    return to_word(remainder, unsigned), to_word(quotient, unsigned)


# - Logical - #

def AND(lhs: int, rhs: int, unsigned: bool = False) -> int:
    return to_word(to_unsigned32(lhs) & to_unsigned32(rhs), unsigned)


def OR(lhs: int, rhs: int, unsigned: bool = False) -> int:
    return to_word(to_unsigned32(lhs) | to_unsigned32(rhs), unsigned)


def shift_left(value: int, shamt: int, unsigned: bool = False) -> int:
    return to_word(to_unsigned32(value) << check_shamt(shamt), unsigned)


def shift_right(value: int, shamt: int, unsigned: bool = False) -> int:
    # Logical shift, vacated bits are zero filled
    return to_word(to_unsigned32(value) >> check_shamt(shamt), unsigned)


# - Comparison - #

def set_on_less_than(lhs: int, rhs: int, unsigned: bool = False) -> int:
    return 1 if to_word(lhs, unsigned) < to_word(rhs, unsigned) else 0


# - Data transfer - #

def move_from_hi(hi: int) -> int:
    return hi


def move_from_lo(lo: int) -> int:
    return lo
