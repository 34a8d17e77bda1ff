from typing import Sequence

from elliptic_curves.fields.prime_field import PrimeField

MERSENNE31_MODULUS = 2**31 - 1

Mersenne31 = PrimeField(MERSENNE31_MODULUS)


def to_field_row(row: Sequence[int], field=Mersenne31) -> list:
    """Convert a row of integers to a row of elements of `field`."""
    return [field(value) for value in row]


def from_field_row(row: Sequence) -> list[int]:
    """Convert a row of field elements to the list of their canonical integer representatives."""
    return [element.to_int() for element in row]


def is_canonical(value: int, modulus: int = MERSENNE31_MODULUS) -> bool:
    """Check whether `value` is an integer in `[0, modulus)`."""
    return isinstance(value, int) and 0 <= value < modulus
