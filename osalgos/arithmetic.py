"""Booth's signed multiplication and Karatsuba multiplication of decimal strings."""

from __future__ import annotations

import argparse
from typing import Sequence

_DIGITS = frozenset("0123456789")


def booth_multiply(multiplicand: int, multiplier: int, bits: int = 4) -> int:
    """Multiply two ``bits``-wide two's complement numbers with Booth's algorithm.

    The product is ``2 * bits`` wide and is returned as a signed integer.
    """
    if bits < 1:
        raise ValueError("bit width must be positive")
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    for operand in (multiplicand, multiplier):
        if not low <= operand <= high:
            raise ValueError(f"operands must lie between {low} and {high}")

    mask = (1 << bits) - 1
    sign_bit = 1 << (bits - 1)
    m = multiplicand & mask
    accumulator = 0
    q = multiplier & mask
    q_prev = 0
    for _ in range(bits):
        pair = (q & 1, q_prev)
        if pair == (1, 0):
            accumulator = (accumulator - m) & mask
        elif pair == (0, 1):
            accumulator = (accumulator + m) & mask
        q_prev = q & 1
        q = (q >> 1) | ((accumulator & 1) << (bits - 1))
        accumulator = (accumulator >> 1) | (accumulator & sign_bit)

    product = (accumulator << bits) | q
    if product & (1 << (2 * bits - 1)):
        product -= 1 << (2 * bits)
    return product


def _as_digits(value: str | int) -> int:
    if isinstance(value, int):
        if value < 0:
            raise ValueError("operands must be non-negative")
        return value
    if not value or not set(value) <= _DIGITS:
        raise ValueError(f"not a decimal number: {value!r}")
    return int(value)


def _karatsuba(x: int, y: int) -> int:
    if x < 10 or y < 10:
        return x * y
    half = max(len(str(x)), len(str(y))) // 2
    base = 10 ** half
    x_high, x_low = divmod(x, base)
    y_high, y_low = divmod(y, base)
    high = _karatsuba(x_high, y_high)
    low = _karatsuba(x_low, y_low)
    middle = _karatsuba(x_high + x_low, y_high + y_low) - high - low
    return high * base * base + middle * base + low


def karatsuba(a: str | int, b: str | int) -> str:
    """Multiply two non-negative decimal numbers given as digit strings.

    Leading zeros are accepted; the product has none (zero is ``"0"``).
    """
    return str(_karatsuba(_as_digits(a), _as_digits(b)))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="osalgos-arith", description="Multiply with Booth's or Karatsuba's algorithm."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    booth = commands.add_parser("booth", help="signed multiplication with Booth's algorithm")
    booth.add_argument("multiplicand", type=int, nargs="?", default=6)
    booth.add_argument("multiplier", type=int, nargs="?", default=-6)
    booth.add_argument("--bits", type=int, default=4)
    kara = commands.add_parser("karatsuba", help="multiply two decimal numbers")
    kara.add_argument("first")
    kara.add_argument("second")
    args = parser.parse_args(argv)

    try:
        if args.command == "booth":
            product = booth_multiply(args.multiplicand, args.multiplier, args.bits)
            width = 2 * args.bits
            binary = format(product & ((1 << width) - 1), f"0{width}b")
            print(f"Result = {binary} ({product})")
        else:
            print(f"The RESULT is:\t {karatsuba(args.first, args.second)}")
    except ValueError as exc:
        parser.error(str(exc))
    return 0