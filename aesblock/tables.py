"""Lookup tables for AES: S-boxes, GF(2^8) multiples and round constants.

The tables are derived at import time from arithmetic in GF(2^8) modulo the
AES polynomial x^8 + x^4 + x^3 + x + 1.
"""

_POLYNOMIAL = 0x11B


def _xtime(value: int) -> int:
    value <<= 1
    return value ^ _POLYNOMIAL if value & 0x100 else value


def _gf_mul(a: int, b: int) -> int:
    result = 0
    while b:
        if b & 1:
            result ^= a
        a = _xtime(a)
        b >>= 1
    return result


def _gf_pow(base: int, exponent: int) -> int:
    result = 1
    while exponent:
        if exponent & 1:
            result = _gf_mul(result, base)
        base = _gf_mul(base, base)
        exponent >>= 1
    return result


def _rotl8(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (8 - shift))) & 0xFF


def _sbox_entry(value: int) -> int:
    inverse = _gf_pow(value, 254) if value else 0
    return (
        inverse
        ^ _rotl8(inverse, 1)
        ^ _rotl8(inverse, 2)
        ^ _rotl8(inverse, 3)
        ^ _rotl8(inverse, 4)
        ^ 0x63
    )


def _multiples(factor: int) -> bytes:
    return bytes(_gf_mul(value, factor) for value in range(256))


def _invert(table: bytes) -> bytes:
    inverse = bytearray(256)
    for index, value in enumerate(table):
        inverse[value] = index
    return bytes(inverse)


SBOX = bytes(_sbox_entry(value) for value in range(256))
INV_SBOX = _invert(SBOX)

MUL2 = _multiples(2)
MUL3 = _multiples(3)
MUL9 = _multiples(9)
MUL11 = _multiples(11)
MUL13 = _multiples(13)
MUL14 = _multiples(14)

# RCON[0] is unused; RCON[i] = x^(i-1) in GF(2^8). Fifteen entries cover
# both the 128-bit and the 256-bit key schedules.
RCON = bytes([0x00]) + bytes(_gf_pow(2, power) for power in range(14))