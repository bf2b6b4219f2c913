"""AES round transformations on 16-byte states, plus message helpers."""

from .tables import INV_SBOX, MUL2, MUL3, MUL9, MUL11, MUL13, MUL14, SBOX

BLOCK_SIZE = 16

_SHIFT_ROWS = (0, 5, 10, 15, 4, 9, 14, 3, 8, 13, 2, 7, 12, 1, 6, 11)
_INV_SHIFT_ROWS = (0, 13, 10, 7, 4, 1, 14, 11, 8, 5, 2, 15, 12, 9, 6, 3)


def _as_block(state) -> bytes:
    block = bytes(state)
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"state must be {BLOCK_SIZE} bytes, got {len(block)}")
    return block


def _columns(block: bytes):
    return (block[start:start + 4] for start in range(0, BLOCK_SIZE, 4))


def add_round_key(state, round_key) -> bytes:
    """XOR the state with a 16-byte round key."""
    block = _as_block(state)
    key = _as_block(round_key)
    return bytes(a ^ b for a, b in zip(block, key))


def sub_bytes(state) -> bytes:
    """Replace every byte through the S-box."""
    return _as_block(state).translate(SBOX)


def inv_sub_bytes(state) -> bytes:
    """Replace every byte through the inverse S-box."""
    return _as_block(state).translate(INV_SBOX)


def shift_rows(state) -> bytes:
    """Rotate row r of the column-major state left by r positions."""
    block = _as_block(state)
    return bytes(block[index] for index in _SHIFT_ROWS)


def inv_shift_rows(state) -> bytes:
    """Rotate row r of the column-major state right by r positions."""
    block = _as_block(state)
    return bytes(block[index] for index in _INV_SHIFT_ROWS)


def mix_columns(state) -> bytes:
    """Multiply each column by the fixed MixColumns matrix."""
    out = bytearray()
    for a0, a1, a2, a3 in _columns(_as_block(state)):
        out.extend((
            MUL2[a0] ^ MUL3[a1] ^ a2 ^ a3,
            a0 ^ MUL2[a1] ^ MUL3[a2] ^ a3,
            a0 ^ a1 ^ MUL2[a2] ^ MUL3[a3],
            MUL3[a0] ^ a1 ^ a2 ^ MUL2[a3],
        ))
    return bytes(out)


def inv_mix_columns(state) -> bytes:
    """Multiply each column by the inverse MixColumns matrix."""
    out = bytearray()
    for a0, a1, a2, a3 in _columns(_as_block(state)):
        out.extend((
            MUL14[a0] ^ MUL11[a1] ^ MUL13[a2] ^ MUL9[a3],
            MUL9[a0] ^ MUL14[a1] ^ MUL11[a2] ^ MUL13[a3],
            MUL13[a0] ^ MUL9[a1] ^ MUL14[a2] ^ MUL11[a3],
            MUL11[a0] ^ MUL13[a1] ^ MUL9[a2] ^ MUL14[a3],
        ))
    return bytes(out)


def zero_pad(message) -> bytes:
    """Pad with zero bytes up to a multiple of the block size."""
    data = bytes(message)
    return data + bytes(-len(data) % BLOCK_SIZE)


def strip_at_nul(data) -> bytes:
    """Return the bytes before the first zero byte."""
    return bytes(data).split(b"\x00", 1)[0]


def format_hex(data) -> str:
    """Format bytes as upper-case hex pairs, sixteen to a line."""
    parts = []
    for count, byte in enumerate(bytes(data), start=1):
        parts.append(f"{byte:02X} ")
        if count % BLOCK_SIZE == 0:
            parts.append("\n")
    return "".join(parts)