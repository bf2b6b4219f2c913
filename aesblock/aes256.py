"""AES-256 block encryption and decryption with a zero-padded message mode."""

import sys

from .rounds import (
    BLOCK_SIZE,
    add_round_key,
    format_hex,
    inv_mix_columns,
    inv_shift_rows,
    inv_sub_bytes,
    mix_columns,
    shift_rows,
    strip_at_nul,
    sub_bytes,
    zero_pad,
)
from .tables import RCON, SBOX

KEY_SIZE = 32
ROUNDS = 14
EXPANDED_KEY_SIZE = BLOCK_SIZE * (ROUNDS + 1)

SAMPLE_KEY = bytes(range(1, 33))
SAMPLE_MESSAGE = "This is a message we will encrypt with AES-256!"
SAMPLE_CIPHERTEXT = bytes.fromhex(
    "756BDD52E418360D2DA6906498615979"
    "387F695641CE2D9FB6AC262275646D6E"
    "ACC0C3F2AF12AA824EE30A5554B94DD2"
)


def _check_key(key) -> bytes:
    key = bytes(key)
    if len(key) != KEY_SIZE:
        raise ValueError(f"AES-256 key must be {KEY_SIZE} bytes, got {len(key)}")
    return key


def _sub_word(word) -> bytearray:
    return bytearray(SBOX[b] for b in word)


def expand_key(key) -> bytes:
    """Expand a 32-byte key into the 240-byte AES-256 key schedule."""
    expanded = bytearray(_check_key(key))
    rcon_iteration = 1
    while len(expanded) < EXPANDED_KEY_SIZE:
        temp = expanded[-4:]
        position = len(expanded) % KEY_SIZE
        if position == 0:
            temp = _sub_word(temp[1:] + temp[:1])
            temp[0] ^= RCON[rcon_iteration]
            rcon_iteration += 1
        elif position == 16:
            temp = _sub_word(temp)
        previous = expanded[-KEY_SIZE:-KEY_SIZE + 4]
        expanded.extend(a ^ b for a, b in zip(previous, temp))
    return bytes(expanded)


def _round_keys(key) -> list[bytes]:
    schedule = expand_key(key)
    return [schedule[start:start + BLOCK_SIZE] for start in range(0, EXPANDED_KEY_SIZE, BLOCK_SIZE)]


def _encrypt(block, round_keys: list[bytes]) -> bytes:
    state = add_round_key(block, round_keys[0])
    for round_key in round_keys[1:-1]:
        state = add_round_key(mix_columns(shift_rows(sub_bytes(state))), round_key)
    return add_round_key(shift_rows(sub_bytes(state)), round_keys[-1])


def _decrypt(block, round_keys: list[bytes]) -> bytes:
    state = add_round_key(block, round_keys[-1])
    for round_key in reversed(round_keys[1:-1]):
        state = inv_mix_columns(add_round_key(inv_sub_bytes(inv_shift_rows(state)), round_key))
    return add_round_key(inv_sub_bytes(inv_shift_rows(state)), round_keys[0])


def _blocks(data: bytes):
    return (data[start:start + BLOCK_SIZE] for start in range(0, len(data), BLOCK_SIZE))


def encrypt_block(block, key) -> bytes:
    """Encrypt one 16-byte block with a 32-byte key."""
    return _encrypt(block, _round_keys(key))


def decrypt_block(block, key) -> bytes:
    """Decrypt one 16-byte block with a 32-byte key."""
    return _decrypt(block, _round_keys(key))


def encrypt_message(message, key) -> bytes:
    """Zero-pad a message to whole blocks and encrypt each block independently."""
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    round_keys = _round_keys(key)
    return b"".join(_encrypt(block, round_keys) for block in _blocks(zero_pad(data)))


def decrypt_message(data, key) -> bytes:
    """Decrypt whole blocks and return the plaintext up to the first zero byte."""
    data = bytes(data)
    if len(data) % BLOCK_SIZE:
        raise ValueError(f"ciphertext length must be a multiple of {BLOCK_SIZE}, got {len(data)}")
    round_keys = _round_keys(key)
    return strip_at_nul(b"".join(_decrypt(block, round_keys) for block in _blocks(data)))


def _parse_choice(raw: str) -> int | None:
    fields = raw.split()
    if not fields:
        return None
    try:
        return int(fields[0])
    except ValueError:
        return None


def main(argv=None) -> int:
    """Encrypt the sample message or decrypt the sample ciphertext, as chosen."""
    args = sys.argv[1:] if argv is None else list(argv)
    print("Choose an option: ")
    print("1. Encrypt")
    print("2. Decrypt")
    print("Enter your choice: ", end="", flush=True)
    if args:
        raw = args[0]
        print()
    else:
        try:
            raw = input()
        except EOFError:
            raw = ""

    choice = _parse_choice(raw)
    if choice == 1:
        print("Encrypted hex:")
        print(format_hex(encrypt_message(SAMPLE_MESSAGE, SAMPLE_KEY)), end="")
    elif choice == 2:
        print("Decrypted message:")
        print(decrypt_message(SAMPLE_CIPHERTEXT, SAMPLE_KEY).decode("latin-1"))
    return 0


if __name__ == "__main__":
    sys.exit(main())