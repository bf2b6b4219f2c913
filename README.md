# aesblock

A small, readable implementation of the AES block cipher with 128-bit and
256-bit keys. It uses lookup tables and works on one 16-byte block at a time.
It pads messages with zero bytes. It is meant for study and experiments.

## Installation

```
pip install .
```

To install with the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from aesblock import aes128, aes256

key128 = bytes(range(1, 17))   # 16 bytes
key256 = bytes(range(1, 33))   # 32 bytes

block = b"sixteen byte blk"
sealed = aes128.encrypt_block(block, key128)
assert aes128.decrypt_block(sealed, key128) == block

ciphertext = aes256.encrypt_message("This is a message we will encrypt with AES-256!", key256)
assert aes256.decrypt_message(ciphertext, key256) == b"This is a message we will encrypt with AES-256!"
```

`aesblock.aes128` and `aesblock.aes256` provide the same functions. All of
them return `bytes`.

- `expand_key(key)` returns the whole key schedule. For AES-128 this is 176 bytes, or 11 round keys. For AES-256 it is 240 bytes, or 15 round keys.
- `encrypt_block(block, key)` and `decrypt_block(block, key)` process one 16-byte block.
- `encrypt_message(message, key)` accepts `str` or bytes. A `str` is first encoded as UTF-8. The message is padded with zero bytes to a multiple of 16, and each block is encrypted on its own.
- `decrypt_message(data, key)` decrypts each block and returns the bytes that come before the first zero byte.

A `ValueError` is raised in these cases:

- the key is the wrong length for the module: 16 bytes for AES-128, 32 bytes for AES-256;
- a block or state is not 16 bytes;
- the ciphertext passed to `decrypt_message` is not a multiple of 16 bytes.

Each module also has the fixed demonstration values that its command uses:
`SAMPLE_KEY`, `SAMPLE_MESSAGE` and `SAMPLE_CIPHERTEXT`.

`aesblock.rounds` holds the round steps. Each one takes a 16-byte state and returns a new one:

- `add_round_key(state, round_key)`
- `sub_bytes`
- `inv_sub_bytes`
- `shift_rows`
- `inv_shift_rows`
- `mix_columns`
- `inv_mix_columns`

It also has these helpers:

- `zero_pad(message)` pads data with zero bytes up to a multiple of 16.
- `strip_at_nul(data)` cuts data off at the first zero byte.
- `format_hex(data)` returns the bytes as a string of upper-case hex pairs. Each pair is followed by a space, and there is a line break after every sixteen bytes.

`aesblock.tables` holds the lookup tables as `bytes`:

- `SBOX` and `INV_SBOX`
- `MUL2`, `MUL3`, `MUL9`, `MUL11`, `MUL13` and `MUL14`, the multiples in GF(2^8)
- `RCON`, the round constants

`aesblock.hexlist.to_byte_list(text)` turns space-separated tokens such as
`B6 4B 27` into the list form `0xB6, 0x4B, 0x27`.

## Commands

```
aesblock-aes128 [CHOICE]
aesblock-aes256 [CHOICE]
```

Each command prints a menu and reads a choice. The choice is taken from the
first argument if one is given, otherwise from standard input.

- `1` prints the hex ciphertext of the built-in sample message.
- `2` prints the plaintext recovered from the built-in sample ciphertext.

Both choices use the fixed demonstration key, made of the bytes 1, 2, 3 and so on. For any other choice, `aesblock-aes128` prints `Invalid choice!` and `aesblock-aes256` prints nothing more.

```
aesblock-hexlist [TOKENS...]
```

This command reads one line from standard input and prints it as a `0x..` list. If arguments are given, it joins them with spaces and uses that line instead.

```
$ echo "B6 4B 27 BB" | aesblock-hexlist
0xB6, 0x4B, 0x27, 0xBB
```

## What it does not do

This is not a hardened cryptographic library. It has:

- no chaining mode (each block is encrypted independently),
- no authentication,
- no AES-192,
- no protection against timing or other side channels.

The commands only work on their built-in sample message, key and ciphertext. They do not read your own keys or files.

Zero padding means that `decrypt_message` cannot give back a plaintext that contains zero bytes: the output stops at the first one.