import pytest

from aesblock import aes256

SAMPLE_KEY = bytes(range(1, 33))
SAMPLE_MESSAGE = "This is a message we will encrypt with AES-256!"
SAMPLE_CIPHERTEXT = bytes.fromhex(
    "756BDD52E418360D2DA6906498615979"
    "387F695641CE2D9FB6AC262275646D6E"
    "ACC0C3F2AF12AA824EE30A5554B94DD2"
)


def test_encrypt_sample_message():
    assert aes256.encrypt_message(SAMPLE_MESSAGE, SAMPLE_KEY) == SAMPLE_CIPHERTEXT


def test_decrypt_sample_ciphertext():
    assert aes256.decrypt_message(SAMPLE_CIPHERTEXT, SAMPLE_KEY) == SAMPLE_MESSAGE.encode()


def test_standard_vector():
    fips_key = bytes(range(32))
    plaintext = bytes.fromhex("00112233445566778899aabbccddeeff")
    expected = bytes.fromhex("8ea2b7ca516745bfeafc49904b496089")
    assert aes256.encrypt_block(plaintext, fips_key) == expected
    assert aes256.decrypt_block(expected, fips_key) == plaintext


def test_expand_key_length_and_prefix():
    schedule = aes256.expand_key(SAMPLE_KEY)
    assert len(schedule) == 240
    assert schedule[:32] == SAMPLE_KEY


@pytest.mark.parametrize("block", [bytes(16), bytes(range(16)), b"\xff" * 16, b"sixteen byte blk"])
def test_block_round_trip(block):
    assert aes256.decrypt_block(aes256.encrypt_block(block, SAMPLE_KEY), SAMPLE_KEY) == block


def test_message_round_trip_bytes():
    message = b"abc" * 11
    ciphertext = aes256.encrypt_message(message, SAMPLE_KEY)
    assert len(ciphertext) % 16 == 0
    assert len(ciphertext) >= len(message)
    assert aes256.decrypt_message(ciphertext, SAMPLE_KEY) == message


def test_first_block_matches_block_encryption():
    first = SAMPLE_MESSAGE.encode()[:16]
    assert aes256.encrypt_block(first, SAMPLE_KEY) == SAMPLE_CIPHERTEXT[:16]


def test_different_keys_give_different_ciphertext():
    other_key = bytes(range(2, 34))
    assert aes256.encrypt_message(SAMPLE_MESSAGE, other_key) != SAMPLE_CIPHERTEXT
    assert aes256.decrypt_message(aes256.encrypt_message(SAMPLE_MESSAGE, other_key), other_key) == SAMPLE_MESSAGE.encode()


@pytest.mark.parametrize("bad_key", [bytes(16), bytes(31), bytes(33)])
def test_wrong_key_length_raises(bad_key):
    with pytest.raises(ValueError):
        aes256.expand_key(bad_key)
    with pytest.raises(ValueError):
        aes256.encrypt_block(bytes(16), bad_key)


def test_wrong_block_length_raises():
    with pytest.raises(ValueError):
        aes256.encrypt_block(bytes(15), SAMPLE_KEY)


def test_decrypt_message_rejects_partial_block():
    with pytest.raises(ValueError):
        aes256.decrypt_message(SAMPLE_CIPHERTEXT[:-1], SAMPLE_KEY)


def test_main_encrypt(capsys):
    assert aes256.main(["1"]) == 0
    out = capsys.readouterr().out
    assert "Encrypted hex:" in out
    assert "75 6B DD 52 E4 18 36 0D 2D A6 90 64 98 61 59 79 \n" in out
    assert "AC C0 C3 F2 AF 12 AA 82 4E E3 0A 55 54 B9 4D D2 \n" in out


def test_main_decrypt(capsys):
    assert aes256.main(["2"]) == 0
    out = capsys.readouterr().out
    assert out.endswith("Decrypted message:\n" + SAMPLE_MESSAGE + "\n")


def test_main_other_choice_prints_only_menu(capsys):
    assert aes256.main(["7"]) == 0
    out = capsys.readouterr().out
    assert "Enter your choice: " in out
    assert "Encrypted" not in out
    assert "Decrypted" not in out