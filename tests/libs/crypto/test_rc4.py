from __future__ import annotations

import random
from array import array

import pytest
from Crypto.Cipher import ARC4 as RefARC4

from rc4kit.libs.crypto import RC4
from rc4kit.libs.crypto import rc4 as rc4_module

_rng = random.Random(20251019)


def randbytes(n: int) -> bytes:
    return bytes(_rng.randrange(0, 256) for _ in range(n))


# ===========================================================
# Published test vectors
# ===========================================================


@pytest.mark.parametrize(
    ("key", "plaintext", "ciphertext"),
    [
        (b"Key", b"Plaintext", "BBF316E8D940AF0AD3"),
        (b"Wiki", b"pedia", "1021BF0420"),
        (b"Secret", b"Attack at dawn", "45A01F645FC35B383552544B9BF5"),
    ],
)
def test_rc4_known_vectors(key, plaintext, ciphertext):
    expected = bytes.fromhex(ciphertext)

    assert RC4(key).crypt(plaintext) == expected
    assert RC4(key).crypt(expected) == plaintext


def test_rc4_apply_keystream_is_in_place():
    data = bytearray(b"Plaintext")
    RC4(b"Key").apply_keystream(data)
    assert data == bytes.fromhex("BBF316E8D940AF0AD3")


def test_rc4_apply_keystream_on_memoryview_slice():
    buf = bytearray(b"Plaintext....")
    RC4(b"Key").apply_keystream(memoryview(buf)[:9])
    assert buf[:9] == bytes.fromhex("BBF316E8D940AF0AD3")
    assert buf[9:] == b"...."


def test_rc4_next_byte_matches_keystream():
    a = RC4(b"Wiki")
    b = RC4(b"Wiki")
    assert bytes(a.next_byte() for _ in range(64)) == b.keystream(64)


# ===========================================================
# Matches reference implementation
# ===========================================================


@pytest.mark.parametrize("key_len", [5, 16, 40, 128, 256])
@pytest.mark.parametrize("data_len", [0, 1, 255, 256, 257, 1000])
def test_rc4_matches_pycryptodome(key_len, data_len):
    key = randbytes(key_len)
    pt = randbytes(data_len)

    assert RC4(key).encrypt(pt) == RefARC4.new(key).encrypt(pt)


def test_rc4_streaming_matches_pycryptodome():
    key = randbytes(16)
    pt = randbytes(600)

    mine = RC4(key)
    ref = RefARC4.new(key)
    for start, end in [(0, 7), (7, 256), (256, 300), (300, 600)]:
        assert mine.encrypt(pt[start:end]) == ref.encrypt(pt[start:end])


# ===========================================================
# Round trip and length
# ===========================================================


@pytest.mark.parametrize("n", [0, 1, 9, 256, 4097])
def test_rc4_round_trip(n):
    key = randbytes(32)
    pt = randbytes(n)

    ct = RC4(key).encrypt(pt)
    assert len(ct) == len(pt)
    assert RC4(key).decrypt(ct) == pt


def test_rc4_empty_input_does_not_advance_state():
    cipher = RC4(b"Key")
    before = cipher.permutation

    assert cipher.crypt(b"") == b""
    cipher.apply_keystream(bytearray())
    assert cipher.keystream(0) == b""

    assert cipher.cursors == (0, 0)
    assert cipher.permutation == before


# ===========================================================
# Continuous keystream across calls
# ===========================================================


def test_rc4_chunked_equals_one_shot():
    key = randbytes(24)
    pt = randbytes(1000)
    oneshot = RC4(key).crypt(pt)

    cipher = RC4(key)
    pieces = []
    pos = 0
    for size in [1, 0, 3, 250, 256, 17, 473]:
        pieces.append(cipher.crypt(pt[pos : pos + size]))
        pos += size
    assert pos == len(pt)
    assert b"".join(pieces) == oneshot


def test_rc4_keystream_continues_between_calls():
    cipher = RC4(b"Secret")
    first = cipher.keystream(10)
    second = cipher.keystream(10)

    assert first + second == RC4(b"Secret").keystream(20)
    assert first != second


# ===========================================================
# Key scheduling
# ===========================================================


def test_rc4_fresh_state_has_zero_cursors():
    assert RC4(b"\x00").cursors == (0, 0)


def test_rc4_long_key_is_truncated_to_256_bytes():
    key = randbytes(300)
    pt = randbytes(128)

    assert RC4(key).permutation == RC4(key[:256]).permutation
    assert RC4(key).crypt(pt) == RC4(key[:256]).crypt(pt)


@pytest.mark.parametrize("key", [b"\x01", b"Key", b"Wiki", randbytes(7), randbytes(100)])
def test_rc4_short_key_cycles(key):
    repeated = (key * (256 // len(key) + 1))[:256]
    assert RC4(key).permutation == RC4(repeated).permutation


def test_rc4_ksa_trace_for_short_key():
    key = b"Key"
    S = list(range(256))
    j = 0
    for i in range(256):
        j = (j + S[i] + key[i % 3]) % 256
        S[i], S[j] = S[j], S[i]

    assert RC4(key).permutation == bytes(S)


def test_rc4_permutation_stays_bijective():
    cipher = RC4(randbytes(13))
    assert sorted(cipher.permutation) == list(range(256))

    for _ in range(5):
        cipher.keystream(997)
        assert sorted(cipher.permutation) == list(range(256))


def test_rc4_cursors_wrap_modulo_256():
    cipher = RC4(b"Key")
    cipher.keystream(256)
    i, j = cipher.cursors
    assert i == 0
    assert 0 <= j <= 255


def test_rc4_key_accepts_bytearray_and_is_copied():
    key = bytearray(b"Key")
    cipher = RC4(key)
    key[:] = b"XYZ"
    assert cipher.crypt(b"Plaintext") == bytes.fromhex("BBF316E8D940AF0AD3")


# ===========================================================
# Validation
# ===========================================================


def test_rc4_rejects_empty_key():
    with pytest.raises(ValueError):
        RC4(b"")


def test_rc4_rejects_negative_keystream_length():
    with pytest.raises(ValueError):
        RC4(b"Key").keystream(-1)


def test_rc4_apply_keystream_rejects_immutable_buffer():
    with pytest.raises(TypeError):
        RC4(b"Key").apply_keystream(b"immutable")  # type: ignore[arg-type]


def test_rc4_read_only_buffer_leaves_state_untouched():
    cipher = RC4(b"Key")
    before = cipher.permutation

    with pytest.raises(TypeError):
        cipher.apply_keystream(memoryview(bytearray(b"data")).toreadonly())

    assert cipher.cursors == (0, 0)
    assert cipher.permutation == before


@pytest.mark.parametrize("key", [5, 0, "Key", None, [75, 101, 121]])
def test_rc4_rejects_non_bytes_key(key):
    with pytest.raises(TypeError):
        RC4(key)  # type: ignore[arg-type]


def test_rc4_accepts_memoryview_key():
    key = memoryview(b"xxKeyxx")[2:5]
    assert RC4(key).crypt(b"Plaintext") == bytes.fromhex("BBF316E8D940AF0AD3")


def test_rc4_multibyte_items_use_one_keystream_byte_per_byte():
    data = array("I", [0x01020304, 0xDEADBEEF, 0, 0xFFFFFFFF])
    raw = data.tobytes()

    cipher = RC4(b"Secret")
    cipher.apply_keystream(data)

    assert data.tobytes() == RC4(b"Secret").crypt(raw)
    assert cipher.cursors[0] == len(raw)


def test_rc4_new_factory():
    cipher = rc4_module.new(b"Wiki")
    assert isinstance(cipher, RC4)
    assert cipher.encrypt(b"pedia") == bytes.fromhex("1021BF0420")
