from __future__ import annotations

state_size = 256


class RC4:
    """RC4 stream cipher state.

    The keystream is continuous across calls: every call to
    :meth:`next_byte`, :meth:`apply_keystream`, :meth:`keystream` or
    :meth:`crypt` advances the same internal state. Build a new instance
    to restart the stream.

    Note:
        RC4 is cryptographically weak. The algorithm is reproduced as-is,
        with no key derivation and no keystream dropping.
    """

    def __init__(self, key: bytes) -> None:
        """
        Args:
            key: RC4 key bytes (must not be empty). Only the first 256 bytes
                are used; shorter keys are cycled.

        Raises:
            TypeError: If ``key`` is not a bytes-like object.
            ValueError: If ``key`` is empty.
        """
        key = bytes(memoryview(key))
        if not key:
            raise ValueError("Key must not be empty")

        self._S = self._rc4_init(key)
        self._i = 0
        self._j = 0

    @property
    def permutation(self) -> bytes:
        """Snapshot of the current 256-byte permutation."""
        return bytes(self._S)

    @property
    def cursors(self) -> tuple[int, int]:
        """Current ``(i, j)`` PRGA counters."""
        return self._i, self._j

    def next_byte(self) -> int:
        """Advance the state and return one keystream byte.

        This is one step of the RC4 Pseudo-Random Generation Algorithm (PRGA).
        """
        S = self._S
        i = (self._i + 1) & 0xFF
        j = (self._j + S[i]) & 0xFF
        S[i], S[j] = S[j], S[i]
        self._i = i
        self._j = j
        return S[(S[i] + S[j]) & 0xFF]

    def apply_keystream(self, buf: bytearray | memoryview) -> None:
        """XOR the keystream into ``buf`` in place.

        Consumes one keystream byte per byte of ``buf``, so splitting data
        across several calls gives the same result as a single call.

        Args:
            buf: Writable contiguous buffer, either plaintext or ciphertext.
                Multi-byte item formats are processed byte by byte.

        Raises:
            TypeError: If ``buf`` is read-only or not contiguous.
        """
        S = self._S
        i = self._i
        j = self._j
        with memoryview(buf).cast("B") as view:
            if view.readonly:
                raise TypeError("Buffer must be writable")
            for idx in range(len(view)):
                i = (i + 1) & 0xFF
                j = (j + S[i]) & 0xFF
                S[i], S[j] = S[j], S[i]
                view[idx] ^= S[(S[i] + S[j]) & 0xFF]
        self._i = i
        self._j = j

    def keystream(self, length: int) -> bytes:
        """Return the next ``length`` keystream bytes.

        Args:
            length: Number of bytes to generate. Must not be negative.

        Raises:
            ValueError: If ``length`` is negative.
        """
        if length < 0:
            raise ValueError("Keystream length must not be negative")
        out = bytearray(length)
        self.apply_keystream(out)
        return bytes(out)

    def crypt(self, data: bytes) -> bytes:
        """Encrypts/Decrypts data

        Args:
            data: Input bytes, either plaintext or ciphertext.

        Returns:
            Output bytes after XOR with the RC4 keystream.
        """
        out = bytearray(data)
        self.apply_keystream(out)
        return bytes(out)

    encrypt = crypt
    decrypt = crypt

    @staticmethod
    def _rc4_init(key: bytes) -> bytearray:
        """Perform the RC4 Key-Scheduling Algorithm (KSA)."""
        S = bytearray(range(state_size))
        j = 0
        klen = min(len(key), state_size)
        for i in range(state_size):
            j = (j + S[i] + key[i % klen]) & 0xFF
            S[i], S[j] = S[j], S[i]
        return S


def new(key: bytes) -> RC4:
    """Create a new RC4 cipher object.

    Args:
        key: Secret key bytes. At least one byte.

    Returns:
        A freshly keyed :class:`RC4` instance.
    """
    return RC4(key)
