"""MD5 message digest."""

from __future__ import annotations

import struct

_MASK = 0xFFFFFFFF
_BLOCK = 64

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_CONSTANTS = (
    # round 1
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    # round 2
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    # round 3
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    # round 4
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_SHIFTS = (
    (7, 12, 17, 22),
    (5, 9, 14, 20),
    (4, 11, 16, 23),
    (6, 10, 15, 21),
)


def _rotate_left(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


def _round_function(step: int, b: int, c: int, d: int) -> tuple[int, int]:
    """Return the mixing value and the message word index for a step."""
    stage, i = divmod(step, 16)
    if stage == 0:
        return (b & c) | (~b & d), i
    if stage == 1:
        return (b & d) | (c & ~d), (5 * i + 1) % 16
    if stage == 2:
        return b ^ c ^ d, (3 * i + 5) % 16
    return c ^ (b | (~d & _MASK)), (7 * i) % 16


class Md5:
    """Incremental MD5 hashing."""

    def __init__(self) -> None:
        self._state = list(_INITIAL_STATE)
        self._buffer = bytearray()
        self._count = 0
        self._digest: bytes | None = None

    def _transform(self, block: bytes) -> None:
        words = struct.unpack("<16I", block)
        a, b, c, d = self._state
        for step in range(64):
            f, g = _round_function(step, b, c, d)
            shift = _SHIFTS[step // 16][step % 4]
            total = (a + (f & _MASK) + words[g] + _CONSTANTS[step]) & _MASK
            a, d, c, b = d, c, b, (b + _rotate_left(total, shift)) & _MASK
        self._state = [(s + v) & _MASK for s, v in zip(self._state, (a, b, c, d))]

    def update(self, data: bytes | bytearray | memoryview) -> "Md5":
        """Feed more bytes into the digest."""
        if self._digest is not None:
            raise ValueError("digest already finalized")
        data = bytes(data)
        self._count += len(data)
        self._buffer.extend(data)
        full = len(self._buffer) - len(self._buffer) % _BLOCK
        for start in range(0, full, _BLOCK):
            self._transform(bytes(self._buffer[start:start + _BLOCK]))
        del self._buffer[:full]
        return self

    def finalize(self) -> bytes:
        """Pad the message and compute the digest; further updates are refused."""
        if self._digest is not None:
            return self._digest
        bit_length = (self._count * 8) & 0xFFFFFFFFFFFFFFFF
        index = self._count % _BLOCK
        pad_length = 56 - index if index < 56 else 120 - index
        self.update(b"\x80" + b"\0" * (pad_length - 1))
        self.update(struct.pack("<Q", bit_length))
        self._digest = struct.pack("<4I", *self._state)
        self._state = [0, 0, 0, 0]
        self._buffer.clear()
        return self._digest

    def digest(self) -> bytes:
        """The 16-byte digest, finalizing first if needed."""
        return self.finalize()

    def hexdigest(self) -> str:
        """The digest as 32 lower-case hexadecimal digits."""
        return print_md5(self.digest())


def print_md5(digest: bytes) -> str:
    """Format a 16-byte digest as lower-case hexadecimal."""
    if len(digest) != 16:
        raise ValueError(f"an MD5 digest has 16 bytes, not {len(digest)}")
    return "".join(f"{byte:02x}" for byte in digest)


def md5_string(text: str) -> str:
    """Hex MD5 of a string's UTF-8 bytes, up to its first NUL character."""
    data = text.split("\0", 1)[0].encode("utf-8")
    return Md5().update(data).hexdigest()