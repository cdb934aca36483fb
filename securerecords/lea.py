"""A 128-bit ARX block cipher with an output-feedback stream mode."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from dataclasses import dataclass

BLOCK_SIZE = 16
ROUND_COUNT = 24

_MASK = 0xFFFFFFFF
_WORDS = struct.Struct("<4I")

DELTA = (
    0xC3EFE9DB, 0x44626B02, 0x79E27C8A, 0x78DF30EC,
    0x715EA49E, 0xC785DA0A, 0xE04EF22A, 0xE5C40957,
)


def rol(value: int, shift: int) -> int:
    """Rotate a 32-bit word left."""
    shift %= 32
    value &= _MASK
    return ((value << shift) | (value >> (32 - shift))) & _MASK


def ror(value: int, shift: int) -> int:
    """Rotate a 32-bit word right."""
    shift %= 32
    value &= _MASK
    return ((value >> shift) | (value << (32 - shift))) & _MASK


@dataclass(frozen=True)
class LeaKey:
    """An expanded key schedule: six 32-bit words per round."""

    round_keys: tuple[tuple[int, int, int, int, int, int], ...]

    @property
    def rounds(self) -> int:
        return len(self.round_keys)

    def encrypt_block(self, block: bytes) -> bytes:
        """Encrypt a single 16-byte block."""
        if len(block) != BLOCK_SIZE:
            raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(block)}")
        x = list(_WORDS.unpack(bytes(block)))
        last = self.rounds - 1
        for i, rk in enumerate(self.round_keys):
            x0 = rol((x[0] ^ rk[0]) + (x[1] ^ rk[1]), 9)
            x1 = ror((x[1] ^ rk[2]) + (x[2] ^ rk[3]), 5)
            x2 = ror((x[2] ^ rk[4]) + (x[3] ^ rk[5]), 3)
            x3 = rol(x0 ^ x1 ^ x2, 1)
            x = [x1, x2, x3, x0] if i < last else [x0, x1, x2, x3]
        return _WORDS.pack(*x)

    def _keystream(self, iv: bytes) -> Iterator[int]:
        block = bytes(iv)
        while True:
            block = self.encrypt_block(block)
            yield from block

    def ofb_encrypt(self, iv: bytes, data: bytes) -> bytes:
        """Encrypt ``data`` of any length in output-feedback mode."""
        if len(iv) != BLOCK_SIZE:
            raise ValueError(f"IV must be {BLOCK_SIZE} bytes, got {len(iv)}")
        return bytes(b ^ k for b, k in zip(bytes(data), self._keystream(iv)))

    def ofb_decrypt(self, iv: bytes, data: bytes) -> bytes:
        """Decrypt output-feedback data; the same operation as encryption."""
        return self.ofb_encrypt(iv, data)


def set_key(user_key: bytes) -> LeaKey:
    """Expand the first 16 bytes of ``user_key`` into a key schedule."""
    if len(user_key) < 16:
        raise ValueError(f"key must hold at least 16 bytes, got {len(user_key)}")
    t = list(_WORDS.unpack(bytes(user_key[:16])))
    schedule = []
    for i in range(ROUND_COUNT):
        delta = DELTA[i & 3]
        t[0] = rol(t[0] + rol(delta, i), 1)
        t[1] = rol(t[1] + rol(delta, i + 1), 3)
        t[2] = rol(t[2] + rol(delta, i + 2), 6)
        t[3] = rol(t[3] + rol(delta, i + 3), 11)
        schedule.append((t[0], t[1], t[2], t[3], t[1], t[3]))
    return LeaKey(tuple(schedule))