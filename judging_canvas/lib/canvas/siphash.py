"""SipHash, the keyed 64-bit hash behind canvas node ids.

Canvas ids use SipHash-1-3 with an all-zero key. The round counts and key
are parameters so the standard SipHash-2-4 test vectors can check the code.
"""

from __future__ import annotations

_MASK = 0xFFFFFFFFFFFFFFFF
ZERO_KEY = bytes(16)


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (64 - shift))) & _MASK


def _sip_round(v0: int, v1: int, v2: int, v3: int) -> tuple[int, int, int, int]:
    v0 = (v0 + v1) & _MASK
    v1 = _rotl(v1, 13) ^ v0
    v0 = _rotl(v0, 32)
    v2 = (v2 + v3) & _MASK
    v3 = _rotl(v3, 16) ^ v2
    v0 = (v0 + v3) & _MASK
    v3 = _rotl(v3, 21) ^ v0
    v2 = (v2 + v1) & _MASK
    v1 = _rotl(v1, 17) ^ v2
    v2 = _rotl(v2, 32)
    return v0, v1, v2, v3


def siphash(
    data: bytes,
    key: bytes = ZERO_KEY,
    c_rounds: int = 2,
    d_rounds: int = 4,
) -> int:
    """Compute SipHash-c-d of ``data`` under a 16-byte ``key``.

    Args:
        data: Message bytes.
        key: 128-bit key (two little-endian 64-bit words).
        c_rounds: Compression rounds per message block.
        d_rounds: Finalization rounds.

    Returns:
        The 64-bit hash as a non-negative int.

    Raises:
        ValueError: If the key is not exactly 16 bytes.
    """
    if len(key) != 16:
        raise ValueError(f"SipHash key must be 16 bytes, got {len(key)}")

    k0 = int.from_bytes(key[:8], "little")
    k1 = int.from_bytes(key[8:], "little")

    v0 = k0 ^ 0x736F6D6570736575
    v1 = k1 ^ 0x646F72616E646F6D
    v2 = k0 ^ 0x6C7967656E657261
    v3 = k1 ^ 0x7465646279746573

    length = len(data)
    tail_start = length - (length % 8)

    for offset in range(0, tail_start, 8):
        m = int.from_bytes(data[offset:offset + 8], "little")
        v3 ^= m
        for _ in range(c_rounds):
            v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
        v0 ^= m

    # Last block: remaining bytes, with the message length in the top byte.
    b = ((length & 0xFF) << 56) | int.from_bytes(data[tail_start:], "little")
    v3 ^= b
    for _ in range(c_rounds):
        v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
    v0 ^= b

    v2 ^= 0xFF
    for _ in range(d_rounds):
        v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)

    return v0 ^ v1 ^ v2 ^ v3


def siphash13(data: bytes, key: bytes = ZERO_KEY) -> int:
    """SipHash-1-3 of ``data``, zero key by default."""
    return siphash(data, key, c_rounds=1, d_rounds=3)
