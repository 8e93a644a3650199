from __future__ import annotations

import struct
from typing import List, MutableSequence, Union

from .constants import BLOCK_SIZE, K, WORD_MASK

_BLOCK_WORDS = struct.Struct(">16L")

BytesLike = Union[bytes, bytearray, memoryview]

def rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & WORD_MASK

def ch(e: int, f: int, g: int) -> int:
    return (e & f) ^ (~e & g & WORD_MASK)

def maj(a: int, b: int, c: int) -> int:
    return (a & b) ^ (a & c) ^ (b & c)

def big_sigma0(x: int) -> int:
    return rotr(x, 2) ^ rotr(x, 13) ^ rotr(x, 22)

def big_sigma1(x: int) -> int:
    return rotr(x, 6) ^ rotr(x, 11) ^ rotr(x, 25)

def small_sigma0(x: int) -> int:
    return rotr(x, 7) ^ rotr(x, 18) ^ (x >> 3)

def small_sigma1(x: int) -> int:
    return rotr(x, 17) ^ rotr(x, 19) ^ (x >> 10)

def message_schedule(block: BytesLike) -> List[int]:
    """Expand one 64-byte block into the 64-word message schedule."""
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"block must be exactly {BLOCK_SIZE} bytes, got {len(block)}")
    w = list(_BLOCK_WORDS.unpack(block))
    for i in range(16, 64):
        w.append((small_sigma1(w[i - 2]) + w[i - 7] + small_sigma0(w[i - 15]) + w[i - 16]) & WORD_MASK)
    return w

def compress(state: MutableSequence[int], block: BytesLike) -> None:
    """Run one SHA-256 compression over `block`, updating the 8 `state` words in place."""
    w = message_schedule(block)
    a, b, c, d, e, f, g, h = state

    for i in range(64):
        t1 = (h + big_sigma1(e) + ch(e, f, g) + K[i] + w[i]) & WORD_MASK
        t2 = (big_sigma0(a) + maj(a, b, c)) & WORD_MASK
        h = g
        g = f
        f = e
        e = (d + t1) & WORD_MASK
        d = c
        c = b
        b = a
        a = (t1 + t2) & WORD_MASK

    for i, v in enumerate((a, b, c, d, e, f, g, h)):
        state[i] = (state[i] + v) & WORD_MASK
