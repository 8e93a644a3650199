from __future__ import annotations

import logging
import struct
from dataclasses import dataclass, field
from typing import List

from .constants import BLOCK_SIZE, DIGEST_SIZE, IV, LENGTH_MASK
from .transform import BytesLike, compress

log = logging.getLogger("sha256-stream")

_LENGTH_FIELD = struct.Struct(">Q")
_STATE_WORDS = struct.Struct(">8L")

class InvalidStateError(RuntimeError):
    pass

def padding_for(curlen: int, bit_length: int) -> bytes:
    """
    Padding appended at finalization: 0x80, zero bytes up to offset 56 of a
    block, then the big-endian 64-bit message length. When 0x80 lands at or
    past offset 56 the zeros run into one extra block.
    """
    zeros = (BLOCK_SIZE - 8 - 1 - curlen) % BLOCK_SIZE
    return b"\x80" + b"\x00" * zeros + _LENGTH_FIELD.pack(bit_length & LENGTH_MASK)

@dataclass
class Sha256Digest:
    """
    Incremental SHA-256 state. Create with init() and feed it with write().

    close() and hexdigest() pad and finalize the state, so either can be
    called once per message; after that write/close/hexdigest raise
    InvalidStateError until reset(). Keep the returned bytes if the digest
    is needed again.

    write() takes any C-contiguous bytes-like object. str, non-buffer
    objects and non-contiguous memoryviews raise TypeError.
    """

    state: List[int] = field(init=False, default_factory=lambda: list(IV))
    buffer: bytearray = field(init=False, default_factory=lambda: bytearray(BLOCK_SIZE))
    curlen: int = field(init=False, default=0)
    length: int = field(init=False, default=0)
    finalized: bool = field(init=False, default=False)

    name = "sha256"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def reset(self) -> None:
        self.state[:] = IV
        self.buffer[:] = bytes(BLOCK_SIZE)
        self.curlen = 0
        self.length = 0
        self.finalized = False

    def _check_open(self, op: str) -> None:
        if self.finalized:
            raise InvalidStateError(f"cannot {op}: digest already finalized (call reset() first)")

    def write(self, data: BytesLike) -> None:
        self._check_open("write")
        if isinstance(data, str):
            raise TypeError("strings must be encoded before hashing")
        mv = memoryview(data).cast("B")
        n = len(mv)
        self.length = (self.length + n * 8) & LENGTH_MASK

        pos = 0
        while pos < n:
            if self.curlen == 0 and n - pos >= BLOCK_SIZE:
                compress(self.state, mv[pos:pos + BLOCK_SIZE])
                pos += BLOCK_SIZE
                continue
            take = min(BLOCK_SIZE - self.curlen, n - pos)
            self.buffer[self.curlen:self.curlen + take] = mv[pos:pos + take]
            self.curlen += take
            pos += take
            if self.curlen == BLOCK_SIZE:
                compress(self.state, self.buffer)
                self.curlen = 0

    update = write

    def close(self) -> bytes:
        self._check_open("close")
        bit_length = self.length
        self.write(padding_for(self.curlen, bit_length))
        # Padding is not part of the message.
        self.length = bit_length
        self.finalized = True
        log.debug("sha256 finalized after %d bits", bit_length)
        return _STATE_WORDS.pack(*self.state)

    def hexdigest(self) -> str:
        return self.close().hex()

def init() -> Sha256Digest:
    return Sha256Digest()

def write(digest: Sha256Digest, data: BytesLike) -> None:
    digest.write(data)

def close(digest: Sha256Digest) -> bytes:
    return digest.close()

def sha256(data: BytesLike = b"") -> bytes:
    d = init()
    d.write(data)
    return d.close()
