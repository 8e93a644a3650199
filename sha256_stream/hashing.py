from __future__ import annotations

import logging
import string
from pathlib import Path
from typing import Iterable, Optional

from .config import load_config
from .digest import init

log = logging.getLogger("sha256-stream")

_HEX_DIGITS = frozenset(string.hexdigits)

def sha256_bytes(data: bytes) -> str:
    d = init()
    d.write(data)
    return d.hexdigest()

def sha256_text(text: str) -> str:
    return sha256_bytes(text.encode("utf-8", errors="ignore"))

def sha256_chunks(chunks: Iterable[bytes]) -> str:
    d = init()
    for chunk in chunks:
        d.write(chunk)
    return d.hexdigest()

def sha256_file(path: Path, chunk_size: Optional[int] = None) -> str:
    if chunk_size is None:
        chunk_size = load_config().file_chunk_size
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    d = init()
    total = 0
    with Path(path).open("rb") as f:
        while True:
            b = f.read(chunk_size)
            if not b:
                break
            d.write(b)
            total += len(b)
    digest = d.hexdigest()
    log.debug("hashed %s (%d bytes): %s", path, total, digest)
    return digest

def verify_hash_format(hash_string: str) -> bool:
    """True if `hash_string` looks like a lowercase or uppercase 64-char hex SHA-256 digest."""
    if len(hash_string) != 64:
        return False
    return all(c in _HEX_DIGITS for c in hash_string)
