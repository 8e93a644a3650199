from __future__ import annotations

from dataclasses import dataclass
import logging
import os

@dataclass(frozen=True)
class Config:
    # Read size used when streaming files through the digest.
    file_chunk_size: int

    # Logging
    log_level: str

def _positive_int(name: str, default: str) -> int:
    raw = os.getenv(name, default).strip()
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value

def load_config() -> Config:
    return Config(
        file_chunk_size=_positive_int("SHA256_FILE_CHUNK_SIZE", str(1024 * 1024)),
        log_level=os.getenv("SHA256_LOG_LEVEL", "WARNING").strip().upper(),
    )

def configure_logging(cfg: Config) -> None:
    """Apply cfg.log_level to the root logger. Not called by the library itself;
    the embedding application calls it once at startup."""
    logging.basicConfig(level=getattr(logging, cfg.log_level, logging.WARNING))
