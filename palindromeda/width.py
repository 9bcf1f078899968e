"""Integer-width configuration.

The engine models a fixed-width unsigned integer. ``IntWidth`` names the
width; ``DEFAULT_WIDTH`` is read once from ``PALINDROMEDA_INT_BITS`` at import
(64 bits when unset).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ENV_INT_BITS = "PALINDROMEDA_INT_BITS"
MIN_BITS: int = 4
MAX_BITS: int = 512


@dataclass(frozen=True)
class IntWidth:
    """Unsigned integer width in bits."""

    bits: int

    def __post_init__(self) -> None:
        if not isinstance(self.bits, int) or isinstance(self.bits, bool):
            raise TypeError("bits must be an int")
        if not (MIN_BITS <= self.bits <= MAX_BITS):
            raise ValueError(f"bits must be in [{MIN_BITS}, {MAX_BITS}]: {self.bits}")

    @property
    def max_value(self) -> int:
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return 0 <= value <= self.max_value


U8 = IntWidth(8)
U16 = IntWidth(16)
U32 = IntWidth(32)
U64 = IntWidth(64)
U128 = IntWidth(128)


def _env_int(name: str, default: int, *, lo: int, hi: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return int(default)
    try:
        v = int(raw.strip())
    except ValueError:
        logger.warning("ignoring unparsable %s=%r, using %d", name, raw, default)
        return int(default)
    if v < lo:
        return int(lo)
    if v > hi:
        return int(hi)
    return int(v)


def width_from_env(default: IntWidth = U64) -> IntWidth:
    """Build an ``IntWidth`` from ``PALINDROMEDA_INT_BITS`` (clamped to the valid range)."""
    return IntWidth(_env_int(ENV_INT_BITS, default.bits, lo=MIN_BITS, hi=MAX_BITS))


DEFAULT_WIDTH: IntWidth = width_from_env()
