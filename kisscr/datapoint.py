"""A single measured point with statistical and systematic errors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DataPoint:
    """A point (x, y) with asymmetric statistical and systematic errors on y."""

    x: float
    y: float
    stat_low: float = 0.0
    stat_high: float = 0.0
    sys_low: float = 0.0
    sys_high: float = 0.0

    def values(self) -> tuple[float, float, float, float, float, float]:
        return (self.x, self.y, self.stat_low, self.stat_high, self.sys_low, self.sys_high)

    def format(self) -> str:
        """Six columns in scientific notation with three decimals, space-terminated."""
        return "".join(f"{value:.3e} " for value in self.values())

    def __str__(self) -> str:
        return self.format()