"""Representative energy of a bin and parsing of delimited number lines."""

from __future__ import annotations

import math
import re

from kisscr.enums import EnergyMode

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def mean_energy_lafferty(e_min: float, e_max: float, slope: float) -> float:
    """Bin centre for a spectrum E^-slope after Lafferty and Wyatt (1995)."""
    x_ratio = e_min / (e_max - e_min)
    integral = x_ratio / (slope - 1.0) * (1.0 - (e_max / e_min) ** (1.0 - slope))
    return e_min * integral ** (-1.0 / slope)


def mean_energy_power_law(e_min: float, e_max: float, slope: float) -> float:
    """Flux-weighted mean energy in the bin for a spectrum E^-slope."""
    numerator = e_max ** (2.0 - slope) - e_min ** (2.0 - slope)
    denominator = e_max ** (1.0 - slope) - e_min ** (1.0 - slope)
    return (slope - 1.0) / (slope - 2.0) * numerator / denominator


def mean_energy_geometrical(e_min: float, e_max: float) -> float:
    """Geometrical mean of the bin edges."""
    return math.sqrt(e_min * e_max)


def mean_energy(e_min: float, e_max: float, mode: EnergyMode) -> float:
    """Representative energy of the bin [e_min, e_max] for the given mode.

    A bin whose upper edge does not exceed the lower one yields the lower edge.
    """
    if e_max <= e_min:
        return e_min
    if mode is EnergyMode.GEOMETRICAL:
        return mean_energy_geometrical(e_min, e_max)
    if mode is EnergyMode.PL2_7:
        return mean_energy_power_law(e_min, e_max, 2.7)
    if mode is EnergyMode.PL3_0:
        return mean_energy_power_law(e_min, e_max, 3.0)
    if mode is EnergyMode.LAFFERTY2_7:
        return mean_energy_lafferty(e_min, e_max, 2.7)
    if mode is EnergyMode.LAFFERTY3_0:
        return mean_energy_lafferty(e_min, e_max, 3.0)
    raise ValueError("mean energy mode not implemented")


def _parse_number(token: str) -> float:
    match = _FLOAT_PREFIX.match(token)
    if match is None:
        raise ValueError(f"not a number: {token!r}")
    return float(match.group().strip())


def split_line(line: str, delimiter: str = ";") -> list[float]:
    """Split a line on the delimiter and parse each field as a float.

    Each field is read up to the end of its leading number, so trailing
    text in a field is ignored; a field with no leading number is an error.
    """
    if not delimiter:
        raise ValueError("empty delimiter")
    return [_parse_number(token) for token in line.split(delimiter)]