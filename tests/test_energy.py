import math

import pytest

from kisscr.energy import (
    mean_energy,
    mean_energy_geometrical,
    mean_energy_lafferty,
    mean_energy_power_law,
    split_line,
)
from kisscr.enums import EnergyMode

BINNED_MODES = [
    EnergyMode.GEOMETRICAL,
    EnergyMode.PL2_7,
    EnergyMode.PL3_0,
    EnergyMode.LAFFERTY2_7,
    EnergyMode.LAFFERTY3_0,
]


def test_geometrical_of_decade():
    assert mean_energy_geometrical(1.0, 100.0) == pytest.approx(10.0)


def test_power_law_slope_three():
    assert mean_energy_power_law(1.0, 3.0, 3.0) == pytest.approx(1.5)


@pytest.mark.parametrize("mode", BINNED_MODES)
@pytest.mark.parametrize("edges", [(1.0, 2.0), (10.0, 1000.0), (0.5, 0.7), (3e3, 5e5)])
def test_mean_lies_inside_bin(mode, edges):
    e_min, e_max = edges
    value = mean_energy(e_min, e_max, mode)
    assert e_min < value < e_max


@pytest.mark.parametrize("mode", BINNED_MODES + [EnergyMode.UNKNOWN])
def test_degenerate_bin_returns_lower_edge(mode):
    assert mean_energy(5.0, 5.0, mode) == 5.0
    assert mean_energy(7.0, 3.0, mode) == 7.0


def test_unknown_mode_raises():
    with pytest.raises(ValueError):
        mean_energy(1.0, 2.0, EnergyMode.UNKNOWN)


def test_modes_dispatch_to_matching_functions():
    assert mean_energy(2.0, 8.0, EnergyMode.PL2_7) == mean_energy_power_law(2.0, 8.0, 2.7)
    assert mean_energy(2.0, 8.0, EnergyMode.LAFFERTY3_0) == mean_energy_lafferty(2.0, 8.0, 3.0)
    assert mean_energy(2.0, 8.0, EnergyMode.GEOMETRICAL) == mean_energy_geometrical(2.0, 8.0)


def test_steeper_slope_lowers_power_law_mean():
    assert mean_energy_power_law(1.0, 100.0, 3.0) < mean_energy_power_law(1.0, 100.0, 2.7)


def test_lafferty_is_scale_invariant():
    ratio = mean_energy_lafferty(10.0, 20.0, 2.7) / mean_energy_lafferty(1.0, 2.0, 2.7)
    assert ratio == pytest.approx(10.0)


def test_split_line_default_delimiter():
    assert split_line("1;2.5;-3e2;4") == [1.0, 2.5, -300.0, 4.0]


def test_split_line_custom_delimiter():
    assert split_line("1.5, 2.5", ",") == [1.5, 2.5]


def test_split_line_single_value():
    assert split_line("42") == [42.0]


def test_split_line_ignores_trailing_text_in_field():
    assert split_line("1.5abc;2") == [1.5, 2.0]


def test_split_line_accepts_inf():
    values = split_line("inf;1")
    assert math.isinf(values[0])
    assert values[1] == 1.0


def test_split_line_rejects_non_numeric():
    with pytest.raises(ValueError):
        split_line("1;abc")


def test_split_line_rejects_empty_field():
    with pytest.raises(ValueError):
        split_line("1;;2")