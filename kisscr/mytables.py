"""Datasets read from hand-made tables, one reader per table layout."""

from __future__ import annotations

import sys
from collections.abc import Iterator

from kisscr.datapoint import DataPoint
from kisscr.dataset import CrDataset, PathLike, _iter_records
from kisscr.energy import mean_energy
from kisscr.enums import EnergyMode, Experiment, Source, XQuantity, YQuantity

_INVALID_LINE = "Invalid line, skipping."


def _iter_valid_lines(filename: PathLike, header_lines: int, width: int) -> Iterator[tuple[float, ...]]:
    """Yield the first `width` numbers of each line after the header.

    A line that does not start with `width` numbers is reported on stderr
    and skipped.
    """
    with open(filename, encoding="utf-8") as handle:
        for _ in range(header_lines):
            if not handle.readline():
                return
        for line in handle:
            tokens = line.split()[:width]
            try:
                values = tuple(float(token) for token in tokens)
            except ValueError:
                values = ()
            if len(values) != width:
                print(_INVALID_LINE, file=sys.stderr)
                continue
            yield values


class _MyTable(CrDataset):
    """A dataset from the hand-made tables, with its reference preset."""

    def __init__(
        self,
        experiment: Experiment,
        x_quantity: XQuantity,
        y_quantity: YQuantity,
        mode: EnergyMode,
        doi: str,
        ads: str,
        description: str = "",
    ) -> None:
        super().__init__(experiment, x_quantity, y_quantity, mode)
        self.source = Source.MYTABLES
        self.doi = doi
        self.ads = ads
        self.description = description


class CaletLepton(_MyTable):
    """CALET electron plus positron flux in total energy."""

    def __init__(self, mode: EnergyMode) -> None:
        super().__init__(
            Experiment.CALET,
            XQuantity.TOTAL_ENERGY,
            YQuantity.LEPTON,
            mode,
            "10.1103/PhysRevLett.131.191001",
            "2023PhRvL.131s1001A",
        )

    def read_file(self, filename: PathLike) -> None:
        for e_min, e_max, _e_mean, flux, stat_lo, stat_up, sys_lo, sys_up in _iter_records(filename, 1, 8):
            energy = mean_energy(e_min, e_max, self.energy_mode)
            self.data.append(DataPoint(energy, flux, stat_lo, stat_up, sys_lo, sys_up))


def _read_split_systematics(dataset: CrDataset, filename: PathLike) -> None:
    """Columns: E_min E_max flux stat syst_1 syst_2_low syst_2_up."""
    for e_min, e_max, flux, stat, syst_1, syst_2_lo, syst_2_up in _iter_records(filename, 1, 7):
        energy = mean_energy(e_min, e_max, dataset.energy_mode)
        dataset.data.append(DataPoint(energy, flux, stat, stat, syst_1 + syst_2_lo, syst_1 + syst_2_up))


class CaletHeavy(_MyTable):
    """CALET heavy-nucleus flux in kinetic energy per nucleon."""

    def __init__(self, y_quantity: YQuantity, mode: EnergyMode) -> None:
        super().__init__(
            Experiment.CALET,
            XQuantity.KINETIC_ENERGY_PER_NUCLEON,
            y_quantity,
            mode,
            "10.1103/py17-74rk",
            "2025PhRvL.135b1002A",
        )

    def read_file(self, filename: PathLike) -> None:
        _read_split_systematics(self, filename)


class DampeBoron(_MyTable):
    """DAMPE boron flux in kinetic energy per nucleon."""

    def __init__(self, mode: EnergyMode) -> None:
        super().__init__(
            Experiment.DAMPE,
            XQuantity.KINETIC_ENERGY_PER_NUCLEON,
            YQuantity.B,
            mode,
            "10.1103/PhysRevLett.134.191001",
            "2025PhRvL.134s1001A",
        )

    def read_file(self, filename: PathLike) -> None:
        _read_split_systematics(self, filename)


class DampeLight(_MyTable):
    """DAMPE light-component (H + He) flux in total energy."""

    def __init__(self, mode: EnergyMode) -> None:
        super().__init__(
            Experiment.DAMPE,
            XQuantity.TOTAL_ENERGY,
            YQuantity.LIGHT,
            mode,
            "10.1103/PhysRevD.109.L121101",
            "2024PhRvD.109l1101A",
        )

    def read_file(self, filename: PathLike) -> None:
        for e_min, e_max, _e_mean, flux, stat, syst_ana, syst_had in _iter_records(filename, 1, 7):
            energy = mean_energy(e_min, e_max, self.energy_mode)
            syst = syst_ana + syst_had
            self.data.append(DataPoint(energy, flux, stat, stat, syst, syst))


class HawcLight(_MyTable):
    """HAWC light-component flux in total energy."""

    def __init__(self, mode: EnergyMode) -> None:
        super().__init__(
            Experiment.HAWC,
            XQuantity.TOTAL_ENERGY,
            YQuantity.LIGHT,
            mode,
            "doi.org/10.1103/PhysRevD.105.063021",
            "2022PhRvD.105f3021A",
        )

    def read_file(self, filename: PathLike) -> None:
        for energy, flux, stat, syst_up, syst_lo in _iter_records(filename, 1, 5):
            self.data.append(DataPoint(energy, flux, stat, stat, syst_lo, syst_up))


class VeritasLepton(_MyTable):
    """VERITAS electron plus positron flux, converted from TeV and cm^-2."""

    def __init__(self, mode: EnergyMode) -> None:
        super().__init__(
            Experiment.VERITAS,
            XQuantity.TOTAL_ENERGY,
            YQuantity.LEPTON,
            mode,
            "10.1103/PhysRevD.98.062004",
            "2018PhRvD..98f2004A",
        )

    def read_file(self, filename: PathLike) -> None:
        for record in _iter_records(filename, 1, 8):
            _e, e_min, e_max, _events, _fraction, _fraction_err, flux, stat = record
            e_min *= 1e3  # TeV -> GeV
            e_max *= 1e3
            flux *= 1e4  # cm-2 -> m-2
            stat *= 1e4
            energy = mean_energy(e_min, e_max, self.energy_mode)
            self.data.append(DataPoint(energy, flux, stat, stat, 0.33 * flux, 0.64 * flux))


class HessLepton(_MyTable):
    """HESS electron plus positron flux in total energy."""

    def __init__(self, mode: EnergyMode) -> None:
        super().__init__(
            Experiment.HESS,
            XQuantity.TOTAL_ENERGY,
            YQuantity.LEPTON,
            mode,
            "",
            "",
        )

    def read_file(self, filename: PathLike) -> None:
        for energy, flux, stat_lo, _stat_up, sys_lo, sys_up in _iter_records(filename, 0, 6):
            self.data.append(DataPoint(energy, flux, stat_lo, stat_lo, sys_lo, sys_up))


class ArgoLight(_MyTable):
    """ARGO-YBJ light-component flux in total energy."""

    def __init__(self, mode: EnergyMode) -> None:
        super().__init__(
            Experiment.ARGO,
            XQuantity.TOTAL_ENERGY,
            YQuantity.LIGHT,
            mode,
            "doi.org/10.1103/PhysRevD.91.112017",
            "2015PhRvD..91k2017B",
        )

    def read_file(self, filename: PathLike) -> None:
        for _e_min, _e_max, energy, flux, error in _iter_records(filename, 1, 5):
            self.data.append(DataPoint(energy, flux, 0.0, 0.0, error, error))


class TaleAll(_MyTable):
    """TALE all-particle flux, converted from E^3 J in eV to GeV units."""

    def __init__(self, mode: EnergyMode) -> None:
        super().__init__(
            Experiment.TALE,
            XQuantity.TOTAL_ENERGY,
            YQuantity.ALL_PARTICLE,
            mode,
            "10.3847/1538-4357/aada05",
            "2018ApJ...865...74A",
        )

    def read_file(self, filename: PathLike) -> None:
        for log_lo, log_up, _events, e3j, stat, sys_up, sys_lo in _iter_records(filename, 1, 7):
            energy = mean_energy(10.0**log_lo, 10.0**log_up, self.energy_mode) / 1e9
            scale = energy**3.0 * 1e18
            stat_y = stat / scale
            self.data.append(DataPoint(energy, e3j / scale, stat_y, stat_y, sys_lo / scale, sys_up / scale))


class TibetAll(_MyTable):
    """Tibet all-particle flux for one hadronic-model column."""

    def __init__(self, mode: EnergyMode, description: str) -> None:
        super().__init__(
            Experiment.TIBET,
            XQuantity.TOTAL_ENERGY,
            YQuantity.ALL_PARTICLE,
            mode,
            "10.1086/529514",
            "2008ApJ...678.1165A",
            description,
        )

    def read_file(self, filename: PathLike) -> None:
        for energy, flux, error in _iter_records(filename, 1, 3):
            self.data.append(DataPoint(energy, flux, 0.0, 0.0, error, error))


class GrapesProton(_MyTable):
    """GRAPES-3 proton flux in total energy."""

    def __init__(self, mode: EnergyMode) -> None:
        super().__init__(
            Experiment.GRAPES,
            XQuantity.TOTAL_ENERGY,
            YQuantity.H,
            mode,
            "10.1103/PhysRevLett.132.051002",
            "2024PhRvL.132e1002V",
        )

    def read_file(self, filename: PathLike) -> None:
        for energy, flux, stat, syst_up, syst_lo in _iter_valid_lines(filename, 1, 5):
            self.data.append(DataPoint(energy, flux, stat, stat, syst_lo, syst_up))


class LhaasoProton(_MyTable):
    """LHAASO proton flux, converted from PeV to GeV."""

    def __init__(self, mode: EnergyMode, description: str) -> None:
        super().__init__(
            Experiment.LHAASO,
            XQuantity.TOTAL_ENERGY,
            YQuantity.H,
            mode,
            "unpublished",
            "2025arXiv250514447T",
            description,
        )

    def read_file(self, filename: PathLike) -> None:
        for log_lo, log_up, _events, flux, stat, syst in _iter_valid_lines(filename, 1, 6):
            energy = mean_energy(10.0**log_lo, 10.0**log_up, self.energy_mode) * 1e6
            stat_y = stat / 1e6
            syst_y = syst / 1e6
            self.data.append(DataPoint(energy, flux / 1e6, stat_y, stat_y, syst_y, syst_y))