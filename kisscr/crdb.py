"""Datasets taken from the cosmic-ray database tables."""

from __future__ import annotations

from kisscr.datapoint import DataPoint
from kisscr.dataset import CrDataset, PathLike, _iter_records
from kisscr.energy import mean_energy
from kisscr.enums import EnergyMode, Experiment, Source, XQuantity, YQuantity

_HEADER_LINES = 2
_COLUMNS = 7


class CRDB(CrDataset):
    """A table with columns: x_lo x_up y stat_lo stat_up syst_lo syst_up."""

    def __init__(
        self,
        experiment: Experiment,
        x_quantity: XQuantity,
        y_quantity: YQuantity,
        mode: EnergyMode,
    ) -> None:
        super().__init__(experiment, x_quantity, y_quantity, mode)
        self.source = Source.CRDB
        self.url = "https://lpsc.in2p3.fr/crdb"

    def read_file(self, filename: PathLike) -> None:
        for e_lo, e_up, y, stat_lo, stat_up, syst_lo, syst_up in _iter_records(
            filename, _HEADER_LINES, _COLUMNS
        ):
            x_mean = mean_energy(e_lo, e_up, self.energy_mode)
            self.data.append(DataPoint(x_mean, y, stat_lo, stat_up, syst_lo, syst_up))