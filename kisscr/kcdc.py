"""Datasets taken from the KASCADE Cosmic-ray Data Centre tables."""

from __future__ import annotations

from kisscr.datapoint import DataPoint
from kisscr.dataset import CrDataset, PathLike
from kisscr.energy import split_line
from kisscr.enums import EnergyMode, Experiment, Source, XQuantity, YQuantity

_HEADER_LINES = 6


class KCDC(CrDataset):
    """A table of semicolon-separated tokens: E;flux;uncert_low;uncert_high."""

    def __init__(
        self,
        experiment: Experiment,
        x_quantity: XQuantity,
        y_quantity: YQuantity,
        mode: EnergyMode,
    ) -> None:
        super().__init__(experiment, x_quantity, y_quantity, mode)
        self.source = Source.KCDC
        self.url = "https://kcdc.ikp.kit.edu/spectra/"

    def read_file(self, filename: PathLike) -> None:
        with open(filename, encoding="utf-8") as handle:
            for _ in range(_HEADER_LINES):
                if not handle.readline():
                    return
            tokens = handle.read().split()
        for token in tokens:
            if len(token) <= 1:
                continue
            values = split_line(token)
            if len(values) < 4:
                raise ValueError(f"expected four fields in {token!r}")
            energy, flux, uncert_low, uncert_high = values[:4]
            self.data.append(DataPoint(energy, flux, 0.0, 0.0, uncert_low, uncert_high))