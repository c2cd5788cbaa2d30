"""Base class for cosmic-ray datasets read from source tables and saved as text."""

from __future__ import annotations

import os
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Union

from kisscr.datapoint import DataPoint
from kisscr.enums import EnergyMode, Experiment, Source, XQuantity, YQuantity

PathLike = Union[str, "os.PathLike[str]"]

_URL_PATTERN = re.compile(
    r"(https?://)?([\da-z.-]+)\.([a-z.]{2,6})([/\w .-]*)/?",
    re.ASCII,
)

_COLUMNS_HEADER = "#Colums: x, y, y statistical errors, y systematic errors"


def validate_url(url: str) -> str:
    """Return the url unchanged if it looks like a web address, else raise ValueError."""
    if _URL_PATTERN.fullmatch(url) is None:
        raise ValueError("url not valid")
    return url


def _iter_records(filename: PathLike, header_lines: int, width: int) -> Iterator[tuple[float, ...]]:
    """Yield groups of `width` numbers read as whitespace-separated tokens.

    The first `header_lines` lines are skipped. Reading stops at the first
    token that is not a number; an incomplete trailing group is dropped.
    """
    with open(filename, encoding="utf-8") as handle:
        for _ in range(header_lines):
            if not handle.readline():
                return
        tokens = handle.read().split()
    record: list[float] = []
    for token in tokens:
        try:
            record.append(float(token))
        except ValueError:
            return
        if len(record) == width:
            yield tuple(record)
            record = []


class CrDataset(ABC):
    """A dataset of one experiment, one x quantity and one y quantity."""

    def __init__(
        self,
        experiment: Experiment,
        x_quantity: XQuantity,
        y_quantity: YQuantity,
        mode: EnergyMode,
    ) -> None:
        self.experiment = experiment
        self.x_quantity = x_quantity
        self.y_quantity = y_quantity
        self.energy_mode = mode
        self.source = Source.MYTABLES
        self.doi = "not available"
        self.ads = "none"
        self.comments = ""
        self.description = ""
        self._url = ""
        self.data: list[DataPoint] = []

    @property
    def url(self) -> str:
        return self._url

    @url.setter
    def url(self, value: str) -> None:
        self._url = validate_url(value)

    def _name_stem(self) -> str:
        parts = [self.experiment.label]
        if self.description:
            parts.append(self.description)
        parts += [self.y_quantity.label, self.x_quantity.label]
        return "_".join(parts)

    def source_filename(self) -> str:
        """Path of the source table relative to the source directory."""
        return f"{self.source.label}/{self._name_stem()}.txt"

    def output_filename(self) -> str:
        """Name of the file written in the output directory."""
        return f"{self._name_stem()}.txt"

    @abstractmethod
    def read_file(self, filename: PathLike) -> None:
        """Append the points found in the given source file to `data`."""

    def load(self, source_dir: PathLike = "source") -> bool:
        """Read the source table of this dataset; raise if it does not exist."""
        path = Path(source_dir) / self.source_filename()
        print(f"\033[1;31m> loading data from file {path}\033[0m")
        if not path.is_file():
            raise FileNotFoundError(f"file not found! {path}")
        self.read_file(path)
        return True

    def _render(self) -> str:
        experiment = self.experiment.label
        if self.description:
            experiment += f" ({self.description})"
        lines = [
            f"#Source: {self.source.label}",
            f"#Ref: {self.doi} ({self.ads})",
            f"#Experiment: {experiment}",
            f"#Y Quantity: {self.y_quantity.label}",
            f"#X Quantity: {self.x_quantity.label}",
            f"#Url: {self.url}",
            f"#Comments: {self.comments}",
            _COLUMNS_HEADER,
        ]
        lines.extend(point.format() for point in self.data)
        return "\n".join(lines) + "\n"

    def save(self, output_dir: PathLike = "output") -> Path:
        """Write the header and the points to the output directory; return the path."""
        path = Path(output_dir) / self.output_filename()
        print(f"\033[1;32m> saving data on file {path}\033[0m")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self._render(), encoding="utf-8")
        return path

    def run(self, source_dir: PathLike = "source", output_dir: PathLike = "output") -> Path:
        """Load the source table and save the converted dataset."""
        self.load(source_dir)
        return self.save(output_dir)


def run_all(
    datasets: Iterable[CrDataset],
    source_dir: PathLike = "source",
    output_dir: PathLike = "output",
) -> list[Path]:
    """Run every dataset in order and return the paths written."""
    return [dataset.run(source_dir, output_dir) for dataset in datasets]