"""Datasets taken from the XML exports of the SSDC cosmic-ray database."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

from kisscr.datapoint import DataPoint
from kisscr.dataset import CrDataset, PathLike
from kisscr.energy import mean_energy
from kisscr.enums import EnergyMode, Experiment, Source, XQuantity, YQuantity

_FLUXES = frozenset(
    {
        YQuantity.H,
        YQuantity.HE,
        YQuantity.LI,
        YQuantity.BE,
        YQuantity.B,
        YQuantity.C,
        YQuantity.N,
        YQuantity.O,
        YQuantity.F,
        YQuantity.NE,
        YQuantity.NA,
        YQuantity.MG,
        YQuantity.AL,
        YQuantity.SI,
        YQuantity.FE,
        YQuantity.NI,
        YQuantity.ELECTRON,
        YQuantity.POSITRON,
        YQuantity.LEPTON,
        YQuantity.ANTIPROTON,
    }
)

_RATIOS = frozenset(
    {
        YQuantity.POSITRON_FRACTION,
        YQuantity.B_C,
        YQuantity.B_O,
        YQuantity.BE_B,
        YQuantity.BE_C,
        YQuantity.BE_O,
        YQuantity.C_O,
        YQuantity.F_B,
        YQuantity.F_SI,
        YQuantity.FE_HE,
        YQuantity.FE_O,
        YQuantity.FE_SI,
        YQuantity.H_HE,
        YQuantity.HE_O,
        YQuantity.LI_B,
        YQuantity.LI_C,
        YQuantity.LI_O,
        YQuantity.MG_O,
        YQuantity.N_B,
        YQuantity.N_O,
        YQuantity.NE_MG,
        YQuantity.NE_O,
        YQuantity.SI_MG,
        YQuantity.SI_O,
    }
)

_NUMBER = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def is_flux(y_quantity: YQuantity) -> bool:
    """True for quantities stored as fluxes in the XML export."""
    return y_quantity in _FLUXES


def is_ratio(y_quantity: YQuantity) -> bool:
    """True for quantities stored as flux ratios in the XML export."""
    return y_quantity in _RATIOS


def _as_double(node: ET.Element, tag: str) -> float:
    """Leading number of the text of the named child, or 0 if there is none."""
    child = node.find(tag)
    if child is None or child.text is None:
        return 0.0
    match = _NUMBER.match(child.text)
    return float(match.group().strip()) if match else 0.0


class SSDC(CrDataset):
    """A dataset read from an XML file of DATA records."""

    def __init__(
        self,
        experiment: Experiment,
        x_quantity: XQuantity,
        y_quantity: YQuantity,
        mode: EnergyMode,
    ) -> None:
        super().__init__(experiment, x_quantity, y_quantity, mode)
        self.source = Source.SSDC
        self.url = "https://tools.ssdc.asi.it/CosmicRays/"

    def source_filename(self) -> str:
        return f"{self.source.label}/{self._name_stem()}.xml"

    def _x_prefix(self) -> str:
        if self.x_quantity is XQuantity.RIGIDITY:
            return "rigidity"
        if self.x_quantity in (XQuantity.KINETIC_ENERGY, XQuantity.KINETIC_ENERGY_PER_NUCLEON):
            return "kinetic_energy"
        raise ValueError("energy value not valid")

    def _y_prefix(self) -> str:
        if is_flux(self.y_quantity):
            return "flux"
        if is_ratio(self.y_quantity):
            return "fluxratio"
        raise ValueError("y-quantity not valid")

    def read_file(self, filename: PathLike) -> None:
        try:
            root = ET.parse(filename).getroot()
        except ET.ParseError as error:
            raise ValueError("error in loading the XML file.") from error
        records = root.findall("DATA") if root.tag == "XML" else []

        added = 0
        for node in records:
            x_prefix = self._x_prefix()
            x_mean = mean_energy(
                _as_double(node, f"{x_prefix}_min"),
                _as_double(node, f"{x_prefix}_max"),
                self.energy_mode,
            )
            y_prefix = self._y_prefix()
            y = _as_double(node, y_prefix)
            if y > 0.0:
                self.data.append(
                    DataPoint(
                        x_mean,
                        y,
                        _as_double(node, f"{y_prefix}_statistical_error_low"),
                        _as_double(node, f"{y_prefix}_statistical_error_high"),
                        _as_double(node, f"{y_prefix}_systematical_error_low"),
                        _as_double(node, f"{y_prefix}_systematical_error_high"),
                    )
                )
                added += 1

        if added != len(records):
            raise ValueError("generic problem in reading the XML file")