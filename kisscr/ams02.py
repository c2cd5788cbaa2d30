"""AMS-02 datasets: leptons, antiprotons, nuclear fluxes and flux ratios."""

from __future__ import annotations

from kisscr.crdb import CRDB
from kisscr.dataset import CrDataset
from kisscr.enums import EnergyMode, Experiment, XQuantity, YQuantity

_PHYSREP_DOI = "10.1016/j.physrep.2020.09.003"
_PHYSREP_ADS = "2021PhR...894....1A"


def _crdb(
    x_quantity: XQuantity,
    y_quantity: YQuantity,
    mode: EnergyMode,
    doi: str,
    ads: str,
) -> CRDB:
    dataset = CRDB(Experiment.AMS02, x_quantity, y_quantity, mode)
    dataset.doi = doi
    dataset.ads = ads
    return dataset


def leptons() -> list[CrDataset]:
    """Electron, positron, lepton and positron-fraction datasets."""
    physrep = [YQuantity.POSITRON, YQuantity.ELECTRON, YQuantity.LEPTON, YQuantity.POSITRON_FRACTION]
    datasets: list[CrDataset] = [
        _crdb(XQuantity.RIGIDITY, y, EnergyMode.LAFFERTY3_0, _PHYSREP_DOI, _PHYSREP_ADS) for y in physrep
    ]
    datasets += [
        _crdb(
            XQuantity.RIGIDITY,
            y,
            EnergyMode.GEOMETRICAL,
            "10.1103/PhysRevLett.117.091103",
            "2016PhRvL.117i1103A",
        )
        for y in (YQuantity.H_ELECTRON, YQuantity.H_POSITRON)
    ]
    return datasets


def antiprotons() -> list[CrDataset]:
    """Antiproton flux and antiproton-to-positron datasets."""
    return [
        _crdb(XQuantity.RIGIDITY, YQuantity.ANTIPROTON, EnergyMode.LAFFERTY2_7, _PHYSREP_DOI, _PHYSREP_ADS),
        _crdb(
            XQuantity.RIGIDITY,
            YQuantity.ANTIPROTON_POSITRON,
            EnergyMode.LAFFERTY2_7,
            "10.1103/PhysRevLett.117.091103",
            "2016PhRvL.117i1103A",
        ),
    ]


_FLUX_REFERENCES: list[tuple[YQuantity, str, str]] = [
    (YQuantity.H, _PHYSREP_DOI, _PHYSREP_ADS),
    (YQuantity.HE, _PHYSREP_DOI, _PHYSREP_ADS),
    (YQuantity.LI, _PHYSREP_DOI, _PHYSREP_ADS),
    (YQuantity.BE, _PHYSREP_DOI, _PHYSREP_ADS),
    (YQuantity.B, _PHYSREP_DOI, _PHYSREP_ADS),
    (YQuantity.C, _PHYSREP_DOI, _PHYSREP_ADS),
    (YQuantity.N, _PHYSREP_DOI, _PHYSREP_ADS),
    (YQuantity.O, _PHYSREP_DOI, _PHYSREP_ADS),
    (YQuantity.F, "10.1103/PhysRevLett.126.081102", "2021PhRvL.126h1102A"),
    (YQuantity.NE, "10.1103/PhysRevLett.124.211102", "2020PhRvL.124u1102A"),
    (YQuantity.NA, "10.1103/PhysRevLett.127.021101", "2021PhRvL.127b1101A"),
    (YQuantity.MG, "10.1103/PhysRevLett.124.211102", "2020PhRvL.124u1102A"),
    (YQuantity.AL, "10.1103/PhysRevLett.127.021101", "2021PhRvL.127b1101A"),
    (YQuantity.SI, "10.1103/PhysRevLett.124.211102", "2020PhRvL.124u1102A"),
    (YQuantity.S, "", "2023PhRvL.130u1002A"),
    (YQuantity.FE, "10.1103/PhysRevLett.126.041104", "2021PhRvL.126d1104A"),
]


def fluxes() -> list[CrDataset]:
    """Nuclear flux datasets in rigidity."""
    return [
        _crdb(XQuantity.RIGIDITY, y, EnergyMode.LAFFERTY2_7, doi, ads) for y, doi, ads in _FLUX_REFERENCES
    ]


_LI_BE_DOI = "10.1103/PhysRevLett.120.021101"
_LI_BE_ADS = "2018PhRvL.120b1101A"
_F_DOI = "10.1103/PhysRevLett.126.081102"
_F_ADS = "2021PhRvL.126h1102A"
_NE_DOI = "10.1103/PhysRevLett.124.211102"
_NE_ADS = "2020PhRvL.124u1102A"
_FE_ADS = "2021PhRvL.126d1104A"

_RATIO_REFERENCES: list[tuple[XQuantity, YQuantity, str, str]] = [
    (XQuantity.RIGIDITY, YQuantity.H_HE, _PHYSREP_DOI, _PHYSREP_ADS),
    (XQuantity.RIGIDITY, YQuantity.HE_O, _PHYSREP_DOI, _PHYSREP_ADS),
    (XQuantity.RIGIDITY, YQuantity.LI_B, _LI_BE_DOI, _LI_BE_ADS),
    (XQuantity.RIGIDITY, YQuantity.LI_C, _PHYSREP_DOI, _PHYSREP_ADS),
    (XQuantity.RIGIDITY, YQuantity.LI_O, _PHYSREP_DOI, _PHYSREP_ADS),
    (XQuantity.RIGIDITY, YQuantity.BE_B, _LI_BE_DOI, _LI_BE_ADS),
    (XQuantity.RIGIDITY, YQuantity.BE_C, _PHYSREP_DOI, _PHYSREP_ADS),
    (XQuantity.RIGIDITY, YQuantity.BE_O, _PHYSREP_DOI, _PHYSREP_ADS),
    (XQuantity.RIGIDITY, YQuantity.B_C, _PHYSREP_DOI, _PHYSREP_ADS),
    (
        XQuantity.KINETIC_ENERGY_PER_NUCLEON,
        YQuantity.B_C,
        "10.1103/PhysRevLett.117.231102",
        "2016PhRvL.117w1102A",
    ),
    (XQuantity.RIGIDITY, YQuantity.B_O, _PHYSREP_DOI, _PHYSREP_ADS),
    (XQuantity.RIGIDITY, YQuantity.C_O, _PHYSREP_DOI, _PHYSREP_ADS),
    (XQuantity.RIGIDITY, YQuantity.N_B, _PHYSREP_DOI, _PHYSREP_ADS),
    (XQuantity.RIGIDITY, YQuantity.N_O, _PHYSREP_DOI, _PHYSREP_ADS),
    (XQuantity.RIGIDITY, YQuantity.F_B, _F_DOI, _F_ADS),
    (XQuantity.RIGIDITY, YQuantity.F_SI, _F_DOI, _F_ADS),
    (XQuantity.RIGIDITY, YQuantity.NE_O, _NE_DOI, _NE_ADS),
    (XQuantity.RIGIDITY, YQuantity.NE_MG, _NE_DOI, _NE_ADS),
    (XQuantity.RIGIDITY, YQuantity.MG_O, _NE_DOI, _NE_ADS),
    (XQuantity.RIGIDITY, YQuantity.SI_O, _NE_DOI, _NE_ADS),
    (XQuantity.RIGIDITY, YQuantity.SI_MG, _NE_DOI, _NE_ADS),
    (XQuantity.RIGIDITY, YQuantity.FE_HE, _NE_DOI, _FE_ADS),
    (XQuantity.RIGIDITY, YQuantity.FE_O, _NE_DOI, _FE_ADS),
    (XQuantity.RIGIDITY, YQuantity.FE_SI, _NE_DOI, _FE_ADS),
]


def ratios() -> list[CrDataset]:
    """Flux-ratio datasets."""
    return [_crdb(x, y, EnergyMode.GEOMETRICAL, doi, ads) for x, y, doi, ads in _RATIO_REFERENCES]


def datasets() -> list[CrDataset]:
    """Every AMS-02 dataset, in the order leptons, antiprotons, fluxes, ratios."""
    return leptons() + antiprotons() + fluxes() + ratios()