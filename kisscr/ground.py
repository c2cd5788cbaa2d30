"""Datasets of ground-based air-shower and Cherenkov experiments."""

from __future__ import annotations

from kisscr.crdb import CRDB
from kisscr.dataset import CrDataset
from kisscr.enums import EnergyMode, Experiment, XQuantity, YQuantity
from kisscr.kcdc import KCDC
from kisscr.mytables import (
    ArgoLight,
    GrapesProton,
    HawcLight,
    HessLepton,
    LhaasoProton,
    TaleAll,
    TibetAll,
    VeritasLepton,
)

_TOTAL = XQuantity.TOTAL_ENERGY
_GEO = EnergyMode.GEOMETRICAL
_THESIS = "From Marcel Finger PhD Thesis"


def _crdb(
    experiment: Experiment,
    y_quantity: YQuantity,
    mode: EnergyMode = _GEO,
    doi: str | None = None,
    ads: str | None = None,
    description: str = "",
    comments: str = "",
) -> CRDB:
    dataset = CRDB(experiment, _TOTAL, y_quantity, mode)
    dataset.description = description
    if doi is not None:
        dataset.doi = doi
    if ads is not None:
        dataset.ads = ads
    dataset.comments = comments
    return dataset


def _kcdc(y_quantity: YQuantity, description: str) -> KCDC:
    dataset = KCDC(Experiment.KASCADE, _TOTAL, y_quantity, EnergyMode.UNKNOWN)
    dataset.description = description
    dataset.comments = _THESIS
    return dataset


def argo() -> list[CrDataset]:
    """ARGO-YBJ light-component dataset."""
    return [ArgoLight(_GEO)]


def auger() -> list[CrDataset]:
    """Pierre Auger datasets; none is currently produced."""
    return []


def gamma() -> list[CrDataset]:
    """GAMMA all-particle, proton and helium datasets."""
    return [
        _crdb(Experiment.GAMMA, y, doi="10.1103/PhysRevD.89.123003", ads="2014PhRvD..89l3003T")
        for y in (YQuantity.ALL_PARTICLE, YQuantity.H, YQuantity.HE)
    ]


def grapes() -> list[CrDataset]:
    """GRAPES-3 proton dataset."""
    return [GrapesProton(_GEO)]


def hawc() -> list[CrDataset]:
    """HAWC light-component and all-particle datasets."""
    return [
        HawcLight(_GEO),
        _crdb(
            Experiment.HAWC,
            YQuantity.ALL_PARTICLE,
            doi="10.22323/1.395.0330",
            ads="2022icrc.confE.330M",
        ),
    ]


def hess() -> list[CrDataset]:
    """HESS iron and lepton datasets."""
    lepton = HessLepton(_GEO)
    lepton.doi = "10.1051/0004-6361/200913323"
    lepton.ads = "2009A&A...508..561A"
    lepton.url = "https://www.mpi-hd.mpg.de/hfm/HESS/pages/publications/auxiliary/auxinfo_electrons2.html"
    lepton.comments = "systematic errors not official, derived from URL"
    return [
        _crdb(Experiment.HESS, YQuantity.FE, doi="10.1103/PhysRevD.75.042004", ads="2007PhRvD..75d2004A"),
        lepton,
    ]


def icetop() -> list[CrDataset]:
    """IceTop all-particle, proton and helium datasets."""
    exp = Experiment.ICETOP
    doi_2019 = "10.1103/PhysRevD.100.082002"
    ads_2019 = "2019PhRvD.100h2002A"
    doi_2020 = "10.1103/PhysRevD.102.122001"
    ads_2020 = "2020PhRvD.102l2001A"
    icecube = "IceCube_SIBYLL-2.1"
    return [
        _crdb(exp, YQuantity.ALL_PARTICLE, doi=doi_2019, ads=ads_2019, description=icecube),
        _crdb(exp, YQuantity.H, doi=doi_2019, ads=ads_2019, description=icecube),
        _crdb(exp, YQuantity.HE, doi=doi_2019, ads=ads_2019, description=icecube),
        _crdb(exp, YQuantity.ALL_PARTICLE, doi=doi_2019 + " ", ads=ads_2019),
        _crdb(exp, YQuantity.ALL_PARTICLE, doi=doi_2020, ads=ads_2020, description="SIBYLL-2.1"),
        _crdb(exp, YQuantity.ALL_PARTICLE, doi=doi_2020, ads=ads_2020, description="QGSJet-II-04"),
    ]


def kascade_grande() -> list[CrDataset]:
    """KASCADE-Grande all-particle and light-component datasets."""
    exp = Experiment.KASCADE_GRANDE
    allp = YQuantity.ALL_PARTICLE
    light = YQuantity.LIGHT
    return [
        _crdb(exp, allp, doi="10.22323/1.301.0316", ads="2017ICRC...35..316A", description="SIBYLL-2.3"),
        _crdb(exp, allp, doi="10.22323/1.236.0263", ads="2015ICRC...34..263S", description="QGSJet-II-04"),
        _crdb(exp, allp, doi="10.1103/PhysRevD.87.081101", ads="2013PhRvD..87h1101A", description="QGSJet-II-2"),
        _crdb(exp, allp, doi="10.1103/PhysRevLett.107.171104", ads="2011PhRvL.107q1104A", description="QGSJet-II-3"),
        _crdb(exp, light, doi="10.1103/PhysRevD.87.081101", ads="2013PhRvD..87h1101A", description="QGSJET-II-02"),
        _crdb(exp, light, doi="10.1103/PhysRevLett.107.171104", ads="2011PhRvL.107q1104A", description="QGSJET-II-03"),
        _crdb(exp, light, doi="10.22323/1.236.0263", ads="2015ICRC...34..263S", description="QGSJET-II-04"),
    ]


def kascade() -> list[CrDataset]:
    """KASCADE all-particle, proton and helium datasets."""
    exp = Experiment.KASCADE
    unknown = EnergyMode.UNKNOWN
    doi = "10.1016/j.astropartphys.2005.04.001"
    ads = "2005APh....24....1A"

    def published(kind: type, y: YQuantity, description: str) -> CrDataset:
        dataset = kind(exp, _TOTAL, y, unknown)
        dataset.description = description
        dataset.doi = doi
        dataset.ads = ads
        return dataset

    allp = YQuantity.ALL_PARTICLE
    return [
        published(KCDC, allp, "2005_QGSJET-01"),
        published(KCDC, allp, "2005_SIBYLL-2.1"),
        _kcdc(allp, "2011_EPOS-199"),
        _kcdc(allp, "2011_QGSJET-II-02"),
        _kcdc(allp, "2011_SIBYLL-2.1"),
        _kcdc(allp, "2011_QGSJET-01"),
        published(CRDB, YQuantity.H, "QGSJET-01"),
        published(CRDB, YQuantity.H, "SIBYLL-2.1"),
        _kcdc(YQuantity.H, "2011_QGSJET-II-02"),
        _kcdc(YQuantity.H, "2011_SIBYLL-2.1"),
        _kcdc(YQuantity.H, "2011_QGSJET-01"),
        published(CRDB, YQuantity.HE, "QGSJET-01"),
        published(CRDB, YQuantity.HE, "SIBYLL-2.1"),
    ]


def lhaaso() -> list[CrDataset]:
    """LHAASO proton datasets for two hadronic models."""
    return [LhaasoProton(_GEO, "QGSJETII-04"), LhaasoProton(_GEO, "EPOS-LHC")]


def tale() -> list[CrDataset]:
    """TALE and Telescope Array all-particle datasets."""
    return [
        TaleAll(_GEO),
        _crdb(Experiment.TA, YQuantity.ALL_PARTICLE, doi="10.22323/1.236.0349", ads="2015ICRC...34..349I"),
    ]


def tibet() -> list[CrDataset]:
    """Tibet all-particle datasets for three models and the light component."""
    datasets: list[CrDataset] = [
        TibetAll(_GEO, model) for model in ("QGSJET+HD", "QGSJET+PD", "SIBYLL+HD")
    ]
    datasets.append(_crdb(Experiment.TIBET, YQuantity.LIGHT))
    return datasets


def tunka() -> list[CrDataset]:
    """TUNKA-133 all-particle, proton and helium datasets."""
    exp = Experiment.TUNKA133
    doi = "10.1016/j.nima.2013.09.018"
    comments = "Model: QGSJet01"
    return [
        _crdb(exp, YQuantity.ALL_PARTICLE, doi=doi, ads="2014NIMPA.756...94P", comments=comments),
        _crdb(exp, YQuantity.H, doi=doi, ads="2014NIMPA.756...94P ", comments=comments),
        _crdb(exp, YQuantity.HE, doi=doi, ads="2014NIMPA.756...94P ", comments=comments),
    ]


def veritas() -> list[CrDataset]:
    """VERITAS lepton dataset."""
    return [VeritasLepton(_GEO)]