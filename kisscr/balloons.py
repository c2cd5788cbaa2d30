"""Datasets of the balloon-borne experiments BESS, CREAM and TRACER."""

from __future__ import annotations

from kisscr.crdb import CRDB
from kisscr.dataset import CrDataset
from kisscr.enums import EnergyMode, Experiment, XQuantity, YQuantity


def _crdb(
    experiment: Experiment,
    x_quantity: XQuantity,
    y_quantity: YQuantity,
    mode: EnergyMode,
    doi: str,
    ads: str,
) -> CRDB:
    dataset = CRDB(experiment, x_quantity, y_quantity, mode)
    dataset.doi = doi
    dataset.ads = ads
    return dataset


def bess() -> list[CrDataset]:
    """BESS-TeV proton and helium datasets."""
    doi = "10.1016/j.astropartphys.2007.05.001"
    ads = "2007APh....28..154S"
    lf = EnergyMode.LAFFERTY2_7
    return [
        _crdb(Experiment.BESS, XQuantity.KINETIC_ENERGY, YQuantity.H, lf, doi, ads),
        _crdb(Experiment.BESS, XQuantity.KINETIC_ENERGY_PER_NUCLEON, YQuantity.HE, lf, doi, ads),
    ]


def cream() -> list[CrDataset]:
    """CREAM flux and flux-ratio datasets."""
    exp = Experiment.CREAM
    kn = XQuantity.KINETIC_ENERGY_PER_NUCLEON
    lf = EnergyMode.LAFFERTY2_7
    geo = EnergyMode.GEOMETRICAL
    light_doi = "10.3847/1538-4357/aa68e4"
    light_ads = "2017ApJ...839....5Y"
    heavy_doi = "10.1088/0004-637X/707/1/593"
    heavy_ads = "2009ApJ...707..593A"
    ratio_doi = "10.1016/j.astropartphys.2008.07.010 "
    ratio_ads = "2008APh....30..133A"
    datasets: list[CrDataset] = [
        _crdb(exp, XQuantity.KINETIC_ENERGY, YQuantity.H, lf, light_doi, light_ads),
        _crdb(exp, kn, YQuantity.HE, lf, light_doi, light_ads),
    ]
    datasets += [
        _crdb(exp, kn, y, lf, heavy_doi, heavy_ads)
        for y in (
            YQuantity.C,
            YQuantity.N,
            YQuantity.O,
            YQuantity.NE,
            YQuantity.MG,
            YQuantity.SI,
            YQuantity.FE,
        )
    ]
    datasets += [
        _crdb(exp, kn, y, geo, ratio_doi, ratio_ads)
        for y in (YQuantity.B_C, YQuantity.N_O, YQuantity.C_O)
    ]
    return datasets


def tracer() -> list[CrDataset]:
    """TRACER flux and boron-to-carbon datasets."""
    doi = "10.1088/0004-637X/742/1/14"
    ads = "2011ApJ...742...14O"
    return [
        _crdb(
            Experiment.TRACER,
            XQuantity.KINETIC_ENERGY_PER_NUCLEON,
            y,
            EnergyMode.GEOMETRICAL,
            doi,
            ads,
        )
        for y in (
            YQuantity.B,
            YQuantity.C,
            YQuantity.O,
            YQuantity.NE,
            YQuantity.MG,
            YQuantity.SI,
            YQuantity.FE,
            YQuantity.B_C,
        )
    ]