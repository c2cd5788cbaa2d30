"""Datasets of the space-borne experiments CALET, DAMPE, FERMI, PAMELA, NUCLEON and ISS-CREAM."""

from __future__ import annotations

from kisscr.crdb import CRDB
from kisscr.dataset import CrDataset
from kisscr.enums import EnergyMode, Experiment, XQuantity, YQuantity
from kisscr.mytables import CaletHeavy, CaletLepton, DampeBoron, DampeLight


def _crdb(
    experiment: Experiment,
    x_quantity: XQuantity,
    y_quantity: YQuantity,
    mode: EnergyMode,
    doi: str,
    ads: str,
    comments: str = "",
) -> CRDB:
    dataset = CRDB(experiment, x_quantity, y_quantity, mode)
    dataset.doi = doi
    dataset.ads = ads
    dataset.comments = comments
    return dataset


def calet() -> list[CrDataset]:
    """CALET datasets."""
    kn = XQuantity.KINETIC_ENERGY_PER_NUCLEON
    lf = EnergyMode.LAFFERTY2_7
    geo = EnergyMode.GEOMETRICAL
    exp = Experiment.CALET
    return [
        CaletLepton(geo),
        _crdb(exp, XQuantity.KINETIC_ENERGY, YQuantity.H, lf, "10.1103/PhysRevLett.129.101102", "2022PhRvL.129j1102A"),
        _crdb(exp, XQuantity.KINETIC_ENERGY, YQuantity.HE, lf, "10.1103/PhysRevLett.130.171002", "2023PhRvL.130q1002A"),
        _crdb(exp, kn, YQuantity.B, lf, "10.1103/PhysRevLett.129.251103", "2022PhRvL.129y1103A"),
        _crdb(exp, kn, YQuantity.C, lf, "10.1103/PhysRevLett.129.251103", "2022PhRvL.129y1103A"),
        _crdb(exp, kn, YQuantity.O, lf, "10.1103/PhysRevLett.125.251102", "2020PhRvL.125y1102A"),
        CaletHeavy(YQuantity.CR, geo),
        CaletHeavy(YQuantity.TI, geo),
        CaletHeavy(YQuantity.FE, geo),
        _crdb(exp, kn, YQuantity.NI, lf, "10.1103/PhysRevLett.128.131103", "2022PhRvL.128m1103A"),
        _crdb(exp, XQuantity.RIGIDITY, YQuantity.H_HE, geo, "10.1103/PhysRevLett.130.171002", "2023PhRvL.130q1002A"),
        _crdb(exp, kn, YQuantity.H_HE, geo, "10.1103/PhysRevLett.130.171002", "2023PhRvL.130q1002A"),
        _crdb(exp, kn, YQuantity.B_C, geo, "10.1103/PhysRevLett.129.251103", "2022PhRvL.129y1103A"),
        _crdb(exp, kn, YQuantity.C_O, geo, "10.1103/PhysRevLett.125.251102", "2020PhRvL.125y1102A"),
    ]


def dampe() -> list[CrDataset]:
    """DAMPE datasets."""
    exp = Experiment.DAMPE
    lf = EnergyMode.LAFFERTY2_7
    kn = XQuantity.KINETIC_ENERGY_PER_NUCLEON
    return [
        _crdb(exp, XQuantity.TOTAL_ENERGY, YQuantity.LEPTON, EnergyMode.LAFFERTY3_0, "10.1038/nature24475", "2017Natur.552...63D"),
        _crdb(exp, XQuantity.KINETIC_ENERGY, YQuantity.H, lf, "10.1126/sciadv.aax3793", "2019SciA....5.3793A"),
        _crdb(exp, XQuantity.KINETIC_ENERGY, YQuantity.HE, lf, "10.1103/PhysRevLett.126.201102", "2021PhRvL.126t1102A"),
        DampeBoron(lf),
        DampeLight(lf),
        _crdb(exp, kn, YQuantity.B_C, EnergyMode.GEOMETRICAL, "10.1016/j.scib.2022.10.002", "2022SciBu..67.2162D"),
        _crdb(exp, kn, YQuantity.B_O, EnergyMode.GEOMETRICAL, "10.1016/j.scib.2022.10.002", "2022SciBu..67.2162D"),
    ]


def fermi() -> list[CrDataset]:
    """FERMI-LAT lepton datasets."""
    exp = Experiment.FERMI
    return [
        _crdb(exp, XQuantity.TOTAL_ENERGY, YQuantity.LEPTON, EnergyMode.LAFFERTY3_0, "10.1103/PhysRevD.95.082007", "2017PhRvD..95h2007A"),
        _crdb(exp, XQuantity.KINETIC_ENERGY, YQuantity.ELECTRON, EnergyMode.LAFFERTY3_0, "10.1103/PhysRevLett.108.011103", "2012PhRvL.108a1103A"),
        _crdb(exp, XQuantity.KINETIC_ENERGY, YQuantity.POSITRON, EnergyMode.LAFFERTY3_0, "10.1103/PhysRevLett.108.011103", "2012PhRvL.108a1103A"),
        _crdb(exp, XQuantity.TOTAL_ENERGY, YQuantity.POSITRON_FRACTION, EnergyMode.GEOMETRICAL, "10.1103/PhysRevD.95.082007", "2017PhRvD..95h2007A"),
    ]


def pamela() -> list[CrDataset]:
    """PAMELA datasets."""
    exp = Experiment.PAMELA
    lf = EnergyMode.LAFFERTY2_7
    geo = EnergyMode.GEOMETRICAL
    rig = XQuantity.RIGIDITY
    ek = XQuantity.KINETIC_ENERGY
    return [
        _crdb(exp, rig, YQuantity.H, lf, "10.1126/science.1199172", "2011Sci...332...69A"),
        _crdb(exp, rig, YQuantity.HE, lf, "10.1126/science.1199172", "2011Sci...332...69A"),
        _crdb(exp, rig, YQuantity.C, lf, "10.1088/0004-637X/791/2/93", "2014ApJ...791...93A"),
        _crdb(exp, rig, YQuantity.B_C, geo, "10.1088/0004-637X/791/2/93", "2014ApJ...791...93A"),
        _crdb(exp, XQuantity.KINETIC_ENERGY_PER_NUCLEON, YQuantity.B_C, geo, "10.1088/0004-637X/791/2/93", "2014ApJ...791...93A"),
        _crdb(exp, ek, YQuantity.ANTIPROTON, lf, "10.1134/S002136401222002X", "2013JETPL..96..621A"),
        _crdb(exp, ek, YQuantity.ELECTRON, EnergyMode.LAFFERTY3_0, "10.1103/PhysRevLett.111.081102", "2013PhRvL.111h1102A"),
        _crdb(exp, ek, YQuantity.POSITRON, EnergyMode.LAFFERTY3_0, "10.1103/PhysRevLett.111.081102", "2013PhRvL.111h1102A"),
        _crdb(exp, ek, YQuantity.POSITRON_FRACTION, geo, "10.1103/PhysRevLett.111.081102", "2013PhRvL.111h1102A"),
    ]


def nucleon() -> list[CrDataset]:
    """NUCLEON datasets."""
    exp = Experiment.NUCLEON
    doi = "10.1016/j.asr.2019.10.004"
    ads = "2019AdSpR..64.2546G"
    table = "From Table 2"
    tot = XQuantity.TOTAL_ENERGY
    geo = EnergyMode.GEOMETRICAL
    datasets: list[CrDataset] = [_crdb(exp, tot, YQuantity.ALL_PARTICLE, geo, doi, ads)]
    datasets += [
        _crdb(exp, tot, y, geo, doi, ads, table)
        for y in (
            YQuantity.H,
            YQuantity.HE,
            YQuantity.C,
            YQuantity.O,
            YQuantity.NE,
            YQuantity.MG,
            YQuantity.SI,
            YQuantity.FE,
        )
    ]
    datasets.append(
        _crdb(exp, XQuantity.RIGIDITY, YQuantity.H_HE, geo, "10.1134/S002136402007005X", "2020JETPL.111..363K")
    )
    return datasets


def isscream() -> list[CrDataset]:
    """ISS-CREAM proton dataset."""
    return [
        _crdb(
            Experiment.ISSCREAM,
            XQuantity.KINETIC_ENERGY,
            YQuantity.H,
            EnergyMode.LAFFERTY2_7,
            "10.3847/1538-4357/ac9d2c",
            "2022ApJ...940..107C",
        )
    ]