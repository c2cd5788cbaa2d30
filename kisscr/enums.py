"""Enumerations naming data sources, experiments, axes and bin-centre modes."""

from __future__ import annotations

from enum import Enum


class _Labelled(Enum):
    """An enum whose value is the label used in file names and headers."""

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.value


class Source(_Labelled):
    """Database or table collection a dataset comes from."""

    CRDB = "CRDB"
    KCDC = "KCDC"
    SSDC = "SSDC"
    MYTABLES = "mytables"


class Experiment(_Labelled):
    """Cosmic-ray experiments."""

    AMS02 = "AMS-02"
    ARGO = "ARGO-YBJ"
    AUGER2019 = "Auger2019"
    AUGER2021 = "Auger2021"
    BESS = "BESS-TeV"
    BESS_POLAR = "BESS-PolarII"
    CALET = "CALET"
    CREAM = "CREAM"
    DAMPE = "DAMPE"
    FERMI = "FERMI"
    GAMMA = "GAMMA"
    GRAPES = "GRAPES"
    HAWC = "HAWC"
    HESS = "HESS"
    ICETOP = "IceTop"
    ISSCREAM = "ISS-CREAM"
    KASCADE_GRANDE = "KASCADE-Grande"
    KASCADE = "KASCADE"
    LHAASO = "LHAASO"
    MAKET = "Maket-ANI"
    NUCLEON = "NUCLEON"
    PAMELA = "PAMELA"
    RUNJOB = "RUNJOB"
    TA = "TA"
    TALE = "TALE"
    TIBET = "Tibet"
    TRACER = "TRACER"
    TUNKA133 = "TUNKA-133"
    TUNKAREX = "TUNKA-Rex"
    VERITAS = "VERITAS"


class XQuantity(_Labelled):
    """Quantity on the x axis of a dataset."""

    RIGIDITY = "rigidity"
    TOTAL_ENERGY = "totalEnergy"
    KINETIC_ENERGY = "kineticEnergy"
    KINETIC_ENERGY_PER_NUCLEON = "kineticEnergyPerNucleon"


class YQuantity(_Labelled):
    """Quantity on the y axis of a dataset: a flux or a flux ratio."""

    ALL_PARTICLE = "allParticle"
    ELECTRON = "e-"
    POSITRON = "e+"
    LEPTON = "e+e-"
    ANTIPROTON = "pbar"
    POSITRON_FRACTION = "posfraction"
    LIGHT = "light"
    H = "H"
    HE = "He"
    LI = "Li"
    BE = "Be"
    B = "B"
    C = "C"
    N = "N"
    O = "O"  # noqa: E741
    F = "F"
    NE = "Ne"
    NA = "Na"
    MG = "Mg"
    AL = "Al"
    SI = "Si"
    P = "P"
    S = "S"
    CL = "Cl"
    AR = "Ar"
    K = "K"
    CA = "Ca"
    SC = "Sc"
    TI = "Ti"
    V = "V"
    CR = "Cr"
    MN = "Mn"
    FE = "Fe"
    NI = "Ni"
    H_ELECTRON = "H_e-"
    H_POSITRON = "H_e+"
    ANTIPROTON_POSITRON = "pbar_e+"
    B_C = "B_C"
    B_O = "B_O"
    BE_B = "Be_B"
    BE_C = "Be_C"
    BE_O = "Be_O"
    C_O = "C_O"
    F_B = "F_B"
    F_SI = "F_Si"
    FE_HE = "Fe_He"
    FE_O = "Fe_O"
    FE_SI = "Fe_Si"
    H_HE = "H_He"
    HE_O = "He_O"
    LI_B = "Li_B"
    LI_C = "Li_C"
    LI_O = "Li_O"
    MG_O = "Mg_O"
    N_B = "N_B"
    N_O = "N_O"
    NE_MG = "Ne_Mg"
    NE_O = "Ne_O"
    SI_MG = "Si_Mg"
    SI_O = "Si_O"


class EnergyMode(_Labelled):
    """How the representative x value of a bin is computed."""

    GEOMETRICAL = "Geometrical mean"
    PL2_7 = "Power-law with slope 2.7"
    PL3_0 = "Power-law with slope 3.0"
    LAFFERTY2_7 = "Lafferty and Wyatt (1995) with slope 2.7"
    LAFFERTY3_0 = "Lafferty and Wyatt (1995) with slope 3.0"
    UNKNOWN = "Unknown"