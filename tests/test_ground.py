from pathlib import Path

import pytest

from kisscr.crdb import CRDB
from kisscr.enums import EnergyMode, Experiment, Source, YQuantity
from kisscr.ground import (
    argo,
    auger,
    gamma,
    grapes,
    hawc,
    hess,
    icetop,
    kascade,
    kascade_grande,
    lhaaso,
    tale,
    tibet,
    tunka,
    veritas,
)
from kisscr.kcdc import KCDC
from kisscr.mytables import ArgoLight, GrapesProton, HessLepton, TibetAll, VeritasLepton


def test_output_filenames_unique():
    for datasets in (
        argo(),
        auger(),
        gamma(),
        grapes(),
        hawc(),
        hess(),
        icetop(),
        kascade(),
        kascade_grande(),
        lhaaso(),
        tale(),
        tibet(),
        tunka(),
        veritas(),
    ):
        names = [d.output_filename() for d in datasets]
        assert len(set(names)) == len(names)


def test_auger_is_empty():
    assert auger() == []


def test_single_table_experiments():
    assert [type(d) for d in argo()] == [ArgoLight]
    assert [type(d) for d in grapes()] == [GrapesProton]
    assert [type(d) for d in veritas()] == [VeritasLepton]
    assert argo()[0].energy_mode is EnergyMode.GEOMETRICAL


def test_gamma_contents():
    datasets = gamma()
    assert [d.y_quantity for d in datasets] == [YQuantity.ALL_PARTICLE, YQuantity.H, YQuantity.HE]
    assert all(d.doi == "10.1103/PhysRevD.89.123003" for d in datasets)


def test_hess_lepton_metadata():
    iron, lepton = hess()
    assert iron.y_quantity is YQuantity.FE
    assert isinstance(lepton, HessLepton)
    assert lepton.ads == "2009A&A...508..561A"
    assert lepton.url.endswith("auxinfo_electrons2.html")
    assert lepton.comments == "systematic errors not official, derived from URL"


def test_icetop_descriptions():
    assert [d.description for d in icetop()] == [
        "IceCube_SIBYLL-2.1",
        "IceCube_SIBYLL-2.1",
        "IceCube_SIBYLL-2.1",
        "",
        "SIBYLL-2.1",
        "QGSJet-II-04",
    ]
    assert icetop()[0].output_filename() == "IceTop_IceCube_SIBYLL-2.1_allParticle_totalEnergy.txt"


def test_kascade_grande_count_and_source():
    datasets = kascade_grande()
    assert len(datasets) == 7
    assert all(d.experiment is Experiment.KASCADE_GRANDE for d in datasets)
    assert sum(d.y_quantity is YQuantity.LIGHT for d in datasets) == 3


def test_kascade_mixes_sources():
    datasets = kascade()
    assert len(datasets) == 13
    assert sum(isinstance(d, KCDC) for d in datasets) == 9
    assert sum(isinstance(d, CRDB) for d in datasets) == 4
    assert all(d.energy_mode is EnergyMode.UNKNOWN for d in datasets)
    assert datasets[2].comments == "From Marcel Finger PhD Thesis"
    assert datasets[0].source_filename() == "KCDC/KASCADE_2005_QGSJET-01_allParticle_totalEnergy.txt"


def test_kascade_crdb_unknown_mode_rejects_wide_bin(tmp_path: Path):
    dataset = next(d for d in kascade() if isinstance(d, CRDB))
    source = tmp_path / dataset.source_filename()
    source.parent.mkdir(parents=True)
    source.write_text("h\nh\n1 2 3 0 0 0 0\n", encoding="utf-8")
    with pytest.raises(ValueError):
        dataset.load(tmp_path)


def test_lhaaso_descriptions():
    assert [d.description for d in lhaaso()] == ["QGSJETII-04", "EPOS-LHC"]


def test_tale_and_tibet():
    assert tale()[1].experiment is Experiment.TA
    datasets = tibet()
    assert [d.description for d in datasets[:3]] == ["QGSJET+HD", "QGSJET+PD", "SIBYLL+HD"]
    assert all(isinstance(d, TibetAll) for d in datasets[:3])
    assert datasets[3].source is Source.CRDB
    assert datasets[3].doi == "not available"


def test_tunka_run_round_trip(tmp_path: Path):
    dataset = tunka()[1]
    assert dataset.ads == "2014NIMPA.756...94P "
    source = tmp_path / "source" / dataset.source_filename()
    source.parent.mkdir(parents=True)
    source.write_text("h\nh\n7 7 4 0.5 0.5 1 1\n", encoding="utf-8")
    out = dataset.run(tmp_path / "source", tmp_path / "output")
    lines = out.read_text(encoding="utf-8").splitlines()
    assert "#Comments: Model: QGSJet01" in lines
    assert lines[-1] == "7.000e+00 4.000e+00 5.000e-01 5.000e-01 1.000e+00 1.000e+00 "