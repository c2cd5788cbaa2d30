from pathlib import Path

from kisscr.cli import default_datasets, main
from kisscr.enums import Experiment, Source

_ROW = " ".join(["2.0"] * 280)
_TABLE = "#header\n" + f"{_ROW}\n" * 2


def _write_sources(source_dir: Path, datasets) -> None:
    for dataset in datasets:
        path = source_dir / dataset.source_filename()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(_TABLE, encoding="utf-8")


def _experiment_order(datasets):
    order = []
    for dataset in datasets:
        if not order or order[-1] is not dataset.experiment:
            order.append(dataset.experiment)
    return order


def test_default_datasets_run_experiments_in_order():
    assert _experiment_order(default_datasets()) == [
        Experiment.BESS,
        Experiment.CALET,
        Experiment.CREAM,
        Experiment.DAMPE,
        Experiment.FERMI,
        Experiment.HAWC,
        Experiment.ISSCREAM,
        Experiment.NUCLEON,
        Experiment.PAMELA,
    ]


def test_default_datasets_have_distinct_output_names():
    names = [dataset.output_filename() for dataset in default_datasets()]
    assert len(names) == len(set(names))


def test_default_datasets_start_with_bess_proton():
    first = default_datasets()[0]
    assert first.output_filename() == "BESS-TeV_H_kineticEnergy.txt"
    assert first.source is Source.CRDB


def test_main_reports_missing_source_and_returns_zero(tmp_path, capsys):
    result = main(["--source-dir", str(tmp_path / "missing"), "--output-dir", str(tmp_path / "out")])
    assert result == 0
    out = capsys.readouterr().out
    assert "!Fatal Error:" in out
    assert "file not found!" in out
    assert not (tmp_path / "out").exists()


def test_main_stops_at_first_failure(tmp_path, capsys):
    datasets = default_datasets()
    source_dir = tmp_path / "source"
    output_dir = tmp_path / "output"
    _write_sources(source_dir, datasets[:1])
    assert main(["--source-dir", str(source_dir), "--output-dir", str(output_dir)]) == 0
    assert (output_dir / datasets[0].output_filename()).is_file()
    assert not (output_dir / datasets[1].output_filename()).exists()
    assert "!Fatal Error:" in capsys.readouterr().out


def test_main_converts_every_default_dataset(tmp_path, capsys):
    datasets = default_datasets()
    source_dir = tmp_path / "source"
    output_dir = tmp_path / "output"
    _write_sources(source_dir, datasets)

    assert main(["--source-dir", str(source_dir), "--output-dir", str(output_dir)]) == 0
    out = capsys.readouterr().out
    assert "!Fatal Error" not in out

    written = sorted(path.name for path in output_dir.iterdir())
    assert written == sorted(dataset.output_filename() for dataset in datasets)

    bess_lines = (output_dir / "BESS-TeV_H_kineticEnergy.txt").read_text(encoding="utf-8").splitlines()
    assert bess_lines[0] == "#Source: CRDB"
    assert bess_lines[1] == "#Ref: 10.1016/j.astropartphys.2007.05.001 (2007APh....28..154S)"
    assert bess_lines[7] == "#Colums: x, y, y statistical errors, y systematic errors"
    assert len(bess_lines) > 8
    assert all(line == "2.000e+00 " * 6 for line in bess_lines[8:])