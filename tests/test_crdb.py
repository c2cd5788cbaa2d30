import pytest

from kisscr.crdb import CRDB
from kisscr.datapoint import DataPoint
from kisscr.energy import mean_energy
from kisscr.enums import EnergyMode, Experiment, Source, XQuantity, YQuantity

TABLE = """# header one
# header two
1.0 4.0 10.0 0.1 0.2 0.3 0.4
4.0 9.0 5.0 0.01 0.02 0.03 0.04
"""


def _dataset(mode=EnergyMode.GEOMETRICAL):
    return CRDB(Experiment.PAMELA, XQuantity.RIGIDITY, YQuantity.H, mode)


def test_source_and_url():
    dataset = _dataset()
    assert dataset.source is Source.CRDB
    assert dataset.url == "https://lpsc.in2p3.fr/crdb"
    assert dataset.source_filename() == "CRDB/PAMELA_H_rigidity.txt"


@pytest.mark.parametrize("mode", [EnergyMode.GEOMETRICAL, EnergyMode.LAFFERTY2_7, EnergyMode.PL3_0])
def test_read_file(tmp_path, mode):
    path = tmp_path / "table.txt"
    path.write_text(TABLE, encoding="utf-8")
    dataset = _dataset(mode)
    dataset.read_file(path)
    assert dataset.data == [
        DataPoint(mean_energy(1.0, 4.0, mode), 10.0, 0.1, 0.2, 0.3, 0.4),
        DataPoint(mean_energy(4.0, 9.0, mode), 5.0, 0.01, 0.02, 0.03, 0.04),
    ]


def test_degenerate_bin_uses_lower_edge(tmp_path):
    path = tmp_path / "table.txt"
    path.write_text("h\nh\n5.0 5.0 1.0 0 0 0 0\n", encoding="utf-8")
    dataset = _dataset()
    dataset.read_file(path)
    assert dataset.data == [DataPoint(5.0, 1.0)]


def test_incomplete_record_dropped(tmp_path):
    path = tmp_path / "table.txt"
    path.write_text("h\nh\n1 4 2 0 0 0 0\n1 4 2\n", encoding="utf-8")
    dataset = _dataset()
    dataset.read_file(path)
    assert len(dataset.data) == 1


def test_last_record_without_newline_kept(tmp_path):
    path = tmp_path / "table.txt"
    path.write_text("h\nh\n1 4 2 0 0 0 0", encoding="utf-8")
    dataset = _dataset()
    dataset.read_file(path)
    assert [p.y for p in dataset.data] == [2.0]


def test_reading_stops_at_text(tmp_path):
    path = tmp_path / "table.txt"
    path.write_text("h\nh\n1 4 2 0 0 0 0\nend of table\n1 4 3 0 0 0 0\n", encoding="utf-8")
    dataset = _dataset()
    dataset.read_file(path)
    assert [p.y for p in dataset.data] == [2.0]


def test_run_writes_output(tmp_path):
    dataset = _dataset()
    source = tmp_path / "source" / dataset.source_filename()
    source.parent.mkdir(parents=True)
    source.write_text(TABLE, encoding="utf-8")
    path = dataset.run(tmp_path / "source", tmp_path / "output")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "#Source: CRDB"
    assert lines[-1] == dataset.data[-1].format()
    assert len(lines) == 8 + len(dataset.data)