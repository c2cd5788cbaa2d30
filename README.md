# kisscr

`kisscr` reads published cosmic-ray measurements from several kinds of input
tables and writes them out in one plain, uniform text format, so that spectra
and ratios from different experiments can be plotted and fitted side by side.

Supported inputs:

- **CRDB** text tables: two header lines, then rows of
  `x_lo x_up y stat_lo stat_up syst_lo syst_up`;
- **KCDC** tables: a six-line header, then whitespace-separated tokens of the
  form `E;flux;uncert_low;uncert_high`;
- **SSDC** XML files: an `XML` root holding `DATA` records with rigidity or
  kinetic-energy bin edges and a flux or flux ratio with its errors;
- hand-made tables for individual publications (CALET, DAMPE, HAWC, VERITAS,
  HESS, ARGO-YBJ, TALE, Tibet, GRAPES-3, LHAASO), each with its own column layout.

For binned data the representative x value of each bin is computed in one of
several ways (`kisscr.enums.EnergyMode`): the geometrical mean of the bin
edges, the mean of a power law with slope 2.7 or 3.0, or the Lafferty–Wyatt
point for slope 2.7 or 3.0. A bin whose upper edge does not exceed its lower
edge gets the lower edge.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Command line

```
kisscr [--source-dir DIR] [--output-dir DIR]
```

The command converts a fixed set of datasets: those of BESS, CALET, CREAM,
DAMPE, FERMI, HAWC, ISS-CREAM, NUCLEON and PAMELA, in that order. Input files
are looked up under the source directory (default `source`) at
`<database>/<experiment>[_<description>]_<y>_<x>.txt` (`.xml` for SSDC), for
example `source/CRDB/BESS-TeV_H_kineticEnergy.txt`; hand-made tables live
under `source/mytables/`. Converted tables are written to the output directory
(default `output`, created if missing) as
`<experiment>[_<description>]_<y>_<x>.txt`.

Every dataset prints a line when it is loaded and when it is saved. If an input
file is missing or malformed, the run stops and prints `!Fatal Error:` followed
by the reason; the command still exits with status 0.

## Output format

Each output file starts with a commented header:

```
#Source: CRDB
#Ref: <doi> (<ads bibcode>)
#Experiment: <experiment> [(<description>)]
#Y Quantity: <y>
#X Quantity: <x>
#Url: <url>
#Comments: <comments>
#Colums: x, y, y statistical errors, y systematic errors
```

followed by one row per data point:

```
x y stat_low stat_high syst_low syst_high
```

with every number in scientific notation with three digits after the point.

## Use from Python

The experiment modules return lists of ready-made datasets that can be run
one at a time or together:

```python
from kisscr.dataset import run_all
from kisscr.satellites import calet, dampe
from kisscr.ams02 import datasets as ams02_datasets

run_all(calet() + dampe(), "source", "output")

for dataset in ams02_datasets():
    dataset.run("source", "output")
```

A dataset can also be built by hand; its `url` is checked when set and a
malformed address raises `ValueError`:

```python
from kisscr.crdb import CRDB
from kisscr.enums import EnergyMode, Experiment, XQuantity, YQuantity

dataset = CRDB(Experiment.PAMELA, XQuantity.RIGIDITY, YQuantity.H, EnergyMode.LAFFERTY2_7)
dataset.doi = "10.1126/science.1199172"
dataset.comments = "proton flux"
dataset.load("source")          # reads source/CRDB/PAMELA_H_rigidity.txt
print(dataset.data[0].format())
dataset.save("output")          # writes output/PAMELA_H_rigidity.txt
```

The energy helpers are usable on their own:

```python
from kisscr.energy import mean_energy_geometrical, mean_energy_power_law, split_line

mean_energy_geometrical(10.0, 1000.0)      # 100.0
mean_energy_power_law(10.0, 20.0, 2.7)
split_line("1.0;2.5;0.1")                  # [1.0, 2.5, 0.1]
```

| Module | Contents |
| --- | --- |
| `kisscr.enums` | `Source`, `Experiment`, `XQuantity`, `YQuantity`, `EnergyMode` |
| `kisscr.energy` | `mean_energy` and its estimators, `split_line` |
| `kisscr.datapoint` | `DataPoint` and its text formatting |
| `kisscr.dataset` | the `CrDataset` base class, `validate_url`, `run_all` |
| `kisscr.crdb`, `kisscr.kcdc`, `kisscr.ssdc` | `CRDB`, `KCDC`, `SSDC` readers; `is_flux`, `is_ratio` |
| `kisscr.mytables` | readers for hand-made tables (`CaletLepton`, `CaletHeavy`, `DampeBoron`, `DampeLight`, `HawcLight`, `VeritasLepton`, `HessLepton`, `ArgoLight`, `TaleAll`, `TibetAll`, `GrapesProton`, `LhaasoProton`) |
| `kisscr.ams02` | `leptons`, `antiprotons`, `fluxes`, `ratios`, `datasets` |
| `kisscr.satellites` | `calet`, `dampe`, `fermi`, `pamela`, `nucleon`, `isscream` |
| `kisscr.balloons` | `bess`, `cream`, `tracer` |
| `kisscr.ground` | `argo`, `auger`, `gamma`, `grapes`, `hawc`, `hess`, `icetop`, `kascade_grande`, `kascade`, `lhaaso`, `tale`, `tibet`, `tunka`, `veritas` |
| `kisscr.cli` | `default_datasets` and the `main` entry point |

## What it does not do

- No input tables come with the package; they must be supplied under the
  source directory.
- The command cannot choose which experiments to convert: AMS-02, TRACER and
  the ground experiments other than HAWC are only reachable from Python.
- `kisscr.ground.auger` returns an empty list; no Pierre Auger data is produced.
- Nothing is plotted or fitted; the package only writes text tables.