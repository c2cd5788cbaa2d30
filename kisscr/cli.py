"""Command that converts the default set of cosmic-ray datasets."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from kisscr.balloons import bess, cream
from kisscr.dataset import CrDataset, run_all
from kisscr.ground import hawc
from kisscr.satellites import calet, dampe, fermi, isscream, nucleon, pamela


def default_datasets() -> list[CrDataset]:
    """Datasets converted by the command, in the order they are run."""
    return [
        *bess(),
        *calet(),
        *cream(),
        *dampe(),
        *fermi(),
        *hawc(),
        *isscream(),
        *nucleon(),
        *pamela(),
    ]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kisscr",
        description="Convert cosmic-ray source tables into a uniform text format.",
    )
    parser.add_argument(
        "--source-dir",
        default="source",
        help="directory holding the source tables (default: %(default)s)",
    )
    parser.add_argument(
        "--output-dir",
        default="output",
        help="directory the converted tables are written to (default: %(default)s)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run every default dataset; a failure stops the run and is reported."""
    args = _parser().parse_args(argv)
    try:
        run_all(default_datasets(), args.source_dir, args.output_dir)
    except Exception as error:  # noqa: BLE001 - any failure ends the run with a report
        print(f"!Fatal Error: {error}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())