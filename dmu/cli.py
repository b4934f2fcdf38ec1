"""
Command-line interface for building and inspecting DMU files.

Usage (CLI):
    dmu make --name gama_sizes --table sizes.csv --columns columns.csv \
        --summary "Galaxy sizes" --user "A. Person" --contact a@b.org \
        --script fit_sizes.py --version 1.2 --readme README.txt
    dmu example --output-dir /tmp
    dmu show gama_sizes_17_10_2026_v1.2.pkl.gz

``columns.csv`` holds one row per catalogue column, in table order, with
``description``, ``ucd`` and ``unit`` columns.
"""

import argparse
import json
import sys

import pandas as pd

from dmu import config
from dmu.errors import DMUError
from dmu.example import example_inputs
from dmu.logging_config import get_dmu_logger, setup_logging
from dmu.packager import make_dmu, read_dmu
from dmu.report import describe_dmu

log = get_dmu_logger(__name__)

_COLUMN_FILE_FIELDS = ("description", "ucd", "unit")


def _read_text(path):
    with open(path) as f:
        return f.read()


def load_column_file(path):
    """Read the per-column descriptor CSV into three lists."""
    cols = pd.read_csv(path, dtype=str, keep_default_na=False)
    missing = [c for c in _COLUMN_FILE_FIELDS if c not in cols.columns]
    if missing:
        raise ValueError(
            f"Column file {path} is missing columns: {', '.join(missing)}"
        )
    return (
        cols["description"].tolist(),
        cols["ucd"].tolist(),
        cols["unit"].tolist(),
    )


def _cmd_make(args):
    table = pd.read_csv(args.table)
    descriptions, ucds, units = load_column_file(args.columns)
    extra = None
    if args.extra:
        with open(args.extra) as f:
            extra = json.load(f)

    make_dmu(
        args.name,
        table,
        args.summary,
        args.user,
        args.contact,
        args.script,
        args.version,
        descriptions,
        ucds,
        units,
        _read_text(args.readme),
        extra=extra,
        test_mode=args.test,
        output_dir=args.output_dir,
    )


def _cmd_example(args):
    make_dmu(**example_inputs(seed=args.seed), test_mode=True,
             output_dir=args.output_dir)


def _cmd_show(args):
    print(describe_dmu(read_dmu(args.path)))


def build_parser():
    parser = argparse.ArgumentParser(
        prog="dmu",
        description="Package a catalogue and its metadata into a DMU file",
    )
    parser.add_argument("--log-dir", default=None,
                        help="Directory for JSON Lines log output")
    sub = parser.add_subparsers(dest="command", required=True)

    make = sub.add_parser("make", help="Build a DMU from CSV inputs")
    make.add_argument("--name", required=True)
    make.add_argument("--table", required=True,
                      help="Catalogue CSV file")
    make.add_argument("--columns", required=True,
                      help="CSV with description,ucd,unit per table column "
                           f"(UCDs: {config.UCD_REFERENCE_URL})")
    make.add_argument("--summary", required=True)
    make.add_argument("--user", required=True)
    make.add_argument("--contact", required=True)
    make.add_argument("--script", required=True)
    make.add_argument("--version", required=True)
    make.add_argument("--readme", required=True,
                      help="Text file holding the README")
    make.add_argument("--extra", default=None,
                      help="JSON file attached to the DMU as 'added'")
    make.add_argument("--output-dir", default=".")
    make.add_argument("--test", action="store_true",
                      help="Allow placeholder values")
    make.set_defaults(func=_cmd_make)

    example = sub.add_parser("example",
                             help="Build the documentation example DMU")
    example.add_argument("--output-dir", default=".")
    example.add_argument("--seed", type=int, default=None)
    example.set_defaults(func=_cmd_example)

    show = sub.add_parser("show", help="Describe an existing DMU file")
    show.add_argument("path")
    show.set_defaults(func=_cmd_show)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.log_dir:
        setup_logging(log_dir=args.log_dir)

    try:
        args.func(args)
    except (DMUError, FileNotFoundError, ValueError) as exc:
        log.error("%s failed: %s", args.command, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
