#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyLHEF command-line interface

Provides two inspection commands:

1. **summary**: Run information and event totals for one or more files
2. **events**: One line per event (particle count, process, weight, scale)

Usage
-----
::

    # Summarise a MadGraph output file
    python -m pylhef.cli summary unweighted_events.lhe.gz

    # Only look at the first 1000 events of several files
    python -m pylhef.cli summary run_*.lhe --max-events 1000

    # List the first 10 events
    python -m pylhef.cli events unweighted_events.lhe.gz --limit 10
"""

from __future__ import annotations

import argparse
import logging
import sys
import time

from pylhef.exceptions import LHEFError
from pylhef.io.files import open_lhef
from pylhef.readers.lhef import LHEFReader
from pylhef.utils.constants import DEFAULT_CHUNK_SIZE

logger = logging.getLogger("pylhef.cli")


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------

def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def _print_run(reader: LHEFReader) -> None:
    run = reader.run_record
    print(f"  Version:      {reader.version or 'unspecified'}")
    print(f"  Header:       {'yes' if reader.header is not None else 'no'}")
    print(
        f"  Beams:        {run.beam_ids[0]} ({run.beam_energies[0]:g} GeV) x "
        f"{run.beam_ids[1]} ({run.beam_energies[1]:g} GeV)"
    )
    print(f"  PDF sets:     {run.pdf_sets[0]}, {run.pdf_sets[1]}")
    print(f"  Weighting:    IDWTUP={run.weighting_strategy}")
    print(f"  Processes:    {run.n_processes}")
    for pid, xs, err in zip(run.process_ids, run.cross_sections, run.cross_section_errors):
        print(f"    LPRUP={int(pid):<8d} xs = {xs:.6e} +- {err:.6e} pb")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_summary(args):
    """Print run information and event totals for each file."""
    total_fail = 0

    for path in args.files:
        print(f"\n{'=' * 60}")
        print(f"  {path}")
        print(f"{'=' * 60}")
        try:
            with open_lhef(path, chunk_size=args.chunk_size) as reader:
                _print_run(reader)
                n_events = 0
                weight_sum = 0.0
                while args.max_events is None or n_events < args.max_events:
                    event = reader.next_event()
                    if event is None:
                        break
                    n_events += 1
                    weight_sum += event.weight
        except LHEFError as exc:
            print(f"  FAIL: {exc}")
            total_fail += 1
            if not args.continue_on_error:
                return 1
            continue

        print(f"  Events read:  {n_events}")
        print(f"  Weight sum:   {weight_sum:.6e}")

    return 0 if total_fail == 0 else 1


def cmd_events(args):
    """Print one line per event."""
    total_fail = 0

    for path in args.files:
        print(f"# {path}")
        print(f"# {'event':>6s} {'NUP':>5s} {'IDPRUP':>8s} {'XWGTUP':>14s} {'SCALUP':>14s}")
        try:
            with open_lhef(path, chunk_size=args.chunk_size) as reader:
                while args.limit is None or reader.events_read < args.limit:
                    event = reader.next_event()
                    if event is None:
                        break
                    print(
                        f"{reader.events_read:8d} {event.n_particles:5d} "
                        f"{event.process_id:8d} {event.weight:14.6e} {event.scale:14.6e}"
                    )
        except LHEFError as exc:
            print(f"FAIL: {exc}")
            total_fail += 1
            if not args.continue_on_error:
                return 1

    return 0 if total_fail == 0 else 1


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="pylhef",
        description="Inspect Les Houches Event Files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
    python -m pylhef.cli summary events.lhe.gz                 # run info + totals
    python -m pylhef.cli summary a.lhe b.lhe --max-events 100  # first 100 events each
    python -m pylhef.cli events events.lhe --limit 10          # first 10 events
""",
    )

    # Common arguments
    parser.add_argument(
        "--chunk-size",
        type=_positive_int,
        default=DEFAULT_CHUNK_SIZE,
        help=f"Bytes read from the file at a time (default: {DEFAULT_CHUNK_SIZE})",
    )
    parser.add_argument(
        "--continue-on-error",
        action="store_true",
        help="Continue with the next file after an error",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    # Subcommands
    sub = parser.add_subparsers(dest="command", help="Command to run")

    p_summary = sub.add_parser("summary", help="Summarise run information and events")
    p_summary.add_argument("files", nargs="+", help="LHEF files (plain or gzip)")
    p_summary.add_argument(
        "--max-events",
        type=int,
        default=None,
        help="Stop after this many events per file (default: read all)",
    )

    p_events = sub.add_parser("events", help="List events one per line")
    p_events.add_argument("files", nargs="+", help="LHEF files (plain or gzip)")
    p_events.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of events to list per file (default: all)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    t0 = time.time()

    commands = {
        "summary": cmd_summary,
        "events": cmd_events,
    }

    rc = commands[args.command](args)
    elapsed = time.time() - t0
    logger.info("Completed in %.1fs", elapsed)
    return rc


if __name__ == "__main__":
    sys.exit(main())
