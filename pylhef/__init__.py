#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyLHEF - Python library for reading Les Houches Event Files

Stream events out of LHEF files written by Monte Carlo event generators
(MadGraph, POWHEG, Sherpa, ...) without loading the whole file into
memory.  The run-level ``<init>`` record and each ``<event>`` record are
decoded into typed dataclasses backed by NumPy arrays.

Usage
-----
1. **Open** a plain or gzipped file:
   ``with open_lhef("events.lhe.gz") as reader: ...``

2. **Inspect** the run record:
   ``reader.run_record.cross_sections``

3. **Pull** events one at a time:
   ``reader.next_event()`` or ``for event in reader: ...``

4. **Summarise** from the shell:
   ``python -m pylhef.cli summary events.lhe.gz``

Modules
-------
readers
    The streaming reader and the two record decoders.
models
    Typed dataclass records returned by the reader.
io
    Helpers for opening plain and gzip-compressed files.
utils
    Tag scanner, token stream, numeric parsing and format constants.

Examples
--------
>>> from pylhef import open_lhef
>>> with open_lhef("unweighted_events.lhe.gz") as reader:
...     print(reader.run_record.beam_energies)
...     for event in reader:
...         print(event.n_particles, event.weight)
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Melek Derman"

from pylhef.readers.lhef import LHEFReader, decode_event_record, decode_run_record
from pylhef.models.records import EventRecord, Particle, RunRecord
from pylhef.io.files import open_lhef
from pylhef.exceptions import (
    LHEFError,
    LHEFIOError,
    ParseError,
    MalformedTagError,
    MissingInitError,
    NumberFormatError,
    UnexpectedEndError,
    UnsupportedVersionError,
    ReaderStateError,
)

__all__ = [
    # Version
    "__version__",
    # Reader
    "LHEFReader",
    "decode_run_record",
    "decode_event_record",
    "open_lhef",
    # Models
    "RunRecord",
    "EventRecord",
    "Particle",
    # Exceptions
    "LHEFError",
    "LHEFIOError",
    "ParseError",
    "MalformedTagError",
    "MissingInitError",
    "NumberFormatError",
    "UnexpectedEndError",
    "UnsupportedVersionError",
    "ReaderStateError",
]
