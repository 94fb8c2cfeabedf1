#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for PyLHEF tests

Provides synthetic LHEF documents for testing the scanner, the record
decoders and the reader without requiring generator output files.
"""

from __future__ import annotations

import io
from typing import Callable

import pytest

from pylhef.readers.lhef import LHEFReader

MADGRAPH_DOCUMENT = """\
<LesHouchesEvents version="3.0">
<!--
File generated with MadGraph5_aMC@NLO
-->
<header>
<MGVersion>
3.5.1
</MGVersion>
<initrwgt>
<weightgroup name="scale_variation" combine="envelope">
<weight id="2"> dyn_scale_choice=0 MUR=2.0 </weight>
</weightgroup>
</initrwgt>
</header>
<init>
2212 2212 6.500000e+03 6.500000e+03 0 0 247000 247000 -4 2
 5.0e+02 1.0e+00 5.0e+02 1
 2.5e+02 5.0e-01 2.5e+02 2
<generator name='MadGraph5_aMC@NLO' version='3.5.1'>please cite 1405.0301 </generator>
</init>
<event>
 4      1 +5.0000000e+02 9.11876000e+01 7.54677100e-03 1.30000000e-01
       21 -1    0    0  501  502 +0.0000000000e+00 +0.0000000000e+00 +4.5000000000e+02 4.5000000000e+02 0.0000000000e+00 0.0000e+00 9.0000e+00
       21 -1    0    0  502  501 -0.0000000000e+00 -0.0000000000e+00 -4.5000000000e+02 4.5000000000e+02 0.0000000000e+00 0.0000e+00 9.0000e+00
       11  1    1    2    0    0 +1.0000000000e+01 +2.0000000000e+01 +3.0000000000e+01 4.0000000000e+02 5.1100000000e-04 0.0000e+00 -1.0000e+00
      -11  1    1    2    0    0 -1.0000000000e+01 -2.0000000000e+01 -3.0000000000e+01 5.0000000000e+02 5.1100000000e-04 0.0000e+00 1.0000e+00
<mgrwt>
<rscale>  0 0.91187600E+02</rscale>
</mgrwt>
<rwgt>
<wgt id='2'> +4.8000000e+02 </wgt>
</rwgt>
</event>
<event>
 2      2 +2.5000000e+02 9.1000000e+01 7.5000000e-03 1.3000000e-01
       21 -1 0 0 501 502 0 0 100 100 0 0 9
       21 -1 0 0 502 501 0 0 -100 100 0 0 9
</event>
</LesHouchesEvents>
"""
"""A MadGraph-style LHEF 3.0 document with a header, two processes and two events."""

ONE_EVENT_DOCUMENT = (
    "<init>1 -1 7000.0 7000.0 0 0 1 1 3 1  1.0 0.1 2.0 101</init>"
    "<event>2 101 1.0 100.0 0.1 0.1  "
    "21 -1 0 0 0 0 0 0 50 50 0 0 9  "
    "21 -1 0 0 0 0 0 0 -50 50 0 0 9</event>"
)
"""One process (LPRUP 101) and one event with two particles, all on one line."""

EMPTY_RUN_INIT = "<init>1 -1 7000.0 7000.0 0 0 1 1 3 0</init>"
"""A run record declaring zero processes."""


def make_document(n_events: int) -> str:
    """Build a minimal document with *n_events* single-particle events."""
    events = "".join(
        f"<event>\n1 7 {i + 1}.0 91.2 0.0078 0.118\n"
        f"22 1 0 0 0 0 0.0 0.0 {i + 1}.0 {i + 1}.0 0.0 0.0 9.0\n</event>\n"
        for i in range(n_events)
    )
    return f"{EMPTY_RUN_INIT}\n{events}"


class FailingStream:
    """Stream whose ``read`` always raises *error* (an :class:`OSError` by default)"""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error if error is not None else OSError("device not ready")

    def read(self, size: int = -1) -> str:
        raise self.error


@pytest.fixture
def madgraph_document() -> str:
    return MADGRAPH_DOCUMENT


@pytest.fixture
def one_event_document() -> str:
    return ONE_EVENT_DOCUMENT


@pytest.fixture
def make_reader() -> Callable[..., LHEFReader]:
    """Factory building a reader over an in-memory text document"""

    def _make(text: str, **kwargs) -> LHEFReader:
        return LHEFReader(io.StringIO(text), **kwargs)

    return _make


@pytest.fixture
def lhef_file(tmp_path):
    """Write :data:`MADGRAPH_DOCUMENT` to a plain ``.lhe`` file"""
    path = tmp_path / "events.lhe"
    path.write_text(MADGRAPH_DOCUMENT)
    return path
