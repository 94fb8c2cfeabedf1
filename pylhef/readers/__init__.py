#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Streaming LHEF reader

* :class:`~pylhef.readers.lhef.LHEFReader`: pull-based event reader
* :func:`~pylhef.readers.lhef.decode_run_record`: ``<init>`` body decoder
* :func:`~pylhef.readers.lhef.decode_event_record`: ``<event>`` body decoder
"""

from __future__ import annotations

from pylhef.readers.lhef import LHEFReader, decode_event_record, decode_run_record

__all__ = ["LHEFReader", "decode_run_record", "decode_event_record"]
