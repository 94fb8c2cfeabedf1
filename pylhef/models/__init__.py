#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed dataclass models for parsed LHEF records

All models are plain ``dataclasses`` carrying NumPy arrays and scalar
metadata.  They are the sole output format of the reader layer.
"""

from __future__ import annotations

from pylhef.models.records import EventRecord, Particle, RunRecord

__all__ = ["RunRecord", "EventRecord", "Particle"]
