#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
File helpers for opening plain and gzip-compressed LHEF files

See :func:`pylhef.io.files.open_lhef`.
"""

from __future__ import annotations

from pylhef.io.files import open_lhef, open_stream

__all__ = ["open_lhef", "open_stream"]
