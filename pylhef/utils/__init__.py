#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Low-level building blocks shared by the reader

This sub-package holds the tag scanner, the whitespace token stream, the
numeric token conversions, and the format constants, so that the reader
module only contains the record layout logic.
"""

from __future__ import annotations
