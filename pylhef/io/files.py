#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Open LHEF files from disk

Event generators usually write ``.lhe`` files gzip-compressed.  The
compression is detected from the file's leading bytes rather than its
name, so ``events.lhe`` that is actually gzipped opens correctly too.

Examples
--------
>>> from pylhef.io.files import open_lhef
>>> with open_lhef("unweighted_events.lhe.gz") as reader:
...     n = sum(1 for _ in reader)
"""

from __future__ import annotations

import gzip
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator

from pylhef.exceptions import LHEFIOError
from pylhef.readers.lhef import LHEFReader
from pylhef.utils.constants import DEFAULT_CHUNK_SIZE, GZIP_MAGIC

logger = logging.getLogger(__name__)


def is_gzip_file(path: Path | str) -> bool:
    """Return ``True`` if the file at *path* starts with the gzip magic bytes."""
    with open(path, "rb") as fh:
        return fh.read(len(GZIP_MAGIC)) == GZIP_MAGIC


def open_stream(path: Path | str) -> IO[bytes]:
    """Open *path* as a binary stream, decompressing gzip transparently

    Raises
    ------
    LHEFIOError
        If the file does not exist or cannot be opened.
    """
    filepath = Path(path)
    if not filepath.is_file():
        raise LHEFIOError(f"LHEF file not found: {filepath}")
    try:
        if is_gzip_file(filepath):
            logger.debug("Opening gzip-compressed LHEF file: %s", filepath)
            return gzip.open(filepath, "rb")
        logger.debug("Opening LHEF file: %s", filepath)
        return open(filepath, "rb")
    except OSError as exc:
        raise LHEFIOError(f"Failed to open {filepath}: {exc}") from exc


@contextmanager
def open_lhef(
    path: Path | str,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Iterator[LHEFReader]:
    """Open an LHEF file and yield a reader over it

    The file is closed when the ``with`` block exits, including when
    constructing the reader fails.

    Parameters
    ----------
    path : Path | str
        Path to a plain or gzip-compressed LHEF file.
    chunk_size : int, optional
        Bytes requested from the file per read.

    Yields
    ------
    LHEFReader
        Reader positioned after the ``<init>`` element.

    Raises
    ------
    LHEFIOError
        If the file cannot be opened or read.
    ParseError
        If the header or run record is malformed.
    """
    stream = open_stream(path)
    try:
        yield LHEFReader(stream, chunk_size=chunk_size)
    finally:
        stream.close()
