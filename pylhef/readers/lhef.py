#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Streaming reader for Les Houches Event Files

:class:`LHEFReader` reads the optional header and the mandatory run
record on construction, then hands out events one at a time through
:meth:`LHEFReader.next_event`.  Only the current element body is ever
held in memory, so files of any size can be processed.

Document Shape
--------------
::

    <?xml ...?>?  <!-- ... -->*
    (<LesHouchesEvents version="X">)?
    (<header> TEXT </header>)?
    <init> RUN-RECORD-TEXT </init>
    (<event> EVENT-RECORD-TEXT </event>)*
    (</LesHouchesEvents>)?

Record Decoding
---------------
Both records start with a fixed block of scalars, one of which is a count
that fixes how many further groups of fields follow.  The decoders read
exactly that many tokens; any text after them is kept verbatim as the
record's ``info`` field and is never interpreted.

References
----------
.. [1] J. Alwall et al., "A standard format for Les Houches Event Files",
   Comput. Phys. Commun. 176 (2007) 300, hep-ph/0609017.
.. [2] J. Butterworth et al., "Les Houches 2013: Physics at TeV Colliders:
   Standard Model Working Group Report", arXiv:1405.1067 (LHEF 3.0).
"""

from __future__ import annotations

import logging
from typing import IO

import numpy as np

from pylhef.exceptions import (
    MalformedTagError,
    MissingInitError,
    ReaderStateError,
    UnexpectedEndError,
    UnsupportedVersionError,
)
from pylhef.models.records import EventRecord, RunRecord
from pylhef.utils.constants import (
    DEFAULT_CHUNK_SIZE,
    DOCUMENT_TAG,
    EVENT_FIXED_FIELDS,
    EVENT_TAG,
    HEADER_TAG,
    INIT_TAG,
    PARTICLE_FIELDS,
    PROCESS_FIELDS,
    RUN_FIXED_FIELDS,
    SUPPORTED_VERSIONS,
    VERSION_ATTRIBUTE,
)
from pylhef.utils.scanner import (
    CloseTag,
    Comment,
    Declaration,
    Marker,
    OpenTag,
    TagScanner,
    Text,
)
from pylhef.utils.tokens import TokenStream

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Record decoders
# ---------------------------------------------------------------------------

def decode_run_record(body: str) -> RunRecord:
    """Decode the body of an ``<init>`` element

    Parameters
    ----------
    body : str
        Complete text between ``<init>`` and ``</init>``.

    Returns
    -------
    RunRecord
        The decoded run record; text after the ``10 + 4N`` mandatory
        tokens becomes its ``info``.

    Raises
    ------
    UnexpectedEndError
        If fewer than ``10 + 4N`` tokens are present.
    NumberFormatError
        If one of those tokens is not a valid literal for its field, or
        NPRUP is negative.

    Examples
    --------
    >>> run = decode_run_record("2212 2212 6500 6500 0 0 247000 247000 -4 1\\n"
    ...                         "1.5e+02 2.1e-01 1.5e+02 1\\n")
    >>> run.n_processes, run.process_ids.tolist(), run.info
    (1, [1], '')
    """
    ts = TokenStream(body)
    try:
        run_record = _read_run_fields(ts)
    except UnexpectedEndError as exc:
        raise UnexpectedEndError(
            f"{exc}; an <init> record holds {RUN_FIXED_FIELDS} + "
            f"{PROCESS_FIELDS}*NPRUP tokens"
        ) from exc
    return run_record


def _read_run_fields(ts: TokenStream) -> RunRecord:
    beam_ids = (ts.next_int("IDBMUP(1)"), ts.next_int("IDBMUP(2)"))
    beam_energies = (ts.next_float("EBMUP(1)"), ts.next_float("EBMUP(2)"))
    pdf_groups = (ts.next_int("PDFGUP(1)"), ts.next_int("PDFGUP(2)"))
    pdf_sets = (ts.next_int("PDFSUP(1)"), ts.next_int("PDFSUP(2)"))
    weighting_strategy = ts.next_int("IDWTUP")
    n_processes = ts.next_count("NPRUP")

    cross_sections: list[float] = []
    cross_section_errors: list[float] = []
    max_weights: list[float] = []
    process_ids: list[int] = []
    for i in range(1, n_processes + 1):
        cross_sections.append(ts.next_float(f"XSECUP({i})"))
        cross_section_errors.append(ts.next_float(f"XERRUP({i})"))
        max_weights.append(ts.next_float(f"XMAXUP({i})"))
        process_ids.append(ts.next_int(f"LPRUP({i})"))

    return RunRecord(
        beam_ids=beam_ids,
        beam_energies=beam_energies,
        pdf_groups=pdf_groups,
        pdf_sets=pdf_sets,
        weighting_strategy=weighting_strategy,
        n_processes=n_processes,
        cross_sections=cross_sections,
        cross_section_errors=cross_section_errors,
        max_weights=max_weights,
        process_ids=process_ids,
        info=ts.remainder(),
    )


def decode_event_record(body: str) -> EventRecord:
    """Decode the body of an ``<event>`` element

    Parameters
    ----------
    body : str
        Complete text between ``<event>`` and ``</event>``.

    Returns
    -------
    EventRecord
        The decoded event; text after the ``6 + 13M`` mandatory tokens,
        such as ``<rwgt>`` blocks or generator comments, becomes its
        ``info``.

    Raises
    ------
    UnexpectedEndError
        If fewer than ``6 + 13M`` tokens are present, including an empty
        body.
    NumberFormatError
        If one of those tokens is not a valid literal for its field, or
        NUP is negative.
    """
    ts = TokenStream(body)
    try:
        event = _read_event_fields(ts)
    except UnexpectedEndError as exc:
        raise UnexpectedEndError(
            f"{exc}; an <event> record holds {EVENT_FIXED_FIELDS} + "
            f"{PARTICLE_FIELDS}*NUP tokens"
        ) from exc
    return event


def _read_event_fields(ts: TokenStream) -> EventRecord:
    n_particles = ts.next_count("NUP")
    process_id = ts.next_int("IDPRUP")
    weight = ts.next_float("XWGTUP")
    scale = ts.next_float("SCALUP")
    alpha_qed = ts.next_float("AQEDUP")
    alpha_qcd = ts.next_float("AQCDUP")

    pdg_ids: list[int] = []
    statuses: list[int] = []
    mothers: list[tuple[int, int]] = []
    colors: list[tuple[int, int]] = []
    momenta: list[tuple[float, ...]] = []
    lifetimes: list[float] = []
    spins: list[float] = []
    for i in range(1, n_particles + 1):
        pdg_ids.append(ts.next_int(f"IDUP({i})"))
        statuses.append(ts.next_int(f"ISTUP({i})"))
        mothers.append((ts.next_int(f"MOTHUP(1,{i})"), ts.next_int(f"MOTHUP(2,{i})")))
        colors.append((ts.next_int(f"ICOLUP(1,{i})"), ts.next_int(f"ICOLUP(2,{i})")))
        momenta.append(tuple(ts.next_float(f"PUP({j},{i})") for j in range(1, 6)))
        lifetimes.append(ts.next_float(f"VTIMUP({i})"))
        spins.append(ts.next_float(f"SPINUP({i})"))

    return EventRecord(
        n_particles=n_particles,
        process_id=process_id,
        weight=weight,
        scale=scale,
        alpha_qed=alpha_qed,
        alpha_qcd=alpha_qcd,
        pdg_ids=np.asarray(pdg_ids, dtype="i8"),
        statuses=np.asarray(statuses, dtype="i8"),
        mothers=np.asarray(mothers, dtype="i8").reshape(-1, 2),
        colors=np.asarray(colors, dtype="i8").reshape(-1, 2),
        momenta=np.asarray(momenta, dtype="f8").reshape(-1, 5),
        lifetimes=np.asarray(lifetimes, dtype="f8"),
        spins=np.asarray(spins, dtype="f8"),
        info=ts.remainder(),
    )


# ---------------------------------------------------------------------------
# Reader
# ---------------------------------------------------------------------------

class LHEFReader:
    """Pull-based reader over one LHEF document

    Construction consumes the document up to and including ``</init>``;
    each :meth:`next_event` call then consumes exactly one ``<event>``
    element.  The reader is also an iterator over the remaining events.

    Parameters
    ----------
    stream : IO
        Readable text or binary stream positioned at the start of the
        document.  The reader reads from it exclusively for its whole
        lifetime but never closes it.
    chunk_size : int, optional
        Characters (or bytes) requested from the stream per read.

    Raises
    ------
    MissingInitError
        If the input ends, or ``<event>`` / ``</LesHouchesEvents>`` is
        reached, before ``<init>``.
    MalformedTagError
        On any tag grammar violation or an element out of order.
    UnsupportedVersionError
        If the document tag names a version outside
        :data:`~pylhef.utils.constants.SUPPORTED_VERSIONS`.
    NumberFormatError, UnexpectedEndError
        If the run record cannot be decoded.
    LHEFIOError
        If the stream cannot be read.

    Notes
    -----
    After :meth:`next_event` raises, the stream position is undefined
    and the reader is unusable: further calls raise
    :class:`~pylhef.exceptions.ReaderStateError`.  Open a new reader on
    a fresh stream to read the document again.

    Examples
    --------
    >>> with open("events.lhe") as f:
    ...     reader = LHEFReader(f)
    ...     reader.run_record.beam_energies
    ...     for event in reader:
    ...         print(event.n_particles, event.weight)
    """

    def __init__(self, stream: IO, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        self._scanner = TagScanner(stream, chunk_size=chunk_size)
        self._version: str | None = None
        self._header: str | None = None
        self._comments: list[str] = []
        self._done = False
        self._failed = False
        self._events_read = 0
        self._run_record = self._read_preamble()

    # -- read-only accessors -------------------------------------------------

    @property
    def version(self) -> str | None:
        """LHEF version from the document tag, or ``None`` if there is none."""
        return self._version

    @property
    def header(self) -> str | None:
        """Raw ``<header>`` body, or ``None`` if the document has no header."""
        return self._header

    @property
    def comments(self) -> tuple[str, ...]:
        """Top-level ``<!-- -->`` comments found before ``<init>``."""
        return tuple(self._comments)

    @property
    def run_record(self) -> RunRecord:
        return self._run_record

    @property
    def events_read(self) -> int:
        """Number of events returned so far."""
        return self._events_read

    # -- event phase ---------------------------------------------------------

    def next_event(self) -> EventRecord | None:
        """Read the next event

        Returns
        -------
        EventRecord or None
            The next event, or ``None`` once the event sequence has ended:
            at end of input, at a close tag, or at any element other than
            ``<event>``.  Every later call also returns ``None``.

        Raises
        ------
        MalformedTagError, NumberFormatError, UnexpectedEndError, LHEFIOError
            If the next event cannot be read.  The reader is unusable
            afterwards.
        ReaderStateError
            If a previous call raised.
        """
        if self._failed:
            raise ReaderStateError(
                "A previous event could not be read; the reader cannot continue. "
                "Open a new reader to read the document again."
            )
        if self._done:
            return None

        try:
            event = self._read_event()
        except Exception:
            self._failed = True
            raise

        if event is None:
            self._done = True
            logger.debug("End of event stream after %d events", self._events_read)
        else:
            self._events_read += 1
        return event

    def __iter__(self) -> LHEFReader:
        return self

    def __next__(self) -> EventRecord:
        event = self.next_event()
        if event is None:
            raise StopIteration
        return event

    # -- internals -----------------------------------------------------------

    def _next_significant(self) -> Marker | None:
        """Next marker that is not blank text or a declaration; comments are kept."""
        while True:
            marker = self._scanner.next_marker()
            if isinstance(marker, Declaration):
                continue
            if isinstance(marker, Text) and not marker.content.strip():
                continue
            return marker

    def _element_body(self) -> str:
        # The scanner queues the body text and the close tag right after a
        # record open tag.
        body = self._scanner.next_marker()
        self._scanner.next_marker()
        return body.content

    def _read_preamble(self) -> RunRecord:
        seen_document = False
        while True:
            marker = self._next_significant()

            if marker is None:
                raise MissingInitError("Input ended before an <init> element was found")
            if isinstance(marker, Comment):
                self._comments.append(marker.content)
                continue
            if isinstance(marker, Text):
                raise MalformedTagError(
                    f"Unexpected text before <init>: {marker.content.strip()[:40]!r}"
                )
            if isinstance(marker, CloseTag):
                if marker.name == DOCUMENT_TAG:
                    raise MissingInitError(
                        f"</{DOCUMENT_TAG}> reached before an <init> element was found"
                    )
                raise MalformedTagError(f"Unexpected </{marker.name}> before <init>")

            if marker.name == DOCUMENT_TAG and not seen_document and self._header is None:
                seen_document = True
                self._version = _check_version(marker)
                logger.debug("LHEF document version %s", self._version)
            elif marker.name == HEADER_TAG and self._header is None:
                self._header = self._element_body()
                logger.debug("Read header of %d characters", len(self._header))
            elif marker.name == INIT_TAG:
                run_record = decode_run_record(self._element_body())
                logger.debug(
                    "Read run record: beams %s at %s GeV, %d process(es)",
                    run_record.beam_ids,
                    run_record.beam_energies,
                    run_record.n_processes,
                )
                return run_record
            elif marker.name == EVENT_TAG:
                raise MissingInitError("<event> reached before an <init> element was found")
            else:
                raise MalformedTagError(f"Unexpected <{marker.name}> before <init>")

    def _read_event(self) -> EventRecord | None:
        marker = self._next_significant()
        while isinstance(marker, Comment):
            marker = self._next_significant()

        if marker is None:
            return None
        if isinstance(marker, OpenTag) and marker.name == EVENT_TAG:
            event = decode_event_record(self._element_body())
            logger.debug(
                "Event %d: %d particles, process %d",
                self._events_read + 1,
                event.n_particles,
                event.process_id,
            )
            return event

        if not (isinstance(marker, CloseTag) and marker.name == DOCUMENT_TAG):
            logger.warning("Event stream ended at unexpected marker %r", marker)
        return None


def _check_version(tag: OpenTag) -> str:
    version = tag.attributes.get(VERSION_ATTRIBUTE)
    if version is None:
        raise MalformedTagError(
            f"<{DOCUMENT_TAG}> is missing its '{VERSION_ATTRIBUTE}' attribute"
        )
    if version not in SUPPORTED_VERSIONS:
        raise UnsupportedVersionError(
            f"Unsupported LHEF version {version!r}; "
            f"supported versions are {', '.join(SUPPORTED_VERSIONS)}"
        )
    return version
