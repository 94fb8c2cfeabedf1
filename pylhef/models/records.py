#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed dataclass models for parsed LHEF records

Every model is a ``dataclass`` carrying scalar metadata and NumPy arrays.
Models are the sole output of the reader layer.

Hierarchy
---------
::

    RunRecord   : the <init> record (HEPRUP common block)
    EventRecord : one <event> record (HEPEUP common block)
    Particle    : a single row of an event's particle table

Units
-----
* Energies, momenta, masses and scales are in **GeV**.
* Cross sections and their errors are in **pb**.
* Lifetimes are proper lifetimes c·τ in **mm**.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def _frozen_array(values, dtype: str) -> np.ndarray:
    arr = np.array(values, dtype=dtype)
    arr.flags.writeable = False
    return arr


# ---------------------------------------------------------------------------
# Run record
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RunRecord:
    """Run-level information from the ``<init>`` element

    Instances are immutable: the dataclass is frozen and every array is
    marked read-only on construction, so repeated reads always observe
    the same values.

    Parameters
    ----------
    beam_ids : tuple[int, int]
        PDG identifiers of the two beam particles (IDBMUP).
    beam_energies : tuple[float, float]
        Beam energies in GeV (EBMUP).
    pdf_groups : tuple[int, int]
        PDFLIB author group per beam (PDFGUP).
    pdf_sets : tuple[int, int]
        PDFLIB set identifier per beam (PDFSUP).
    weighting_strategy : int
        Event weight interpretation, ±1 … ±4 (IDWTUP).
    n_processes : int
        Number of processes N (NPRUP).
    cross_sections : numpy.ndarray
        Cross section per process, shape ``(N,)``, float64 (XSECUP).
    cross_section_errors : numpy.ndarray
        Statistical error per process, shape ``(N,)``, float64 (XERRUP).
    max_weights : numpy.ndarray
        Maximum event weight per process, shape ``(N,)``, float64 (XMAXUP).
    process_ids : numpy.ndarray
        Process identifier per process, shape ``(N,)``, int64 (LPRUP).
    info : str
        Text following the mandatory fields, verbatim.  May be empty.
    """

    beam_ids: tuple[int, int]
    beam_energies: tuple[float, float]
    pdf_groups: tuple[int, int]
    pdf_sets: tuple[int, int]
    weighting_strategy: int
    n_processes: int
    cross_sections: np.ndarray
    cross_section_errors: np.ndarray
    max_weights: np.ndarray
    process_ids: np.ndarray
    info: str = ""

    def __post_init__(self) -> None:
        # frozen=True blocks attribute assignment, so go through object.
        object.__setattr__(self, "cross_sections", _frozen_array(self.cross_sections, "f8"))
        object.__setattr__(
            self, "cross_section_errors", _frozen_array(self.cross_section_errors, "f8")
        )
        object.__setattr__(self, "max_weights", _frozen_array(self.max_weights, "f8"))
        object.__setattr__(self, "process_ids", _frozen_array(self.process_ids, "i8"))
        for name in ("cross_sections", "cross_section_errors", "max_weights", "process_ids"):
            length = len(getattr(self, name))
            if length != self.n_processes:
                raise ValueError(
                    f"RunRecord.{name} has {length} entries, expected {self.n_processes}"
                )

    @property
    def total_cross_section(self) -> float:
        """Sum of the per-process cross sections (pb)."""
        return float(self.cross_sections.sum())


# ---------------------------------------------------------------------------
# Event record
# ---------------------------------------------------------------------------

@dataclass
class Particle:
    """A single row of an event's particle table

    Parameters
    ----------
    pdg_id : int
        PDG particle identifier (IDUP).
    status : int
        Status code (ISTUP): -1 incoming, +1 outgoing, +2 intermediate, …
    mothers : tuple[int, int]
        1-based indices of the first and last mother, 0 if none (MOTHUP).
    colors : tuple[int, int]
        Colour and anticolour flow tags (ICOLUP).
    px, py, pz, energy, mass : float
        Four-momentum and generated mass in GeV (PUP).
    lifetime : float
        Proper lifetime c·τ in mm (VTIMUP).
    spin : float
        Cosine of the angle between spin and momentum in the decaying
        particle's rest frame, 9.0 when unknown (SPINUP).
    """

    pdg_id: int
    status: int
    mothers: tuple[int, int]
    colors: tuple[int, int]
    px: float
    py: float
    pz: float
    energy: float
    mass: float
    lifetime: float
    spin: float


@dataclass
class EventRecord:
    """One event from an ``<event>`` element

    The particle table is stored column-wise.  Row *i* of every array
    describes the same particle; use :meth:`particle` or
    :attr:`particles` for a row view.

    Parameters
    ----------
    n_particles : int
        Number of particles M (NUP).
    process_id : int
        Identifier of the process this event belongs to (IDPRUP).
    weight : float
        Event weight (XWGTUP).
    scale : float
        Scale of the event in GeV (SCALUP).
    alpha_qed : float
        QED coupling used for the event (AQEDUP).
    alpha_qcd : float
        QCD coupling used for the event (AQCDUP).
    pdg_ids : numpy.ndarray
        Shape ``(M,)``, int64 (IDUP).
    statuses : numpy.ndarray
        Shape ``(M,)``, int64 (ISTUP).
    mothers : numpy.ndarray
        Shape ``(M, 2)``, int64 (MOTHUP).
    colors : numpy.ndarray
        Shape ``(M, 2)``, int64 (ICOLUP).
    momenta : numpy.ndarray
        Shape ``(M, 5)``, float64; columns px, py, pz, E, m (PUP).
    lifetimes : numpy.ndarray
        Shape ``(M,)``, float64 (VTIMUP).
    spins : numpy.ndarray
        Shape ``(M,)``, float64 (SPINUP).
    info : str
        Text following the particle table, verbatim.  May be empty.
    """

    n_particles: int
    process_id: int
    weight: float
    scale: float
    alpha_qed: float
    alpha_qcd: float
    pdg_ids: np.ndarray
    statuses: np.ndarray
    mothers: np.ndarray
    colors: np.ndarray
    momenta: np.ndarray
    lifetimes: np.ndarray
    spins: np.ndarray
    info: str = ""

    def __len__(self) -> int:
        return self.n_particles

    def particle(self, index: int) -> Particle:
        """Return row *index* of the particle table (0-based)."""
        if not -self.n_particles <= index < self.n_particles:
            raise IndexError(
                f"Particle index {index} out of range for {self.n_particles} particles"
            )
        px, py, pz, energy, mass = (float(v) for v in self.momenta[index])
        return Particle(
            pdg_id=int(self.pdg_ids[index]),
            status=int(self.statuses[index]),
            mothers=(int(self.mothers[index, 0]), int(self.mothers[index, 1])),
            colors=(int(self.colors[index, 0]), int(self.colors[index, 1])),
            px=px,
            py=py,
            pz=pz,
            energy=energy,
            mass=mass,
            lifetime=float(self.lifetimes[index]),
            spin=float(self.spins[index]),
        )

    @property
    def particles(self) -> list[Particle]:
        return [self.particle(i) for i in range(self.n_particles)]
