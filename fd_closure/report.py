"""
fd_closure/report.py
====================
Tabular views of FD collections and closure counters, ready for
``DataFrame.to_csv``.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from .dependency import FDCollection, FunctionalDependency

COLUMNS: list[str] = ["determinant", "dependent", "n_determinant", "n_dependent", "trivial"]


def _fd_to_row(fd: FunctionalDependency) -> dict:
    return {
        "determinant":   ",".join(sorted(fd.determinant)),
        "dependent":     ",".join(sorted(fd.dependent)),
        "n_determinant": len(fd.determinant),
        "n_dependent":   len(fd.dependent),
        "trivial":       fd.is_trivial,
    }


def to_frame(fds: Iterable[FunctionalDependency]) -> pd.DataFrame:
    """
    One row per dependency, in :meth:`FDCollection.sorted` order.

    Parameters
    ----------
    fds : Iterable[FunctionalDependency]
        Usually an :class:`FDCollection`; any iterable is accepted.

    Returns
    -------
    pd.DataFrame
        Columns ``determinant``, ``dependent`` (comma-joined, sorted),
        ``n_determinant``, ``n_dependent`` and ``trivial``.
    """
    rows = [_fd_to_row(fd) for fd in FDCollection(fds).sorted()]
    return pd.DataFrame(rows, columns=COLUMNS)


def stats_frame(stats: dict) -> pd.DataFrame:
    """Single-row frame of the counters returned by ``closure_with_stats``."""
    return pd.DataFrame([stats])
