"""
fd_closure/rules.py
===================
Armstrong's inference rules, each applied once over a whole FD collection.

  trivial     X → Y            ⊢  X → Z       for every non-empty Z ⊆ X
  augment     X → Y            ⊢  XZ → YZ     for a given attribute set Z
  transitive  X → Y,  Y → Z    ⊢  X → Z       chained to a fixpoint

Every function treats its input collection as read-only and returns a fresh
:class:`~fd_closure.dependency.FDCollection` carrying the input's schema.

Transitivity matching is strict: ``fd1.dependent`` must EQUAL
``fd2.determinant`` as a set.  Subset/superset matching belongs to derived
rules (pseudo-transitivity, decomposition) and is intentionally absent.
"""

from __future__ import annotations

import itertools
from collections import defaultdict
from typing import Optional

from .config import MAX_TRANSITIVE_ROUNDS, check_limit
from .dependency import AttrsLike, FDCollection, FunctionalDependency, as_attribute_set
from .powerset import power_set


# ── Reflexivity ───────────────────────────────────────────────────────────────

def trivial(fds: FDCollection) -> FDCollection:
    """
    Derive every trivial dependency  X → Z  with  ∅ ≠ Z ⊆ X.

    Parameters
    ----------
    fds : FDCollection
        Source dependencies; only their determinants are used.

    Returns
    -------
    FDCollection
        One FD per (determinant, non-empty subset) pair.  Never contains an
        empty right-hand side.
    """
    derived = FDCollection(schema=fds.schema)
    subsets_cache: dict[frozenset, list[frozenset]] = {}

    for fd in fds:
        X = fd.determinant
        if X not in subsets_cache:
            subsets_cache[X] = [Z for Z in power_set(X) if Z]
        for Z in subsets_cache[X]:
            derived.add(FunctionalDependency(X, Z))

    return derived


# ── Augmentation ──────────────────────────────────────────────────────────────

def augment(fds: FDCollection, attrs: AttrsLike) -> FDCollection:
    """
    Augment both sides of every dependency in *fds* with *attrs*.

    Augmenting with attributes already present yields the original FD (or a
    superset of it); those are still returned and deduplicated as usual.
    """
    Z = as_attribute_set(attrs, "augmentation", allow_empty=True)
    derived = FDCollection(schema=fds.schema)
    for fd in fds:
        derived.add(FunctionalDependency(fd.determinant | Z, fd.dependent | Z))
    return derived


# ── Transitivity ──────────────────────────────────────────────────────────────

def _saturate(
    fds: set[FunctionalDependency],
    max_rounds: Optional[int],
) -> set[FunctionalDependency]:
    """
    Close *fds* under transitivity.

    Each round indexes the working set by determinant, then for every fd1
    looks up the fd2's whose determinant equals fd1's dependent.  This yields
    exactly the matches of a full pairwise scan without the O(k²) loop over
    non-matching pairs.  Rounds repeat until nothing new appears.

    Only rounds that add dependencies count towards *max_rounds*; the final
    round that confirms the fixpoint is free.
    """
    saturated = set(fds)

    for round_no in itertools.count(1):
        by_determinant: dict[frozenset, list[FunctionalDependency]] = defaultdict(list)
        for fd in saturated:
            by_determinant[fd.determinant].append(fd)

        found: set[FunctionalDependency] = set()
        for fd1 in saturated:
            for fd2 in by_determinant.get(fd1.dependent, ()):
                if fd1 != fd2:
                    found.add(FunctionalDependency(fd1.determinant, fd2.dependent))

        new = found - saturated
        if not new:
            return saturated
        check_limit("max_transitive_rounds", round_no, max_rounds)
        saturated |= new


def transitive(
    fds: FDCollection,
    max_rounds: Optional[int] = MAX_TRANSITIVE_ROUNDS,
) -> FDCollection:
    """
    Return every FD reachable by chaining transitivity that is NOT in *fds*.

    Parameters
    ----------
    fds : FDCollection
        Source dependencies (left untouched).
    max_rounds : int or None
        Upper bound on saturation rounds that add dependencies; ``None``
        disables it.

    Returns
    -------
    FDCollection
        Only the newly derived dependencies (saturation minus input).

    Raises
    ------
    ClosureLimitError
        If more than *max_rounds* rounds add new dependencies.

    Termination
    -----------
    Both sides of every derived FD are sides of input FDs, so the space of
    candidates is finite and each round either grows the set or stops.
    """
    original = set(fds)
    saturated = _saturate(original, max_rounds)
    return FDCollection(saturated - original, schema=fds.schema)
