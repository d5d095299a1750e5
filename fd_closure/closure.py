"""
fd_closure/closure.py
=====================
Fixpoint closure of a functional-dependency set under Armstrong's axioms.

Algorithm
---------
  U      = all attributes mentioned by the input
  P      = power set of U, computed once
  F⁺     = copy of input

  repeat
      for every non-empty Z ∈ P :   F⁺ ← F⁺ ∪ augment(F⁺, Z)
      F⁺ ← F⁺ ∪ trivial(F⁺)
      F⁺ ← F⁺ ∪ transitive(F⁺)
  until |F⁺| did not change during the iteration

The working set only ever grows and every FD it can hold is a pair of
subsets of U, so the loop terminates.  The result is a set, so it does not
depend on iteration or insertion order.

Augmentation always uses the power set of the ORIGINAL universe.  Derived
FDs never introduce attributes outside U, so the universe cannot grow.

Cost
~~~~
Each outer iteration performs 2^|U| − 1 augmentation passes over the
working set plus one transitive saturation.  Realistic schemas keep U to
a handful of attributes; :class:`~fd_closure.config.ClosureLimits`
bounds |U|, the number of iterations, the transitive rounds, the size of
the working set and the total number of dependencies built, raising
:class:`~fd_closure.errors.ClosureLimitError` instead of running away.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import ClosureLimits, check_limit
from .dependency import FDCollection
from .powerset import power_set
from .rules import augment, transitive, trivial

log = logging.getLogger(__name__)


def closure_with_stats(
    fds: FDCollection,
    limits: Optional[ClosureLimits] = None,
) -> tuple[FDCollection, dict]:
    """
    Compute the closure of *fds* and report internal counters.

    Parameters
    ----------
    fds : FDCollection
        Input dependencies.  Never modified.
    limits : ClosureLimits, optional
        Resource bounds; defaults to ``ClosureLimits()``.

    Returns
    -------
    closure : FDCollection
        Smallest collection containing *fds* that is closed under the
        trivial, augmentation and transitivity rules.
    stats : dict
        Counters:
          - n_input       : size of the input collection
          - n_universe    : number of distinct attributes
          - n_power_set   : non-empty augmentation sets per iteration
          - n_iterations  : outer fixpoint iterations run
          - n_augmented   : FDs first added by augmentation
          - n_trivial     : FDs first added by reflexivity
          - n_transitive  : FDs first added by transitivity
          - n_derivations : FDs built by augmentation and reflexivity passes
          - n_closure     : size of the result

    Raises
    ------
    ClosureLimitError
        If any configured limit is exceeded.
    """
    limits = limits or ClosureLimits()
    working = FDCollection(fds)
    universe = working.attributes()

    log.info(f"Computing closure of {len(working)} FDs over {len(universe)} attributes")

    power = [Z for Z in power_set(universe, max_size=limits.max_universe) if Z]

    stats: dict = {
        "n_input":       len(working),
        "n_universe":    len(universe),
        "n_power_set":   len(power),
        "n_iterations":  0,
        "n_augmented":   0,
        "n_trivial":     0,
        "n_transitive":  0,
        "n_derivations": 0,
        "n_closure":     0,
    }

    def _charge(cost: int) -> None:
        stats["n_derivations"] += cost
        check_limit("max_derivations", stats["n_derivations"], limits.max_derivations)

    def _merge(derived: FDCollection, counter: str) -> None:
        before = len(working)
        working.update(derived)
        stats[counter] += len(working) - before
        check_limit("max_dependencies", len(working), limits.max_dependencies)

    # ── Fixpoint loop ─────────────────────────────────────────────────────────
    while True:
        stats["n_iterations"] += 1
        check_limit("max_iterations", stats["n_iterations"], limits.max_iterations)
        size_before = len(working)

        for Z in power:
            _charge(len(working))
            _merge(augment(working, Z), "n_augmented")
        _charge(sum(2 ** len(fd.determinant) - 1 for fd in working))
        _merge(trivial(working), "n_trivial")
        _merge(transitive(working, max_rounds=limits.max_transitive_rounds), "n_transitive")

        log.debug(
            f"iteration {stats['n_iterations']}: {size_before} -> {len(working)} FDs"
        )
        if len(working) == size_before:
            break

    stats["n_closure"] = len(working)
    log.info(
        f"Closure reached fixpoint after {stats['n_iterations']} iteration(s): "
        f"{stats['n_input']} -> {stats['n_closure']} FDs"
    )
    return working, stats


def closure(
    fds: FDCollection,
    limits: Optional[ClosureLimits] = None,
) -> FDCollection:
    """Return the closure of *fds*; see :func:`closure_with_stats`."""
    result, _ = closure_with_stats(fds, limits)
    return result
