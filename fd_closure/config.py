"""
fd_closure/config.py
====================
Default resource limits for the closure engine.

The augmentation step walks the whole power set of the attribute universe on
every outer iteration, so cost grows as 2^|U|; transitivity matches pairs of
dependencies, so it grows with the square of the working set.  These bounds
turn a runaway computation into a :class:`~fd_closure.errors.ClosureLimitError`.

The derivation budget is what keeps the defaults fast: it is charged BEFORE
each augmentation or reflexivity pass with the number of dependencies that
pass will build, so no pass starts once the run has used its budget.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .errors import ClosureLimitError

log = logging.getLogger(__name__)

# ── Configuration ─────────────────────────────────────────────────────────────
MAX_UNIVERSE          : int = 8          # attributes; power set is 2^8 = 256
MAX_ITERATIONS        : int = 64         # outer fixpoint iterations
MAX_TRANSITIVE_ROUNDS : int = 256        # saturation rounds inside transitive()
MAX_DEPENDENCIES      : int = 50_000     # size of the working collection
MAX_DERIVATIONS       : int = 500_000    # FDs built by augment/trivial, summed over the run


@dataclass(frozen=True)
class ClosureLimits:
    """
    Bounds checked by :func:`fd_closure.closure.closure`.

    Any field set to ``None`` disables that check.
    """

    max_universe: Optional[int] = MAX_UNIVERSE
    max_iterations: Optional[int] = MAX_ITERATIONS
    max_transitive_rounds: Optional[int] = MAX_TRANSITIVE_ROUNDS
    max_dependencies: Optional[int] = MAX_DEPENDENCIES
    max_derivations: Optional[int] = MAX_DERIVATIONS

    @classmethod
    def unbounded(cls) -> ClosureLimits:
        """Limits with every check disabled."""
        return cls(
            max_universe=None,
            max_iterations=None,
            max_transitive_rounds=None,
            max_dependencies=None,
            max_derivations=None,
        )


def check_limit(name: str, value: int, maximum: Optional[int]) -> None:
    """Raise :class:`ClosureLimitError` if *value* exceeds *maximum* (``None`` = no bound)."""
    if maximum is not None and value > maximum:
        log.warning(f"Closure aborted: {name} = {value} exceeds {maximum}")
        raise ClosureLimitError(name, value, maximum)
