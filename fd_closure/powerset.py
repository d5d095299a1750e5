"""
fd_closure/powerset.py
======================
Power-set generation over a finite set of attributes.

Recursive decomposition over an immutable tuple view of the input:

  P(∅)          = { ∅ }
  P({h} ∪ T)    = P(T)  ∪  { S ∪ {h} : S ∈ P(T) }

The caller's set is never touched; the recursion advances an index into
the tuple instead of removing and re-adding elements.

Complexity
----------
O(2^n) subsets for |S| = n.  Pass ``max_size`` to refuse large inputs.
"""

from __future__ import annotations

from typing import Hashable, Iterable, Optional

from .config import check_limit


def _power_set_from(elements: tuple, start: int) -> set[frozenset]:
    """Power set of ``elements[start:]``."""
    if start == len(elements):
        return {frozenset()}

    head = elements[start]
    rest = _power_set_from(elements, start + 1)
    return rest | {subset | {head} for subset in rest}


def power_set(
    attrs: Iterable[Hashable],
    max_size: Optional[int] = None,
) -> set[frozenset]:
    """
    Return every subset of *attrs*, including the empty set and *attrs* itself.

    Parameters
    ----------
    attrs : Iterable
        Any finite collection of hashable elements (duplicates collapse).
    max_size : int, optional
        Refuse inputs with more than this many distinct elements.

    Returns
    -------
    set[frozenset]
        Exactly ``2 ** n`` subsets.

    Raises
    ------
    ClosureLimitError
        If the input has more than *max_size* distinct elements.
    """
    elements = tuple(frozenset(attrs))
    check_limit("max_universe", len(elements), max_size)
    return _power_set_from(elements, 0)
