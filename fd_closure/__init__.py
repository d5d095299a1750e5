"""
fd_closure
==========
Closure of functional-dependency sets under Armstrong's inference axioms
(reflexivity, augmentation, transitivity).

Public API
----------
  from fd_closure import FDCollection, FunctionalDependency, closure

  fds = FDCollection.from_pairs([({"A"}, "B"), ({"B"}, "C")])
  fplus = closure(fds)
  fplus, stats = closure_with_stats(fds)

Building blocks, usable on their own:
  power_set(attrs)            every subset of a finite set
  trivial(fds)                X → Z  for each non-empty Z ⊆ X
  augment(fds, Z)             X → Y  ⊢  XZ → YZ
  transitive(fds)             new FDs from chaining X → Y, Y → Z

See the individual module docstrings for algorithm and cost notes.
"""

from .closure import closure, closure_with_stats
from .config import ClosureLimits
from .dependency import FDCollection, FunctionalDependency
from .errors import ClosureLimitError, FDClosureError, InvalidDependencyError
from .powerset import power_set
from .report import stats_frame, to_frame
from .rules import augment, transitive, trivial

__all__ = [
    "ClosureLimitError",
    "ClosureLimits",
    "FDClosureError",
    "FDCollection",
    "FunctionalDependency",
    "InvalidDependencyError",
    "augment",
    "closure",
    "closure_with_stats",
    "power_set",
    "stats_frame",
    "to_frame",
    "transitive",
    "trivial",
]
