from __future__ import annotations

from fd_closure import FDCollection, FunctionalDependency


def make_fd(lhs: str, rhs: str) -> FunctionalDependency:
    """Shorthand: each character is one attribute, so ``make_fd("AB", "C")`` is AB → C."""
    return FunctionalDependency(set(lhs), set(rhs))


def make_fds(*pairs: tuple[str, str]) -> FDCollection:
    return FDCollection(make_fd(lhs, rhs) for lhs, rhs in pairs)


def chain_fds(n: int) -> FDCollection:
    """A → B → C → … over the first *n* letters (n - 1 dependencies)."""
    letters = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"[:n]
    return make_fds(*zip(letters, letters[1:]))
