"""
fd_closure/dependency.py
========================
Value types: a single functional dependency and a deduplicating collection.

An FD  X → Y  is stored as a pair of frozensets, so two dependencies are
equal iff both sides are equal as *sets* (attribute order never matters):

    FunctionalDependency(["B", "A"], "C") == FunctionalDependency({"A", "B"}, {"C"})

A bare string names ONE attribute; it is never split into characters, so
``FunctionalDependency("AB", "C")`` has the single attribute ``"AB"`` on the
left.

FDCollection wraps a plain ``set`` of dependencies.  Because the dependencies
are immutable, copying a collection only copies the outer set, and a copy can
be grown freely without touching its source.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

from .errors import InvalidDependencyError

AttrsLike = Union[str, Iterable[str]]


def as_attribute_set(value: AttrsLike, side: str, allow_empty: bool = False) -> frozenset[str]:
    """Normalise *value* to a frozenset of attribute names, validating it."""
    if isinstance(value, str):
        value = (value,)
    try:
        attrs = frozenset(value)
    except TypeError as exc:
        raise InvalidDependencyError(
            f"{side} must be an attribute name or an iterable of names, got {value!r}"
        ) from exc

    for attr in attrs:
        if not isinstance(attr, str) or not attr:
            raise InvalidDependencyError(
                f"{side} attribute must be a non-empty string, got {attr!r}"
            )
    if not attrs and not allow_empty:
        raise InvalidDependencyError(f"{side} of a functional dependency must not be empty")
    return attrs


# ── Single dependency ─────────────────────────────────────────────────────────

@dataclass(frozen=True)
class FunctionalDependency:
    """
    One functional dependency  determinant → dependent.

    Attributes
    ----------
    determinant : frozenset[str]
        Left-hand side.  Never empty.
    dependent : frozenset[str]
        Right-hand side.  Never empty.
    """

    determinant: frozenset[str]
    dependent: frozenset[str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "determinant", as_attribute_set(self.determinant, "determinant"))
        object.__setattr__(self, "dependent", as_attribute_set(self.dependent, "dependent"))

    # ── Derived properties ───────────────────────────────────────────────────

    @property
    def attributes(self) -> frozenset[str]:
        """Every attribute mentioned on either side."""
        return self.determinant | self.dependent

    @property
    def is_trivial(self) -> bool:
        return self.dependent <= self.determinant

    @property
    def sort_key(self) -> tuple:
        return (
            len(self.determinant),
            tuple(sorted(self.determinant)),
            len(self.dependent),
            tuple(sorted(self.dependent)),
        )

    # ── Transformed copies ───────────────────────────────────────────────────

    def extend_left(self, attrs: AttrsLike) -> FunctionalDependency:
        """Return a copy with *attrs* merged into the determinant."""
        extra = as_attribute_set(attrs, "determinant", allow_empty=True)
        return FunctionalDependency(self.determinant | extra, self.dependent)

    def extend_right(self, attrs: AttrsLike) -> FunctionalDependency:
        """Return a copy with *attrs* merged into the dependent."""
        extra = as_attribute_set(attrs, "dependent", allow_empty=True)
        return FunctionalDependency(self.determinant, self.dependent | extra)

    def augment(self, attrs: AttrsLike) -> FunctionalDependency:
        """Armstrong augmentation:  X → Y  becomes  XZ → YZ."""
        extra = as_attribute_set(attrs, "augmentation", allow_empty=True)
        return FunctionalDependency(self.determinant | extra, self.dependent | extra)

    def __str__(self) -> str:
        return f"{','.join(sorted(self.determinant))} -> {','.join(sorted(self.dependent))}"


# ── Collection ────────────────────────────────────────────────────────────────

class FDCollection:
    """
    A set of :class:`FunctionalDependency` with structural deduplication.

    Parameters
    ----------
    fds : Iterable[FunctionalDependency]
        Initial members.  Passing another FDCollection copies it (and its
        schema, unless *schema* is given explicitly).
    schema : Iterable[str], optional
        Declared attribute names.  When set, inserting a dependency that
        mentions any other attribute raises :class:`InvalidDependencyError`.
    """

    def __init__(
        self,
        fds: Iterable[FunctionalDependency] = (),
        schema: Optional[Iterable[str]] = None,
    ) -> None:
        if schema is None and isinstance(fds, FDCollection):
            schema = fds.schema
        self.schema: Optional[frozenset[str]] = (
            as_attribute_set(schema, "schema", allow_empty=True) if schema is not None else None
        )
        self._fds: set[FunctionalDependency] = set()
        self.update(fds)

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[AttrsLike, AttrsLike]],
        schema: Optional[Iterable[str]] = None,
    ) -> FDCollection:
        """
        Build a collection from ``(LHS, RHS)`` pairs.

        Accepts the ``list[tuple[frozenset[str], str]]`` produced by level-wise
        FD discovery (TANE, HyFD) as well as pairs of sets.
        """
        return cls((FunctionalDependency(lhs, rhs) for lhs, rhs in pairs), schema=schema)

    # ── Mutation ─────────────────────────────────────────────────────────────

    def add(self, fd: FunctionalDependency) -> None:
        if not isinstance(fd, FunctionalDependency):
            raise TypeError(f"FDCollection holds FunctionalDependency objects, got {type(fd).__name__}")
        if self.schema is not None:
            unknown = fd.attributes - self.schema
            if unknown:
                raise InvalidDependencyError(
                    f"{fd} uses attributes outside the schema: {sorted(unknown)}"
                )
        self._fds.add(fd)

    def update(self, fds: Iterable[FunctionalDependency]) -> None:
        """Add every dependency in *fds*; duplicates are ignored."""
        if self.schema is None and isinstance(fds, FDCollection):
            self._fds |= fds._fds
            return
        for fd in fds:
            self.add(fd)

    def discard(self, fd: FunctionalDependency) -> None:
        self._fds.discard(fd)

    # ── Set algebra ──────────────────────────────────────────────────────────

    def copy(self) -> FDCollection:
        return FDCollection(self)

    def union(self, *others: Iterable[FunctionalDependency]) -> FDCollection:
        result = self.copy()
        for other in others:
            result.update(other)
        return result

    def difference(self, other: Iterable[FunctionalDependency]) -> FDCollection:
        exclude = other if isinstance(other, FDCollection) else set(other)
        return FDCollection((fd for fd in self._fds if fd not in exclude), schema=self.schema)

    def issubset(self, other: Iterable[FunctionalDependency]) -> bool:
        if isinstance(other, FDCollection):
            return self._fds <= other._fds
        return self._fds <= set(other)

    def issuperset(self, other: Iterable[FunctionalDependency]) -> bool:
        if isinstance(other, FDCollection):
            return self._fds >= other._fds
        return self._fds >= set(other)

    def __or__(self, other: FDCollection) -> FDCollection:
        if not isinstance(other, FDCollection):
            return NotImplemented
        return self.union(other)

    def __sub__(self, other: FDCollection) -> FDCollection:
        if not isinstance(other, FDCollection):
            return NotImplemented
        return self.difference(other)

    def __le__(self, other: FDCollection) -> bool:
        if not isinstance(other, FDCollection):
            return NotImplemented
        return self.issubset(other)

    def __ge__(self, other: FDCollection) -> bool:
        if not isinstance(other, FDCollection):
            return NotImplemented
        return self.issuperset(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FDCollection):
            return NotImplemented
        return self._fds == other._fds

    __hash__ = None  # mutable

    # ── Inspection ───────────────────────────────────────────────────────────

    def attributes(self) -> frozenset[str]:
        """The attribute universe: every attribute mentioned by any member."""
        return frozenset().union(*(fd.attributes for fd in self._fds))

    def sorted(self) -> list[FunctionalDependency]:
        """Members in a deterministic display order."""
        return sorted(self._fds, key=lambda fd: fd.sort_key)

    def __contains__(self, fd: object) -> bool:
        return fd in self._fds

    def __iter__(self) -> Iterator[FunctionalDependency]:
        return iter(self._fds)

    def __len__(self) -> int:
        return len(self._fds)

    def __repr__(self) -> str:
        return f"FDCollection([{', '.join(str(fd) for fd in self.sorted())}])"
