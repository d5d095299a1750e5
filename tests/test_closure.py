from __future__ import annotations

import logging
import random
import time

import pytest

from fd_closure import (
    ClosureLimitError,
    ClosureLimits,
    FDCollection,
    augment,
    closure,
    closure_with_stats,
    power_set,
    transitive,
    trivial,
)
from tests.helpers import chain_fds, make_fd, make_fds


def _assert_closed(fplus: FDCollection) -> None:
    """fplus is a fixpoint of all three rules over its own universe."""
    assert trivial(fplus) <= fplus
    for Z in power_set(fplus.attributes()):
        if Z:
            assert augment(fplus, Z) <= fplus
    assert len(transitive(fplus)) == 0


# ── Scenarios ─────────────────────────────────────────────────────────────────

def test_empty_input():
    assert closure(FDCollection()) == FDCollection()


def test_single_dependency_exact_fixpoint(single):
    # Determinants only ever grow from {A}, so nothing with B alone on the
    # left is derivable: B -> B is absent.
    assert closure(single) == make_fds(
        ("A", "B"),
        ("A", "A"),
        ("A", "AB"),
        ("AB", "A"),
        ("AB", "B"),
        ("AB", "AB"),
    )


def test_transitive_chain(chain):
    fplus = closure(chain)
    assert make_fd("A", "C") in fplus
    assert make_fd("A", "BC") in fplus
    assert make_fd("A", "ABC") in fplus
    assert make_fd("C", "C") not in fplus


def test_disjoint_dependencies_do_not_cross(disjoint):
    fplus = closure(disjoint)
    left, right = frozenset("AB"), frozenset("CD")
    for fd in fplus:
        if fd.determinant <= left:
            assert not fd.dependent & right, str(fd)
        if fd.determinant <= right:
            assert not fd.dependent & left, str(fd)
    # augmentation still relates the two groups
    assert make_fd("AC", "BC") in fplus
    assert make_fd("AC", "BD") in fplus


# ── Properties ────────────────────────────────────────────────────────────────

CASES = [
    (("A", "B"),),
    (("A", "B"), ("B", "C")),
    (("A", "B"), ("C", "D")),
    (("AB", "C"), ("C", "A")),
    (("A", "B"), ("B", "A")),
]


@pytest.mark.parametrize("pairs", CASES)
def test_input_is_contained(pairs):
    fds = make_fds(*pairs)
    assert fds <= closure(fds)


@pytest.mark.parametrize("pairs", CASES)
def test_closure_is_idempotent(pairs):
    fplus = closure(make_fds(*pairs))
    assert closure(fplus) == fplus


@pytest.mark.parametrize("pairs", CASES)
def test_result_is_closed_under_every_rule(pairs):
    _assert_closed(closure(make_fds(*pairs)))


@pytest.mark.parametrize("pairs", CASES)
def test_trivial_inclusion(pairs):
    fplus = closure(make_fds(*pairs))
    for fd in fplus:
        for Z in power_set(fd.determinant):
            if Z:
                assert make_fd("".join(fd.determinant), "".join(Z)) in fplus


@pytest.mark.parametrize("pairs", CASES)
def test_transitive_closure_property(pairs):
    fplus = closure(make_fds(*pairs))
    by_determinant = {}
    for fd in fplus:
        by_determinant.setdefault(fd.determinant, []).append(fd)
    for fd1 in fplus:
        for fd2 in by_determinant.get(fd1.dependent, []):
            assert make_fd("".join(fd1.determinant), "".join(fd2.dependent)) in fplus


def test_superset_stability():
    small = make_fds(("A", "B"))
    large = make_fds(("A", "B"), ("B", "C"))
    assert closure(small) <= closure(large)


def test_insertion_order_does_not_matter():
    pairs = [("AB", "C"), ("C", "D"), ("D", "A"), ("B", "D")]
    expected = closure(make_fds(*pairs))
    rng = random.Random(7)
    for _ in range(3):
        shuffled = pairs[:]
        rng.shuffle(shuffled)
        assert closure(make_fds(*shuffled)) == expected


def test_input_is_not_mutated(chain):
    snapshot = chain.copy()
    closure(chain)
    assert chain == snapshot


def test_schema_is_carried_to_the_result():
    fds = FDCollection([make_fd("A", "B")], schema={"A", "B", "C"})
    fplus = closure(fds)
    assert fplus.schema == frozenset({"A", "B", "C"})
    assert fplus == closure(make_fds(("A", "B")))


# ── Stats ─────────────────────────────────────────────────────────────────────

def test_stats_counters(single):
    fplus, stats = closure_with_stats(single)
    assert stats["n_input"] == 1
    assert stats["n_universe"] == 2
    assert stats["n_power_set"] == 3
    assert stats["n_iterations"] == 2
    assert stats["n_closure"] == len(fplus) == 6
    assert stats["n_augmented"] + stats["n_trivial"] + stats["n_transitive"] == 5


def test_stats_of_empty_input():
    fplus, stats = closure_with_stats(FDCollection())
    assert len(fplus) == 0
    assert stats["n_iterations"] == 1
    assert stats["n_power_set"] == 0


def test_closure_logs_progress(caplog, chain):
    with caplog.at_level(logging.DEBUG, logger="fd_closure"):
        closure(chain)
    messages = [record.getMessage() for record in caplog.records]
    assert any("over 3 attributes" in m for m in messages)
    assert any("fixpoint" in m for m in messages)


# ── Limits ────────────────────────────────────────────────────────────────────

def test_universe_limit(single):
    with pytest.raises(ClosureLimitError) as excinfo:
        closure(single, ClosureLimits(max_universe=1))
    assert excinfo.value.limit == "max_universe"
    assert excinfo.value.value == 2
    assert excinfo.value.maximum == 1


def test_iteration_limit(single):
    with pytest.raises(ClosureLimitError) as excinfo:
        closure(single, ClosureLimits(max_iterations=1))
    assert excinfo.value.limit == "max_iterations"


def test_dependency_limit(single):
    with pytest.raises(ClosureLimitError) as excinfo:
        closure(single, ClosureLimits(max_dependencies=3))
    assert excinfo.value.limit == "max_dependencies"


def test_transitive_round_limit_propagates():
    fds = make_fds(("A", "B"), ("B", "C"), ("C", "D"))
    with pytest.raises(ClosureLimitError) as excinfo:
        closure(fds, ClosureLimits(max_transitive_rounds=1))
    assert excinfo.value.limit == "max_transitive_rounds"


def test_limit_breach_is_logged(caplog, single):
    with caplog.at_level(logging.WARNING, logger="fd_closure"):
        with pytest.raises(ClosureLimitError):
            closure(single, ClosureLimits(max_universe=1))
    assert any("max_universe" in record.getMessage() for record in caplog.records)


def test_unbounded_limits(chain):
    assert closure(chain, ClosureLimits.unbounded()) == closure(chain)


def test_derivation_limit(single):
    with pytest.raises(ClosureLimitError) as excinfo:
        closure(single, ClosureLimits(max_derivations=2))
    assert excinfo.value.limit == "max_derivations"


def test_stats_count_derivations(single):
    _, stats = closure_with_stats(single)
    assert stats["n_derivations"] > 0
    assert stats["n_derivations"] <= ClosureLimits().max_derivations


# ── Default limits fail fast ──────────────────────────────────────────────────

def test_defaults_accept_a_small_chain():
    fplus = closure(chain_fds(4))
    assert make_fd("A", "D") in fplus


def test_defaults_refuse_a_wide_universe_immediately():
    with pytest.raises(ClosureLimitError) as excinfo:
        closure(chain_fds(ClosureLimits().max_universe + 1))
    assert excinfo.value.limit == "max_universe"


def test_defaults_stop_the_largest_accepted_universe_quickly():
    # A -> B -> ... -> H has a closure far too large to build in reasonable
    # time; the derivation budget must stop it within seconds
    started = time.perf_counter()
    with pytest.raises(ClosureLimitError) as excinfo:
        closure(chain_fds(ClosureLimits().max_universe))
    assert excinfo.value.limit in {"max_derivations", "max_dependencies"}
    assert time.perf_counter() - started < 60
