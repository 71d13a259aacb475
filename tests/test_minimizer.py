import logging
import random

import pytest

from ttmin import FailureReason, ProductTerm, TernaryTreeMinimizer, TooFewVariablesError, minimize


def cover(*cubes, names="ABCD"):
    names = list(names[:len(cubes[0])]) if cubes else []
    return {ProductTerm.from_cube(cube, names) for cube in cubes}


def cubes_of(terms, names):
    return sorted(term.to_cube(list(names)) for term in terms)


def test_scenario_two_variables():
    result = minimize(cover("01", "10", "00"), ["A", "B"])
    assert result == cover("0-", "10")
    assert len(result) == 2


def test_scenario_merge_on_first_variable():
    result = minimize(cover("1111", "0111"), ["A", "B", "C", "D"])
    assert result == cover("-111")


@pytest.mark.parametrize("names, given, expected", [
    ("ABC", ["011", "101", "100"], ["011", "10-"]),
    ("ABC", ["001", "010", "011", "100", "101", "111"], ["001", "01-", "10-", "111"]),
    ("ABC", ["000", "010", "011", "111"], ["000", "01-", "111"]),
    ("ABC", ["000", "010", "011", "100"], ["-00", "01-"]),
    ("ABCD", ["1011", "1010", "111-"], ["1-1-"]),
    ("ABCD", ["1011", "1010", "111-", "0-1-"], ["0-1-", "1-1-"]),
    ("ABCD", ["0000", "0001", "0100", "01-0", "1011", "1111"], ["000-", "01-0", "1-11"]),
])
def test_minimization_scenarios(names, given, expected):
    result = minimize(cover(*given, names=names), list(names))
    assert cubes_of(result, names) == expected


def test_dont_care_match_absorbs_siblings_by_default():
    result = minimize(cover("0-", "10", "00"), ["A", "B"])
    assert cubes_of(result, "AB") == ["0-", "10"]


def test_exhaustive_merge_keeps_absorbed_siblings():
    result = minimize(cover("0-", "10", "00"), ["A", "B"], exhaustive_merge=True)
    assert cubes_of(result, "AB") == ["-0", "0-"]

    given = cover("0000", "0001", "0100", "01-0", "1011", "1111")
    result = TernaryTreeMinimizer(exhaustive_merge=True).apply(given, list("ABCD"))
    assert cubes_of(result, "ABCD") == ["000-", "01-0", "0100", "1-11"]


def test_apply_does_not_touch_its_inputs():
    given = cover("01", "10", "00")
    snapshot = {t.copy() for t in given}
    order = ["A", "B"]
    minimize(given, order)
    assert given == snapshot
    assert order == ["A", "B"]


def test_result_terms_are_not_aliased_to_input():
    given = cover("011", "010")
    result = minimize(given, ["A", "B", "C"])
    for term in result:
        term.add_literal("Z", term["A"])
    assert all(len(t) == 3 for t in given)


def test_rotate_left():
    assert TernaryTreeMinimizer.rotate_left(["A", "B", "C"]) == ["B", "C", "A"]
    assert TernaryTreeMinimizer.rotate_left(["A"]) == ["A"]
    assert TernaryTreeMinimizer.rotate_left([]) == []
    order = ["A", "B"]
    TernaryTreeMinimizer.rotate_left(order)
    assert order == ["A", "B"]


def test_build_and_merge_merges_on_last_variable():
    minimizer = TernaryTreeMinimizer()
    merged = minimizer.build_and_merge(cover("01", "00", "10"), ["A", "B"])
    assert cubes_of(merged, "AB") == ["0-", "10"]
    merged = minimizer.build_and_merge(cover("01", "00", "10"), ["B", "A"])
    assert cubes_of(merged, "AB") == ["-0", "01"]

def test_build_and_merge_needs_two_variables():
    minimizer = TernaryTreeMinimizer()
    with pytest.raises(TooFewVariablesError) as excinfo:
        minimizer.build_and_merge(cover("1", names="A"), ["A"])
    assert excinfo.value.reason is FailureReason.TOO_FEW_VARIABLES
    assert excinfo.value.count == 1


def test_apply_absorbs_short_orders():
    assert minimize(cover("1", "0", names="A"), ["A"]) == cover("1", "0", names="A")
    assert minimize({ProductTerm.empty()}, []) == {ProductTerm.empty()}


def test_apply_on_empty_set():
    assert minimize(set(), ["A", "B", "C"]) == set()


def test_apply_logs_rounds(caplog):
    with caplog.at_level(logging.DEBUG, logger="ttmin.minimizer"):
        minimize(cover("01", "10", "00"), ["A", "B"])
    rounds = [r for r in caplog.records if r.getMessage().startswith("Round")]
    assert len(rounds) == 3


def _random_cover(rng, names, dont_cares):
    alphabet = "01-" if dont_cares else "01"
    count = rng.randint(1, 2 ** len(names))
    return {
        ProductTerm.from_cube("".join(rng.choice(alphabet) for _ in names), names)
        for _ in range(count)
    }


def _assignments(terms, names):
    return {m.to_cube(names) for t in terms for m in t.min_terms(names)}


@pytest.mark.parametrize("exhaustive", [False, True])
@pytest.mark.parametrize("seed", range(40))
def test_random_covers_are_sound_and_complete(seed, exhaustive):
    rng = random.Random(seed)
    names = list("ABCDE"[:rng.randint(2, 5)])
    given = _random_cover(rng, names, dont_cares=seed % 2 == 1)

    result = minimize(given, names, exhaustive_merge=exhaustive)

    assert len(result) <= len(given)
    assert _assignments(result, names) == _assignments(given, names)
    for term in given:
        assert any(out.covers(term) for out in result)


def test_result_is_deterministic():
    given = cover("0000", "0001", "0100", "01-0", "1011", "1111")
    first = minimize(given, list("ABCD"))
    for _ in range(5):
        assert minimize(list(given), list("ABCD")) == first
