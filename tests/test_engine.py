import pytest
from packages.datasets import WordStore
from packages.engine import (
    WILDCARD, ConstraintEngine, Constraints, InvalidPosition, SetKind, filter_candidates,
)

WORDS = ["crane", "trace", "grape", "plane", "place"]


@pytest.fixture
def engine():
    return ConstraintEngine(WordStore.from_words(WORDS, N=5))


def _fresh(engine):
    """Filter the full store from scratch with the engine's current constraints."""
    return filter_candidates(engine.store.words, engine.snapshot())


# --- scenarios ---

def test_include_then_exclude_narrows(engine):
    engine.add_letter(SetKind.INCLUDED, "c")
    engine.add_letter(SetKind.INCLUDED, "r")
    assert engine.matches() == ["crane", "trace"]
    engine.add_letter(SetKind.EXCLUDED, "t")
    assert engine.matches() == ["crane"]


def test_fixed_positions(engine):
    engine.set_position(1, "p")
    engine.set_position(5, "e")
    assert engine.matches() == ["plane", "place"]
    engine.add_letter(SetKind.INCLUDED, "c")
    assert engine.matches() == ["place"]


@pytest.mark.parametrize("pos", [0, 6, -1])
def test_out_of_range_position_leaves_state_unchanged(engine, pos):
    engine.add_letter(SetKind.EXCLUDED, "p")
    before = engine.snapshot()
    with pytest.raises(InvalidPosition):
        engine.set_position(pos, "p")
    with pytest.raises(InvalidPosition):
        engine.unset_position(pos)
    assert engine.snapshot() == before


# --- invariants ---

@pytest.mark.parametrize("first,second", [
    (SetKind.INCLUDED, SetKind.EXCLUDED),
    (SetKind.EXCLUDED, SetKind.INCLUDED),
])
def test_sets_are_mutually_exclusive(engine, first, second):
    engine.add_letter(first, "a")
    engine.add_letter(second, "a")
    by_kind = {SetKind.EXCLUDED: engine.excluded_letters(), SetKind.INCLUDED: engine.included_letters()}
    assert "a" in by_kind[second]
    assert "a" not in by_kind[first]


@pytest.mark.parametrize("kind", [SetKind.INCLUDED, SetKind.EXCLUDED])
def test_fixed_letter_leaves_both_sets(engine, kind):
    engine.add_letter(kind, "l")
    engine.set_position(2, "l")
    assert "l" not in engine.excluded_letters()
    assert "l" not in engine.included_letters()
    assert engine.positions() == [".", "l", ".", ".", "."]


def test_accessors_are_sorted_and_lowercased(engine):
    for ch in "ZxA":
        engine.add_letter(SetKind.EXCLUDED, ch)
    assert engine.excluded_letters() == ["a", "x", "z"]
    assert engine.included_letters() == []


def test_matches_is_idempotent(engine):
    engine.add_letter(SetKind.INCLUDED, "a")
    engine.set_position(5, "e")
    first = engine.matches()
    assert engine.matches() == first


def test_tightening_only_shrinks(engine):
    seen = engine.matches()
    for op in [
        lambda: engine.add_letter(SetKind.INCLUDED, "e"),
        lambda: engine.add_letter(SetKind.EXCLUDED, "g"),
        lambda: engine.set_position(2, "l"),
    ]:
        op()
        now = engine.matches()
        assert set(now) <= set(seen)
        seen = now
    assert seen == ["plane", "place"]


def test_reset_restores_initial_state(engine):
    engine.add_letter(SetKind.INCLUDED, "c")
    engine.add_letter(SetKind.EXCLUDED, "t")
    engine.set_position(1, "c")
    engine.matches()
    engine.reset()
    assert engine.excluded_letters() == []
    assert engine.included_letters() == []
    assert engine.positions() == [WILDCARD] * 5
    assert engine.snapshot() == Constraints.empty(5)
    assert engine.matches() == WORDS


# --- cache invalidation ---

def test_remove_letter_brings_words_back(engine):
    engine.add_letter(SetKind.EXCLUDED, "t")
    engine.add_letter(SetKind.EXCLUDED, "g")
    assert engine.matches() == ["crane", "plane", "place"]
    engine.remove_letter(SetKind.EXCLUDED, "g")
    assert engine.matches() == ["crane", "grape", "plane", "place"]


def test_unset_position_brings_words_back(engine):
    engine.set_position(1, "p")
    assert engine.matches() == ["plane", "place"]
    engine.unset_position(1)
    assert engine.matches() == WORDS


@pytest.mark.parametrize("kind", [SetKind.INCLUDED, SetKind.EXCLUDED])
def test_clear_set_brings_words_back(engine, kind):
    engine.add_letter(kind, "c")
    engine.matches()
    engine.clear_set(kind)
    assert engine.matches() == WORDS


def test_moving_letter_between_sets_refilters_from_store(engine):
    engine.add_letter(SetKind.INCLUDED, "c")
    assert engine.matches() == ["crane", "trace", "place"]
    engine.add_letter(SetKind.EXCLUDED, "c")
    assert engine.matches() == ["grape", "plane"] == _fresh(engine)


def test_overwriting_position_refilters_from_store(engine):
    engine.set_position(1, "p")
    engine.matches()
    engine.set_position(1, "g")
    assert engine.matches() == ["grape"] == _fresh(engine)


def test_fixing_excluded_letter_refilters_from_store(engine):
    engine.add_letter(SetKind.EXCLUDED, "t")
    engine.matches()
    engine.set_position(1, "t")
    assert engine.matches() == ["trace"] == _fresh(engine)


# --- input handling ---

@pytest.mark.parametrize("bad", ["", "ab", None])
def test_rejects_non_single_characters(engine, bad):
    with pytest.raises(ValueError):
        engine.add_letter(SetKind.INCLUDED, bad)


@pytest.mark.parametrize("bad", [WILDCARD, "7", "İ"])
def test_rejects_wildcard_digits_and_multichar_lowercase(engine, bad):
    before = engine.snapshot()
    for kind in (SetKind.INCLUDED, SetKind.EXCLUDED):
        with pytest.raises(ValueError):
            engine.add_letter(kind, bad)
    if bad != WILDCARD:
        with pytest.raises(ValueError):
            engine.set_position(1, bad)
    assert engine.snapshot() == before
    assert engine.matches() == WORDS


def test_wildcard_still_frees_a_position(engine):
    engine.set_position(1, "p")
    engine.set_position(1, WILDCARD)
    assert engine.positions() == [WILDCARD] * 5
    assert engine.matches() == WORDS


def test_position_letter_is_lowercased(engine):
    engine.set_position(1, "P")
    assert engine.positions()[0] == "p"
    assert engine.matches() == ["plane", "place"]


# --- N=6 ---

def test_engine_n6():
    store = WordStore.from_words(["letter", "settle", "little", "better", "crane"], N=6)
    eng = ConstraintEngine(store)
    assert eng.N == 6 and len(store) == 4
    eng.set_position(2, "e")
    eng.add_letter(SetKind.EXCLUDED, "b")
    assert eng.matches() == ["letter", "settle"]
    with pytest.raises(InvalidPosition):
        eng.set_position(7, "a")


def test_two_engines_share_one_store():
    store = WordStore.from_words(WORDS, N=5)
    a, b = ConstraintEngine(store), ConstraintEngine(store)
    a.add_letter(SetKind.INCLUDED, "g")
    assert a.matches() == ["grape"]
    assert b.matches() == WORDS
