import pytest
from wordlehint.datasets import load_words
from wordlehint.engine import (ConstraintState, fold_feedback, filter_candidates, is_consistent,
                               require_candidates, score, MalformedFeedback, WordLengthMismatch,
                               EmptyCandidateSet)

WORDS = load_words().words

# Play these guesses against each target and check properties along the way.
GUESS_SEQUENCES = [
    ["raise", "clout", "nymph"],
    ["crane", "sloth", "dumpy"],
    ["geese", "speed", "level"],
    ["apple", "mango", "grape"],
]
TARGETS = ["crane", "abide", "sweet", "fizzy", "hatch", "level", "these", "ample"]


def _state_after(guesses, target):
    state = ConstraintState()
    for g in guesses:
        fold_feedback(state, g, score(g, target))
    return state


def _violations(word, state):
    """Independent restatement of the filter rules, returning what fails."""
    out = []
    for i, ch in enumerate(word):
        if state.known[i] is not None and state.known[i] != ch:
            out.append(f"known[{i}]")
        if ch in state.excluded:
            out.append(f"excluded {ch}")
        if ch in state.excluded_at[i]:
            out.append(f"excluded_at[{i}] {ch}")
    out += [f"missing {ch}" for ch in state.present if ch not in word]
    return out


def _check_invariant(state):
    for ch in state.excluded:
        assert ch not in state.present
        assert ch not in state.known
        assert all(ch not in s for s in state.excluded_at)


# --- fold scenarios ---
def test_fold_apple_duplicate_letters():
    state = ConstraintState()
    fold_feedback(state, "apple", "XXZZZ")
    assert state.known == [None, None, "p", "l", "e"]
    assert state.excluded == {"a"}
    assert not ({"p", "l", "e"} & state.excluded)
    # 'a' is excluded, so every word containing it is gone
    assert filter_candidates(["apple", "mango", "grape", "duple"], state) == ["duple"]


def test_fold_misplaced_then_absent_same_letter():
    # "speed" vs "abide": first 'e' yellow, second grey. 'e' must not be excluded.
    state = ConstraintState()
    fold_feedback(state, "speed", "XXYXY")
    assert state.excluded == {"s", "p"}
    assert state.present == {"e", "d"}
    assert state.excluded_at[2] == {"e"} and state.excluded_at[4] == {"d"}
    assert "abide" in filter_candidates(WORDS + ["abide"], state)


def test_fold_absent_before_correct_same_letter():
    # grey occurrence comes first in the word; correct one later
    state = ConstraintState()
    fold_feedback(state, "sense", "XZZZZ")
    assert "s" not in state.excluded
    assert state.known == [None, "e", "n", "s", "e"]


def test_fold_absent_does_not_undo_earlier_rounds():
    state = ConstraintState()
    fold_feedback(state, "crane", "XXXXY")   # 'e' present
    fold_feedback(state, "geese", "XXXXX")   # would exclude 'e' on its own
    assert "e" in state.present and "e" not in state.excluded
    _check_invariant(state)


def test_fold_removes_from_excluded_when_later_shown_present():
    state = ConstraintState()
    fold_feedback(state, "crane", "XXXXX")
    assert "e" in state.excluded
    fold_feedback(state, "sweet", "XXYXX")
    assert "e" not in state.excluded and "e" in state.present
    _check_invariant(state)


def test_fold_is_idempotent():
    for guesses in GUESS_SEQUENCES:
        for target in TARGETS:
            once = _state_after(guesses, target)
            twice = _state_after(guesses, target)
            for g in guesses:
                fold_feedback(twice, g, score(g, target))
            assert once == twice


@pytest.mark.parametrize("pattern", ["XQZXX", "XXXX", "XXXXXX", "xxxxx", "G-YY-"])
def test_malformed_feedback_leaves_state_unchanged(pattern):
    state = ConstraintState()
    fold_feedback(state, "raise", "XYXXZ")
    before = state.copy()
    with pytest.raises(MalformedFeedback):
        fold_feedback(state, "crane", pattern)
    assert state == before


def test_bad_guess_leaves_state_unchanged():
    state = ConstraintState()
    with pytest.raises(WordLengthMismatch):
        fold_feedback(state, "cranes", "XXXXX")
    assert state.is_empty()


def test_state_method_and_clear():
    state = ConstraintState()
    state.fold("raise", "XYXXZ")
    assert not state.is_empty()
    assert state.known[4] == "e"
    state.clear()
    assert state.is_empty()
    assert state == ConstraintState()


def test_copy_is_independent():
    state = ConstraintState()
    state.fold("raise", "XYXXZ")
    sim = state.copy()
    sim.fold("clout", "ZZZZZ")
    assert state.known == [None, None, None, None, "e"]
    assert "o" not in state.present


# --- filter scenarios ---
def test_filter_known_first_letter():
    state = ConstraintState()
    state.known[0] = "c"
    assert filter_candidates(["crane", "stone", "climb"], state) == ["crane", "climb"]


def test_filter_present_somewhere():
    state = ConstraintState()
    state.present.add("z")
    assert filter_candidates(["fizzy", "happy"], state) == ["fizzy"]


def test_filter_excluded_at_position():
    state = ConstraintState()
    state.present.add("r")
    state.excluded_at[1].add("r")
    assert filter_candidates(["crane", "rebut", "tiger", "happy"], state) == ["rebut", "tiger"]


def test_filter_preserves_order_and_duplicates():
    state = ConstraintState()
    words = ["stone", "crane", "stone", "climb"]
    assert filter_candidates(words, state) == words
    assert filter_candidates(words, state) is not words


def test_filter_does_not_mutate_state():
    state = _state_after(["raise"], "crane")
    before = state.copy()
    filter_candidates(WORDS, state)
    assert state == before


def test_require_candidates():
    assert require_candidates(["crane"]) == ["crane"]
    with pytest.raises(EmptyCandidateSet):
        require_candidates([])


# --- properties ---
def test_target_always_survives_true_feedback():
    for guesses in GUESS_SEQUENCES:
        for target in TARGETS:
            state = _state_after(guesses, target)
            _check_invariant(state)
            assert is_consistent(target, state), (guesses, target, state)


def test_monotonic_narrowing():
    for guesses in GUESS_SEQUENCES:
        for target in TARGETS:
            state = ConstraintState()
            prev = set(filter_candidates(WORDS, state))
            for g in guesses:
                fold_feedback(state, g, score(g, target))
                cur = set(filter_candidates(WORDS, state))
                assert cur <= prev
                prev = cur


def test_filter_soundness():
    for guesses in GUESS_SEQUENCES:
        for target in TARGETS[:4]:
            state = _state_after(guesses, target)
            kept = set(filter_candidates(WORDS, state))
            for w in WORDS:
                if w in kept:
                    assert _violations(w, state) == []
                else:
                    assert _violations(w, state)
