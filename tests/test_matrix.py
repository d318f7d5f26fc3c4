from wordlehint.datasets import load_words
from wordlehint.engine import CandidateMatrix, ConstraintState, filter_candidates, fold_feedback, score

WORDS = load_words().words


def test_matrix_matches_filter_on_real_feedback():
    m = CandidateMatrix(WORDS)
    for target in WORDS[::17]:
        state = ConstraintState()
        assert m.count(state) == len(WORDS)
        for g in ["raise", "cloth", "geese"]:
            fold_feedback(state, g, score(g, target))
            assert m.filter(state) == filter_candidates(WORDS, state)
            assert m.count(state) == len(filter_candidates(WORDS, state))


def test_matrix_matches_filter_on_hand_built_state():
    state = ConstraintState()
    state.known[0] = "s"
    state.excluded.update({"e", "o"})
    state.present.update({"t", "a"})
    state.excluded_at[1].add("t")
    m = CandidateMatrix(WORDS)
    assert m.filter(state) == filter_candidates(WORDS, state)
    assert m.count(state) > 0


def test_matrix_keeps_duplicates():
    m = CandidateMatrix(["crane", "crane", "stone"])
    assert len(m) == 3
    assert m.count(ConstraintState()) == 3


def test_empty_matrix():
    m = CandidateMatrix([])
    assert len(m) == 0
    assert m.count(ConstraintState()) == 0
    state = ConstraintState()
    state.present.add("a")
    assert m.filter(state) == []
