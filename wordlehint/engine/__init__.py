from .errors import EngineError, MalformedFeedback, WordLengthMismatch, EmptyCandidateSet
from .feedback import (ABSENT, MISPLACED, CORRECT, SOLVED, WORD_LENGTH, score,
                       normalize_feedback, validate_pattern)
from .state import ConstraintState
from .evaluator import fold_feedback
from .constraints import filter_candidates, is_consistent, require_candidates
from .patterns import enumerate_patterns, reachable_marks
from .frequency import LetterRanking, frequency_key, compare_words, rank_by_frequency
from .matrix import CandidateMatrix
from .validation import normalize_word

__all__ = [
    "EngineError", "MalformedFeedback", "WordLengthMismatch", "EmptyCandidateSet",
    "ABSENT", "MISPLACED", "CORRECT", "SOLVED", "WORD_LENGTH",
    "score", "normalize_feedback", "validate_pattern",
    "ConstraintState", "fold_feedback",
    "filter_candidates", "is_consistent", "require_candidates",
    "enumerate_patterns", "reachable_marks",
    "LetterRanking", "frequency_key", "compare_words", "rank_by_frequency",
    "CandidateMatrix", "normalize_word",
]
