from .errors import FeedbackInputError, InconsistentFeedback, LengthMismatch, WordleError
from .feedback import FeedbackResult, LetterOutcome, compute_feedback, feedback_code, parse_feedback
from .restrictions import LetterRestriction, WordRestrictions
from .words import WordBank, WordCounter, filter_candidates

__all__ = [
    "WordleError", "LengthMismatch", "InconsistentFeedback", "FeedbackInputError",
    "LetterOutcome", "FeedbackResult", "compute_feedback", "feedback_code", "parse_feedback",
    "LetterRestriction", "WordRestrictions",
    "WordBank", "WordCounter", "filter_candidates",
]
