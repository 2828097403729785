"""
Tool: Enneagram Classifier
Purpose: Score quiz answers into the nine types and pick the dominant one

    score[type] = sum of answers to that type's questions
    dominant    = type with the highest score, lowest type number on ties

The classifier is pure: same questions and answers, same result.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from . import MAX_ANSWER, MIN_ANSWER, EnneagramType


@dataclass(frozen=True)
class Question:
    id: int
    text: str
    category: EnneagramType


QUESTION_BANK: List[Question] = [
    Question(1, "I work hard to do things the right way and get frustrated by mistakes.", EnneagramType.PERFECTIONIST),
    Question(2, "I naturally notice what other people need and I like to help.", EnneagramType.HELPER),
    Question(3, "I am driven by goals and I like being recognized for my achievements.", EnneagramType.ACHIEVER),
    Question(4, "I value authenticity and I have a rich inner emotional life.", EnneagramType.INDIVIDUALIST),
    Question(5, "I prefer to observe and analyze before acting, and I value my privacy.", EnneagramType.INVESTIGATOR),
    Question(6, "I look for security and guidance, and I am loyal to the people and systems I trust.", EnneagramType.LOYALIST),
    Question(7, "I am optimistic, have many interests and like to keep my options open.", EnneagramType.ENTHUSIAST),
    Question(8, "I am direct, assertive and like to be in control of situations.", EnneagramType.CHALLENGER),
    Question(9, "I value harmony, avoid conflict and easily see different perspectives.", EnneagramType.PEACEMAKER),
    Question(10, "When stressed, I tend to become more critical and perfectionistic.", EnneagramType.PERFECTIONIST),
    Question(11, "I sometimes neglect my own needs to take care of others.", EnneagramType.HELPER),
    Question(12, "I feel energized when I am working toward a clear goal.", EnneagramType.ACHIEVER),
    Question(13, "I feel different from other people and sometimes misunderstood.", EnneagramType.INDIVIDUALIST),
    Question(14, "I need time alone to process information and recharge.", EnneagramType.INVESTIGATOR),
    Question(15, "I tend to anticipate problems and prepare for different scenarios.", EnneagramType.LOYALIST),
    Question(16, "I find it hard to commit to a single option for long.", EnneagramType.ENTHUSIAST),
    Question(17, "I am comfortable making hard decisions and confronting problems.", EnneagramType.CHALLENGER),
    Question(18, "I prefer to avoid conflict and keep the peace, even if it means not giving my opinion.", EnneagramType.PEACEMAKER),
]


@dataclass(frozen=True)
class ClassificationResult:
    """Dominant type (None when there were no answers) and per-type totals."""

    dominant: Optional[EnneagramType]
    scores: Dict[EnneagramType, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": int(self.dominant) if self.dominant is not None else None,
            "scores": {int(t): s for t, s in self.scores.items()},
        }


def _check_answer(index: int, answer) -> int:
    if isinstance(answer, bool) or not isinstance(answer, int):
        raise ValueError(f"Answer {index} must be an integer, got {answer!r}")
    if answer < MIN_ANSWER or answer > MAX_ANSWER:
        raise ValueError(
            f"Answer {index} must be between {MIN_ANSWER} and {MAX_ANSWER}, got {answer}"
        )
    return answer


def score_answers(questions: Sequence[Question], answers: Sequence[int]) -> Dict[EnneagramType, int]:
    """Per-type totals; every type is present, unanswered types score 0."""
    if len(questions) != len(answers):
        raise ValueError(
            f"Got {len(answers)} answers for {len(questions)} questions"
        )

    scores = {t: 0 for t in EnneagramType}
    for index, (question, answer) in enumerate(zip(questions, answers)):
        scores[EnneagramType(question.category)] += _check_answer(index, answer)
    return scores


def classify(
    questions: Sequence[Question] = QUESTION_BANK,
    answers: Sequence[int] = (),
) -> ClassificationResult:
    """
    Pick the dominant type for a full set of answers.

    Args:
        questions: Ordered questions, each tagged with one type
        answers: Likert answers (1-5) in the same order

    Returns:
        ClassificationResult; dominant is None when no answers were given yet

    Raises:
        ValueError: length mismatch or an answer outside the 1-5 scale
    """
    if len(answers) == 0:
        return ClassificationResult(dominant=None, scores={t: 0 for t in EnneagramType})

    scores = score_answers(questions, answers)
    best = max(scores.values())
    # Ties resolved by lowest type number
    dominant = min(t for t, s in scores.items() if s == best)
    return ClassificationResult(dominant=dominant, scores=scores)
