"""Personality - Enneagram quiz, type profiles and stored results

Components:
    classifier.py: Pure scoring of quiz answers
        - Each question belongs to exactly one of the nine types
        - Answers are 1-5 Likert values, summed per type
        - Highest total wins; ties go to the lowest type number

    profiles.py: Static description of each type
        - Strengths, challenges and ADHD-oriented growth tips
        - One-line advice used by the suggestions engine

    results.py: One stored result per user (retaking replaces it)

Known property:
    Totals are not normalized by how many questions a type has, so a
    type with more questions in the bank is structurally favored. The
    built-in bank has two questions per type, which keeps this neutral.
"""

from enum import IntEnum


class EnneagramType(IntEnum):
    PERFECTIONIST = 1
    HELPER = 2
    ACHIEVER = 3
    INDIVIDUALIST = 4
    INVESTIGATOR = 5
    LOYALIST = 6
    ENTHUSIAST = 7
    CHALLENGER = 8
    PEACEMAKER = 9


# Likert answer scale
MIN_ANSWER = 1
MAX_ANSWER = 5

__all__ = ["EnneagramType", "MIN_ANSWER", "MAX_ANSWER"]
