from .dictionary import Dictionary, load_dictionary, parse_words
from .engine import (
    CROSS_CLASS_COST,
    GAP_COST,
    SAME_CLASS_COST,
    VOWELS,
    DistanceEngine,
    distance,
    distance_matrix,
    is_vowel,
    substitution_cost,
)
from .ranker import Ranker, Suggestion, rank, suggest

__all__ = [
    "CROSS_CLASS_COST",
    "Dictionary",
    "DistanceEngine",
    "GAP_COST",
    "Ranker",
    "SAME_CLASS_COST",
    "Suggestion",
    "VOWELS",
    "distance",
    "distance_matrix",
    "is_vowel",
    "load_dictionary",
    "parse_words",
    "rank",
    "substitution_cost",
    "suggest",
]
