"""Fuzzy matching between translation entries.

Used while updating a catalog: a newly extracted entry with no exact
counterpart is compared with the existing translations, and the closest
one above the threshold donates its msgstr. The result is flagged fuzzy
for human review.

Python 3.13+. Zero external dependencies.
"""

from .distance import jaro_distance, similarity
from .matching import (
    NO_MATCH,
    Match,
    Matcher,
    MatchResult,
    NoMatch,
    find_best_match,
    matcher,
)
from .merge import merge

__all__ = [
    "NO_MATCH",
    "Match",
    "MatchResult",
    "Matcher",
    "NoMatch",
    "find_best_match",
    "jaro_distance",
    "matcher",
    "merge",
    "similarity",
]
