"""Threshold-based fuzzy matching of translation keys.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Final

from polexengine.constants import DEFAULT_FUZZY_THRESHOLD
from polexengine.po import Entry, TranslationKey, key

from .distance import jaro_distance

__all__ = [
    "NO_MATCH",
    "Match",
    "MatchResult",
    "Matcher",
    "NoMatch",
    "find_best_match",
    "matcher",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Match:
    """Successful fuzzy match.

    Attributes:
        distance: Jaro distance of the two msgids
    """

    distance: float

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class NoMatch:
    """Keys are not similar enough. Use the NO_MATCH singleton."""

    def __bool__(self) -> bool:
        return False


NO_MATCH: Final[NoMatch] = NoMatch()

type MatchResult = Match | NoMatch
type Matcher = Callable[[TranslationKey, TranslationKey], MatchResult]


def matcher(threshold: float = DEFAULT_FUZZY_THRESHOLD) -> Matcher:
    """Build a function that checks whether two keys fuzzy-match.

    Args:
        threshold: Minimum Jaro distance for a match, in [0, 1]

    Returns:
        Function taking two keys and returning Match(distance) when the
        distance is >= threshold, NO_MATCH otherwise

    Raises:
        ValueError: If threshold is outside [0, 1]

    Example:
        >>> match = matcher(0.8)
        >>> match("Hello world", "Hello world!")
        Match(distance=0.9722222222222222)
        >>> match("Hello", "Goodbye")
        NoMatch()
    """
    if not 0.0 <= threshold <= 1.0:
        msg = f"Fuzzy threshold must be in [0, 1], got {threshold}"
        raise ValueError(msg)

    def match(key1: TranslationKey, key2: TranslationKey) -> MatchResult:
        distance = jaro_distance(key1, key2)
        if distance >= threshold:
            return Match(distance)
        return NO_MATCH

    return match


def find_best_match[E: Entry](
    target: TranslationKey,
    candidates: Iterable[E],
    threshold: float = DEFAULT_FUZZY_THRESHOLD,
) -> tuple[E, Match] | None:
    """Find the candidate whose key is most similar to target.

    Args:
        target: Key of the newly extracted entry
        candidates: Existing entries to search
        threshold: Minimum Jaro distance for a match, in [0, 1]

    Returns:
        (entry, Match) for the best candidate at or above threshold, or
        None. On equal distances the earliest candidate wins.

    Raises:
        ValueError: If threshold is outside [0, 1]
    """
    match = matcher(threshold)
    best: tuple[E, Match] | None = None

    for candidate in candidates:
        result = match(key(candidate), target)
        if isinstance(result, Match) and (best is None or result.distance > best[1].distance):
            best = (candidate, result)
            if result.distance == 1.0:
                break

    if best is not None:
        logger.debug(
            "Best fuzzy match for %r: %r (distance %.3f)",
            target,
            key(best[0]),
            best[1].distance,
        )
    return best
