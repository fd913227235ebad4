"""Jaro distance between translation keys.

To stay compatible with msgmerge, only the msgid of a key takes part in
the comparison. Two plural entries with near-identical msgids but very
different msgid_plurals therefore still score high.

Python 3.13+. Zero external dependencies.
"""

from polexengine.po import TranslationKey

__all__ = ["jaro_distance", "similarity"]


def jaro_distance(key1: TranslationKey, key2: TranslationKey) -> float:
    """Compute the Jaro distance between the msgids of two keys.

    Args:
        key1: msgid, or (msgid, msgid_plural) pair
        key2: msgid, or (msgid, msgid_plural) pair

    Returns:
        Similarity in [0.0, 1.0]; 1.0 for identical msgids

    Example:
        >>> jaro_distance("cat", "cat")
        1.0
        >>> jaro_distance(("cat", "cats"), "cat")
        1.0
        >>> round(jaro_distance("martha", "marhta"), 4)
        0.9444
    """
    return _jaro(_msgid(key1), _msgid(key2))


# Public alias
similarity = jaro_distance


def _msgid(key: TranslationKey) -> str:
    """Return the msgid component of a key."""
    if isinstance(key, tuple):
        return key[0]
    return key


def _jaro(s1: str, s2: str) -> float:
    """Jaro similarity of two strings.

    Characters match when equal and no further apart than
    max(len) // 2 - 1 positions. Inputs are put in a canonical order first
    (shorter first, then lexicographic) so the result never depends on
    argument order.
    """
    if s1 == s2:
        return 1.0
    if not s1 or not s2:
        return 0.0

    if (len(s1), s1) > (len(s2), s2):
        s1, s2 = s2, s1

    len1, len2 = len(s1), len(s2)
    window = max(len2 // 2 - 1, 0)

    matched2 = [False] * len2
    common1: list[str] = []
    for i, char in enumerate(s1):
        low = max(0, i - window)
        high = min(len2, i + window + 1)
        for j in range(low, high):
            if not matched2[j] and s2[j] == char:
                matched2[j] = True
                common1.append(char)
                break

    matches = len(common1)
    if matches == 0:
        return 0.0

    common2 = [char for char, hit in zip(s2, matched2, strict=True) if hit]
    transpositions = sum(a != b for a, b in zip(common1, common2, strict=True)) // 2

    return (matches / len1 + matches / len2 + (matches - transpositions) / matches) / 3
