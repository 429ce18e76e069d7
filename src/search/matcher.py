"""Typo-tolerant matching between normalized strings."""


def is_loose_match(normalized_query: str, normalized_candidate: str) -> bool:
    """Check whether two normalized strings match with at most one edit.

    Both arguments must already be normalized with
    :func:`src.search.normalize.normalize`; nothing is re-normalized here so
    one query can be checked against many fields cheaply.

    Policy:
    1. Containment in either direction is a match. An empty query is
       contained in everything and therefore matches.
    2. Lengths differing by more than one can never match.
    3. Otherwise walk both strings once, allowing a single insertion,
       deletion or substitution.

    This is a bounded approximation of edit distance. Transpositions cost
    two edits and are not accepted ("thia" does not match "thai").

    Args:
        normalized_query: Normalized search term
        normalized_candidate: Normalized field value

    Returns:
        True if the strings loosely match
    """
    if normalized_query in normalized_candidate or normalized_candidate in normalized_query:
        return True

    if abs(len(normalized_query) - len(normalized_candidate)) > 1:
        return False

    if len(normalized_query) <= len(normalized_candidate):
        shorter, longer = normalized_query, normalized_candidate
    else:
        shorter, longer = normalized_candidate, normalized_query

    same_length = len(shorter) == len(longer)
    i = j = edits = 0

    while i < len(shorter) and j < len(longer):
        if shorter[i] == longer[j]:
            i += 1
            j += 1
            continue

        edits += 1
        if edits > 1:
            return False

        if same_length:
            # Substitution
            i += 1
            j += 1
        else:
            # Insertion in the longer string
            j += 1

    # Trailing characters of the longer string count as insertions
    edits += len(longer) - j
    return edits <= 1
