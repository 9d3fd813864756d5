"""Char-level match ranking of a candidate text against a query.

The tiers are checked from best to worst, and the first one that holds wins:

1. equals: "ttotc" vs "TTotc"
2. starts_with: "ttotc-starts with"
3. word_starts_with: "word starts with ttotc-first"
4. contains: "the 1-ttotc-2 container"
5. acronym: "The Tail of Two Cities"
6. matches: "The Tail of Forty Cities" (chars in order)

Comparison is case-insensitive, with no other normalization.
"""

from ranks.constants import MatchRank, WORD_SEP, SUB_WORD_SEP


def to_match_text(value) -> str:
    """Stringify and lowercase a value for matching. `None` becomes ""."""
    if value is None:
        return ""
    return str(value).lower()


def get_acronym(text: str) -> str:
    """Concat first chars of all space- and hyphen-separated sub-words.

    Example:
        >>> get_acronym("the tail of two-cities")
        'ttotc'
    """
    acronym = ""
    for word in text.split(WORD_SEP):
        for sub_word in word.split(SUB_WORD_SEP):
            acronym += sub_word[:1]
    return acronym


def strings_by_char_order(text: str, query: str) -> MatchRank:
    """Check if all chars of query are found in text in the same order.

    The cursor only moves forward, so each char of text is used at most once.
    """
    cursor = 0
    for char in query:
        pos = text.find(char, cursor)
        if pos < 0:
            return MatchRank.NO_MATCH
        cursor = pos + 1
    return MatchRank.MATCHES


def get_match_ranking(text, query) -> MatchRank:
    """Rank how well query matches text.

    Args:
        text: Candidate to test against. Non-str values are stringified.
        query: Query to rank. Non-str values are stringified.

    Returns:
        The best MatchRank tier that holds.
    """
    text = to_match_text(text)
    query = to_match_text(query)

    # too long
    if len(query) > len(text):
        return MatchRank.NO_MATCH

    if text == query:
        return MatchRank.EQUALS

    if text.startswith(query):
        return MatchRank.STARTS_WITH

    if f"{WORD_SEP}{query}" in text:
        return MatchRank.WORD_STARTS_WITH

    if query in text:
        return MatchRank.CONTAINS
    elif len(query) == 1:
        # single char not even contained in text
        return MatchRank.NO_MATCH

    if query in get_acronym(text):
        return MatchRank.ACRONYM

    return strings_by_char_order(text, query)


if __name__ == "__main__":
    from tclogger import logger, logstr, brk

    query = "ttotc"
    texts = [
        "TTotc",
        "ttotc-starts with",
        "Word starts with ttotc-first right?",
        "The 1-ttotc-2 container",
        "The Tail of Two Cities",
        "The Tail of Forty Cities",
        "no match",
    ]
    logger.note(f"> Query: {logstr.mesg(brk(query))}")
    for text in texts:
        rank = get_match_ranking(text, query)
        logger.mesg(f"  * {rank.label:<16} {logstr.file(brk(text))}")

    # python -m ranks.matcher
