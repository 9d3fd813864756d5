"""
Match Sorter

This module filters a list of items by a query and sorts the matched items
from best to worst match. It powers typeahead-style filtering over in-memory
lists of strings or records.

Sort Order:
    1. Rank tier, descending (equals first, matches last)
    2. Key index, ascending (items matched by an earlier key first)
    3. Original index, ascending (keeps input order among equal items)

Original indexes are unique, so no two ranked items ever compare equal.

Usage:
    >>> from ranks.sorter import match_sorter
    >>> match_sorter(["Foo1", "Bar", "Foo2"], "foo")
    ['Foo1', 'Foo2']
    >>> match_sorter([{"name": "baz"}, {"name": "foo"}], "ba", keys=["name"])
    [{'name': 'baz'}]
"""

from collections import Counter
from dataclasses import dataclass
from typing import Any

from tclogger import logger, logstr, brk, dict_to_str

from ranks.constants import MatchRank, MATCH_RANK_TYPE, NO_KEY_INDEX
from ranks.constants import MATCH_THRESHOLD, MATCH_VERBOSE
from ranks.keys import KEY_TYPE, normalize_keys, rank_by_selectors


@dataclass
class RankedItem:
    """An item with its ranking info.

    Attributes:
        item: The original item (same object as in the input list).
        rank: Best rank tier of the item among keys.
        index: Position of the item in the input list.
        key_index: Index of the key that reached the rank, -1 for plain items.
    """

    item: Any
    rank: MatchRank
    index: int
    key_index: int = NO_KEY_INDEX

    def sort_key(self) -> tuple[int, float, int]:
        # -1 (no key) goes after any real key index when the two are mixed
        if self.key_index == NO_KEY_INDEX:
            key_order = float("inf")
        else:
            key_order = self.key_index
        return (-self.rank, key_order, self.index)


class MatchSorter:
    """Rank items against a query and sort the matched ones.

    Example:
        >>> sorter = MatchSorter(keys=["name", "owner.name"])
        >>> sorter.sort(hits, "ttotc")
        >>> for ranked in sorter.rank(hits, "ttotc"):
        ...     print(ranked.rank.label, ranked.key_index, ranked.item)
    """

    def __init__(
        self,
        keys: list[KEY_TYPE] = None,
        threshold: MATCH_RANK_TYPE = None,
        verbose: bool = None,
    ):
        """
        Args:
            keys: Ordered keys to rank records by. None to rank items as text.
            threshold: Lowest rank tier to keep. Defaults to configs.
            verbose: Log ranking stats. Defaults to configs.
        """
        self.keys = normalize_keys(keys)
        if threshold is None:
            threshold = MATCH_THRESHOLD
        self.threshold = MatchRank.from_name(threshold)
        if self.threshold == MatchRank.NO_MATCH:
            raise ValueError(f"Invalid threshold: {threshold}, must be above no_match")
        self.verbose = MATCH_VERBOSE if verbose is None else verbose

    def is_kept(self, rank: MatchRank) -> bool:
        return rank > MatchRank.NO_MATCH and rank >= self.threshold

    def rank(self, items: list, query: str) -> list[RankedItem]:
        """Rank items, drop unmatched ones, and sort from best to worst.

        Args:
            items: Items to rank. Not modified.
            query: Query to rank items against.

        Returns:
            List of RankedItem in sorted order.
        """
        if not isinstance(items, (list, tuple)):
            items = list(items)
        ranked_items = []
        for index, item in enumerate(items):
            rank, key_index = rank_by_selectors(item, self.keys, query)
            if self.is_kept(rank):
                ranked_items.append(RankedItem(item, rank, index, key_index))
        ranked_items.sort(key=RankedItem.sort_key)
        if self.verbose:
            self.log_ranked_items(ranked_items, query=query, total=len(items))
        return ranked_items

    def sort(self, items: list, query: str) -> list:
        """Return a new list of matched items sorted from best to worst."""
        return [ranked.item for ranked in self.rank(items, query)]

    def log_ranked_items(self, ranked_items: list[RankedItem], query: str, total: int):
        logger.note(f"> Match sort: {logstr.mesg(brk(query))}")
        keys_str = ", ".join(key.name for key in self.keys) or "<item>"
        logger.mesg(f"  * keys: {logstr.file(brk(keys_str))}")
        rank_counts = Counter(ranked.rank.label for ranked in ranked_items)
        if rank_counts:
            logger.mesg(dict_to_str(dict(rank_counts)), indent=4)
        logger.success(f"  ✓ matched {len(ranked_items)}/{total} items")


def match_sorter(
    items: list,
    query: str,
    keys: list[KEY_TYPE] = None,
    threshold: MATCH_RANK_TYPE = None,
    verbose: bool = None,
) -> list:
    """Filter items that match query, sorted from best to worst match.

    Args:
        items: Items to sort. Either strings (or values to stringify),
            or records ranked by `keys`. Not modified.
        query: Query to rank items against.
        keys: Ordered field names, nested paths ("owner.name"), or resolvers.
        threshold: Lowest rank tier to keep, e.g. "contains".
        verbose: Log ranking stats.

    Returns:
        New list with the matched items, same objects as in `items`.
    """
    sorter = MatchSorter(keys=keys, threshold=threshold, verbose=verbose)
    return sorter.sort(items, query)


if __name__ == "__main__":
    items = [
        "The Tail of Two Cities 1",
        "tTOtc",
        "The 1-ttotc-2 container",
        "The Tail of Forty Cities",
        "Word starts with ttotc-first right?",
        "no match",
        "ttotc-starts with",
    ]
    sorter = MatchSorter(verbose=True)
    for ranked in sorter.rank(items, "ttotc"):
        logger.mesg(f"  * {ranked.rank.label:<16} {logstr.file(brk(ranked.item))}")

    hits = [
        {"title": "Two Cities", "owner": {"name": "ttotc"}},
        {"title": "ttotc story", "owner": {"name": "someone"}},
    ]
    res = match_sorter(hits, "ttotc", keys=["title", "owner.name"], verbose=True)
    logger.success(dict_to_str(res, add_quotes=True))

    # python -m ranks.sorter
