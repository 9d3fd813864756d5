"""
Ranks Module - Typeahead Match Ranking and Sorting

This module ranks in-memory items against a query string and keeps the
matched items, sorted from best to worst match. Items are either plain
strings or records with one or more text fields.

Core Design:
    Each (item, key) pair gets exactly one rank tier, checked in order:
        equals > starts_with > word_starts_with > contains > acronym > matches
    Items that reach none of these tiers are dropped.

    Sort order among matched items:
    1. Higher rank tier first
    2. Earlier declared key first (a match on "name" beats one on "desc")
    3. Earlier input position first (stable among equal items)

    Single-char queries never match by acronym or char order.

Module Structure:
    - constants.py: MatchRank tiers and sorter defaults
    - matcher.py: Rank of one text against a query (acronym, char order)
    - keys.py: KeySelector and best rank of one item among keys
    - sorter.py: MatchSorter and the match_sorter() entry point

Usage:
    from ranks.sorter import match_sorter, MatchSorter
    from ranks.matcher import get_match_ranking
    from ranks.constants import MatchRank
"""
