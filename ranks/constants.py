"""
Match Ranking Constants and Configuration

This module contains the rank tiers and the defaults used by the match sorter.

Organization:
    1. Match Rank Tiers - ordered tiers from best to worst match
    2. Match Splitters - separators used to build acronyms
    3. Match Sorter Defaults - threshold and verbosity, read from configs
"""

from enum import IntEnum
from typing import Literal

from configs.envs import MATCH_SORTER_ENVS

# =============================================================================
# Match Rank Tiers
# =============================================================================

MATCH_RANK_TYPE = Literal[
    "equals",
    "starts_with",
    "word_starts_with",
    "contains",
    "acronym",
    "matches",
    "no_match",
]


class MatchRank(IntEnum):
    """How well a candidate text matches a query, higher is better.

    Tiers:
        - EQUALS: text equals query
        - STARTS_WITH: text begins with query
        - WORD_STARTS_WITH: a later word of text begins with query
        - CONTAINS: query is a substring of text
        - ACRONYM: query is a substring of the acronym of text
        - MATCHES: query chars appear in text in the same order
        - NO_MATCH: none of the above
    """

    EQUALS = 5
    STARTS_WITH = 4
    WORD_STARTS_WITH = 3
    CONTAINS = 2
    ACRONYM = 1
    MATCHES = 0
    NO_MATCH = -1

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def from_name(cls, name: MATCH_RANK_TYPE) -> "MatchRank":
        """Parse a tier from its name (case-insensitive), or pass a tier through.

        Examples:
            >>> MatchRank.from_name("starts_with")
            <MatchRank.STARTS_WITH: 4>
            >>> MatchRank.from_name("Word-Starts-With")
            <MatchRank.WORD_STARTS_WITH: 3>
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            key = name.strip().upper().replace("-", "_").replace(" ", "_")
            if key in cls.__members__:
                return cls[key]
        raise ValueError(f"Unknown match rank: {name}")


# =============================================================================
# Match Splitters
# =============================================================================

# Words are split by space, then sub-words by hyphen.
# Only these two separators are used, no other tokenization.
WORD_SEP = " "
SUB_WORD_SEP = "-"

# Key index of items ranked as plain text (no keys given)
NO_KEY_INDEX = -1

# =============================================================================
# Match Sorter Defaults
# =============================================================================

# Lowest tier kept in sorted results. "matches" keeps every tier above no_match.
MATCH_THRESHOLD: MATCH_RANK_TYPE = MATCH_SORTER_ENVS.get("threshold") or "matches"


def parse_env_bool(value) -> bool:
    """Parse bool from envs, where "false", "0" and "" are False."""
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on")
    return bool(value)


MATCH_VERBOSE: bool = parse_env_bool(MATCH_SORTER_ENVS.get("verbose", False))
