"""Key selectors: pick the text to rank from an item.

An item is ranked either as text itself (no keys), or by an ordered list of
keys, where each key is one of:
    - a field name: "name", looked up by item["name"], then item.name
    - a nested field path: "owner.name"
    - a resolver: any callable that takes the item and returns a value

Keys declared earlier have higher priority when two items tie on rank.
"""

from collections.abc import Mapping
from typing import Any, Callable, Union

from ranks.constants import MatchRank, NO_KEY_INDEX
from ranks.matcher import get_match_ranking

KEY_PATH_SEP = "."

_MISSING = object()


def get_attr_or_item(obj, key: str):
    if isinstance(obj, Mapping):
        return obj.get(key, _MISSING)
    if obj is None or isinstance(obj, (str, bytes)):
        return _MISSING
    # records like sqlite3.Row or numpy records are indexable but not Mappings
    try:
        return obj[key]
    except (KeyError, IndexError, TypeError, ValueError):
        pass
    return getattr(obj, key, _MISSING)


def get_field_value(item, key: str, sep: str = KEY_PATH_SEP):
    """Get value of field `key` from a dict-like or plain object.

    The key is tried as a whole first, so dict keys that contain dots still work.
    Otherwise a dotted key is walked as a nested path.
    Absent fields return None.

    Example:
        >>> get_field_value({"owner": {"name": "foo"}}, "owner.name")
        'foo'
        >>> get_field_value({"owner": {}}, "owner.name") is None
        True
    """
    value = get_attr_or_item(item, key)
    if value is _MISSING and sep and sep in key:
        value = item
        for sub_key in key.split(sep):
            value = get_attr_or_item(value, sub_key)
            if value is _MISSING:
                break
    if value is _MISSING:
        return None
    return value


class KeySelector:
    """Extract a comparable value from an item by field name or by resolver.

    Example:
        >>> KeySelector("owner.name").get_value({"owner": {"name": "foo"}})
        'foo'
        >>> KeySelector(lambda item: item["tags"][0]).get_value({"tags": ["bar"]})
        'bar'
    """

    def __init__(self, key: Union[str, Callable[[Any], Any]]):
        if isinstance(key, str):
            self.name = key
            self.resolver = None
        elif callable(key):
            self.name = getattr(key, "__name__", repr(key))
            self.resolver = key
        else:
            raise TypeError(
                f"Unsupported key type: {type(key).__name__}, "
                "expected field name (str) or resolver (callable)"
            )

    @classmethod
    def from_key(cls, key: Union["KeySelector", str, Callable]) -> "KeySelector":
        if isinstance(key, cls):
            return key
        return cls(key)

    def get_value(self, item):
        if self.resolver is not None:
            return self.resolver(item)
        return get_field_value(item, self.name)

    def __repr__(self) -> str:
        return f"KeySelector({self.name!r})"


KEY_TYPE = Union[KeySelector, str, Callable[[Any], Any]]


def normalize_keys(keys: list[KEY_TYPE] = None) -> list[KeySelector]:
    """Convert keys to KeySelectors. Empty or None keys mean: rank items as text."""
    if not keys:
        return []
    if isinstance(keys, (str, KeySelector)) or callable(keys):
        keys = [keys]
    return [KeySelector.from_key(key) for key in keys]


def get_highest_ranking(
    item, keys: list[KEY_TYPE], query: str
) -> tuple[MatchRank, int]:
    """Get best rank of item among keys, and index of the key that reached it.

    Args:
        item: Item to rank.
        keys: Ordered keys. If empty, the item itself is ranked as text.
        query: Query to rank against.

    Returns:
        (rank, key_index). key_index is -1 if keys are empty or nothing matched.
        When keys tie on rank, the earlier key index is kept.
    """
    return rank_by_selectors(item, normalize_keys(keys), query)


def rank_by_selectors(
    item, selectors: list[KeySelector], query: str
) -> tuple[MatchRank, int]:
    """Same as get_highest_ranking, with keys already normalized to KeySelectors."""
    if not selectors:
        return get_match_ranking(item, query), NO_KEY_INDEX

    rank, key_index = MatchRank.NO_MATCH, NO_KEY_INDEX
    for i, selector in enumerate(selectors):
        new_rank = get_match_ranking(selector.get_value(item), query)
        if new_rank > rank:
            rank, key_index = new_rank, i
    return rank, key_index
