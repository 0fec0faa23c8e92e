"""Utility functions for raw query parameter splitting."""

from typing import List, Optional


def split_delimited(value: Optional[str], delimiter: str = ",") -> List[str]:
    """
    Split a delimited string into a list of strings.
    Trims whitespace and ignores empty items.
    :param value: Delimited string or None
    :param delimiter: Separator between items
    :return: List of non-empty trimmed items, empty if value is None
    """
    if value is None:
        return []
    items = [x.strip() for x in value.split(delimiter)]
    return [x for x in items if x]
