"""
Helpers for editing PATH-style variables.

A PATH value is treated as a list of entries joined by a separator rather
than as free text, so adding or removing one directory never touches a
different entry that merely contains it as a substring.
"""

import os
from typing import List, Optional, Tuple


def split_entries(value: Optional[str], separator: str = os.pathsep) -> List[str]:
    """
    Split a PATH value into its entries.

    Empty entries are kept so that joining the result gives back the
    original text.
    """
    if not value:
        return []
    return value.split(separator)


def join_entries(entries: List[str], separator: str = os.pathsep) -> Optional[str]:
    """Join entries back into a PATH value, or None when nothing is left."""
    if not entries:
        return None
    return separator.join(entries)


def normalize_entry(entry: str, case_sensitive: bool = True) -> str:
    """
    Normalize a PATH entry for comparison.

    Trailing slashes are ignored, and on case-insensitive filesystems the
    entry is case-folded.
    """
    normalized = entry.strip().rstrip("\\/") or entry.strip()
    if not case_sensitive:
        normalized = normalized.casefold()
    return normalized


def contains_entry(
    value: Optional[str],
    entry: str,
    separator: str = os.pathsep,
    case_sensitive: bool = True
) -> bool:
    target = normalize_entry(entry, case_sensitive)
    return any(
        normalize_entry(existing, case_sensitive) == target
        for existing in split_entries(value, separator)
        if existing
    )


def add_entry(
    value: Optional[str],
    entry: str,
    separator: str = os.pathsep,
    case_sensitive: bool = True
) -> Tuple[Optional[str], bool]:
    """
    Append an entry to a PATH value unless it is already present.

    Args:
        value: Current PATH value (None if the variable is not set)
        entry: Directory to append
        separator: Entry separator
        case_sensitive: Whether entries differing only in case are distinct

    Returns:
        Tuple of (new_value, changed)
    """
    if contains_entry(value, entry, separator, case_sensitive):
        return value, False

    entries = split_entries(value, separator)
    entries.append(entry)
    return join_entries(entries, separator), True


def remove_entry(
    value: Optional[str],
    entry: str,
    separator: str = os.pathsep,
    case_sensitive: bool = True
) -> Tuple[Optional[str], bool]:
    """
    Remove every occurrence of an entry from a PATH value.

    The order of the remaining entries is preserved. If no entries remain
    the new value is None.

    Returns:
        Tuple of (new_value, changed)
    """
    target = normalize_entry(entry, case_sensitive)
    entries = split_entries(value, separator)
    kept = [
        existing for existing in entries
        if not existing or normalize_entry(existing, case_sensitive) != target
    ]

    if len(kept) == len(entries):
        return value, False

    return join_entries(kept, separator), True
