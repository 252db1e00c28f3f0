"""
Class assembler: the final, pure step of every builder.

Fragments from all active override groups plus custom classes are split
on whitespace, exact duplicates are collapsed, and the result is sorted so
output is stable and diffable regardless of call order.
"""

from __future__ import annotations

from collections.abc import Iterable


def split_classes(text: str) -> list[str]:
    """Split a class string on whitespace, dropping empty entries."""
    return text.split()


def assemble(groups: Iterable[Iterable[str]], custom: Iterable[str] = ()) -> str:
    """
    Join fragment groups and custom classes into one class string.

    Args:
        groups: Fragment lists in axis order. Each fragment may itself hold
            several space-separated classes.
        custom: Raw caller classes, appended after the semantic groups.

    Returns:
        Sorted, deduplicated, single-space separated classes.

    Examples:
        >>> assemble([["p-4 rounded"], ["rounded", ""]], ["shadow"])
        'p-4 rounded shadow'
    """
    seen: set[str] = set()
    for group in groups:
        for fragment in group:
            seen.update(fragment.split())
    for fragment in custom:
        seen.update(fragment.split())
    return " ".join(sorted(seen))
