"""
Pattern base: an immutable bundle of axis values for one component.

A pattern maps its current axis values to fragment groups. Each group is a
pure function of the pattern, so builders can recompute any group after an
axis change without remembering what was emitted before.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any, ClassVar, Self, TypeVar

from ..assembler import assemble
from ..resolver import ColorProvider

E = TypeVar("E", bound=StrEnum)


class Size(StrEnum):
    """Shared five-step size scale."""

    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"


SIZE_ALIASES: dict[str, Size] = {
    **{size.value: size for size in Size},
    "extra_small": Size.XS,
    "extra-small": Size.XS,
    "small": Size.SM,
    "medium": Size.MD,
    "large": Size.LG,
    "extra_large": Size.XL,
    "extra-large": Size.XL,
}


def lookup(table: Mapping[str, E], value: Any) -> E | None:
    """
    Look a string up in an alias table.

    Returns None for non-strings and unknown names.

    Examples:
        >>> lookup(SIZE_ALIASES, "  Large ")
        <Size.LG: 'lg'>
        >>> lookup(SIZE_ALIASES, "huge") is None
        True
    """
    if not isinstance(value, str):
        return None
    return table.get(value.strip().lower())


def aliases_for(enum_cls: type[E], **extra: E) -> dict[str, E]:
    """Alias table holding every canonical value plus the given extras."""
    table: dict[str, E] = {member.value: member for member in enum_cls}
    table.update(extra)
    return table


@dataclass(frozen=True)
class Pattern:
    """
    Base for all semantic patterns.

    Subclasses declare:
        AXES: group names in assembly order
        DEPENDENTS: axis -> groups to recompute when that axis changes.
            Axes not listed recompute the group of the same name.

    and one ``_<group>_fragments`` method per group.
    """

    colors: ColorProvider

    AXES: ClassVar[tuple[str, ...]] = ()
    DEPENDENTS: ClassVar[Mapping[str, tuple[str, ...]]] = {}

    def fragments(self, group: str) -> list[str]:
        """Fragments for one group under the current axis values."""
        if group not in self.AXES:
            raise KeyError(f"{type(self).__name__} has no group {group!r}")
        fragments = getattr(self, f"_{group}_fragments")()
        return [fragment for fragment in fragments if fragment]

    def groups_for(self, axis: str) -> tuple[str, ...]:
        """Groups affected by a change to ``axis``."""
        if axis in self.DEPENDENTS:
            return self.DEPENDENTS[axis]
        return (axis,) if axis in self.AXES else ()

    def with_values(self, **values: Any) -> Self:
        return replace(self, **values)

    def all_fragments(self) -> dict[str, list[str]]:
        return {group: self.fragments(group) for group in self.AXES}

    def classes(self) -> str:
        """Render this pattern on its own, without custom classes."""
        return assemble(self.fragments(group) for group in self.AXES)
