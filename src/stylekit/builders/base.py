"""
StyleBuilder: the chainable, mutable front end over a pattern.

A builder holds the current pattern plus the fragments each group last
produced. Setting an axis swaps in a new pattern and recomputes only the
groups that depend on that axis, so a later call replaces the fragments of
an earlier one exactly. Custom classes are kept separately and never
retracted.

Builders are single-writer. Use ``copy()`` to branch.
"""

from __future__ import annotations

import copy as _copy
import logging
from collections.abc import Iterable, Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Any, ClassVar, Generic, Self, TypeVar

from ..assembler import assemble, split_classes
from ..config import get_default_resolver
from ..patterns.base import Pattern, lookup
from ..resolver import ColorProvider

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Pattern)


class StyleBuilder(Generic[P]):
    """
    Base for every builder.

    Subclasses set ``pattern_class`` and add typed setters that call
    ``_set``, plus string setters that call ``_set_from_string``.

    Usage:
        ButtonStyles(resolver).danger().full_width().classes()
    """

    pattern_class: ClassVar[type[Pattern]] = Pattern
    # Setters taking a single bool, for string-driven callers such as the CLI.
    flag_setters: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, colors: ColorProvider | None = None):
        if colors is None:
            colors = get_default_resolver()
        self._pattern: P = self.pattern_class(colors)  # type: ignore[assignment]
        self._groups: dict[str, list[str]] = self._pattern.all_fragments()
        self._custom: list[str] = []

    @property
    def pattern(self) -> P:
        """Current (immutable) pattern."""
        return self._pattern

    @property
    def colors(self) -> ColorProvider:
        return self._pattern.colors

    # =========================================================================
    # Axis updates
    # =========================================================================

    def _set(self, axis: str, value: Any) -> Self:
        return self._update(**{axis: value})

    def _update(self, **values: Any) -> Self:
        self._pattern = self._pattern.with_values(**values)
        stale: list[str] = []
        for axis in values:
            for group in self._pattern.groups_for(axis):
                if group not in stale:
                    stale.append(group)
        for group in stale:
            self._groups[group] = self._pattern.fragments(group)
        return self

    def _choose(self, axis: str, value: Any, table: Mapping[str, StrEnum]) -> StrEnum | None:
        choice = lookup(table, value)
        if choice is None:
            logger.debug(
                "%s: ignoring unknown %s value %r", type(self).__name__, axis, value
            )
        return choice

    def _set_from_string(
        self, axis: str, value: Any, table: Mapping[str, StrEnum]
    ) -> Self:
        choice = self._choose(axis, value, table)
        if choice is None:
            return self
        return self._set(axis, choice)

    # =========================================================================
    # Custom classes
    # =========================================================================

    def custom(self, class_name: str) -> Self:
        """Append one raw class (or several, space separated)."""
        self._custom.extend(split_classes(class_name))
        return self

    def custom_classes(self, classes: str) -> Self:
        """Append a space separated class string."""
        self._custom.extend(split_classes(classes))
        return self

    def custom_list(self, classes: Iterable[str]) -> Self:
        for class_name in classes:
            self._custom.extend(split_classes(class_name))
        return self

    # =========================================================================
    # Rendering
    # =========================================================================

    def classes(self) -> str:
        """Render the final class string. Does not change the builder."""
        return assemble(
            (self._groups[group] for group in self._pattern.AXES), self._custom
        )

    def build(self) -> str:
        """Alias for ``classes()``."""
        return self.classes()

    def fragments(self) -> Mapping[str, tuple[str, ...]]:
        """Read-only snapshot of group -> active fragments, in axis order."""
        return MappingProxyType(
            {group: tuple(self._groups[group]) for group in self._pattern.AXES}
        )

    @property
    def custom_fragments(self) -> tuple[str, ...]:
        return tuple(self._custom)

    def copy(self) -> Self:
        """Independent clone; later changes to either do not affect the other."""
        clone = _copy.copy(self)
        clone._groups = {group: list(frags) for group, frags in self._groups.items()}
        clone._custom = list(self._custom)
        return clone

    def __str__(self) -> str:
        return self.classes()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.classes()!r})"
