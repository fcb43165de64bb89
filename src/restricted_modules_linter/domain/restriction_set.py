"""Immutable set of restricted module names, built once per analysis session."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from restricted_modules_linter.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


class RestrictionSet:
    """
    Deduplicated, immutable collection of non-empty module names.

    Membership is exact and case-sensitive. An empty set means the rule is inert.
    Build from raw configuration with ``from_config``; the plain constructor
    trusts its input.
    """

    __slots__ = ("_names",)

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: frozenset[str] = frozenset(names)

    @classmethod
    def from_config(cls, values: object) -> RestrictionSet:
        """
        Validate raw configuration and build a set.

        Accepts None (empty), a comma-separated string (pylint csv style) or a
        sequence of strings. Empty names are dropped with a warning. Raises
        ConfigurationError for anything else and for non-string entries.
        """
        if values is None:
            return cls()
        if isinstance(values, str):
            return cls(part.strip() for part in values.split(",") if part.strip())
        if isinstance(values, (bytes, dict)) or not isinstance(values, Iterable):
            raise ConfigurationError(
                f"restricted modules must be a list of strings, got {type(values).__name__}"
            )

        names: list[str] = []
        for index, value in enumerate(values):
            if not isinstance(value, str):
                raise ConfigurationError(
                    f"restricted module at index {index} must be a string, "
                    f"got {type(value).__name__}: {value!r}"
                )
            if not value:
                logger.warning("Ignoring empty restricted module at index %d", index)
                continue
            if value != value.strip():
                # Call arguments are trimmed before matching, so this entry can never match.
                logger.warning(
                    "Restricted module %r has surrounding whitespace and will never match", value
                )
            names.append(value)

        restriction_set = cls(names)
        logger.debug("Built restriction set with %d module(s)", len(restriction_set))
        return restriction_set

    def union(self, other: RestrictionSet) -> RestrictionSet:
        return RestrictionSet(self._names | other._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __bool__(self) -> bool:
        return bool(self._names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RestrictionSet):
            return NotImplemented
        return self._names == other._names

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"RestrictionSet({sorted(self._names)!r})"
