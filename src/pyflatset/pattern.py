"""Wildcarded attribute patterns.

A pattern such as ``ingress.*`` addresses the elements of a flattened
collection: literal segments name fields, and the trailing sentinel stands
for the element id. Patterns are parsed once per query into
:class:`Literal` / :class:`Wildcard` segments and compared positionally
against the segments of each state key.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from pyflatset.config import DEFAULT_CONFIG, MatchConfig
from pyflatset.exceptions import InvalidPatternError


@dataclass(frozen=True)
class Literal:
    """A field name that must appear verbatim."""

    text: str

    def matches(self, part: str) -> bool:
        return part == self.text


@dataclass(frozen=True)
class Wildcard:
    """Matches any single key segment."""

    def matches(self, part: str) -> bool:
        return True


Segment = Literal | Wildcard

WILDCARD = Wildcard()


@dataclass(frozen=True)
class AttributePattern:
    """A parsed pattern whose last segment is always a :class:`Wildcard`."""

    raw: str
    segments: tuple[Segment, ...]

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def id_index(self) -> int:
        """Position of the element id in a matching state key."""
        return len(self.segments) - 1

    def matches_prefix(self, parts: Sequence[str]) -> bool:
        """Return ``True`` if the leading segments of *parts* fit the pattern.

        *parts* must hold at least as many segments as the pattern.
        """
        return all(segment.matches(part) for segment, part in zip(self.segments, parts))


def parse_pattern(pattern: str, *, config: MatchConfig | None = None) -> AttributePattern:
    """Split *pattern* on the separator and validate the trailing sentinel."""
    cfg = config or DEFAULT_CONFIG
    parts = pattern.split(cfg.separator)
    if parts[-1] != cfg.sentinel:
        raise InvalidPatternError(pattern, sentinel=cfg.sentinel)
    segments: tuple[Segment, ...] = tuple(WILDCARD if part == cfg.sentinel else Literal(part) for part in parts)
    return AttributePattern(raw=pattern, segments=segments)
