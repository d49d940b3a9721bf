from __future__ import annotations

import pytest

from pyflatset.config import MatchConfig
from pyflatset.exceptions import InvalidPatternError
from pyflatset.pattern import WILDCARD, Literal, parse_pattern


def test_parse_pattern_segments() -> None:
    parsed = parse_pattern("ingress.*")
    assert parsed.segments == (Literal("ingress"), WILDCARD)
    assert len(parsed) == 2
    assert parsed.id_index == 1


@pytest.mark.parametrize("pattern", ["ingress", "ingress.0", "*.name", "", "ingress.*.name"])
def test_parse_pattern_requires_trailing_sentinel(pattern: str) -> None:
    with pytest.raises(InvalidPatternError) as exc_info:
        parse_pattern(pattern)
    assert exc_info.value.pattern == pattern
    assert "does not end with the special value '*'" in str(exc_info.value)


def test_interior_sentinel_matches_any_segment() -> None:
    parsed = parse_pattern("rule.*.cidr.*")
    assert parsed.matches_prefix(["rule", "3", "cidr", "9"])
    assert not parsed.matches_prefix(["rule", "3", "port", "9"])


def test_matches_prefix_ignores_trailing_segments() -> None:
    parsed = parse_pattern("ingress.*")
    assert parsed.matches_prefix(["ingress", "42", "from_port"])
    assert not parsed.matches_prefix(["egress", "42", "from_port"])


def test_parse_pattern_custom_config() -> None:
    cfg = MatchConfig(sentinel="#", separator="/")
    parsed = parse_pattern("ingress/#", config=cfg)
    assert parsed.segments == (Literal("ingress"), WILDCARD)
    with pytest.raises(InvalidPatternError):
        parse_pattern("ingress.*", config=cfg)
