"""Element matchers over a flattened state map.

Unordered collections (sets and lists) are flattened into keys that join
field names and synthetic element ids, e.g. ``ingress.1234.from_port``.
Since the ids are not known in advance, callers address elements through
a pattern ending in the wildcard sentinel (``ingress.*``) and the matchers
scan the whole map for an element satisfying the expectation.

Both matchers are pure: they never mutate the state, keep all working
state local to the call, and return the same outcome for any iteration
order of the map since success is existential.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pyflatset._redact import redact_for_log
from pyflatset.config import DEFAULT_CONFIG, MatchConfig
from pyflatset.exceptions import ElementNotFoundError, EmptyCriteriaError
from pyflatset.pattern import parse_pattern

_logger = logging.getLogger(__name__)


def match_scalar_element(
    attributes: Mapping[str, str],
    pattern: str,
    value: str,
    *,
    resource: str = "",
    config: MatchConfig | None = None,
) -> str:
    """Find a collection element of simple type equal to *value*.

    A state key qualifies when it has exactly as many segments as the
    pattern, its literal segments agree position by position, and its value
    equals *value*.

    Returns
    -------
    str
        Element id of the first qualifying key.

    Raises
    ------
    InvalidPatternError
        *pattern* does not end with the sentinel.
    ElementNotFoundError
        No key qualifies.
    """
    cfg = config or DEFAULT_CONFIG
    parsed = parse_pattern(pattern, config=cfg)
    _logger.debug("Scanning %d attributes of %r for %s = %r", len(attributes), resource, pattern, value)

    for state_key, state_value in attributes.items():
        if state_value != value:
            continue
        parts = state_key.split(cfg.separator)
        if len(parts) != len(parsed):
            continue
        if parsed.matches_prefix(parts):
            element_id = parts[parsed.id_index]
            _logger.debug("Matched %s element %r via %s", pattern, element_id, state_key)
            return element_id

    if _logger.isEnabledFor(logging.DEBUG):
        _logger.debug(
            "No %s element with value %r in %s",
            pattern,
            value,
            redact_for_log(attributes, separator=cfg.separator, max_string=cfg.log_max_string),
        )
    raise ElementNotFoundError(resource=resource, pattern=pattern, value=value, state=attributes)


def match_nested_element(
    attributes: Mapping[str, str],
    pattern: str,
    criteria: Mapping[str, str],
    *,
    resource: str = "",
    config: MatchConfig | None = None,
) -> str:
    """Find a collection element whose nested attributes satisfy *criteria*.

    *criteria* maps the key remainder after the element id (``name``,
    ``rule.0.port``) to the expected value. Every non-empty criterion must
    hold for the same element id.

    Empty expected values never confirm a match. An attribute that is unset
    therefore looks the same as one set to ``""``, and a criteria map that
    is not granular enough may match an element other than the intended
    one. Provide enough non-empty values to single out the element.

    Returns
    -------
    str
        Id of the first element satisfying every non-empty criterion.

    Raises
    ------
    InvalidPatternError
        *pattern* does not end with the sentinel.
    EmptyCriteriaError
        No criterion has a non-empty value.
    ElementNotFoundError
        No single element satisfies all non-empty criteria.
    """
    cfg = config or DEFAULT_CONFIG
    parsed = parse_pattern(pattern, config=cfg)

    expected = {suffix: wanted for suffix, wanted in criteria.items() if wanted != ""}
    if not expected:
        raise EmptyCriteriaError(criteria)
    match_count = len(expected)
    _logger.debug(
        "Scanning %d attributes of %r for %s with %d nested criteria",
        len(attributes),
        resource,
        pattern,
        match_count,
    )

    matches: dict[str, int] = {}
    for state_key, state_value in attributes.items():
        parts = state_key.split(cfg.separator)
        # the id plus at least one nested field, e.g. ingress.0.name
        if len(parts) <= len(parsed):
            continue
        if not parsed.matches_prefix(parts):
            continue
        element_id = parts[parsed.id_index]
        nested_attr = cfg.separator.join(parts[len(parsed) :])
        wanted = expected.get(nested_attr)
        if wanted is None or wanted != state_value:
            continue
        # counters are keyed by the full element address, not the trailing id alone
        address = cfg.separator.join(parts[: len(parsed)])
        matches[address] = matches.get(address, 0) + 1
        if matches[address] == match_count:
            _logger.debug("Matched %s element %r", pattern, element_id)
            return element_id

    if _logger.isEnabledFor(logging.DEBUG):
        _logger.debug(
            "No %s element satisfies %d criteria (partial matches: %s) in %s",
            pattern,
            match_count,
            matches,
            redact_for_log(attributes, separator=cfg.separator, max_string=cfg.log_max_string),
        )
    raise ElementNotFoundError(resource=resource, pattern=pattern, criteria=criteria, state=attributes)
