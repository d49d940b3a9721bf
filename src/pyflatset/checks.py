"""Resource-level queries and test-check factories.

The ``check_*`` functions resolve a resource in a state document and run
a matcher against its primary instance. The ``check_type_set_*``
factories wrap them as callables taking the state, so test harnesses can
build the checks up front and run them once the state is materialized.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence

from pyflatset.config import MatchConfig
from pyflatset.matcher import match_nested_element, match_scalar_element
from pyflatset.state.models import State
from pyflatset.state.provider import resolve_instance

StateCheck = Callable[[State], None]


def check_scalar_element(
    state: State,
    resource: str,
    pattern: str,
    value: str,
    *,
    module_path: Sequence[str] | None = None,
    config: MatchConfig | None = None,
) -> str:
    """Assert that a set of simple values on *resource* contains *value*.

    Returns the matching element id.
    """
    instance = resolve_instance(state, resource, module_path=module_path)
    return match_scalar_element(instance.attributes, pattern, value, resource=resource, config=config)


def check_nested_element(
    state: State,
    resource: str,
    pattern: str,
    criteria: Mapping[str, str],
    *,
    module_path: Sequence[str] | None = None,
    config: MatchConfig | None = None,
) -> str:
    """Assert that a set of nested objects on *resource* has an element matching *criteria*.

    Returns the matching element id.
    """
    instance = resolve_instance(state, resource, module_path=module_path)
    return match_nested_element(instance.attributes, pattern, criteria, resource=resource, config=config)


def check_type_set_elem_attr(
    resource: str,
    pattern: str,
    value: str,
    *,
    module_path: Sequence[str] | None = None,
    config: MatchConfig | None = None,
) -> StateCheck:
    """Build a check verifying that a set element of simple type equals *value*.

    *pattern* must use the sentinel (``*`` by default) for the element id,
    e.g. ``"security_groups.*"``.
    """

    def check(state: State) -> None:
        check_scalar_element(state, resource, pattern, value, module_path=module_path, config=config)

    return check


def check_type_set_elem_nested_attrs(
    resource: str,
    pattern: str,
    criteria: Mapping[str, str],
    *,
    module_path: Sequence[str] | None = None,
    config: MatchConfig | None = None,
) -> StateCheck:
    """Build a check verifying that a set element matches the whole *criteria* map.

    Unset attributes may be checked with ``""`` but this also matches
    attributes set to the empty string; give at least one non-empty value.
    If the criteria are not granular enough another element than the
    intended one may match.
    """
    # snapshot so later caller mutations do not change the check
    frozen = dict(criteria)

    def check(state: State) -> None:
        check_nested_element(state, resource, pattern, frozen, module_path=module_path, config=config)

    return check


def compose_checks(*checks: StateCheck) -> StateCheck:
    """Run *checks* in order, stopping at the first failure."""

    def check(state: State) -> None:
        for item in checks:
            item(state)

    return check
