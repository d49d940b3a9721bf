"""pyflatset - Element matchers for flattened collection state."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyflatset")
except PackageNotFoundError:
    __version__ = "0+local"
from pyflatset.checks import (
    check_nested_element,
    check_scalar_element,
    check_type_set_elem_attr,
    check_type_set_elem_nested_attrs,
    compose_checks,
)
from pyflatset.config import MatchConfig
from pyflatset.exceptions import (
    ElementNotFoundError,
    EmptyCriteriaError,
    FlatSetConfigError,
    FlatSetError,
    InstanceNotFoundError,
    InvalidPatternError,
    ResourceNotFoundError,
)
from pyflatset.matcher import match_nested_element, match_scalar_element
from pyflatset.pattern import AttributePattern, Literal, Wildcard, parse_pattern
from pyflatset.state import InstanceState, ModuleState, ResourceState, State, resolve_instance

__all__ = [
    "__version__",
    "AttributePattern",
    "ElementNotFoundError",
    "EmptyCriteriaError",
    "FlatSetConfigError",
    "FlatSetError",
    "InstanceNotFoundError",
    "InstanceState",
    "InvalidPatternError",
    "Literal",
    "MatchConfig",
    "ModuleState",
    "ResourceNotFoundError",
    "ResourceState",
    "State",
    "Wildcard",
    "check_nested_element",
    "check_scalar_element",
    "check_type_set_elem_attr",
    "check_type_set_elem_nested_attrs",
    "compose_checks",
    "match_nested_element",
    "match_scalar_element",
    "parse_pattern",
    "resolve_instance",
]
