"""Custom exception hierarchy for pyflatset."""

from __future__ import annotations

from collections.abc import Mapping


class FlatSetError(Exception):
    """Base exception for all pyflatset errors."""


class FlatSetConfigError(FlatSetError):
    """Invalid configuration."""


class InvalidPatternError(FlatSetError, ValueError):
    """Attribute pattern does not end with the wildcard sentinel."""

    def __init__(self, pattern: str, *, sentinel: str = "*") -> None:
        self.pattern = pattern
        self.sentinel = sentinel
        super().__init__(f"{pattern!r} does not end with the special value {sentinel!r}")


class ResourceNotFoundError(FlatSetError):
    """Named resource is not present in the module."""

    def __init__(self, resource: str, *, module_path: str = "root") -> None:
        self.resource = resource
        self.module_path = module_path
        super().__init__(f"Not found: {resource} in {module_path}")


class InstanceNotFoundError(FlatSetError):
    """Resource exists but has no primary instance."""

    def __init__(self, resource: str, *, module_path: str = "root") -> None:
        self.resource = resource
        self.module_path = module_path
        super().__init__(f"No primary instance: {resource} in {module_path}")


class EmptyCriteriaError(FlatSetError, ValueError):
    """Every value of the nested criteria map is empty.

    Such a criteria set would match any element, so the query is rejected
    before the state is scanned.
    """

    def __init__(self, criteria: Mapping[str, str]) -> None:
        self.criteria = dict(criteria)
        super().__init__(f"{self.criteria!r} has no non-empty values")


class ElementNotFoundError(FlatSetError):
    """No collection element satisfies the expected value or criteria.

    Carries the full attribute map so a mismatch can be diagnosed without
    rerunning the test.
    """

    def __init__(
        self,
        *,
        resource: str = "",
        pattern: str,
        state: Mapping[str, str],
        value: str | None = None,
        criteria: Mapping[str, str] | None = None,
    ) -> None:
        self.resource = resource
        self.pattern = pattern
        self.value = value
        self.criteria = dict(criteria) if criteria is not None else None
        self.state = dict(state)
        if self.criteria is not None:
            wanted = f"with nested attrs {self.criteria!r}"
        else:
            wanted = f"with value {value!r}"
        super().__init__(f"{resource!r} no TypeSet element {pattern!r}, {wanted} in state: {self.state!r}")
