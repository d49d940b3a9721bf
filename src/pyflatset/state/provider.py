"""Resolve a resource reference to its flattened attributes."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pyflatset.exceptions import InstanceNotFoundError, ResourceNotFoundError
from pyflatset.state.models import InstanceState, State

_logger = logging.getLogger(__name__)


def resolve_instance(
    state: State,
    resource: str,
    *,
    module_path: Sequence[str] | None = None,
) -> InstanceState:
    """Return the primary instance of *resource*.

    Looks in the root module unless *module_path* is given.

    Raises
    ------
    ResourceNotFoundError
        The module or the resource does not exist.
    InstanceNotFoundError
        The resource has no primary instance.
    """
    if module_path is None:
        module = state.root_module()
        display_path = module.display_path
    else:
        display_path = ".".join(module_path)
        found = state.module(module_path)
        if found is None:
            raise ResourceNotFoundError(resource, module_path=display_path)
        module = found

    resource_state = module.resources.get(resource)
    if resource_state is None:
        raise ResourceNotFoundError(resource, module_path=display_path)

    instance = resource_state.primary
    if instance is None:
        raise InstanceNotFoundError(resource, module_path=display_path)

    _logger.debug(
        "Resolved %s in %s (id=%r, %d attributes)",
        resource,
        display_path,
        instance.id,
        len(instance.attributes),
    )
    return instance
