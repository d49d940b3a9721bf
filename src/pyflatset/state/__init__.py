"""State provider layer.

Models the materialized state document handed to the matchers and
resolves a resource reference to the flat attribute map of its primary
instance.
"""

from pyflatset.state.models import InstanceState, ModuleState, ResourceState, State
from pyflatset.state.provider import resolve_instance

__all__ = [
    "InstanceState",
    "ModuleState",
    "ResourceState",
    "State",
    "resolve_instance",
]
