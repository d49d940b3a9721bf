"""Materialized state document.

Mirrors the flatmap-era state layout: a list of modules, each holding
resources keyed by address (``aws_security_group.web``), each with an
optional primary instance whose attributes are already flattened.
Unknown keys of real state files are ignored.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

ROOT_MODULE_PATH: tuple[str, ...] = ("root",)


def _flatmap_value(value: object) -> object:
    # flatmap writes booleans lowercase and unset values as ""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


class InstanceState(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = ""
    attributes: dict[str, str] = Field(default_factory=dict)

    @field_validator("attributes", mode="before")
    @classmethod
    def _stringify_values(cls, value: object) -> object:
        # Flatmap values are always strings; tolerate hand-written fixtures.
        if isinstance(value, dict):
            return {str(k): _flatmap_value(v) for k, v in value.items()}
        return value


class ResourceState(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str = ""
    primary: InstanceState | None = None


class ModuleState(BaseModel):
    model_config = ConfigDict(extra="ignore")

    path: list[str] = Field(default_factory=lambda: list(ROOT_MODULE_PATH))
    resources: dict[str, ResourceState] = Field(default_factory=dict)

    @property
    def display_path(self) -> str:
        return ".".join(self.path)

    def is_root(self) -> bool:
        return tuple(self.path) == ROOT_MODULE_PATH


class State(BaseModel):
    """Whole state document."""

    model_config = ConfigDict(extra="ignore")

    version: int = 3
    modules: list[ModuleState] = Field(default_factory=list)

    @classmethod
    def from_json(cls, text: str | bytes) -> State:
        return cls.model_validate_json(text)

    def module(self, path: Sequence[str]) -> ModuleState | None:
        wanted = list(path)
        for module in self.modules:
            if module.path == wanted:
                return module
        return None

    def root_module(self) -> ModuleState:
        """Return the root module, or an empty one when the state has none."""
        module = self.module(ROOT_MODULE_PATH)
        if module is None:
            return ModuleState()
        return module
