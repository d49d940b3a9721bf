"""Matcher configuration for pyflatset."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyflatset.exceptions import FlatSetConfigError

DEFAULT_SENTINEL = "*"
DEFAULT_SEPARATOR = "."


@dataclasses.dataclass(frozen=True)
class MatchConfig:
    """Matcher configuration.

    Parameters
    ----------
    sentinel : str
        Pattern segment standing for "any element id". Defaults to ``"*"``.
    separator : str
        Separator joining field names and element ids in flattened keys.
        Defaults to ``"."``.
    log_max_string : int
        Longest state value emitted verbatim in DEBUG logs; longer values
        are truncated.
    """

    sentinel: str = DEFAULT_SENTINEL
    separator: str = DEFAULT_SEPARATOR
    log_max_string: int = 512

    def __post_init__(self) -> None:
        if not self.sentinel:
            raise FlatSetConfigError("sentinel must be non-empty")
        if not self.separator:
            raise FlatSetConfigError("separator must be non-empty")
        if self.sentinel == self.separator:
            raise FlatSetConfigError("sentinel and separator must differ")
        if self.log_max_string < 1:
            raise FlatSetConfigError("log_max_string must be at least 1")

    @classmethod
    def from_env(cls, **overrides: Any) -> MatchConfig:
        """Create configuration from environment variables.

        Reads ``PYFLATSET_SENTINEL``, ``PYFLATSET_SEPARATOR`` and
        ``PYFLATSET_LOG_MAX_STRING``. Explicit keyword arguments override
        environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "PYFLATSET_SENTINEL": "sentinel",
            "PYFLATSET_SEPARATOR": "separator",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        # log_max_string is numeric, handle separately
        max_string_env = env.get("PYFLATSET_LOG_MAX_STRING")
        if max_string_env is not None and "log_max_string" not in overrides:
            try:
                config_kwargs["log_max_string"] = int(max_string_env)
            except ValueError as exc:
                raise FlatSetConfigError(
                    f"PYFLATSET_LOG_MAX_STRING must be an integer, got {max_string_env!r}"
                ) from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)


DEFAULT_CONFIG = MatchConfig()
