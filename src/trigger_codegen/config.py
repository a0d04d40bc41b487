"""Configuration for the trigger code generator.

Configuration is loaded from:
- environment variables prefixed with `TRIGGER_CODEGEN_`
- and a local `.env` file (if present)

Settings only change the spellings used in emitted code (runtime type names,
the registry lookup helper, indentation). They never change dispatch
semantics, so the same model and settings always produce the same text.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from trigger_codegen.logging import configure_logging


class GeneratorSettings(BaseSettings):
    """Settings for trigger code emission.

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `GeneratorSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="INFO",
        description="Root logging level",
    )
    log_format: Literal["json", "text"] = Field(
        default="json",
        description="Log output format",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug logging for the trigger_codegen package",
    )

    indent_width: int = Field(
        default=4,
        ge=1,
        le=8,
        description="Spaces per indentation level in emitted code",
    )

    context_type: str = Field(
        default="ComponentContext",
        description="Type name of the context handle taken by static entry points",
    )
    event_trigger_type: str = Field(
        default="EventTrigger",
        description="Type name of the registered trigger handle",
    )
    trigger_target_type: str = Field(
        default="HasEventTrigger",
        description="Type name of the capability handle passed to delegates",
    )
    trigger_lookup: str = Field(
        default="get_event_trigger",
        description="Callable resolving (context, trigger_id, key) to a trigger or None",
    )
    state_container_attr: str = Field(
        default="state_container",
        description="Attribute of the impl instance holding its state values",
    )
    component_base: str = Field(
        default="Component",
        description="Base class used when rendering a whole component module",
    )

    model_config = SettingsConfigDict(
        env_prefix="TRIGGER_CODEGEN_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator(
        "context_type",
        "event_trigger_type",
        "trigger_target_type",
        "trigger_lookup",
        "state_container_attr",
        "component_base",
    )
    @classmethod
    def _require_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("emitted runtime names must not be empty")
        return value

    @property
    def indent(self) -> str:
        return " " * self.indent_width

    def setup_logging(self) -> None:
        """Configure logging based on settings."""

        configure_logging(self.log_level, json_output=self.log_format == "json")
        if self.debug:
            logging.getLogger("trigger_codegen").setLevel(logging.DEBUG)

    @property
    def lookup_root(self) -> str:
        """The global name the emitted lookup call resolves first, e.g. `Registry`."""

        return self.trigger_lookup.split(".", 1)[0]


def default_settings() -> GeneratorSettings:
    """Settings with field defaults only, ignoring the environment and any `.env` file.

    Emitters fall back to these when called without settings, so their output
    does not depend on where the process runs.
    """

    return GeneratorSettings.model_construct()
