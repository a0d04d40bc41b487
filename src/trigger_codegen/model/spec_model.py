"""Read-only specification model of a component's trigger methods.

The model is produced by an annotation front end (or loaded from JSON) and is
consumed once per generation pass. Types are carried as opaque Python type
expressions; the generator never re-derives them.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ParameterOrigin(str, Enum):
    """Where a handler parameter's value comes from at trigger time."""

    PROP = "prop"
    STATE = "state"
    CALLER = "caller"
    EVENT_FIELD = "event_field"


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Parameter(_FrozenModel):
    name: str
    type: str
    origin: ParameterOrigin

    @property
    def is_instance_value(self) -> bool:
        return self.origin in (ParameterOrigin.PROP, ParameterOrigin.STATE)


class EventField(_FrozenModel):
    name: str
    type: str


class EventDeclaration(_FrozenModel):
    """Payload type delivered when a trigger fires.

    `type_name` is how emitted code refers to the payload class. An event
    carrying no fields is usually declared as plain `object`.
    """

    type_name: str = Field(default="object")
    return_type: str | None = Field(default=None, description="None means void")
    fields: tuple[EventField, ...] = Field(default_factory=tuple)

    def find_field(self, name: str) -> EventField | None:
        for candidate in self.fields:
            if candidate.name == name:
                return candidate
        return None


class TriggerMethod(_FrozenModel):
    """One declared trigger handler."""

    name: str
    return_type: str | None = Field(default=None, description="None means void")
    parameters: tuple[Parameter, ...] = Field(default_factory=tuple)
    event: EventDeclaration = Field(default_factory=EventDeclaration)

    @property
    def is_void(self) -> bool:
        return self.return_type is None

    @property
    def instance_parameters(self) -> tuple[Parameter, ...]:
        return tuple(p for p in self.parameters if p.is_instance_value)

    @property
    def caller_parameters(self) -> tuple[Parameter, ...]:
        return tuple(p for p in self.parameters if p.origin is ParameterOrigin.CALLER)

    @property
    def event_field_parameters(self) -> tuple[Parameter, ...]:
        return tuple(p for p in self.parameters if p.origin is ParameterOrigin.EVENT_FIELD)

    @property
    def dispatched_parameters(self) -> tuple[Parameter, ...]:
        """Caller and event-field parameters, in declared order."""

        return tuple(p for p in self.parameters if not p.is_instance_value)


class TypeParameter(_FrozenModel):
    name: str
    bound: str | None = None

    def render(self) -> str:
        if self.bound:
            return f"{self.name}: {self.bound}"
        return self.name


class ComponentModel(_FrozenModel):
    """All trigger methods declared by one component spec."""

    name: str
    spec_name: str = Field(default="", description="Defaults to '<name>Spec'")
    impl_name: str = Field(default="", description="Defaults to '<name>Impl'")
    type_parameters: tuple[TypeParameter, ...] = Field(default_factory=tuple)
    trigger_methods: tuple[TriggerMethod, ...] = Field(default_factory=tuple)

    @model_validator(mode="before")
    @classmethod
    def _default_class_names(cls, data: object) -> object:
        if isinstance(data, dict) and data.get("name"):
            data = dict(data)
            if not data.get("spec_name"):
                data["spec_name"] = f"{data['name']}Spec"
            if not data.get("impl_name"):
                data["impl_name"] = f"{data['name']}Impl"
        return data

    @property
    def has_triggers(self) -> bool:
        return bool(self.trigger_methods)

    def render_type_parameters(self) -> str:
        """Render type parameters in PEP 695 form, e.g. `[T: Sequence[str]]`."""

        if not self.type_parameters:
            return ""
        return "[" + ", ".join(tp.render() for tp in self.type_parameters) + "]"
