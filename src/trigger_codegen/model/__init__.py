"""Specification model package."""

from trigger_codegen.model.spec_model import (
    ComponentModel,
    EventDeclaration,
    EventField,
    Parameter,
    ParameterOrigin,
    TriggerMethod,
    TypeParameter,
)

__all__ = [
    "ComponentModel",
    "EventDeclaration",
    "EventField",
    "Parameter",
    "ParameterOrigin",
    "TriggerMethod",
    "TypeParameter",
]
