"""Trigger dispatch code generation."""

from trigger_codegen.generator.method_spec import CodeWriter, GeneratedMembers, MethodSpec
from trigger_codegen.generator.trigger_generator import (
    generate_accept_trigger_event,
    generate_can_accept_trigger,
    generate_static_trigger_methods,
    generate_trigger_delegates,
    generate_trigger_members,
    render_trigger_module,
)

__all__ = [
    "CodeWriter",
    "GeneratedMembers",
    "MethodSpec",
    "generate_accept_trigger_event",
    "generate_can_accept_trigger",
    "generate_static_trigger_methods",
    "generate_trigger_delegates",
    "generate_trigger_members",
    "render_trigger_module",
]
