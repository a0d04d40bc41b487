"""Trigger dispatch code generator.

Turns a read-only model of a component's trigger handlers into the Python
members that route externally fired triggers to those handlers:
- a capability check
- an identifier-keyed dispatcher
- per-handler delegates rebinding props and state
- static entry points resolving and firing registered triggers
"""

__version__ = "0.1.0"

from trigger_codegen.config import GeneratorSettings
from trigger_codegen.generator import generate_trigger_members, render_trigger_module
from trigger_codegen.model import ComponentModel

__all__ = [
    "__version__",
    "ComponentModel",
    "GeneratorSettings",
    "generate_trigger_members",
    "render_trigger_module",
]
