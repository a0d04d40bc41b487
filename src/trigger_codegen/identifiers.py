"""Stable integer identifiers for trigger methods.

Identifiers are baked into generated code as literals and used as the runtime
dispatch key, so they must be identical across processes and builds. Python's
builtin `hash()` is salted per process and is therefore never used here.

The scheme is Java's `String.hashCode` over the trigger key
`<ComponentName><methodName>Trigger`, which keeps identifiers compatible with
components generated by the JVM toolchain.
"""

from __future__ import annotations

import logging

from trigger_codegen.errors import DuplicateIdentifierError
from trigger_codegen.model.spec_model import ComponentModel

logger = logging.getLogger(__name__)

TRIGGER_KEY_SUFFIX = "Trigger"

_UINT32 = 1 << 32
_INT32_MAX = (1 << 31) - 1


def java_string_hash(text: str) -> int:
    """Java `String.hashCode`: s[0]*31^(n-1) + ... + s[n-1], signed 32-bit."""

    encoded = text.encode("utf-16-be")
    value = 0
    for i in range(0, len(encoded), 2):
        unit = (encoded[i] << 8) | encoded[i + 1]
        value = (31 * value + unit) % _UINT32
    if value > _INT32_MAX:
        value -= _UINT32
    return value


def trigger_key(component_name: str, method_name: str) -> str:
    return f"{component_name}{method_name}{TRIGGER_KEY_SUFFIX}"


def compute_trigger_id(component_name: str, method_name: str) -> int:
    """Return the dispatch identifier of `method_name` within `component_name`."""

    return java_string_hash(trigger_key(component_name, method_name))


def assign_trigger_ids(model: ComponentModel) -> dict[str, int]:
    """Map every trigger method name of `model` to its identifier.

    Raises:
        DuplicateIdentifierError: If two distinct names share an identifier.
    """

    ids: dict[str, int] = {}
    owners: dict[int, str] = {}
    for method in model.trigger_methods:
        trigger_id = compute_trigger_id(model.name, method.name)
        owner = owners.get(trigger_id)
        if owner is not None and owner != method.name:
            raise DuplicateIdentifierError(
                component=model.name,
                first=owner,
                second=method.name,
                trigger_id=trigger_id,
            )
        owners[trigger_id] = method.name
        ids[method.name] = trigger_id

    logger.debug(
        "Assigned trigger identifiers",
        extra={"component": model.name, "trigger_count": len(ids)},
    )
    return ids
