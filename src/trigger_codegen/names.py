"""Names the emitters introduce into generated code.

Handler and parameter names from the model share namespaces with these, so
verification rejects models that would shadow or replace any of them.
"""

from __future__ import annotations

CAN_ACCEPT_TRIGGER = "can_accept_trigger"
ACCEPT_TRIGGER_EVENT = "accept_trigger_event"

FIXED_MEMBERS = frozenset({CAN_ACCEPT_TRIGGER, ACCEPT_TRIGGER_EVENT})

ABSTRACT_IMPL = "_abstract_impl"

# Parameters and locals of the emitted entry points and delegates, plus the
# module-level `cast` import both bodies call.
RESERVED_PARAMETER_NAMES = frozenset(
    {
        "self",
        "cast",
        # static entry points
        "c",
        "key",
        "method_id",
        "trigger",
        "_event_state",
        "_result",
        # delegates
        ABSTRACT_IMPL,
        "_impl",
    }
)


def delegate_name(method_name: str) -> str:
    return f"_{method_name}"
