"""Runtime collaborators the generated code calls into.

Only the interfaces live here; the trigger registry and the trigger handle are
implemented by the component runtime. Generated members refer to these by
name (see `GeneratorSettings`), so any object with the right shape works.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class HasEventTrigger(Protocol):
    """A component instance a trigger can be routed back to.

    Every generated component class satisfies this through its emitted
    capability check and dispatcher.
    """

    def can_accept_trigger(self) -> bool: ...

    def accept_trigger_event(
        self, event_trigger: EventTrigger, event_state: object, params: list[object]
    ) -> object | None: ...


@runtime_checkable
class EventTrigger(Protocol):
    """A registered trigger: its identifier, its target and a dispatch hook.

    `dispatch_on_trigger` calls back into the target component's
    `accept_trigger_event` with the payload and the positional caller values.
    """

    id: int
    trigger_target: HasEventTrigger

    def dispatch_on_trigger(self, event_state: object, params: list[object]) -> object | None: ...


@runtime_checkable
class TriggerLookup(Protocol):
    """Resolve `(context, trigger_id, key)` to a registered trigger, or None."""

    def __call__(self, context: object, trigger_id: int, key: str) -> EventTrigger | None: ...
