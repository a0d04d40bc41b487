"""Generation-time errors.

These are raised before any code is emitted for a component. Runtime misses
(no registered trigger, unrecognised identifier) are absent results in the
generated code, never exceptions.
"""

from __future__ import annotations


class TriggerGenerationError(ValueError):
    """Base class for models that cannot be turned into dispatch code."""

    def __init__(self, component: str, message: str) -> None:
        super().__init__(f"{component}: {message}")
        self.component = component


class DuplicateTriggerNameError(TriggerGenerationError):
    def __init__(self, *, component: str, method: str) -> None:
        super().__init__(component, f"trigger method {method!r} is declared more than once")
        self.method = method


class DuplicateIdentifierError(TriggerGenerationError):
    """Two distinct trigger names hash to the same dispatch identifier."""

    def __init__(self, *, component: str, first: str, second: str, trigger_id: int) -> None:
        super().__init__(
            component,
            f"trigger methods {first!r} and {second!r} share identifier {trigger_id}",
        )
        self.first = first
        self.second = second
        self.trigger_id = trigger_id


class UnmatchedEventFieldError(TriggerGenerationError):
    def __init__(self, *, component: str, method: str, parameter: str, event_type: str) -> None:
        super().__init__(
            component,
            f"parameter {parameter!r} of {method!r} names no field of event {event_type!r}",
        )
        self.method = method
        self.parameter = parameter
        self.event_type = event_type


class DuplicateParameterError(TriggerGenerationError):
    def __init__(self, *, component: str, method: str, parameter: str) -> None:
        super().__init__(
            component, f"parameter {parameter!r} of {method!r} is declared more than once"
        )
        self.method = method
        self.parameter = parameter


class ReservedNameError(TriggerGenerationError):
    """A handler parameter would shadow a name the generated bodies rely on."""

    def __init__(self, *, component: str, method: str, parameter: str) -> None:
        super().__init__(
            component,
            f"parameter {parameter!r} of {method!r} clashes with a name used by generated code",
        )
        self.method = method
        self.parameter = parameter


class MemberNameConflictError(TriggerGenerationError):
    """A trigger method would replace another generated class member."""

    def __init__(self, *, component: str, method: str, member: str) -> None:
        super().__init__(
            component, f"trigger method {method!r} clashes with generated member {member!r}"
        )
        self.method = method
        self.member = member
