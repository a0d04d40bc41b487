"""Test configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from types import SimpleNamespace
from typing import Any

import pytest

from trigger_codegen.config import GeneratorSettings
from trigger_codegen.generator.trigger_generator import render_trigger_module
from trigger_codegen.model.spec_model import (
    ComponentModel,
    EventDeclaration,
    EventField,
    Parameter,
    ParameterOrigin,
    TriggerMethod,
    TypeParameter,
)
from trigger_codegen.runtime import EventTrigger, HasEventTrigger, TriggerLookup


@pytest.fixture
def settings() -> GeneratorSettings:
    """Provide settings isolated from the environment and any local `.env`."""
    return GeneratorSettings(_env_file=None)


@pytest.fixture
def test_component() -> ComponentModel:
    """Two handlers: one returning a value with caller and event-field params, one void."""
    return ComponentModel(
        name="Test",
        type_parameters=(TypeParameter(name="T", bound="str"),),
        trigger_methods=(
            TriggerMethod(
                name="testTriggerMethod1",
                return_type="object",
                parameters=(
                    Parameter(name="arg0", type="bool", origin=ParameterOrigin.PROP),
                    Parameter(name="arg1", type="int", origin=ParameterOrigin.STATE),
                    Parameter(name="arg2", type="object", origin=ParameterOrigin.CALLER),
                    Parameter(name="arg3", type="T", origin=ParameterOrigin.CALLER),
                    Parameter(name="arg4", type="int", origin=ParameterOrigin.EVENT_FIELD),
                ),
                event=EventDeclaration(
                    type_name="TestEvent",
                    return_type="object",
                    fields=(EventField(name="arg4", type="int"),),
                ),
            ),
            TriggerMethod(
                name="testTriggerMethod2",
                parameters=(
                    Parameter(name="arg0", type="bool", origin=ParameterOrigin.PROP),
                    Parameter(name="arg1", type="int", origin=ParameterOrigin.STATE),
                ),
                event=EventDeclaration(type_name="object"),
            ),
        ),
    )


@pytest.fixture
def empty_component() -> ComponentModel:
    return ComponentModel(name="Plain")


@dataclass
class FakeEventTrigger:
    """Registered trigger that routes back into its target's dispatcher."""

    id: int
    trigger_target: HasEventTrigger
    dispatched: list[tuple[object, list[object]]] = field(default_factory=list)

    def dispatch_on_trigger(self, event_state: object, params: list[object]) -> object | None:
        self.dispatched.append((event_state, params))
        return self.trigger_target.accept_trigger_event(self, event_state, params)


@dataclass
class FakeRegistry:
    triggers: dict[tuple[object, int, str], EventTrigger] = field(default_factory=dict)
    lookups: list[tuple[object, int, str]] = field(default_factory=list)

    def register(self, context: object, trigger: EventTrigger, key: str) -> None:
        self.triggers[(context, trigger.id, key)] = trigger

    def get_event_trigger(
        self, context: object, trigger_id: int, key: str
    ) -> EventTrigger | None:
        self.lookups.append((context, trigger_id, key))
        return self.triggers.get((context, trigger_id, key))


class Component:
    """Stand-in for the runtime component base class."""


class TestEvent:
    created = 0

    def __init__(self) -> None:
        type(self).created += 1
        self.arg4 = 0


@dataclass
class GeneratedRuntime:
    """A generated component module executed against fake collaborators."""

    namespace: dict[str, Any]
    registry: FakeRegistry
    calls: list[tuple[str, tuple[object, ...]]]
    component_name: str = "Test"

    @property
    def component(self) -> type:
        return self.namespace[self.component_name]

    def make_impl(self, *, prop: object = None, state: object = None) -> Any:
        impl_cls = type(f"{self.component_name}Impl", (self.component,), {})
        impl = impl_cls()
        impl.arg0 = prop
        impl.state_container = SimpleNamespace(arg1=state)
        return impl

    def trigger(self, trigger_id: int, target: Any) -> FakeEventTrigger:
        return FakeEventTrigger(id=trigger_id, trigger_target=target)

    def register(
        self, trigger_id: int, target: Any, *, context: object = "ctx", key: str = "key"
    ) -> FakeEventTrigger:
        trigger = self.trigger(trigger_id, target)
        self.registry.register(context, trigger, key)
        return trigger


ComponentLoader = Callable[..., GeneratedRuntime]


@pytest.fixture
def load_component(settings: GeneratorSettings) -> ComponentLoader:
    """Render `model`, exec it with `spec_cls` and a fake registry in scope."""

    def load(
        model: ComponentModel,
        spec_cls: type,
        *,
        calls: list[tuple[str, tuple[object, ...]]] | None = None,
        **module_globals: Any,
    ) -> GeneratedRuntime:
        registry = FakeRegistry()
        lookup: TriggerLookup = registry.get_event_trigger
        namespace: dict[str, Any] = {
            "Component": Component,
            model.spec_name: spec_cls,
            "get_event_trigger": lookup,
            **module_globals,
        }
        source = render_trigger_module(model, settings)
        exec(compile(source, f"<generated {model.name}>", "exec"), namespace)
        return GeneratedRuntime(
            namespace=namespace,
            registry=registry,
            calls=calls if calls is not None else [],
            component_name=model.name,
        )

    return load


@pytest.fixture
def generated_runtime(
    test_component: ComponentModel, load_component: ComponentLoader
) -> GeneratedRuntime:
    calls: list[tuple[str, tuple[object, ...]]] = []

    class TestSpec:
        @staticmethod
        def testTriggerMethod1(
            arg0: bool, arg1: int, arg2: object, arg3: str, arg4: int
        ) -> object:
            calls.append(("testTriggerMethod1", (arg0, arg1, arg2, arg3, arg4)))
            return (arg0, arg1, arg2, arg3, arg4)

        @staticmethod
        def testTriggerMethod2(arg0: bool, arg1: int) -> None:
            calls.append(("testTriggerMethod2", (arg0, arg1)))

    # Fresh payload class per test so instance counting starts at zero.
    event_cls = type("TestEvent", (TestEvent,), {"created": 0})

    return load_component(test_component, TestSpec, calls=calls, TestEvent=event_cls)
