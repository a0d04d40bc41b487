"""Emit the trigger dispatch members of a generated component class.

For a component declaring trigger handlers, four kinds of members are emitted:

- `can_accept_trigger`: reports whether the component handles triggers at all.
- `accept_trigger_event`: routes an incoming trigger by identifier to the
  matching delegate, unpacking the erased positional `params` list and the
  event payload.
- `_<handler>` delegates: rebind props and state from the concrete impl
  instance and call the spec class handler with every argument in declared order.
- `<handler>` static entry points: resolve a registered trigger, build the
  event payload and dispatch it.

All functions are pure: the same model and settings produce the same text.
Called without settings they use `default_settings()`, never the environment.
"""

from __future__ import annotations

import logging
import re

from trigger_codegen.config import GeneratorSettings, default_settings
from trigger_codegen.generator.method_spec import CodeWriter, GeneratedMembers, MethodSpec
from trigger_codegen.identifiers import assign_trigger_ids, compute_trigger_id
from trigger_codegen.model.spec_model import (
    ComponentModel,
    Parameter,
    ParameterOrigin,
    TriggerMethod,
    TypeParameter,
)
from trigger_codegen.names import (
    ABSTRACT_IMPL,
    ACCEPT_TRIGGER_EVENT,
    CAN_ACCEPT_TRIGGER,
    delegate_name,
)
from trigger_codegen.verification import verify_component

logger = logging.getLogger(__name__)


def _settings(settings: GeneratorSettings | None) -> GeneratorSettings:
    return settings if settings is not None else default_settings()


def _cast(type_name: str, expr: str) -> str:
    return f"cast({type_name!r}, {expr})"


def _param_decl(param: Parameter) -> str:
    return f"{param.name}: {param.type}"


def _referenced_type_parameters(
    model: ComponentModel, method: TriggerMethod
) -> list[TypeParameter]:
    """Type parameters of the component mentioned by the method's emitted signature."""

    annotations = [p.type for p in method.dispatched_parameters]
    if method.return_type is not None:
        annotations.append(method.return_type)
    text = " ".join(annotations)
    return [
        tp for tp in model.type_parameters if re.search(rf"\b{re.escape(tp.name)}\b", text)
    ]


def generate_can_accept_trigger(
    model: ComponentModel, settings: GeneratorSettings | None = None
) -> MethodSpec:
    """Emit the capability check: a literal answer, `False` for an empty model."""

    cfg = _settings(settings)
    writer = CodeWriter(cfg.indent)
    with writer.method(f"def {CAN_ACCEPT_TRIGGER}", ["self"], "bool"):
        writer.line(f"return {model.has_triggers}")
    return MethodSpec(name=CAN_ACCEPT_TRIGGER, source=writer.render())


def generate_accept_trigger_event(
    model: ComponentModel, settings: GeneratorSettings | None = None
) -> MethodSpec:
    """Emit the runtime dispatcher.

    Each trigger method gets one `case` keyed by its identifier. Caller values
    are taken positionally from `params` in declared order; event-field values
    are read from the payload by name. Unknown identifiers fall through to
    `case _` and yield `None`.
    """

    cfg = _settings(settings)
    ids = assign_trigger_ids(model)
    writer = CodeWriter(cfg.indent)

    params = [
        "self",
        f"event_trigger: {cfg.event_trigger_type}",
        "event_state: object",
        "params: list[object]",
    ]
    with writer.method(f"def {ACCEPT_TRIGGER_EVENT}", params, "object | None"):
        writer.line("trigger_id = event_trigger.id")
        with writer.block("match trigger_id:"):
            for method in model.trigger_methods:
                with writer.block(f"case {ids[method.name]}:"):
                    writer.line(f"_event = {_cast(method.event.type_name, 'event_state')}")

                    args = ["event_trigger.trigger_target"]
                    position = 0
                    for param in method.dispatched_parameters:
                        if param.origin is ParameterOrigin.CALLER:
                            args.append(_cast(param.type, f"params[{position}]"))
                            position += 1
                        else:
                            args.append(f"_event.{param.name}")

                    call = f"self.{delegate_name(method.name)}"
                    if method.is_void:
                        writer.call(call, args)
                        writer.line("return None")
                    else:
                        writer.call(f"return {call}", args)
            with writer.block("case _:"):
                writer.line("return None")

    logger.debug(
        "Emitted trigger dispatcher",
        extra={"component": model.name, "case_count": len(ids)},
    )
    return MethodSpec(name=ACCEPT_TRIGGER_EVENT, source=writer.render())


def _instance_value(param: Parameter, cfg: GeneratorSettings) -> str:
    if param.origin is ParameterOrigin.STATE:
        return _cast(param.type, f"_impl.{cfg.state_container_attr}.{param.name}")
    return _cast(param.type, f"_impl.{param.name}")


def generate_trigger_delegate(
    model: ComponentModel, method: TriggerMethod, settings: GeneratorSettings | None = None
) -> MethodSpec:
    """Emit the adapter from the dispatcher's call shape to the spec class handler."""

    cfg = _settings(settings)
    writer = CodeWriter(cfg.indent)

    params = ["self", f"{ABSTRACT_IMPL}: {cfg.trigger_target_type}"]
    params.extend(_param_decl(p) for p in method.dispatched_parameters)
    returns = "None" if method.return_type is None else method.return_type

    with writer.method(f"def {delegate_name(method.name)}", params, returns):
        writer.line(f"_impl = {_cast(model.impl_name, ABSTRACT_IMPL)}")
        args = [
            _instance_value(p, cfg) if p.is_instance_value else p.name for p in method.parameters
        ]
        handler = f"{model.spec_name}.{method.name}"
        if method.return_type is None:
            writer.call(handler, args)
        else:
            writer.call(f"_result = {handler}", args)
            writer.line(f"return {_cast(method.return_type, '_result')}")

    return MethodSpec(name=delegate_name(method.name), source=writer.render())


def generate_trigger_delegates(
    model: ComponentModel, settings: GeneratorSettings | None = None
) -> GeneratedMembers:
    """Emit one delegate per handler; raises `DuplicateIdentifierError` on id collisions."""

    cfg = _settings(settings)
    assign_trigger_ids(model)
    methods = tuple(generate_trigger_delegate(model, m, cfg) for m in model.trigger_methods)
    return GeneratedMembers(methods=methods)


def generate_static_trigger_method(
    model: ComponentModel, method: TriggerMethod, settings: GeneratorSettings | None = None
) -> MethodSpec:
    """Emit the public entry point external callers use to fire a trigger.

    A missing registration returns before the payload is built.
    """

    cfg = _settings(settings)
    writer = CodeWriter(cfg.indent)

    type_params = _referenced_type_parameters(model, method)
    type_clause = "[" + ", ".join(tp.render() for tp in type_params) + "]" if type_params else ""

    params = [f"c: {cfg.context_type}", "key: str"]
    params.extend(_param_decl(p) for p in method.dispatched_parameters)
    returns = "None" if method.return_type is None else f"{method.return_type} | None"

    writer.line("@staticmethod")
    with writer.method(f"def {method.name}{type_clause}", params, returns):
        writer.line(f"method_id = {compute_trigger_id(model.name, method.name)}")
        writer.line(f"trigger = {cfg.trigger_lookup}(c, method_id, key)")
        with writer.block("if trigger is None:"):
            writer.line("return" if method.is_void else "return None")

        writer.line(f"_event_state = {method.event.type_name}()")
        for param in method.event_field_parameters:
            writer.line(f"_event_state.{param.name} = {param.name}")

        positional = ", ".join(p.name for p in method.caller_parameters)
        dispatch = f"trigger.dispatch_on_trigger(_event_state, [{positional}])"
        if method.return_type is None:
            writer.line(dispatch)
        else:
            writer.line(f"_result = {dispatch}")
            writer.line(f"return {_cast(method.return_type, '_result')}")

    return MethodSpec(name=method.name, source=writer.render())


def generate_static_trigger_methods(
    model: ComponentModel, settings: GeneratorSettings | None = None
) -> GeneratedMembers:
    """Emit one entry point per handler; raises `DuplicateIdentifierError` on id collisions."""

    cfg = _settings(settings)
    assign_trigger_ids(model)
    methods = tuple(
        generate_static_trigger_method(model, m, cfg) for m in model.trigger_methods
    )
    return GeneratedMembers(methods=methods)


def generate_trigger_members(
    model: ComponentModel, settings: GeneratorSettings | None = None
) -> GeneratedMembers:
    """Verify `model`, then emit every trigger member of the component.

    Raises:
        TriggerGenerationError: If the model violates an invariant. Nothing is
            emitted for the component in that case.
    """

    cfg = _settings(settings)
    verify_component(model, cfg).raise_for_violations()

    members = GeneratedMembers(methods=(generate_can_accept_trigger(model, cfg),))
    if model.has_triggers:
        members = members.merge(
            GeneratedMembers(methods=(generate_accept_trigger_event(model, cfg),)),
            generate_trigger_delegates(model, cfg),
            generate_static_trigger_methods(model, cfg),
        )

    logger.info(
        "Generated trigger members",
        extra={
            "component": model.name,
            "trigger_count": len(model.trigger_methods),
            "members": members.names,
        },
    )
    return members


def render_trigger_module(
    model: ComponentModel, settings: GeneratorSettings | None = None
) -> str:
    """Render a standalone module holding the component class and its trigger members."""

    cfg = _settings(settings)
    members = generate_trigger_members(model, cfg)
    header = [
        "from __future__ import annotations",
        "",
        "from typing import cast",
        "",
        "",
        f"class {model.name}{model.render_type_parameters()}({cfg.component_base}):",
    ]
    return "\n".join(header) + "\n" + members.render(cfg.indent)
