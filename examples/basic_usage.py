#!/usr/bin/env python3
"""Programmatic generation example.

This demonstrates using the generator components directly:

* load settings from `.env`
* build a component model in code
* verify it and print the generated trigger members

The component name is passed as an argument.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from trigger_codegen.config import GeneratorSettings
from trigger_codegen.errors import TriggerGenerationError
from trigger_codegen.generator.trigger_generator import render_trigger_module
from trigger_codegen.identifiers import assign_trigger_ids
from trigger_codegen.model.spec_model import (
    ComponentModel,
    EventDeclaration,
    EventField,
    Parameter,
    ParameterOrigin,
    TriggerMethod,
)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate trigger members (programmatic example).")
    parser.add_argument("--component", default="Button", help='Component name, e.g. "Button"')
    return parser.parse_args(argv)


def _build_model(name: str) -> ComponentModel:
    return ComponentModel(
        name=name,
        trigger_methods=(
            TriggerMethod(
                name="onClick",
                return_type="bool",
                parameters=(
                    Parameter(name="enabled", type="bool", origin=ParameterOrigin.PROP),
                    Parameter(name="clicks", type="int", origin=ParameterOrigin.STATE),
                    Parameter(name="source", type="str", origin=ParameterOrigin.CALLER),
                    Parameter(name="x", type="int", origin=ParameterOrigin.EVENT_FIELD),
                ),
                event=EventDeclaration(
                    type_name="ClickEvent",
                    return_type="bool",
                    fields=(EventField(name="x", type="int"),),
                ),
            ),
            TriggerMethod(
                name="reset",
                parameters=(Parameter(name="clicks", type="int", origin=ParameterOrigin.STATE),),
            ),
        ),
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = GeneratorSettings()
    settings.setup_logging()

    model = _build_model(args.component)

    try:
        ids = assign_trigger_ids(model)
        source = render_trigger_module(model, settings)
    except TriggerGenerationError as exc:
        print(str(exc))
        return 3

    for method_name, trigger_id in ids.items():
        print(f"# {method_name}: {trigger_id}")
    print(source)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
