"""CLI entrypoint for the trigger code generator.

Reads a component model serialised as JSON (as produced by the annotation front
end), verifies it, and writes the generated trigger members.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from trigger_codegen import __version__
from trigger_codegen.config import GeneratorSettings
from trigger_codegen.errors import TriggerGenerationError
from trigger_codegen.generator.trigger_generator import (
    generate_trigger_members,
    render_trigger_module,
)
from trigger_codegen.identifiers import compute_trigger_id
from trigger_codegen.model.spec_model import ComponentModel
from trigger_codegen.verification import verify_component

logger = logging.getLogger(__name__)


def _load_model(path: Path) -> ComponentModel:
    return ComponentModel.model_validate_json(path.read_text(encoding="utf-8"))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trigger-codegen",
        description="Generate trigger dispatch members for a component model",
    )
    parser.add_argument("--version", action="version", version=f"trigger-codegen {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Emit trigger members for a model")
    generate.add_argument("model", type=Path, help="Path to the component model JSON")
    generate.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write generated source to this file instead of stdout",
    )
    generate.add_argument(
        "--members-only",
        action="store_true",
        help="Emit only the class members, without the module and class header",
    )

    verify = subparsers.add_parser("verify", help="Check a model without emitting code")
    verify.add_argument("model", type=Path, help="Path to the component model JSON")

    trigger_id = subparsers.add_parser(
        "trigger-id", help="Print the dispatch identifier of a trigger method"
    )
    trigger_id.add_argument("component", help="Component name, e.g. 'Test'")
    trigger_id.add_argument("method", help="Trigger method name")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = GeneratorSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    settings.setup_logging()

    try:
        if args.command == "trigger-id":
            print(compute_trigger_id(args.component, args.method))
            return 0

        model = _load_model(args.model)

        if args.command == "verify":
            result = verify_component(model, settings)
            for violation in result.violations:
                print(
                    f"{violation.kind.value}: {violation.method_name}: {violation.detail}",
                    file=sys.stderr,
                )
            if not result.ok:
                return 3
            print(f"{model.name}: {len(model.trigger_methods)} trigger method(s) OK")
            return 0

        if args.command == "generate":
            if args.members_only:
                source = generate_trigger_members(model, settings).render()
            else:
                source = render_trigger_module(model, settings)

            if args.output is None:
                sys.stdout.write(source)
            else:
                args.output.parent.mkdir(parents=True, exist_ok=True)
                args.output.write_text(source, encoding="utf-8")
                logger.info(
                    "Generated source written",
                    extra={"component": model.name, "path": str(args.output)},
                )
            return 0

        logger.error("Unknown command", extra={"command": args.command})
        return 2

    except ValidationError as e:
        logger.warning("Invalid component model", extra={"path": str(args.model)})
        print(f"Invalid component model {args.model}:", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    except TriggerGenerationError as e:
        logger.warning(str(e), extra={"component": e.component})
        print(str(e), file=sys.stderr)
        return 3

    except Exception:
        logger.exception("Command failed")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
