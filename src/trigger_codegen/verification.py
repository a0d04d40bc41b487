"""Pre-generation verification of a component model.

Upstream validation is expected to reject malformed specs already. This pass
re-checks the invariants the emitters rely on and reports every violation as
data, so callers can decide between printing a report and failing fast.
"""

from __future__ import annotations

import keyword
import logging
import re
from dataclasses import dataclass
from enum import Enum

from trigger_codegen.config import GeneratorSettings, default_settings
from trigger_codegen.errors import (
    DuplicateIdentifierError,
    DuplicateParameterError,
    DuplicateTriggerNameError,
    MemberNameConflictError,
    ReservedNameError,
    TriggerGenerationError,
    UnmatchedEventFieldError,
)
from trigger_codegen.identifiers import compute_trigger_id
from trigger_codegen.model.spec_model import ComponentModel, TriggerMethod
from trigger_codegen.names import FIXED_MEMBERS, RESERVED_PARAMETER_NAMES, delegate_name

logger = logging.getLogger(__name__)


class ViolationKind(str, Enum):
    DUPLICATE_NAME = "duplicate_name"
    DUPLICATE_IDENTIFIER = "duplicate_identifier"
    UNMATCHED_EVENT_FIELD = "unmatched_event_field"
    MEMBER_NAME_CONFLICT = "member_name_conflict"
    DUPLICATE_PARAMETER = "duplicate_parameter"
    RESERVED_PARAMETER_NAME = "reserved_parameter_name"


@dataclass(frozen=True, slots=True)
class ModelViolation:
    kind: ViolationKind
    method_name: str
    detail: str
    error: TriggerGenerationError


@dataclass(frozen=True, slots=True)
class VerificationResult:
    component: str
    violations: tuple[ModelViolation, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.violations

    def raise_for_violations(self) -> None:
        if self.violations:
            raise self.violations[0].error


def _global_root(expr: str) -> str:
    match = re.match(r"\w+", expr)
    return match.group(0) if match else expr


def _parameter_violations(
    model: ComponentModel, method: TriggerMethod, reserved: frozenset[str]
) -> list[ModelViolation]:
    violations: list[ModelViolation] = []
    seen: set[str] = set()
    for param in method.parameters:
        if param.name in seen:
            violations.append(
                ModelViolation(
                    kind=ViolationKind.DUPLICATE_PARAMETER,
                    method_name=method.name,
                    detail=f"parameter {param.name!r} declared more than once",
                    error=DuplicateParameterError(
                        component=model.name, method=method.name, parameter=param.name
                    ),
                )
            )
            continue
        seen.add(param.name)

        if param.name in reserved or keyword.iskeyword(param.name):
            violations.append(
                ModelViolation(
                    kind=ViolationKind.RESERVED_PARAMETER_NAME,
                    method_name=method.name,
                    detail=f"parameter {param.name!r} is reserved in generated code",
                    error=ReservedNameError(
                        component=model.name, method=method.name, parameter=param.name
                    ),
                )
            )
    return violations


def verify_component(
    model: ComponentModel, settings: GeneratorSettings | None = None
) -> VerificationResult:
    """Check that `model` can be emitted as unambiguous, compilable members.

    Covers unique handler names, collision-free identifiers, matched event
    fields, handler names that would replace another generated member, and
    parameter names that would shadow a name the generated bodies use.
    `settings` supplies the emitted lookup spelling; defaults apply when omitted.
    """

    cfg = settings if settings is not None else default_settings()
    violations: list[ModelViolation] = []

    members = {name: "generated dispatch member" for name in FIXED_MEMBERS}
    for method in model.trigger_methods:
        members.setdefault(delegate_name(method.name), f"delegate of {method.name!r}")

    seen_names: set[str] = set()
    id_owners: dict[int, str] = {}
    for method in model.trigger_methods:
        if method.name in seen_names:
            violations.append(
                ModelViolation(
                    kind=ViolationKind.DUPLICATE_NAME,
                    method_name=method.name,
                    detail="declared more than once",
                    error=DuplicateTriggerNameError(component=model.name, method=method.name),
                )
            )
            continue
        seen_names.add(method.name)

        trigger_id = compute_trigger_id(model.name, method.name)
        owner = id_owners.setdefault(trigger_id, method.name)
        if owner != method.name:
            violations.append(
                ModelViolation(
                    kind=ViolationKind.DUPLICATE_IDENTIFIER,
                    method_name=method.name,
                    detail=f"identifier {trigger_id} already used by {owner!r}",
                    error=DuplicateIdentifierError(
                        component=model.name,
                        first=owner,
                        second=method.name,
                        trigger_id=trigger_id,
                    ),
                )
            )

        if method.name in members:
            violations.append(
                ModelViolation(
                    kind=ViolationKind.MEMBER_NAME_CONFLICT,
                    method_name=method.name,
                    detail=f"clashes with the {members[method.name]}",
                    error=MemberNameConflictError(
                        component=model.name, method=method.name, member=method.name
                    ),
                )
            )

        for param in method.event_field_parameters:
            if method.event.find_field(param.name) is None:
                violations.append(
                    ModelViolation(
                        kind=ViolationKind.UNMATCHED_EVENT_FIELD,
                        method_name=method.name,
                        detail=(
                            f"parameter {param.name!r} has no matching field on "
                            f"{method.event.type_name!r}"
                        ),
                        error=UnmatchedEventFieldError(
                            component=model.name,
                            method=method.name,
                            parameter=param.name,
                            event_type=method.event.type_name,
                        ),
                    )
                )

        reserved = RESERVED_PARAMETER_NAMES | {
            _global_root(model.spec_name),
            cfg.lookup_root,
            _global_root(method.event.type_name),
        }
        violations.extend(_parameter_violations(model, method, reserved))

    for violation in violations:
        logger.warning(
            "Trigger model violation",
            extra={
                "component": model.name,
                "method": violation.method_name,
                "kind": violation.kind.value,
                "detail": violation.detail,
            },
        )

    return VerificationResult(component=model.name, violations=tuple(violations))
