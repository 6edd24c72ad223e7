"""The ``props-must-be-serializable`` rule: verdicts rendered as diagnostics."""

from __future__ import annotations

import logging
from collections.abc import Collection

from clientbound.checker.eligibility import is_checked_entity, is_module_checked
from clientbound.classifier import classify
from clientbound.constants.builtins import SERIALIZABLE_BUILT_INS
from clientbound.constants.reporting import (
    MESSAGE_FUNCTION_NOT_ACTION,
    MESSAGE_INVALID_PROP,
    MESSAGE_TEMPLATES,
    RULE_ID,
)
from clientbound.model import Diagnostic, Entity, Field, FileContext, ModuleDescription
from clientbound.types import MessageId, Verdict

logger = logging.getLogger(__name__)

_MESSAGE_BY_VERDICT: dict[Verdict, MessageId] = {
    Verdict.FUNCTION_NOT_ACTION: MESSAGE_FUNCTION_NOT_ACTION,
    Verdict.INVALID_CLASS: MESSAGE_INVALID_PROP,
}


def render_message(message_id: MessageId, prop_name: str) -> str:
    """Render the user-facing message for a disqualified prop."""
    return MESSAGE_TEMPLATES[message_id].format(prop_name=prop_name)


def check_module(
    module: ModuleDescription,
    *,
    allowlist: Collection[str] = SERIALIZABLE_BUILT_INS,
    skip_test_files: bool = True,
) -> list[Diagnostic]:
    """Check every exported component of a module, in declaration order."""
    if not is_module_checked(module, skip_test_files=skip_test_files):
        logger.debug("Skipping module %s", module.path)
        return []

    context = FileContext(path=module.path)
    diagnostics: list[Diagnostic] = []
    for entity in module.entities:
        if not is_checked_entity(entity):
            continue
        diagnostics.extend(check_entity(entity, context, allowlist=allowlist))
    return diagnostics


def check_entity(
    entity: Entity,
    context: FileContext,
    *,
    allowlist: Collection[str] = SERIALIZABLE_BUILT_INS,
) -> list[Diagnostic]:
    """Classify each props field independently; one diagnostic per disqualified field."""
    diagnostics: list[Diagnostic] = []
    for field in entity.fields:
        verdict = classify(field, context, allowlist=allowlist)
        if verdict.is_serializable:
            continue
        diagnostics.append(_build_diagnostic(field, entity, context, _MESSAGE_BY_VERDICT[verdict]))
    return diagnostics


def _build_diagnostic(field: Field, entity: Entity, context: FileContext, message_id: MessageId) -> Diagnostic:
    return Diagnostic(
        rule_id=RULE_ID,
        message_id=message_id,
        prop_name=field.name,
        message=render_message(message_id, field.name),
        path=context.path,
        entity=entity.name,
        line=field.line,
        column=field.column,
    )
