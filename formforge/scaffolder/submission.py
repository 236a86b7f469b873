"""Submission strategy selection for the generated ``onSubmit`` handler.

The handler body is planned as an ordered tree of steps split into four
blocks that the component template emits as::

    <prologue>
    try { <attempt> } catch (error) { <on_error> } finally { <cleanup> }

Exactly one strategy fills ``attempt``, in priority order: delegated (server
action), remote (``fetch`` to the form's API route) and local (log only).
The ``isSubmitting`` flag is set in the prologue and cleared in ``finally`` so
every exit path releases it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models import FormSpec
from .naming import FormNames


class SubmissionStrategy(str, Enum):
    DELEGATED = "delegated"
    REMOTE = "remote"
    LOCAL = "local"


class StepKind(str, Enum):
    BEGIN_SUBMIT = "begin_submit"
    END_SUBMIT = "end_submit"
    CLEAR_ERROR = "clear_error"
    CLEAR_SUCCESS = "clear_success"
    CALL_ACTION = "call_action"
    CALL_ENDPOINT = "call_endpoint"
    LOG_PAYLOAD = "log_payload"
    CHECK_RESULT = "check_result"
    SHOW_SUCCESS = "show_success"
    RESET_FORM = "reset_form"
    LOG_ERROR = "log_error"
    SHOW_ERROR = "show_error"


@dataclass(frozen=True)
class Step:
    """One statement of the handler.  ``CHECK_RESULT`` nests its success path."""

    kind: StepKind
    value: Optional[str] = None
    children: tuple["Step", ...] = ()


@dataclass(frozen=True)
class SubmissionPlan:
    strategy: SubmissionStrategy
    prologue: tuple[Step, ...]
    attempt: tuple[Step, ...]
    on_error: tuple[Step, ...]
    cleanup: tuple[Step, ...]
    loading_state: bool
    error_display: bool

    def kinds(self) -> list[StepKind]:
        """Flatten the plan to step kinds in emission order."""
        ordered: list[StepKind] = []

        def walk(steps: tuple[Step, ...]) -> None:
            for step in steps:
                ordered.append(step.kind)
                walk(step.children)

        for block in (self.prologue, self.attempt, self.on_error, self.cleanup):
            walk(block)
        return ordered


def select_strategy(spec: FormSpec) -> SubmissionStrategy:
    if spec.use_server_actions:
        return SubmissionStrategy.DELEGATED
    if spec.include_database:
        return SubmissionStrategy.REMOTE
    return SubmissionStrategy.LOCAL


def plan_submission(spec: FormSpec, names: FormNames) -> SubmissionPlan:
    strategy = select_strategy(spec)
    success = (
        Step(StepKind.SHOW_SUCCESS, spec.success_message),
        Step(StepKind.RESET_FORM),
    )
    check = Step(StepKind.CHECK_RESULT, spec.error_message, success)

    if strategy is SubmissionStrategy.DELEGATED:
        attempt = (Step(StepKind.CALL_ACTION, names.action_symbol), check)
    elif strategy is SubmissionStrategy.REMOTE:
        attempt = (Step(StepKind.CALL_ENDPOINT, names.endpoint_url), check)
    else:
        attempt = (Step(StepKind.LOG_PAYLOAD), *success)

    prologue: list[Step] = []
    if spec.add_loading_state:
        prologue.append(Step(StepKind.BEGIN_SUBMIT))
    if spec.add_error_handling:
        prologue.append(Step(StepKind.CLEAR_ERROR))
    prologue.append(Step(StepKind.CLEAR_SUCCESS))

    on_error = [Step(StepKind.LOG_ERROR)]
    if spec.add_error_handling:
        on_error.append(Step(StepKind.SHOW_ERROR, spec.error_message))

    cleanup = (Step(StepKind.END_SUBMIT),) if spec.add_loading_state else ()

    return SubmissionPlan(
        strategy=strategy,
        prologue=tuple(prologue),
        attempt=attempt,
        on_error=tuple(on_error),
        cleanup=cleanup,
        loading_state=spec.add_loading_state,
        error_display=spec.add_error_handling,
    )
