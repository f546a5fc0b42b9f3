"""Single-pass evaluation of the check registry over the scanned files."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Sequence

from .checks import AggregateCheck, Check, PathCheck, PatternCheck, PredicateCheck
from .models import CheckOutcome
from .source import SourceFile

logger = logging.getLogger(__name__)


@dataclass
class CheckState:
    """Running result of one check while files are scanned."""

    passed: bool = False
    seen: bool = False
    offending_files: list[str] = field(default_factory=list)


@dataclass
class Evaluation:
    outcomes: list[CheckOutcome]
    files_scanned: int


def _is_settled(check: Check, state: CheckState) -> bool:
    """True when no later file can change the result of the check."""
    if isinstance(check, AggregateCheck):
        return False
    if isinstance(check, PredicateCheck) and check.require_all:
        # A single violation is final
        return state.seen and not state.passed
    return state.passed


def _apply_pattern(check: PatternCheck, state: CheckState, source: SourceFile) -> None:
    if check.pattern.search(source.content):
        state.passed = True


def _apply_path(check: PathCheck, state: CheckState, source: SourceFile) -> None:
    if check.predicate(source.path):
        state.passed = True


def _apply_predicate(check: PredicateCheck, state: CheckState, source: SourceFile) -> None:
    result = bool(check.predicate(source.path, source.content))
    if check.require_all:
        state.passed = result if not state.seen else (state.passed and result)
    elif result:
        state.passed = True


def _apply_aggregate(check: AggregateCheck, state: CheckState, source: SourceFile) -> None:
    if check.offending(source.path, source.content):
        state.offending_files.append(source.path)


_EVALUATORS: dict[type, Callable[[Check, CheckState, SourceFile], None]] = {
    PatternCheck: _apply_pattern,
    PathCheck: _apply_path,
    PredicateCheck: _apply_predicate,
    AggregateCheck: _apply_aggregate,
}


def _evaluator_for(check: Check) -> Callable[[Check, CheckState, SourceFile], None]:
    for cls in type(check).__mro__:
        if cls in _EVALUATORS:
            return _EVALUATORS[cls]
    raise TypeError(f"Unsupported check type: {type(check).__name__}")


def _finalize(check: Check, state: CheckState) -> CheckOutcome:
    aggregate = isinstance(check, AggregateCheck)
    if aggregate:
        # Nothing scanned is not a pass
        passed = state.seen and not state.offending_files
    elif isinstance(check, PredicateCheck) and check.require_all:
        passed = state.seen and state.passed
    else:
        passed = state.passed

    return CheckOutcome(
        name=check.name,
        group=check.group,
        passed=passed,
        message=check.message,
        aggregate=aggregate,
        offending_files=list(state.offending_files),
    )


def evaluate(checks: Sequence[Check], sources: Iterable[SourceFile]) -> Evaluation:
    """Run every check against every file in a single pass.

    First-match checks stop being evaluated once they passed. Aggregate checks
    inspect every file and keep the offending paths in scan order. A check
    that raises on one file is logged and contributes nothing for that file.

    Args:
        checks: Ordered check declarations.
        sources: Files to scan, in scan order.

    Returns:
        Evaluation with one CheckOutcome per check, in declaration order.
    """
    evaluators = [_evaluator_for(check) for check in checks]
    states = [CheckState() for _ in checks]
    files_scanned = 0

    for source in sources:
        files_scanned += 1
        for check, apply, state in zip(checks, evaluators, states):
            if _is_settled(check, state):
                continue
            try:
                apply(check, state, source)
            except Exception as e:
                logger.warning(f"Check '{check.name}' failed on {source.path}: {e}")
                continue
            state.seen = True

    logger.info(f"Evaluated {len(checks)} checks over {files_scanned} file(s)")

    return Evaluation(
        outcomes=[_finalize(check, state) for check, state in zip(checks, states)],
        files_scanned=files_scanned,
    )
