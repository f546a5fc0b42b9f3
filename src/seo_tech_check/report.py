"""Grouping of check outcomes and terminal rendering of the audit report."""

from datetime import datetime, timezone
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .engine import Evaluation
from .models import AuditInput, AuditReport, CheckOutcome, CheckStatus, GroupResult, GroupStatus

MARKERS = {
    CheckStatus.PASS: "[green]✅[/green]",
    CheckStatus.WARN: "[yellow]⚠️[/yellow]",
    CheckStatus.FAIL: "[red]❌[/red]",
}


def group_status(outcomes: list[CheckOutcome]) -> GroupStatus:
    """Derive the tri-state status of a group from its members."""
    if all(o.passed for o in outcomes):
        return GroupStatus.COMPLETE
    if not any(o.passed for o in outcomes):
        return GroupStatus.ABSENT
    return GroupStatus.PARTIAL


def group_outcomes(outcomes: list[CheckOutcome]) -> list[GroupResult]:
    """Partition outcomes by group, keeping the order in which groups first appear."""
    by_group: dict[str, list[CheckOutcome]] = {}
    for outcome in outcomes:
        by_group.setdefault(outcome.group, []).append(outcome)

    return [
        GroupResult(name=name, status=group_status(members), checks=members)
        for name, members in by_group.items()
    ]


def build_report(
    evaluation: Evaluation, config: AuditInput, files_skipped: int = 0
) -> AuditReport:
    return AuditReport(
        path=config.path,
        scan_time=datetime.now(timezone.utc).isoformat(),
        files_scanned=evaluation.files_scanned,
        files_skipped=files_skipped,
        groups=group_outcomes(evaluation.outcomes),
    )


def render_report(report: AuditReport, console: Optional[Console] = None) -> None:
    """Print the grouped results.

    Complete groups get a single line. Partial and absent groups list every
    check: a confirmation for passed ones, the failure message otherwise and
    one line per offending file for aggregate checks.
    """
    console = console or Console(highlight=False)
    passed = MARKERS[CheckStatus.PASS]
    failed = MARKERS[CheckStatus.FAIL]

    console.print("SEO Tech Check")
    console.print()
    console.print("Check Results:")

    for group in report.groups:
        console.print(f"  {MARKERS[group.status.marker]} {escape(group.name)}")
        if group.status == GroupStatus.COMPLETE:
            continue

        for check in group.checks:
            if check.passed:
                console.print(f"    {passed} {escape(check.name)}")
                continue
            for line in check.failure_lines():
                console.print(f"    {failed} {escape(line)}")
