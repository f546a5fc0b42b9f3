"""Tests for grouping and rendering of results."""

import io

import pytest
from rich.console import Console

from seo_tech_check.engine import Evaluation
from seo_tech_check.models import AuditInput, CheckOutcome, GroupStatus
from seo_tech_check.report import build_report, group_outcomes, group_status, render_report


def _outcome(name, group="G", passed=True, aggregate=False, offending=None, message="failed"):
    return CheckOutcome(
        name=name,
        group=group,
        passed=passed,
        message=message,
        aggregate=aggregate,
        offending_files=offending or [],
    )


def _render(report):
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None, highlight=False)
    render_report(report, console)
    return buffer.getvalue()


class TestGroupStatus:
    """Test tri-state group status."""

    @pytest.mark.parametrize(
        "states,expected",
        [
            ([True], GroupStatus.COMPLETE),
            ([True, True, True], GroupStatus.COMPLETE),
            ([False], GroupStatus.ABSENT),
            ([False, False], GroupStatus.ABSENT),
            ([True, False], GroupStatus.PARTIAL),
            ([False, False, True], GroupStatus.PARTIAL),
        ],
    )
    def test_status(self, states, expected):
        """Test status for every mix of passed and failed checks."""
        outcomes = [_outcome(f"c{i}", passed=s) for i, s in enumerate(states)]
        assert group_status(outcomes) == expected

    def test_marker_mapping(self):
        """Test each status maps to one output marker."""
        assert GroupStatus.COMPLETE.marker.value == "pass"
        assert GroupStatus.PARTIAL.marker.value == "warn"
        assert GroupStatus.ABSENT.marker.value == "fail"


class TestGroupOutcomes:
    """Test partitioning by group."""

    def test_groups_keep_first_appearance_order(self):
        """Test groups are ordered by their first check."""
        outcomes = [
            _outcome("a", group="Second"),
            _outcome("b", group="First"),
            _outcome("c", group="Second"),
        ]
        groups = group_outcomes(outcomes)

        assert [g.name for g in groups] == ["Second", "First"]
        assert [c.name for c in groups[0].checks] == ["a", "c"]


class TestFailureLines:
    """Test expansion of failure messages."""

    def test_aggregate_one_line_per_file(self):
        """Test the file placeholder is filled per offending file."""
        outcome = _outcome(
            "Alt-Tags",
            passed=False,
            aggregate=True,
            offending=["a.html", "b/c.php"],
            message="Missing alt text in: {file}",
        )
        assert outcome.failure_lines() == [
            "Missing alt text in: a.html",
            "Missing alt text in: b/c.php",
        ]

    def test_plain_check_single_line(self):
        """Test non-aggregate checks print their message once."""
        assert _outcome("x", passed=False, message="No <title> tag found!").failure_lines() == [
            "No <title> tag found!"
        ]

    def test_passed_check_has_no_failures(self):
        """Test passed checks produce no failure lines."""
        assert _outcome("x").failure_lines() == []


class TestRenderReport:
    """Test text rendering."""

    def _report(self, outcomes):
        evaluation = Evaluation(outcomes=outcomes, files_scanned=1)
        return build_report(evaluation, AuditInput(path="site"))

    def test_complete_group_single_line(self):
        """Test a complete group hides its checks."""
        output = _render(self._report([_outcome("Doctype", group="Meta-Data")]))

        assert "✅ Meta-Data" in output
        assert "Doctype" not in output

    def test_partial_group_lists_checks(self):
        """Test a partial group shows confirmations and failures."""
        output = _render(
            self._report(
                [
                    _outcome("Doctype", group="Meta-Data"),
                    _outcome("Title Tag", group="Meta-Data", passed=False, message="No <title> tag found!"),
                ]
            )
        )

        assert "⚠️ Meta-Data" in output
        assert "✅ Doctype" in output
        assert "❌ No <title> tag found!" in output

    def test_absent_group_with_aggregate(self):
        """Test offending files are printed one per line."""
        output = _render(
            self._report(
                [
                    _outcome(
                        "Alt-Tags",
                        group="Images",
                        passed=False,
                        aggregate=True,
                        offending=["a.html", "b.html"],
                        message="Missing alt text in: {file}",
                    )
                ]
            )
        )

        assert "❌ Images" in output
        assert "❌ Missing alt text in: a.html" in output
        assert "❌ Missing alt text in: b.html" in output

    def test_header_and_no_score(self):
        """Test the report has a heading and exposes no score."""
        report = self._report([_outcome("Doctype")])
        output = _render(report)

        assert "Check Results:" in output
        assert "score" not in report.model_dump()
