"""Pydantic models for the static SEO checker."""

from datetime import datetime
from enum import Enum
from typing import Union

from pydantic import BaseModel, Field

FILE_PLACEHOLDER = "{file}"


class AuditInput(BaseModel):
    """Input parameters for a static SEO audit."""

    path: str = Field(..., description="Root directory of the site to audit")
    ignore_file: str = Field(
        default=".gitignore", description="Name of the ignore file at the root of the tree"
    )
    extensions: list[str] = Field(
        default_factory=lambda: [".html", ".twig", ".php"],
        description="File suffixes treated as markup",
    )
    filenames: list[str] = Field(
        default_factory=lambda: ["robots.txt"],
        description="Exact file names picked up anywhere in the tree",
    )


class CheckStatus(str, Enum):
    """Marker shown next to a group or check."""

    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"


class GroupStatus(str, Enum):
    """Tri-state status of a group of checks."""

    COMPLETE = "complete"
    PARTIAL = "partial"
    ABSENT = "absent"

    @property
    def marker(self) -> CheckStatus:
        return {
            GroupStatus.COMPLETE: CheckStatus.PASS,
            GroupStatus.PARTIAL: CheckStatus.WARN,
            GroupStatus.ABSENT: CheckStatus.FAIL,
        }[self]


class CheckOutcome(BaseModel):
    """Final state of a single check after every file was scanned."""

    name: str
    group: str
    passed: bool
    message: str = Field(description="Failure message, may contain a {file} placeholder")
    aggregate: bool = False
    offending_files: list[str] = Field(default_factory=list)

    def failure_lines(self) -> list[str]:
        """Messages to print when the check failed.

        Aggregate checks produce one line per offending file with the path
        substituted into the message, every other check a single line.
        """
        if self.passed:
            return []
        if self.aggregate:
            return [self.message.replace(FILE_PLACEHOLDER, f) for f in self.offending_files]
        return [self.message]


class GroupResult(BaseModel):
    """Checks sharing a group name and their combined status."""

    name: str
    status: GroupStatus
    checks: list[CheckOutcome] = Field(default_factory=list)


class AuditReport(BaseModel):
    """Complete static SEO audit report."""

    path: str
    scan_time: Union[str, datetime]
    files_scanned: int = 0
    files_skipped: int = 0
    groups: list[GroupResult] = Field(default_factory=list)
