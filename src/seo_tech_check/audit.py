"""Orchestration of a full audit: discover, read, evaluate, report."""

import logging
from pathlib import Path
from typing import Optional, Sequence

from .checks import CHECKS, Check
from .engine import evaluate
from .models import AuditInput, AuditReport
from .report import build_report
from .source import ReadStats, discover_files, read_sources

logger = logging.getLogger(__name__)


def run_audit(config: AuditInput, checks: Optional[Sequence[Check]] = None) -> AuditReport:
    """Audit the tree described by config.

    Raises:
        NotADirectoryError: If the root is not a directory.
        NoInputError: If no file is left to scan.
    """
    root = Path(config.path).resolve()
    logger.info(f"Auditing {root}")

    paths = discover_files(config)
    stats = ReadStats()
    evaluation = evaluate(checks if checks is not None else CHECKS, read_sources(root, paths, stats))

    if stats.skipped:
        logger.info(f"Skipped {stats.skipped} unreadable file(s)")

    return build_report(evaluation, config, files_skipped=stats.skipped)
