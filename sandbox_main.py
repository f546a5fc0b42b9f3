#!/usr/bin/env python3
"""JSON entrypoint for seo-tech-check.

This script reads JSON input from stdin (AuditInput model), audits the
directory tree and outputs an AuditReport as JSON to stdout.
"""

import json
import logging
import sys

# Add src directory to path for imports
sys.path.insert(0, "src")

from seo_tech_check.audit import run_audit
from seo_tech_check.models import AuditInput
from seo_tech_check.source import NoInputError

logger = logging.getLogger(__name__)

EXPECTED_FORMAT = {
    "path": "/path/to/site",
    "ignore_file": ".gitignore",
}


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    try:
        input_data = sys.stdin.read()
        if not input_data.strip():
            print(json.dumps({
                "error": "No input provided. Please provide a JSON object with a 'path' field.",
                "expected_format": EXPECTED_FORMAT,
            }))
            return 1
        audit_input = AuditInput.model_validate_json(input_data)
    except Exception as e:
        print(json.dumps({
            "error": f"Failed to parse input: {str(e)}",
            "expected_format": EXPECTED_FORMAT,
        }))
        return 1

    logger.info(f"Starting audit of {audit_input.path}")
    try:
        report = run_audit(audit_input)
    except NoInputError:
        logger.warning(f"No files found for analysis in {audit_input.path}")
        print(json.dumps({"error": "No files found for analysis.", "path": audit_input.path}))
        return 1
    except NotADirectoryError as e:
        print(json.dumps({"error": str(e), "path": audit_input.path}))
        return 1

    logger.info(f"Audit finished: {report.files_scanned} file(s) scanned")
    print(report.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, stream=sys.stderr)
    sys.exit(main())
