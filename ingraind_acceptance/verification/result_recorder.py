# ingraind_acceptance/verification/result_recorder.py
# ResultRecorder -- human-readable summary and JSON run records.
#
# Stdout contains only the summary block produced by format_summary().
# Run records are written to the runs directory:
#   {run_id}_PASS_{stamp}.json   -- verdict, pass
#   {run_id}_FAIL_{stamp}.json   -- verdict, fail (missing/unexpected)
#   {run_id}_ERROR_{stamp}.json  -- no verdict (FailureRecord)
# stamp is the UTC time as YYYYMMDDTHHMMSSZ.
# The runs directory is created if it does not exist.

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List

from ingraind_acceptance.check_version import CHECK_VERSION, RESULT_FORMAT_VERSION
from ingraind_acceptance.verification.data_models.check_result import CheckResult
from ingraind_acceptance.verification.data_models.failure_record import (
    FAILURE_TYPES,
    FailureRecord,
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _file_stamp(moment: datetime) -> str:
    return moment.strftime("%Y%m%dT%H%M%SZ")


def _listing(title: str, entries: Iterable[str]) -> List[str]:
    lines = [title]
    entries = list(entries)
    if not entries:
        lines.append("    (none)")
    lines.extend("    " + e for e in entries)
    return lines


def format_summary(
    result:         CheckResult,
    arch:           str,
    kernel_release: str,
    version_code:   int,
) -> str:
    """
    Render the verdict for a human reader. Both full sorted lists are
    printed so a failing run can be diffed by eye.
    """
    lines = [
        f"CHECK RESULT:   {'PASS' if result.passed else 'FAIL'}",
        f"Architecture:   {arch}",
        f"Kernel release: {kernel_release.strip()}",
        f"Kernel version: {version_code}",
    ]
    lines.extend(_listing("Modules loaded:", result.actual))
    lines.extend(_listing("Modules expected:", result.expected))
    if not result.passed:
        lines.extend(_listing("Missing:", result.missing))
        lines.extend(_listing("Unexpected:", result.unexpected))
    return "\n".join(lines)


class ResultRecorder:
    """
    Writes run records for one check invocation.

    Methods:
      record_result(result, arch, kernel_release, version_code) -> Path
      record_failure(failure_type_id, detail) -> Path
    """

    def __init__(self, runs_dir: Path, run_id: str):
        self._runs_dir = Path(runs_dir)
        self._run_id   = run_id

    def _write(self, label: str, moment: datetime, payload: dict) -> Path:
        self._runs_dir.mkdir(parents=True, exist_ok=True)
        filepath = self._runs_dir / f"{self._run_id}_{label}_{_file_stamp(moment)}.json"
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=4)
        return filepath

    def record_result(
        self,
        result:         CheckResult,
        arch:           str,
        kernel_release: str,
        version_code:   int,
    ) -> Path:
        moment = _now()
        record = {
            "result":                "PASS" if result.passed else "FAIL",
            "run_id":                self._run_id,
            "check_version":         CHECK_VERSION,
            "result_format_version": RESULT_FORMAT_VERSION,
            "arch":                  arch,
            "kernel_release":        kernel_release.strip(),
            "version_code":          version_code,
            "actual":                list(result.actual),
            "expected":              list(result.expected),
            "missing":               list(result.missing),
            "unexpected":            list(result.unexpected),
            "timestamp_iso":         moment.isoformat(),
        }
        return self._write("PASS" if result.passed else "FAIL", moment, record)

    def record_failure(self, failure_type_id: str, detail: str) -> Path:
        """
        Persist a FailureRecord for a check that produced no verdict.
        Unknown failure type ids are recorded with the internal error code.
        """
        moment = _now()
        record = FailureRecord(
            failure_type_id=failure_type_id,
            exit_code=FAILURE_TYPES.get(failure_type_id, FAILURE_TYPES["CHECK_INTERNAL_ERROR"]),
            detected_at_iso=moment.isoformat(),
            run_id=self._run_id,
            check_version=CHECK_VERSION,
            detail=detail,
        )
        record_dict = {
            "failure_type_id":       record.failure_type_id,
            "exit_code":             record.exit_code,
            "detected_at_iso":       record.detected_at_iso,
            "run_id":                record.run_id,
            "check_version":         record.check_version,
            "result_format_version": RESULT_FORMAT_VERSION,
            "detail":                record.detail,
        }
        return self._write("ERROR", moment, record_dict)
