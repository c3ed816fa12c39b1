#!/usr/bin/env python3
# =============================================================================
# INGRAIND ACCEPTANCE CHECK -- CI GATE
# File:   ingraind_acceptance/verification/ci_gate.py
# =============================================================================
#
# PURPOSE
# -------
# Command-line entry point. Reads the kernel release and the agent log that
# the provisioning step collected from the test machine, runs the check and
# exits with a code from FAILURE_TYPES.
#
#   python -m ingraind_acceptance.verification.ci_gate \
#       --arch x86_64 \
#       --kernel-release-file uname-r.txt \
#       --log-file test-output \
#       [--runs-dir runs]
#
# Exit codes:
#   0 -- PASS: attached set equals expected set.
#   1 -- VERIFICATION_FAILURE
#   2 -- PARSE_ERROR: kernel release unusable. No verdict.
#   3 -- INPUT_UNAVAILABLE: an input file cannot be read or the kernel
#        release file is not UTF-8. No verdict.
#   4 -- CHECK_INTERNAL_ERROR
#
# Stdout carries the summary block only. Errors go to stderr.
# =============================================================================

from __future__ import annotations

import argparse
import sys
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from ingraind_acceptance.check_version import CHECK_VERSION
from ingraind_acceptance.verification.data_models.failure_record import FAILURE_TYPES
from ingraind_acceptance.verification.expected_catalog import build_expected_catalog
from ingraind_acceptance.verification.exceptions import ParseError
from ingraind_acceptance.verification.result_recorder import ResultRecorder, format_summary
from ingraind_acceptance.verification.verifier import Verifier
from ingraind_acceptance.verification.version_parser import parse_kernel_version


def _new_run_id() -> str:
    return "CHECK-" + datetime.now(timezone.utc).strftime("%Y%m%d") + "-" + str(uuid.uuid4())[:8].upper()


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=f"ingraind acceptance check v{CHECK_VERSION}",
        prog="python -m ingraind_acceptance.verification.ci_gate",
    )
    parser.add_argument(
        "--arch",
        required=True,
        help="Architecture identifier of the test machine, e.g. x86_64.",
    )
    release = parser.add_mutually_exclusive_group(required=True)
    release.add_argument(
        "--kernel-release",
        default=None,
        help="Kernel release string as printed by 'uname -r'.",
    )
    release.add_argument(
        "--kernel-release-file",
        default=None,
        help="File containing the output of 'uname -r'.",
    )
    parser.add_argument(
        "--log-file",
        required=True,
        help="Captured agent startup log.",
    )
    parser.add_argument(
        "--runs-dir",
        default=None,
        help="Directory for JSON run records. Nothing is written if omitted.",
    )
    return parser.parse_args(argv)


def _abort(
    recorder:        Optional[ResultRecorder],
    failure_type_id: str,
    detail:          str,
) -> int:
    exit_code = FAILURE_TYPES[failure_type_id]
    print(
        f"CHECK RESULT: ERROR\n"
        f"Failure type: {failure_type_id}\n"
        f"Exit code:    {exit_code}\n"
        f"Detail:       {detail}",
        file=sys.stderr,
    )
    if recorder is not None:
        try:
            recorder.record_failure(failure_type_id, detail)
        except OSError as exc:
            print(f"CHECK_INTERNAL_ERROR: cannot write failure record: {exc}", file=sys.stderr)
    return exit_code


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the check and return the exit code.

    Returns:
        0 on PASS, otherwise the FAILURE_TYPES code of the failure.
    """
    args     = _parse_args(argv)
    run_id   = _new_run_id()
    recorder = ResultRecorder(Path(args.runs_dir), run_id) if args.runs_dir else None

    try:
        if args.kernel_release is not None:
            kernel_release = args.kernel_release
        else:
            kernel_release = Path(args.kernel_release_file).read_text(encoding="utf-8")
        log_text = Path(args.log_file).read_text(encoding="utf-8", errors="replace")
    except (OSError, UnicodeDecodeError) as exc:
        return _abort(recorder, "INPUT_UNAVAILABLE", f"Cannot read input: {exc}")

    try:
        version_code = parse_kernel_version(kernel_release)
        catalog      = build_expected_catalog(args.arch, version_code)
        result       = Verifier().verify(catalog, log_text)
    except ParseError as exc:
        return _abort(recorder, "PARSE_ERROR", exc.message)
    except Exception as exc:  # noqa: BLE001
        return _abort(recorder, "CHECK_INTERNAL_ERROR", f"{type(exc).__name__}: {exc}")

    print(format_summary(result, args.arch, kernel_release, version_code))

    if recorder is not None:
        try:
            path = recorder.record_result(result, args.arch, kernel_release, version_code)
        except OSError as exc:
            return _abort(None, "CHECK_INTERNAL_ERROR", f"Cannot write result record: {exc}")
        print(f"Result record:  {path}")

    if result.passed:
        return 0
    return FAILURE_TYPES["VERIFICATION_FAILURE"]


if __name__ == "__main__":
    sys.exit(main())
