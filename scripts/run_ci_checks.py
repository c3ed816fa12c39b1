#!/usr/bin/env python3
# =============================================================================
# INGRAIND ACCEPTANCE CHECK -- CI CHECKS RUNNER
# File:   scripts/run_ci_checks.py
# =============================================================================
#
# Runs the test suite (coverage floor 90%) and then the acceptance gate
# against the artefacts collected from the provisioned test machine.
# Exit code is 0 when both succeed, otherwise the failing stage's number:
# 1 for the test suite, 2 for the gate.
#
# Usage:
#   python scripts/run_ci_checks.py --arch x86_64 \
#       --kernel-release-file uname-r.txt --log-file test-output
#
# All arguments go to python -m ingraind_acceptance.verification.ci_gate.
# =============================================================================

from __future__ import annotations

import subprocess
import sys
import pathlib

_REPO_ROOT = pathlib.Path(__file__).parent.parent
_PYTHON    = sys.executable
_RULE      = "=" * 72


def _stages(gate_args: list[str]) -> list[tuple[int, str, list[str]]]:
    return [
        (1, "tests", [_PYTHON, "-m", "pytest", "--cov-fail-under=90"]),
        (2, "acceptance", [_PYTHON, "-m", "ingraind_acceptance.verification.ci_gate", *gate_args]),
    ]


def main(gate_args: list[str]) -> int:
    for number, name, cmd in _stages(gate_args):
        print(_RULE)
        print(f"[{number}/2] {name}: {' '.join(cmd)}")
        sys.stdout.flush()
        rc = subprocess.run(cmd, cwd=str(_REPO_ROOT)).returncode
        if rc != 0:
            print(_RULE)
            print(f"CI RESULT: FAIL  [stage={name}  exit_code={rc}]")
            return number

    print(_RULE)
    print("CI RESULT: PASS")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
