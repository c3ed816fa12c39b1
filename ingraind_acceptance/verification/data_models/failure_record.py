# ingraind_acceptance/verification/data_models/failure_record.py
# FailureRecord data class and failure type registry.

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# FAILURE TYPE REGISTRY
# ---------------------------------------------------------------------------
# Exit code mapping:
#   Code 0 -- PASS (no failure type)
#   Code 1 -- VERIFICATION_FAILURE: attached set differs from expected set
#   Code 2 -- PARSE_ERROR: kernel release is not a numeric triple
#   Code 3 -- INPUT_UNAVAILABLE: kernel release or log file cannot be read
#   Code 4 -- Internal check errors

FAILURE_TYPES = {
    "VERIFICATION_FAILURE": 1,
    "PARSE_ERROR":          2,
    "INPUT_UNAVAILABLE":    3,
    "CHECK_INTERNAL_ERROR": 4,
}


@dataclass
class FailureRecord:
    """
    Record written to the runs directory when a check is aborted.

    Verification mismatches are written as result records instead (see
    ResultRecorder.record_result); a FailureRecord means no verdict exists.

    Fields:
      failure_type_id  -- Key from FAILURE_TYPES.
      exit_code        -- Integer exit code (2-4).
      detected_at_iso  -- UTC ISO-8601 timestamp of detection.
      run_id           -- Run identifier for this check invocation.
      check_version    -- CHECK_VERSION at time of failure.
      detail           -- Human-readable failure description.
    """
    failure_type_id: str
    exit_code:       int
    detected_at_iso: str
    run_id:          str
    check_version:   str
    detail:          str
