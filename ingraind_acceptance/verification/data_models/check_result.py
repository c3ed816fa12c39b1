# ingraind_acceptance/verification/data_models/check_result.py
# CheckResult data class produced by the set comparator.

from dataclasses import dataclass

from ingraind_acceptance.verification.data_models.attachment_record import RecordSet


@dataclass(frozen=True)
class CheckResult:
    """
    Verdict of one acceptance check.

    Fields:
      passed      -- True iff missing and unexpected are both empty.
      actual      -- RecordSet extracted from the agent log.
      expected    -- RecordSet of the version-dependent expected catalog.
      missing     -- expected minus actual (multiset difference), sorted.
      unexpected  -- actual minus expected (multiset difference), sorted.
    """
    passed:     bool
    actual:     RecordSet
    expected:   RecordSet
    missing:    RecordSet
    unexpected: RecordSet
