# ingraind_acceptance/verification/set_comparator.py
# RecordSetComparator -- order-insensitive, count-exact comparison of
# actual vs expected attachment descriptors.
#
# Inputs are sorted before comparison, so arrival order of concurrently loaded
# attachments does not matter. Counts and text must match exactly,
# including the ", " between point and mechanism.

from collections import Counter
from typing import Iterable

from ingraind_acceptance.verification.data_models.attachment_record import make_record_set
from ingraind_acceptance.verification.data_models.check_result import CheckResult


class RecordSetComparator:
    """
    Compares two RecordSets as multisets.

    Method:
      compare(actual, expected) -> CheckResult
    """

    def compare(
        self,
        actual:   Iterable[str],
        expected: Iterable[str],
    ) -> CheckResult:
        """
        Sort both inputs and report the multiset differences.

        missing    = expected - actual
        unexpected = actual - expected
        passed     = both differences are empty
        """
        actual_set   = make_record_set(actual)
        expected_set = make_record_set(expected)

        actual_counts   = Counter(actual_set)
        expected_counts = Counter(expected_set)

        missing    = make_record_set((expected_counts - actual_counts).elements())
        unexpected = make_record_set((actual_counts - expected_counts).elements())

        return CheckResult(
            passed=not missing and not unexpected,
            actual=actual_set,
            expected=expected_set,
            missing=missing,
            unexpected=unexpected,
        )
