# ingraind_acceptance/verification/verifier.py
# Verifier -- composes the check pipeline into a single operation.
#
# Pipeline sequence:
#   VP  (parse_kernel_version)     -- ParseError is fatal, no partial verdict
#   EC  (build_expected_catalog)   -- clone entry selected by version
#   LE  (LogExtractor)             -- never raises
#   SC  (RecordSetComparator)      -- never raises
#
# Pure function of (arch, kernel_info, log_text). No I/O. No shared state.

from typing import Optional

from ingraind_acceptance.verification.data_models.check_result import CheckResult
from ingraind_acceptance.verification.expected_catalog import ExpectedCatalog, build_expected_catalog
from ingraind_acceptance.verification.log_extractor import LogExtractor
from ingraind_acceptance.verification.set_comparator import RecordSetComparator
from ingraind_acceptance.verification.version_parser import parse_kernel_version


class Verifier:
    """
    Runs one acceptance check.

    Method:
      check(arch, kernel_info, log_text) -> CheckResult
      verify(catalog, log_text)          -> CheckResult
    """

    def __init__(
        self,
        extractor:  Optional[LogExtractor] = None,
        comparator: Optional[RecordSetComparator] = None,
    ):
        self._extractor  = extractor if extractor is not None else LogExtractor()
        self._comparator = comparator if comparator is not None else RecordSetComparator()

    def check(self, arch: str, kernel_info: str, log_text: str) -> CheckResult:
        """
        Verify that log_text reports exactly the expected attachments for the
        kernel described by kernel_info on architecture arch.

        Raises ParseError if kernel_info has no numeric version triple.
        """
        version = parse_kernel_version(kernel_info)
        return self.verify(build_expected_catalog(arch, version), log_text)

    def verify(self, catalog: ExpectedCatalog, log_text: str) -> CheckResult:
        """Compare the attachments in log_text against an already built catalog."""
        actual = self._extractor.extract(log_text)
        return self._comparator.compare(actual, catalog.record_set())


def check(arch: str, kernel_info: str, log_text: str) -> CheckResult:
    return Verifier().check(arch, kernel_info, log_text)
