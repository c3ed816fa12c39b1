# ingraind_acceptance/verification/__init__.py
# Acceptance check for the ingraind kernel-instrumentation agent.
#
# Verifies that the agent's startup log reports exactly the expected set of
# attached eBPF programs for the kernel it runs on.
#
# LIBRARY ENTRY POINT:
#   from ingraind_acceptance.verification import check
#   result = check(arch, kernel_release, log_text)
#
# CI GATE:
#   python -m ingraind_acceptance.verification.ci_gate --arch ARCH \
#       --kernel-release-file PATH --log-file PATH

from ingraind_acceptance.check_version import (
    CHECK_VERSION,
    RESULT_FORMAT_VERSION,
)
from .exceptions import CheckError, ParseError
from .data_models.attachment_record import AttachmentRecord, RecordSet, make_record_set
from .data_models.check_result import CheckResult
from .version_parser import compose_version_code, parse_kernel_version
from .convention_selector import select_clone_record_name
from .expected_catalog import ExpectedCatalog, build_expected_catalog
from .log_extractor import LogExtractor, extract_records
from .set_comparator import RecordSetComparator
from .verifier import Verifier, check
from .result_recorder import ResultRecorder, format_summary
from .ci_gate import main as run_ci_gate

__all__ = [
    # Version constants
    "CHECK_VERSION",
    "RESULT_FORMAT_VERSION",
    # Errors
    "CheckError",
    "ParseError",
    # Data models
    "AttachmentRecord",
    "RecordSet",
    "make_record_set",
    "CheckResult",
    "ExpectedCatalog",
    # Pipeline components
    "compose_version_code",
    "parse_kernel_version",
    "select_clone_record_name",
    "build_expected_catalog",
    "LogExtractor",
    "extract_records",
    "RecordSetComparator",
    "Verifier",
    "check",
    # Reporting
    "ResultRecorder",
    "format_summary",
    # Entry points
    "run_ci_gate",
]
