# ingraind_acceptance/verification/log_extractor.py
# LogExtractor -- pulls "attachment succeeded" descriptors out of agent logs.
#
# A line is significant when it contains the marker and at least one
# FIELD_SEPARATOR. Its descriptor is the text after the LAST separator,
# taken verbatim: no trimming, no reformatting. A malformed descriptor is
# therefore kept and surfaces as "unexpected" in the comparison.
#
# Lines end at "\n" only (a preceding "\r" is dropped). Other characters
# that str.splitlines() treats as breaks, such as "\x0b" or "\u2028", stay
# inside the line.
#
# Never raises on content. Empty or unrelated text yields an empty RecordSet.

from typing import List

from ingraind_acceptance.utils.constants import FIELD_SEPARATOR, LOADED_MARKER
from ingraind_acceptance.verification.data_models.attachment_record import (
    RecordSet,
    make_record_set,
)


class LogExtractor:
    """
    Extracts attachment descriptors from free-form log text.

    Method:
      extract(log_text) -> RecordSet
    """

    def __init__(self, marker: str = LOADED_MARKER):
        if not marker:
            raise ValueError("LogExtractor: marker must be a non-empty string")
        self._marker = marker

    def extract(self, log_text: str) -> RecordSet:
        """
        Return the descriptors of all marker lines, sorted, duplicates kept.
        The result does not depend on line order or on surrounding noise.
        """
        descriptors: List[str] = []
        for line in log_text.replace("\r\n", "\n").split("\n"):
            if self._marker not in line:
                continue
            if FIELD_SEPARATOR not in line:
                continue
            descriptors.append(line.rsplit(FIELD_SEPARATOR, 1)[1])
        return make_record_set(descriptors)


def extract_records(log_text: str) -> RecordSet:
    """Extract with the default agent marker."""
    return LogExtractor().extract(log_text)
