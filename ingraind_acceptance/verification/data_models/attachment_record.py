# ingraind_acceptance/verification/data_models/attachment_record.py
# AttachmentRecord data class and the RecordSet representation.

from dataclasses import dataclass
from typing import Iterable, Tuple

from ingraind_acceptance.utils.constants import DESCRIPTOR_SEPARATOR


# Sorted tuple of "point, mechanism" strings. Duplicates are preserved and
# compared count-for-count.
RecordSet = Tuple[str, ...]


@dataclass(frozen=True)
class AttachmentRecord:
    """
    One attached instrumentation point.

    Fields:
      point      -- kernel function or network path, e.g. "tcp_sendmsg".
      mechanism  -- attachment method, e.g. "Kprobe", "Kretprobe", "XDP".
    """
    point:     str
    mechanism: str

    @property
    def descriptor(self) -> str:
        """String form as the agent logs it: "point, mechanism"."""
        return self.point + DESCRIPTOR_SEPARATOR + self.mechanism


def make_record_set(entries: Iterable[str]) -> RecordSet:
    """Return entries as a RecordSet: sorted by code point, duplicates kept."""
    return tuple(sorted(entries))
