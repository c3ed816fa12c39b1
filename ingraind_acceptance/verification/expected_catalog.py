# ingraind_acceptance/verification/expected_catalog.py
# ExpectedCatalog -- the set of attachments a healthy agent reports at startup.
#
# Thirteen version-invariant entries from VERSION_INVARIANT_RECORDS plus one
# clone entry whose point name depends on kernel version and architecture.
# Built once per check. Immutable.

from dataclasses import dataclass
from typing import Tuple

from ingraind_acceptance.utils.constants import (
    CLONE_MECHANISM,
    VERSION_INVARIANT_RECORDS,
)
from ingraind_acceptance.verification.convention_selector import select_clone_record_name
from ingraind_acceptance.verification.data_models.attachment_record import (
    AttachmentRecord,
    RecordSet,
    make_record_set,
)


@dataclass(frozen=True)
class ExpectedCatalog:
    """
    Expected attachments for one (arch, kernel version) pair.

    Fields:
      arch          -- architecture identifier used for the clone entry.
      version_code  -- kernel version code the catalog was built for.
      records       -- tuple of AttachmentRecord, catalog order.
    """
    arch:         str
    version_code: int
    records:      Tuple[AttachmentRecord, ...]

    def record_set(self) -> RecordSet:
        return make_record_set(r.descriptor for r in self.records)


def build_expected_catalog(arch: str, version: int) -> ExpectedCatalog:
    clone = AttachmentRecord(
        point=select_clone_record_name(version, arch),
        mechanism=CLONE_MECHANISM,
    )
    invariant = tuple(
        AttachmentRecord(point=point, mechanism=mechanism)
        for point, mechanism in VERSION_INVARIANT_RECORDS
    )
    return ExpectedCatalog(
        arch=arch,
        version_code=version,
        records=(clone,) + invariant,
    )
