import dataclasses

import pytest

from ingraind_acceptance.verification.convention_selector import select_clone_record_name
from ingraind_acceptance.verification.data_models.attachment_record import AttachmentRecord
from ingraind_acceptance.verification.expected_catalog import build_expected_catalog


# =============================================================================
# SECTION 1 -- Clone naming convention
# =============================================================================

class TestSelectCloneRecordName:
    """Clone record name either side of the 4.17 threshold."""

    def test_below_threshold(self):
        assert select_clone_record_name(41699, "x86_64") == "sys_clone"

    def test_at_threshold(self):
        assert select_clone_record_name(41700, "x86_64") == "__x86_64_sys_clone"

    def test_above_threshold(self):
        assert select_clone_record_name(50400, "amd64") == "__amd64_sys_clone"

    def test_old_kernel_ignores_arch(self):
        assert select_clone_record_name(40900, "arm64") == "sys_clone"

    def test_arch_substituted_verbatim(self):
        assert select_clone_record_name(41700, "Arm64-v8") == "__Arm64-v8_sys_clone"


# =============================================================================
# SECTION 2 -- AttachmentRecord
# =============================================================================

class TestAttachmentRecord:
    """AttachmentRecord descriptor and value semantics."""

    def test_descriptor_format(self):
        assert AttachmentRecord("tcp_sendmsg", "Kprobe").descriptor == "tcp_sendmsg, Kprobe"

    def test_structural_equality(self):
        assert AttachmentRecord("udp_rcv", "Kprobe") == AttachmentRecord("udp_rcv", "Kprobe")
        assert AttachmentRecord("udp_rcv", "Kprobe") != AttachmentRecord("udp_rcv", "Kretprobe")

    def test_frozen(self):
        record = AttachmentRecord("udp_rcv", "Kprobe")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.point = "vfs_read"  # type: ignore[misc]


# =============================================================================
# SECTION 3 -- Expected catalog
# =============================================================================

class TestBuildExpectedCatalog:
    """Fourteen-entry catalog for an (arch, version) pair."""

    def test_fourteen_entries(self):
        catalog = build_expected_catalog("x86_64", 50400)
        assert len(catalog.records) == 14
        assert len(catalog.record_set()) == 14

    def test_modern_kernel_clone_entry(self, invariant_descriptors):
        catalog = build_expected_catalog("amd64", 50400)
        assert catalog.record_set() == tuple(sorted(invariant_descriptors + ["__amd64_sys_clone, Kprobe"]))

    def test_old_kernel_clone_entry(self, invariant_descriptors):
        catalog = build_expected_catalog("x86_64", 41500)
        assert "sys_clone, Kprobe" in catalog.record_set()
        assert "__x86_64_sys_clone, Kprobe" not in catalog.record_set()

    def test_record_set_is_sorted(self):
        record_set = build_expected_catalog("x86_64", 50400).record_set()
        assert list(record_set) == sorted(record_set)

    def test_underscore_clone_sorts_first(self):
        # "_" (0x5F) sorts before lowercase letters.
        assert build_expected_catalog("x86_64", 50400).record_set()[0] == "__x86_64_sys_clone, Kprobe"

    def test_only_clone_entry_depends_on_version(self):
        old = set(build_expected_catalog("x86_64", 41699).record_set())
        new = set(build_expected_catalog("x86_64", 41700).record_set())
        assert old - new == {"sys_clone, Kprobe"}
        assert new - old == {"__x86_64_sys_clone, Kprobe"}

    def test_catalog_carries_inputs(self):
        catalog = build_expected_catalog("arm64", 41900)
        assert catalog.arch == "arm64"
        assert catalog.version_code == 41900

    def test_catalog_is_immutable(self):
        catalog = build_expected_catalog("arm64", 41900)
        with pytest.raises(dataclasses.FrozenInstanceError):
            catalog.arch = "x86_64"  # type: ignore[misc]
