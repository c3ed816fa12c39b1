# ingraind_acceptance/verification/convention_selector.py
# ConventionSelector -- version-dependent record name of the clone attachment.
#
# Linux 4.17 switched x86 and arm64 to architecture-prefixed syscall
# wrappers, renaming the clone entry point from sys_clone to
# __<arch>_sys_clone. Every other attachment in the catalog keeps its name.

from ingraind_acceptance.utils.constants import (
    CLONE_NAMING_THRESHOLD,
    CLONE_SYSCALL,
)


def select_clone_record_name(version: int, arch: str) -> str:
    """
    Return the point name the agent logs for the clone attachment.

    Args:
        version:  Kernel version code (see version_parser.parse_kernel_version).
        arch:     Architecture identifier, substituted verbatim.

    Returns:
        "__<arch>_sys_clone" if version >= CLONE_NAMING_THRESHOLD (4.17.0),
        otherwise "sys_clone".
    """
    if version >= CLONE_NAMING_THRESHOLD:
        return "__" + arch + "_" + CLONE_SYSCALL
    return CLONE_SYSCALL
