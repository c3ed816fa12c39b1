# ingraind_acceptance/utils/constants.py
# Version: 1.0.0
#
# Fixed configuration of the ingraind acceptance check. Changing any value
# below changes what the agent is required to emit and therefore requires a
# CHECK_VERSION increment (ingraind_acceptance/check_version.py).
#
# Standard import pattern:
#   from ingraind_acceptance.utils.constants import (
#       LOADED_MARKER,
#       FIELD_SEPARATOR,
#       CLONE_NAMING_THRESHOLD,
#       CLONE_SYSCALL,
#       CLONE_MECHANISM,
#       VERSION_INVARIANT_RECORDS,
#   )

from typing import Tuple


# ---------------------------------------------------------------------------
# LOG EXTRACTION
# ---------------------------------------------------------------------------

# Emitted by the agent's ebpf grain loader once per attached program, e.g.
#   [2019-01-01T00:00:00Z INFO  ingraind::grains::ebpf] Loaded: tcp_sendmsg, Kprobe
LOADED_MARKER:   str = "ingraind::grains::ebpf] Loaded"

# The attachment descriptor is the last field of a marker line split on this.
FIELD_SEPARATOR: str = ": "

# Separator between point and mechanism inside a descriptor.
DESCRIPTOR_SEPARATOR: str = ", "


# ---------------------------------------------------------------------------
# KERNEL VERSION CODE
# ---------------------------------------------------------------------------

VERSION_MAJOR_WEIGHT: int = 10000
VERSION_MINOR_WEIGHT: int = 100


# ---------------------------------------------------------------------------
# CLONE NAMING CONVENTION
# ---------------------------------------------------------------------------
# Kernel 4.17.0 introduced architecture-prefixed syscall wrappers, so the
# clone hook attaches to __<arch>_sys_clone from that release onwards.

CLONE_NAMING_THRESHOLD: int = 41700
CLONE_SYSCALL:          str = "sys_clone"
CLONE_MECHANISM:        str = "Kprobe"


# ---------------------------------------------------------------------------
# EXPECTED CATALOG (version-invariant part)
# ---------------------------------------------------------------------------
# (instrumentation point, attachment mechanism). The clone entry is added
# per check by expected_catalog.build_expected_catalog().

VERSION_INVARIANT_RECORDS: Tuple[Tuple[str, str], ...] = (
    ("dns_queries",    "XDP"),
    ("tcp_recvmsg",    "Kprobe"),
    ("tcp_recvmsg",    "Kretprobe"),
    ("tcp_sendmsg",    "Kprobe"),
    ("tcp_sendmsg",    "Kretprobe"),
    ("tcp_v4_connect", "Kprobe"),
    ("tcp_v4_connect", "Kretprobe"),
    ("udp_rcv",        "Kprobe"),
    ("udp_sendmsg",    "Kprobe"),
    ("vfs_read",       "Kprobe"),
    ("vfs_read",       "Kretprobe"),
    ("vfs_write",      "Kprobe"),
    ("vfs_write",      "Kretprobe"),
)
