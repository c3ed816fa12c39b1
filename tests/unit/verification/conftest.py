import pytest


_PREFIX = "[2019-07-02T10:15:04Z INFO  ingraind::grains::ebpf] Loaded: "

_INVARIANT = [
    "dns_queries, XDP",
    "tcp_recvmsg, Kprobe",
    "tcp_recvmsg, Kretprobe",
    "tcp_sendmsg, Kprobe",
    "tcp_sendmsg, Kretprobe",
    "tcp_v4_connect, Kprobe",
    "tcp_v4_connect, Kretprobe",
    "udp_rcv, Kprobe",
    "udp_sendmsg, Kprobe",
    "vfs_read, Kprobe",
    "vfs_read, Kretprobe",
    "vfs_write, Kprobe",
    "vfs_write, Kretprobe",
]


@pytest.fixture
def loaded_line():
    """Return a function rendering a descriptor as an agent "Loaded" line."""
    def _render(descriptor: str) -> str:
        return _PREFIX + descriptor
    return _render


@pytest.fixture
def invariant_descriptors() -> list:
    """The thirteen version-invariant descriptors, sorted."""
    return list(_INVARIANT)


@pytest.fixture
def agent_log(loaded_line):
    """
    Return a function building a realistic agent log around the given
    descriptors: startup banner, interleaved noise, shutdown line.
    """
    def _build(descriptors) -> str:
        lines = [
            "[2019-07-02T10:15:03Z INFO  ingraind] Starting ingraind",
            "[2019-07-02T10:15:03Z DEBUG ingraind::backends::console] Console backend ready",
        ]
        for i, descriptor in enumerate(descriptors):
            lines.append(loaded_line(descriptor))
            if i % 4 == 0:
                lines.append("[2019-07-02T10:15:04Z DEBUG ingraind::grains::ebpf] Binding perf map: events")
        lines.append("[2019-07-02T10:15:05Z INFO  ingraind] Initialisation complete")
        return "\n".join(lines) + "\n"
    return _build
