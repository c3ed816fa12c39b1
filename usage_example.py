# usage_example.py
# Minimal usage example for ingraind_acceptance.verification.check().
# This file is not part of the ingraind_acceptance package. For reference only.

from ingraind_acceptance.verification import check, format_summary, parse_kernel_version

# Inputs, as collected from the test machine by the provisioning step
arch: str = "x86_64"
kernel_release: str = "5.4.0-42-generic\n"          # uname -r
log_text: str = "\n".join(
    "[2019-07-02T10:15:04Z INFO  ingraind::grains::ebpf] Loaded: " + descriptor
    for descriptor in [
        "__x86_64_sys_clone, Kprobe",
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
        # vfs_write, Kretprobe deliberately absent
    ]
)

# Compute
result = check(arch, kernel_release, log_text)

# Inspect
print(format_summary(result, arch, kernel_release, parse_kernel_version(kernel_release)))

# Expected verdict:
# result.passed     == False
# result.missing    == ("vfs_write, Kretprobe",)
# result.unexpected == ()

# ParseError examples:
# check("x86_64", "", log_text)              # no numeric field
# check("x86_64", "5.4-generic", log_text)   # fewer than 3 dot-separated fields
