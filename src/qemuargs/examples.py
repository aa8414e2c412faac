"""
Example object definitions for demos and tests.

Builds the property trees of a few common QEMU objects: a NUMA-bound
RAM backend, a secret and a LUKS encryption record.
"""
from qemuargs.model import EncryptionInfo
from qemuargs.values import Array, Boolean, Number, Object, String


def build_example_memory_backend(size: int = 1073741824, host_nodes=(0, 1, 2, 3)) -> Object:
    """memory-backend-ram props bound to the given host NUMA nodes."""
    return Object({
        "size": Number.from_int(size),
        "host-nodes": Array(tuple(Number.from_int(n) for n in host_nodes)),
        "policy": String("bind"),
        "prealloc": Boolean(True),
    })


def build_example_secret(data: str = "c2VjcmV0,cGFzcw==", fmt: str = "base64") -> Object:
    return Object({
        "data": String(data),
        "format": String(fmt),
    })


def build_example_encryption() -> EncryptionInfo:
    return EncryptionInfo(
        cipher_name="aes",
        cipher_size=256,
        cipher_mode="xts",
        cipher_hash="sha256",
        ivgen_name="plain64",
        ivgen_hash="sha256",
    )
