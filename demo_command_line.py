#!/usr/bin/env python3
"""
Demo: Build QEMU command-line arguments from example objects.

Shows -object arguments for a RAM backend and a secret, plus the LUKS
options of an encrypted disk.
"""

from qemuargs import build_object_arg, luks_opts
from qemuargs.examples import (
    build_example_encryption,
    build_example_memory_backend,
    build_example_secret,
)


def main():
    print("=" * 80)
    print("QEMU COMMAND LINE DEMO")
    print("=" * 80)

    mem = build_object_arg("memory-backend-ram", "mem0",
                           build_example_memory_backend(host_nodes=(0, 1, 2, 5, 7, 8, 9)))
    print(f"\n-object {mem}")

    secret = build_object_arg("secret", "sec0", build_example_secret())
    print(f"-object {secret}")

    luks = luks_opts(build_example_encryption(), "sec0")
    print(f"-blockdev driver=luks,{luks}file=drive0-storage")

    print("\n" + "=" * 80)


if __name__ == "__main__":
    main()
