"""
LUKS encryption options for QEMU block layer arguments.

Produces the fragment placed after id=<alias> of a luks format node:

    key-secret=sec0,
    key-secret=sec0,cipher-alg=twofish-256,cipher-mode=cbc,hash-alg=sha256,ivgen-alg=plain64,ivgen-hash-alg=sha256,

The fragment always ends with a comma so more properties can follow.
"""

from qemuargs.backends.commandline import buffer_escape_comma
from qemuargs.buffer import ArgBuffer
from qemuargs.model import EncryptionInfo


def build_luks_opts(buf: ArgBuffer, enc: EncryptionInfo, alias: str) -> None:
    """
    Append key-secret and cipher options for a LUKS volume.

    Fields are gated in a chain: without a cipher name nothing past
    key-secret is written, and without an ivgen name the ivgen hash is
    ignored.

    Args:
        buf: Buffer to append to
        enc: Encryption parameters
        alias: Id of the secret object holding the passphrase
    """
    buf.add_format("key-secret={},", alias)

    if enc.cipher_name is None:
        return

    buf.add("cipher-alg=")
    buffer_escape_comma(buf, enc.cipher_name)
    buf.add_format("-{},", enc.cipher_size)
    if enc.cipher_mode is not None:
        buf.add("cipher-mode=")
        buffer_escape_comma(buf, enc.cipher_mode)
        buf.add(",")
    if enc.cipher_hash is not None:
        buf.add("hash-alg=")
        buffer_escape_comma(buf, enc.cipher_hash)
        buf.add(",")

    if enc.ivgen_name is None:
        return

    buf.add("ivgen-alg=")
    buffer_escape_comma(buf, enc.ivgen_name)
    buf.add(",")

    if enc.ivgen_hash is not None:
        buf.add("ivgen-hash-alg=")
        buffer_escape_comma(buf, enc.ivgen_hash)
        buf.add(",")


def luks_opts(enc: EncryptionInfo, alias: str) -> str:
    """Return the LUKS options fragment as a finished string."""
    with ArgBuffer() as buf:
        build_luks_opts(buf, enc, alias)
        return buf.finish()


__all__ = ["build_luks_opts", "luks_opts"]
