"""
Tests for LUKS encryption option generation.

The fields form a strict chain: cipher name gates the cipher block,
ivgen name gates the ivgen block.
"""

from qemuargs.backends.luks import build_luks_opts, luks_opts
from qemuargs.buffer import ArgBuffer
from qemuargs.model import EncryptionInfo


class TestLuksChain:
    def test_alias_only(self):
        assert luks_opts(EncryptionInfo(), "sec0") == "key-secret=sec0,"

    def test_cipher_name_and_size(self):
        enc = EncryptionInfo(cipher_name="aes", cipher_size=256)
        assert luks_opts(enc, "sec0") == "key-secret=sec0,cipher-alg=aes-256,"

    def test_full_chain(self):
        enc = EncryptionInfo(
            cipher_name="twofish",
            cipher_size=256,
            cipher_mode="cbc",
            cipher_hash="sha256",
            ivgen_name="plain64",
            ivgen_hash="sha256",
        )
        assert luks_opts(enc, "sec0") == (
            "key-secret=sec0,"
            "cipher-alg=twofish-256,"
            "cipher-mode=cbc,"
            "hash-alg=sha256,"
            "ivgen-alg=plain64,"
            "ivgen-hash-alg=sha256,"
        )

    def test_without_cipher_name_everything_else_ignored(self):
        """Size, mode, hash and ivgen are unreachable without a cipher name."""
        enc = EncryptionInfo(
            cipher_size=256,
            cipher_mode="xts",
            cipher_hash="sha256",
            ivgen_name="plain64",
            ivgen_hash="sha256",
        )
        assert luks_opts(enc, "sec0") == "key-secret=sec0,"

    def test_ivgen_hash_needs_ivgen_name(self):
        enc = EncryptionInfo(cipher_name="aes", cipher_size=128, ivgen_hash="sha256")
        assert luks_opts(enc, "sec0") == "key-secret=sec0,cipher-alg=aes-128,"

    def test_mode_without_hash(self):
        enc = EncryptionInfo(cipher_name="aes", cipher_size=256, cipher_mode="xts")
        assert luks_opts(enc, "s") == "key-secret=s,cipher-alg=aes-256,cipher-mode=xts,"

    def test_hash_without_mode(self):
        enc = EncryptionInfo(cipher_name="aes", cipher_size=256, cipher_hash="sha1")
        assert luks_opts(enc, "s") == "key-secret=s,cipher-alg=aes-256,hash-alg=sha1,"

    def test_ivgen_without_hash(self):
        enc = EncryptionInfo(cipher_name="aes", cipher_size=256, ivgen_name="plain")
        assert luks_opts(enc, "s") == "key-secret=s,cipher-alg=aes-256,ivgen-alg=plain,"

    def test_values_are_comma_escaped(self):
        enc = EncryptionInfo(cipher_name="a,b", cipher_size=1, cipher_mode="c,d")
        assert luks_opts(enc, "s") == "key-secret=s,cipher-alg=a,,b-1,cipher-mode=c,,d,"


class TestBuildLuksOpts:
    def test_appends_to_existing_content(self):
        buf = ArgBuffer()
        buf.add("driver=luks,")
        build_luks_opts(buf, EncryptionInfo(cipher_name="aes", cipher_size=256), "sec0")
        buf.add("file=drive0")
        assert buf.finish() == "driver=luks,key-secret=sec0,cipher-alg=aes-256,file=drive0"


class TestEmptyStrings:
    """Only None counts as absent; empty strings are still emitted."""

    def test_empty_cipher_name_is_present(self):
        enc = EncryptionInfo(cipher_name="", cipher_size=256)
        assert luks_opts(enc, "s") == "key-secret=s,cipher-alg=-256,"

    def test_empty_mode_and_ivgen(self):
        enc = EncryptionInfo(cipher_name="aes", cipher_size=256, cipher_mode="", ivgen_name="")
        assert luks_opts(enc, "s") == "key-secret=s,cipher-alg=aes-256,cipher-mode=,ivgen-alg=,"
