"""
Input Records

Plain data classes handed to the backends by the surrounding program.
They carry no formatting logic.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class EncryptionInfo:
    """
    LUKS encryption parameters of a storage volume.

    Every field is optional. The fields form a dependency chain:
    cipher_size, cipher_mode and cipher_hash only matter when
    cipher_name is set, and ivgen_hash only matters when ivgen_name
    is set (which itself requires cipher_name).

    Properties:
        cipher_name: Cipher algorithm (e.g., "aes", "twofish")
        cipher_size: Key size in bits (e.g., 256)
        cipher_mode: Block chaining mode (e.g., "xts", "cbc")
        cipher_hash: Hash used by the cipher (e.g., "sha256")
        ivgen_name: Initialization vector generator (e.g., "plain64")
        ivgen_hash: Hash used by the ivgen (e.g., "sha256")

    Example:
        EncryptionInfo(cipher_name="aes", cipher_size=256, cipher_mode="xts")
    """

    cipher_name: Optional[str] = None
    cipher_size: int = 0
    cipher_mode: Optional[str] = None
    cipher_hash: Optional[str] = None
    ivgen_name: Optional[str] = None
    ivgen_hash: Optional[str] = None
