"""Key derivation from a VDF output, the boundary to the external cipher."""

import hashlib

from .protocol_constants import KEY_DERIVATION_TAG

KEY_SIZE = 32


def derive_key(y_bytes: bytes) -> bytes:
    """
    Derive the 32-byte cipher seed from the serialized VDF output.

    For the RSA VDF, y_bytes is y as big-endian bytes of the modulus width
    (SolvedVDF.y_bytes); for class group VDFs it is the serialized form.

    Args:
        y_bytes (bytes): The VDF output

    Returns:
        bytes: SHA-256(tag || y_bytes)
    """
    return hashlib.sha256(KEY_DERIVATION_TAG + y_bytes).digest()
