"""Reversible password encoding.

This is Base64 over UTF-8 bytes: an obfuscation step, not a hash. Lone
surrogates (valid in JSON strings) are carried through unchanged. It offers no
confidentiality and should be replaced by a one-way credential hash before
real production use.
"""

import base64


def encode_password(password: str) -> str:
    """Encode a plain-text password for storage.

    Args:
        password: Plain-text password (may be empty)

    Returns:
        Base64 text of the password's UTF-8 bytes
    """
    return base64.b64encode(password.encode("utf-8", errors="surrogatepass")).decode("ascii")


def decode_password(encoded_password: str) -> str:
    """Reverse ``encode_password``.

    Args:
        encoded_password: Value produced by ``encode_password``

    Returns:
        The original plain-text password

    Raises:
        binascii.Error: If the value is not valid Base64
    """
    raw = base64.b64decode(encoded_password.encode("ascii"), validate=True)
    return raw.decode("utf-8", errors="surrogatepass")
