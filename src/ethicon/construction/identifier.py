"""Identifier sources: random pseudo-addresses and wallet addresses.

Neither function has any security value.  Random addresses only need
to look plausible and vary between calls.
"""

from __future__ import annotations

import hashlib
import re
import secrets

_DIGEST_LENGTH = 64
_ADDRESS_LENGTH = 40
_HEX_RE = re.compile(r"^[0-9a-f]+$")


def random_address(length: int = 32, *, token: str | None = None) -> str:
    """Generate a pseudo-random hex identifier.

    A random token is hashed with SHA3-256 and the last *length* hex
    characters of the digest are returned.

    Args:
        length: Number of hex characters to return, 1 to 64.
        token: Token to hash instead of a fresh random one.  Passing
            the same token always gives the same identifier.

    Returns:
        Lowercase hex string of *length* characters.

    Raises:
        ValueError: If *length* is outside ``[1, 64]``.
    """
    if not 1 <= length <= _DIGEST_LENGTH:
        raise ValueError(
            f"length must be between 1 and {_DIGEST_LENGTH}, got {length}"
        )
    if token is None:
        token = secrets.token_hex(8)
    digest = hashlib.sha3_256(token.encode()).hexdigest()
    return digest[-length:]


def normalise_address(address: str) -> str:
    """Turn a wallet address into a bare lowercase identifier.

    An optional ``0x`` prefix is removed and mixed-case (checksummed)
    addresses are lowercased.

    Raises:
        ValueError: If the result is not exactly 40 hex characters.
    """
    addr = address.strip()
    if addr[:2] in ("0x", "0X"):
        addr = addr[2:]
    addr = addr.lower()
    if len(addr) != _ADDRESS_LENGTH or not _HEX_RE.match(addr):
        raise ValueError(
            f"wallet address must be {_ADDRESS_LENGTH} hex characters, "
            f"got {address!r}"
        )
    return addr
