"""Error categories for local input failures.

RPC and on-chain failures are not wrapped; they surface as the exceptions
raised by ``solana`` and ``anchorpy``.
"""


class LazerAdminError(Exception):
    """Base exception for all lazer-admin errors."""


class KeypairError(LazerAdminError):
    """Key file missing, unreadable or not a valid 64-byte keypair."""


class TrustedSignerError(LazerAdminError):
    """Invalid trusted signer address or expiry time."""


class IdlError(LazerAdminError):
    """Program interface definition missing or malformed."""
