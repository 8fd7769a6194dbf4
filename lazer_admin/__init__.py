"""Administrative client for the Pyth Lazer Solana program."""

from .keypair import load_keypair, save_keypair
from .trusted_signer import (
    PROGRAM_ID,
    TrustedSignerClient,
    load_idl,
    parse_trusted_signer,
    storage_address,
    validate_expiry,
)
from .types import TrustedSignerUpdate, TrustedSignerUpdateResult
from .errors import (
    LazerAdminError,
    KeypairError,
    TrustedSignerError,
    IdlError,
)

__all__ = [
    "PROGRAM_ID",
    "TrustedSignerClient",
    "TrustedSignerUpdate",
    "TrustedSignerUpdateResult",
    "load_idl",
    "load_keypair",
    "save_keypair",
    "parse_trusted_signer",
    "storage_address",
    "validate_expiry",
    "LazerAdminError",
    "KeypairError",
    "TrustedSignerError",
    "IdlError",
]
