"""Solana keypair files: JSON arrays of 64 byte values (seed + public key)."""

import json
from pathlib import Path

from nacl.signing import SigningKey
from solders.keypair import Keypair

from .errors import KeypairError

KEYPAIR_LENGTH = 64
_SEED_LENGTH = 32


def _parse_key_bytes(raw: object, path: str) -> bytes:
    if not isinstance(raw, list):
        raise KeypairError(f"Invalid key file {path}: expected a JSON array of bytes")
    if len(raw) != KEYPAIR_LENGTH:
        raise KeypairError(
            f"Invalid key file {path}: expected {KEYPAIR_LENGTH} bytes, got {len(raw)}"
        )
    for value in raw:
        # bool is an int subclass; true/false are not byte values
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
            raise KeypairError(f"Invalid key file {path}: {value!r} is not a byte value")
    return bytes(raw)


def load_keypair(path: str) -> Keypair:
    """Load a keypair from a Solana CLI style JSON key file.

    The public half stored in the file must match the key derived from the
    secret seed.

    Raises:
        KeypairError: If the file is missing, is not a JSON byte array of the
            right length, or holds an inconsistent keypair.
    """
    p = Path(path)
    if not p.exists():
        raise KeypairError(f"Key file not found: {path}")
    try:
        raw = json.loads(p.read_text(encoding="ascii"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise KeypairError(f"Invalid key file {path}: {e}") from e

    secret = _parse_key_bytes(raw, path)
    derived = bytes(SigningKey(secret[:_SEED_LENGTH]).verify_key)
    if derived != secret[_SEED_LENGTH:]:
        raise KeypairError(
            f"Invalid key file {path}: public key does not match secret key"
        )
    return Keypair.from_bytes(secret)


def save_keypair(keypair: Keypair, path: str) -> None:
    """Write *keypair* as a JSON byte array. Creates parent dirs.

    Raises:
        KeypairError: If *path* already exists (will not overwrite).
    """
    p = Path(path)
    if p.exists():
        raise KeypairError(f"Key file already exists: {path}")
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(list(bytes(keypair))), encoding="ascii")
