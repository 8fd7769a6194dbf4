"""Client for the trusted signer ``update`` instruction of the Pyth Lazer program.

Talks to the deployed program through anchorpy, bound to the bundled
interface definition in ``idl/pyth_lazer_solana_contract.json``.

Environment variables (all overridable via constructor args):
    LAZER_RPC_URL       – Solana JSON-RPC endpoint (default https://api.testnet.solana.com)
    LAZER_PROGRAM_ID    – deployed program id
    LAZER_COMMITMENT    – commitment level (default confirmed)
    LAZER_IDL_PATH      – alternative IDL file
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from anchorpy import Context, Idl, Program, Provider, Wallet
from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment
from solana.rpc.types import TxOpts
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from .errors import IdlError, TrustedSignerError
from .types import TrustedSignerUpdate, TrustedSignerUpdateResult

_LOG = logging.getLogger(__name__)

PROGRAM_ID = Pubkey.from_string("pytd2yyk641x7ak7mkaasSJVXh6YYZnC7wTmtgAyxPt")
STORAGE_SEED = b"storage"
DEFAULT_RPC_URL = "https://api.testnet.solana.com"
DEFAULT_COMMITMENT = "confirmed"

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

# ---------------------------------------------------------------------------
# IDL loading
# ---------------------------------------------------------------------------
_IDL_PATH = Path(__file__).parent / "idl" / "pyth_lazer_solana_contract.json"


def load_idl(path: str | Path | None = None) -> Idl:
    idl_path = Path(path or os.environ.get("LAZER_IDL_PATH") or _IDL_PATH)
    try:
        raw = idl_path.read_text()
    except OSError as e:
        raise IdlError(f"Cannot read IDL {idl_path}: {e}") from e
    try:
        return Idl.from_json(raw)
    except Exception as e:
        raise IdlError(f"Unsupported IDL JSON in {idl_path}: {e}") from e


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def parse_trusted_signer(value: str) -> Pubkey:
    """Decode a base58 Solana address into a Pubkey.

    Raises:
        TrustedSignerError: If *value* is not a valid address encoding.
    """
    try:
        return Pubkey.from_string(value)
    except Exception as e:
        raise TrustedSignerError(f"Invalid trusted signer {value!r}: {e}") from e


def validate_expiry(value: int) -> int:
    """Check that *value* fits the program's ``i64`` expiry argument."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TrustedSignerError(f"Expiry time must be an integer, got {value!r}")
    if value < _I64_MIN or value > _I64_MAX:
        raise TrustedSignerError("Expiry time out of i64 range")
    return value


def storage_address(program_id: Pubkey = PROGRAM_ID) -> Pubkey:
    """Return the program's storage PDA, which holds the trusted signer list."""
    address, _bump = Pubkey.find_program_address([STORAGE_SEED], program_id)
    return address


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------
class TrustedSignerClient:
    """Thin wrapper around the program's ``update`` instruction."""

    def __init__(
        self,
        keypair: Keypair,
        rpc_url: str | None = None,
        program_id: str | Pubkey | None = None,
        commitment: str | None = None,
        idl_path: str | Path | None = None,
    ):
        self.rpc_url = rpc_url or os.environ.get("LAZER_RPC_URL", DEFAULT_RPC_URL)
        if program_id is None:
            program_id = os.environ.get("LAZER_PROGRAM_ID") or PROGRAM_ID
        if isinstance(program_id, str):
            program_id = Pubkey.from_string(program_id)
        self.program_id = program_id
        self.commitment = Commitment(
            commitment or os.environ.get("LAZER_COMMITMENT", DEFAULT_COMMITMENT)
        )

        self.connection = AsyncClient(self.rpc_url, commitment=self.commitment)
        self.wallet = Wallet(keypair)
        self.provider = Provider(
            self.connection,
            self.wallet,
            TxOpts(skip_confirmation=False, preflight_commitment=self.commitment),
        )
        self.program = Program(load_idl(idl_path), self.program_id, self.provider)
        self.storage = storage_address(self.program_id)
        _LOG.debug(
            "lazer client rpc=%s program=%s commitment=%s",
            self.rpc_url,
            self.program_id,
            self.commitment,
        )

    @property
    def authority(self) -> Pubkey:
        """Public key of the signing wallet (the program's top authority)."""
        return self.wallet.public_key

    async def update(
        self, trusted_signer: Pubkey, expiry_time_seconds: int
    ) -> TrustedSignerUpdateResult:
        """Add a trusted signer or change its expiry time.

        Waits until the transaction reaches the configured commitment.
        RPC and on-chain errors propagate unchanged.
        """
        request = TrustedSignerUpdate(trusted_signer, validate_expiry(expiry_time_seconds))
        signature = await self.program.rpc["update"](
            request.trusted_signer,
            request.expiry_time_seconds,
            ctx=Context(
                accounts={
                    "top_authority": self.authority,
                    "storage": self.storage,
                }
            ),
        )
        _LOG.info(
            "trusted signer update signer=%s expiry=%s tx=%s",
            request.trusted_signer,
            request.expiry_time_seconds,
            signature,
        )
        return TrustedSignerUpdateResult(
            signature=str(signature),
            trusted_signer=request.trusted_signer,
            expiry_time_seconds=request.expiry_time_seconds,
        )

    async def close(self) -> None:
        await self.connection.close()

    async def __aenter__(self) -> "TrustedSignerClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()
