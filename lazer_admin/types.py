from dataclasses import dataclass

from solders.pubkey import Pubkey


@dataclass(frozen=True)
class TrustedSignerUpdate:
    trusted_signer: Pubkey
    expiry_time_seconds: int


@dataclass
class TrustedSignerUpdateResult:
    signature: str
    trusted_signer: Pubkey
    expiry_time_seconds: int
