"""Add a trusted signer or change its expiry time.

Example:
    lazer-update-signer --url 'https://api.testnet.solana.com' \\
        --keypair-path .../key.json \\
        --trusted-signer HaXscpSUcbCLSnPQB8Z7H6idyANxp1mZAXTbHeYpfrJJ \\
        --expiry-time-seconds 2057930841
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os

from .keypair import load_keypair
from .trusted_signer import TrustedSignerClient, parse_trusted_signer, validate_expiry


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazer-update-signer",
        description="Add a trusted signer or change its expiry time.",
    )
    parser.add_argument("--url", required=True, help="Solana RPC endpoint")
    parser.add_argument(
        "--keypair-path", required=True, help="JSON key file of the top authority"
    )
    parser.add_argument(
        "--trusted-signer", required=True, help="base58 public key of the signer"
    )
    parser.add_argument(
        "--expiry-time-seconds",
        required=True,
        type=int,
        help="expiry as seconds since the epoch",
    )
    return parser


async def run(args: argparse.Namespace) -> None:
    # All local inputs are checked before a connection is opened.
    keypair = load_keypair(args.keypair_path)
    trusted_signer = parse_trusted_signer(args.trusted_signer)
    expiry = validate_expiry(args.expiry_time_seconds)

    async with TrustedSignerClient(keypair, rpc_url=args.url) as client:
        await client.update(trusted_signer, expiry)
    print("signer updated")


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=os.environ.get("LAZER_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    asyncio.run(run(args))


if __name__ == "__main__":
    main()
