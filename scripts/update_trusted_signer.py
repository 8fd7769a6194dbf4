#!/usr/bin/env python3
"""Add a trusted signer to the Pyth Lazer program or change its expiry time.

Usage:
    python scripts/update_trusted_signer.py --url https://api.testnet.solana.com \
        --keypair-path ~/.config/solana/id.json \
        --trusted-signer HaXscpSUcbCLSnPQB8Z7H6idyANxp1mZAXTbHeYpfrJJ \
        --expiry-time-seconds 2057930841

Set LAZER_LOG_LEVEL=INFO to see the transaction signature.
"""

from lazer_admin.cli import main

if __name__ == "__main__":
    main()
