#!/usr/bin/env python3
"""
Script to initialize the lead store (tables / indexes).

Usage:
    python scripts/init_db.py
    python scripts/init_db.py --backend sql
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from salesbot.core.errors import StoreError
from salesbot.core.leads import get_lead_store


async def main(backend: str | None) -> None:
    """Initialize the configured lead store."""
    store = get_lead_store(backend)

    print(f"Initializing lead store ({store.kind})...")
    print("-" * 50)

    try:
        await store.init()
    except StoreError as e:
        print(f"❌ {e}")
        sys.exit(1)
    finally:
        await store.close()

    print(f"✅ Lead store '{store.kind}' initialized successfully!")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Initialize lead storage")
    parser.add_argument(
        "--backend",
        choices=["auto", "mongo", "sql", "memory"],
        default=None,
        help="Override LEAD_STORE_BACKEND",
    )
    args = parser.parse_args()

    asyncio.run(main(args.backend))
