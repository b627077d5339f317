#!/usr/bin/env python3
"""
Database Initialization Script

Run this script to create the storefront tables and, optionally, demo accounts.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from config.database import init_database, DATABASE_URL, DEMO_USERS

def main():
    """Initialize the database."""
    parser = argparse.ArgumentParser(description="Initialize the storefront database")
    parser.add_argument("--seed-demo", action="store_true", help="Insert demo accounts")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)

    print("🚀 Initializing Storefront Database...")
    print("=" * 50)

    try:
        init_database(seed_demo=args.seed_demo)
        print(f"✅ Database initialized at {DATABASE_URL}")

        print("\n📊 Database Structure:")
        print("   - users: Customer accounts and profile details")

        if args.seed_demo:
            print("\n👥 Demo Accounts:")
            for demo in DEMO_USERS:
                print(f"   - {demo['email']} / {demo['password']}")

    except Exception as e:
        print(f"❌ Error initializing database: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
