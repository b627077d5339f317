#!/usr/bin/env python3
"""
Jewel Mart Storefront - Main Entry Point

Runs the Flask web application.

Usage:
    python main.py
    python main.py --seed-demo --log-level DEBUG
"""

import argparse
import logging

from src.utils.config import Config

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Jewel Mart Storefront")

    # Web app specific arguments
    parser.add_argument("--host", default="0.0.0.0", help="Web app host")
    parser.add_argument("--port", type=int, default=5000, help="Web app port")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")

    # Storefront specific arguments
    parser.add_argument("--seed-demo", action="store_true", help="Create the demo accounts before serving")
    parser.add_argument("--log-level", default=Config.LOG_LEVEL, choices=LOG_LEVELS, help="Root logger level")

    args = parser.parse_args(argv)

    from webapp.app import create_app
    from config.database import init_database, DEMO_USERS

    app = create_app()
    logging.getLogger().setLevel(args.log_level)

    if args.seed_demo:
        init_database(seed_demo=True)
        print(f"👤 Demo accounts: {', '.join(user['email'] for user in DEMO_USERS)}")

    print(f"🚀 Starting Jewel Mart Storefront...")
    print(f"📍 Server running at: http://{args.host}:{args.port}")
    print(f"🔧 Debug mode: {'ON' if args.debug else 'OFF'}")
    print(f"📝 Log level: {args.log_level}")
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
