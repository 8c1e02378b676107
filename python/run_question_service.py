#!/usr/bin/env python3
"""
Launch the interview question service.
"""

from __future__ import annotations

import argparse
import os

import uvicorn


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the interview question service.",
    )
    parser.add_argument("--host", default="0.0.0.0", help="Bind host.")
    parser.add_argument("--port", type=int, default=8770, help="Bind port.")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed question selection for reproducible output.",
    )
    parser.add_argument("--log-level", default="info", help="Service and uvicorn log level.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    os.environ["QUESTION_SERVICE_HOST"] = args.host
    os.environ["QUESTION_SERVICE_PORT"] = str(args.port)
    os.environ["LOG_LEVEL"] = args.log_level.upper()
    if args.seed is not None:
        os.environ["QUESTION_SEED"] = str(args.seed)

    from question_service import app  # Import after env config

    print(
        f"Starting interview question service bind=http://{args.host}:{args.port} "
        f"seed={args.seed if args.seed is not None else 'random'}"
    )
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


if __name__ == "__main__":
    main()
