#!/usr/bin/env python3
"""
Run the Kobler adapter against JSON files.

Usage:
    python run_adapter.py build bids.json --context context.json
    python run_adapter.py build bids.json --config kobler.yaml
    python run_adapter.py interpret response.json
"""

import argparse
import json
import sys

from src.kobler.adapter import spec
from src.kobler.config import load_adapter_config
from src.kobler.models import AuctionContext, BidRequest, ServerResponse


def _load_json(path: str):
    with open(path) as f:
        return json.load(f)


def build(args: argparse.Namespace) -> int:
    """Validate and build a request from a list of bid request dicts."""
    bids = [BidRequest.from_dict(b) for b in _load_json(args.bids)]
    context = AuctionContext.from_dict(_load_json(args.context)) if args.context else AuctionContext()
    config = load_adapter_config(args.config)

    request = spec.build(bids, context, config)
    if request is None:
        print("No valid bid requests", file=sys.stderr)
        return 1

    print(json.dumps(request.to_dict(), indent=2))
    return 0


def interpret(args: argparse.Namespace) -> int:
    """Interpret an OpenRTB response body."""
    response = ServerResponse(body=_load_json(args.response))
    bids = spec.interpret_response(response)
    print(json.dumps([bid.to_dict() for bid in bids], indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the Kobler bid adapter")
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser("build", help="Build a bid request")
    build_parser.add_argument("bids", help="JSON file with a list of bid requests")
    build_parser.add_argument("--context", help="JSON file with the auction context")
    build_parser.add_argument("--config", help="YAML adapter configuration")
    build_parser.set_defaults(func=build)

    interpret_parser = subparsers.add_parser("interpret", help="Interpret a bid response")
    interpret_parser.add_argument("response", help="JSON file with the response body")
    interpret_parser.set_defaults(func=interpret)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
