"""Command-line runner for a single Brave web search."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from bravenode.config.loader import load_config
from bravenode.node.credentials import ConfigCredentialProvider
from bravenode.node.execution import BraveSearchNode, CollectingSink, ListItemSource
from bravenode.node.models import SAFESEARCH_LEVELS


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="bravenode", description=BraveSearchNode.description)
    parser.add_argument("query", nargs="+", help="Search query (one item per query)")
    parser.add_argument("--country", help="Country code for search results, e.g. US")
    parser.add_argument("--count", type=int, help="Number of results to return (1-20)")
    parser.add_argument("--offset", type=int, help="Offset for pagination")
    parser.add_argument("--safesearch", choices=SAFESEARCH_LEVELS, help="Safe search setting")
    parser.add_argument("--config", type=Path, help="Path to config.json")
    parser.add_argument(
        "--continue-on-fail",
        action="store_true",
        default=None,
        help="Emit error records instead of aborting on the first failure",
    )
    return parser.parse_args(argv)


def build_items(args: argparse.Namespace) -> list[dict[str, Any]]:
    additional_fields = {
        key: getattr(args, key)
        for key in ("country", "count", "offset", "safesearch")
        if getattr(args, key) is not None
    }
    return [
        {"operation": "webSearch", "query": query, "additionalFields": dict(additional_fields)}
        for query in args.query
    ]


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = load_config(args.config)
    continue_on_fail = (
        config.node.continue_on_fail if args.continue_on_fail is None else args.continue_on_fail
    )

    node = BraveSearchNode(
        ConfigCredentialProvider(config.brave),
        continue_on_fail=continue_on_fail,
        base_url=config.brave.base_url,
    )
    sink = CollectingSink()
    asyncio.run(node.run(ListItemSource(build_items(args)), sink))

    if sink.error is not None:
        print(json.dumps(sink.error.to_dict(), indent=2, ensure_ascii=False), file=sys.stderr)
        return 1

    items = sink.items or []
    print(json.dumps([item.to_dict() for item in items], indent=2, ensure_ascii=False))
    return 0
