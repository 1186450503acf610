#!/usr/bin/env python3
"""
Run a collection file against an API and print a summary.

Usage:
  python scripts/run_collection.py <collection.json|yaml> [--base-url URL] [--var KEY=VALUE ...]
                                   [--stop-on-failure] [--timeout-ms MS] [--json]

Examples:
  python scripts/run_collection.py collections/users.yaml --base-url http://localhost:8000
  python scripts/run_collection.py export.json --var API_KEY=abc --stop-on-failure
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from application.engine import ApiTestEngine
from application.ports.requests_client import RequestsSessionHttpClient
from application.ports.run_listener import RunListener
from domain.execution import ExecutionResult, RunProgress
from domain.exceptions import ValidationError
from infrastructure.collection.base_loader import CollectionLoadError
from infrastructure.collection.loader_registry import CollectionLoaderRegistry
from infrastructure.config.settings import Settings
from infrastructure.logging.factory import build_logger


class StaticEnvironment:
    def __init__(self, variables: Dict[str, Any]):
        self._variables = variables

    def get_variables(self) -> Dict[str, Any]:
        return dict(self._variables)


class NoAccounts:
    def get_token(self, account_id: str) -> Optional[str]:
        return None


class PrintingListener(RunListener):
    def on_progress(self, progress: RunProgress) -> None:
        print(f"[{progress.current}/{progress.total}] {progress.test.display_name}", flush=True)

    def on_test_complete(self, result: ExecutionResult, index: int) -> None:
        mark = "PASS" if result.test_passed else "FAIL"
        status = result.status if result.status is not None else "-"
        print(f"    {mark} {result.method} {result.url} -> {status} ({result.duration}ms)")
        if result.error:
            print(f"    error: {result.error}")
        for a in result.assertions:
            if not a.passed:
                print(f"    - {a.message}")


def _parse_vars(pairs: List[str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for pair in pairs:
        if "=" not in pair:
            raise ValidationError(f"--var expects KEY=VALUE, got: {pair}")
        key, value = pair.split("=", 1)
        out[key.strip()] = value
    return out


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run an API test collection file")
    parser.add_argument("collection_file", help="Collection file (.json / .yaml / .yml)")
    parser.add_argument("--base-url", default=None, help="BASE_URL variable")
    parser.add_argument("--var", action="append", default=[], help="Variable KEY=VALUE (repeatable)")
    parser.add_argument("--stop-on-failure", action="store_true", help="Stop at the first failed test")
    parser.add_argument("--timeout-ms", type=int, default=None, help="Per-request timeout")
    parser.add_argument("--json", action="store_true", help="Print the full run report as JSON")
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env()
        variables = _parse_vars(args.var)
    except ValidationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    if args.base_url:
        variables["BASE_URL"] = args.base_url

    logger = build_logger(settings)

    path = Path(args.collection_file)
    try:
        collection = CollectionLoaderRegistry().load(path)
    except CollectionLoadError as e:
        print(f"ERROR: Failed to load collection: {e}", file=sys.stderr)
        return 2

    timeout_ms = args.timeout_ms if args.timeout_ms is not None else settings.timeout_ms
    engine = ApiTestEngine(
        http_client=RequestsSessionHttpClient(timeout_sec=timeout_ms / 1000.0),
        environment=StaticEnvironment(variables),
        accounts=NoAccounts(),
        logger=logger,
        timeout_ms=timeout_ms,
        inter_test_delay_ms=settings.inter_test_delay_ms,
    )

    if not args.json:
        print(f"=== {collection.name} ({len(collection.tests)} tests) ===")
    summary = engine.run_collection(
        collection,
        listener=None if args.json else PrintingListener(),
        stop_on_failure=args.stop_on_failure,
    )

    if args.json:
        print(json.dumps(summary.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(
            f"\nTotal: {summary.total}  Passed: {summary.passed}  "
            f"Failed: {summary.failed}  Duration: {summary.duration}ms"
        )

    return 0 if summary.failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
