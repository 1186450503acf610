#!/usr/bin/env python3
"""
Start the API tester REST server.

Usage:
  python scripts/run_api.py [--host HOST] [--port PORT] [--reload]
"""
import argparse
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import uvicorn


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the API tester REST server")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    parser.add_argument("--port", type=int, default=8000, help="Listen port")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    uvicorn.run("api.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
