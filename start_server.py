#!/usr/bin/env python3
"""Launch the route optimizer API with uvicorn, honouring the PORT environment variable."""

import os
import subprocess
import sys

DEFAULT_PORT = 8000


def _resolve_port() -> int:
    port = os.environ.get("PORT", str(DEFAULT_PORT))
    try:
        return int(port)
    except ValueError:
        print(f"Warning: Invalid PORT value '{port}', using default {DEFAULT_PORT}", file=sys.stderr)
        return DEFAULT_PORT


def _prepend_src_to_pythonpath() -> None:
    src_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "src")
    if not os.path.isdir(src_path):
        print(f"Warning: src directory not found at {src_path}", file=sys.stderr)
        return
    existing = os.environ.get("PYTHONPATH", "")
    os.environ["PYTHONPATH"] = f"{src_path}{os.pathsep}{existing}" if existing else src_path


def main() -> int:
    port = _resolve_port()
    _prepend_src_to_pythonpath()
    cmd = [
        sys.executable,
        "-m",
        "uvicorn",
        "route_optimizer.main:app",
        "--host",
        "0.0.0.0",
        "--port",
        str(port),
        "--proxy-headers",
        "--forwarded-allow-ips",
        "*",
    ]
    print(f"Starting route optimizer on port {port}...", file=sys.stderr)
    try:
        return subprocess.call(cmd)
    except KeyboardInterrupt:
        print("Server interrupted by user", file=sys.stderr)
        return 0


if __name__ == "__main__":
    sys.exit(main())
