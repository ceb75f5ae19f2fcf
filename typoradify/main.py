from __future__ import annotations

import sys

from typoradify.app import run_app


def main() -> int:
    """Console entrypoint for `typoradify` and `python -m typoradify`."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
