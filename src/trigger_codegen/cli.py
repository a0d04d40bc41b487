"""Console-script entrypoint.

The CLI itself is implemented in `trigger_codegen.main`.
"""

from __future__ import annotations

from trigger_codegen.main import main

__all__ = ["main"]


if __name__ == "__main__":
    raise SystemExit(main())
