"""Punto de entrada de la CLI."""

from __future__ import annotations

from wiifit_tool.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
