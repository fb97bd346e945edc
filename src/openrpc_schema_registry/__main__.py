"""Module entry point for `python -m openrpc_schema_registry`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
