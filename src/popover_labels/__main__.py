"""Module entry point for `python -m popover_labels`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
