"""Allow running verdict as a module: python -m verdict."""

from verdict.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
