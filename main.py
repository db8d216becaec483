"""Generate the configuration properties document from the project root."""

from property_documenter.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
