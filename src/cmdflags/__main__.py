"""CLI entry point for cmdflags."""

from __future__ import annotations

from cmdflags.cli.commands.root import cli


def main() -> None:
    """Run the cmdflags command line."""
    cli()


if __name__ == "__main__":
    main()
