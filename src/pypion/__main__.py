"""Run the table inspection tool with ``python -m pypion``."""

from .cli import main as cli_main


def main() -> None:
    """Entry point for ``python -m pypion``."""
    cli_main()


if __name__ == "__main__":
    main()
