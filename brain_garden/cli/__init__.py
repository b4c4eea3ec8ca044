"""Brain Garden CLI.

Functions:
    main: Точка входа CLI.

Example:
    $ garden --help
    $ garden notes list --topic AI
    $ garden browse --at /notes/alpha
    $ garden doctor
"""

from brain_garden.cli.app import app


def main() -> None:
    """Точка входа для CLI."""
    app()


__all__ = ["main", "app"]
