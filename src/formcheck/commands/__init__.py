"""Subcommand modules for formcheck.

Provides register_commands(), which defers imports so ``formcheck
--help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from formcheck.commands.check import check
    from formcheck.commands.field import field

    cli.add_command(check)
    cli.add_command(field)
