"""Main CLI entry point."""

import logging

import click
from hourtrack.database.factories import create_sqlite_database
from hourtrack.domain.entities import UserContext

# Import and register all commands at module level
from hourtrack.cli.commands import job, hours, income, tax, profile

DEFAULT_USER = "local"


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides HOURTRACK_DB_PATH environment variable)",
    envvar="HOURTRACK_DB_PATH",
)
@click.option(
    "--user",
    "user_id",
    default=DEFAULT_USER,
    show_default=True,
    envvar="HOURTRACK_USER",
    help="User whose jobs and hours are used",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, user_id: str, verbose: bool):
    """Hourtrack - Work hours and income tracking.

    Log hours across several jobs, see monthly and yearly income, export it
    to CSV and estimate Danish income tax.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.obj["user"] = UserContext(user_id=user_id)
        ctx.call_on_close(db.disconnect)


# Register all commands
job.register_commands(cli)
hours.register_commands(cli)
income.register_commands(cli)
tax.register_commands(cli)
profile.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
