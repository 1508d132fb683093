"""Profile commands."""

import click
from hourtrack.cli.error_handling import handle_domain_error
from hourtrack.domain.profile import SUPPORTED_LANGUAGES, ProfileService


@click.group()
def profile_group():
    """Show and update your profile."""
    pass


@profile_group.command("show")
@click.pass_context
def show_profile(ctx):
    """Show the current profile."""
    service = ProfileService(ctx.obj["db"], ctx.obj["user"])
    profile = service.get_profile()

    click.echo(f"User: {profile.id}")
    click.echo(f"  Name: {profile.full_name or '-'}")
    click.echo(f"  Email: {profile.email or '-'}")
    click.echo(f"  Language: {profile.language}")


@profile_group.command("set")
@click.option("--name", "full_name", help="Full name")
@click.option("--email", help="E-mail address")
@click.option(
    "--language",
    type=click.Choice(sorted(SUPPORTED_LANGUAGES), case_sensitive=False),
    help="Preferred language",
)
@click.pass_context
def set_profile(ctx, full_name: str | None, email: str | None, language: str | None):
    """Update profile fields."""
    service = ProfileService(ctx.obj["db"], ctx.obj["user"])
    try:
        profile = service.update_profile(full_name=full_name, email=email, language=language)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated profile for {profile.id}")


def register_commands(cli):
    """Register profile commands with main CLI."""
    cli.add_command(profile_group, name="profile")
