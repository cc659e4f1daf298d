import sys
import click # type: ignore
from pathlib import Path
from nextkit.starter.config import StarterConfig, configure_logging
from nextkit.starter.scaffold.exceptions import CommandFailed, InputError, ScaffoldError
from nextkit.starter.scaffold.features import FEATURES
from nextkit.starter.scaffold.generator import ProjectGenerator
from nextkit.starter.scaffold.metadata import FeatureId, LocationMode, PackageManager, UserSelections
from .exceptions import WizardExit, WizardRestart
from .prompts import ask, choose, choose_many, confirm
from .validate import validate_name


DEFAULT_NAME = "my-next-app"

LOCATION_CHOICES = {
    "New folder with app name": LocationMode.NEW_FOLDER,
    "Current directory": LocationMode.CURRENT_DIR,
}

FEATURE_CHOICES = {feature.title: feature.id for feature in FEATURES}


def _check_name(name: str) -> str:
    try:
        return validate_name(name)
    except click.BadParameter as e:
        raise InputError(str(e.message))


def collect_selections(name=None, location=None, package_manager=None, features=(), assume_yes=False) -> UserSelections:
    """
    Ask for every answer that was not given on the command line.

    Raises ``WizardExit`` when the user cancels, including declining the
    final confirmation.
    """
    given = (name, location, package_manager, tuple(features))

    while True:  # loop for restart
        try:
            name, location, package_manager, features = given

            if name is None:
                name = ask("1 Project name", default=DEFAULT_NAME, validator=validate_name)
            elif name.strip():
                name = _check_name(name)

            if location is None:
                if assume_yes:
                    location = LocationMode.NEW_FOLDER
                else:
                    location = LOCATION_CHOICES[choose("2 Where to create the project?", list(LOCATION_CHOICES), 1)]

            if package_manager is None:
                if assume_yes:
                    package_manager = PackageManager.NPM
                else:
                    package_manager = choose("3 Choose package manager", [pm.value for pm in PackageManager], 1)

            if not features and not assume_yes:
                titles = choose_many("4 Select features to include (you can pick multiple)", list(FEATURE_CHOICES))
                features = [FEATURE_CHOICES[title] for title in titles]

            selections = UserSelections(
                name=name,
                location=LocationMode(location),
                package_manager=PackageManager(package_manager),
                features=frozenset(FeatureId(f) for f in features),
            )

            if not assume_yes:
                click.secho("\nProject Summary", fg="yellow", bold=True)
                for field, value in selections.to_dict().items():
                    if isinstance(value, list):
                        value = ", ".join(value) or "none"
                    click.echo(f"   {field.replace('_', ' ').capitalize()}: {value}")

                if not confirm("\nConfirm and generate project?", default=True):
                    raise WizardExit()

            return selections

        except WizardRestart:
            click.secho("\nRestarting wizard...\n", fg="yellow")
            continue


def print_next_steps(selections: UserSelections, summary: dict):
    click.secho(f"\nDone! Your project is ready at: {summary['project_path']}", fg="green", bold=True)
    click.echo("\nNext steps:")
    click.echo(f"  cd {selections.name if selections.location == LocationMode.NEW_FOLDER else '.'}")
    click.echo(f"  {selections.package_manager.value} run dev")

    if summary["warnings"]:
        click.secho("\nSome optional steps need your attention:", fg="yellow", bold=True)
        for warning in summary["warnings"]:
            click.secho(f"  - {warning}", fg="yellow")


@click.command("createproject")
@click.argument("name", required=False)
@click.option("--location", type=click.Choice([m.value for m in LocationMode]), help="Create a new folder or use the current directory.")
@click.option("--package-manager", type=click.Choice([pm.value for pm in PackageManager]), help="Package manager for installs.")
@click.option("--feature", "features", multiple=True, type=click.Choice([f.value for f in FeatureId]), help="Feature to include (repeatable).")
@click.option("--yes", "-y", is_flag=True, help="Accept defaults for unanswered questions and skip confirmation.")
@click.option("--dry-run", is_flag=True, help="Show what would happen without doing it.")
@click.option("--templates-dir", type=click.Path(file_okay=False, path_type=Path), help="Template tree merged into the project.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def createproject(name, location, package_manager, features, yes, dry_run, templates_dir, verbose):
    """Create a Next.js starter project."""
    config = StarterConfig.from_env().override(templates_dir=templates_dir, verbose=verbose, dry_run=dry_run)
    configure_logging(config.log_level)

    click.secho("create-next-starter: opinionated Next.js starter", fg="cyan", bold=True)
    click.echo("Type 'exit' at any prompt to cancel or 'restart' to start over.\n")

    try:
        selections = collect_selections(name, location, package_manager, features, assume_yes=yes)
    except WizardExit:
        click.secho("Aborted.", fg="red", err=True)
        sys.exit(1)
    except InputError as e:
        raise click.ClickException(str(e))

    generator = ProjectGenerator(selections, config)

    try:
        summary = generator.generate()
    except CommandFailed as e:
        raise click.ClickException(
            f"{e}. This step cannot be recovered automatically; fix the problem and run create-next-starter again."
        )
    except ScaffoldError as e:
        raise click.ClickException(str(e))
    except OSError as e:
        raise click.ClickException(f"Filesystem error: {e}")

    if config.dry_run:
        generator.print_summary()
        return

    print_next_steps(selections, summary)


@click.command("features")
def features():
    """List available features and the packages they install."""
    for feature in FEATURES:
        info = feature.to_dict()
        click.secho(info["id"], fg="cyan", bold=True, nl=False)
        click.echo(f"  {info['title']}" + ("  (wired after install)" if info["wiring"] else ""))
        if info["runtime"]:
            click.echo(f"    dependencies: {' '.join(info['runtime'])}")
        if info["dev"]:
            click.echo(f"    dev dependencies: {' '.join(info['dev'])}")
