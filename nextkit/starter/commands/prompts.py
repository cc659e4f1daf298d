import re
import click # type: ignore
from .exceptions import WizardExit, WizardRestart


def ask(prompt, default=None, type=str, validator=None, show_default=True):
    """Prompt user and handle 'exit' or 'restart' commands."""
    while True:
        value = click.prompt(prompt, default=default, type=type, show_default=show_default)
        cmd = value.strip().lower()
        if cmd == "exit":
            raise WizardExit()
        if cmd == "restart":
            raise WizardRestart()
        if validator:
            try:
                return validator(value)
            except click.BadParameter as e:
                click.secho(f"{e}", fg="red")
        else:
            return value


def _show_options(prompt: str, options: list[str]) -> None:
    click.echo(f"\n{prompt}")
    for i, option in enumerate(options, start=1):
        click.echo(f"  {i}. {option}")


def choose(prompt: str, options: list[str], default: int | None = None) -> str:
    """
    Generic numbered-choice selector.

    - Displays options with numbers.
    - User enters a number.
    - Supports 'exit' and 'restart'.
    - If user presses Enter with a default, returns default.
    """
    while True:
        _show_options(prompt, options)

        raw_choice = ask("Enter the number of your choice", default=str(default) if default else None)

        try:
            choice_int = int(raw_choice)
        except ValueError:
            click.secho("Invalid selection. Enter a valid number.", fg="red")
            continue

        if 1 <= choice_int <= len(options):
            return options[choice_int - 1]
        else:
            click.secho(f"Number out of range. Enter 1-{len(options)}.", fg="red")


def choose_many(prompt: str, options: list[str]) -> list[str]:
    """
    Numbered multi-selector.

    The user enters any number of option numbers separated by commas or spaces,
    or presses Enter to select nothing. Selected options come back in the order
    they are listed, each at most once.
    """
    while True:
        _show_options(prompt, options)

        raw_choice = ask(
            "Enter the numbers of your choices, separated by commas (Enter for none)",
            default="",
            show_default=False,
        )
        tokens = [t for t in re.split(r"[,\s]+", raw_choice.strip()) if t]

        try:
            picked = {int(t) for t in tokens}
        except ValueError:
            click.secho("Invalid selection. Enter numbers only.", fg="red")
            continue

        if any(not 1 <= n <= len(options) for n in picked):
            click.secho(f"Number out of range. Enter 1-{len(options)}.", fg="red")
            continue

        return [option for i, option in enumerate(options, start=1) if i in picked]


def confirm(prompt: str, default: bool = True) -> bool:
    """Yes/no question that also honours 'exit' and 'restart'."""
    while True:
        answer = ask(prompt, default="y" if default else "n").strip().lower()
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        click.secho("Please answer y or n.", fg="red")
