import re
import click # type: ignore


def validate_name(name: str) -> str:
    if not re.match(r"^[A-Za-z0-9_\-.]+$", name) or name.startswith("."):
        raise click.BadParameter("Name can only contain letters, numbers, dots, dashes, and underscores, and cannot start with a dot.")
    return name
