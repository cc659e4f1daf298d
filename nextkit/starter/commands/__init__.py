import click # type: ignore
from nextkit.starter.commands.project import createproject
from nextkit.starter.commands.project import features

@click.group()
def cli():
    """create-next-starter CLI"""
    pass

cli.add_command(createproject)
cli.add_command(features)

if __name__ == "__main__":
    cli()
