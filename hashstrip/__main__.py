from hashstrip.cli import cli


cli()
