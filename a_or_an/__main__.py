from .cli import cli

cli(prog_name='a_or_an')
