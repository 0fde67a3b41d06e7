"""
Command line interface: prints the given word or phrase preceded by the appropriate article.
"""

import logging

import click

from .config import Options
from .core import with_article

__all__ = ['cli']
log = logging.getLogger(__name__)


@click.command(help='Print the given word or phrase preceded by "a" or "an" (for example: an umbrella, a user)')
@click.argument('word')
@click.option(
    '--colloquial', '-c', is_flag=True,
    help='Treat 4 digit numbers as read colloquially (1800 as "eighteen hundred" instead of "one thousand...")',
)
@click.option('--verbose', '-v', count=True, help='Increase logging verbosity (can specify multiple times)')
@click.option('--log-path', '-L', type=click.Path(dir_okay=False), help='Also write DEBUG logs to the given file')
def cli(word: str, colloquial: bool, verbose: int, log_path: str = None):
    from .logging import init_logging

    init_logging(verbose, log_path=log_path, stdout=False)
    options = Options(numbers_are_colloquial=colloquial)
    log.debug(f'Choosing article for {word=} with {options=}')
    click.echo(with_article(word, options))
