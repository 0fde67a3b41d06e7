"""
Helpers for running this package's unit tests directly (``python tests/test_core.py -v``) as well as via pytest.
"""

import logging
import sys
from argparse import ArgumentParser
from unittest import TestCase, main as unittest_main

from .logging import init_logging

__all__ = ['TestCaseBase', 'main']
log = logging.getLogger(__name__)


def main(description='Unit Tests', **kwargs):
    parser = ArgumentParser(description)
    parser.add_argument('--include', '-i', nargs='+', help='Names of test functions to include (default: all)')
    parser.add_argument(
        '--verbose', '-v', action='count', default=0, help='Increase logging verbosity (can specify multiple times)'
    )
    args, argv = parser.parse_known_args()
    init_logging(args.verbose, names=None)

    argv.insert(0, sys.argv[0])
    if args.include:
        test_classes = set(TestCaseBase.__subclasses__())
        for cls in TestCaseBase.__subclasses__():
            test_classes.update(cls.__subclasses__())
        names = {m: f'{cls.__name__}.{m}' for cls in test_classes for m in dir(cls)}
        for method_name in args.include:
            argv.append(names.get(method_name, method_name))

    kwargs.setdefault('exit', False)
    kwargs.setdefault('verbosity', 2)
    kwargs.setdefault('warnings', 'ignore')
    try:
        unittest_main(argv=argv, **kwargs)
    except KeyboardInterrupt:
        print()


class TestCaseBase(TestCase):
    def assert_articles(self, expected: dict[str, str], options=None):
        """Assert that :func:`.get_article` returns the expected article for each key in the given dict"""
        from .core import get_article

        for phrase, article in expected.items():
            with self.subTest(phrase=phrase, options=options):
                self.assertEqual(article, get_article(phrase, options))
