"""
Chooses the indefinite article (``a`` or ``an``) for a word or phrase.

The first word of the phrase is checked against each rule in order, and the first rule that applies wins:

1. Numbers (:mod:`.rules.numbers`)
2. Acronyms (:mod:`.rules.acronyms`)
3. Irregular words, and the naive "starts with a vowel" check (:mod:`.rules.irregular`)

The chosen article is capitalized only if the first word of the phrase is in Title Case.
"""

from __future__ import annotations

import logging
from enum import Enum
from threading import Lock

from cachetools import LRUCache, cached

from .config import Options, OptionsLike
from .rules import is_number, is_an_for_number, is_acronym, is_an_for_acronym, is_an_for_word
from .text import first_word, is_title_case

__all__ = ['Is', 'is_an', 'classify', 'get_article', 'with_article', 'capitalize_to_match']
log = logging.getLogger(__name__)


class Is(Enum):
    AN = 'an'
    A = 'a'
    NONE = ''

    @property
    def article(self) -> str:
        return self.value

    def __bool__(self) -> bool:
        return self is not Is.NONE


def is_an(phrase: str, options: OptionsLike = None) -> bool:
    """
    :param phrase: A word or phrase
    :param options: :class:`.Options` or a mapping of option names to values
    :return: True if the given phrase should be preceded by "an", False if it should be preceded by "a"
    """
    return classify(phrase, options) is Is.AN


@cached(LRUCache(2048), lock=Lock())
def _decide(word: str, colloquial: bool) -> tuple[bool, str]:
    """Returns whether the given word takes "an", and the name of the rule that decided it"""
    if is_number(word):
        return is_an_for_number(word, colloquial), 'number'
    elif is_acronym(word):
        return is_an_for_acronym(word), 'acronym'
    return is_an_for_word(word.lower()), 'word'


def classify(phrase: str, options: OptionsLike = None) -> Is:
    """
    :param phrase: A word or phrase
    :param options: :class:`.Options` or a mapping of option names to values
    :return: :attr:`Is.AN` or :attr:`Is.A`, or :attr:`Is.NONE` if the phrase is empty or only contains whitespace
    """
    if not (word := first_word(phrase)):
        return Is.NONE
    use_an, rule = _decide(word, Options.normalize(options).numbers_are_colloquial)
    result = Is.AN if use_an else Is.A
    log.debug(f'Chose {result.article} for {word=} via {rule} rule')
    return result


def capitalize_to_match(result: Is, word: str) -> str:
    """Returns the article for the given result, capitalized if the given word is in Title Case."""
    article = result.article
    return article.capitalize() if is_title_case(word) else article


def get_article(phrase: str, options: OptionsLike = None) -> str:
    """
    Get ``a`` or ``an`` to match the given word or phrase.  If the first word is in Title Case, then ``A`` or ``An`` is
    returned instead.

    Examples::

        >>> get_article('umbrella'), get_article('unicorn'), get_article('Heir'), get_article('FIFA')
        ('an', 'a', 'An', 'an')
        >>> get_article('1800'), get_article('1800', Options.with_colloquial())
        ('a', 'an')

    :param phrase: A word or phrase
    :param options: :class:`.Options` or a mapping of option names to values
    :return: The article, or an empty string if the phrase is empty or only contains whitespace
    """
    return capitalize_to_match(classify(phrase, options), first_word(phrase))


def with_article(phrase: str, options: OptionsLike = None) -> str:
    """Returns the given phrase, preceded by the appropriate article (e.g., ``an apple``)."""
    if article := get_article(phrase, options):
        return f'{article} {phrase}'
    return phrase
