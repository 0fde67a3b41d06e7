"""
Words whose first letter does not match the sound that they start with.

Each word in :data:`IRREGULAR_WORDS` inverts the naive "starts with a vowel letter" check, either because it starts with
a vowel letter that is pronounced as a consonant (``unicorn``, ``european``, ``one``), or with a consonant letter that
is silent or pronounced as a vowel (``honest``, ``yttrium``).  Single letters are included as they are read aloud, so
``f`` ("ef") takes "an" and ``u`` ("you") takes "a".
"""

import logging

from ..text import first_letter, strip_suffix

__all__ = ['IRREGULAR_WORDS', 'SUFFIXES', 'is_naively_an', 'is_irregular', 'is_irregular_after_strip', 'is_an_for_word']
log = logging.getLogger(__name__)

SUFFIXES = ('s', 'es', 'ed', 'ly')

# fmt: off
IRREGULAR_WORDS = frozenset({
    # eu like y
    'eunuch', 'eucalyptus', 'eugenics', 'eulogy', 'euphemism', 'euphony', 'euphoria', 'eureka',
    'euro', 'european', 'euphemistic', 'euphonic', 'euphoric',
    'euphemistically', 'euphonically', 'euphorically',
    # silent h
    'heir', 'heiress', 'herb', 'homage', 'honesty', 'honor', 'honour', 'hour',
    'honest', 'honorous',
    'honestly', 'hourly',
    # o like w
    'one', 'ouija', 'once',
    # u like y (adverbs are handled by stripping "ly")
    'ubiquity', 'udometer', 'ufo', 'uke', 'ukelele', 'ululate', 'unicorn', 'unicycle', 'uniform', 'unify', 'union',
    'unison', 'unit', 'unity', 'universe', 'university', 'upas', 'ural', 'uranium', 'urea', 'ureter', 'urethra',
    'urine', 'urologist', 'urology', 'urus', 'usage', 'use', 'user', 'usual', 'usurp', 'usurper', 'usury', 'utah',
    'utahn', 'utensil', 'uterus', 'utility', 'utopia', 'utricle', 'uvarovite', 'uvea', 'uvula',
    'ubiquitous', 'ugandan', 'ukrainian', 'unanimous', 'unicameral', 'unified', 'unique', 'unisex', 'universal',
    'urinal', 'urological', 'useful', 'useless', 'usurious', 'utilitarian', 'utopic',
    # y like i
    'yttria', 'yggdrasil', 'ylem', 'yperite', 'ytterbia', 'ytterbium', 'yttrium',
    'ytterbous', 'ytterbic', 'yttric',
    # single letters, as read aloud
    'u', 'f', 'h', 'l', 'm', 'n', 'r', 's', 'x',
})
# fmt: on


def is_naively_an(word: str) -> bool:
    return first_letter(word) in 'aeiou'


def is_irregular(word: str) -> bool:
    return word in IRREGULAR_WORDS


def is_irregular_after_strip(word: str) -> bool:
    """True if removing any of the :data:`SUFFIXES` from the given word results in an irregular word"""
    return any(strip_suffix(word, suffix) in IRREGULAR_WORDS for suffix in SUFFIXES)


def is_an_for_word(word: str) -> bool:
    """
    :param word: A lower case word that is neither a number nor an acronym
    :return: True if the word should be preceded by "an", False otherwise
    """
    is_an = is_naively_an(word)
    if is_irregular(word) or is_irregular_after_strip(word):
        log.debug(f'Found irregular {word=} - inverting naive {is_an=}')
        return not is_an
    return is_an
