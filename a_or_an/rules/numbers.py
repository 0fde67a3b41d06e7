"""
Article selection for numbers, based on how the leading digits are read aloud.

An ``8`` is always read as "eight...", and a number starting with ``11`` or ``18`` is read as "eleven..." /
"eighteen..." when its digits split into groups of 3 after the first 2 (11, 11,000, 11,000,000, etc).  Four digit
numbers starting with 11 or 18 are ambiguous - 1800 may be read as "eighteen hundred" or as "one thousand eight
hundred".
"""

import logging

__all__ = ['is_number', 'is_an_for_number']
log = logging.getLogger(__name__)


def is_number(word: str) -> bool:
    return bool(word) and word[0].isdigit()


def is_an_for_number(word: str, colloquial: bool = False) -> bool:
    """
    :param word: A word that starts with a digit
    :param colloquial: Whether 4 digit numbers should be treated as read colloquially (``1800`` as "eighteen hundred")
      instead of as full cardinals ("one thousand eight hundred")
    :return: True if the number should be preceded by "an", False otherwise
    """
    starts_with_11_or_18 = word.startswith(('11', '18'))
    if starts_with_11_or_18 and len(word) == 4:
        log.debug(f'Ambiguous 4 digit number={word!r} - using {colloquial=}')
        return colloquial
    elif starts_with_11_or_18 and (len(word) - 2) % 3 == 0:
        return True
    return word.startswith('8')
