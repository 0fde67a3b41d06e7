"""
Text primitives used to pick apart the phrase that an article is being chosen for.
"""

__all__ = ['WORD_DELIMITERS', 'WHITESPACE', 'first_word', 'first_letter', 'is_title_case', 'strip_suffix']

WORD_DELIMITERS = " ,.-;:'"
# Unicode White_Space; str.strip() without arguments would also remove the \x1c-\x1f separator controls
WHITESPACE = (
    '\t\n\x0b\x0c\r \x85\xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a'
    '\u2028\u2029\u202f\u205f\u3000'
)


def first_word(phrase: str) -> str:
    """
    :param phrase: A word or phrase, which may be hyphenated, possessive, or surrounded by whitespace
    :return: The first non-empty segment of the given phrase, after splitting on :data:`WORD_DELIMITERS`.  An empty
      string is only returned if the phrase is empty or only contains whitespace.
    """
    if not isinstance(phrase, str):
        raise TypeError(f'Expected a str, but found {type(phrase).__name__}: {phrase!r}')
    try:
        split = first_word._split
    except AttributeError:
        import re
        split = first_word._split = re.compile('[{}]'.format(re.escape(WORD_DELIMITERS))).split

    if not (phrase := phrase.strip(WHITESPACE)):
        return ''
    return next((part for part in split(phrase) if part), phrase)


def first_letter(word: str) -> str:
    try:
        return word[0]
    except IndexError:
        raise ValueError('Unable to find the first letter of an empty word') from None


def is_title_case(word: str) -> bool:
    """
    Stricter than :meth:`str.istitle` - only the first character may be upper case, and all following characters must
    be lower case letters, so acronyms (``FIFA``), mixed case (``UgLy``), and words containing digits are rejected.
    """
    if not word:
        return False
    return word[0].isupper() and all(c.islower() for c in word[1:])


def strip_suffix(word: str, suffix: str) -> str:
    """
    :param word: A word
    :param suffix: The ending to remove
    :return: The word without the given suffix, or the original word if it did not end with the suffix or if removing
      it would leave fewer than 2 characters (so ``red`` is never reduced to the single letter ``r``)
    """
    if suffix and word.endswith(suffix) and len(stripped := word[:-len(suffix)]) > 1:
        return stripped
    return word
