"""
Article selection for acronyms, which are read letter by letter.

Consonants whose names start with a vowel sound (F = "ef", H = "aitch", etc.) take "an", and U (read as "you") takes
"a" even though it is a vowel.
"""

__all__ = ['IRREGULAR_INITIALS', 'VOWELS', 'is_acronym', 'is_an_for_acronym']

IRREGULAR_INITIALS = frozenset('UFHLMNRSX')
VOWELS = frozenset('aeiouAEIOU')


def is_acronym(word: str) -> bool:
    return bool(word) and all(c.isupper() for c in word)


def is_an_for_acronym(word: str) -> bool:
    initial = word[0]
    return (initial in IRREGULAR_INITIALS) != (initial in VOWELS)
