"""
The individual rules that are combined by :func:`a_or_an.core.is_an` to choose an article.
"""

from .acronyms import *
from .irregular import *
from .numbers import *
