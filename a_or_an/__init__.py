"""
Choose the English indefinite article (``a`` or ``an``) for a word or phrase, based on how it is pronounced.
"""

from .__version__ import __author__, __version__
from .config import Options, InvalidConfigError
from .core import Is, is_an, classify, get_article, with_article
