__title__ = 'a_or_an'
__description__ = 'Choose the English indefinite article (a or an) for a word or phrase'
__version__ = '2024.10.17'
__author__ = 'a_or_an contributors'
