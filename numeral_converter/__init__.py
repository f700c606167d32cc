"""
Numeral Converter — written Portuguese cardinal numbers to decimal integers.

Architecture: Normalizer → Direct Matcher → Token Reducer → Result
Philosophy:  Every phrase is either wholly valid or wholly rejected.
"""

from .converter import (
    NumeralConverter,
    convert,
    convert_detailed,
    explain,
    words_to_number,
)
from .models import INVALID_NUMBER

__version__ = "1.0.0"

__all__ = [
    "INVALID_NUMBER",
    "NumeralConverter",
    "convert",
    "convert_detailed",
    "explain",
    "words_to_number",
]
