# ===== SECTION: IMPORTS =====
# Standard library and third-party imports
import re
from typing import Callable, Tuple

import inflection  # English plural/singular rule tables and ordinal suffixes

# Local imports
from .cases import is_upper, pascal_case, snake_case
from .constants import DEFAULT_NAMESPACE_SEPARATOR, FOREIGN_KEY_SUFFIX, ORDINAL_SUFFIXES
from .errors import ConfigurationError


# ===== SECTION: REGEX =====
# Run of ASCII digits at the very end of the string
TRAILING_NUMBER_REGEX = re.compile(r"([0-9]+)$")
# Digit run followed by an ordinal suffix at the very end of the string
TRAILING_ORDINAL_REGEX = re.compile(r"([0-9]+)({})$".format("|".join(ORDINAL_SUFFIXES)))


# ===== SECTION: PLURALIZATION =====

def _last_word_span(text: str) -> Tuple[int, int]:
    """
    Locates the trailing word of a compound name, ignoring trailing punctuation.

    'ProductImage' -> 'Image', 'product images' -> 'images', 'PRODUCT_IMAGE'
    -> 'IMAGE', 'cafés' -> 'cafés'. Letters from any script count. The span
    is empty when the name does not end in a letter ('July 1').
    """
    end = len(text)
    while end and not text[end - 1].isalnum():
        end -= 1

    start = end
    while start and text[start - 1].isalpha() and not is_upper(text[start - 1]):
        start -= 1
    if start < end:
        # One leading capital belongs to the word: 'Image'
        if start and is_upper(text[start - 1]):
            start -= 1
    else:
        # All-caps word: 'IMAGE'
        while start and is_upper(text[start - 1]):
            start -= 1
    return start, end


def _inflect_last_word(text: str, inflect: Callable[[str], str]) -> str:
    """
    Applies an inflection library function to the last word of a compound name.

    The rule tables in `inflection` match against the end of the string, so
    running them on the whole of 'product equipment' or 'SalesPerson' misses
    uncountables and irregulars. Only the trailing word is inflected; the
    prefix and any trailing punctuation are kept as-is. Strings without a
    trailing word are handed to the library whole.
    """
    if not text:
        return text

    start, end = _last_word_span(text)
    if start == end:
        return inflect(text)

    return text[:start] + inflect(text[start:end]) + text[end:]


def pluralize(text: str) -> str:
    """'product image' -> 'product images'"""
    return _inflect_last_word(text, inflection.pluralize)


def singularize(text: str) -> str:
    """'product_images' -> 'product_image'"""
    return _inflect_last_word(text, inflection.singularize)


# ===== SECTION: ORDINALS =====

def ordinalize(text: str) -> str:
    """
    Appends the English ordinal suffix to a trailing integer.

    Args:
        text (str): Any string; only a trailing run of digits is considered

    Returns:
        str: The string with 'st', 'nd', 'rd' or 'th' appended, or the input
        unchanged if it does not end in a digit

    Examples:
        >>> ordinalize('July 1')
        'July 1st'
        >>> ordinalize('the 112')
        'the 112th'
    """
    match = TRAILING_NUMBER_REGEX.search(text)
    if match is None:
        return text
    return text + inflection.ordinal(int(match.group(1)))


def deordinalize(text: str) -> str:
    """
    Strips the ordinal suffix from a trailing integer.

    The suffix is only removed when it directly follows a digit run and is
    the correct suffix for that number, so 'July 1st' becomes 'July 1' while
    'July 1th' and 'Fourth' are returned unchanged.
    """
    match = TRAILING_ORDINAL_REGEX.search(text)
    if match is None:
        return text

    number, suffix = match.groups()
    if inflection.ordinal(int(number)) != suffix:
        return text
    return text[:match.end(1)]


# ===== SECTION: NAMESPACES =====

def _check_separator(separator: str) -> None:
    if not separator:
        raise ConfigurationError("Namespace separator must be a non-empty string")


def demodulize(text: str, separator: str = DEFAULT_NAMESPACE_SEPARATOR) -> str:
    """
    Keeps the segment after the last namespace separator, PascalCased.

    Examples:
        >>> demodulize('std::io')
        'Io'
        >>> demodulize('Foo::Bar')
        'Bar'
        >>> demodulize('Bar')
        'Bar'
    """
    _check_separator(separator)
    if separator not in text:
        return text
    return pascal_case(text.rpartition(separator)[2])


def deconstantize(text: str, separator: str = DEFAULT_NAMESPACE_SEPARATOR) -> str:
    """
    Keeps everything before the last namespace separator, PascalCasing each segment.

    Returns an empty string when the separator does not occur.

    Examples:
        >>> deconstantize('std::io')
        'Std'
        >>> deconstantize('a::b::c')
        'A::B'
    """
    _check_separator(separator)
    if separator not in text:
        return ""
    head = text.rpartition(separator)[0]
    return separator.join(pascal_case(segment) for segment in head.split(separator))


# ===== SECTION: DERIVED NAMES =====

def foreign_key(text: str, separator: str = DEFAULT_NAMESPACE_SEPARATOR) -> str:
    """
    Derives a foreign key column name from an entity name.

    The namespace prefix is dropped, the last word singularized and the result
    snake_cased with '_id' appended. Names that already end in '_id' are not
    suffixed twice.

    Examples:
        >>> foreign_key('Product image')
        'product_image_id'
        >>> foreign_key('Admin::Posts')
        'post_id'
    """
    _check_separator(separator)
    if separator in text:
        text = text.rpartition(separator)[2]

    key = snake_case(singularize(text))
    if not key or key.endswith(FOREIGN_KEY_SUFFIX):
        return key
    return key + FOREIGN_KEY_SUFFIX


def class_case(text: str) -> str:
    """'product_images' -> 'ProductImage'"""
    return pascal_case(singularize(text))


def table_case(text: str) -> str:
    """'ProductImage' -> 'product_images'"""
    return snake_case(pluralize(text))
