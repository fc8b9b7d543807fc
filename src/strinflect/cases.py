# ===== SECTION: IMPORTS =====
import re
from typing import Callable, List

from .constants import WORD_SEPARATOR_PATTERN


# ===== SECTION: REGEX =====
# Underscores, hyphens and whitespace
WORD_SEPARATOR_REGEX = re.compile(WORD_SEPARATOR_PATTERN)


# ===== SECTION: WORD SEGMENTATION =====

def is_upper(char: str) -> bool:
    # Titlecase letters ('ǅ') start a word like uppercase ones
    return char.isupper() or char.istitle()


def _split_case_boundaries(chunk: str) -> List[str]:
    words = []
    start = 0
    for index in range(1, len(chunk)):
        if not is_upper(chunk[index]):
            continue
        previous = chunk[index - 1]
        following = chunk[index + 1:index + 2]
        # 'productImages', 'Product2Image', 'Foo::Bar', and the end of an acronym in 'HTTPServer'
        if not is_upper(previous) or following.islower():
            words.append(chunk[start:index])
            start = index
    words.append(chunk[start:])
    return words


def split_words(text: str) -> List[str]:
    """
    Splits a string into words for the multi-word case transforms.

    Boundaries are runs of underscores, hyphens and whitespace, plus case
    transitions: an uppercase letter following anything that is not
    uppercase (a lowercase letter, a digit, punctuation), and the last letter
    of an acronym followed by a capitalized word. Letters from any script
    count. Every case transform goes through this function so that all flags
    agree on where words begin and end.

    `inflection.camelize` and `inflection.underscore` are not used here:
    camelize only splits on underscores and underscore leaves whitespace in
    place, so neither can serve as the one splitter for 'this is a test',
    'product-images' and 'ProductImages' alike.

    Args:
        text (str): The string to segment

    Returns:
        List[str]: The words, in order, with their original casing

    Examples:
        >>> split_words('product_images')
        ['product', 'images']
        >>> split_words('ProductImages')
        ['Product', 'Images']
        >>> split_words('HTTPServer-error log')
        ['HTTP', 'Server', 'error', 'log']
    """
    if not text:
        return []

    words = []
    # Leading, trailing and repeated separators leave empty strings behind
    for chunk in WORD_SEPARATOR_REGEX.split(text):
        if chunk:
            words.extend(_split_case_boundaries(chunk))
    return words


def _capitalize(word: str) -> str:
    # str.capitalize titlecases the first letter, so 'ß' becomes 'Ss' rather than 'SS'
    return word.capitalize()


def _runs_together(left: str, right: str) -> bool:
    """True if `right` joined onto `left` would be read back as part of one acronym."""
    return is_upper(left[-1]) and is_upper(right[0]) and not right[1:2].islower()


def _join_words(text: str, separator: str, first: Callable[[str], str], rest: Callable[[str], str]) -> str:
    """Re-joins the words of `text`, rendering the first word and the others separately."""
    words = split_words(text)
    if not words:
        return ""
    if separator:
        return separator.join([first(words[0])] + [rest(word) for word in words[1:]])

    # Without a separator, single capitals such as 'a_b' -> 'A', 'B' would
    # form the acronym 'AB'; such words are merged and rendered as one ('Ab')
    sources = [words[0]]
    rendered = [first(words[0])]
    for word in words[1:]:
        piece = rest(word)
        if _runs_together(rendered[-1], piece):
            sources[-1] += word
            render = first if len(sources) == 1 else rest
            rendered[-1] = render(sources[-1])
        else:
            sources.append(word)
            rendered.append(piece)
    return "".join(rendered)


# ===== SECTION: CASE TRANSFORMS =====

def camel_case(text: str) -> str:
    """'product_images' -> 'productImages'"""
    return _join_words(text, "", str.lower, _capitalize)


def pascal_case(text: str) -> str:
    """'product_images' -> 'ProductImages'"""
    return _join_words(text, "", _capitalize, _capitalize)


def snake_case(text: str) -> str:
    """'ProductImages' -> 'product_images'"""
    return _join_words(text, "_", str.lower, str.lower)


def screaming_snake_case(text: str) -> str:
    """'ProductImages' -> 'PRODUCT_IMAGES'"""
    return _join_words(text, "_", str.upper, str.upper)


def kebab_case(text: str) -> str:
    """'product_images' -> 'product-images'"""
    return _join_words(text, "-", str.lower, str.lower)


def train_case(text: str) -> str:
    """'product_images' -> 'Product-Images'"""
    return _join_words(text, "-", _capitalize, _capitalize)


def sentence_case(text: str) -> str:
    """
    Capitalizes the first word and lowercases the rest, separated by spaces.

    'product_images' -> 'Product images'
    """
    return _join_words(text, " ", _capitalize, str.lower)


def title_case(text: str) -> str:
    """'product_images' -> 'Product Images'"""
    return _join_words(text, " ", _capitalize, _capitalize)


def upper_case(text: str) -> str:
    return text.upper()


def lower_case(text: str) -> str:
    return text.lower()
