"""Inflection engine: the canonical dispatch table and the fold over it.

Flags are applied in the order of the dispatch table, never in the order the
caller listed them. Each step consumes the previous step's output.
"""

# ===== SECTION: IMPORTS =====
import logging
from functools import partial
from typing import Callable, FrozenSet, Iterable, Tuple, Union

from . import cases
from . import inflections
from .constants import DEFAULT_NAMESPACE_SEPARATOR
from .errors import ConfigurationError
from .flags import FlagName


Transformation = Callable[[str], str]
Pipeline = Tuple[Tuple[FlagName, Transformation], ...]
FlagSpec = Union[FlagName, str]


# ===== SECTION: DISPATCH TABLE =====

def build_pipeline(namespace_separator: str = DEFAULT_NAMESPACE_SEPARATOR) -> Pipeline:
    """
    Builds the ordered (flag, transformation) table.

    Args:
        namespace_separator (str): Token used by the namespace-aware steps
            (to_foreign_key, demodulize, deconstantize)

    Returns:
        Pipeline: One entry per flag in the catalog, in execution order
    """
    return (
        (FlagName.CAMEL_CASE, cases.camel_case),
        (FlagName.PASCAL_CASE, cases.pascal_case),
        (FlagName.SNAKE_CASE, cases.snake_case),
        (FlagName.SCREAMING_SNAKE_CASE, cases.screaming_snake_case),
        (FlagName.KEBAB_CASE, cases.kebab_case),
        (FlagName.TRAIN_CASE, cases.train_case),
        (FlagName.SENTENCE_CASE, cases.sentence_case),
        (FlagName.TITLE_CASE, cases.title_case),
        (FlagName.ORDINALIZE, inflections.ordinalize),
        (FlagName.DEORDINALIZE, inflections.deordinalize),
        (FlagName.FOREIGN_KEY, partial(inflections.foreign_key, separator=namespace_separator)),
        (FlagName.DEMODULIZE, partial(inflections.demodulize, separator=namespace_separator)),
        (FlagName.DECONSTANTIZE, partial(inflections.deconstantize, separator=namespace_separator)),
        (FlagName.CLASS_CASE, inflections.class_case),
        (FlagName.TABLE_CASE, inflections.table_case),
        (FlagName.PLURALIZE, inflections.pluralize),
        (FlagName.SINGULARIZE, inflections.singularize),
        (FlagName.UPPER_CASE, cases.upper_case),
        (FlagName.LOWER_CASE, cases.lower_case),
    )


CANONICAL_ORDER: Pipeline = build_pipeline()
CANONICAL_FLAGS: Tuple[FlagName, ...] = tuple(flag for flag, _ in CANONICAL_ORDER)


def normalize_flags(flags: Union[FlagSpec, Iterable[FlagSpec], None]) -> FrozenSet[FlagName]:
    """
    Converts caller-supplied flags into a set of FlagName members.

    Accepts a single flag, any iterable of flags, or None. Names may use any
    spelling FlagName.parse() understands. Duplicates collapse.

    Raises:
        UnknownFlagError: If a name is not in the catalog
    """
    if flags is None:
        return frozenset()
    if isinstance(flags, str):
        flags = [flags]
    return frozenset(FlagName.parse(flag) for flag in flags)


# ===== SECTION: ENGINE =====

class InflectionEngine:
    """
    Applies a set of flags to a string in canonical order.

    The engine is stateless apart from its namespace separator and can be
    shared between threads.

    Usage:
        engine = InflectionEngine()
        engine.transform("product_images", {"class_case"})  # 'ProductImage'
    """

    def __init__(self, namespace_separator: str = DEFAULT_NAMESPACE_SEPARATOR):
        if not isinstance(namespace_separator, str) or not namespace_separator:
            raise ConfigurationError(
                f"Namespace separator must be a non-empty string, got {namespace_separator!r}"
            )
        self.namespace_separator = namespace_separator
        self.pipeline = build_pipeline(namespace_separator)

    def transform(self, text: str, flags: Union[FlagSpec, Iterable[FlagSpec], None]) -> str:
        active = normalize_flags(flags)
        output = text
        for flag, transformation in self.pipeline:
            if flag not in active:
                continue
            result = transformation(output)
            logging.debug(f"{flag.value}: '{output}' -> '{result}'")
            output = result
        return output

    def __repr__(self) -> str:
        return f"InflectionEngine(namespace_separator={self.namespace_separator!r})"


_DEFAULT_ENGINE = InflectionEngine()


def transform(
    text: str,
    flags: Union[FlagSpec, Iterable[FlagSpec], None],
    namespace_separator: str = DEFAULT_NAMESPACE_SEPARATOR,
) -> str:
    """
    Applies every requested flag to `text` in canonical order.

    Args:
        text (str): The string to transform
        flags: Flags to apply; order and duplicates are irrelevant
        namespace_separator (str): Separator for the namespace-aware flags

    Returns:
        str: The transformed string

    Examples:
        >>> transform('this is a test', ['camel_case'])
        'thisIsATest'
        >>> transform('Bars::Foos', {'demodulize', 'class_case'})
        'Foo'
    """
    if namespace_separator == _DEFAULT_ENGINE.namespace_separator:
        engine = _DEFAULT_ENGINE
    else:
        engine = InflectionEngine(namespace_separator)
    return engine.transform(text, flags)
