# ===== SECTION: IMPORTS =====
from enum import Enum
from typing import Optional, Union

from .constants import OPTION_ALIASES, OPTION_PREFIX
from .errors import UnknownFlagError


# ===== SECTION: FLAG CATALOG =====

class FlagName(str, Enum):
    """
    Closed catalog of transformation flags.

    Member declaration order matches the canonical execution order, but the
    engine's dispatch table is the authority on ordering.
    """

    CAMEL_CASE = "camel_case"
    PASCAL_CASE = "pascal_case"
    SNAKE_CASE = "snake_case"
    SCREAMING_SNAKE_CASE = "screaming_snake_case"
    KEBAB_CASE = "kebab_case"
    TRAIN_CASE = "train_case"
    SENTENCE_CASE = "sentence_case"
    TITLE_CASE = "title_case"
    ORDINALIZE = "ordinalize"
    DEORDINALIZE = "deordinalize"
    FOREIGN_KEY = "to_foreign_key"
    DEMODULIZE = "demodulize"
    DECONSTANTIZE = "deconstantize"
    CLASS_CASE = "class_case"
    TABLE_CASE = "table_case"
    PLURALIZE = "pluralize"
    SINGULARIZE = "singularize"
    UPPER_CASE = "upper_case"
    LOWER_CASE = "lower_case"

    @classmethod
    def lookup(cls, name: Union[str, "FlagName"]) -> Optional["FlagName"]:
        """
        Resolves a flag from its canonical name or a template option spelling.

        Accepted spellings for a flag such as ``snake_case``:
        ``snake_case`` and ``to_snake_case``. The helper options
        ``to_plural`` and ``to_singular`` are accepted as well.

        Returns:
            The matching FlagName, or None if the name is not in the catalog.
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            return None

        key = name.strip()
        if key in _BY_VALUE:
            return _BY_VALUE[key]
        if key in OPTION_ALIASES:
            return _BY_VALUE[OPTION_ALIASES[key]]
        if key.startswith(OPTION_PREFIX):
            return _BY_VALUE.get(key[len(OPTION_PREFIX):])
        return None

    @classmethod
    def parse(cls, name: Union[str, "FlagName"]) -> "FlagName":
        """Like lookup(), but raises UnknownFlagError for names outside the catalog."""
        flag = cls.lookup(name)
        if flag is None:
            raise UnknownFlagError(str(name), known=[member.value for member in cls])
        return flag


_BY_VALUE = {member.value: member for member in FlagName}
