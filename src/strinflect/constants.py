# ===== SECTION: CONSTANTS =====
# Constants used throughout the strinflect codebase

# Token that separates nested naming scopes (demodulize, deconstantize, foreign keys)
DEFAULT_NAMESPACE_SEPARATOR = "::"

# Name the template helper is registered under
DEFAULT_HELPER_NAME = "inflect"

# Option spelling used by template call sites, e.g. to_snake_case=true
OPTION_PREFIX = "to_"

# Option names that do not follow the OPTION_PREFIX + flag pattern
OPTION_ALIASES = {
    "to_plural": "pluralize",
    "to_singular": "singularize",
    "foreign_key": "to_foreign_key",
}

# Characters that separate words for every multi-word case transform
WORD_SEPARATOR_PATTERN = r"[\s_\-]+"

# Suffix appended by foreign key derivation
FOREIGN_KEY_SUFFIX = "_id"

# Ordinal suffixes recognized by deordinalize
ORDINAL_SUFFIXES = ("st", "nd", "rd", "th")

# Logging format shared by the CLI commands
LOG_FORMAT = "%(levelname)s: %(message)s"
