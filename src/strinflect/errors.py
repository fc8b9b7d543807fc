# ===== SECTION: ERROR CLASSES =====
# Custom exception classes for strinflect

class StrInflectError(Exception):
    """Base class for all strinflect errors."""
    pass


class UnknownFlagError(StrInflectError):
    """A flag name outside the canonical catalog was requested."""
    def __init__(self, name: str, known: list = None):
        self.name = name
        message = f"Unknown inflection flag '{name}'"
        if known:
            message += f" (expected one of: {', '.join(known)})"
        super().__init__(message)


class ConfigurationError(StrInflectError):
    """Invalid engine or helper configuration."""
    pass


class HelperError(StrInflectError):
    """Error raised by the template helper in strict mode."""
    def __init__(self, message: str, helper_name: str = None):
        self.helper_name = helper_name

        details = ""
        if helper_name:
            details += f" for helper '{helper_name}'"

        super().__init__(f"{message}{details}")


class MissingInputError(HelperError):
    """The helper was called without its required positional argument."""
    def __init__(self, helper_name: str = None, index: int = 0):
        self.index = index
        super().__init__(f"Missing required argument at index {index}", helper_name=helper_name)


class TypeMismatchError(HelperError):
    """The helper's positional argument has the wrong type."""
    def __init__(self, helper_name: str = None, param: str = "0", expected: str = "string", actual: str = None):
        self.param = param
        self.expected = expected
        self.actual = actual

        message = f"Type mismatch for parameter '{param}': expected {expected}"
        if actual:
            message += f", got {actual}"
        super().__init__(message, helper_name=helper_name)
