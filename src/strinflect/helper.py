"""Template helper exposing the inflection engine to Jinja2.

Registration:
    env = Environment()
    register(env)
    env.from_string("{{ name | inflect(to_class_case=true) }}").render(name="product_images")

Nested calls control ordering explicitly:
    {{ inflect(inflect(name, deconstantize=true), to_singular=true) }}
"""

# ===== SECTION: IMPORTS =====
import logging
from typing import Any, Mapping, Optional, Sequence

from jinja2 import BaseLoader, Environment, StrictUndefined, Undefined

from .constants import DEFAULT_HELPER_NAME, DEFAULT_NAMESPACE_SEPARATOR
from .engine import InflectionEngine
from .errors import MissingInputError, TypeMismatchError
from .flags import FlagName


# ===== SECTION: HELPER =====

class InflectHelper:
    """
    Callable template helper wrapping an InflectionEngine.

    The first positional argument is the string to transform. Every named
    option that names a flag selects it, whatever its value; options outside
    the catalog are ignored.

    In strict mode a missing or non-string argument raises; otherwise the
    helper renders an empty string.
    """

    def __init__(
        self,
        engine: Optional[InflectionEngine] = None,
        strict: bool = False,
        name: str = DEFAULT_HELPER_NAME,
    ):
        self.engine = engine or InflectionEngine()
        self.strict = strict
        self.name = name

    def invoke(self, args: Sequence[Any], options: Optional[Mapping[str, Any]] = None) -> str:
        """
        Runs the helper for one call site.

        Args:
            args: Positional call arguments; only the first is used
            options: Named call options; keys are matched against the flag catalog

        Returns:
            str: The transformed string, or "" for missing/non-string input in lenient mode

        Raises:
            MissingInputError: Strict mode, no input or an undefined template variable
            TypeMismatchError: Strict mode, input is not a string
        """
        if not args or isinstance(args[0], Undefined):
            if self.strict:
                raise MissingInputError(self.name, index=0)
            logging.debug(f"Helper '{self.name}' called without input, rendering nothing")
            return ""

        value = args[0]
        if not isinstance(value, str):
            if self.strict:
                raise TypeMismatchError(self.name, param="0", expected="string", actual=type(value).__name__)
            logging.debug(f"Helper '{self.name}' got {type(value).__name__} instead of string, rendering nothing")
            return ""

        flags = []
        for option in options or {}:
            flag = FlagName.lookup(option)
            if flag is None:
                logging.debug(f"Helper '{self.name}' ignoring unrecognized option '{option}'")
                continue
            flags.append(flag)

        return self.engine.transform(str(value), flags)

    def __call__(self, *args: Any, **options: Any) -> str:
        return self.invoke(args, options)

    def __repr__(self) -> str:
        return f"InflectHelper(name={self.name!r}, strict={self.strict!r}, engine={self.engine!r})"


# ===== SECTION: JINJA2 INTEGRATION =====

def register(
    env: Environment,
    name: str = DEFAULT_HELPER_NAME,
    strict: Optional[bool] = None,
    namespace_separator: str = DEFAULT_NAMESPACE_SEPARATOR,
) -> InflectHelper:
    """
    Registers the helper on a Jinja2 environment as both a filter and a global.

    Args:
        env: The environment to extend
        name: Filter/global name
        strict: Error policy; None follows the environment, strict when its
            `undefined` class is StrictUndefined or a subclass of it
        namespace_separator: Separator for demodulize/deconstantize/to_foreign_key

    Returns:
        InflectHelper: The registered helper
    """
    if strict is None:
        strict = isinstance(env.undefined, type) and issubclass(env.undefined, StrictUndefined)

    helper = InflectHelper(engine=InflectionEngine(namespace_separator), strict=strict, name=name)
    env.filters[name] = helper
    env.globals[name] = helper
    logging.debug(f"Registered {helper!r}")
    return helper


def create_environment(
    strict: bool = False,
    namespace_separator: str = DEFAULT_NAMESPACE_SEPARATOR,
    keep_trailing_newline: bool = False,
) -> Environment:
    """Creates a plain-text Jinja2 environment with the helper registered."""
    env = Environment(
        loader=BaseLoader(),
        autoescape=False,
        undefined=StrictUndefined if strict else Undefined,
        keep_trailing_newline=keep_trailing_newline,
    )
    register(env, strict=strict, namespace_separator=namespace_separator)
    return env


def render_template(
    source: str,
    context: Any = None,
    strict: bool = False,
    namespace_separator: str = DEFAULT_NAMESPACE_SEPARATOR,
) -> str:
    """
    Renders a template string with the helper available as `inflect`.

    A mapping context provides the template variables; any other value is
    bound to `this`.

    Example:
        >>> render_template("{{ inflect(this, to_singular=true) }}", "tests")
        'test'
    """
    env = create_environment(strict=strict, namespace_separator=namespace_separator)

    if context is None:
        context = {}
    elif not isinstance(context, Mapping):
        context = {"this": context}

    return env.from_string(source).render(**context)
