"""strinflect - Deterministic string case and inflection pipeline"""

__version__ = "0.1.0"

from .engine import CANONICAL_FLAGS
from .engine import CANONICAL_ORDER
from .engine import InflectionEngine
from .engine import transform
from .flags import FlagName
from .helper import InflectHelper
from .helper import register
from .helper import render_template


__all__ = [
    "CANONICAL_FLAGS",
    "CANONICAL_ORDER",
    "FlagName",
    "InflectHelper",
    "InflectionEngine",
    "register",
    "render_template",
    "transform",
]
