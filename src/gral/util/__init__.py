from gral.util.geometry import Insets2D, Location, Orientation
from gral.util.math_utils import almost_equal, ceil, floor, is_calculatable, limit, magnitude
from gral.util.tokenizer import Rule, StatefulTokenizer, Token

__all__ = [
    "Insets2D",
    "Location",
    "Orientation",
    "Rule",
    "StatefulTokenizer",
    "Token",
    "almost_equal",
    "ceil",
    "floor",
    "is_calculatable",
    "limit",
    "magnitude",
]
