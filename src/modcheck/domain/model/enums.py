"""Domain enumerations."""

from enum import Enum, auto


class ViolationKind(Enum):
    """Kind of placement violation."""

    INVALID_DECORATOR_PLACEMENT = auto()
    ABSTRACT_PROPERTY_WITH_INITIALIZER = auto()
    INVALID_MODIFIER_PLACEMENT = auto()


class ModifierRule(Enum):
    """Modifier placement rule, in evaluation order.

    Values are the rule numbers, 1 to 9.
    """

    TYPE_MEMBER = 1  # not readonly, on property/method signature
    INDEX_SIGNATURE = 2  # not readonly, on index signature (static allowed in class)
    TYPE_PARAMETER = 3  # not in/out, on type parameter
    READONLY = 4  # readonly outside property/index signature/parameter
    DECLARE = 5  # declare on non-property class element
    ABSTRACT = 6  # abstract outside class/method/property/accessor
    MODULE_ELEMENT = 7  # static/visibility at module or namespace level
    ACCESSOR = 8  # accessor outside property declaration
    ASYNC = 9  # async outside method/function
