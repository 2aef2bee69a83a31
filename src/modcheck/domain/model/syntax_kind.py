"""Raw syntax tree node kinds."""

from enum import Enum, auto


class SyntaxKind(Enum):
    """Kind of a raw syntax tree node.

    Closed enumeration: every node produced by the parser carries one of these.
    """

    # Modifier keywords
    ABSTRACT_KEYWORD = auto()
    ACCESSOR_KEYWORD = auto()
    ASYNC_KEYWORD = auto()
    CONST_KEYWORD = auto()
    DECLARE_KEYWORD = auto()
    DEFAULT_KEYWORD = auto()
    EXPORT_KEYWORD = auto()
    IN_KEYWORD = auto()
    OUT_KEYWORD = auto()
    OVERRIDE_KEYWORD = auto()
    PRIVATE_KEYWORD = auto()
    PROTECTED_KEYWORD = auto()
    PUBLIC_KEYWORD = auto()
    READONLY_KEYWORD = auto()
    STATIC_KEYWORD = auto()

    # Names and expressions
    IDENTIFIER = auto()
    NUMERIC_LITERAL = auto()
    STRING_LITERAL = auto()
    CALL_EXPRESSION = auto()
    PROPERTY_ACCESS_EXPRESSION = auto()
    FUNCTION_EXPRESSION = auto()
    ARROW_FUNCTION = auto()
    CLASS_EXPRESSION = auto()
    DECORATOR = auto()

    # Type nodes
    TYPE_REFERENCE = auto()
    TYPE_LITERAL = auto()
    CONSTRUCTOR_TYPE = auto()
    TYPE_PARAMETER = auto()

    # Class and type members
    PROPERTY_DECLARATION = auto()
    PROPERTY_SIGNATURE = auto()
    METHOD_DECLARATION = auto()
    METHOD_SIGNATURE = auto()
    INDEX_SIGNATURE = auto()
    CONSTRUCTOR = auto()
    GET_ACCESSOR = auto()
    SET_ACCESSOR = auto()
    CLASS_STATIC_BLOCK = auto()
    PARAMETER = auto()

    # Statements and declarations
    BLOCK = auto()
    EXPRESSION_STATEMENT = auto()
    VARIABLE_STATEMENT = auto()
    VARIABLE_DECLARATION = auto()
    FUNCTION_DECLARATION = auto()
    CLASS_DECLARATION = auto()
    INTERFACE_DECLARATION = auto()
    TYPE_ALIAS_DECLARATION = auto()
    ENUM_DECLARATION = auto()
    MODULE_DECLARATION = auto()
    MODULE_BLOCK = auto()
    IMPORT_DECLARATION = auto()
    EXPORT_ASSIGNMENT = auto()

    SOURCE_FILE = auto()


# Keyword kinds accepted in a modifier list (decorators excluded)
MODIFIER_KINDS: tuple[SyntaxKind, ...] = (
    SyntaxKind.ABSTRACT_KEYWORD,
    SyntaxKind.ACCESSOR_KEYWORD,
    SyntaxKind.ASYNC_KEYWORD,
    SyntaxKind.CONST_KEYWORD,
    SyntaxKind.DECLARE_KEYWORD,
    SyntaxKind.DEFAULT_KEYWORD,
    SyntaxKind.EXPORT_KEYWORD,
    SyntaxKind.IN_KEYWORD,
    SyntaxKind.OUT_KEYWORD,
    SyntaxKind.OVERRIDE_KEYWORD,
    SyntaxKind.PRIVATE_KEYWORD,
    SyntaxKind.PROTECTED_KEYWORD,
    SyntaxKind.PUBLIC_KEYWORD,
    SyntaxKind.READONLY_KEYWORD,
    SyntaxKind.STATIC_KEYWORD,
)


def is_modifier_kind(kind: SyntaxKind) -> bool:
    """Check if kind is one of the modifier keywords."""
    return kind in _MODIFIER_KIND_SET


_MODIFIER_KIND_SET = frozenset(MODIFIER_KINDS)
