"""Modifier placement check.

Rule table follows the compiler's own grammar check for modifiers.
Rules are evaluated in table order for each modifier, modifiers in source
order; the first match raises. Violations are never collected, so for a
node with several bad modifiers the earliest one in source wins.

Predicates read kinds from the loaded surface (`api.syntax_kind`), the same
enumeration the abstract-property check uses.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from modcheck.application.checks._base import BaseCheck
from modcheck.application.location import resolve_location
from modcheck.domain.exceptions.placement import InvalidModifierPlacementError
from modcheck.domain.model.enums import ModifierRule

if TYPE_CHECKING:
    from modcheck.domain.model.compiler_api import CompilerApi
    from modcheck.domain.model.public_node import PublicNode
    from modcheck.domain.model.source_file import SourceFile
    from modcheck.domain.model.syntax_kind import SyntaxKind
    from modcheck.domain.model.syntax_node import SyntaxNode

# (modifier kind, node, parent, api) -> rule applies
RulePredicate = Callable[["SyntaxKind", "SyntaxNode", "SyntaxNode | None", "CompilerApi"], bool]


def _on_type_member(
    modifier: SyntaxKind, node: SyntaxNode, parent: SyntaxNode | None, api: CompilerApi
) -> bool:
    k = api.syntax_kind
    return modifier is not k.READONLY_KEYWORD and node.kind in (
        k.PROPERTY_SIGNATURE,
        k.METHOD_SIGNATURE,
    )


def _on_index_signature(
    modifier: SyntaxKind, node: SyntaxNode, parent: SyntaxNode | None, api: CompilerApi
) -> bool:
    k = api.syntax_kind
    if modifier is k.READONLY_KEYWORD or node.kind is not k.INDEX_SIGNATURE:
        return False
    # static index signatures are allowed in class bodies only
    return modifier is not k.STATIC_KEYWORD or not api.is_class_like(parent)


def _on_type_parameter(
    modifier: SyntaxKind, node: SyntaxNode, parent: SyntaxNode | None, api: CompilerApi
) -> bool:
    k = api.syntax_kind
    return modifier not in (k.IN_KEYWORD, k.OUT_KEYWORD) and node.kind is k.TYPE_PARAMETER


def _misplaced_readonly(
    modifier: SyntaxKind, node: SyntaxNode, parent: SyntaxNode | None, api: CompilerApi
) -> bool:
    k = api.syntax_kind
    return modifier is k.READONLY_KEYWORD and node.kind not in (
        k.PROPERTY_DECLARATION,
        k.PROPERTY_SIGNATURE,
        k.INDEX_SIGNATURE,
        k.PARAMETER,
    )


def _misplaced_declare(
    modifier: SyntaxKind, node: SyntaxNode, parent: SyntaxNode | None, api: CompilerApi
) -> bool:
    return (
        modifier is api.syntax_kind.DECLARE_KEYWORD
        and api.is_class_like(parent)
        and not api.is_property_declaration(node)
    )


def _misplaced_abstract(
    modifier: SyntaxKind, node: SyntaxNode, parent: SyntaxNode | None, api: CompilerApi
) -> bool:
    k = api.syntax_kind
    return modifier is k.ABSTRACT_KEYWORD and node.kind not in (
        k.CLASS_DECLARATION,
        k.CONSTRUCTOR_TYPE,
        k.METHOD_DECLARATION,
        k.PROPERTY_DECLARATION,
        k.GET_ACCESSOR,
        k.SET_ACCESSOR,
    )


def _on_module_element(
    modifier: SyntaxKind, node: SyntaxNode, parent: SyntaxNode | None, api: CompilerApi
) -> bool:
    k = api.syntax_kind
    return (
        modifier in (k.STATIC_KEYWORD, k.PUBLIC_KEYWORD, k.PROTECTED_KEYWORD, k.PRIVATE_KEYWORD)
        and parent is not None
        and parent.kind in (k.MODULE_BLOCK, k.SOURCE_FILE)
    )


def _misplaced_accessor(
    modifier: SyntaxKind, node: SyntaxNode, parent: SyntaxNode | None, api: CompilerApi
) -> bool:
    k = api.syntax_kind
    return modifier is k.ACCESSOR_KEYWORD and node.kind is not k.PROPERTY_DECLARATION


def _misplaced_async(
    modifier: SyntaxKind, node: SyntaxNode, parent: SyntaxNode | None, api: CompilerApi
) -> bool:
    k = api.syntax_kind
    return modifier is k.ASYNC_KEYWORD and node.kind not in (
        k.METHOD_DECLARATION,
        k.FUNCTION_DECLARATION,
        k.FUNCTION_EXPRESSION,
        k.ARROW_FUNCTION,
    )


@dataclass(frozen=True, slots=True)
class ModifierRuleEntry:
    """One row of the modifier rule table.

    Attributes:
        rule: Rule identity
        applies: Predicate deciding whether the modifier violates the rule
        message: Message template, `{modifier}` is the keyword's spelling
    """

    rule: ModifierRule
    applies: RulePredicate
    message: str

    def format_message(self, modifier: str) -> str:
        """Render message for modifier spelling."""
        return self.message.format(modifier=modifier)


# Order matters: first matching row reports
MODIFIER_RULES: tuple[ModifierRuleEntry, ...] = (
    ModifierRuleEntry(
        ModifierRule.TYPE_MEMBER,
        _on_type_member,
        "'{modifier}' modifier cannot appear on a type member",
    ),
    ModifierRuleEntry(
        ModifierRule.INDEX_SIGNATURE,
        _on_index_signature,
        "'{modifier}' modifier cannot appear on an index signature",
    ),
    ModifierRuleEntry(
        ModifierRule.TYPE_PARAMETER,
        _on_type_parameter,
        "'{modifier}' modifier cannot appear on a type parameter",
    ),
    ModifierRuleEntry(
        ModifierRule.READONLY,
        _misplaced_readonly,
        "'readonly' modifier can only appear on a property declaration or index signature.",
    ),
    ModifierRuleEntry(
        ModifierRule.DECLARE,
        _misplaced_declare,
        "'{modifier}' modifier cannot appear on class elements of this kind.",
    ),
    ModifierRuleEntry(
        ModifierRule.ABSTRACT,
        _misplaced_abstract,
        "'{modifier}' modifier can only appear on a class, method, or property declaration.",
    ),
    ModifierRuleEntry(
        ModifierRule.MODULE_ELEMENT,
        _on_module_element,
        "'{modifier}' modifier cannot appear on a module or namespace element.",
    ),
    ModifierRuleEntry(
        ModifierRule.ACCESSOR,
        _misplaced_accessor,
        "'accessor' modifier can only appear on a property declaration.",
    ),
    ModifierRuleEntry(
        ModifierRule.ASYNC,
        _misplaced_async,
        "'async' modifier cannot be used here.",
    ),
)


def find_violated_rule(
    modifier: SyntaxKind,
    node: SyntaxNode,
    parent: SyntaxNode | None,
    api: CompilerApi,
) -> ModifierRuleEntry | None:
    """First rule in table order that the modifier violates on node.

    Args:
        modifier: Keyword modifier kind
        node: Node carrying the modifier
        parent: Node's parent, None for root
        api: Compiler API surface

    Returns:
        Violated rule entry, or None if the modifier is allowed
    """
    for entry in MODIFIER_RULES:
        if entry.applies(modifier, node, parent, api):
            return entry
    return None


class ModifierPlacementCheck(BaseCheck):
    """Rejects keyword modifiers on node kinds that do not accept them.

    Decorators share the modifier list with keywords; they are skipped by
    type test, wherever they sit in the list.
    """

    name = "modifiers"

    def check(
        self,
        raw: SyntaxNode,
        public: PublicNode,
        api: CompilerApi,
        source_file: SourceFile,
    ) -> None:
        if not raw.modifiers:
            return

        parent = source_file.parent_of(raw)

        for modifier in raw.modifiers:
            if api.is_decorator(modifier):
                continue

            entry = find_violated_rule(modifier.kind, raw, parent, api)
            if entry is None:
                continue

            spelling = api.keyword_text(modifier.kind)
            raise InvalidModifierPlacementError(
                resolve_location(modifier, source_file),
                entry.format_message(spelling),
                rule=entry.rule,
                modifier=spelling,
            )
