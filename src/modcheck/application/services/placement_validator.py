"""Main facade for placement validation.

PlacementValidator walks the public tree of a parse result, correlates
each node with its raw node and runs the placement checks on the pair.
Composition-based: accepts checks, loader and correlator.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator, Sequence
from typing import TYPE_CHECKING, Self

from modcheck.application.checks import checks_from_config, default_checks
from modcheck.application.correlator import correlate
from modcheck.domain.exceptions.placement import PlacementError

if TYPE_CHECKING:
    from modcheck.domain.model.compiler_api import CompilerApi
    from modcheck.domain.model.configuration import ValidatorConfig
    from modcheck.domain.model.correlation import NodeCorrelation
    from modcheck.domain.model.parse_result import ParseResult
    from modcheck.domain.model.public_node import PublicNode
    from modcheck.domain.model.syntax_node import SyntaxNode
    from modcheck.domain.ports.check import CheckProtocol
    from modcheck.domain.ports.compiler_api_loader import CompilerApiLoaderPort

logger = logging.getLogger(__name__)

Correlator = Callable[["PublicNode", "NodeCorrelation"], "SyntaxNode | None"]

# Keywords accepted in a modifier list
POSSIBLE_MODIFIERS: tuple[str, ...] = (
    "abstract",
    "accessor",
    "async",
    "const",
    "declare",
    "default",
    "export",
    "in",
    "out",
    "override",
    "private",
    "protected",
    "public",
    "readonly",
    "static",
)

# Literal substrings: matches inside identifiers too ("index" has "in").
# Only false positives, each costing a walk; no rule fires without its keyword.
DECORATOR_OR_MODIFIER_PATTERN = re.compile(
    "|".join(re.escape(token) for token in ("@", *POSSIBLE_MODIFIERS))
)


def might_have_placement_errors(text: str) -> bool:
    """Check if text contains "@" or any modifier keyword."""
    return DECORATOR_OR_MODIFIER_PATTERN.search(text) is not None


def walk_public(root: PublicNode) -> Iterator[PublicNode]:
    """Walk public tree depth-first, in document order.

    Args:
        root: Tree root

    Yields:
        Every node, parents before children
    """
    stack: list[PublicNode] = [root]

    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(tuple(node.iter_children())))


class PlacementValidator:
    """Main facade for decorator and modifier placement validation.

    Stateless between validate() calls apart from the shared compiler API
    handle held by the loader. The first violation aborts the walk.

    Factory methods:
    - with_defaults(): All checks
    - from_config(): Checks and loader based on ValidatorConfig

    Example:
        validator = PlacementValidator.with_defaults(loader)
        try:
            await validator.validate(parse_result)
        except PlacementError as e:
            print(e.location, e.reason)
    """

    def __init__(
        self,
        loader: CompilerApiLoaderPort,
        *,
        checks: Sequence[CheckProtocol] = (),
        correlator: Correlator = correlate,
        use_fast_path: bool = True,
    ) -> None:
        """Initialize validator with dependencies.

        Args:
            loader: Compiler API loader
            checks: Checks to run on each node pair, in order
            correlator: Public -> raw node lookup
            use_fast_path: Skip texts without "@" or modifier keywords
        """
        if loader is None:
            raise TypeError("loader must not be None")

        self._loader = loader
        self._checks = tuple(checks)
        self._correlator = correlator
        self._use_fast_path = use_fast_path

    @classmethod
    def with_defaults(cls, loader: CompilerApiLoaderPort) -> Self:
        """Create validator running all checks.

        Args:
            loader: Compiler API loader

        Returns:
            PlacementValidator with default checks
        """
        return cls(loader, checks=default_checks())

    @classmethod
    def from_config(
        cls,
        config: ValidatorConfig,
        loader: CompilerApiLoaderPort,
    ) -> Self:
        """Create validator with checks based on config.

        Args:
            config: Validator configuration
            loader: Compiler API loader

        Returns:
            PlacementValidator configured from config
        """
        return cls(
            loader,
            checks=checks_from_config(config),
            use_fast_path=config.use_fast_path,
        )

    @property
    def checks(self) -> tuple[CheckProtocol, ...]:
        """Checks in run order."""
        return self._checks

    async def validate(self, parse_result: ParseResult) -> None:
        """Validate decorator and modifier placement.

        Args:
            parse_result: Parser output

        Raises:
            PlacementError: On the first violation in document order
            CompilerApiLoadError: If the compiler API cannot be loaded
        """
        if self._use_fast_path and not might_have_placement_errors(parse_result.text):
            logger.debug("No decorator or modifier in source, skipping placement checks")
            return

        api = await self._loader.load()
        self.validate_with_api(parse_result, api)

    def validate_with_api(self, parse_result: ParseResult, api: CompilerApi) -> None:
        """Walk tree synchronously with an already resolved compiler API.

        Args:
            parse_result: Parser output
            api: Compiler API surface

        Raises:
            PlacementError: On the first violation in document order
        """
        source_file = parse_result.source_file
        correlation = parse_result.correlation

        try:
            for public in walk_public(parse_result.ast):
                raw = self._correlator(public, correlation)
                if raw is None:
                    continue

                for check in self._checks:
                    check.check(raw, public, api, source_file)
        except PlacementError as e:
            logger.debug("Placement violation %s at %s: %s", e.kind.name, e.location, e.reason)
            raise
