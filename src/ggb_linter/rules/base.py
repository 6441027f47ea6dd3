from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ggb_parser import ASTNode, CommandStatement, Program
from ggb_specs import SpecRegistry

from ..models import LintMessage, LintSeverity


class RuleContext:
    """What a rule sees while the engine walks one program"""

    def __init__(
        self,
        rule_id: str,
        severity: LintSeverity,
        options: dict[str, Any],
        program: Program,
        source: str,
        spec_registry: SpecRegistry,
        messages: list[LintMessage],
    ):
        self.rule_id = rule_id
        self.severity = severity
        self.options = options
        self.spec_registry = spec_registry
        self._program = program
        self._source = source
        self._messages = messages

    def report(
        self,
        node: ASTNode,
        message: str,
        severity: LintSeverity | None = None,
        suggestions: list[str] | None = None,
    ) -> None:
        """Record a diagnostic at ``node``; ``severity`` overrides the configured one"""
        self._messages.append(
            LintMessage(
                rule_id=self.rule_id,
                message=message,
                severity=severity or self.severity,
                loc=node.loc,
                node=node,
                suggestions=tuple(suggestions) if suggestions else None,
            )
        )

    def get_source_code(self) -> str:
        return self._source

    def get_program(self) -> Program:
        return self._program


ProgramCallback = Callable[[Program, RuleContext], None]
StatementCallback = Callable[[CommandStatement, RuleContext], None]


@dataclass(frozen=True)
class RuleVisitor:
    """Callbacks a rule wants invoked during traversal; unset ones are skipped"""

    on_program: ProgramCallback | None = None
    on_command_statement: StatementCallback | None = None
    on_program_exit: ProgramCallback | None = None
    on_command_statement_exit: StatementCallback | None = None


class BaseRule(ABC):
    """Abstract base class for all linting rules."""

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique rule identifier (e.g., 'no-unknown-command')."""
        pass

    @property
    @abstractmethod
    def severity(self) -> LintSeverity:
        """Default severity for this rule."""
        pass

    @property
    def category(self) -> str:
        """One of 'error', 'warning', 'suggestion'."""
        return "warning"

    @property
    def fixable(self) -> bool:
        return False

    @property
    def description(self) -> str:
        """Detailed description of what this rule checks."""
        return ""

    @abstractmethod
    def create(self, context: RuleContext) -> RuleVisitor:
        """Build the visitor the engine will drive for one lint call."""
        pass
