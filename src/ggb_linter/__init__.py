"""
GeoGebra Lint - static checks for GeoGebra commands before they are executed

This package provides:
- A rule engine driving AST visitors over parsed scripts
- Built-in rules: no-unknown-command, correct-arg-types
- lint_command() and friends for the chat layer
"""

__version__ = "0.1.0"

from .api import create_engine, get_lint_stats, has_errors, lint_command, lint_commands
from .engine import PARSE_ERROR_RULE_ID, RuleEngine
from .models import LintMessage, LintResult, LintSeverity
from .registry import RuleRegistry, registry
from .report import format_lint_errors, format_lint_results
from .rules import BaseRule, CorrectArgTypesRule, NoUnknownCommandRule, RuleContext, RuleVisitor
from .schema import LintConfig, LintError, LintStats

__all__ = [
    "RuleEngine",
    "PARSE_ERROR_RULE_ID",
    "LintMessage",
    "LintResult",
    "LintSeverity",
    "LintConfig",
    "LintError",
    "LintStats",
    "RuleRegistry",
    "registry",
    "BaseRule",
    "RuleContext",
    "RuleVisitor",
    "NoUnknownCommandRule",
    "CorrectArgTypesRule",
    "create_engine",
    "lint_command",
    "lint_commands",
    "has_errors",
    "get_lint_stats",
    "format_lint_results",
    "format_lint_errors",
]
