"""
Entry points for the chat layer: lint the commands extracted from an
assistant message and decide which of them may be executed.
"""

import logging

from .converters import lint_message_to_lint_error
from .engine import RuleEngine
from .models import LintSeverity
from .registry import registry
from .schema import LintConfig, LintError, LintStats

logger = logging.getLogger(__name__)

INTERNAL_ERROR_RULE_ID = "internal-error"

DEFAULT_CONFIG = LintConfig(
    rules={
        "no-unknown-command": "error",
        "correct-arg-types": "warn",
    }
)


def create_engine(config: LintConfig | None = None) -> RuleEngine:
    """Engine with every built-in rule registered"""
    engine = RuleEngine(config or DEFAULT_CONFIG)
    engine.register_rules(registry.get_all_rules())
    return engine


def lint_command(command: str, config: LintConfig | None = None) -> list[LintError]:
    """Lint one command string.

    Never raises: if the engine itself fails, the failure comes back as a
    single error so the caller simply does not execute the command.
    """
    if not command or not command.strip():
        return []

    try:
        result = create_engine(config).lint(command)
    except Exception as e:
        logger.exception("Linting failed for %r", command)
        return [
            LintError(
                line=1,
                column=1,
                message=f"Linter failure: {e}",
                severity=LintSeverity.ERROR,
                rule_id=INTERNAL_ERROR_RULE_ID,
            )
        ]

    return [lint_message_to_lint_error(msg) for msg in result.messages]


def lint_commands(commands: list[str], config: LintConfig | None = None) -> dict[str, list[LintError]]:
    """Lint each command separately; only commands with findings are returned"""
    results = {}
    for index, command in enumerate(commands):
        errors = lint_command(command, config)
        if errors:
            results[f"command-{index}"] = errors
    return results


def has_errors(command: str, config: LintConfig | None = None) -> bool:
    return any(e.severity == LintSeverity.ERROR for e in lint_command(command, config))


def get_lint_stats(errors: list[LintError]) -> LintStats:
    error_count = sum(1 for e in errors if e.severity == LintSeverity.ERROR)
    warning_count = sum(1 for e in errors if e.severity == LintSeverity.WARNING)
    info_count = sum(1 for e in errors if e.severity == LintSeverity.INFO)
    return LintStats(
        error_count=error_count,
        warning_count=warning_count,
        info_count=info_count,
        total=len(errors),
        has_errors=error_count > 0,
        has_warnings=warning_count > 0,
    )
