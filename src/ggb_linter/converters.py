from .models import LintMessage
from .schema import LintError


def lint_message_to_lint_error(message: LintMessage) -> LintError:
    """Convert an internal dataclass message to the external Pydantic shape"""
    return LintError(
        line=message.loc.start.line,
        column=message.loc.start.column,
        message=message.message,
        severity=message.severity,
        rule_id=message.rule_id,
        suggestions=list(message.suggestions) if message.suggestions else None,
    )
