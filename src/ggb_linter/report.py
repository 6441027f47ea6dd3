from .models import LintResult, LintSeverity
from .schema import LintError

SEVERITY_ICONS = {
    LintSeverity.ERROR: "✗",
    LintSeverity.WARNING: "⚠",
    LintSeverity.INFO: "ℹ",
}


def format_lint_results(result: LintResult) -> str:
    """Render a LintResult as a numbered, human-readable report"""
    lines = []
    if result.file_path:
        lines.append(f"File: {result.file_path}")

    if not result.messages:
        lines.append("✓ No problems found")
        return "\n".join(lines)

    lines.append(f"Found {result.error_count} error(s), {result.warning_count} warning(s):")
    lines.append("")
    for index, msg in enumerate(result.messages, start=1):
        start = msg.loc.start
        lines.append(f"{index}. {SEVERITY_ICONS[msg.severity]} [{msg.rule_id}] {msg.message}")
        lines.append(f"   at line {start.line}, column {start.column}")
        if msg.suggestions:
            lines.append(f"   suggestions: {', '.join(msg.suggestions)}")
    return "\n".join(lines)


def format_lint_errors(errors: list[LintError]) -> str:
    """One entry per error, with suggestions on an indented second line"""
    entries = []
    for error in errors:
        entry = f"{SEVERITY_ICONS[error.severity]} [{error.rule_id}] {error.message}"
        if error.suggestions:
            entry += f"\n   suggestions: {', '.join(error.suggestions)}"
        entries.append(entry)
    return "\n".join(entries)
