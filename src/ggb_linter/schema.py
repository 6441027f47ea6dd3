"""
Pydantic models for the linter's outer surfaces: rule configuration coming in,
and the flattened diagnostics handed to the chat UI going out.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .models import LintSeverity

# "off" disables a rule; the other names map onto a severity
_LEVELS: dict[str, LintSeverity | None] = {
    "off": None,
    "warn": LintSeverity.WARNING,
    "warning": LintSeverity.WARNING,
    "error": LintSeverity.ERROR,
    "info": LintSeverity.INFO,
}


def _parse_level(value: Any) -> LintSeverity | None:
    if isinstance(value, LintSeverity):
        return value
    if isinstance(value, str) and value.lower() in _LEVELS:
        return _LEVELS[value.lower()]
    raise ValueError(f"unknown rule level {value!r}; expected one of {', '.join(_LEVELS)}")


class LintConfig(BaseModel):
    """Per-rule settings: ``"off" | "warn" | "error"`` or ``[severity, options]``"""

    rules: dict[str, Any] = Field(default_factory=dict)

    @field_validator("rules")
    @classmethod
    def _check_rules(cls, rules: dict[str, Any]) -> dict[str, Any]:
        for rule_id, setting in rules.items():
            if isinstance(setting, (list, tuple)):
                if not 1 <= len(setting) <= 2:
                    raise ValueError(f"{rule_id}: expected [severity, options]")
                _parse_level(setting[0])
                if len(setting) == 2 and not isinstance(setting[1], dict):
                    raise ValueError(f"{rule_id}: rule options must be a table")
            else:
                try:
                    _parse_level(setting)
                except ValueError as e:
                    raise ValueError(f"{rule_id}: {e}") from e
        return rules

    def severity_for(self, rule_id: str, default: LintSeverity) -> LintSeverity | None:
        """Effective severity of a rule, ``None`` when it is turned off"""
        if rule_id not in self.rules:
            return default
        setting = self.rules[rule_id]
        if isinstance(setting, (list, tuple)):
            return _parse_level(setting[0])
        return _parse_level(setting)

    def options_for(self, rule_id: str) -> dict[str, Any]:
        setting = self.rules.get(rule_id)
        if isinstance(setting, (list, tuple)) and len(setting) > 1:
            return dict(setting[1])
        return {}


class LintError(BaseModel):
    """Flattened diagnostic consumed by the chat UI"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    line: int
    column: int
    message: str
    severity: LintSeverity
    rule_id: str
    suggestions: list[str] | None = None


class LintStats(BaseModel):
    error_count: int = 0
    warning_count: int = 0
    info_count: int = 0
    total: int = 0
    has_errors: bool = False
    has_warnings: bool = False
