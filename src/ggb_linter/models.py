from dataclasses import dataclass, field
from enum import Enum

from ggb_parser import ASTNode, SourceLocation


class LintSeverity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class LintMessage:
    """A single diagnostic produced by a rule (or by the parser)"""

    rule_id: str
    message: str
    severity: LintSeverity
    loc: SourceLocation
    node: ASTNode | None = None
    suggestions: tuple[str, ...] | None = None


@dataclass
class LintResult:
    """Everything one ``RuleEngine.lint`` call found in one source"""

    source: str
    messages: list[LintMessage] = field(default_factory=list)
    file_path: str | None = None

    @property
    def error_count(self) -> int:
        return self._count(LintSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return self._count(LintSeverity.WARNING)

    @property
    def info_count(self) -> int:
        return self._count(LintSeverity.INFO)

    def _count(self, severity: LintSeverity) -> int:
        return sum(1 for m in self.messages if m.severity == severity)
