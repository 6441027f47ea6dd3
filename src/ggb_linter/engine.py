import logging

from ggb_parser import ASTNode, CommandStatement, Program, SourceLocation, iter_children, try_parse
from ggb_specs import SpecRegistry, get_spec_registry

from .models import LintMessage, LintResult, LintSeverity
from .rules.base import BaseRule, RuleContext, RuleVisitor
from .schema import LintConfig

logger = logging.getLogger(__name__)

PARSE_ERROR_RULE_ID = "parse-error"


class RuleEngine:
    """Core engine for GeoGebra script linting"""

    def __init__(self, config: LintConfig | None = None, spec_registry: SpecRegistry | None = None):
        self.config = config or LintConfig()
        self.spec_registry = spec_registry or get_spec_registry()
        self._rules: dict[str, BaseRule] = {}

    def register_rule(self, rule: BaseRule):
        """Register a rule; a later rule with the same id replaces the earlier one"""
        self._rules[rule.rule_id] = rule
        logger.debug("Registered rule %s", rule.rule_id)

    def register_rules(self, rules: list[BaseRule]):
        for rule in rules:
            self.register_rule(rule)

    def set_config(self, config: LintConfig):
        self.config = config

    def get_rules(self) -> dict[str, BaseRule]:
        return dict(self._rules)

    @property
    def rule_count(self) -> int:
        return len(self._rules)

    def lint(self, source: str, file_path: str | None = None) -> LintResult:
        """Parse ``source`` once and run every enabled rule over it"""
        result = LintResult(source=source, file_path=file_path)

        parsed = try_parse(source)
        if not parsed.ok:
            error = parsed.error
            logger.info("Parse failed: %s", error)
            position = error.position
            result.messages.append(
                LintMessage(
                    rule_id=PARSE_ERROR_RULE_ID,
                    message=str(error),
                    severity=LintSeverity.ERROR,
                    loc=SourceLocation(position, position),
                )
            )
            return result

        for rule_id, rule in self._rules.items():
            severity = self.config.severity_for(rule_id, rule.severity)
            if severity is None:
                logger.debug("Rule %s is off", rule_id)
                continue

            context = RuleContext(
                rule_id=rule_id,
                severity=severity,
                options=self.config.options_for(rule_id),
                program=parsed.program,
                source=source,
                spec_registry=self.spec_registry,
                messages=result.messages,
            )
            _walk(parsed.program, rule.create(context), context)

        logger.debug(
            "Linted %d statement(s): %d error(s), %d warning(s)",
            len(parsed.program.body),
            result.error_count,
            result.warning_count,
        )
        return result


def _walk(node: ASTNode, visitor: RuleVisitor, context: RuleContext):
    """Depth-first traversal calling the visitor on enter and on exit"""
    if isinstance(node, Program):
        if visitor.on_program:
            visitor.on_program(node, context)
    elif isinstance(node, CommandStatement):
        if visitor.on_command_statement:
            visitor.on_command_statement(node, context)

    for child in iter_children(node):
        _walk(child, visitor, context)

    if isinstance(node, Program):
        if visitor.on_program_exit:
            visitor.on_program_exit(node, context)
    elif isinstance(node, CommandStatement):
        if visitor.on_command_statement_exit:
            visitor.on_command_statement_exit(node, context)
