from .rules.base import BaseRule


class RuleRegistry:
    """Registry for managing and loading linting rules"""

    def __init__(self):
        self._rules: dict[str, BaseRule] = {}
        self._load_builtin_rules()

    def register(self, rule: BaseRule):
        self._rules[rule.rule_id] = rule

    def get_rule(self, rule_id: str) -> BaseRule | None:
        return self._rules.get(rule_id)

    def get_all_rules(self) -> list[BaseRule]:
        return list(self._rules.values())

    def _load_builtin_rules(self):
        from .rules.command_rules import NoUnknownCommandRule
        from .rules.type_rules import CorrectArgTypesRule

        self.register(NoUnknownCommandRule())
        self.register(CorrectArgTypesRule())


registry = RuleRegistry()
