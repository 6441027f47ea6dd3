from ggb_parser import LITERAL_TYPES, CommandStatement

from ..models import LintSeverity
from .base import BaseRule, RuleContext, RuleVisitor

MAX_SUGGESTION_DISTANCE = 3
MAX_SUGGESTIONS = 3


class NoUnknownCommandRule(BaseRule):
    """Flags commands that are not in the signature catalogue.

    ``A = {1, 2, 3}``, ``A = (0, 0, 3)``, ``x = 5`` and ``A = B`` parse as a
    statement named after the assignment target; those are variable
    assignments and are never checked.
    """

    @property
    def rule_id(self) -> str:
        return "no-unknown-command"

    @property
    def severity(self) -> LintSeverity:
        return LintSeverity.ERROR

    @property
    def category(self) -> str:
        return "error"

    @property
    def description(self) -> str:
        return "Detects commands that do not exist in GeoGebra"

    def create(self, context: RuleContext) -> RuleVisitor:
        return RuleVisitor(on_command_statement=self._check_statement)

    def _check_statement(self, node: CommandStatement, ctx: RuleContext):
        if is_plain_assignment(node):
            return

        name = node.command_name.name
        if ctx.spec_registry.has_command(name):
            return

        suggestions = find_similar_commands(name, ctx.spec_registry.get_all_command_names())
        ctx.report(
            node=node.command_name,
            message=f'Unknown command "{name}"',
            suggestions=suggestions or None,
        )


def is_plain_assignment(node: CommandStatement) -> bool:
    return len(node.arguments) == 1 and isinstance(node.arguments[0], LITERAL_TYPES)


def find_similar_commands(
    target: str, commands: list[str], max_distance: int = MAX_SUGGESTION_DISTANCE
) -> list[str]:
    """Known names within ``max_distance`` edits of ``target``, closest first"""
    target = target.lower()
    scored = []
    for command in commands:
        distance = levenshtein_distance(target, command.lower())
        if distance <= max_distance:
            scored.append((distance, command))

    # sort() is stable, so equal distances keep catalogue order
    scored.sort(key=lambda item: item[0])
    return [command for _, command in scored[:MAX_SUGGESTIONS]]


def levenshtein_distance(a: str, b: str) -> int:
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + cost,  # substitution
                )
            )
        previous = current
    return previous[-1]
