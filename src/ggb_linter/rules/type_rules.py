from ggb_parser import (
    BooleanLiteral,
    CommandStatement,
    Expression,
    FunctionCall,
    Identifier,
    ListLiteral,
    NumberLiteral,
    StringLiteral,
)
from ggb_specs import CommandSpec

from ..models import LintSeverity
from .base import BaseRule, RuleContext, RuleVisitor

GEOMETRIC_TYPES = {"Point", "Line", "Vector", "Polygon", "Conic", "Function"}

_INFERRED_TYPES = {
    NumberLiteral: "Number",
    StringLiteral: "String",
    BooleanLiteral: "Boolean",
    Identifier: "Object",
    ListLiteral: "List",
    FunctionCall: "Object",
}


class CorrectArgTypesRule(BaseRule):
    """Checks argument count and literal argument types against the best overload"""

    @property
    def rule_id(self) -> str:
        return "correct-arg-types"

    @property
    def severity(self) -> LintSeverity:
        return LintSeverity.WARNING

    @property
    def description(self) -> str:
        return "Checks that command arguments match the command signature"

    def create(self, context: RuleContext) -> RuleVisitor:
        return RuleVisitor(on_command_statement=self._check_statement)

    def _check_statement(self, node: CommandStatement, ctx: RuleContext):
        # Unknown commands are no-unknown-command's business
        spec = ctx.spec_registry.find_best_match(node.command_name.name, len(node.arguments))
        if spec is None:
            return

        self._check_argument_count(node, spec, ctx)
        self._check_argument_types(node, spec, ctx)

    def _check_argument_count(self, node: CommandStatement, spec: CommandSpec, ctx: RuleContext):
        actual = len(node.arguments)
        if spec.required_count <= actual <= spec.total_count:
            return

        name = node.command_name.name
        ctx.report(
            node=node.command_name,
            message=f'Command "{name}" expects {spec.total_count} argument(s) but got {actual}',
            suggestions=[f"Expected signature: {spec.signature}", spec.description],
        )

    def _check_argument_types(self, node: CommandStatement, spec: CommandSpec, ctx: RuleContext):
        for index, arg in enumerate(node.arguments):
            if index >= len(spec.parameters):
                break  # already covered by the count check

            expected = spec.parameters[index]
            actual = infer_argument_type(arg)
            if any(is_type_compatible(actual, t) for t in expected.accepted_types()):
                continue

            ctx.report(
                node=arg,
                message=(
                    f"Argument {index + 1} of \"{node.command_name.name}\" has the wrong type: "
                    f"expected {expected.type}, got {actual}"
                ),
                severity=LintSeverity.WARNING,
                suggestions=[f"This argument should be of type {expected.type}"],
            )


def infer_argument_type(arg: Expression) -> str:
    return _INFERRED_TYPES.get(type(arg), "Unknown")


def is_type_compatible(actual: str, expected: str) -> bool:
    if actual == expected:
        return True
    # an identifier or nested call may refer to anything at runtime
    if actual == "Object":
        return True
    if expected == "Object" and actual != "Unknown":
        return True
    # variadic "..." slots
    if expected == "any":
        return True
    # "Number", "View Number", "Radius Number", ...
    if "Number" in expected and actual == "Number":
        return True
    if {actual, expected} == {"Text", "String"}:
        return True
    return expected in GEOMETRIC_TYPES and actual == "Object"


def describe_parameters(spec: CommandSpec) -> str:
    """Human-readable list of the parameters of one overload"""
    parts = []
    for index, param in enumerate(spec.parameters, start=1):
        text = param.type
        if param.alternatives:
            text += f"({'|'.join(param.alternatives)})"
        if param.optional:
            text += " (optional)"
        parts.append(f"{index}. {text}")
    return ", ".join(parts)
