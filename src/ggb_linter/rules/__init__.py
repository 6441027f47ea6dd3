from .base import BaseRule, RuleContext, RuleVisitor
from .command_rules import NoUnknownCommandRule, find_similar_commands, levenshtein_distance
from .type_rules import CorrectArgTypesRule, describe_parameters, infer_argument_type, is_type_compatible

__all__ = [
    "BaseRule",
    "RuleContext",
    "RuleVisitor",
    "NoUnknownCommandRule",
    "CorrectArgTypesRule",
    "find_similar_commands",
    "levenshtein_distance",
    "describe_parameters",
    "infer_argument_type",
    "is_type_compatible",
]
