"""
Command signature registry.

Signatures follow the GeoGebra manual notation, e.g.::

    SetValue( <Object>, <Object> ) | SetValue( <List>, <Number>, <Object> )
    SetLineStyle( <Object>, <Number 0|1|2|3|4> )
    SetColor( <Object>, <"Color"> )
    Sequence( <Expression>, <Variable>, ... )

Every top-level ``|`` separates an overload; the registry keeps all overloads
of a command in registration order.
"""

import json
import logging
import re
from collections.abc import Iterable
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType

from pydantic import TypeAdapter, ValidationError

from .models import CommandParameter, CommandSignature, CommandSpec

logger = logging.getLogger(__name__)

CATALOGUE_RESOURCE = "command_signatures.json"

_PARAMETER_GROUP = re.compile(r"\((.*?)\)")
_QUOTED = re.compile(r'^".*"$')

_signature_list = TypeAdapter(list[CommandSignature])


class CatalogueError(ValueError):
    """The signature catalogue could not be read or validated"""


class SpecRegistry:
    """Read-only lookup of command overloads by command name"""

    def __init__(self, signatures: Iterable[CommandSignature]):
        specs: dict[str, list[CommandSpec]] = {}
        for sig in signatures:
            for part in split_top_level_signatures(sig.signature):
                spec = parse_signature_part(part.strip(), sig)
                specs.setdefault(spec.name, []).append(spec)

        self._specs = MappingProxyType({name: tuple(overloads) for name, overloads in specs.items()})
        self._names = tuple(self._specs)
        logger.debug("Loaded %d commands (%d overloads)", len(self._names), sum(len(v) for v in self._specs.values()))

    @classmethod
    def from_records(cls, records: list[dict]) -> "SpecRegistry":
        try:
            signatures = _signature_list.validate_python(records)
        except ValidationError as e:
            raise CatalogueError(f"Invalid command catalogue: {e}") from e
        return cls(signatures)

    @classmethod
    def from_json(cls, path: Path) -> "SpecRegistry":
        try:
            records = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogueError(f"Cannot read command catalogue {path}: {e}") from e
        return cls.from_records(records)

    def has_command(self, command_name: str) -> bool:
        return command_name in self._specs

    def get_command_specs(self, command_name: str) -> tuple[CommandSpec, ...] | None:
        return self._specs.get(command_name)

    def get_all_command_names(self) -> list[str]:
        return list(self._names)

    def find_best_match(self, command_name: str, arg_count: int) -> CommandSpec | None:
        """Overload whose parameter count equals ``arg_count``, else the first one"""
        specs = self.get_command_specs(command_name)
        if not specs:
            return None
        for spec in specs:
            if len(spec.parameters) == arg_count:
                return spec
        return specs[0]

    def get_command_description(self, command_name: str) -> str | None:
        specs = self.get_command_specs(command_name)
        return specs[0].description if specs else None

    @property
    def command_count(self) -> int:
        return len(self._names)


def split_top_level_signatures(signature: str) -> list[str]:
    """Split on ``|`` that are not inside parentheses"""
    parts = []
    current = []
    depth = 0
    for ch in signature:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(0, depth - 1)

        if ch == "|" and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(ch)

    tail = "".join(current)
    if tail.strip():
        parts.append(tail)
    return parts


def split_parameters(param_str: str) -> list[str]:
    """Split a parameter list on commas that are not inside ``<...>``"""
    params = []
    current = []
    depth = 0
    for ch in param_str:
        if ch == "<":
            depth += 1
        elif ch == ">":
            depth -= 1
        elif ch == "," and depth == 0:
            params.append("".join(current).strip())
            current = []
            continue
        current.append(ch)

    tail = "".join(current).strip()
    if tail:
        params.append(tail)
    return params


def parse_parameter(param: str) -> CommandParameter | None:
    if param == "...":
        return CommandParameter(type="any", optional=True)

    cleaned = param.replace("<", "").replace(">", "").strip()
    if not cleaned:
        return None

    if _QUOTED.match(cleaned):
        return CommandParameter(type="String")

    if "|" in cleaned:
        words = cleaned.split()
        if len(words) > 1:
            # "Number 1|2|-1": a type followed by its allowed values
            alternatives = [alt for word in words[1:] for alt in word.split("|") if alt]
            return CommandParameter(type=words[0], alternatives=tuple(alternatives))
        options = [opt for opt in cleaned.split("|") if opt]
        if not options:
            return None
        return CommandParameter(type=options[0], alternatives=tuple(options[1:]))

    return CommandParameter(type=cleaned)


def parse_signature_part(part: str, sig: CommandSignature) -> CommandSpec:
    parameters = []
    match = _PARAMETER_GROUP.search(part)
    if match and match.group(1).strip():
        for param in split_parameters(match.group(1)):
            parsed = parse_parameter(param.strip())
            if parsed:
                parameters.append(parsed)

    return CommandSpec(
        name=sig.command_base,
        parameters=tuple(parameters),
        description=sig.description,
        signature=part,
        examples=tuple(sig.examples),
        note=sig.note,
    )


def load_default_records() -> list[dict]:
    text = resources.files("ggb_specs").joinpath(CATALOGUE_RESOURCE).read_text(encoding="utf-8")
    return json.loads(text)


@lru_cache(maxsize=None)
def get_spec_registry() -> SpecRegistry:
    """The process-wide registry built from the bundled catalogue"""
    return SpecRegistry.from_records(load_default_records())
