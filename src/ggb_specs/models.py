from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field


class CommandExample(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str = ""
    command: str


class CommandSignature(BaseModel):
    """One catalogue record, as stored in command_signatures.json"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    signature: str
    command_base: str = Field(alias="commandBase", min_length=1)
    description: str = ""
    examples: list[CommandExample] = Field(default_factory=list)
    note: str = ""


@dataclass(frozen=True)
class CommandParameter:
    """A single parameter slot of an overload"""

    type: str
    optional: bool = False
    alternatives: tuple[str, ...] | None = None

    def accepted_types(self) -> tuple[str, ...]:
        return (self.type, *(self.alternatives or ()))


@dataclass(frozen=True)
class CommandSpec:
    """One overload of a command, parsed from a signature branch"""

    name: str
    parameters: tuple[CommandParameter, ...]
    description: str = ""
    signature: str = ""
    examples: tuple[CommandExample, ...] = field(default_factory=tuple)
    note: str = ""

    @property
    def required_count(self) -> int:
        return sum(1 for p in self.parameters if not p.optional)

    @property
    def total_count(self) -> int:
        return len(self.parameters)
