import re

# inline `ggb:Command(...)` spans and ```geogebra fenced blocks
_INLINE_COMMAND = re.compile(r"`ggb:([^`]+)`")
_CODE_BLOCK = re.compile(r"```geogebra\n(.*?)```", re.DOTALL)


def extract_commands(text: str) -> list[str]:
    """Pull GeoGebra commands out of assistant chat text, inline spans first"""
    if not text:
        return []

    commands = [m.group(1).strip() for m in _INLINE_COMMAND.finditer(text)]
    for block in _CODE_BLOCK.finditer(text):
        commands.extend(line.strip() for line in block.group(1).splitlines() if line.strip())
    return commands
