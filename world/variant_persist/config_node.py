"""
Save-file section codec.

The host persists game state as a tree of named nodes, each holding
ordered "name = value" lines:

    SCENARIO
    {
        name = VariantPersistScenario
        scene = 6
        part:wingA = red
    }

Value names may repeat within a node, so values are kept as an ordered
list of pairs rather than a dict.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

_BRACES = re.compile(r"([{}])")


class ConfigNodeError(ValueError):
    """Raised when save-file text is malformed or a value cannot be written as text."""
    pass


# Text the line grammar treats as syntax
_RESERVED_IN_TEXT = ("{", "}", "//", "\n", "\r")


def check_value(name: str, value: str) -> None:
    """
    Check that a value line can be written and read back unchanged.

    Names and values may not contain braces, "//" or line breaks, nor
    start or end with whitespace. Names may not contain "=".

    Raises:
        ConfigNodeError: If the pair would not survive a write and parse
    """
    for label, text in (("name", name), ("value", value)):
        for token in _RESERVED_IN_TEXT:
            if token in text:
                raise ConfigNodeError(f"Value {label} {text!r} may not contain {token!r}")
        if text != text.strip():
            raise ConfigNodeError(f"Value {label} {text!r} has leading or trailing whitespace")
    if "=" in name:
        raise ConfigNodeError(f"Value name {name!r} may not contain '='")


@dataclass
class ConfigNode:
    """A named node with ordered values and child nodes."""
    name: str = ""
    values: List[Tuple[str, str]] = field(default_factory=list)
    nodes: List["ConfigNode"] = field(default_factory=list)

    # -------------------------------------------------------------------------
    # Values
    # -------------------------------------------------------------------------

    def add_value(self, name: str, value: str) -> None:
        check_value(name, value)
        self.values.append((name, value))

    def get_value(self, name: str) -> Optional[str]:
        """Return the first value called name, or None."""
        for value_name, value in self.values:
            if value_name == name:
                return value
        return None

    def get_values(self, name: str) -> List[str]:
        return [value for value_name, value in self.values if value_name == name]

    def has_value(self, name: str) -> bool:
        return any(value_name == name for value_name, _ in self.values)

    def set_value(self, name: str, value: str) -> None:
        """Replace the first value called name, or append it."""
        check_value(name, value)
        for i, (value_name, _) in enumerate(self.values):
            if value_name == name:
                self.values[i] = (name, value)
                return
        self.values.append((name, value))

    def remove_values(self, name: str) -> int:
        """Remove every value called name. Returns how many were removed."""
        before = len(self.values)
        self.values = [(n, v) for n, v in self.values if n != name]
        return before - len(self.values)

    # -------------------------------------------------------------------------
    # Child nodes
    # -------------------------------------------------------------------------

    def add_node(self, node_or_name) -> "ConfigNode":
        """Append a child node (or a new empty one by name) and return it."""
        node = node_or_name if isinstance(node_or_name, ConfigNode) else ConfigNode(node_or_name)
        self.nodes.append(node)
        return node

    def get_node(self, name: str) -> Optional["ConfigNode"]:
        for node in self.nodes:
            if node.name == name:
                return node
        return None

    def get_nodes(self, name: str) -> List["ConfigNode"]:
        return [node for node in self.nodes if node.name == name]

    def remove_node(self, node: "ConfigNode") -> bool:
        """Remove a specific child node (by identity). Returns True if it was present."""
        for i, child in enumerate(self.nodes):
            if child is node:
                del self.nodes[i]
                return True
        return False


# =============================================================================
# PARSING
# =============================================================================

def parse_config_node(text: str) -> ConfigNode:
    """
    Parse save-file text into a root node.

    The root has an empty name and holds the top-level values and nodes.
    Blank lines and // comments are ignored. A value line splits at the
    first '='. A line without '=' names a node whose '{' may follow on the
    same line or the next.

    Raises:
        ConfigNodeError: On unbalanced braces or a node name without a body
    """
    root = ConfigNode("")
    stack = [root]
    pending_name: Optional[str] = None
    pending_line = 0

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("//", 1)[0]
        for token in _BRACES.split(line):
            token = token.strip()
            if not token:
                continue

            if token == "{":
                if pending_name is None:
                    raise ConfigNodeError(f"Line {lineno}: '{{' without a node name")
                stack.append(stack[-1].add_node(pending_name))
                pending_name = None
                continue

            if pending_name is not None:
                raise ConfigNodeError(
                    f"Line {pending_line}: node '{pending_name}' has no opening brace"
                )

            if token == "}":
                if len(stack) == 1:
                    raise ConfigNodeError(f"Line {lineno}: unexpected '}}'")
                stack.pop()
            elif "=" in token:
                name, value = token.split("=", 1)
                stack[-1].add_value(name.strip(), value.strip())
            else:
                pending_name = token
                pending_line = lineno

    if pending_name is not None:
        raise ConfigNodeError(f"Line {pending_line}: node '{pending_name}' has no opening brace")
    if len(stack) > 1:
        raise ConfigNodeError(f"Unclosed node '{stack[-1].name}' at end of input")

    return root


# =============================================================================
# WRITING
# =============================================================================

def _write_contents(node: ConfigNode, depth: int, lines: List[str]) -> None:
    indent = "\t" * depth
    for name, value in node.values:
        check_value(name, value)
        lines.append(f"{indent}{name} = {value}")
    for child in node.nodes:
        _write_node(child, depth, lines)


def _write_node(node: ConfigNode, depth: int, lines: List[str]) -> None:
    indent = "\t" * depth
    lines.append(f"{indent}{node.name}")
    lines.append(f"{indent}{{")
    _write_contents(node, depth + 1, lines)
    lines.append(f"{indent}}}")


def write_config_node(node: ConfigNode) -> str:
    """
    Serialize a node to save-file text.

    A root node (empty name) writes only its contents.
    """
    lines: List[str] = []
    if node.name:
        _write_node(node, 0, lines)
    else:
        _write_contents(node, 0, lines)
    return "\n".join(lines) + "\n" if lines else ""
