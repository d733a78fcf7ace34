"""
Document scans backing cross-reference and singleton-section completion.
"""

import re
from typing import Dict, Iterable, List

from archhint.completion.document import DocumentSnapshot

NODES_KEY = "Nodes"

_NODES_START = re.compile(r"^%s\s*:" % NODES_KEY)
_ELEMENT = re.compile(r"^\s*-\s*([^:\s]+)\s*:")
_ROOT_KEY_START = re.compile(r"^[A-Za-z]")


def collect_node_identifiers(document: DocumentSnapshot) -> List[str]:
    """
    Identifiers declared as `- <id>:` elements of the root `Nodes` block.

    Leaving the block is detected heuristically: any later line starting
    with a letter at column zero ends it.
    """
    identifiers: List[str] = []
    in_nodes = False

    for line in document.lines:
        if _NODES_START.match(line):
            in_nodes = True
            continue

        if not in_nodes:
            continue

        if _ROOT_KEY_START.match(line):
            in_nodes = False
            continue

        match = _ELEMENT.match(line)
        if match:
            identifiers.append(match.group(1))

    return identifiers


def collect_root_usage(document: DocumentSnapshot, root_names: Iterable[str]) -> Dict[str, bool]:
    """Whether each root property is declared anywhere, at any indentation."""
    patterns = {name: re.compile(r"^\s*%s\s*:" % re.escape(name)) for name in root_names}
    usage = {name: False for name in patterns}

    for line in document.lines:
        for name, pattern in patterns.items():
            if not usage[name] and pattern.match(line):
                usage[name] = True

    return usage
