"""
Action tree model for the routerman REPL.

Menu entries are immutable ``ActionNode`` objects kept in an ``ActionTree``
arena and addressed by key; a node lists its children by key, so the tree is
a plain acyclic graph built once at startup.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Mapping, Optional


class Navigation(Enum):
    """What the interpreter does after a behavior returns."""
    NEXT = "next"      # Offer the node's children (or return to the parent)
    BACK = "back"      # Leave the current menu level
    REPEAT = "repeat"  # Re-render the current level without descending


Behavior = Callable[..., Navigation]


@dataclass(frozen=True)
class ActionNode:
    """One menu entry."""
    key: str
    name: str
    children: tuple[str, ...] = ()
    requires_context: tuple[str, ...] = ()
    behavior: Optional[Behavior] = None

    def __post_init__(self):
        object.__setattr__(self, "children", tuple(self.children))
        object.__setattr__(self, "requires_context", tuple(self.requires_context))

    def is_available(self, ctx: Mapping[str, int]) -> bool:
        """True when every required context key is bound."""
        return all(key in ctx for key in self.requires_context)


class ActionTree:
    """Arena of action nodes with a designated root and quit node."""

    def __init__(self, nodes: Iterable[ActionNode], root: str = "root", quit_key: str = "quit"):
        self._nodes: dict[str, ActionNode] = {}
        for node in nodes:
            if node.key in self._nodes:
                raise ValueError(f"Duplicate action key: {node.key}")
            self._nodes[node.key] = node

        if root not in self._nodes:
            raise ValueError(f"Root action '{root}' is not defined")
        self.root_key = root
        self.quit_key = quit_key

        for node in self._nodes.values():
            for child in node.children:
                if child not in self._nodes:
                    raise ValueError(f"Action '{node.key}' references unknown child '{child}'")
        self._check_acyclic()

    def _check_acyclic(self) -> None:
        visiting, done = set(), set()

        def visit(key: str, path: list[str]) -> None:
            if key in done:
                return
            if key in visiting:
                raise ValueError(f"Action cycle: {' -> '.join(path + [key])}")
            visiting.add(key)
            for child in self._nodes[key].children:
                visit(child, path + [key])
            visiting.discard(key)
            done.add(key)

        for key in self._nodes:
            visit(key, [])

    def __getitem__(self, key: str) -> ActionNode:
        return self._nodes[key]

    def __contains__(self, key: str) -> bool:
        return key in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def root(self) -> ActionNode:
        return self._nodes[self.root_key]

    def children(self, key: str) -> list[ActionNode]:
        return [self._nodes[child] for child in self._nodes[key].children]

    def get_valid_children(self, key: str, ctx: Mapping[str, int]) -> list[ActionNode]:
        """Children of ``key`` whose required context keys are all bound, in order."""
        return [child for child in self.children(key) if child.is_available(ctx)]

    def is_quit(self, node: ActionNode) -> bool:
        return node.key == self.quit_key
