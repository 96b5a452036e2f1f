from __future__ import annotations

from dataclasses import dataclass, field
import itertools
from typing import Iterator, Literal, Mapping, Union


NodeKind = Literal["svg", "g", "path", "rect", "text"]
AttrValue = Union[str, int, float]

DEFAULT_LABEL_PREFIX = "vf-"

_NODE_KEYS = itertools.count(1)


def next_node_key() -> int:
    """Process-wide creation key; strictly increasing, never reused."""

    return next(_NODE_KEYS)


def namespaced(label: str, prefix: str = DEFAULT_LABEL_PREFIX) -> str:
    return f"{prefix}{label}"


@dataclass(eq=False)
class SceneNode:
    """One drawable or grouping unit of the scene tree.

    Nodes compare by identity. `attributes` holds SVG-style hyphenated
    presentation keys; geometry lives there too (`d`, `x`, `width`, ...).
    """

    kind: NodeKind
    attributes: dict[str, AttrValue] = field(default_factory=dict)
    children: list["SceneNode"] = field(default_factory=list)
    node_id: str | None = None
    category: str | None = None
    text: str | None = None
    key: int = field(default_factory=next_node_key)

    def walk(self) -> Iterator["SceneNode"]:
        """Depth-first, parents before children, in insertion order."""

        yield self
        for child in self.children:
            yield from child.walk()


class SceneRegistry:
    """Identifier -> node and category -> nodes lookups.

    Both mappings are derived from the tree; `rebuild` recomputes them from
    scratch and must agree with incremental `register` calls.
    """

    def __init__(self) -> None:
        self._by_id: dict[str, SceneNode] = {}
        self._by_category: dict[str, list[SceneNode]] = {}

    @property
    def by_id(self) -> Mapping[str, SceneNode]:
        return self._by_id

    @property
    def by_category(self) -> Mapping[str, list[SceneNode]]:
        return self._by_category

    def register(self, node: SceneNode) -> None:
        if node.node_id:
            self._by_id[node.node_id] = node
        if node.category:
            self._by_category.setdefault(node.category, []).append(node)

    def get(self, node_id: str) -> SceneNode | None:
        return self._by_id.get(node_id)

    def category(self, category: str) -> list[SceneNode]:
        return list(self._by_category.get(category, ()))

    def clear(self) -> None:
        self._by_id = {}
        self._by_category = {}

    def rebuild(self, root: SceneNode) -> None:
        self.clear()
        for node in root.walk():
            self.register(node)

    def __len__(self) -> int:
        return len(self._by_id)
