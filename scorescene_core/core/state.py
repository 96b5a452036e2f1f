from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Mapping

from scorescene_core.render.scene import AttrValue, SceneNode
from scorescene_ui.text.font import FontSpec


LOGGER = logging.getLogger(__name__)

IGNORED_ATTRIBUTES: Mapping[str, frozenset[str]] = {
    "path": frozenset(
        {"x", "y", "width", "height", "font-family", "font-weight", "font-style", "font-size"}
    ),
    "rect": frozenset({"font-family", "font-weight", "font-style", "font-size"}),
    "text": frozenset({"width", "height"}),
}


class GroupStackError(RuntimeError):
    """Raised when a group is closed that was never opened."""


@dataclass
class PaintState:
    """Paint attributes plus the cumulative scale, captured whole on save."""

    attributes: dict[str, AttrValue]
    font: FontSpec
    scale_x: float = 1.0
    scale_y: float = 1.0

    def copy(self) -> "PaintState":
        return PaintState(
            attributes=dict(self.attributes),
            font=self.font,
            scale_x=self.scale_x,
            scale_y=self.scale_y,
        )


class PaintStateStack:
    def __init__(self) -> None:
        self._saved: list[PaintState] = []

    @property
    def depth(self) -> int:
        return len(self._saved)

    def push(self, state: PaintState) -> None:
        self._saved.append(state.copy())

    def pop(self) -> PaintState | None:
        if not self._saved:
            LOGGER.debug("restore() with empty save stack ignored")
            return None
        return self._saved.pop().copy()


@dataclass
class GroupFrame:
    node: SceneNode
    effective: dict[str, AttrValue] = field(default_factory=dict)


class GroupStack:
    """Open groups from the root down; the top frame is the insertion point."""

    def __init__(self, root: SceneNode, root_effective: Mapping[str, AttrValue]) -> None:
        self._frames: list[GroupFrame] = []
        self.reset(root, root_effective)

    @property
    def current(self) -> SceneNode:
        return self._frames[-1].node

    @property
    def effective(self) -> Mapping[str, AttrValue]:
        return self._frames[-1].effective

    @property
    def depth(self) -> int:
        return len(self._frames) - 1

    def push(self, node: SceneNode, attributes: Mapping[str, AttrValue]) -> GroupFrame:
        frame = GroupFrame(node=node, effective={**self.effective, **attributes})
        self.current.children.append(node)
        self._frames.append(frame)
        return frame

    def pop(self) -> GroupFrame:
        if len(self._frames) <= 1:
            raise GroupStackError("close_group() called with no open group")
        return self._frames.pop()

    def reset(self, root: SceneNode, root_effective: Mapping[str, AttrValue]) -> None:
        self._frames = [GroupFrame(node=root, effective=dict(root_effective))]


def elide_inherited(
    kind: str,
    attributes: Mapping[str, AttrValue | None],
    effective: Mapping[str, AttrValue],
) -> dict[str, AttrValue]:
    """Keep only attributes a node must carry itself.

    Drops keys irrelevant to `kind`, unset values, and values equal to what
    the enclosing group already provides.
    """

    ignored = IGNORED_ATTRIBUTES.get(kind, frozenset())
    out: dict[str, AttrValue] = {}
    for name, value in attributes.items():
        if name in ignored or value is None:
            continue
        if name in effective and effective[name] == value:
            continue
        out[name] = value
    return out
