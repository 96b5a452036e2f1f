from __future__ import annotations

import unittest

from scorescene_core.core.state import (
    GroupStack,
    GroupStackError,
    PaintState,
    PaintStateStack,
    elide_inherited,
)
from scorescene_core.render.scene import SceneNode
from scorescene_ui.text.font import FontSpec


class PaintStateStackTests(unittest.TestCase):
    def test_saved_state_is_isolated_from_later_mutation(self) -> None:
        state = PaintState(attributes={"fill": "red"}, font=FontSpec())
        stack = PaintStateStack()
        stack.push(state)
        state.attributes["fill"] = "blue"
        state.scale_x = 3.0
        restored = stack.pop()
        assert restored is not None
        self.assertEqual(restored.attributes, {"fill": "red"})
        self.assertEqual(restored.scale_x, 1.0)

    def test_pop_on_empty_stack_returns_none(self) -> None:
        self.assertIsNone(PaintStateStack().pop())


class GroupStackTests(unittest.TestCase):
    def test_push_merges_effective_attributes(self) -> None:
        root = SceneNode("svg")
        stack = GroupStack(root, {"fill": "black", "stroke": "black"})
        group = SceneNode("g")
        frame = stack.push(group, {"fill": "red"})
        self.assertEqual(frame.effective, {"fill": "red", "stroke": "black"})
        self.assertIs(stack.current, group)
        self.assertEqual(root.children, [group])
        self.assertEqual(stack.depth, 1)

    def test_popping_the_root_fails_fast(self) -> None:
        stack = GroupStack(SceneNode("svg"), {})
        with self.assertRaises(GroupStackError):
            stack.pop()

    def test_pop_restores_parent_insertion_point(self) -> None:
        root = SceneNode("svg")
        stack = GroupStack(root, {})
        stack.push(SceneNode("g"), {})
        stack.pop()
        self.assertIs(stack.current, root)


class ElisionTests(unittest.TestCase):
    def test_values_equal_to_enclosing_group_are_dropped(self) -> None:
        out = elide_inherited(
            "rect",
            {"fill": "red", "stroke": "black", "stroke-width": 2},
            {"fill": "red", "stroke": "blue", "stroke-width": 1},
        )
        self.assertEqual(out, {"stroke": "black", "stroke-width": 2})

    def test_kind_specific_attributes_are_ignored(self) -> None:
        attrs = {"font-family": "Arial", "x": 1, "d": "M0 0", "width": 3}
        self.assertEqual(elide_inherited("path", attrs, {}), {"d": "M0 0"})
        self.assertEqual(elide_inherited("text", attrs, {}), {"font-family": "Arial", "x": 1, "d": "M0 0"})

    def test_unset_values_are_skipped(self) -> None:
        self.assertEqual(elide_inherited("g", {"fill": None, "stroke": "red"}, {}), {"stroke": "red"})


if __name__ == "__main__":
    unittest.main()
