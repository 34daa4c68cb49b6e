import unittest

from outliner.domain.cursor import MoveError, PositionHierarchy, rendered_rows
from outliner.domain.outline import Group, Outline
from outliner.domain.shared import Err, Ok
from tests.builders import NOW, sample_outline, todo

# Every visible path of sample_outline, top to bottom
ROWS = [[0], [0, 0], [0, 0, 0], [0, 1], [0, 2], [0, 3], [1], [2]]


class TestFindItem(unittest.TestCase):
    def setUp(self) -> None:
        self.outline = sample_outline()

    def test_root_group(self) -> None:
        found = PositionHierarchy([1]).find_item(self.outline)
        self.assertIs(found.value.item, self.outline.groups[1])
        self.assertEqual(found.value.depth, 0)

    def test_child_order_is_subgroups_todos_completed(self) -> None:
        expected = {
            (0, 0): "S1",
            (0, 1): "a1",
            (0, 2): "a2",
            (0, 3): "a3",
            (0, 0, 0): "s1a",
        }
        for path, name in expected.items():
            found = PositionHierarchy(list(path)).find_item(self.outline)
            self.assertEqual(found.value.item.name, name, path)
            self.assertEqual(found.value.depth, len(path) - 1)

    def test_mutable_lookup_agrees_and_exposes_container(self) -> None:
        group = self.outline.groups[0]
        for path in ROWS:
            cursor = PositionHierarchy(list(path))
            self.assertIs(cursor.find_item_mut(self.outline).value.item, cursor.find_item(self.outline).value.item)

        slot = PositionHierarchy([0, 3]).find_item_mut(self.outline).value
        self.assertIs(slot.container, group.completed)
        self.assertEqual(slot.offset, 0)
        self.assertIs(slot.parent, group)

        slot = PositionHierarchy([0, 2]).find_item_mut(self.outline).value
        self.assertIs(slot.container, group.todos)
        self.assertEqual(slot.offset, 1)

        slot = PositionHierarchy([2]).find_item_mut(self.outline).value
        self.assertIs(slot.container, self.outline.groups)
        self.assertIsNone(slot.parent)

    def test_errors(self) -> None:
        self.assertEqual(PositionHierarchy([]).find_item(self.outline), Err(MoveError.NO_INDEX))
        self.assertEqual(PositionHierarchy([5]).find_item(self.outline), Err(MoveError.GROUP_NOT_FOUND))
        self.assertEqual(PositionHierarchy([0, 9]).find_item(self.outline), Err(MoveError.OUT_OF_BOUNDS))
        self.assertEqual(PositionHierarchy([0, 9, 0]).find_item(self.outline), Err(MoveError.GROUP_NOT_FOUND))
        self.assertEqual(PositionHierarchy([0, -1]).find_item(self.outline), Err(MoveError.OUT_OF_BOUNDS))

    def test_error_messages(self) -> None:
        self.assertEqual(MoveError.OUT_OF_BOUNDS.message, "The specified item doesn't exist.")
        self.assertEqual(MoveError.GROUP_NOT_FOUND.message, "The specified group doesn't exist.")

    def test_find_group(self) -> None:
        self.assertIs(PositionHierarchy([0, 0, 0]).find_group(self.outline).value, self.outline.groups[0].subgroups[0])
        self.assertIs(PositionHierarchy([0, 2]).find_group_mut(self.outline).value, self.outline.groups[0])
        self.assertIs(PositionHierarchy([1]).find_group(self.outline).value, self.outline.groups[1])


class TestVerticalMovement(unittest.TestCase):
    def setUp(self) -> None:
        self.outline = sample_outline()

    def test_down_visits_every_row_once(self) -> None:
        cursor = PositionHierarchy()
        visited = [list(cursor.indexes)]
        for _ in range(len(ROWS) - 1):
            self.assertIsInstance(cursor.cursor_down(self.outline), Ok)
            visited.append(list(cursor.indexes))
        self.assertEqual(visited, ROWS)

    def test_single_group_walkthrough(self) -> None:
        outline = Outline(groups=[Group(name="A", todos=[todo("T1"), todo("T2")])])
        cursor = PositionHierarchy()
        self.assertIs(cursor.find_item(outline).value.item, outline.groups[0])

        cursor.cursor_down(outline)
        self.assertEqual(cursor.indexes, [0, 0])
        self.assertEqual(cursor.find_item(outline).value.item.name, "T1")
        cursor.cursor_down(outline)
        self.assertEqual(cursor.indexes, [0, 1])
        cursor.cursor_down(outline)
        self.assertEqual(cursor.indexes, [0, 1])
        self.assertEqual(cursor.vert_pos(outline), Ok(2))

    def test_down_stops_on_last_row(self) -> None:
        cursor = PositionHierarchy([2])
        self.assertEqual(cursor.cursor_down(self.outline), Ok(None))
        self.assertEqual(cursor.indexes, [2])

    def test_up_is_inverse_of_down(self) -> None:
        cursor = PositionHierarchy(list(ROWS[-1]))
        visited = [list(cursor.indexes)]
        for _ in range(len(ROWS) - 1):
            cursor.cursor_up(self.outline)
            visited.append(list(cursor.indexes))
        self.assertEqual(visited, ROWS[::-1])

    def test_up_stops_on_first_row(self) -> None:
        cursor = PositionHierarchy()
        self.assertEqual(cursor.cursor_up(self.outline), Ok(None))
        self.assertEqual(cursor.indexes, [0])

    def test_each_step_moves_one_row(self) -> None:
        outline = Outline(
            groups=[
                Group(
                    name="deep",
                    subgroups=[
                        Group(name="l1", subgroups=[Group(name="l2", todos=[todo("x"), todo("y")])]),
                        Group(name="closed", open=False, todos=[todo("hidden")]),
                        Group(name="empty"),
                    ],
                    completed=[todo("done", done=NOW)],
                ),
                Group(name="second", todos=[todo("z")]),
            ]
        )
        cursor = PositionHierarchy()
        rows = [cursor.vert_pos(outline).value]
        while True:
            before = list(cursor.indexes)
            cursor.cursor_down(outline)
            if cursor.indexes == before:
                break
            rows.append(cursor.vert_pos(outline).value)
        self.assertEqual(rows, list(range(len(rows))))
        self.assertEqual(len(rows), 10)

        while cursor.indexes != [0]:
            row = cursor.vert_pos(outline).value
            cursor.cursor_up(outline)
            self.assertEqual(cursor.vert_pos(outline).value, row - 1)

    def test_failed_move_leaves_path_unchanged(self) -> None:
        cursor = PositionHierarchy([7])
        self.assertEqual(cursor.cursor_down(self.outline), Err(MoveError.GROUP_NOT_FOUND))
        self.assertEqual(cursor.cursor_up(self.outline), Err(MoveError.GROUP_NOT_FOUND))
        self.assertEqual(cursor.indexes, [7])


class TestStructuralMovement(unittest.TestCase):
    def setUp(self) -> None:
        self.outline = sample_outline()

    def test_group_up_and_down_stay_within_level(self) -> None:
        cursor = PositionHierarchy([0, 1])
        cursor.group_down(self.outline)
        self.assertEqual(cursor.indexes, [0, 2])
        cursor.group_down(self.outline)
        cursor.group_down(self.outline)
        self.assertEqual(cursor.indexes, [0, 3])
        for _ in range(5):
            cursor.group_up(self.outline)
        self.assertEqual(cursor.indexes, [0, 0])

    def test_group_moves_at_root(self) -> None:
        cursor = PositionHierarchy([1])
        cursor.group_down(self.outline)
        self.assertEqual(cursor.indexes, [2])
        cursor.group_down(self.outline)
        self.assertEqual(cursor.indexes, [2])

    def test_group_moves_need_an_index(self) -> None:
        self.assertEqual(PositionHierarchy([]).group_up(self.outline), Err(MoveError.NO_INDEX))
        self.assertEqual(PositionHierarchy([]).group_down(self.outline), Err(MoveError.NO_INDEX))

    def test_hierarchy_up(self) -> None:
        cursor = PositionHierarchy([0, 0, 0])
        cursor.hierarchy_up()
        self.assertEqual(cursor.indexes, [0, 0])
        cursor.hierarchy_up()
        cursor.hierarchy_up()
        self.assertEqual(cursor.indexes, [0])

    def test_hierarchy_down_opens_closed_group(self) -> None:
        cursor = PositionHierarchy([1])
        self.assertEqual(cursor.hierarchy_down(self.outline), Ok(None))
        self.assertEqual(cursor.indexes, [1, 0])
        self.assertTrue(self.outline.groups[1].open)
        self.assertEqual(cursor.find_item(self.outline).value.item.name, "b1")

    def test_hierarchy_down_ignores_todos_and_empty_groups(self) -> None:
        for path in ([2], [0, 1]):
            cursor = PositionHierarchy(list(path))
            cursor.hierarchy_down(self.outline)
            self.assertEqual(cursor.indexes, path)


class TestVerticalPosition(unittest.TestCase):
    def setUp(self) -> None:
        self.outline = sample_outline()

    def test_rows_match_drawing(self) -> None:
        for row, path in enumerate(ROWS):
            self.assertEqual(PositionHierarchy(list(path)).vert_pos(self.outline), Ok(row), path)

    def test_closed_group_is_one_row(self) -> None:
        self.assertEqual(rendered_rows(self.outline.groups[1]), 1)
        self.assertEqual(rendered_rows(self.outline.groups[0]), 6)
        self.outline.groups[0].open = False
        self.assertEqual(PositionHierarchy([2]).vert_pos(self.outline), Ok(2))

    def test_closed_sibling_counts_once(self) -> None:
        outline = Outline(
            groups=[
                Group(
                    name="root",
                    subgroups=[Group(name="B", open=False, todos=[todo("x"), todo("y")])],
                    todos=[todo("after")],
                )
            ]
        )
        self.assertEqual(PositionHierarchy([0, 1]).vert_pos(outline), Ok(2))

    def test_invalid_path(self) -> None:
        self.assertEqual(PositionHierarchy([0, 4]).vert_pos(self.outline), Err(MoveError.OUT_OF_BOUNDS))

    def test_vert_offset(self) -> None:
        cursor = PositionHierarchy([0, 3])  # row 5
        self.assertEqual(cursor.vert_offset(self.outline, 4), Ok(4))
        self.assertEqual(cursor.vert_offset(self.outline), Ok(10))
        self.assertEqual(cursor.vert_pos_offset(self.outline, 4), Ok(1))
        self.assertEqual(PositionHierarchy([0, 2]).vert_offset(self.outline, 4), Ok(4))
        self.assertEqual(PositionHierarchy([0, 1]).vert_offset(self.outline, 4), Ok(0))


class TestReaddressing(unittest.TestCase):
    def setUp(self) -> None:
        self.outline = sample_outline()

    def test_clamp_after_removing_last_child(self) -> None:
        cursor = PositionHierarchy([0, 3])
        self.outline.groups[0].completed.pop()
        self.assertEqual(cursor.clamp_after_removal(self.outline), Ok(None))
        self.assertEqual(cursor.indexes, [0, 2])

    def test_clamp_after_emptying_a_group(self) -> None:
        cursor = PositionHierarchy([0, 0, 0])
        self.outline.groups[0].subgroups[0].todos.pop()
        cursor.clamp_after_removal(self.outline)
        self.assertEqual(cursor.indexes, [0, 0])

    def test_clamp_keeps_valid_index(self) -> None:
        cursor = PositionHierarchy([0, 1])
        self.outline.groups[0].todos.pop(0)
        cursor.clamp_after_removal(self.outline)
        self.assertEqual(cursor.indexes, [0, 1])

    def test_clamp_on_empty_forest(self) -> None:
        cursor = PositionHierarchy([0])
        self.outline.groups.clear()
        cursor.clamp_after_removal(self.outline)
        self.assertEqual(cursor.indexes, [0])

    def test_normalize_cuts_and_clamps(self) -> None:
        cases = [
            ([7, 9, 9], [2]),
            ([0, 0, 5], [0, 0, 0]),
            ([0, 8], [0, 3]),
            ([0, 5, 1], [0, 3]),
            ([], [0]),
        ]
        for stale, expected in cases:
            cursor = PositionHierarchy(list(stale))
            cursor.normalize(self.outline)
            self.assertEqual(cursor.indexes, expected, stale)

    def test_normalize_empty_forest(self) -> None:
        cursor = PositionHierarchy([3, 1])
        cursor.normalize(Outline())
        self.assertEqual(cursor.indexes, [0])


if __name__ == "__main__":
    unittest.main()
