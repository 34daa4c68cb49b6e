import unittest
from datetime import timedelta

from outliner.domain.outline import (
    Group,
    always_descend,
    archive_sweep,
    clear_archives,
    keep_group,
    todo_count,
    traverse,
    traverse_forest,
)
from tests.builders import NOW, names, sample_outline, todo


def visit_order(group: Group, pre=always_descend) -> list[tuple[str, int]]:
    def header(g, depth, seen):
        descend, seen = pre(g, depth, seen)
        seen.append((g.name, depth))
        return descend, seen

    def item(t, depth, seen):
        seen.append((t.name, depth))
        return seen

    return traverse(group, [], header, item, keep_group)


class TestTraverse(unittest.TestCase):
    def test_subgroups_then_todos_then_completed(self) -> None:
        group = sample_outline().groups[0]
        self.assertEqual(
            visit_order(group),
            [("A", 0), ("S1", 1), ("s1a", 2), ("a1", 1), ("a2", 1), ("a3", 1)],
        )

    def test_pre_handle_controls_descent(self) -> None:
        def open_only(g, depth, seen):
            return g.open, seen

        outline = sample_outline()
        outline.groups[0].subgroups[0].open = False
        self.assertEqual(
            visit_order(outline.groups[0], open_only),
            [("A", 0), ("S1", 1), ("a1", 1), ("a2", 1), ("a3", 1)],
        )

    def test_post_handle_runs_after_children(self) -> None:
        def post(g, depth, seen):
            seen.append(f"/{g.name}")
            return seen

        def item(t, depth, seen):
            seen.append(t.name)
            return seen

        group = sample_outline().groups[0]
        self.assertEqual(
            traverse(group, [], always_descend, item, post),
            ["s1a", "/S1", "a1", "a2", "a3", "/A"],
        )

    def test_forest_threads_one_accumulator(self) -> None:
        def header(g, depth, count):
            return True, count + 1

        def item(t, depth, count):
            return count + 1

        outline = sample_outline()
        # 4 groups and 5 todos; the closed group is still descended
        self.assertEqual(traverse_forest(outline.groups, 0, header, item, keep_group), 9)


class TestTodoCount(unittest.TestCase):
    def test_counts_active_todos_in_closed_subgroups(self) -> None:
        group = Group(
            name="G",
            todos=[todo("t1"), todo("t2")],
            completed=[todo("c1", done=NOW)],
            subgroups=[Group(name="S", open=False, todos=[todo("t3")])],
        )
        self.assertEqual(todo_count(group), 3)

    def test_ignores_open_state_and_completed(self) -> None:
        group = Group(
            name="G",
            todos=[todo("t1"), todo("t2"), todo("t3")],
            completed=[todo("c1", done=NOW), todo("c2", done=NOW)],
            subgroups=[Group(name="empty")],
        )
        self.assertEqual(todo_count(group), 3)
        group.open = False
        self.assertEqual(todo_count(group), 3)

    def test_empty_group(self) -> None:
        self.assertEqual(todo_count(Group(name="G")), 0)


class TestArchiveSweep(unittest.TestCase):
    def test_moves_only_aged_completed_todos(self) -> None:
        nested = Group(name="S", completed=[todo("old-nested", done=NOW - timedelta(days=3))])
        group = Group(
            name="G",
            subgroups=[nested],
            completed=[
                todo("old", done=NOW - timedelta(days=2)),
                todo("fresh", done=NOW - timedelta(hours=1)),
            ],
        )

        archived = archive_sweep(group, NOW, timedelta(days=1))

        self.assertEqual(archived, 2)
        self.assertEqual(names(group.completed), ["fresh"])
        self.assertEqual(names(group.todo_archive), ["old"])
        self.assertEqual(names(group.subgroups[0].todo_archive), ["old-nested"])
        self.assertEqual(group.subgroups[0].completed, [])

    def test_second_sweep_changes_nothing(self) -> None:
        group = sample_outline().groups[0]
        self.assertEqual(archive_sweep(group, NOW, timedelta(days=1)), 1)
        snapshot = group.model_copy(deep=True)

        self.assertEqual(archive_sweep(group, NOW, timedelta(days=1)), 0)
        self.assertEqual(group.model_dump(), snapshot.model_dump())

    def test_active_todos_are_never_archived(self) -> None:
        group = Group(name="G", todos=[todo("t")])
        self.assertEqual(archive_sweep(group, NOW + timedelta(days=365), timedelta(0)), 0)
        self.assertEqual(names(group.todos), ["t"])


class TestClearArchives(unittest.TestCase):
    def test_empties_every_archive(self) -> None:
        nested = Group(name="S", todo_archive=[todo("x", done=NOW)])
        group = Group(
            name="G",
            subgroups=[nested],
            todo_archive=[todo("y", done=NOW)],
            subgroup_archive=[Group(name="gone", hidden=True)],
            completed=[todo("c", done=NOW)],
        )

        self.assertEqual(clear_archives(group), 3)
        self.assertEqual(group.todo_archive, [])
        self.assertEqual(group.subgroup_archive, [])
        self.assertEqual(group.subgroups[0].todo_archive, [])
        self.assertEqual(names(group.completed), ["c"])


if __name__ == "__main__":
    unittest.main()
