import unittest

from picross.core.constants import Cell, EventKind
from picross.core.exceptions import NoSolutionError
from picross.engine.grid import Grid
from picross.engine.lines import enumerate_line_possibilities
from picross.engine.search import BacktrackingSearch

F, E = Cell.FILLED, Cell.EMPTY


def identity_search(size, **kwargs):
    candidates = [enumerate_line_possibilities(size, [1]) for _ in range(size)]
    return BacktrackingSearch([[1]] * size, candidates, Grid(size, size), **kwargs)


class BacktrackingSearchTests(unittest.TestCase):
    def test_first_solution_in_enumeration_order(self) -> None:
        search = identity_search(2, base_count=1)
        events = list(search.events())
        self.assertEqual(len(events), 1)
        self.assertIs(events[0].kind, EventKind.SOLUTION)
        self.assertEqual(events[0].grid.to_jsonable(), [[1, 0], [0, 1]])
        self.assertEqual(search.nodes, 2)
        self.assertEqual(events[0].count, 3)

    def test_prunes_invalid_column_prefixes(self) -> None:
        # Row 1 in column 0 would extend a run past its hint; only accepted
        # expansions count as nodes.
        search = identity_search(5)
        events = list(search.events())
        self.assertEqual(events[-1].grid.to_jsonable(), [
            [1, 0, 0, 0, 0],
            [0, 1, 0, 0, 0],
            [0, 0, 1, 0, 0],
            [0, 0, 0, 1, 0],
            [0, 0, 0, 0, 1],
        ])
        self.assertEqual(search.nodes, 5)

    def test_partial_events_every_interval(self) -> None:
        events = list(identity_search(5, base_count=1, partial_interval=2).events())
        kinds = [event.kind for event in events]
        self.assertEqual(kinds, [EventKind.PARTIAL, EventKind.PARTIAL, EventKind.SOLUTION])
        self.assertEqual([event.count for event in events], [3, 5, 6])
        # Second accepted expansion has assigned rows 0 and 1.
        first = events[0].grid
        self.assertEqual(first.row(0), (F, E, E, E, E))
        self.assertEqual(first.row(1), (E, F, E, E, E))
        self.assertEqual(first.row(2), (Cell.UNKNOWN,) * 5)

    def test_partial_grids_are_independent_snapshots(self) -> None:
        events = list(identity_search(5, partial_interval=1).events())
        events[0].grid.set(4, 4, F)
        self.assertEqual(events[1].grid.cell(4, 4), Cell.UNKNOWN)

    def test_exhaustion_yields_no_solution_error(self) -> None:
        candidates = [[(F, F)], [(E, E)]]
        search = BacktrackingSearch([[2], [1]], candidates, Grid(2, 2), base_count=4)
        events = list(search.events())
        self.assertEqual(len(events), 1)
        event = events[0]
        self.assertIs(event.kind, EventKind.ERROR)
        self.assertIsInstance(event.error, NoSolutionError)
        self.assertEqual(event.message, "No solution found")
        self.assertEqual(event.count, 6)

    def test_events_are_pulled_lazily(self) -> None:
        search = identity_search(5, partial_interval=1)
        stream = search.events()
        self.assertEqual(search.nodes, 0)
        next(stream)
        self.assertEqual(search.nodes, 1)
        stream.close()
        self.assertEqual(search.nodes, 1)

    def test_empty_grid_is_trivially_solved(self) -> None:
        events = list(BacktrackingSearch([], [], Grid(0, 0)).events())
        self.assertIs(events[0].kind, EventKind.SOLUTION)

    def test_rejects_non_positive_interval(self) -> None:
        with self.assertRaises(ValueError):
            identity_search(2, partial_interval=0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
