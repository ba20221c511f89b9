"""Unit tests for the search strategies."""

import pytest
from queens.errors import InvalidParameters
from queens.solvers import (
    Algorithm,
    BacktrackingSolver,
    BruteForceSolver,
    BoardFilled,
    InvalidConfiguration,
    PlacementAttempted,
    QueenPlaced,
    QueenRemoved,
    SearchFinished,
    SolutionFound,
    create_solver,
)


KNOWN_SOLUTION_COUNTS = {1: 1, 2: 0, 3: 0, 4: 2, 5: 10, 6: 4}


def summarize(event):
    """Reduce an event to a comparable tuple without its board."""
    if isinstance(event, PlacementAttempted):
        return ("attempt", event.row, event.col, event.safe)
    if isinstance(event, QueenPlaced):
        return ("placed", event.row, event.col)
    if isinstance(event, QueenRemoved):
        return ("removed", event.row, event.col)
    return (type(event).__name__,)


class TestBacktrackingSolver:
    """Tests for the backtracking strategy."""

    def test_four_queens(self):
        """Test the 4-queens scenario: 2 solutions, canonical first."""
        solutions, stats = BacktrackingSolver(4).solve()

        assert stats.solutions == 2
        assert solutions == [[1, 3, 0, 2], [2, 0, 3, 1]]

    def test_eight_queens(self):
        """Test the classic 8-queens count."""
        solutions, stats = BacktrackingSolver(8).solve(track_memory=False)

        assert stats.solutions == 92
        assert len(solutions) == 92
        assert solutions[0] == [0, 4, 7, 5, 2, 6, 1, 3]

    @pytest.mark.parametrize("size,expected", sorted(KNOWN_SOLUTION_COUNTS.items()))
    def test_known_counts(self, size, expected):
        """Test solution counts for small boards."""
        _, stats = BacktrackingSolver(size).solve(track_memory=False)
        assert stats.solutions == expected

    def test_opening_event_sequence(self):
        """Test the exact first steps of the 4-queens search."""
        events = list(BacktrackingSolver(4).steps())

        assert [summarize(e) for e in events[:12]] == [
            ("attempt", 0, 0, True),
            ("placed", 0, 0),
            ("attempt", 1, 0, False),
            ("attempt", 1, 1, False),
            ("attempt", 1, 2, True),
            ("placed", 1, 2),
            ("attempt", 2, 0, False),
            ("attempt", 2, 1, False),
            ("attempt", 2, 2, False),
            ("attempt", 2, 3, False),
            ("removed", 1, 2),
            ("attempt", 1, 3, True),
        ]

    def test_row_zero_columns_in_order(self):
        """Test that row 0 is tried left to right, depth first."""
        events = list(BacktrackingSolver(4).steps())

        row_zero = [e.col for e in events if isinstance(e, PlacementAttempted) and e.row == 0]
        assert row_zero == [0, 1, 2, 3]

        first_row_one = next(
            i for i, e in enumerate(events)
            if isinstance(e, PlacementAttempted) and e.row == 1
        )
        assert summarize(events[first_row_one - 1]) == ("placed", 0, 0)

    def test_every_placement_is_undone(self):
        """Test that each placement is eventually backtracked."""
        events = list(BacktrackingSolver(5).steps())

        placed = [summarize(e)[1:] for e in events if isinstance(e, QueenPlaced)]
        removed = [summarize(e)[1:] for e in events if isinstance(e, QueenRemoved)]
        assert sorted(placed) == sorted(removed)

    def test_search_finished_is_last(self):
        """Test the terminal event."""
        solver = BacktrackingSolver(4)
        events = list(solver.steps())

        finished = events[-1]
        assert isinstance(finished, SearchFinished)
        assert finished.solutions == 2
        assert finished.attempts == solver.stats.attempts
        assert not finished.cancelled
        assert sum(isinstance(e, SearchFinished) for e in events) == 1

    def test_attempts_match_events(self):
        """Test that every attempt is reported."""
        solver = BacktrackingSolver(5)
        events = list(solver.steps())

        attempts = sum(isinstance(e, PlacementAttempted) for e in events)
        assert attempts == solver.stats.attempts

    def test_snapshots_do_not_change(self):
        """Test that boards handed out stay as they were when emitted."""
        events = list(BacktrackingSolver(4).steps())

        first_placed = next(e for e in events if isinstance(e, QueenPlaced))
        assert first_placed.board.queens() == [(0, 0)]
        assert first_placed.board.frozen

        solutions = [e for e in events if isinstance(e, SolutionFound)]
        assert [s.index for s in solutions] == [1, 2]
        assert solutions[0].board.columns() == [1, 3, 0, 2]

    def test_cancellation_unwinds(self):
        """Test that the search stops at the next polling point."""
        stop = {"now": False}
        solver = BacktrackingSolver(6)
        events = []

        for event in solver.steps(lambda: stop["now"]):
            events.append(event)
            if len(events) == 20:
                stop["now"] = True

        # At most the placement already decided by the last attempt
        assert len(events) <= 21
        assert all(isinstance(e, QueenPlaced) for e in events[20:])
        assert solver.stats.cancelled
        assert not any(isinstance(e, SearchFinished) for e in events)

    def test_close_mid_recursion(self):
        """Test that closing the generator deep in the recursion is clean."""
        steps = BacktrackingSolver(6).steps()
        for _ in range(50):
            next(steps)
        steps.close()
        with pytest.raises(StopIteration):
            next(steps)


class TestBruteForceSolver:
    """Tests for the brute force strategy."""

    def test_four_queens(self):
        """Test the 4-queens scenario: 256 attempts, 2 solutions."""
        solutions, stats = BruteForceSolver(4).solve()

        assert stats.attempts == 4 ** 4
        assert stats.solutions == 2
        assert stats.invalid_configurations == 4 ** 4 - 2
        assert solutions == [[1, 3, 0, 2], [2, 0, 3, 1]]

    def test_enumeration_order(self):
        """Test row-major, ascending-column enumeration."""
        events = list(BruteForceSolver(3).steps())

        filled = [e for e in events if isinstance(e, BoardFilled)]
        assert [e.attempt for e in filled] == list(range(1, 28))
        assert filled[0].columns == (0, 0, 0)
        assert filled[1].columns == (0, 0, 1)
        assert filled[3].columns == (0, 1, 0)
        assert filled[-1].columns == (2, 2, 2)

    def test_check_follows_each_board(self):
        """Test that each board is followed by exactly one verdict."""
        events = list(BruteForceSolver(4).steps())

        assert isinstance(events[0], BoardFilled)
        assert isinstance(events[1], InvalidConfiguration)
        assert events[1].attempt == 1

        for board_event, verdict in zip(events[:-1:2], events[1::2]):
            assert isinstance(board_event, BoardFilled)
            assert isinstance(verdict, (SolutionFound, InvalidConfiguration))
            assert verdict.board == board_event.board

        assert isinstance(events[-1], SearchFinished)
        assert events[-1].attempts == 256

    def test_no_pruning(self):
        """Test that a clash in the first rows is still fully enumerated."""
        events = list(BruteForceSolver(4).steps())

        clashing = [e for e in events
                    if isinstance(e, BoardFilled) and e.columns[:2] == (0, 0)]
        assert len(clashing) == 4 ** 2

    def test_cancellation(self):
        """Test that no new board is built once cancellation is observed."""
        stop = {"now": False}
        solver = BruteForceSolver(5)
        events = []

        for event in solver.steps(lambda: stop["now"]):
            events.append(event)
            if isinstance(event, BoardFilled) and event.attempt == 10:
                stop["now"] = True

        # The board already built still gets its verdict
        assert isinstance(events[-1], InvalidConfiguration)
        assert events[-1].attempt == 10
        assert solver.stats.attempts == 10
        assert solver.stats.cancelled


class TestStrategiesAgree:
    """Cross-checks between the two strategies."""

    @pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 6])
    def test_same_solutions(self, size):
        """Test that both strategies find the same solutions."""
        bt_solutions, bt_stats = BacktrackingSolver(size).solve(track_memory=False)
        bf_solutions, bf_stats = BruteForceSolver(size).solve(track_memory=False)

        assert bt_stats.solutions == bf_stats.solutions == KNOWN_SOLUTION_COUNTS[size]
        assert bt_solutions == bf_solutions

    @pytest.mark.parametrize("size", [5, 6])
    def test_backtracking_does_less_work(self, size):
        """Test that pruning pays off."""
        _, bt_stats = BacktrackingSolver(size).solve(track_memory=False)
        _, bf_stats = BruteForceSolver(size).solve(track_memory=False)

        assert bt_stats.attempts < bf_stats.attempts
        assert bf_stats.attempts == size ** size


class TestSolverBase:
    """Tests for shared solver behaviour."""

    def test_invalid_size(self):
        """Test that a solver needs a real board."""
        with pytest.raises(ValueError):
            BacktrackingSolver(0)

    def test_stats_collected(self):
        """Test that solve() fills in timing and memory."""
        _, stats = BacktrackingSolver(5).solve()

        assert stats.algorithm == "Backtracking"
        assert stats.size == 5
        assert stats.time_seconds > 0
        assert stats.memory_bytes > 0
        assert stats.placements == stats.backtracks
        assert "error" not in stats.extra

    def test_stats_reset_between_runs(self):
        """Test that a second run starts from zero."""
        solver = BruteForceSolver(4)
        solver.solve(track_memory=False)
        _, stats = solver.solve(track_memory=False)
        assert stats.attempts == 256

    def test_to_dict(self):
        """Test stats serialization."""
        _, stats = BruteForceSolver(4).solve(track_memory=False)
        data = stats.to_dict()
        assert data["algorithm"] == "Brute Force"
        assert data["solutions"] == 2
        assert data["attempts"] == 256


class TestAlgorithm:
    """Tests for the algorithm selector."""

    def test_from_name(self):
        """Test lookups by value and by member name."""
        assert Algorithm.from_name("backtrack") is Algorithm.BACKTRACKING
        assert Algorithm.from_name("BruteForce") is Algorithm.BRUTE_FORCE
        assert Algorithm.from_name("brute_force") is Algorithm.BRUTE_FORCE

    def test_unknown_name(self):
        """Test that an unknown name is an InvalidParameters (and ValueError)."""
        with pytest.raises(InvalidParameters):
            Algorithm.from_name("genetic")
        with pytest.raises(ValueError):
            Algorithm.from_name("genetic")

    def test_create_solver(self):
        """Test the factory."""
        solver = create_solver(Algorithm.BRUTE_FORCE, 5)
        assert isinstance(solver, BruteForceSolver)
        assert solver.size == 5
        assert Algorithm.BACKTRACKING.label == "Backtracking"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
