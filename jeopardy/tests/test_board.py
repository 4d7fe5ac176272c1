"""
Tests for the board model.
"""

import pytest

from jeopardy.board import BoardModel, CellAddress
from jeopardy.clue import HIDDEN_MARKER, Category, CellStyle, Clue, RevealStage


class TestRender:
    """Test grid population."""

    def test_dimensions(self, sample_categories, view):
        """Test a 6x5 board has 30 uniquely addressed cells."""
        board = BoardModel(sample_categories, view)
        rendered = board.render()

        assert len(rendered.rows) == 5
        assert all(len(row) == 6 for row in rendered.rows)

        addresses = [cell.address for cell in rendered.cells]
        assert len(addresses) == 30
        assert len(set(addresses)) == 30
        assert set(addresses) == {
            CellAddress(c, i) for c in range(6) for i in range(5)
        }

    @pytest.mark.parametrize("num_categories,clues_per_category", [(1, 1), (3, 2), (2, 7)])
    def test_cell_count_matches_dimensions(self, view, num_categories, clues_per_category):
        """Test cell count for various shapes."""
        categories = [
            Category(title=f"C{c}", clues=[Clue(f"q{i}", f"a{i}") for i in range(clues_per_category)])
            for c in range(num_categories)
        ]
        rendered = BoardModel(categories, view).render()

        assert len(rendered.cells) == num_categories * clues_per_category
        assert len({cell.address for cell in rendered.cells}) == num_categories * clues_per_category

    def test_headers_in_category_order(self, sample_categories, view):
        """Test headers are category titles in order."""
        rendered = BoardModel(sample_categories, view).render()
        assert rendered.headers == [f"Category {c}" for c in range(6)]

    def test_cells_start_hidden(self, sample_categories, view):
        """Test body cells show the hidden marker."""
        rendered = BoardModel(sample_categories, view).render()

        for cell in rendered.cells:
            assert cell.text == HIDDEN_MARKER
            assert cell.style == CellStyle.HIDDEN

    def test_cell_lookup_by_address(self, sample_categories, view):
        """Test rows are indexed by clue, columns by category."""
        rendered = BoardModel(sample_categories, view).render()
        assert rendered.cell(CellAddress(4, 2)).address == CellAddress(4, 2)

    def test_render_draws_and_binds(self, sample_categories, view):
        """Test render pushes the board to the view and binds the handler."""
        board = BoardModel(sample_categories, view)
        rendered = board.render()

        assert view.board is rendered
        assert view.handler == board.handle_cell_activation

    def test_rerender_keeps_single_handler(self, sample_categories, view):
        """Test rendering twice replaces rather than stacks the handler."""
        board = BoardModel(sample_categories, view)
        first = board.render()
        second = board.render()

        assert second is not first
        assert view.board is second
        assert view.handler == board.handle_cell_activation

        view.click(0, 0)
        assert sample_categories[0].clues[0].stage == RevealStage.QUESTION

    def test_rerender_preserves_progress(self, sample_categories, view):
        """Test render reflects clues already revealed."""
        board = BoardModel(sample_categories, view)
        board.render()
        view.click(1, 1)

        rendered = board.render()
        cell = rendered.cell(CellAddress(1, 1))
        assert cell.text == "Q1.1"
        assert cell.style == CellStyle.QUESTION

    def test_rejects_empty_board(self, view):
        """Test a board needs categories."""
        with pytest.raises(ValueError):
            BoardModel([], view)

    def test_rejects_ragged_columns(self, view):
        """Test every category needs the same clue count."""
        categories = [
            Category(title="A", clues=[Clue("q", "a")]),
            Category(title="B", clues=[Clue("q", "a"), Clue("q2", "a2")]),
        ]
        with pytest.raises(ValueError):
            BoardModel(categories, view)


class TestCellActivation:
    """Test click routing."""

    def test_question_then_answer_then_unchanged(self, sample_categories, view):
        """Test activating (0,0) three times."""
        board = BoardModel(sample_categories, view)
        rendered = board.render()
        cell = rendered.cell(CellAddress(0, 0))

        first = view.click(0, 0)
        assert first.display_text == "Q0.0"
        assert first.style == CellStyle.QUESTION
        assert (cell.text, cell.style) == ("Q0.0", CellStyle.QUESTION)

        second = view.click(0, 0)
        assert second.display_text == "A0.0"
        assert second.style == CellStyle.ANSWER
        assert (cell.text, cell.style) == ("A0.0", CellStyle.ANSWER)

        updates_before = len(view.updated)
        third = view.click(0, 0)
        assert third is None
        assert (cell.text, cell.style) == ("A0.0", CellStyle.ANSWER)
        assert len(view.updated) == updates_before

    def test_first_activation_never_shows_answer(self, sample_categories, view):
        """Test every cell's first activation shows its question."""
        board = BoardModel(sample_categories, view)
        board.render()

        for c in range(6):
            for i in range(5):
                reveal = board.handle_cell_activation(CellAddress(c, i))
                assert reveal.display_text == f"Q{c}.{i}"

    def test_activation_is_local(self, sample_categories, view):
        """Test activating one cell leaves others hidden."""
        board = BoardModel(sample_categories, view)
        rendered = board.render()

        board.handle_cell_activation(CellAddress(2, 3))

        for cell in rendered.cells:
            if cell.address == CellAddress(2, 3):
                continue
            assert cell.style == CellStyle.HIDDEN

    def test_view_receives_updated_cell(self, sample_categories, view):
        """Test the view is told about the changed cell."""
        board = BoardModel(sample_categories, view)
        board.render()

        board.handle_cell_activation((3, 4))

        assert view.updated[-1].address == CellAddress(3, 4)
        assert view.updated[-1].text == "Q3.4"

    def test_unknown_address(self, sample_categories, view):
        """Test addresses off the board raise KeyError."""
        board = BoardModel(sample_categories, view)
        board.render()

        with pytest.raises(KeyError):
            board.handle_cell_activation(CellAddress(6, 0))
        with pytest.raises(KeyError):
            board.handle_cell_activation(CellAddress(0, -1))
