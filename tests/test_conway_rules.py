"""Tests for the B3/S23 transition rule and the seed patterns."""

import pytest
import numpy as np
from lifer.core.conway_rules import BIRTH_SET, SURVIVAL_SET, update_cell
from lifer.core.patterns import BLINKER, BLOCK, GLIDER, PATTERNS, get_pattern, seed_board


class TestUpdateCell:
    """Test the rule for individual cells."""

    @pytest.mark.parametrize("neighbors", [2, 3])
    def test_survival(self, neighbors):
        """Live cell survives with 2-3 neighbors."""
        assert update_cell(True, neighbors) is True

    @pytest.mark.parametrize("neighbors", [0, 1])
    def test_underpopulation(self, neighbors):
        """Live cell dies with fewer than 2 neighbors."""
        assert update_cell(True, neighbors) is False

    @pytest.mark.parametrize("neighbors", [4, 5, 8])
    def test_overcrowding(self, neighbors):
        """Live cell dies with more than 3 neighbors."""
        assert update_cell(True, neighbors) is False

    def test_birth(self):
        """Dead cell with exactly 3 neighbors becomes alive."""
        assert update_cell(False, 3) is True
        assert update_cell(False, 2) is False
        assert update_cell(False, 4) is False

    def test_rule_sets(self):
        assert SURVIVAL_SET == {2, 3}
        assert BIRTH_SET == {3}

    def test_all_neighbor_counts(self):
        """Across 0-8 neighbors only 2-3 keep a cell alive and only 3 gives birth."""
        assert [n for n in range(9) if update_cell(True, n)] == [2, 3]
        assert [n for n in range(9) if update_cell(False, n)] == [3]


class TestPatterns:
    """Test the hardcoded seed patterns."""

    def test_pattern_sizes(self):
        assert int(np.sum(GLIDER)) == 5
        assert int(np.sum(BLINKER)) == 3
        assert int(np.sum(BLOCK)) == 4
        assert set(PATTERNS) == {"glider", "blinker", "block"}

    def test_get_pattern_returns_copy(self):
        """Modifying a looked-up pattern leaves the original intact."""
        pattern = get_pattern("glider")
        pattern[:] = False
        assert int(np.sum(GLIDER)) == 5

    def test_get_pattern_case_insensitive(self):
        assert np.array_equal(get_pattern("BLOCK"), BLOCK)

    def test_unknown_pattern(self):
        with pytest.raises(KeyError, match="available: blinker, block, glider"):
            get_pattern("spaceship")

    def test_seed_board(self):
        """Seeded glider keeps its 5 cells while travelling the torus."""
        board = seed_board("glider", 8, 8, 2, 2)
        assert board.cells == ((3, 2), (4, 3), (2, 4), (3, 4), (4, 4))

        # A glider on an 8x8 torus returns to its start after 32 generations
        assert board.step(32) == board
        for _ in range(8):
            board = board.next_gen()
            assert board.population == 5

    def test_seeded_block_is_still(self):
        block = seed_board("block", 6, 6, 3, 3)
        assert block.next_gen() == block
