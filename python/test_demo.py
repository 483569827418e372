"""Tests for demo script argument handling."""

import pytest

from demo import DEFAULT_COLS, DEFAULT_ROWS, USAGE, parse_args


class TestParseArgs:
    """Tests for reading [cols rows [seed]]."""

    def test_defaults(self) -> None:
        """No arguments gives the default grid and no seed."""
        assert parse_args([]) == (DEFAULT_COLS, DEFAULT_ROWS, None)

    def test_cols_and_rows(self) -> None:
        """Two arguments set the grid size."""
        assert parse_args(["30", "12"]) == (30, 12, None)

    def test_with_seed(self) -> None:
        """A third argument seeds the run."""
        assert parse_args(["30", "12", "7"]) == (30, 12, 7)

    def test_lone_cols_is_usage_error(self) -> None:
        """A single argument is rejected rather than ignored."""
        with pytest.raises(SystemExit) as excinfo:
            parse_args(["30"])
        assert excinfo.value.code == USAGE

    def test_too_many_arguments(self) -> None:
        """More than three arguments is a usage error."""
        with pytest.raises(SystemExit):
            parse_args(["1", "2", "3", "4"])
