"""
Tests for the sort_values command line script.
"""

import io
import logging

from sort_values import main, parse_tokens


class TestParseTokens:
    """Tests for token parsing."""

    def test_integers(self):
        """Test that numeric tokens compare as integers."""
        assert parse_tokens(["10", "-2", "3"]) == [10, -2, 3]

    def test_mixed_tokens_stay_strings(self):
        """Test that any non-numeric token keeps every token a string."""
        assert parse_tokens(["10", "a"]) == ["10", "a"]


class TestMain:
    """Tests for the script entry point."""

    def test_sorts_arguments(self):
        """Test sorting and deduplicating positional values."""
        out = io.StringIO()

        assert main(["3", "1", "2", "1"], stdout=out) == 0
        assert out.getvalue() == "1\n2\n3\n"

    def test_numeric_order(self):
        """Test that integers are not sorted lexicographically."""
        out = io.StringIO()

        main(["10", "9", "100"], stdout=out)
        assert out.getvalue().split() == ["9", "10", "100"]

    def test_string_order(self):
        """Test string comparison when a token is not a number."""
        out = io.StringIO()

        main(["b", "a", "10"], stdout=out)
        assert out.getvalue().split() == ["10", "a", "b"]

    def test_reads_stdin_without_arguments(self):
        """Test reading whitespace-separated values from stdin."""
        out = io.StringIO()

        main([], stdin=io.StringIO("5 4\n4\n"), stdout=out)
        assert out.getvalue() == "4\n5\n"

    def test_logs_duplicates(self, caplog):
        """Test the info message about ignored duplicates."""
        caplog.set_level(logging.INFO)

        main(["1", "1", "2"], stdout=io.StringIO())

        assert "Ignored 1 duplicate values" in caplog.text
