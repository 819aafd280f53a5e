"""
Tests for the normalize_values command line runner.
"""

import pytest


class TestParseToken:
    """Tests for value token parsing."""

    @pytest.mark.parametrize("token", ["NA", "nan", "None", "null", "-", " na "])
    def test_missing_tokens(self, normalize_script, token):
        """Missing tokens parse to None."""
        assert normalize_script.parse_token(token) is None

    def test_numbers(self, normalize_script):
        """Numeric tokens parse to floats."""
        assert normalize_script.parse_token("-2.5") == -2.5
        assert normalize_script.parse_token("10") == 10.0

    def test_garbage(self, normalize_script):
        """Non-numeric tokens raise ValueError."""
        with pytest.raises(ValueError):
            normalize_script.parse_token("ten")


class TestMain:
    """Tests for the script entry point."""

    def test_default_range(self, normalize_script, capsys):
        """Values are printed one per line."""
        assert normalize_script.main(["1", "2", "3"]) == 0
        assert capsys.readouterr().out.split() == ["-1.0", "0.0", "1.0"]

    def test_custom_range_with_missing(self, normalize_script, capsys):
        """Missing values print as NA."""
        exit_code = normalize_script.main(
            ["10", "NA", "20", "30", "--low", "0", "--high", "100"]
        )
        assert exit_code == 0
        assert capsys.readouterr().out.split() == ["0.0", "NA", "50.0", "100.0"]

    def test_constant_input_fails(self, normalize_script):
        """Constant input exits with status 1."""
        assert normalize_script.main(["5", "5", "5"]) == 1

    def test_invalid_range_fails(self, normalize_script):
        """low == high exits with status 1."""
        assert normalize_script.main(["1", "2", "--low", "5", "--high", "5"]) == 1

    def test_unparseable_value_fails(self, normalize_script):
        """A non-numeric token exits with status 1."""
        assert normalize_script.main(["1", "two"]) == 1

    def test_fractional_output_keeps_precision(self, normalize_script, capsys):
        """Printed values parse back to the exact library result."""
        assert normalize_script.main(["0", "1", "3", "--low", "0", "--high", "1"]) == 0
        printed = capsys.readouterr().out.split()

        assert printed[1] == repr(1 / 3)
        assert float(printed[1]) == 1 / 3

    def test_infinite_value_fails(self, normalize_script):
        """An infinite value exits with status 1."""
        assert normalize_script.main(["1", "2", "inf"]) == 1
