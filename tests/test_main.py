"""Tests for the demonstration entry point."""

import main


class TestMain:
    """Test the demo output."""

    def test_prints_matrix_then_determinant(self, capsys):
        """Test the demo prints the 3x3 matrix and its determinant only."""
        main.main()
        out = capsys.readouterr().out
        assert out == "1.00 2.00 3.00 \n3.00 1.00 2.00 \n5.00 6.00 1.00 \n\n42.0\n"
