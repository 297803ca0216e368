import pytest

from rodrigues._cli import (
    LEGENDRE_REFERENCE,
    SHIFTED_LEGENDRE_REFERENCE,
    main,
)


class TestMain:
    def test_default_output(self, capsys):
        assert main([]) == 0
        lines = capsys.readouterr().out.splitlines()

        assert lines[0] == "Legendre polynomials of the first kind."
        assert lines[1] == "P(0,x) = 1"
        assert lines[14] == LEGENDRE_REFERENCE
        assert lines[15] == "Reference:"
        assert lines[16] == LEGENDRE_REFERENCE
        assert lines[17] == ""
        assert lines[18] == "Shifted Legendre polynomials."
        assert lines[19] == "/P(0,x) = 1"
        assert lines[24] == SHIFTED_LEGENDRE_REFERENCE
        assert lines[25:] == ["Reference:", SHIFTED_LEGENDRE_REFERENCE]

    def test_ordinary_only(self, capsys):
        main(["--kind", "ordinary", "--max-degree", "2", "--no-reference"])
        assert capsys.readouterr().out.splitlines() == [
            "Legendre polynomials of the first kind.",
            "P(0,x) = 1",
            "P(1,x) = x",
            "P(2,x) = 1/2 ( 3 x^2 - 1 )",
        ]

    def test_shifted_only(self, capsys):
        main(["--kind", "shifted", "--max-shifted-degree", "1", "--no-reference"])
        assert capsys.readouterr().out.splitlines() == [
            "Shifted Legendre polynomials.",
            "/P(0,x) = 1",
            "/P(1,x) = 2 x - 1",
        ]

    @pytest.mark.parametrize("degree", ["-1", "256", "three"])
    def test_invalid_degree(self, degree, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--max-degree", degree])
        assert excinfo.value.code == 2
        assert "degree" in capsys.readouterr().err
