"""
Tests for the olsfit command line.
"""

import io

import pytest

from olsfit.cli import EXIT_INPUT, EXIT_OK, EXIT_USAGE, format_report, main
from olsfit.regression import fit


def run(argv):
    stdout, stderr = io.StringIO(), io.StringIO()
    status = main(argv, stdout=stdout, stderr=stderr)
    return status, stdout.getvalue(), stderr.getvalue()


LINE_REPORT = (
    "Best fit (OLS):\n"
    "b=1.000000\n"
    "m=2.000000\n"
    "\n"
    "y=5.000000 at x=x̄=2.000000\n"
)


class TestCoordinates:

    def test_pairs(self):
        status, out, err = run(["1", "3", "2", "5", "3", "7"])
        assert status == EXIT_OK
        assert out == LINE_REPORT
        assert err == ""

    def test_negative_numbers_are_values(self):
        status, out, _ = run(["-1", "-1", "0", "1", "1", "3"])
        assert status == EXIT_OK
        assert "b=1.000000\nm=2.000000" in out

    def test_odd_trailing_argument_warns(self):
        status, out, _ = run(["1", "3", "2", "5", "3", "7", "9"])
        assert status == EXIT_OK
        assert out.startswith("\nWARNING: Ignoring last param!\n")
        assert out.endswith(LINE_REPORT)

    def test_too_few_arguments_prints_usage(self):
        status, out, _ = run(["1", "2", "3"])
        assert status == EXIT_USAGE
        assert "usage:" in out
        assert "Ordinary Least Squares" in out

    def test_no_arguments(self):
        status, out, _ = run([])
        assert status == EXIT_USAGE
        assert "olsfit -xf [csv_file]" in out

    def test_not_a_number(self):
        status, out, err = run(["1", "2", "abc", "4"])
        assert status == EXIT_USAGE
        assert "not a number" in err
        assert out == ""

    def test_degenerate_prints_nan(self):
        status, out, _ = run(["5", "1", "5", "2"])
        assert status == EXIT_OK
        assert "b=nan\nm=nan" in out
        assert "WARNING: zero variance in x" in out

    def test_coefficients_convention(self):
        status, out, _ = run(["--convention", "coefficients", "1", "3", "2", "5", "3", "7"])
        assert status == EXIT_OK
        assert out.startswith("Least squares (OLS):\na=1.000000\nb=2.000000\n")

    def test_options_between_coordinates(self):
        status, out, _ = run(["1", "3", "--convention", "coefficients", "2", "5", "3", "7"])
        assert status == EXIT_OK
        assert out.startswith("Least squares (OLS):\na=1.000000\nb=2.000000\n")


class TestFiles:

    def test_file(self, tmp_path):
        path = tmp_path / "line.csv"
        path.write_text("1,3\n2,5\n3,7\n")
        status, out, _ = run(["-f", str(path)])
        assert status == EXIT_OK
        assert out == LINE_REPORT

    def test_swapped_file(self, tmp_path):
        path = tmp_path / "swapped.csv"
        path.write_text("3,1\n5,2\n7,3\n")
        status, out, _ = run(["-xf", str(path)])
        assert status == EXIT_OK
        assert out == LINE_REPORT

    def test_missing_file(self, tmp_path):
        status, out, err = run(["-f", str(tmp_path / "nope.csv")])
        assert status == EXIT_INPUT
        assert "Could not read file" in err
        assert out == ""

    def test_token_overflow(self, tmp_path):
        path = tmp_path / "long.csv"
        path.write_bytes(b"1,2\n" + b"3" * 300 + b",4\n")
        status, out, err = run(["-f", str(path)])
        assert status == EXIT_INPUT
        assert "limit is 256" in err
        assert out == ""

    def test_file_without_pairs(self, tmp_path):
        path = tmp_path / "lonely.csv"
        path.write_text("42\n")
        status, _, err = run(["-f", str(path)])
        assert status == EXIT_INPUT
        assert "No (x, y) pairs" in err

    def test_file_with_coordinates_is_usage_error(self, tmp_path):
        path = tmp_path / "line.csv"
        path.write_text("1,3\n2,5\n")
        with pytest.raises(SystemExit) as excinfo:
            main(["-f", str(path), "1", "2"])
        assert excinfo.value.code == EXIT_USAGE

    def test_f_and_xf_exclusive(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main(["-f", "a.csv", "-xf", "b.csv"])
        assert excinfo.value.code == EXIT_USAGE


class TestReport:

    def test_format_report(self):
        assert format_report(fit([(1, 3), (2, 5), (3, 7)])) + "\n" == LINE_REPORT

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--version"])
        assert excinfo.value.code == 0
        assert "olsfit 0.1.0" in capsys.readouterr().out
