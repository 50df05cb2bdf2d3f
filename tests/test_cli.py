import pytest

from philosophers.args import INVALID_ARGUMENTS
from philosophers.cli import main


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["1", "2", "3"],
        ["0", "100", "100", "100"],
        ["4", "abc", "100", "100"],
        ["4", "100", "100", "100", "-1"],
        ["4", "100", "100", "100", "1", "1"],
    ],
)
def test_invalid_arguments(argv, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert INVALID_ARGUMENTS in captured.err
    assert captured.out == ""


def test_lonely_philosopher_run(capsys):
    assert main(["1", "60", "10", "10"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert "has taken a fork" in lines[0]
    assert "died" in lines[-1]


def test_run_until_full(capsys):
    assert main(["3", "800", "40", "40", "2"]) == 0
    output = capsys.readouterr().out
    assert "died" not in output
    assert output.count("is eating") >= 6