import pytest

from pushswap.cli import main


@pytest.mark.parametrize("args", [["1", "1"], ["a"], ["1", "--2"], ["3", "-"], ["2", "x3"]])
def test_bad_input_reports_error(args, capsys):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_three_numbers_shown_unchanged(capsys):
    assert main(["3", "1", "2"]) == 0
    out = capsys.readouterr().out
    expected_list = "[num: 3 | idx: 2][num: 1 | idx: 0][num: 2 | idx: 1]"
    assert out == (
        "\n=== Before pushing ===\nA: " + expected_list + "B: "
        "\n=== After pushing ===\nA: " + expected_list + "B: "
    )


def test_five_numbers_all_pushed(capsys):
    assert main(["5", "4", "3", "2", "1"]) == 0
    out = capsys.readouterr().out
    before, after = out.split("\n=== After pushing ===\n")
    assert before.startswith("\n=== Before pushing ===\nA: [num: 5 | idx: 4]")
    assert before.count("pb\n") == 5
    assert after.startswith("A: B: ")
    for value in range(1, 6):
        assert f"[num: {value} | idx: {value - 1}]" in after


def test_no_arguments_prints_nothing(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_negative_numbers_accepted(capsys):
    assert main(["-5", "0", "7"]) == 0
    out = capsys.readouterr().out
    assert "[num: -5 | idx: 0]" in out
    assert "[num: 7 | idx: 2]" in out