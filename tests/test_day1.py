import pytest

from dialpuzzles.day1 import count_zero_passes, main, parse_rotations

EXAMPLE = "L68\nL30\nR48\nL5\nR60\nL55\nL1\nL99\nR14\nL82\n"


def test_parse_rotations_splits_on_any_whitespace():
    assert parse_rotations("L68\nL30  R48\t\nL5") == ["L68", "L30", "R48", "L5"]


def test_parse_rotations_empty_text():
    assert parse_rotations("  \n ") == []


def test_worked_example():
    assert count_zero_passes(parse_rotations(EXAMPLE)) == 6


@pytest.mark.parametrize("turns", [1, 2, 5, 10])
def test_full_turns_right_count_each_turn(turns):
    assert count_zero_passes([f"R{turns * 100}"]) == turns


@pytest.mark.parametrize("turns", [1, 3, 7])
def test_full_turns_left_count_each_turn(turns):
    assert count_zero_passes([f"L{turns * 100}"]) == turns


def test_unknown_direction_turns_up():
    assert count_zero_passes(["X60", "L5"]) == count_zero_passes(["R60", "L5"])


def test_unparseable_amount_counts_as_zero():
    assert count_zero_passes(["Rabc", "R10"]) == count_zero_passes(["R0", "R10"])


def test_more_rotations_never_lower_the_count():
    rotations = parse_rotations(EXAMPLE)
    counts = [count_zero_passes(rotations[:n]) for n in range(len(rotations) + 1)]
    assert counts == sorted(counts)


def test_empty_rotation_is_rejected():
    with pytest.raises(ValueError):
        count_zero_passes(["R10", ""])


def test_main_prints_result(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    assert main([str(path)]) == 0
    expected = count_zero_passes(parse_rotations(EXAMPLE))
    assert capsys.readouterr().out == f"{expected}\n"


def test_main_missing_file(tmp_path):
    with pytest.raises(SystemExit):
        main([str(tmp_path / "missing.txt")])