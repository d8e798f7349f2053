import pytest

from dialpuzzles.day2 import (
    is_doubled,
    is_repeated,
    main,
    parse_ranges,
    sum_doubled,
    sum_repeated,
)

EXAMPLE = (
    "11-22,95-115,998-1012,1188511880-1188511890,222220-222224,\n"
    "1698522-1698528,446443-446449,38593856-38593862,565653-565659,\n"
    "824824821-824824827,2121212118-2121212124\n"
)


def test_parse_ranges_simple():
    assert parse_ranges("11-22,95-115\n") == [(11, 22), (95, 115)]


def test_parse_ranges_joins_lines():
    assert parse_ranges("11-2\n2,95-11\n5") == [(11, 22), (95, 115)]


@pytest.mark.parametrize("text", ["11-22,", "11", "a-22", "11-x", " 11-22"])
def test_parse_ranges_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_ranges(text)


@pytest.mark.parametrize("digits", ["11", "6464", "123123", "1010"])
def test_is_doubled_true(digits):
    assert is_doubled(digits) is True


@pytest.mark.parametrize("digits", ["1", "101", "1234", "111", "121212"])
def test_is_doubled_false(digits):
    assert is_doubled(digits) is False


@pytest.mark.parametrize("digits", ["11", "111", "121212", "1188511885", "824824824"])
def test_is_repeated_true(digits):
    assert is_repeated(digits) is True


@pytest.mark.parametrize("digits", ["1", "12", "1231", "101"])
def test_is_repeated_false(digits):
    assert is_repeated(digits) is False


def test_every_doubled_number_is_repeated():
    for number in range(1, 20000):
        digits = str(number)
        if is_doubled(digits):
            assert is_repeated(digits)


def test_example_part_one():
    assert sum_doubled(parse_ranges(EXAMPLE)) == 1227775554


def test_example_part_two():
    assert sum_repeated(parse_ranges(EXAMPLE)) == 4174379265


def test_repeated_sum_is_at_least_doubled_sum():
    ranges = parse_ranges(EXAMPLE)
    assert sum_repeated(ranges) >= sum_doubled(ranges)


def test_empty_range_sums_nothing():
    assert sum_doubled([(22, 11)]) == sum_repeated([(22, 11)]) == 0


def test_single_number_range():
    assert sum_doubled([(1212, 1212)]) == 1212
    assert sum_repeated([(121212, 121212)]) == 121212


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    assert main([str(path)]) == 0
    ranges = parse_ranges(EXAMPLE)
    assert capsys.readouterr().out == f"{sum_doubled(ranges)}\n{sum_repeated(ranges)}\n"


def test_main_single_part(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    main([str(path), "--part", "2"])
    assert capsys.readouterr().out == f"{sum_repeated(parse_ranges(EXAMPLE))}\n"


def test_main_missing_file(tmp_path):
    with pytest.raises(SystemExit):
        main([str(tmp_path / "missing.txt")])