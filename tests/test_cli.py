import pytest

from sortsteps.cli import main

SOURCE_ARRAY = [19, 48, 99, 71, 13, 52, 96, 73, 86, 7]


def _joined(values):
    return ", ".join(str(v) for v in values)


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_bubble_default_run(capsys):
    assert main(["bubble"]) == 0
    lines = _lines(capsys)
    assert lines[0] == _joined(SOURCE_ARRAY)
    assert lines[1] == ""
    assert lines[-2] == ""
    assert lines[-1] == _joined(sorted(SOURCE_ARRAY))


def test_selection_default_run(capsys):
    assert main(["selection"]) == 0
    assert _lines(capsys) == ["19, 1, 0", "", "0, 1, 19", "", "0, 1, 19"]


@pytest.mark.parametrize(
    "algorithm",
    ["quick", "shell", "counting", "merge", "heap", "radix", "quick-hoare",
     "insertion"],
)
def test_default_runs_end_sorted(algorithm, capsys):
    assert main([algorithm]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[-1] == _joined(sorted(SOURCE_ARRAY))
    assert "ERROR" not in out


def test_cocktail_default_run(capsys):
    assert main(["cocktail"]) == 0
    lines = _lines(capsys)
    assert lines[0] == "39, 31, 19, 42, 12"
    assert lines[-1] == _joined(sorted([39, 31, 19, 42, 12]))


@pytest.mark.parametrize("algorithm", ["bitonic", "bitonic-network"])
def test_bitonic_default_runs(algorithm, capsys):
    source = [100, 93, 40, 57, 14, 58, 85, 54, 31, 56, 46, 39, 15, 26, 78, 13]
    assert main([algorithm]) == 0
    lines = _lines(capsys)
    assert lines[0] == _joined(source)
    assert lines[-1] == _joined(sorted(source))


def test_values_option(capsys):
    values = [87, 65, 28, 63, 93, 52, 39, 59, 27, 30, 24, 83, 69, 62, 13]
    assert main(["quick-hoare", "--values", *map(str, values)]) == 0
    lines = _lines(capsys)
    assert lines[0] == _joined(values)
    assert lines[-1] == _joined(sorted(values))


@pytest.mark.parametrize("algorithm", ["selection", "heap", "cocktail", "radix"])
def test_random_input_is_sorted_and_checked(algorithm, capsys):
    argv = [algorithm, "--random", "30", "--max", "100", "--seed", "7"]
    assert main(argv) == 0
    out = capsys.readouterr().out
    first = [int(v) for v in out.splitlines()[0].split(", ")]
    last = [int(v) for v in out.splitlines()[-1].split(", ")]
    assert len(first) == 30
    assert all(0 <= v < 100 for v in first)
    assert last == sorted(first)
    assert "ERROR" not in out


def test_random_with_seed_is_reproducible(capsys):
    main(["bubble", "--random", "12", "--max", "50", "--seed", "11"])
    first = capsys.readouterr().out
    main(["bubble", "--random", "12", "--max", "50", "--seed", "11"])
    assert capsys.readouterr().out == first


def test_deck_run(capsys):
    assert main(["deck"]) == 0
    lines = _lines(capsys)
    assert lines[0].startswith("{Jack, C}, {4, H}, {3, H}")
    assert lines[-4].startswith("{Ace, S}, {2, S}")
    assert lines[-1].startswith("{Ace, D}")
    assert lines[-1].endswith("{King, D}")


def test_deck_insertion_matches_deck(capsys):
    main(["deck"])
    shaker = capsys.readouterr().out
    main(["deck-insertion"])
    assert capsys.readouterr().out == shaker


def test_deck_rejects_values():
    with pytest.raises(SystemExit):
        main(["deck", "--values", "1", "2"])


def test_unknown_algorithm_exits():
    with pytest.raises(SystemExit):
        main(["bogus"])


def test_counting_rejects_negative(capsys):
    assert main(["counting", "--values", "3", "-1", "2"]) == 1
    assert "non-negative" in capsys.readouterr().err


def test_empty_list_fails(capsys):
    assert main(["cocktail", "--random", "0"]) == 1
    assert capsys.readouterr().out == ""


def test_negative_random_length_fails(capsys):
    assert main(["bubble", "--random", "-3"]) == 1
    assert "length" in capsys.readouterr().err