import pytest

from cslabs.common_words import USAGE, CommonWords, main, remove_punct


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_remove_punct():
    assert remove_punct("don't!") == "dont"
    assert remove_punct("plain") == "plain"
    assert remove_punct("...") == ""


def test_counts_summed_across_files(tmp_path):
    a = _write(tmp_path, "a.txt", "dog pig dog cat\n")
    b = _write(tmp_path, "b.txt", "dog pig pig\n")
    cw = CommonWords([a, b])
    assert cw.get_common_words(3) == ["dog", "pig"]
    assert cw.get_common_words(1) == ["cat", "dog", "pig"]


def test_results_sorted_and_threshold_monotone(tmp_path):
    a = _write(tmp_path, "a.txt", "z y x z y z\n")
    cw = CommonWords([a])
    low = cw.get_common_words(1)
    high = cw.get_common_words(2)
    assert low == sorted(low)
    assert set(high) <= set(low)


def test_punctuation_stripped(tmp_path):
    a = _write(tmp_path, "a.txt", "Dog, dog. dog!\n")
    assert CommonWords([a]).get_common_words(2) == ["dog"]


def test_final_word_without_trailing_space_is_dropped(tmp_path):
    a = _write(tmp_path, "a.txt", "one two")
    assert CommonWords([a]).get_common_words(1) == ["one"]


def test_missing_file_contributes_nothing(tmp_path):
    a = _write(tmp_path, "a.txt", "dog\n")
    cw = CommonWords([a, str(tmp_path / "absent.txt")])
    assert cw.get_common_words(1) == ["dog"]


def test_main_writes_output_file(tmp_path):
    a = _write(tmp_path, "a.txt", "dog pig dog\n")
    b = _write(tmp_path, "b.txt", "dog pig\n")
    out = tmp_path / "out.txt"
    assert main([a, b, "-n", "2", "-o", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == "dog\npig\n"


def test_main_prints_to_stdout_without_output_file(tmp_path, capsys):
    a = _write(tmp_path, "a.txt", "dog dog cat\n")
    assert main([a, "-n", "2"]) == 0
    assert capsys.readouterr().out == "dog\n"


def test_main_reports_unreadable_file(tmp_path, capsys):
    missing = str(tmp_path / "absent.txt")
    assert main([missing]) == 0
    err = capsys.readouterr().err
    assert f"Could not read file: {missing}" in err
    assert USAGE in err


@pytest.mark.parametrize("value", ["abc", ""])
def test_main_bad_number(tmp_path, capsys, value):
    a = _write(tmp_path, "a.txt", "dog\n")
    assert main([a, "-n", value]) == 1
    assert USAGE in capsys.readouterr().err


def test_main_number_too_large(tmp_path, capsys):
    a = _write(tmp_path, "a.txt", "dog\n")
    assert main([a, "-n", "99999999999"]) == 1
    assert "Number too large to take as input." in capsys.readouterr().err