from cslabs.pronounce_dict import PronounceDict

SAME = ["S", "EH1", "N", "T"]


def _dict():
    return PronounceDict({"SCENT": SAME, "SENT": SAME, "CENT": SAME, "DOG": ["D", "AO1", "G"]})


def test_homophones_true_for_same_pronunciation():
    assert _dict().homophones("scent", "sent") is True


def test_homophones_case_insensitive():
    assert _dict().homophones("ScEnT", "CENT") is True


def test_homophones_false_for_different_pronunciation():
    assert _dict().homophones("dog", "cent") is False


def test_homophones_false_when_word_missing():
    d = _dict()
    assert d.homophones("cat", "sent") is False
    assert d.homophones("sent", "cat") is False


def test_word_is_homophone_of_itself():
    assert _dict().homophones("dog", "dog") is True


def test_from_file_skips_comments(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text(
        ";;; comment line\n"
        "# another comment\n"
        "\n"
        "SCENT  S EH1 N T\n"
        "SENT  S EH1 N T\n"
        "DOG  D AO1 G\n",
        encoding="latin-1",
    )
    d = PronounceDict.from_file(str(path))
    assert len(d) == 3
    assert ";;;" not in d
    assert d.homophones("scent", "sent") is True
    assert d.homophones("dog", "sent") is False


def test_from_file_later_entry_overrides(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("A  X\nB  Y\nA  Y\n", encoding="latin-1")
    d = PronounceDict.from_file(str(path))
    assert d.homophones("a", "b") is True


def test_from_missing_file_is_empty(tmp_path):
    d = PronounceDict.from_file(str(tmp_path / "absent.txt"))
    assert len(d) == 0
    assert d.homophones("a", "a") is False