import pytest

from oldphonepad import (
    KEYPAD,
    KeyRun,
    UnsupportedCharacterError,
    analyze,
    char_for_press,
    decode,
    encode,
    find_runs,
)


def test_keypad_covers_every_digit():
    assert sorted(KEYPAD) == list("0123456789")
    assert all(KEYPAD.values())
    assert KEYPAD["0"] == " "


def test_keypad_is_read_only():
    with pytest.raises(TypeError):
        KEYPAD["2"] = "XYZ"


@pytest.mark.parametrize(
    "key,count,expected",
    (
        ("2", 1, "A"),
        ("2", 3, "C"),
        ("2", 4, "C"),
        ("2", 9, "C"),
        ("7", 4, "S"),
        ("7", 12, "S"),
        ("0", 5, " "),
        ("1", 2, "'"),
        ("2", 0, None),
        ("2", -1, None),
        ("x", 1, None),
        ("#", 1, None),
    ),
)
def test_char_for_press(key: str, count: int, expected):
    assert char_for_press(key, count) == expected


def test_find_runs():
    runs = list(find_runs("4433555 555666*"))
    assert runs == [
        KeyRun(position=0, text="44", key="4", count=2),
        KeyRun(position=2, text="33", key="3", count=2),
        KeyRun(position=4, text="555", key="5", count=3),
        KeyRun(position=8, text="555", key="5", count=3),
        KeyRun(position=11, text="666", key="6", count=3),
    ]
    assert "".join(run.char for run in runs) == "HELLO"


def test_find_runs_ignores_other_characters():
    assert list(find_runs("")) == []
    assert list(find_runs("* x#")) == []
    assert [run.text for run in find_runs("2a22")] == ["2", "22"]


def test_analyze():
    expected = (
        "Input Analysis:\n"
        "Original: 222 3*33#\n"
        "\n"
        "Consecutive Digit Matches:\n"
        "  Position 0: '222' -> Key '2' pressed 3 time(s) -> 'C'\n"
        "  Position 4: '3' -> Key '3' pressed 1 time(s) -> 'D'\n"
        "  Position 6: '33' -> Key '3' pressed 2 time(s) -> 'E'\n"
    )
    assert analyze("222 3*33#") == expected


def test_analyze_without_terminator():
    report = analyze("2222")
    assert "Input Analysis" in report
    assert "Consecutive Digit Matches" in report
    assert "'2222' -> Key '2' pressed 4 time(s) -> 'C'" in report


@pytest.mark.parametrize("text", ("", None))
def test_analyze_empty_input(text):
    assert analyze(text) == "Empty input"


def test_analyze_never_fails_on_malformed_input():
    report = analyze("2x#y")
    assert "Position 0: '2'" in report


@pytest.mark.parametrize(
    "text,expected",
    (
        ("", "#"),
        ("hello", "4433555 555666#"),
        ("HELLO WORLD", "4433555 555666096667775553#"),
        ("abc", "2 22 222#"),
        ("turing", "8 88777444664#"),
        ("it's", "4448117777#"),
    ),
)
def test_encode(text: str, expected: str):
    assert encode(text) == expected


def test_encode_then_decode():
    text = "Call me at (SEVEN & don't be late"
    assert decode(encode(text)) == text.upper()


@pytest.mark.parametrize("text", ("hi!", "42", "tab\there"))
def test_encode_unsupported(text: str):
    with pytest.raises(UnsupportedCharacterError):
        encode(text)
