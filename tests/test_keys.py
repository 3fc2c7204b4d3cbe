import pytest

from docwidgets.keys import normalize_key, parse_combo, parse_step


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("cmd", "Command"),
        ("⌘", "Command"),
        (" CTRL ", "Control"),
        ("⌥", "Option"),
        ("super", "Win"),
        ("return", "Return"),
        ("enter", "Enter"),
        ("escape", "Esc"),
        ("del", "Delete"),
        ("pgdn", "Page Down"),
        ("page up", "Page Up"),
        ("→", "Right"),
        ("spacebar", "Space"),
    ],
)
def test_normalize_key_aliases(raw: str, expected: str) -> None:
    assert normalize_key(raw) == expected


def test_normalize_key_function_keys() -> None:
    assert normalize_key("f5") == "F5"
    assert normalize_key("F12") == "F12"
    assert normalize_key("f99") == "F99"
    assert normalize_key("f100") == "F100"


def test_normalize_key_single_characters_upper_cased() -> None:
    assert normalize_key("p") == "P"
    assert normalize_key("/") == "/"
    assert normalize_key("é") == "É"


def test_normalize_key_free_form_words_capitalized() -> None:
    assert normalize_key("numlock") == "Numlock"
    assert normalize_key("print   screen") == "Print screen"
    assert normalize_key("#hash") == "#hash"


@pytest.mark.parametrize("raw", ["", "   ", None, "⇞", "ΩΩ", "\t\n", "Mixed Case"])
def test_normalize_key_is_total(raw: object) -> None:
    assert isinstance(normalize_key(raw), str)


@pytest.mark.parametrize("raw", ["Cmd", "page up", "f7", "x", "print screen", "⌫"])
def test_normalize_key_is_idempotent(raw: str) -> None:
    once = normalize_key(raw)
    assert normalize_key(once) == once


def test_parse_step_drops_empty_keys() -> None:
    assert parse_step("ctrl + + s") == ("Control", "S")
    assert parse_step(" + ") == ()


def test_parse_combo_string_steps() -> None:
    assert parse_combo("Cmd+Shift+P") == (("Command", "Shift", "P"),)
    assert parse_combo("ctrl+k, ctrl+s") == (("Control", "K"), ("Control", "S"))


def test_parse_combo_sequence_steps() -> None:
    assert parse_combo(["ctrl+k", "", None, "ctrl + s"]) == (("Control", "K"), ("Control", "S"))


@pytest.mark.parametrize("combo", [None, "", "   ", ",", " , + ,", [], ["", "+"]])
def test_parse_combo_empty_inputs(combo: object) -> None:
    assert parse_combo(combo) == ()  # type: ignore[arg-type]


def test_parse_combo_orders_set_steps_by_text() -> None:
    steps = {"shift+c", "ctrl+a", "f5", "alt+b", "cmd+d"}

    assert parse_combo(steps) == (
        ("Alt", "B"),
        ("Command", "D"),
        ("Control", "A"),
        ("F5",),
        ("Shift", "C"),
    )
    assert parse_combo(frozenset(steps)) == parse_combo(steps)
