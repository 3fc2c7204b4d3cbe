import pytest

from docwidgets.trail import TrailModel, build_menu_trail, menu_trail_from_props, normalize_segments


def test_normalize_segments_splits_strings_on_commas() -> None:
    assert normalize_segments("Settings, Account ,Security") == ("Settings", "Account", "Security")
    assert normalize_segments(" , ,A,,") == ("A",)


def test_normalize_segments_takes_sequences_element_wise() -> None:
    assert normalize_segments(["  File", "", "Save, As "]) == ("File", "Save, As")
    assert normalize_segments(("A", None, 3)) == ("A", "3")


@pytest.mark.parametrize("segments", [None, "", "  ", [], (), ",,"])
def test_normalize_segments_empty_inputs(segments: object) -> None:
    assert normalize_segments(segments) == ()  # type: ignore[arg-type]


def test_normalize_segments_is_idempotent() -> None:
    once = normalize_segments("Settings, Account, Security")
    assert normalize_segments(once) == once


def test_default_trail_scenario() -> None:
    model = build_menu_trail("Settings, Account, Security")

    assert model is not None
    assert model.segments == ("Settings", "Account", "Security")
    assert model.joiner == "›"
    assert model.mode == "inline"
    assert model.size == "sm"
    assert model.emphasis == "bold"
    assert model.last_index == 2
    assert model.icon is not None
    assert model.icon.name == "bars-staggered"
    assert model.icon.style == "light"
    assert model.icon_label == "Menu"


def test_block_mode_defaults() -> None:
    model = build_menu_trail(["Admin", "Users"], mode="block", title="  Navigation ")

    assert model is not None
    assert model.size == "md"
    assert model.emphasis == "pill"
    assert model.icon is not None
    assert model.icon.style == "solid"
    assert model.title == "Navigation"
    assert model.has_title


def test_title_ignored_outside_block_mode() -> None:
    model = build_menu_trail("A", title="Nav")
    assert model is not None
    assert not model.has_title

    blank = build_menu_trail("A", mode="block", title="   ")
    assert blank is not None
    assert blank.title is None
    assert not blank.has_title


def test_empty_trail_without_icon_renders_nothing() -> None:
    assert build_menu_trail("", icon=False) is None
    assert build_menu_trail([], icon="") is None
    assert build_menu_trail(None, icon="off") is not None
    assert build_menu_trail(None, icon=0) is None


def test_empty_trail_with_icon_is_icon_only() -> None:
    model = build_menu_trail([])

    assert model is not None
    assert model.segments == ()
    assert model.has_icon
    assert model.icon is not None
    assert model.icon.name == "bars-staggered"


def test_explicit_size_emphasis_and_joiner() -> None:
    model = build_menu_trail("A, B", size="lg", emphasise="none", joiner="/", icon=False)

    assert model is not None
    assert model.size == "lg"
    assert model.emphasis == "none"
    assert model.joiner == "/"
    assert not model.has_icon
    assert model.tokens.text == "text-base"


def test_icon_style_scenario() -> None:
    model = build_menu_trail("Files", icon="Folder-Open", icon_style="SHARP_SOLID")

    assert model is not None
    assert model.icon is not None
    assert model.icon.slug == "folder-open"
    assert model.icon.style == "sharp-solid"


def test_pipeline_is_deterministic() -> None:
    first = build_menu_trail("Settings, Account", mode="block", icon_style="duotone")
    second = build_menu_trail("Settings, Account", mode="block", icon_style="duotone")
    assert first == second
    assert isinstance(first, TrailModel)


def test_menu_trail_from_props_accepts_camel_case() -> None:
    model = menu_trail_from_props(
        {
            "segments": "Edit, Preferences",
            "iconStyle": "brand",
            "icon": "github",
            "iconLabel": "GitHub",
            "emphasise": "pill",
            "unknownProp": 1,
        }
    )

    assert model is not None
    assert model.icon is not None
    assert model.icon.style == "brands"
    assert model.icon_label == "GitHub"
    assert model.emphasis == "pill"


def test_normalize_segments_orders_sets_by_text() -> None:
    assert normalize_segments({"Security", "Account", "Settings"}) == ("Account", "Security", "Settings")
    assert normalize_segments({"b": 1}.keys()) == ("b",)


def test_falsy_icon_label_hides_label() -> None:
    for label in (False, 0, ""):
        model = build_menu_trail("A", icon_label=label)
        assert model is not None
        assert model.icon_label == ""

    default = build_menu_trail("A", icon_label=None)
    assert default is not None
    assert default.icon_label == "Menu"
