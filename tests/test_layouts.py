import json

import pytest

from multilang_keyboard.errors import LayoutError, UnknownLanguage
from multilang_keyboard.kb_layout import LayoutTable
from multilang_keyboard.kb_layout_io import (
    BUILTIN_LANGUAGES,
    LayoutRegistry,
    builtin_layouts,
    default_registry,
    load_layout,
    load_layout_dir,
)
from multilang_keyboard.key_types import Control, is_control


def _table(name="Test", normal=(("a", "Shift"),), shift=(("A", "Shift"),), **kw):
    return LayoutTable(name, normal, shift, **kw)


@pytest.mark.parametrize("language", BUILTIN_LANGUAGES)
def test_builtin_grids_have_matching_shape(language):
    table = default_registry().get(language)
    assert [len(r) for r in table.normal] == [len(r) for r in table.shift]
    assert table.locale.endswith(("-US", "-IN"))


def test_control_tokens_match_between_normal_and_shifted_grids():
    for language, table in builtin_layouts():
        for row, shifted_row in zip(table.normal, table.shift):
            for key, shifted in zip(row, shifted_row):
                assert is_control(key) == is_control(shifted), language
                if is_control(key):
                    assert key == shifted, language


def test_registry_lists_languages_in_insertion_order_and_restarts():
    registry = default_registry()
    assert list(registry.languages()) == list(BUILTIN_LANGUAGES)
    # every call gives a fresh, finite iteration
    assert list(registry.languages()) == list(BUILTIN_LANGUAGES)
    registry.register("custom", _table())
    assert list(registry)[-1] == "custom"
    assert len(registry) == len(BUILTIN_LANGUAGES) + 1


def test_register_overwrites_existing_entry():
    registry = LayoutRegistry()
    registry.register("x", _table(name="first"))
    registry.register("x", _table(name="second"))
    assert registry.get("x").name == "second"
    assert list(registry.languages()) == ["x"]


def test_get_unknown_language_raises():
    with pytest.raises(UnknownLanguage) as info:
        default_registry().get("klingon")
    assert info.value.language == "klingon"
    assert isinstance(info.value, KeyError)


def test_registries_are_independent():
    first = default_registry()
    second = default_registry()
    first.register("custom", _table())
    assert "custom" in first
    assert "custom" not in second


def test_mismatched_shapes_are_rejected():
    with pytest.raises(LayoutError):
        _table(normal=(("a", "b"),), shift=(("A",),))
    with pytest.raises(LayoutError):
        _table(normal=(("a",), ("b",)), shift=(("A",),))


def test_empty_rows_and_keys_are_rejected():
    with pytest.raises(LayoutError):
        _table(normal=(), shift=())
    with pytest.raises(LayoutError):
        _table(normal=((),), shift=((),))
    with pytest.raises(LayoutError):
        _table(normal=(("",),), shift=(("A",),))


def test_table_is_immutable_and_selects_grid():
    table = _table(normal=[["a", "b"]], shift=[["A", "B"]])
    assert table.normal == (("a", "b"),)
    assert table.grid(False) is table.normal
    assert table.grid(True) is table.shift
    assert table.shape == (2,)
    with pytest.raises(AttributeError):
        table.name = "other"


def test_load_layout_defaults_locale(tmp_path):
    path = tmp_path / "klingon.json"
    path.write_text(
        json.dumps({"name": "Klingon", "normal": [["a", "Space"]], "shift": [["A", "Space"]]}),
        encoding="utf-8",
    )
    table = load_layout(path)
    assert table.name == "Klingon"
    assert table.locale == "en-US"


def test_load_layout_missing_field(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text(json.dumps({"name": "Broken", "normal": [["a"]]}), encoding="utf-8")
    with pytest.raises(LayoutError):
        load_layout(path)


def test_load_layout_dir_registers_by_stem(tmp_path):
    for stem in ("zulu", "afrikaans"):
        (tmp_path / f"{stem}.json").write_text(
            json.dumps({"name": stem, "locale": "xx-ZA", "normal": [["a"]], "shift": [["A"]]}),
            encoding="utf-8",
        )
    registry = LayoutRegistry()
    assert load_layout_dir(registry, tmp_path) == ["afrikaans", "zulu"]
    assert registry.get("zulu").locale == "xx-ZA"


def test_load_layout_dir_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_layout_dir(LayoutRegistry(), tmp_path / "nope")


def test_parse_symbol_classification():
    assert is_control("Space")
    assert is_control(Control.Caps)
    assert not is_control("a")
    assert not is_control("क्ष")
    assert not is_control("")
    assert not is_control(None)
