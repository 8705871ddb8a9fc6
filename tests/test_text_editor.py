import pytest

from multilang_keyboard import text_editor
from multilang_keyboard.text_editor import TextField


@pytest.mark.parametrize("text", ["x", "xyz", "कि", "\n"])
def test_insert_at_collapsed_cursor(text):
    field = TextField("ab", 1, 1)
    assert text_editor.insert(field, text) == text
    assert field.value == "a" + text + "b"
    assert field.selection_start == field.selection_end == 1 + len(text)


def test_insert_replaces_selection():
    field = TextField("hello world", 6, 11)
    text_editor.insert(field, "there")
    assert field.value == "hello there"
    assert (field.selection_start, field.selection_end) == (11, 11)


def test_insert_tolerates_reversed_and_out_of_range_selection():
    field = TextField("abc", 5, 1)
    text_editor.insert(field, "Z")
    assert field.value == "aZ"
    assert field.selection_start == 2


def test_backspace_at_start_is_noop():
    field = TextField("abc", 0, 0)
    assert text_editor.delete_backward(field) == ""
    assert field == TextField("abc", 0, 0)


def test_backspace_deletes_selection():
    field = TextField("abc", 1, 2)
    assert text_editor.delete_backward(field) == "b"
    assert field.value == "ac"
    assert (field.selection_start, field.selection_end) == (1, 1)


def test_backspace_deletes_previous_character():
    field = TextField("abc", 3, 3)
    assert text_editor.delete_backward(field) == "c"
    assert field == TextField("ab", 2, 2)


def test_backspace_keeps_combining_vowel_sign_with_its_consonant():
    # क + ि is one grapheme cluster
    field = TextField("नकि", 3, 3)
    assert text_editor.delete_backward(field) == "कि"
    assert field == TextField("न", 1, 1)


def test_backspace_removes_combining_accent_with_base():
    field = TextField("cafe\u0301!", 5, 5)
    assert text_editor.delete_backward(field) == "e\u0301"
    assert field == TextField("caf!", 3, 3)


def test_operations_without_target_are_noops():
    assert text_editor.insert(None, "a") is None
    assert text_editor.delete_backward(None) is None
    assert text_editor.clear(None) is False


def test_clear_collapses_cursor():
    field = TextField("something", 2, 7)
    assert text_editor.clear(field) is True
    assert field == TextField("", 0, 0)


def test_backspace_in_long_text_segments_only_the_tail(monkeypatch):
    segmented = []
    graphemes = text_editor.grapheme.graphemes

    def spy(text):
        segmented.append(len(text))
        return graphemes(text)

    monkeypatch.setattr(text_editor.grapheme, "graphemes", spy)
    value = "नमस्ते " * 500 + "कि"
    field = TextField(value, len(value), len(value))
    assert text_editor.delete_backward(field) == "कि"
    assert field.value == value[:-2]
    assert max(segmented) < 100


def test_backspace_removes_cluster_longer_than_tail():
    value = "xyz" + "a" + "\u0301" * 40
    field = TextField(value, len(value), len(value))
    assert text_editor.delete_backward(field) == "a" + "\u0301" * 40
    assert field == TextField("xyz", 3, 3)


def test_backspace_after_long_run_of_flag_letters():
    # 33 regional indicators pair up from the start, leaving the last alone
    value = "\U0001F1FA" * 33
    field = TextField(value, 33, 33)
    assert text_editor.delete_backward(field) == "\U0001F1FA"
    assert field.selection_start == 32
