import os

import pytest

from leafedit.selector import (
    CharsetTable,
    DialogMode,
    FileInfo,
    LineEnd,
    charset_supported,
    directory_path,
    lineend_index,
    manual_charset_label,
    set_manual_charset,
)


@pytest.fixture
def table():
    return CharsetTable("ISO-8859-1", ["EUC-JP", None, "SHIFT_JIS"])


@pytest.mark.parametrize("lineend", list(LineEnd))
def test_lineend_index_round_trip(lineend):
    assert LineEnd.from_index(lineend_index(lineend)) is lineend


def test_lineend_menu_order():
    assert [e.label for e in LineEnd] == ["LF", "CR+LF", "CR"]
    assert lineend_index(LineEnd.CRLF) == 1


def test_unknown_lineend_index_means_lf():
    assert LineEnd.from_index(7) is LineEnd.LF


def test_table_skips_missing_items(table):
    assert table.charsets == ["ISO-8859-1", "UTF-8", "EUC-JP", "SHIFT_JIS"]
    assert table.labels[0] == "Current Locale (ISO-8859-1)"
    assert len(table) == 4


def test_menu_labels_open_and_save(table):
    opened = table.menu_labels(DialogMode.OPEN)
    saved = table.menu_labels(DialogMode.SAVE, "KOI8-R")
    assert opened[0] == "Auto-Detect"
    assert opened[-1] == "Other Codeset..."
    assert saved[-1] == "Other Codeset (KOI8-R)"
    assert len(opened) == len(saved) + 1


def test_manual_charset_label():
    assert manual_charset_label(None) == "Other Codeset..."
    assert manual_charset_label("EUC-JP") == "Other Codeset (EUC-JP)"


def test_initial_index_save_is_case_insensitive(table):
    info = FileInfo(charset="utf-8")
    assert table.initial_index(info, DialogMode.SAVE) == 1
    assert info.charset == "utf-8"


def test_initial_index_save_without_charset(table):
    assert table.initial_index(FileInfo(), DialogMode.SAVE) == 0


def test_initial_index_open_flagged(table):
    info = FileInfo(charset="EUC-JP", charset_flag=True)
    assert table.initial_index(info, DialogMode.OPEN) == 3


def test_initial_index_open_unflagged_drops_charset(table):
    info = FileInfo(charset="UTF-8")
    assert table.initial_index(info, DialogMode.OPEN) is None
    assert info.charset is None


def test_initial_index_unknown_charset_is_manual_entry(table):
    info = FileInfo(charset="KOI8-R")
    index = table.initial_index(info, DialogMode.SAVE)
    assert index == len(table)
    assert table.select(info, index, DialogMode.SAVE) is False


def test_select_auto_detect_clears_charset(table):
    info = FileInfo(charset="UTF-8")
    assert table.select(info, 0, DialogMode.OPEN) is True
    assert info.charset is None


def test_select_entry_sets_charset(table):
    info = FileInfo()
    assert table.select(info, 2, DialogMode.OPEN) is True
    assert info.charset == "UTF-8"
    assert table.select(info, 0, DialogMode.SAVE) is True
    assert info.charset == "ISO-8859-1"


@pytest.mark.parametrize("index", [-1, 6])
def test_select_out_of_range(table, index):
    with pytest.raises(IndexError):
        table.select(FileInfo(), index, DialogMode.OPEN)


def test_charset_supported():
    assert charset_supported("UTF-8")
    assert charset_supported("latin-1")
    assert not charset_supported("no-such-codeset")
    assert not charset_supported("")


def test_set_manual_charset_accepts_supported():
    info = FileInfo()
    label = set_manual_charset(info, "cp1252")
    assert (info.charset, info.charset_flag) == ("cp1252", True)
    assert label == manual_charset_label("cp1252")


def test_set_manual_charset_rejects_unknown():
    info = FileInfo(charset="UTF-8")
    with pytest.raises(ValueError, match="is not supported"):
        set_manual_charset(info, "no-such-codeset")
    assert info.charset == "UTF-8"
    assert info.charset_flag is False


def test_fileinfo_copy_is_independent():
    info = FileInfo(filename="a.txt", charset="UTF-8")
    other = info.copy()
    other.charset = None
    assert info.charset == "UTF-8"
    assert other.filename == "a.txt"


def test_directory_path_adds_separator_once():
    path = os.path.join("some", "dir")
    once = directory_path(path)
    assert once == path + os.sep
    assert directory_path(once) == once
    assert directory_path("") == os.sep