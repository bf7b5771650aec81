"""Tests for prompt choices and the interactive selection loop."""

from __future__ import annotations

from unittest.mock import patch

from code2prompt_manager.models.entry import Entry
from code2prompt_manager.models.selection import Choice
from code2prompt_manager.prompt import build_choices, parse_toggles, select_excludes

ENTRIES = [
    Entry("src", True, 1500),
    Entry("big.js", False, 1000),
    Entry("src/app.min.js", False, 400),
    Entry("node_modules", True, 0),
    Entry("src/main.js", False, 100),
]


class TestBuildChoices:
    def test_files_then_directories(self):
        choices = build_choices(ENTRIES, [])
        assert [c.value for c in choices] == [
            "big.js", "src/app.min.js", "src/main.js", "src/**", "node_modules/**",
        ]
        assert [c.is_directory for c in choices] == [False, False, False, True, True]

    def test_labels(self):
        choices = {c.value: c for c in build_choices(ENTRIES, [])}
        assert choices["big.js"].label == " 1000.00 B │ big.js"
        assert choices["src/**"].label.endswith("│ src/")
        assert choices["src/**"].label.startswith("   1.46 KB")

    def test_checked_by_patterns_and_auto(self):
        choices = {c.value: c for c in build_choices(ENTRIES, ["node_modules/**", "**/*.min.js"], ["big.js"])}
        assert choices["node_modules/**"].checked
        assert choices["src/app.min.js"].checked
        assert choices["big.js"].checked
        assert not choices["src/main.js"].checked
        assert not choices["src/**"].checked


class TestParseToggles:
    def test_numbers_and_ranges(self):
        assert parse_toggles("1, 3-4", 5) == ({0, 2, 3}, [])

    def test_reversed_range(self):
        assert parse_toggles("4-2", 5) == ({1, 2, 3}, [])

    def test_invalid_tokens(self):
        indexes, invalid = parse_toggles("0,2,9,x,1-", 5)
        assert indexes == {1}
        assert invalid == ["0", "9", "x", "1-"]

    def test_non_ascii_digits_rejected(self):
        assert parse_toggles("\u00b2", 3) == (set(), ["\u00b2"])
        assert parse_toggles("1-\u00b2, 2", 3) == ({1}, ["1-\u00b2"])

    def test_space_separated(self):
        assert parse_toggles("1 2", 3) == ({0, 1}, [])


def _choices():
    return [
        Choice(label="a", value="a.txt", size=3, checked=True),
        Choice(label="b", value="b.txt", size=2),
        Choice(label="d", value="d/**", size=5, is_directory=True),
    ]


def _run(inputs, choices=None):
    with patch("code2prompt_manager.prompt.click.prompt", side_effect=inputs):
        return select_excludes(choices or _choices(), page_size=0)


class TestSelectExcludes:
    def test_confirm_keeps_prechecked(self):
        assert _run([""]) == ["a.txt"]

    def test_toggle(self):
        assert _run(["1,3", ""]) == ["d/**"]

    def test_all_and_none(self):
        assert _run(["a", ""]) == ["a.txt", "b.txt", "d/**"]
        assert _run(["n", ""]) == []

    def test_invalid_input_ignored(self, capsys):
        assert _run(["zz", "2", ""]) == ["a.txt", "b.txt"]
        assert "Ignoring invalid selection: zz" in capsys.readouterr().out

    def test_updates_choices_in_place(self):
        choices = _choices()
        _run(["2", ""], choices)
        assert choices[1].checked
