"""Unit tests for argument list building and ArgumentList views."""

import pytest

from cmdparser.parsing import (
    INVISIBLE_CHARS,
    Argument,
    ArgumentList,
    ArgumentView,
    build,
    strip_invisible_chars,
)


@pytest.mark.unit
class TestStripInvisibleChars:
    """Test suite for strip_invisible_chars."""

    def test_removes_zero_width_space(self):
        """Zero width spaces are removed."""
        assert strip_invisible_chars("a\u200bb") == "ab"

    def test_removes_every_invisible_char(self):
        """Every character of the invisible set is removed."""
        text = "x" + "".join(sorted(INVISIBLE_CHARS)) + "y"
        assert strip_invisible_chars(text) == "xy"

    def test_keeps_ordinary_whitespace(self):
        """Spaces and tabs are not invisible characters."""
        assert strip_invisible_chars(" a\tb ") == " a\tb "


@pytest.mark.unit
class TestBuild:
    """Test suite for build."""

    def test_preserves_order(self):
        """Arguments keep the order of the raw substrings."""
        args = build(["c", "a", "b"])
        assert [arg.raw for arg in args] == ["c", "a", "b"]

    def test_value_is_trimmed(self):
        """Values are trimmed of surrounding whitespace."""
        args = build(["  hello world \t"])
        assert args[0] == Argument(raw="  hello world \t", value="hello world")

    def test_value_strips_invisible_chars_before_trimming(self):
        """Whitespace hidden behind invisible characters is trimmed too."""
        args = build(["\u200b hello \ufeff"])
        assert args[0].value == "hello"
        assert args[0].raw == "\u200b hello \ufeff"

    def test_internal_whitespace_is_kept(self):
        """Whitespace inside a value is not collapsed."""
        assert build([" multi   space "])[0].value == "multi   space"

    def test_escape_marker_kept_in_value(self):
        """Escaped separators are not unescaped."""
        assert build(["hello\\, world"])[0].value == "hello\\, world"

    def test_accepts_any_iterable(self):
        """Raw arguments may come from a generator."""
        args = build(raw for raw in ["a", "b"])
        assert len(args) == 2

    def test_empty_input(self):
        """No raw arguments builds an empty list."""
        args = build([])
        assert len(args) == 0
        assert args.only("raw") == []


@pytest.mark.unit
class TestArgumentList:
    """Test suite for ArgumentList."""

    def test_only_raw_keeps_empty_arguments(self):
        """The raw view includes empty strings."""
        args = build(["a", "b", ""])
        assert args.only("raw") == ["a", "b", ""]

    def test_only_value_drops_empty_arguments(self):
        """The value view excludes arguments empty after cleaning."""
        args = build(["a", "b", "", "  ", "\u200b"])
        assert args.only("value") == ["a", "b"]

    def test_only_accepts_enum(self):
        """Views can be selected with ArgumentView members."""
        args = build([" a "])
        assert args.only(ArgumentView.RAW) == [" a "]
        assert args.only(ArgumentView.VALUE) == ["a"]

    def test_only_unknown_kind_raises(self):
        """An unknown view is rejected."""
        with pytest.raises(ValueError):
            build(["a"]).only("values")

    def test_only_returns_distinct_copies(self):
        """Successive calls return equal but distinct lists."""
        args = build(["a", "b"])
        first = args.only("raw")
        second = args.only("raw")

        assert first == second
        assert first is not second

    def test_mutating_view_does_not_affect_list(self):
        """Mutating a returned view leaves the list and later views intact."""
        args = build(["a", "b"])
        view = args.only("value")
        view.append("c")
        view[0] = "z"

        assert args.only("value") == ["a", "b"]
        assert [arg.value for arg in args] == ["a", "b"]

    def test_is_immutable(self):
        """Arguments can't be reassigned."""
        args = build(["a"])
        with pytest.raises(AttributeError):
            args.arguments = ()
        with pytest.raises(AttributeError):
            args[0].value = "b"

    def test_list_argument_is_copied_to_tuple(self):
        """A list passed at construction is copied, not shared."""
        source = [Argument("a", "a")]
        args = ArgumentList(arguments=source)
        source.append(Argument("b", "b"))

        assert isinstance(args.arguments, tuple)
        assert args.only("raw") == ["a"]
        assert not hasattr(args.arguments, "append")

    def test_sequence_behaviour(self):
        """ArgumentList supports len, iteration and indexing."""
        args = ArgumentList((Argument("a", "a"), Argument(" b", "b")))

        assert len(args) == 2
        assert list(args) == [Argument("a", "a"), Argument(" b", "b")]
        assert args[1].raw == " b"
        assert args[-1].value == "b"

    def test_equality(self):
        """Lists built from the same raw arguments are equal."""
        assert build(["a", " b"]) == build(["a", " b"])
