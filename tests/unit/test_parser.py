"""Unit tests for the font parser."""

import io

import pytest

from conftest import build_font_source

from figletize.domain import SmushMode, TextDirection
from figletize.exceptions import MalformedFontError
from figletize.io import FontParser, parse_font, parse_font_bytes, smush_mode_from_layout
from figletize.io.parser import parse_codepoint, strip_end_marks
from figletize.utils import StringPool


class FailingStream(io.RawIOBase):
    """Stream whose reads always fail."""

    def readable(self) -> bool:
        return True

    def readline(self, size: int = -1) -> bytes:
        raise OSError("device not ready")


class TestSmushModeFromLayout:
    """Tests for deriving the smush mode from header fields."""

    @pytest.mark.parametrize(
        ("old_layout", "full_layout", "expected"),
        [
            (-1, None, 0),
            (0, None, SmushMode.KERN),
            (15, None, SmushMode.SMUSH | 15),
            (64, None, SmushMode.SMUSH),
            (63, None, SmushMode.SMUSH | 63),
            (15, 143, 143),
            (-1, 144, 144),
            (0, 64, SmushMode.KERN),
            (15, 24463, 143),
            (15, 15, 0),
            (15, 0, 0),
        ],
    )
    def test_derivation(self, old_layout, full_layout, expected) -> None:
        """Test old and full layout values map to smush modes."""
        assert smush_mode_from_layout(old_layout, full_layout) == expected


class TestHelpers:
    """Tests for line level helpers."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [("196", 196), ("0xC4", 196), ("0X00c4", 196), ("0304", 196), ("0", 0), ("-5", -5)],
    )
    def test_parse_codepoint(self, token, expected) -> None:
        """Test decimal, hexadecimal and octal code tags."""
        assert parse_codepoint(token) == expected

    def test_parse_codepoint_rejects_words(self) -> None:
        """Test non-numeric tags raise ValueError."""
        with pytest.raises(ValueError):
            parse_codepoint("LATIN")

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (" _ @", " _ "),
            ("|_|@@", "|_|"),
            ("  @  ", "  "),
            ("@##", "@"),
            ("@@", ""),
        ],
    )
    def test_strip_end_marks(self, raw, expected) -> None:
        """Test end marks and trailing whitespace are removed."""
        assert strip_end_marks(raw) == expected


class TestHeader:
    """Tests for header parsing."""

    def test_fields(self) -> None:
        """Test header fields end up on the font."""
        font = parse_font_bytes(
            build_font_source(height=2, hard_blank="#", old_layout=0, comments=["one", "two"]),
            name="demo",
        )
        assert font.name == "demo"
        assert font.height == 2
        assert font.baseline == 2
        assert font.hard_blank == "#"
        assert font.smush_mode == SmushMode.KERN
        assert font.direction == TextDirection.LEFT_TO_RIGHT
        assert font.comments == ("one", "two")

    def test_right_to_left(self) -> None:
        """Test the print direction field."""
        font = parse_font_bytes(build_font_source(direction=1))
        assert font.direction == TextDirection.RIGHT_TO_LEFT

    def test_full_layout_wins(self) -> None:
        """Test full layout supersedes old layout."""
        font = parse_font_bytes(build_font_source(old_layout=-1, full_layout=128 + 8))
        assert font.smush_mode == SmushMode.SMUSH | SmushMode.PAIR

    def test_comments_verbatim(self) -> None:
        """Test comment lines are kept as written, including blanks."""
        comments = ["  indented @", "", "flf2a$ looks like a header"]
        font = parse_font_bytes(build_font_source(comments=comments))
        assert font.comments == tuple(comments)

    def test_missing_signature(self) -> None:
        """Test a header without signature is rejected."""
        data = build_font_source().replace(b"flf2a", b"flf1a", 1)
        with pytest.raises(MalformedFontError) as exc_info:
            parse_font_bytes(data)
        assert exc_info.value.line_number == 1
        assert "signature" in exc_info.value.reason

    def test_empty_stream(self) -> None:
        """Test an empty definition is rejected."""
        with pytest.raises(MalformedFontError, match="empty"):
            parse_font_bytes(b"")

    def test_too_few_fields(self) -> None:
        """Test the five required header fields."""
        with pytest.raises(MalformedFontError, match="at least 5 fields"):
            parse_font_bytes(b"flf2a$ 1 1 2 -1\n")

    def test_non_numeric_field(self) -> None:
        """Test non-integer header fields are rejected."""
        with pytest.raises(MalformedFontError, match="not an integer"):
            parse_font_bytes(b"flf2a$ 1 one 2 -1 0\n")

    def test_zero_height(self) -> None:
        """Test height must be positive."""
        with pytest.raises(MalformedFontError, match="height"):
            parse_font_bytes(b"flf2a$ 0 0 2 -1 0\n")

    def test_baseline_above_height(self) -> None:
        """Test baseline may not exceed height."""
        with pytest.raises(MalformedFontError, match="baseline"):
            parse_font_bytes(b"flf2a$ 2 3 2 -1 0\n")

    def test_unknown_direction(self) -> None:
        """Test print direction must be 0 or 1."""
        with pytest.raises(MalformedFontError, match="direction"):
            parse_font_bytes(b"flf2a$ 1 1 2 -1 0 7\n")

    def test_missing_comment_lines(self) -> None:
        """Test a stream ending inside the comments."""
        with pytest.raises(MalformedFontError, match="comment"):
            parse_font_bytes(b"flf2a$ 1 1 2 -1 3\nonly one\n")


class TestCharacters:
    """Tests for required and code-tagged character blocks."""

    def test_required_characters(self) -> None:
        """Test every printable ASCII character and the German set are loaded."""
        font = parse_font_bytes(build_font_source())
        for code in range(32, 127):
            assert font.contains(chr(code))
        for char in "ÄÖÜäöüß":
            assert font.contains(char)
        assert font.get_glyph("ß").rows[0].content == "ß"

    def test_glyph_rows(self) -> None:
        """Test block rows are stripped of end marks and padding is counted."""
        font = parse_font_bytes(
            build_font_source({"A": ["  _  ", " /_\\ ", "/   \\"]}, height=3)
        )
        glyph = font.get_glyph("A")
        assert [row.content for row in glyph.rows] == ["  _  ", " /_\\ ", "/   \\"]
        assert glyph.rows[0].space_before == 2
        assert glyph.rows[0].space_after == 2
        assert glyph.rows[2].space_before == 0

    def test_extended_characters_optional(self) -> None:
        """Test older fonts without the German characters still parse."""
        font = parse_font_bytes(build_font_source(include_extended=False))
        assert font.contains("~")
        assert not font.contains("Ä")

    def test_code_tags_after_ascii(self) -> None:
        """Test a code tag right after the ASCII range is not read as Ä."""
        font = parse_font_bytes(
            build_font_source(include_extended=False, height=2, tagged=[("256", ["x", "y"])])
        )
        assert font.glyphs_by_slot[196] is None
        assert [row.content for row in font.glyphs_sparse[256].rows] == ["x", "y"]

    def test_single_row_code_tags_after_ascii(self) -> None:
        font = parse_font_bytes(
            build_font_source(
                include_extended=False, tagged=[("0x100 A WITH MACRON", ["A"]), ("169", ["C"])]
            )
        )
        assert not font.contains("Ä")
        assert font.glyphs_sparse[256].rows[0].content == "A"
        assert font.glyphs_by_slot[169].rows[0].content == "C"

    def test_missing_ascii_character(self) -> None:
        """Test a font that stops inside the ASCII range is rejected."""
        lines = build_font_source().splitlines(keepends=True)
        data = b"".join(lines[: 1 + 50])
        with pytest.raises(MalformedFontError, match="missing required character"):
            parse_font_bytes(data)

    def test_truncated_required_block(self) -> None:
        """Test a last block with fewer than height rows is rejected."""
        lines = build_font_source(height=2, include_extended=False).splitlines(keepends=True)
        data = b"".join(lines[:-1])
        with pytest.raises(MalformedFontError) as exc_info:
            parse_font_bytes(data)
        assert exc_info.value.line_number == len(lines) - 1
        assert "1 of 2 rows" in exc_info.value.reason

    def test_truncated_tagged_block(self) -> None:
        """Test a code tag followed by too few rows is rejected."""
        data = build_font_source(height=2, tagged=[("300", ["x"])])
        with pytest.raises(MalformedFontError, match="1 of 2 rows"):
            parse_font_bytes(data)

    def test_tag_without_rows(self) -> None:
        """Test a trailing code tag without any rows reports its line."""
        data = build_font_source(include_extended=False) + b"256\n"
        with pytest.raises(MalformedFontError) as exc_info:
            parse_font_bytes(data)
        assert exc_info.value.line_number == 1 + 95 + 1

    def test_row_without_end_mark(self) -> None:
        """Test blank glyph rows are rejected."""
        lines = build_font_source(height=2).splitlines(keepends=True)
        lines[2] = b"\n"
        with pytest.raises(MalformedFontError, match="end mark"):
            parse_font_bytes(b"".join(lines))

    def test_code_tags(self) -> None:
        """Test decimal, hex and octal tags with trailing comments."""
        font = parse_font_bytes(
            build_font_source(
                tagged=[
                    ("0x20AC  EURO SIGN", ["E"]),
                    ("169 COPYRIGHT SIGN", ["C"]),
                    ("0 missing character", ["?"]),
                    ("-2", ["n"]),
                ]
            )
        )
        assert font.get_glyph("€").rows[0].content == "E"
        assert font.glyphs_sparse[0x20AC].rows[0].content == "E"
        assert font.glyphs_by_slot[169].rows[0].content == "C"
        assert font.glyphs_by_slot[0].rows[0].content == "?"
        assert font.glyphs_sparse[-2].rows[0].content == "n"

    def test_tags_read_until_end_of_stream(self) -> None:
        """Test trailing blank lines after the last block are ignored."""
        data = build_font_source(tagged=[("300", ["x"])]) + b"\n\n"
        font = parse_font_bytes(data)
        assert font.contains("Ĭ")

    def test_declared_tag_count(self) -> None:
        """Test only the declared number of tagged blocks is read."""
        data = build_font_source(
            full_layout=0, codetag_count=1, tagged=[("300", ["x"]), ("301", ["y"])]
        )
        font = parse_font_bytes(data)
        assert 300 in font.glyphs_sparse
        assert 301 not in font.glyphs_sparse

    def test_declared_tag_count_not_met(self) -> None:
        """Test fewer tagged blocks than declared is rejected."""
        data = build_font_source(full_layout=0, codetag_count=2, tagged=[("300", ["x"])])
        with pytest.raises(MalformedFontError, match="expected 2 code-tagged"):
            parse_font_bytes(data)

    def test_invalid_tag(self) -> None:
        """Test an unparseable code tag is rejected."""
        data = build_font_source(tagged=[("EURO", ["E"])])
        with pytest.raises(MalformedFontError, match="code tag"):
            parse_font_bytes(data)

    def test_crlf_line_endings(self) -> None:
        """Test CRLF fonts parse like LF fonts."""
        glyphs = {"A": [" A ", "/ \\"]}
        lf = parse_font_bytes(build_font_source(glyphs, height=2))
        crlf = parse_font_bytes(build_font_source(glyphs, height=2, newline="\r\n"))
        assert crlf.get_glyph("A") == lf.get_glyph("A")

    def test_latin1_content(self) -> None:
        """Test single-byte characters in glyph rows."""
        font = parse_font_bytes(build_font_source({"A": ["\xb7A\xb7"]}))
        assert font.get_glyph("A").rows[0].content == "·A·"


class TestStreams:
    """Tests for stream handling."""

    def test_parse_from_stream(self) -> None:
        """Test parse_font reads a binary stream."""
        font = parse_font(io.BytesIO(build_font_source()), name="stream")
        assert font.name == "stream"

    def test_read_error_propagates(self) -> None:
        """Test stream failures surface as OSError."""
        with pytest.raises(OSError, match="device not ready"):
            parse_font(FailingStream())

    def test_string_pool_shared(self) -> None:
        """Test identical rows share one string across fonts."""
        pool = StringPool()
        parser = FontParser(pool)
        data = build_font_source({"A": ["$A$"]})
        first = parser.parse(io.BytesIO(data))
        second = parser.parse(io.BytesIO(data))
        assert first.get_glyph("A").rows[0].content is second.get_glyph("A").rows[0].content
        assert "$A$" in pool
