"""
Unit tests for front matter extraction.

Tests verify:
- Summary and read_when extraction in block and inline forms
- Each diagnostic reason
- Lenient handling of malformed inline hint lists
- Hints collected before a failure are kept
"""
import pytest

from docs_inventory.core.frontmatter import (
    FrontMatterError,
    FrontMatterResult,
    compact_strings,
    extract_front_matter,
    normalize_summary,
    parse_inline_list,
    read_front_matter,
    unquote,
)


def doc(*lines, body="\n# Title\n"):
    return "---\n" + "\n".join(lines) + "\n---\n" + body


class TestExtractFrontMatter:
    """Tests for successful extraction."""
    
    def test_summary_and_block_hints(self):
        """Test quoted summary with block-style hints."""
        result = extract_front_matter(doc(
            "summary: 'Handles OAuth flows'",
            "read_when:",
            '  - "auth changes"',
            "  - tests",
        ))
        
        assert result.ok
        assert result.error is None
        assert result.summary == "Handles OAuth flows"
        assert result.read_when == ["auth changes", "tests"]
    
    def test_inline_hints(self):
        """Test inline single-quoted list."""
        result = extract_front_matter(doc("summary: Inline", "read_when: ['a', 'b']"))
        
        assert result.summary == "Inline"
        assert result.read_when == ["a", "b"]
    
    def test_inline_double_quoted_hints(self):
        """Test inline double-quoted list with blanks dropped."""
        result = extract_front_matter(doc('read_when: ["x", " ", " y "]', "summary: S"))
        assert result.read_when == ["x", "y"]
    
    def test_summary_without_hints(self):
        """Test a summary alone succeeds with no hints."""
        result = extract_front_matter(doc("summary: Just a summary"))
        
        assert result.ok
        assert result.read_when == []
    
    def test_hints_keep_order_and_duplicates(self):
        """Test hints are never reordered or deduplicated."""
        result = extract_front_matter(doc(
            "summary: S",
            "read_when:",
            "- b",
            "- a",
            "- b",
        ))
        assert result.read_when == ["b", "a", "b"]
    
    def test_blank_lines_do_not_end_collection(self):
        """Test blank lines between hint items are ignored."""
        result = extract_front_matter(doc(
            "read_when:",
            "- first",
            "",
            "- second",
            "summary: S",
        ))
        assert result.read_when == ["first", "second"]
    
    def test_other_key_ends_collection(self):
        """Test a non-item line stops hint collection."""
        result = extract_front_matter(doc(
            "read_when:",
            "- first",
            "owner: docs-team",
            "- not a hint",
            "summary: S",
        ))
        assert result.read_when == ["first"]
    
    def test_summary_ends_collection(self):
        """Test a summary line stops hint collection and is still read."""
        result = extract_front_matter(doc(
            "read_when:",
            "- first",
            "summary: After hints",
            "- stray",
        ))
        
        assert result.summary == "After hints"
        assert result.read_when == ["first"]
    
    def test_blank_hint_items_skipped(self):
        """Test items that are blank after the dash are skipped."""
        result = extract_front_matter(doc("summary: S", "read_when:", "-    x  ", "-   "))
        assert result.read_when == ["x"]
    
    def test_repeated_read_when_appends(self):
        """Test a second read_when key keeps appending."""
        result = extract_front_matter(doc(
            "summary: S",
            "read_when: ['inline']",
            "- block",
        ))
        assert result.read_when == ["inline", "block"]
    
    def test_last_summary_wins(self):
        """Test the last summary line is the one reported."""
        result = extract_front_matter(doc("summary: First", "summary: Second"))
        assert result.summary == "Second"
    
    def test_summary_whitespace_collapsed(self):
        """Test internal whitespace runs collapse to single spaces."""
        result = extract_front_matter(doc('summary:   "Spread \t  out   text"  '))
        assert result.summary == "Spread out text"
    
    def test_crlf_line_endings(self):
        """Test Windows line endings are tolerated."""
        content = "---\r\nsummary: Windows doc\r\nread_when:\r\n- crlf\r\n---\r\nbody"
        result = extract_front_matter(content)
        
        assert result.summary == "Windows doc"
        assert result.read_when == ["crlf"]
    
    def test_closing_delimiter_may_have_trailing_text(self):
        """Test the closing line only needs to start with three dashes."""
        result = extract_front_matter("---\nsummary: S\n-----\nbody")
        assert result.summary == "S"


class TestMalformedInlineHints:
    """Tests for lenient inline list handling."""
    
    @pytest.mark.parametrize("inline", [
        "['a', 'b'",
        "['a', 'b]",
        "[a, b]",
        "['it's']",
        "[",
    ])
    def test_malformed_inline_ignored(self, inline):
        """Test malformed inline lists are dropped without affecting the summary."""
        result = extract_front_matter(doc("summary: Still fine", f"read_when: {inline}"))
        
        assert result.ok
        assert result.summary == "Still fine"
        assert result.read_when == []
    
    def test_malformed_inline_keeps_block_items(self):
        """Test block items after a malformed inline list are still collected."""
        result = extract_front_matter(doc("summary: S", "read_when: [oops]", "- later"))
        assert result.read_when == ["later"]
    
    def test_non_bracketed_inline_ignored(self):
        """Test a scalar after read_when is not a hint."""
        result = extract_front_matter(doc("summary: S", "read_when: sometimes"))
        assert result.read_when == []


class TestDiagnostics:
    """Tests for each diagnostic reason."""
    
    def test_missing_front_matter(self):
        """Test content without an opening delimiter."""
        result = extract_front_matter("# Title\n\nNo metadata here.\n")
        
        assert not result.ok
        assert result.error is FrontMatterError.MISSING
        assert result.error.value == "missing-front-matter"
    
    def test_leading_blank_line_is_missing(self):
        """Test the delimiter must be at the very start."""
        result = extract_front_matter("\n---\nsummary: S\n---\n")
        assert result.error is FrontMatterError.MISSING
    
    def test_unterminated_front_matter(self):
        """Test an opening delimiter without a closing one."""
        result = extract_front_matter("---\nsummary: Never closed\n")
        
        assert result.error is FrontMatterError.UNTERMINATED
        assert result.error.value == "unterminated-front-matter"
    
    def test_summary_key_missing_keeps_hints(self):
        """Test hints survive when the summary key is absent."""
        result = extract_front_matter(doc("read_when:", "- orphan hint"))
        
        assert result.error is FrontMatterError.SUMMARY_KEY_MISSING
        assert result.summary is None
        assert result.read_when == ["orphan hint"]
    
    def test_empty_block(self):
        """Test an empty block has no summary key."""
        result = extract_front_matter("---\n---\nbody")
        assert result.error is FrontMatterError.SUMMARY_KEY_MISSING
    
    @pytest.mark.parametrize("value", ["", "   ", "''", '""', "'", '"'])
    def test_summary_empty(self, value):
        """Test blank or quote-only summaries."""
        result = extract_front_matter(doc(f"summary: {value}", "read_when: ['kept']"))
        
        assert result.error is FrontMatterError.SUMMARY_EMPTY
        assert result.error.value == "summary-empty"
        assert result.read_when == ["kept"]


class TestHelpers:
    """Tests for the parsing helpers."""
    
    def test_compact_strings(self):
        """Test None and blank values are dropped and others stringified."""
        assert compact_strings(["a", None, " ", " b ", 3]) == ["a", "b", "3"]
    
    def test_parse_inline_list_non_list(self):
        """Test JSON that is not a list yields nothing."""
        assert parse_inline_list('"just a string"') == []
    
    def test_normalize_summary_strips_one_quote_each_side(self):
        """Test only one quote character is removed from each edge."""
        assert normalize_summary("''nested''") == "'nested'"
    
    def test_normalize_summary_keeps_inner_quotes(self):
        """Test quotes inside the text are kept."""
        assert normalize_summary("\"It's fine\"") == "It's fine"
    
    def test_unquote(self):
        """Test only a matching pair of surrounding quotes is removed."""
        assert unquote('"auth changes"') == "auth changes"
        assert unquote("'tests'") == "tests"
        assert unquote("\"mixed'") == "\"mixed'"
        assert unquote('"') == '"'


class TestReadFrontMatter:
    """Tests for reading documents from disk."""
    
    def test_reads_file(self, tmp_path):
        """Test a document on disk is extracted."""
        path = tmp_path / "doc.md"
        path.write_text(doc("summary: From disk"), encoding="utf-8")
        
        assert read_front_matter(path) == FrontMatterResult(summary="From disk")
    
    def test_invalid_utf8_replaced(self, tmp_path):
        """Test undecodable bytes do not abort extraction."""
        path = tmp_path / "bytes.md"
        path.write_bytes(b"---\nsummary: Caf\xe9 notes\n---\n")
        
        result = read_front_matter(path)
        assert result.ok
        assert result.summary.startswith("Caf")
    
    def test_unreadable_file(self, tmp_path, caplog):
        """Test a read failure is reported, not raised."""
        result = read_front_matter(tmp_path / "gone.md")
        
        assert result.error is FrontMatterError.UNREADABLE
        assert "Could not read" in caplog.text