import pytest

import markstyle.elements
import markstyle.escaping
from markstyle.color import ColorValue
from markstyle.document import Attr, Run, StyledDocument
from markstyle.font import Font


def _doc(text):
    return StyledDocument(text, {Attr.FONT: Font.DEFAULT, Attr.COLOR: ColorValue.BLACK})


def _apply(element, text):
    doc = _doc(text)
    element.apply(doc)
    return doc


def _autolink(text, element=None):
    doc = _doc(text)
    (element or markstyle.elements.AutomaticLinkElement()).apply(doc)
    markstyle.escaping.UnescapingElement().apply(doc)
    return doc


class TestHeader:
    @pytest.mark.parametrize(
        ("text", "expect", "size"),
        [
            ("# Title", "Title", 22),
            ("## Title", "Title", 20),
            ("###### Title", "Title", 12),
            ("   # Title", "Title", 22),
            ("# Title ##", "Title", 22),
            ("#\tTitle", "Title", 22),
        ],
    )
    def test_header(self, text, expect, size):
        doc = _apply(markstyle.elements.HeaderElement(), text)
        assert doc.text == expect
        assert doc.runs(Attr.FONT) == (
            Run(0, len(expect), Font.DEFAULT | Font(size=size, bold=True)),
        )

    @pytest.mark.parametrize(
        "text",
        [
            "#Title",
            "####### Title",
            "    # Title",
            "text # Title",
        ],
    )
    def test_not_header(self, text):
        doc = _apply(markstyle.elements.HeaderElement(), text)
        assert doc.text == text
        assert doc.runs(Attr.FONT) == (Run(0, len(text), Font.DEFAULT),)

    def test_multiline(self):
        doc = _apply(markstyle.elements.HeaderElement(), "# A\ntext\n## B")
        assert doc.text == "A\ntext\nB"
        assert doc.attribute_at(Attr.FONT, 0).size == 22
        assert doc.attribute_at(Attr.FONT, 3) == Font.DEFAULT
        assert doc.attribute_at(Attr.FONT, 7).size == 20

    def test_inner_styles_are_kept(self):
        doc = _doc("# a link")
        doc.set_attribute(Attr.LINK, "x", 4, 8)
        markstyle.elements.HeaderElement().apply(doc)
        assert doc.text == "a link"
        assert doc.runs(Attr.LINK) == (Run(2, 6, "x"),)

    def test_max_level(self):
        element = markstyle.elements.HeaderElement(max_level=2, font_increase=4)
        doc = _apply(element, "# A\n## B\n### C")
        assert doc.text == "A\nB\n### C"
        assert doc.attribute_at(Attr.FONT, 0).size == 16
        assert doc.attribute_at(Attr.FONT, 2).size == 12
        assert doc.attribute_at(Attr.FONT, 4) == Font.DEFAULT

    def test_font_for_level(self):
        element = markstyle.elements.HeaderElement(Font(family="Georgia", size=14))
        assert element.font_for_level(1) == Font(size=24, bold=True)
        assert element.font_for_level(6) == Font(size=14, bold=True)

    @pytest.mark.parametrize("max_level", [0, 7, -1])
    def test_invalid_max_level(self, max_level):
        with pytest.raises(ValueError, match="max_level"):
            markstyle.elements.HeaderElement(max_level=max_level)


class TestList:
    @pytest.mark.parametrize(
        ("text", "expect"),
        [
            ("- a", "• a"),
            ("* a", "• a"),
            ("+ a", "• a"),
            ("-   a", "• a"),
            ("  - a", "  • a"),
            ("    - a", "    • a"),
            ("\t- a", "    • a"),
            ("1. a", "1. a"),
            ("2) a", "2) a"),
            ("  10. a", "  10. a"),
            ("- a\n- b\n  - c", "• a\n• b\n  • c"),
            ("-a", "-a"),
            ("- ", "- "),
            ("a - b", "a - b"),
            ("**a**", "**a**"),
        ],
    )
    def test_list(self, text, expect):
        doc = _apply(markstyle.elements.ListElement(), text)
        assert doc.text == expect

    def test_settings(self):
        element = markstyle.elements.ListElement(indent="    ", bullet="-")
        doc = _apply(element, "* a\n  * b")
        assert doc.text == "- a\n    - b"

    def test_marker_style(self):
        element = markstyle.elements.ListElement(Font(size=20), ColorValue.RED)
        doc = StyledDocument("- a")
        element.apply(doc)
        assert doc.runs(Attr.FONT) == (Run(0, 2, Font(size=20)),)
        assert doc.runs(Attr.COLOR) == (Run(0, 2, ColorValue.RED),)


class TestQuote:
    def test_quote(self):
        doc = _apply(markstyle.elements.QuoteElement(), "> quote\ntext")
        assert doc.text == "  quote\ntext"
        gray = ColorValue.from_hex("#7F7F7F")
        assert doc.runs(Attr.COLOR) == (
            Run(0, 7, gray),
            Run(7, 12, ColorValue.BLACK),
        )
        assert doc.runs(Attr.FONT) == (
            Run(0, 2, Font.DEFAULT),
            Run(2, 7, Font.DEFAULT | Font.ITALIC),
            Run(7, 12, Font.DEFAULT),
        )

    @pytest.mark.parametrize(
        ("text", "expect"),
        [
            (">quote", "  quote"),
            (">> nested", "    nested"),
            ("> > nested", "    nested"),
            ("   > indented", "  indented"),
            ("a > b", "a > b"),
            ("    > code", "    > code"),
        ],
    )
    def test_markers(self, text, expect):
        doc = _apply(markstyle.elements.QuoteElement(), text)
        assert doc.text == expect

    def test_settings(self):
        element = markstyle.elements.QuoteElement(
            indent="| ", quote_color=ColorValue.GRAY
        )
        doc = _apply(element, "> a\n> b")
        assert doc.text == "| a\n| b"
        assert doc.runs(Attr.COLOR) == (
            Run(0, 3, ColorValue.GRAY),
            Run(3, 4, ColorValue.BLACK),
            Run(4, 7, ColorValue.GRAY),
        )

    def test_default_quote_color(self):
        element = markstyle.elements.QuoteElement(color=ColorValue.WHITE)
        assert element.quote_color == ColorValue.WHITE
        element = markstyle.elements.QuoteElement(color=ColorValue.RED)
        assert element.quote_color == ColorValue.RED.lighten(0.5)


class TestLink:
    def test_link(self):
        doc = _apply(markstyle.elements.LinkElement(), "see [docs](https://x.org) now")
        assert doc.text == "see docs now"
        assert doc.runs(Attr.LINK) == (Run(4, 8, "https://x.org"),)
        assert doc.runs(Attr.UNDERLINE) == (Run(4, 8, True),)
        assert doc.runs(Attr.COLOR) == (
            Run(0, 4, ColorValue.BLACK),
            Run(4, 8, ColorValue.BLUE),
            Run(8, 12, ColorValue.BLACK),
        )

    @pytest.mark.parametrize(
        ("text", "expect", "url"),
        [
            ("[a](http://x.org/a_(b))", "a", "http://x.org/a_(b)"),
            ('[a](http://x.org "Title")', "a", "http://x.org"),
            ("[a]( http://x.org )", "a", "http://x.org"),
            ("[a](/relative/path)", "a", "/relative/path"),
            ("[a b c](x)", "a b c", "x"),
        ],
    )
    def test_url(self, text, expect, url):
        doc = _apply(markstyle.elements.LinkElement(), text)
        assert doc.text == expect
        assert doc.runs(Attr.LINK) == (Run(0, len(expect), url),)

    def test_multiple_links(self):
        doc = _apply(markstyle.elements.LinkElement(), "[a](x) and [b](y)")
        assert doc.text == "a and b"
        assert doc.runs(Attr.LINK) == (Run(0, 1, "x"), Run(6, 7, "y"))

    def test_image(self):
        doc = _apply(markstyle.elements.LinkElement(), "![alt text](image.png)")
        assert doc.text == "alt text"
        assert doc.runs(Attr.LINK) == ()
        assert doc.runs(Attr.UNDERLINE) == ()

    @pytest.mark.parametrize(
        "text",
        ["[no link]", "[a] (x)", "[a](x y)", "[](x)", "[a\nb](x)"],
    )
    def test_not_link(self, text):
        doc = _apply(markstyle.elements.LinkElement(), text)
        assert doc.text == text
        assert doc.runs(Attr.LINK) == ()

    def test_escaped_url(self):
        # Escaping turns `\_` into a placeholder before links are parsed.
        doc = _apply(markstyle.elements.LinkElement(), "[a](x\x025f\x03y)")
        assert doc.runs(Attr.LINK) == (Run(0, 1, "x_y"),)

    def test_settings(self):
        element = markstyle.elements.LinkElement(
            link_color=ColorValue.RED, underline=False
        )
        doc = _apply(element, "[a](x)")
        assert doc.runs(Attr.COLOR) == (Run(0, 1, ColorValue.RED),)
        assert doc.runs(Attr.UNDERLINE) == ()


class TestAutomaticLink:
    @pytest.mark.parametrize(
        ("text", "link", "target"),
        [
            ("https://example.com", "https://example.com", "https://example.com"),
            ("visit https://example.com.", "https://example.com", "https://example.com"),
            ("see http://x.org/a?b=c&d=e!", "http://x.org/a?b=c&d=e", "http://x.org/a?b=c&d=e"),
            ("ftp://files.org/f.txt", "ftp://files.org/f.txt", "ftp://files.org/f.txt"),
            ("(https://x.org/a_(b))", "https://x.org/a_(b)", "https://x.org/a_(b)"),
            ("(https://x.org)", "https://x.org", "https://x.org"),
            ("**https://x.org**", "https://x.org", "https://x.org"),
            ("go to www.example.com, now", "www.example.com", "http://www.example.com"),
            ("mail me@example.com!", "me@example.com", "mailto:me@example.com"),
            ("a.b+c@mail.example.org.", "a.b+c@mail.example.org", "mailto:a.b+c@mail.example.org"),
        ],
    )  # fmt: skip
    def test_link(self, text, link, target):
        doc = _autolink(text)
        assert doc.text == text
        start = text.index(link)
        assert doc.runs(Attr.LINK) == (Run(start, start + len(link), target),)
        assert doc.runs(Attr.UNDERLINE) == (Run(start, start + len(link), True),)
        assert doc.attribute_at(Attr.COLOR, start) == ColorValue.BLUE

    @pytest.mark.parametrize(
        "text",
        [
            "example.com",
            "http://",
            "me@localhost",
            "xhttps://example.com",
            "not an email@",
        ],
    )
    def test_not_link(self, text):
        doc = _autolink(text)
        assert doc.text == text
        assert doc.runs(Attr.LINK) == ()

    def test_multiple_links(self):
        doc = _autolink("https://a.org and https://b.org")
        assert doc.runs(Attr.LINK) == (
            Run(0, 13, "https://a.org"),
            Run(18, 31, "https://b.org"),
        )

    def test_link_text_is_escaped(self):
        escape_text = markstyle.escaping.escape_text
        doc = _apply(markstyle.elements.AutomaticLinkElement(), "x http://a.com/*b*")
        link = escape_text("http://a.com/*b")
        assert doc.text == "x " + link + "*"
        assert doc.runs(Attr.LINK) == (Run(2, 2 + len(link), "http://a.com/*b"),)

    def test_escaped_characters_in_url(self):
        escape_text = markstyle.escaping.escape_text
        text = "http://a.com/x" + escape_text("_") + "y z"
        doc = _autolink(text)
        assert doc.text == "http://a.com/x_y z"
        assert doc.runs(Attr.LINK) == (Run(0, 16, "http://a.com/x_y"),)

    def test_skips_existing_links(self):
        doc = _doc("https://a.org")
        doc.set_attribute(Attr.LINK, "https://b.org")
        markstyle.elements.AutomaticLinkElement().apply(doc)
        assert doc.runs(Attr.LINK) == (Run(0, 13, "https://b.org"),)
        assert doc.runs(Attr.UNDERLINE) == ()

    def test_settings(self):
        element = markstyle.elements.AutomaticLinkElement(
            link_color=ColorValue.RED, underline=False
        )
        doc = _autolink("https://a.org", element)
        assert doc.runs(Attr.COLOR) == (Run(0, 13, ColorValue.RED),)
        assert doc.runs(Attr.UNDERLINE) == ()


class TestBold:
    @pytest.mark.parametrize(
        ("text", "expect", "bold"),
        [
            ("**a**", "a", [(0, 1)]),
            ("__a__", "a", [(0, 1)]),
            ("x **a b** y", "x a b y", [(2, 5)]),
            ("**a** and __b__", "a and b", [(0, 1), (6, 7)]),
            ("***a***", "*a*", [(0, 2)]),
            ("** a **", "** a **", []),
            ("snake__case__name", "snake__case__name", []),
            ("**unclosed", "**unclosed", []),
        ],
    )
    def test_bold(self, text, expect, bold):
        doc = _apply(markstyle.elements.BoldElement(), text)
        assert doc.text == expect
        assert [
            (run.start, run.end) for run in doc.runs(Attr.FONT) if run.value.bold
        ] == bold


class TestItalic:
    @pytest.mark.parametrize(
        ("text", "expect", "italic"),
        [
            ("*a*", "a", [(0, 1)]),
            ("_a_", "a", [(0, 1)]),
            ("x *a b* y", "x a b y", [(2, 5)]),
            ("*a* and _b_", "a and b", [(0, 1), (6, 7)]),
            ("2 * 3 * 4", "2 * 3 * 4", []),
            ("snake_case_name", "snake_case_name", []),
            ("**a**", "**a**", []),
            ("*a\nb*", "*a\nb*", []),
        ],
    )
    def test_italic(self, text, expect, italic):
        doc = _apply(markstyle.elements.ItalicElement(), text)
        assert doc.text == expect
        assert [
            (run.start, run.end) for run in doc.runs(Attr.FONT) if run.value.italic
        ] == italic

    def test_bold_italic(self):
        doc = _doc("***a***")
        markstyle.elements.BoldElement().apply(doc)
        markstyle.elements.ItalicElement().apply(doc)
        assert doc.text == "a"
        assert doc.runs(Attr.FONT) == (
            Run(0, 1, Font.DEFAULT | Font(bold=True, italic=True)),
        )


class TestStrikethrough:
    def test_strikethrough(self):
        doc = _apply(markstyle.elements.StrikethroughElement(), "a ~~b c~~ d")
        assert doc.text == "a b c d"
        assert doc.runs(Attr.STRIKETHROUGH) == (Run(2, 5, True),)

    @pytest.mark.parametrize("text", ["~a~", "~~ a ~~", "~~a"])
    def test_not_strikethrough(self, text):
        doc = _apply(markstyle.elements.StrikethroughElement(), text)
        assert doc.text == text
        assert doc.runs(Attr.STRIKETHROUGH) == ()
