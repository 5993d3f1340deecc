import re

import markstyle.parser
from markstyle.document import Attr, StyledDocument
from markstyle.element import RegexElement
from markstyle.elements import StrikethroughElement


class Mention(RegexElement):
    pattern = re.compile(r"(?<!\w)@(\w+)")

    def match(self, m: re.Match[str], doc: StyledDocument, /):
        start, end = self.unwrap(doc, m, 0)
        doc.set_attribute(Attr.LINK, f"https://example.com/{m.group(1)}", start, end)


if __name__ == "__main__":
    parser = markstyle.parser.MarkdownParser(
        custom_elements=[Mention(), StrikethroughElement()]
    )

    doc = parser.parse(
        """# Release notes

- **New:** bare links like https://example.com are detected automatically.
- ~~Old~~ *fixed* escaping: \\*stars\\* stay literal.
- Thanks to @alice for `code` reviews!

> Quotes are rendered in gray."""
    )

    for span in doc.spans():
        styles = {getattr(k, "name", k): v for k, v in span.attributes.items()}
        print(repr(span.text), styles)
