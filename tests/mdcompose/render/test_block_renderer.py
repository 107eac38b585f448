import pytest

from mdcompose.markdown import parse_markdown
from mdcompose.markdown.nodes import Document, Heading, Image, Text
from mdcompose.render import (
    Alignment,
    Box,
    Column,
    DocumentRenderer,
    ImageBlock,
    Padding,
    TextBlock,
    iter_text_blocks,
    render_document,
    render_raw_text,
)
from mdcompose.render.blocks import CODE_STYLE
from mdcompose.styled import AnnotationKind, FontStyle
from mdcompose.theme import dark_theme, light_theme

THEME = light_theme()

SAMPLE = """
### Markdown Header

This is regular text without formatting in a single paragraph.

![Serious](file:///assets/serious.jpg)

Images can also be inline: ![Serious](file:///assets/serious.jpg). [Links](http://example.com) and `inline code` also work.

```javascript
function codeBlock() {
    return true;
}
```

+ Bullet
+ __Lists__

1. **First**
1. *Second*
1. [Fourth is clickable](https://example.org)

> Block *quote*
"""


def render(markdown: str) -> Column:
    return render_document(parse_markdown(markdown), THEME)


def texts(node) -> list[str]:
    return [block.text.text for block in iter_text_blocks(node)]


class TestHeadings:
    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_level_selects_style_tier(self, level):
        column = render("#" * level + " Title")
        box = column.children[0]
        assert isinstance(box, Box)
        block = box.children[0]
        assert isinstance(block, TextBlock)
        assert block.style == THEME.heading_style(level)
        assert block.text.text == "Title"

    def test_top_level_heading_has_bottom_spacing(self):
        box = render("# Title").children[0]
        assert box.padding == Padding(bottom=8)

    def test_heading_in_quote_has_no_spacing(self):
        quote = render("> # Title").children[0]
        assert isinstance(quote, Box)
        heading_box = quote.children[0]
        assert isinstance(heading_box, Box)
        assert heading_box.padding == Padding(bottom=0)
        assert heading_box.children[0].style == THEME.heading_style(1)

    @pytest.mark.parametrize("level", [0, 7])
    def test_invalid_level_falls_back_to_block_children(self, level):
        doc = Document(
            children=[Heading(level=level, children=[Text(literal="x"), Image(destination="pic.png")])]
        )
        column = render_document(doc, THEME)
        fallback = column.children[0]
        assert isinstance(fallback, Column)
        # Text is not a block and is skipped; the image renders as a bare image
        assert fallback.children == [
            Box(fill_max_width=True, alignment=Alignment.CENTER, children=[ImageBlock(url="pic.png")])
        ]
        assert list(iter_text_blocks(column)) == []


class TestParagraphs:
    def test_body_style_and_spacing(self):
        box = render("Hello *you*").children[0]
        assert box.padding == Padding(bottom=8)
        block = box.children[0]
        assert block.style == THEME.typography.body1
        assert block.text.text == "Hello you"
        assert block.text.spans[0].start == 0
        assert block.text.spans[0].end == len("Hello you")

    def test_single_image_paragraph_is_standalone_image(self):
        column = render("![alt](pic.png)")
        assert column.children == [
            Box(fill_max_width=True, alignment=Alignment.CENTER, children=[ImageBlock(url="pic.png")])
        ]

    def test_image_with_text_stays_inline(self):
        block = render("an ![alt](pic.png) image").children[0].children[0]
        assert isinstance(block, TextBlock)
        assert [a.kind for a in block.text.annotations] == [AnnotationKind.INLINE_IMAGE]
        size = THEME.typography.body1.font_size
        assert block.placeholder is not None
        assert (block.placeholder.width, block.placeholder.height) == (size, size)


class TestLists:
    def test_ordered_numbering_from_start(self):
        box = render("3. a\n4. b\n5. c").children[0]
        assert box.padding == Padding(bottom=8, start=0)
        assert texts(box) == ["3. a", "4. b", "5. c"]

    def test_delimiter_is_kept(self):
        assert texts(render("7) a\n8) b")) == ["7) a", "8) b"]

    def test_bullet_marker(self):
        assert texts(render("+ a\n+ *b*")) == ["+ a", "+ b"]

    def test_sibling_lists_count_independently(self):
        column = render("1. a\n2. b\n\ntext\n\n1. c\n2. d")
        assert texts(column.children[0]) == ["1. a", "2. b"]
        assert texts(column.children[2]) == ["1. c", "2. d"]

    def test_nested_list_is_indented_with_own_markers(self):
        outer = render("1. a\n   - b\n   - c\n2. d").children[0]
        first, nested, last = outer.children
        assert first.text.text == "1. a"
        assert isinstance(nested, Box)
        assert nested.padding == Padding(bottom=0, start=8)
        assert texts(nested) == ["- b", "- c"]
        assert last.text.text == "2. d"

    def test_nested_ordered_list_restarts(self):
        outer = render("1. a\n   1. x\n   2. y\n2. b").children[0]
        assert texts(outer) == ["1. a", "1. x", "2. y", "2. b"]

    def test_counter_advances_per_item_line(self):
        assert texts(render("1. a\n\n   more\n2. b")) == ["1. a", "2. more", "3. b"]

    def test_items_use_body_style(self):
        block = render("- a").children[0].children[0]
        assert block.style == THEME.typography.body1


class TestBlockQuotes:
    def test_rule_padding_and_italic(self):
        quote = render("> quoted *text*").children[0]
        assert isinstance(quote, Box)
        assert quote.padding == Padding(start=16, top=4, bottom=4)
        assert quote.rule is not None
        assert quote.rule.color == THEME.colors.on_background
        assert quote.rule.stroke_width == 2
        block = quote.children[0]
        assert block.text.text == "quoted text"
        assert block.text.styles_at(0).font_style == FontStyle.ITALIC

    def test_padding_is_fixed_when_nested(self):
        outer = render("> > inner").children[0]
        inner = outer.children[0]
        assert inner.padding == outer.padding

    def test_paragraph_run_merges(self):
        quote = render("> a\n>\n> b").children[0]
        assert texts(quote) == ["ab"]

    def test_rule_uses_theme_color(self):
        quote = render_document(parse_markdown("> q"), dark_theme()).children[0]
        assert quote.rule.color == dark_theme().colors.on_background


class TestCode:
    def test_fenced_code_is_verbatim_monospace(self):
        box = render("```\n*not* emphasis\n```").children[0]
        assert box.padding == Padding(bottom=8, start=8)
        block = box.children[0]
        assert block.style == CODE_STYLE
        assert block.text.text == "*not* emphasis\n"
        assert block.text.spans == ()

    def test_nested_fenced_code_has_no_bottom_spacing(self):
        box = render("> ```\n> code\n> ```").children[0].children[0]
        assert box.padding == Padding(bottom=0, start=8)

    def test_indented_code_and_thematic_break_render_nothing(self):
        assert render("    code\n\n***").children == []

    def test_html_block_is_skipped(self):
        assert render("<div>x</div>").children == []


class TestPurity:
    def test_render_is_idempotent(self):
        doc = parse_markdown(SAMPLE)
        renderer = DocumentRenderer(THEME)
        assert renderer.render_document(doc) == renderer.render_document(doc)
        assert render_document(doc, THEME) == renderer.render_document(doc)

    def test_render_does_not_mutate_tree(self):
        doc = parse_markdown(SAMPLE)
        before = parse_markdown(SAMPLE)
        render_document(doc, THEME)
        assert doc == before
        quote = doc.children[-1]
        assert all(child.parent is quote for child in quote.children)

    def test_sample_document_renders_all_blocks(self):
        column = render(SAMPLE)
        assert [type(c) for c in column.children] == [Box] * 8
        assert "Markdown Header" in texts(column)


class TestRawText:
    def test_raw_text_is_source_verbatim(self):
        block = render_raw_text(SAMPLE)
        assert block.text.text == SAMPLE
        assert block.text.spans == ()
        assert block.text.annotations == ()

    def test_raw_text_is_stable(self):
        assert render_raw_text(SAMPLE) == render_raw_text(SAMPLE)
