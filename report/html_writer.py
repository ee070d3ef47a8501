"""HTML output for the tag cloud."""

from html import escape
from typing import Iterable, Mapping, Optional, TextIO

from config import Config
from report.renderer import TagEntry, render


def page_title(in_name: str, num_words: int) -> str:
    """Title and heading text of the page."""
    return f"Top {num_words} words in {in_name}"


def write_header(out: TextIO, title: str, stylesheets: Iterable[str]) -> None:
    """Write everything up to the opening of the cloud paragraph."""
    title = escape(title)
    out.write("<html>\n")
    out.write("<head>\n")
    out.write(f"<title>{title}</title>\n")
    for href in stylesheets:
        out.write(f'<link href="{escape(href)}" rel="stylesheet" type="text/css">\n')
    out.write("</head>\n")
    out.write("<body>\n")
    out.write(f"<h1>{title}</h1>\n")
    out.write("<hr>\n")
    out.write('<div class="cdiv">\n')
    out.write('<p class="cbox">\n')


def write_entry(out: TextIO, entry: TagEntry) -> None:
    """Write one word as a styled span."""
    out.write(
        f'<span style="cursor:default" class="f{entry.font_size}" '
        f'title="count: {entry.count}">{escape(entry.word)}</span>\n'
    )


def write_footer(out: TextIO) -> None:
    """Close the cloud paragraph and the document."""
    out.write("</p>\n")
    out.write("</div>\n")
    out.write("</body>\n")
    out.write("<hr>\n")
    out.write("</html>\n")


def write_tag_cloud(
    out: TextIO,
    in_name: str,
    selection: Mapping[str, int],
    config: Optional[Config] = None,
) -> int:
    """
    Write a complete tag cloud document.

    Args:
        out: Open text stream
        in_name: Input file name shown in the title
        selection: Trimmed word -> count mapping
        config: Font range and stylesheets (defaults if None)

    Returns:
        Number of words written
    """
    if config is None:
        config = Config()

    write_header(out, page_title(in_name, len(selection)), config.stylesheets)
    written = 0
    for entry in render(selection, config.min_font, config.max_font):
        write_entry(out, entry)
        written += 1
    write_footer(out)
    return written
