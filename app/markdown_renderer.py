"""
Line-oriented renderer for the Markdown subset the resume generator emits.

• Single forward pass, three pieces of state: a pending bullet list, the
  contact-block flag and the current named section.
• ``render_markdown`` yields Block nodes lazily; ``render_html`` turns them
  into the styled preview (or the plain print variant used for PDF export).
"""
from __future__ import annotations
import re
from pathlib import Path
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple

from jinja2 import Environment, FileSystemLoader

_CSS_PATH = Path(__file__).parent / "static" / "resume.css"
env = Environment(loader=FileSystemLoader(Path(__file__).parent / "templates"),
                  autoescape=True)

LINK = re.compile(r"\[(.*?)\]\((.*?)\)")

# "## " heading text → section tag
SECTION_TAGS = {
    "Professional Summary": "summary",
    "Education": "education",
    "Skills": "skills",
    "Experience & Projects": "experience",
    "Career Objective": "objective",
}


class Block(NamedTuple):
    kind: str                     # h1 h2 contact summary list bold link paragraph
    text: str = ""
    items: Tuple[str, ...] = ()
    href: str = ""


def render_markdown(markdown: str) -> Iterator[Block]:
    """Yield display blocks for ``markdown`` in input line order."""
    pending: List[str] = []
    in_contact = False
    section: Optional[str] = None

    def flush() -> Iterator[Block]:
        if pending:
            yield Block("list", items=tuple(pending))
            pending.clear()

    for raw in markdown.split("\n"):
        line = raw.strip()

        if line.startswith("# "):
            yield from flush()
            in_contact = True
            section = "personal"
            yield Block("h1", line[2:])
        elif line.startswith("## "):
            yield from flush()
            in_contact = False
            heading = line[3:]
            section = SECTION_TAGS.get(heading)
            yield Block("h2", heading)
        elif in_contact and line:
            yield Block("contact", line)
        elif section == "summary" and line:
            yield Block("summary", line)
        elif line.startswith("* "):
            pending.append(line[2:])
        elif len(line) >= 4 and line.startswith("**") and line.endswith("**"):
            # only the outer markers go; "**A** and **B**" keeps its inner ones
            yield from flush()
            yield Block("bold", line[2:-2])
        elif line.startswith("[") and "](" in line:
            yield from flush()
            m = LINK.match(line)
            if m and m.group(1) and m.group(2):
                yield Block("link", m.group(1), href=m.group(2))
            else:
                yield Block("paragraph", line)
        elif line:
            yield from flush()
            yield Block("paragraph", line)
        # blank lines emit nothing and leave the pending list alone

    yield from flush()


def render_html(blocks: Iterable[Block] | str, inline: bool = False, printable: bool = False) -> str:
    """
    Render blocks (or raw Markdown) to an HTML fragment.

    ``inline`` embeds the stylesheet in a <style> tag; ``printable`` selects the
    plain template understood by the PDF backend.
    """
    if isinstance(blocks, str):
        blocks = render_markdown(blocks)
    name = "resume_print.html" if printable else "resume.html"
    css_inline = _CSS_PATH.read_text(encoding="utf-8") if inline and not printable else ""
    return env.get_template(name).render(blocks=list(blocks), inline_css=css_inline)
