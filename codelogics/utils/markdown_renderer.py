"""Render assistant replies written in light markdown as HTML.

Only the constructs the assistant actually produces are handled: fenced
code blocks, inline code, ``#`` to ``###`` headings, ``**bold**``,
``- `` bullet lists and paragraphs.  Code is cut out of the text and
escaped before any other rule runs, then put back at the very end, so no
later rule can rewrite it and it is escaped exactly once.
"""

from __future__ import annotations

import html
import re
from typing import List

_CODE_FENCE = re.compile(r"```([\w+#.-]+)?[ \t]*\n([\s\S]*?)```")
_INLINE_CODE = re.compile(r"`([^`\n]+)`")
_HEADING = re.compile(r"^(#{1,3}) (.*)$", re.MULTILINE)
_BOLD = re.compile(r"\*\*([^*]+)\*\*")
_PLACEHOLDER = re.compile("\x00(\\d+)\x00")


def _escape(text: str) -> str:
    return html.escape(text, quote=False)


def _code_block(language: str, code: str) -> str:
    lang = _escape(language)
    return (
        '<div class="code-block">'
        '<div class="code-header">'
        f'<span class="code-lang">{lang}</span>'
        '<button class="copy-btn" type="button">Copy</button>'
        "</div>"
        f'<pre><code class="language-{lang}">{_escape(code.strip())}</code></pre>'
        "</div>"
    )


def _wrap_lists(text: str) -> str:
    """Turn runs of ``- `` lines into a single ``<ul>`` each."""
    lines: List[str] = []
    items: List[str] = []
    for line in text.split("\n"):
        if line.startswith("- "):
            items.append(f"<li>{line[2:]}</li>")
            continue
        if items:
            lines.append("<ul>" + "".join(items) + "</ul>")
            items = []
        lines.append(line)
    if items:
        lines.append("<ul>" + "".join(items) + "</ul>")
    return "\n".join(lines)


def render(text: str) -> str:
    """Return the HTML form of a markdown-like reply.

    The function is pure: the same input always renders to the same
    output.  Text outside code is escaped too, so raw HTML in a reply is
    shown rather than interpreted.
    """
    segments: List[str] = []

    def stash(fragment: str) -> str:
        segments.append(fragment)
        return f"\x00{len(segments) - 1}\x00"

    text = text.replace("\x00", "").replace("\r\n", "\n")

    text = _CODE_FENCE.sub(
        lambda m: stash(_code_block(m.group(1) or "plaintext", m.group(2))), text
    )
    text = _INLINE_CODE.sub(
        lambda m: stash(f'<code class="inline-code">{_escape(m.group(1))}</code>'), text
    )

    text = _escape(text)
    text = _HEADING.sub(
        lambda m: f"<h{len(m.group(1))}>{m.group(2)}</h{len(m.group(1))}>", text
    )
    text = _BOLD.sub(r"<strong>\1</strong>", text)
    text = _wrap_lists(text)

    text = text.replace("\n\n", "</p><p>")
    text = text.replace("\n", "<br>")
    text = f"<p>{text}</p>"
    text = text.replace("<p></p>", "").replace("<p><br></p>", "")

    return _PLACEHOLDER.sub(lambda m: segments[int(m.group(1))], text)
