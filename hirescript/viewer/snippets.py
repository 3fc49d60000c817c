"""
Snippet extraction - Find fenced code blocks in lesson markdown.

Each block can be opened in the playground with its fence language.
"""

import re

from hirescript.schemas import CodeSnippet, LanguageId


FENCE_RE = re.compile(
    r"^(?P<indent>[ \t]*)(?P<fence>`{3,}|~{3,})[ \t]*(?P<info>[^\n`]*)\n"
    r"(?P<code>.*?)"
    r"^(?P=indent)(?P=fence)[ \t]*$",
    re.DOTALL | re.MULTILINE,
)


def _snippet(match: re.Match) -> CodeSnippet:
    # First word of the info string: "```js [app.js]" -> "js"
    info = match.group("info").strip()
    label = info.split()[0] if info else ""
    return CodeSnippet(
        code=match.group("code").rstrip("\n"),
        label=label,
        language=LanguageId.from_label(label),
    )


def extract_code_snippets(markdown: str) -> list[CodeSnippet]:
    """Extract fenced code blocks in document order."""
    return [_snippet(match) for match in FENCE_RE.finditer(markdown)]


def split_on_snippets(markdown: str) -> list[str | CodeSnippet]:
    """
    Split markdown into prose chunks and snippets, in order.

    Lets the shell render each code block with its own playground action.
    """
    parts: list[str | CodeSnippet] = []
    last = 0
    for match in FENCE_RE.finditer(markdown):
        prose = markdown[last:match.start()]
        if prose.strip():
            parts.append(prose)
        parts.append(_snippet(match))
        last = match.end()
    tail = markdown[last:]
    if tail.strip():
        parts.append(tail)
    return parts
