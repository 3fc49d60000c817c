"""
Language workers - Background services backing the playground editor.

Provides:
- LanguageWorker subclasses for markup, styles, script and config buffers
- GenericWorker fallback with basic word completion only
- WorkerRouter: maps a LanguageId to a lazily started, cached worker

Workers start on a thread pool. Until a worker has started, its services
return empty results instead of blocking the editor.
"""

import json
import logging
import re
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from html.parser import HTMLParser
from typing import Optional

from hirescript.schemas import Diagnostic, LanguageId


logger = logging.getLogger(__name__)

WORD_RE = re.compile(r"[A-Za-z_$][\w$-]*")


# -----------------------------------------------------------------------------
# Workers
# -----------------------------------------------------------------------------

class LanguageWorker:
    """
    Base worker: start-up bookkeeping plus degraded default services.

    Subclasses override _diagnose, _complete and _format.
    """

    name = "editor"

    def __init__(self):
        self._started = threading.Event()

    @property
    def ready(self) -> bool:
        return self._started.is_set()

    def start(self) -> "LanguageWorker":
        """Run start-up work. Called once, on the router's thread pool."""
        self._prepare()
        self._started.set()
        logger.debug(f"{self.name} worker started")
        return self

    def _prepare(self) -> None:
        pass

    def diagnose(self, text: str) -> list[Diagnostic]:
        if not self.ready:
            return []
        return self._diagnose(text)

    def complete(self, text: str, prefix: str) -> list[str]:
        if not self.ready:
            return []
        return self._complete(text, prefix)

    def format(self, text: str) -> str:
        if not self.ready:
            return text
        return self._format(text)

    def _diagnose(self, text: str) -> list[Diagnostic]:
        return []

    def _complete(self, text: str, prefix: str) -> list[str]:
        seen = []
        for word in WORD_RE.findall(text):
            if word.startswith(prefix) and word != prefix and word not in seen:
                seen.append(word)
        return seen

    def _format(self, text: str) -> str:
        return text

    def __repr__(self):
        return f"<{type(self).__name__} ready={self.ready}>"


class GenericWorker(LanguageWorker):
    """Fallback worker: no diagnostics, completions from the buffer's own words."""
    name = "editor"


def _position(text: str, offset: int) -> tuple[int, int]:
    """1-based (line, column) of a character offset."""
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, column


def _scan_brackets(
    text: str,
    pairs: dict[str, str],
    quotes: str,
    line_comment: Optional[str],
) -> list[Diagnostic]:
    """Report unbalanced brackets, skipping strings and comments."""
    closers = {close: open_ for open_, close in pairs.items()}
    stack: list[tuple[str, int]] = []
    problems = []
    i = 0
    while i < len(text):
        ch = text[i]
        if text.startswith("/*", i):
            end = text.find("*/", i + 2)
            i = len(text) if end == -1 else end + 2
            continue
        if line_comment and text.startswith(line_comment, i):
            end = text.find("\n", i)
            i = len(text) if end == -1 else end
            continue
        if ch in quotes:
            j = i + 1
            while j < len(text) and text[j] != ch:
                j += 2 if text[j] == "\\" else 1
            i = j + 1
            continue
        if ch in pairs:
            stack.append((ch, i))
        elif ch in closers:
            if stack and stack[-1][0] == closers[ch]:
                stack.pop()
            else:
                line, column = _position(text, i)
                problems.append(Diagnostic(message=f"Unexpected '{ch}'", line=line, column=column))
        i += 1

    for open_, offset in stack:
        line, column = _position(text, offset)
        problems.append(Diagnostic(message=f"Unclosed '{open_}'", line=line, column=column))
    return sorted(problems, key=lambda d: (d.line, d.column))


class _TagChecker(HTMLParser):
    VOID_ELEMENTS = {
        "area", "base", "br", "col", "embed", "hr", "img", "input",
        "link", "meta", "source", "track", "wbr",
    }

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.stack: list[tuple[str, tuple[int, int]]] = []
        self.problems: list[Diagnostic] = []

    def handle_starttag(self, tag, attrs):
        if tag not in self.VOID_ELEMENTS:
            self.stack.append((tag, self.getpos()))

    def handle_endtag(self, tag):
        if tag in self.VOID_ELEMENTS:
            return
        line, offset = self.getpos()
        open_tags = [name for name, _ in self.stack]
        if tag not in open_tags:
            self.problems.append(Diagnostic(
                message=f"Unexpected closing tag </{tag}>", line=line, column=offset + 1,
            ))
            return
        while self.stack:
            name, (open_line, open_offset) = self.stack.pop()
            if name == tag:
                break
            self.problems.append(Diagnostic(
                message=f"Unclosed tag <{name}>", line=open_line, column=open_offset + 1,
            ))


class MarkupWorker(LanguageWorker):
    """HTML: tag balance diagnostics and tag-name completions."""

    name = "html"
    TAGS = (
        "a", "abbr", "article", "aside", "body", "button", "code", "div",
        "footer", "form", "h1", "h2", "h3", "head", "header", "html", "img",
        "input", "label", "li", "link", "main", "meta", "nav", "ol", "option",
        "p", "pre", "script", "section", "select", "span", "strong", "style",
        "table", "tbody", "td", "textarea", "th", "thead", "title", "tr", "ul",
    )

    def _diagnose(self, text: str) -> list[Diagnostic]:
        checker = _TagChecker()
        checker.feed(text)
        checker.close()
        problems = list(checker.problems)
        for name, (line, offset) in checker.stack:
            problems.append(Diagnostic(message=f"Unclosed tag <{name}>", line=line, column=offset + 1))
        return sorted(problems, key=lambda d: (d.line, d.column))

    def _complete(self, text: str, prefix: str) -> list[str]:
        prefix = prefix.lstrip("<").lower()
        return [tag for tag in self.TAGS if tag.startswith(prefix)]


class StyleWorker(LanguageWorker):
    """CSS, SCSS and Less: brace balance and property-name completions."""

    name = "css"
    PROPERTIES = (
        "align-items", "background", "background-color", "border",
        "border-radius", "box-shadow", "color", "cursor", "display", "flex",
        "flex-direction", "font-family", "font-size", "font-weight", "gap",
        "grid-template-columns", "height", "justify-content", "line-height",
        "margin", "max-width", "opacity", "overflow", "padding", "position",
        "text-align", "transform", "transition", "width", "z-index",
    )

    def _diagnose(self, text: str) -> list[Diagnostic]:
        return _scan_brackets(text, {"{": "}", "(": ")", "[": "]"}, "\"'", None)

    def _complete(self, text: str, prefix: str) -> list[str]:
        return [prop for prop in self.PROPERTIES if prop.startswith(prefix.lower())]


class ScriptWorker(LanguageWorker):
    """JavaScript and TypeScript: bracket balance and keyword completions."""

    name = "typescript"
    KEYWORDS = (
        "async", "await", "break", "case", "catch", "class", "const",
        "continue", "default", "else", "export", "extends", "false", "finally",
        "for", "function", "if", "import", "interface", "let", "new", "null",
        "return", "switch", "this", "throw", "true", "try", "type", "typeof",
        "undefined", "var", "while",
    )

    def _diagnose(self, text: str) -> list[Diagnostic]:
        return _scan_brackets(text, {"{": "}", "(": ")", "[": "]"}, "\"'`", "//")

    def _complete(self, text: str, prefix: str) -> list[str]:
        keywords = [kw for kw in self.KEYWORDS if kw.startswith(prefix)]
        words = [w for w in super()._complete(text, prefix) if w not in keywords]
        return keywords + words


class ConfigWorker(LanguageWorker):
    """JSON: parse diagnostics, key completions and pretty-printing."""

    name = "json"

    def _diagnose(self, text: str) -> list[Diagnostic]:
        if not text.strip():
            return []
        try:
            json.loads(text)
        except json.JSONDecodeError as e:
            return [Diagnostic(message=e.msg, line=e.lineno, column=e.colno)]
        return []

    def _complete(self, text: str, prefix: str) -> list[str]:
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            return []
        keys: list[str] = []
        stack = [data]
        while stack:
            item = stack.pop()
            if isinstance(item, dict):
                for key, value in item.items():
                    if key.startswith(prefix) and key not in keys:
                        keys.append(key)
                    stack.append(value)
            elif isinstance(item, list):
                stack.extend(item)
        return keys

    def _format(self, text: str) -> str:
        try:
            return json.dumps(json.loads(text), indent=2, ensure_ascii=False) + "\n"
        except json.JSONDecodeError:
            return text


# Every LanguageId has exactly one entry; GENERIC is the fallback arm.
WORKER_TABLE: dict[LanguageId, type[LanguageWorker]] = {
    LanguageId.MARKUP: MarkupWorker,
    LanguageId.STYLES: StyleWorker,
    LanguageId.SCRIPT: ScriptWorker,
    LanguageId.TYPED_SCRIPT: ScriptWorker,
    LanguageId.CONFIG: ConfigWorker,
    LanguageId.GENERIC: GenericWorker,
}

_unmapped = set(LanguageId) - set(WORKER_TABLE)
if _unmapped:
    raise RuntimeError(f"Languages without a worker: {sorted(lang.value for lang in _unmapped)}")


# -----------------------------------------------------------------------------
# Router
# -----------------------------------------------------------------------------

class WorkerRouter:
    """
    Resolve a language to its worker.

    Workers are created on first request per category, started on a thread
    pool and cached for the router's lifetime. resolve() never raises.
    """

    def __init__(
        self,
        table: Optional[dict[LanguageId, type[LanguageWorker]]] = None,
        max_workers: int = 2,
    ):
        """
        Initialize router.

        Args:
            table: Language to worker class mapping (default: WORKER_TABLE)
            max_workers: Thread pool size for worker start-up
        """
        self.table = dict(table or WORKER_TABLE)
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="lang-worker")
        self._lock = threading.RLock()
        self._cache: dict[type[LanguageWorker], LanguageWorker] = {}
        self._futures: list[Future] = []

    def resolve(self, language: LanguageId | str | None) -> LanguageWorker:
        """Worker handle for a language id or free-form label."""
        if not isinstance(language, LanguageId):
            parsed = LanguageId.from_label(language)
            if parsed == LanguageId.GENERIC:
                logger.debug(f"No dedicated worker for {language!r}, using fallback")
            language = parsed

        factory = self.table.get(language) or self.table.get(LanguageId.GENERIC, GenericWorker)
        with self._lock:
            worker = self._cache.get(factory)
            if worker is None:
                worker = self._spawn(factory)
            return worker

    def fallback(self) -> LanguageWorker:
        return self.resolve(LanguageId.GENERIC)

    def _spawn(self, factory: type[LanguageWorker]) -> LanguageWorker:
        fallback_factory = self.table.get(LanguageId.GENERIC, GenericWorker)
        try:
            worker = factory()
        except Exception as e:
            if factory is fallback_factory:
                raise
            logger.warning(f"Could not create {factory.__name__}: {e}; using fallback")
            return self.fallback()

        self._cache[factory] = worker
        self._futures.append(self._executor.submit(self._start, factory, worker))
        return worker

    def _start(self, factory: type[LanguageWorker], worker: LanguageWorker) -> None:
        """Start a worker; a failed start swaps the cached entry for the fallback."""
        try:
            worker.start()
        except Exception as e:
            logger.warning(f"{factory.__name__} failed to start: {e}; using fallback")
            if factory is self.table.get(LanguageId.GENERIC, GenericWorker):
                return
            with self._lock:
                self._cache[factory] = self.fallback()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until every requested worker has finished starting."""
        with self._lock:
            pending = list(self._futures)
        _, not_done = wait(pending, timeout=timeout)
        return not not_done

    @property
    def started(self) -> list[LanguageWorker]:
        with self._lock:
            return list(self._cache.values())

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)
