"""Parser for FLUX.MD documents: frontmatter, fenced code, directives and text."""

from __future__ import annotations

from typing import Callable

from fluxkit.document import (
    AgentDirective,
    AstDocument,
    CodeBlock,
    DirectiveKind,
    Frontmatter,
    SourceSpan,
    TextSection,
)

_FRONTMATTER_OPEN = "---\n"
_FRONTMATTER_CLOSE = "\n---"
_FENCE = "```"


class ParseError(Exception):
    """A FLUX.MD document could not be parsed."""


class UnclosedCodeBlockError(ParseError):
    """A fenced code block has no closing fence."""

    def __init__(self, line: int) -> None:
        self.line = line
        super().__init__(f"unclosed code block at line {line}")


class _Scanner:
    """Character cursor over the text that keeps line and column."""

    def __init__(self, text: str, pos: int, line: int, column: int) -> None:
        self.text = text
        self.pos = pos
        self.line = line
        self.column = column

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def at_fence(self) -> bool:
        return self.text.startswith(_FENCE, self.pos)

    def advance(self) -> str:
        ch = self.text[self.pos]
        if ch == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1
        return ch

    def skip(self, count: int) -> None:
        for _ in range(count):
            self.advance()

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        start = self.pos
        while not self.at_end() and predicate(self.peek()):
            self.advance()
        return self.text[start:self.pos]

    def skip_blanks(self) -> None:
        self.take_while(lambda c: c in " \t")

    def span(self, start: int | None = None) -> SourceSpan:
        return SourceSpan(
            start=self.pos if start is None else start,
            end=self.pos,
            line=self.line,
            column=self.column,
        )


class _BodyParser:
    """Splits the document body into code blocks, directives and text."""

    def __init__(self, doc: AstDocument, scanner: _Scanner) -> None:
        self.doc = doc
        self.sc = scanner
        self.pending: list[str] = []
        self.text_span = scanner.span()

    def run(self) -> None:
        sc = self.sc
        while not sc.at_end():
            if sc.at_fence():
                self._code_block()
            elif sc.peek() == "@" and sc.pos + 1 < len(sc.text):
                self._directive()
            else:
                self.pending.append(sc.advance())
        self._flush()

    def _flush(self) -> None:
        content = "".join(self.pending).strip()
        if content:
            self.doc.text_sections.append(TextSection(content, self.text_span))
        self.pending = []

    def _code_block(self) -> None:
        sc = self.sc
        self._flush()
        start = sc.span()
        sc.skip(len(_FENCE))
        language = sc.take_while(lambda c: c != "\n").strip()
        if sc.peek() == "\n":
            sc.advance()
        source_start = sc.pos
        while not sc.at_fence():
            if sc.at_end():
                raise UnclosedCodeBlockError(start.line)
            sc.advance()
        source = sc.text[source_start:sc.pos]
        sc.skip(len(_FENCE))
        name = sc.take_while(lambda c: c != "\n").strip() or None
        self.doc.code_blocks.append(
            CodeBlock(
                language=language,
                source=source.rstrip(),
                span=SourceSpan(start.start, sc.pos, start.line, start.column),
                name=name,
            )
        )
        self.text_span = sc.span()

    def _directive(self) -> None:
        sc = self.sc
        self._flush()
        start = sc.span()
        sc.advance()
        kind_name = sc.take_while(lambda c: c.isalnum() or c == "_")
        sc.skip_blanks()
        target = sc.take_while(lambda c: c not in "\n :")
        sc.skip_blanks()
        payload = None
        if sc.peek() == ":":
            sc.advance()
            sc.skip_blanks()
            payload = sc.take_while(lambda c: c != "\n").strip() or None
        if sc.peek() == "\n":
            sc.advance()
        kind = DirectiveKind.from_name(kind_name)
        if kind is not None:
            self.doc.agent_directives.append(
                AgentDirective(
                    kind=kind,
                    target=target,
                    payload=payload,
                    span=SourceSpan(start.start, sc.pos, start.line, start.column),
                )
            )
        else:
            # An unknown directive is kept as text, without its arguments.
            self.pending = [f"@{kind_name}"]
        self.text_span = sc.span()


def parse_frontmatter(content: str) -> Frontmatter:
    """Parse ``key: value`` lines of a frontmatter block."""
    fm = Frontmatter()
    for raw in content.split("\n"):
        line = raw.strip()
        if not line:
            continue
        key, sep, value = line.partition(":")
        if not sep:
            continue
        key = key.strip()
        value = value.strip()
        if key == "title":
            fm.title = value
        elif key == "version":
            fm.version = value
        elif key == "language":
            fm.language = value
        elif key in ("import", "imports"):
            fm.imports.extend(
                item.strip() for item in value.split(",") if item.strip()
            )
        else:
            fm.metadata[key] = value
    return fm


def parse_document(text: str) -> AstDocument:
    """Parse a FLUX.MD document into an :class:`AstDocument`."""
    doc = AstDocument()
    if text.startswith(_FRONTMATTER_OPEN):
        close = text.find(_FRONTMATTER_CLOSE, len(_FRONTMATTER_OPEN))
        if close == -1:
            raise ParseError("invalid frontmatter: missing closing '---'")
        doc.frontmatter = parse_frontmatter(text[len(_FRONTMATTER_OPEN):close])
        body_start = close + len(_FRONTMATTER_CLOSE)
        line = text.count("\n", 0, body_start) + 1
        column = body_start - text.rfind("\n", 0, body_start)
    else:
        body_start, line, column = 0, 1, 1
    _BodyParser(doc, _Scanner(text, body_start, line, column)).run()
    return doc