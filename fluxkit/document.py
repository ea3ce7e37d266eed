"""Document model produced by the FLUX.MD parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class SourceSpan:
    """A location in the source text."""

    start: int
    end: int
    line: int
    column: int

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


class DirectiveKind(Enum):
    """The kind of an agent directive such as ``@send``."""

    SEND = "send"
    ASK = "ask"
    TELL = "tell"
    DELEGATE = "delegate"
    SUBSCRIBE = "subscribe"
    TRUST = "trust"

    @classmethod
    def from_name(cls, name: str) -> DirectiveKind | None:
        """Look a kind up by name, ignoring case; None when unknown."""
        try:
            return cls(name.lower())
        except ValueError:
            return None


@dataclass
class Frontmatter:
    """Key/value header at the start of a document."""

    title: str | None = None
    version: str | None = None
    language: str | None = None
    imports: list[str] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass
class CodeBlock:
    """A fenced code block."""

    language: str
    source: str
    span: SourceSpan
    name: str | None = None


@dataclass
class TextSection:
    """A run of plain text."""

    content: str
    span: SourceSpan


@dataclass
class AgentDirective:
    """An agent directive line."""

    kind: DirectiveKind
    target: str
    payload: str | None
    span: SourceSpan


@dataclass
class AstDocument:
    """A parsed FLUX.MD document."""

    frontmatter: Frontmatter | None = None
    code_blocks: list[CodeBlock] = field(default_factory=list)
    text_sections: list[TextSection] = field(default_factory=list)
    agent_directives: list[AgentDirective] = field(default_factory=list)