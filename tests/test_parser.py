import pytest

from fluxkit.document import DirectiveKind
from fluxkit.parser import (
    ParseError,
    UnclosedCodeBlockError,
    parse_document,
    parse_frontmatter,
)


def test_empty_document():
    doc = parse_document("")
    assert doc.frontmatter is None
    assert doc.code_blocks == []
    assert doc.text_sections == []
    assert doc.agent_directives == []


def test_plain_text():
    doc = parse_document("Hello world")
    assert len(doc.text_sections) == 1
    assert doc.text_sections[0].content == "Hello world"
    assert doc.text_sections[0].span.line == 1
    assert doc.text_sections[0].span.column == 1


def test_frontmatter_only():
    doc = parse_document("---\ntitle: My Module\nversion: 0.1.0\n---\n")
    assert doc.frontmatter.title == "My Module"
    assert doc.frontmatter.version == "0.1.0"


def test_frontmatter_with_imports():
    doc = parse_document("---\nimport: std.io, std.fs\n---\n")
    assert doc.frontmatter.imports == ["std.io", "std.fs"]


def test_frontmatter_with_metadata():
    doc = parse_document(
        "---\ntitle: Test\nauthor: flux\ndescription: A test module\n---\n"
    )
    assert doc.frontmatter.metadata["author"] == "flux"
    assert doc.frontmatter.metadata["description"] == "A test module"


def test_code_block():
    doc = parse_document("```c\nint main() { return 0; }\n```\n")
    assert len(doc.code_blocks) == 1
    assert doc.code_blocks[0].language == "c"
    assert doc.code_blocks[0].source == "int main() { return 0; }"
    assert doc.code_blocks[0].name is None


def test_code_block_with_name():
    doc = parse_document("```c my_func\nint foo() { return 1; }\n``` name=foo\n")
    assert len(doc.code_blocks) == 1
    assert doc.code_blocks[0].name == "name=foo"
    assert doc.code_blocks[0].language == "c my_func"


def test_multiple_code_blocks():
    doc = parse_document("```flux\nfn a() {}\n```\n```c\nint b() {}\n```\n")
    assert [b.language for b in doc.code_blocks] == ["flux", "c"]


def test_agent_directive_send():
    doc = parse_document("@send agent_a : hello world\n")
    assert len(doc.agent_directives) == 1
    d = doc.agent_directives[0]
    assert d.kind is DirectiveKind.SEND
    assert d.target == "agent_a"
    assert d.payload == "hello world"


def test_agent_directive_ask():
    doc = parse_document("@ask oracle : what is 42?\n")
    assert len(doc.agent_directives) == 1
    assert doc.agent_directives[0].kind is DirectiveKind.ASK
    assert doc.agent_directives[0].target == "oracle"


def test_agent_directive_tell():
    doc = parse_document("@tell worker : process this\n")
    assert doc.agent_directives[0].kind is DirectiveKind.TELL


def test_agent_directive_delegate():
    doc = parse_document("@delegate helper : compute(42)\n")
    assert doc.agent_directives[0].kind is DirectiveKind.DELEGATE
    assert doc.agent_directives[0].payload == "compute(42)"


def test_agent_directive_trust():
    doc = parse_document("@trust cert_authority\n")
    d = doc.agent_directives[0]
    assert d.kind is DirectiveKind.TRUST
    assert d.payload is None
    assert d.span.start == 0
    assert d.span.end == 22


def test_directive_kind_ignores_case():
    doc = parse_document("@SUBSCRIBE feed\n")
    assert doc.agent_directives[0].kind is DirectiveKind.SUBSCRIBE
    assert doc.agent_directives[0].target == "feed"


def test_unknown_directive_becomes_text():
    doc = parse_document("@shout everyone : hi\n")
    assert doc.agent_directives == []
    assert [t.content for t in doc.text_sections] == ["@shout"]


def test_text_around_directive_is_split():
    doc = parse_document("intro\n@send a : b\noutro")
    assert [t.content for t in doc.text_sections] == ["intro", "outro"]
    assert doc.text_sections[1].span.line == 3


def test_full_document():
    text = """---
title: Test Module
version: 1.0
---

# Introduction

This is a test module.

```c
int add(int a, int b) {
    return a + b;
}
```

@send processor : start

```flux
fn main() { return 0; }
```
"""
    doc = parse_document(text)
    assert doc.frontmatter.title == "Test Module"
    assert len(doc.code_blocks) == 2
    assert doc.text_sections
    assert doc.text_sections[0].content.startswith("# Introduction")
    assert len(doc.agent_directives) == 1
    assert doc.code_blocks[0].source == "int add(int a, int b) {\n    return a + b;\n}"


def test_code_block_span_after_frontmatter():
    doc = parse_document("---\ntitle: T\n---\n```c\nx\n```\n")
    span = doc.code_blocks[0].span
    assert span.start == 17
    assert span.line == 4
    assert span.column == 1


def test_unclosed_code_block_error():
    with pytest.raises(UnclosedCodeBlockError) as info:
        parse_document("```c\nint main() { return 0; }\n")
    assert "unclosed" in str(info.value)
    assert info.value.line == 1


def test_unclosed_code_block_is_parse_error():
    with pytest.raises(ParseError):
        parse_document("text\n```\nabc")


def test_unclosed_frontmatter_error():
    with pytest.raises(ParseError, match="frontmatter"):
        parse_document("---\ntitle: x\n")


def test_parse_frontmatter_direct():
    fm = parse_frontmatter("title: A\nlanguage: c\nimports: a, , b\nnokey\nx: y: z")
    assert fm.title == "A"
    assert fm.language == "c"
    assert fm.imports == ["a", "b"]
    assert fm.metadata == {"x": "y: z"}
    assert fm.version is None