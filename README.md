# fluxkit

Pieces of the FLUX execution runtime, in pure Python with no third-party
dependencies:

- `fluxkit.registers` is a 64-register file for a register-based virtual machine.
- `fluxkit.parser` and `fluxkit.document` parse FLUX.MD structured markdown
  into a document tree.
- `fluxkit.cexpr`, `fluxkit.exprtree` and `fluxkit.cstrip` form a small front
  end for `int main() { return EXPR; }` programs.

## Installation

```
pip install fluxkit
```

Python 3.10 or newer is required.

## Parsing a FLUX.MD document

````python
from fluxkit.parser import parse_document

text = """---
title: Test Module
version: 1.0
import: std.io, std.fs
author: flux
---

# Introduction

```c
int add(int a, int b) { return a + b; }
```

@send processor : start
"""

doc = parse_document(text)
print(doc.frontmatter.title)          # Test Module
print(doc.frontmatter.imports)        # ['std.io', 'std.fs']
print(doc.frontmatter.metadata)       # {'author': 'flux'}
print(doc.code_blocks[0].language)    # c
print(doc.text_sections[0].content)   # # Introduction
directive = doc.agent_directives[0]
print(directive.kind, directive.target, directive.payload)
# DirectiveKind.SEND processor start
````

A document is an `AstDocument` holding an optional `Frontmatter` and lists
of `CodeBlock`, `TextSection` and `AgentDirective` items. All of these are
defined in `fluxkit.document`.

- Frontmatter opens with a `---` line and closes with the next `---` line.
  The keys `title`, `version` and `language` become attributes.
  `import` and `imports` take comma-separated lists. Any other key goes
  into `metadata`. `parse_frontmatter(content)` parses such a block on its own.
- A code block may carry a language after the opening fence. Text after the
  closing fence on the same line becomes the block's `name`.
- A directive is a line like `@kind target : payload`. The known kinds
  are `send`, `ask`, `tell`, `delegate`, `subscribe` and `trust`, matched
  without regard to case. `DirectiveKind.from_name` performs the lookup and
  returns `None` for an unknown name. An unknown directive is kept as text.
- Every element carries a `SourceSpan`. Its string form reads like
  `line 5, column 3`.

A code block that is never closed raises `UnclosedCodeBlockError`, which is
a subclass of `ParseError`. Frontmatter with no closing `---` raises
`ParseError`.

## Simple expressions

```python
from fluxkit.cexpr import parse_simple_main, parse_expr
from fluxkit.cstrip import strip_comments

source = strip_comments("int main() { /* demo */ return 3 + 4 * 2; }")
tree = parse_simple_main(source)
# Add(left=Lit(value=3), right=Mul(left=Lit(value=4), right=Lit(value=2)))
print(tree.evaluate())                 # 11
print(parse_expr("-(1 - 2)").evaluate())  # 1
```

`parse_simple_main` finds the first `return ...;` in the source and parses
its expression. The expression grammar supports:

- integer literals
- `+`, `-` and `*`
- unary minus
- parentheses

The tree nodes are `Lit`, `Add`, `Sub`, `Mul` and `Neg`. Each node's
`evaluate()` uses wrapping signed 64-bit arithmetic. Malformed input raises
`ExprError`.

`strip_comments` removes `//` and `/* */` comments. It keeps the newline
that ends a line comment.

## Registers

```python
from fluxkit.registers import RegisterFile, FlagBits

regs = RegisterFile()
regs.write_gp(1, 42)
regs.sp = 0x1000
print(regs.read_gp(11))        # 4096  (R11 aliases SP)
regs.update_flags_int(0)
print(regs.flags.is_zero)      # True
regs.increment_cycles()
print(regs.cycles)             # 1
regs.reset()
```

The register file has four banks of sixteen registers:

| Bank | Holds |
|------|-------|
| general | signed 64-bit integers |
| floating | floats |
| vector | 16 bytes |
| system | unsigned 64-bit integers |

General registers `R11`, `R12` and `R13` alias the system registers for SP,
FP and LR. Writes wrap to 64 bits. A read outside 0–15 gives zero, and a
write outside that range is ignored. `FlagBits` holds the flags `ZERO`,
`NEGATIVE`, `CARRY` and `OVERFLOW`.

## What this package does not do

The package does not cover the following:

- It has no bytecode encoder or decoder.
- It has no memory manager and no instruction interpreter, so it cannot run
  programs.
- It has no tokenizer or compiler for the C-like code inside FLUX.MD code
  blocks.
- It has no command-line tool. Everything is used as a library from Python.

## Running the tests

```
pip install "fluxkit[test]"
pytest
```