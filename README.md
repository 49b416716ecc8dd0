# cmarklib

Building blocks for a CommonMark processor.

- `cmarklib.position.Position`: a zero-based line, column and byte index. It
  prints as `line:column`, counting from 1.
- `cmarklib.pointer.Pointer`: a cursor over source bytes. It has a start and an
  end position. It records the last two tokens it created in `tokens.prev` and
  `tokens.curr`.
- `cmarklib.token`: `Token` (a kind, a span and the bytes it covers), `Kind`
  (an integer enum of token kinds) and `TokenPointer`.
- `cmarklib.errors`: `SourceError` prints as `[line:column] => message`.
  `ErrorGroup` is an exception that holds several errors.
- `cmarklib.tx`: `Tx` takes a snapshot of an object (a list, bytearray, dict,
  set or any object with attributes) and `rollback()` restores it in place.
  `Compound` rolls back several `Tx` objects at once.
- `cmarklib.mapping.Map`: a map stored in a list. Its keys only need to support
  `==`. `get` and `delete` raise `KeyError` for a missing key. `try_get`
  returns `None` for a missing key. `delete` moves the last entry into the
  removed entry's slot.
- `cmarklib.results`: `Ok` and `Err` values and a `ResultGroup` that holds them.
- `cmarklib.html`: `escape`, `render`, `render_value`, the `HTMLElement` base
  class, `Raw`, `Fragment` and `HTMLDocument`. `render` escapes strings, writes
  `None` as nothing, writes booleans as `true` and `false`, and renders the
  items of lists and tuples one after another.

## Installation

```
pip install .
```

## Examples

Move a pointer through a source and create a token:

```python
from cmarklib.pointer import Pointer

ptr = Pointer(b"hello world")
while ptr.peek() not in (0, ord(" ")):
    ptr.next()
word = ptr.create(1)
print(str(word))        # hello
```

Roll back a change:

```python
from cmarklib.token import Token
from cmarklib.tx import Tx

item = Token()
tx = Tx(item)
item.kind = 10
tx.rollback()
assert item.kind == 0
```

Render HTML:

```python
from cmarklib.html import Fragment, Raw, render

print(render(Fragment(["a < b", Raw("<br>"), 42])))
# a &lt; b<br>42
```

## Command line

```
cmarklib FILE [FILE ...]
```

Prints each file, decoded as UTF-8 and followed by a newline, one after another.

## What it does not do

The package does not parse Markdown and does not convert Markdown to HTML. It
provides only the pieces listed above. The `cmarklib` command copies its input
files to standard output unchanged.