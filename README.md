# armlut

Decodes ARM7TDMI instructions into their format and handler, and generates
the opcode lookup tables an emulator core dispatches through.

Two tables are produced:

- **Thumb**: 1024 entries. Entry `i` is the decoding of the opcode `i << 6`,
  so the table is indexed by bits 6–15 of a 16-bit Thumb opcode.
- **ARM**: 4096 entries. Entry `i` is the decoding of the opcode built from
  bits 4–11 of `i` as opcode bits 20–27 and bits 0–3 of `i` as opcode
  bits 4–7.

Each entry pairs a format name (such as `DataProcessing` or `LdrPc`) with the
handler to call, including the parameters taken from the opcode bits, for
example `exec_thumb_add_sub::<false, true, 3>`. Coprocessor instructions, and
ARM encodings outside the ARMv4T set, decode as `Undefined`.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Command line

```
armlut OUT_DIR
```

This writes `thumb_lut.rs` and `arm_lut.rs` into `OUT_DIR`. If `OUT_DIR` is
left out, the `OUT_DIR` environment variable is used; if neither is given the
command exits with a usage error.

## Library use

Decode single instructions. Each call returns a `Decoded` record with the
fields `fmt` and `handler`:

```python
from armlut.thumb import thumb_decode
from armlut.arm import arm_decode

result = thumb_decode(0xDF00)
# result.fmt == "Swi", result.handler == "exec_thumb_swi"

result = arm_decode(0xE12FFF10)
# result.fmt == "BranchExchange", result.handler == "exec_arm_bx"
```

`thumb_decode` takes values from 0 to 0xFFFF and `arm_decode` values from 0
to 0xFFFFFFFF; anything outside raises `ValueError`.

`armlut.bits` has the bit helpers `bit(value, index)`, which returns a
`bool`, and `bit_range(value, start, end)`, where `end` is exclusive. Both
raise `ValueError` for a negative index or a reversed range. The module also
defines the frozen `Decoded` dataclass.

Build the whole tables in memory:

```python
from armlut.lut import thumb_lut, arm_lut

thumb = thumb_lut()   # list of 1024 Decoded entries
arm = arm_lut()       # list of 4096 Decoded entries
```

Or write the generated source to any open text file:

```python
from armlut.lut import generate_thumb_lut, generate_arm_lut

with open("thumb_lut.rs", "w") as f:
    generate_thumb_lut(f)
with open("arm_lut.rs", "w") as f:
    generate_arm_lut(f)
```

## What it does not do

The package only decodes and generates tables. It does not execute
instructions, model memory or registers, or provide the handler functions the
generated tables refer to.