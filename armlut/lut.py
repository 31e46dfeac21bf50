"""Lookup tables of instruction handlers and their source-code rendering."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import TextIO

from .arm import arm_decode
from .bits import Decoded
from .thumb import thumb_decode

THUMB_LUT_SIZE = 1024
ARM_LUT_SIZE = 4096


def _arm_index_to_instruction(index: int) -> int:
    return ((index & 0xFF0) << 16) | ((index & 0x00F) << 4)


def thumb_lut() -> list[Decoded]:
    """Decode the 1024 THUMB table entries, indexed by the top ten bits."""
    return [thumb_decode(i << 6) for i in range(THUMB_LUT_SIZE)]


def arm_lut() -> list[Decoded]:
    """Decode the 4096 ARM table entries, indexed by bits 27..20 and 7..4."""
    return [arm_decode(_arm_index_to_instruction(i)) for i in range(ARM_LUT_SIZE)]


def generate_thumb_lut(file: TextIO) -> None:
    """Write the THUMB lookup table as source text to ``file``."""
    file.write("impl<I: MemoryInterface> Arm7tdmiCore<I> {\n")
    file.write(
        f"   pub const THUMB_LUT: [ThumbInstructionInfo<I>; {THUMB_LUT_SIZE}] = [\n"
    )
    for i, entry in enumerate(thumb_lut()):
        file.write(
            f"       /* {i:#x} */\n"
            "        ThumbInstructionInfo {\n"
            f"            handler_fn: Arm7tdmiCore::{entry.handler},\n"
            '            #[cfg(feature = "debugger")]\n'
            f"            fmt: ThumbFormat::{entry.fmt},\n"
            "        },\n"
        )
    file.write("    ];\n")
    file.write("}\n")


def generate_arm_lut(file: TextIO) -> None:
    """Write the ARM lookup table as source text to ``file``."""
    file.write("impl<I: MemoryInterface> Arm7tdmiCore<I> {\n")
    file.write(
        f"    pub const ARM_LUT: [ArmInstructionInfo<I>; {ARM_LUT_SIZE}] = [\n"
    )
    for i, entry in enumerate(arm_lut()):
        file.write(
            f"       /* {i:#x} */\n"
            "        ArmInstructionInfo {\n"
            f"            handler_fn: Arm7tdmiCore::{entry.handler},\n"
            '            #[cfg(feature = "debugger")]\n'
            f"            fmt: ArmFormat::{entry.fmt},\n"
            "        } ,\n"
        )
    file.write("    ];\n")
    file.write("}\n")


def main(argv: list[str] | None = None) -> int:
    """Write thumb_lut.rs and arm_lut.rs into the output directory."""
    parser = argparse.ArgumentParser(
        prog="armlut", description="Generate ARM and THUMB opcode lookup tables."
    )
    parser.add_argument(
        "out_dir",
        nargs="?",
        default=os.environ.get("OUT_DIR"),
        help="directory to write into (defaults to $OUT_DIR)",
    )
    args = parser.parse_args(argv)
    if not args.out_dir:
        parser.error("no output directory given and OUT_DIR is not set")

    out_dir = Path(args.out_dir)
    with (out_dir / "thumb_lut.rs").open("w", encoding="utf-8") as thumb_file:
        generate_thumb_lut(thumb_file)
    with (out_dir / "arm_lut.rs").open("w", encoding="utf-8") as arm_file:
        generate_arm_lut(arm_file)
    return 0