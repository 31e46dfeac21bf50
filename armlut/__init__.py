"""Decoding and lookup-table generation for ARM7TDMI ARM and Thumb opcodes."""

__version__ = "0.1.0"
__all__ = ["bits", "thumb", "arm", "lut"]