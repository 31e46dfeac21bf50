"""Decoding of 16-bit THUMB instructions into format and handler names."""

from __future__ import annotations

from .bits import Decoded, bit, bit_range


def _handler(name: str, *params: bool | int) -> str:
    """Render a handler name with its template parameters."""
    rendered = ", ".join(
        ("true" if param else "false") if isinstance(param, bool) else str(param)
        for param in params
    )
    return f"{name}::<{rendered}>"


def thumb_decode(i: int) -> Decoded:
    """Classify a 16-bit THUMB instruction."""
    if not 0 <= i <= 0xFFFF:
        raise ValueError(f"THUMB instruction out of range: {i:#x}")

    offset5 = bit_range(i, 6, 11)
    load = bool(bit(i, 11))

    if i & 0xF800 == 0x1800:
        return Decoded(
            "AddSub",
            _handler(
                "exec_thumb_add_sub",
                bool(bit(i, 9)),
                bool(bit(i, 10)),
                bit_range(i, 6, 9),
            ),
        )
    if i & 0xE000 == 0x0000:
        return Decoded(
            "MoveShiftedReg",
            _handler(
                "exec_thumb_move_shifted_reg",
                bit_range(i, 11, 13),
                bit_range(i, 6, 11),
            ),
        )
    if i & 0xE000 == 0x2000:
        return Decoded(
            "DataProcessImm",
            _handler(
                "exec_thumb_data_process_imm",
                bit_range(i, 11, 13),
                bit_range(i, 8, 11),
            ),
        )
    if i & 0xFC00 == 0x4000:
        return Decoded("AluOps", _handler("exec_thumb_alu_ops", bit_range(i, 6, 10)))
    if i & 0xFC00 == 0x4400:
        return Decoded(
            "HiRegOpOrBranchExchange",
            _handler(
                "exec_thumb_hi_reg_op_or_bx",
                bit_range(i, 8, 10),
                bool(bit(i, 7)),
                bool(bit(i, 6)),
            ),
        )
    if i & 0xF800 == 0x4800:
        return Decoded("LdrPc", _handler("exec_thumb_ldr_pc", bit_range(i, 8, 11)))
    if i & 0xF200 == 0x5000:
        return Decoded(
            "LdrStrRegOffset",
            _handler(
                "exec_thumb_ldr_str_reg_offset",
                load,
                bit_range(i, 6, 9),
                bool(bit(i, 10)),
            ),
        )
    if i & 0xF200 == 0x5200:
        return Decoded(
            "LdrStrSHB",
            _handler(
                "exec_thumb_ldr_str_shb",
                bit_range(i, 6, 9),
                bool(bit(i, 10)),
                bool(bit(i, 11)),
            ),
        )
    if i & 0xE000 == 0x6000:
        is_byte = bool(bit(i, 12))
        offset = offset5 if is_byte else (((offset5 << 3) & 0xFF) >> 1)
        return Decoded(
            "LdrStrImmOffset",
            _handler("exec_thumb_ldr_str_imm_offset", load, is_byte, offset),
        )
    if i & 0xF000 == 0x8000:
        return Decoded(
            "LdrStrHalfWord",
            _handler("exec_thumb_ldr_str_halfword", load, (offset5 << 1) & 0xFF),
        )
    if i & 0xF000 == 0x9000:
        return Decoded(
            "LdrStrSp",
            _handler("exec_thumb_ldr_str_sp", load, bit_range(i, 8, 11)),
        )
    if i & 0xF000 == 0xA000:
        return Decoded(
            "LoadAddress",
            _handler(
                "exec_thumb_load_address", bool(bit(i, 11)), bit_range(i, 8, 11)
            ),
        )
    if i & 0xFF00 == 0xB000:
        return Decoded("AddSp", _handler("exec_thumb_add_sp", bool(bit(i, 7))))
    if i & 0xF600 == 0xB400:
        return Decoded(
            "PushPop", _handler("exec_thumb_push_pop", load, bool(bit(i, 8)))
        )
    if i & 0xF000 == 0xC000:
        return Decoded(
            "LdmStm", _handler("exec_thumb_ldm_stm", load, bit_range(i, 8, 11))
        )
    if i & 0xFF00 == 0xDF00:
        return Decoded("Swi", "exec_thumb_swi")
    if i & 0xF000 == 0xD000:
        return Decoded(
            "BranchConditional",
            _handler("exec_thumb_branch_with_cond", bit_range(i, 8, 12)),
        )
    if i & 0xF800 == 0xE000:
        return Decoded("Branch", "exec_thumb_branch")
    if i & 0xF000 == 0xF000:
        return Decoded(
            "BranchLongWithLink",
            _handler("exec_thumb_branch_long_with_link", bool(bit(i, 11))),
        )
    return Decoded("Undefined", "thumb_undefined")