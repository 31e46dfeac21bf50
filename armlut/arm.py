"""Decoding of 32-bit ARM instructions into format and handler names."""

from __future__ import annotations

from .bits import Decoded, bit, bit_range

_UNDEFINED = Decoded("Undefined", "arm_undefined")


def _handler(name: str, *params: bool | int) -> str:
    """Render a handler name with its template parameters."""
    rendered = ", ".join(
        ("true" if param else "false") if isinstance(param, bool) else str(param)
        for param in params
    )
    return f"{name}::<{rendered}>"


def _flags(i: int, *indices: int) -> tuple[bool, ...]:
    """Return the bits of ``i`` at ``indices`` as booleans."""
    return tuple(bool(bit(i, index)) for index in indices)


def _decode_special(i: int) -> Decoded | None:
    match (bit_range(i, 23, 26), bit_range(i, 4, 8)):
        case (0b000, 0b1001):
            if not bit(i, 22):
                return Decoded(
                    "Multiply", _handler("exec_arm_mul_mla", *_flags(i, 20, 21))
                )
        case (0b001, 0b1001):
            return Decoded(
                "MultiplyLong",
                _handler("exec_arm_mull_mlal", *_flags(i, 20, 21, 22)),
            )
        case (0b010, 0b1001):
            if bit_range(i, 20, 22) == 0:
                return Decoded("SingleDataSwap", _handler("exec_arm_swp", *_flags(i, 22)))
        case (0b010, 0b0001):
            if bit_range(i, 20, 23) == 0b010:
                return Decoded("BranchExchange", "exec_arm_bx")
    return None


def _decode_data_processing(i: int) -> Decoded:
    special = _decode_special(i)
    if special is not None:
        return special

    key = _flags(i, 25, 22, 7, 4)
    hs = (i & 0b1100000) >> 5
    transfer_args = (hs, *_flags(i, 20, 21, 24, 23))
    if key == (False, False, True, True):
        return Decoded(
            "HalfwordDataTransferRegOffset",
            _handler("exec_arm_ldr_str_hs_reg", *transfer_args),
        )
    if key == (False, True, True, True):
        return Decoded(
            "HalfwordDataTransferImmediateOffset",
            _handler("exec_arm_ldr_str_hs_imm", *transfer_args),
        )

    # PSR transfers hide among TST/TEQ/CMP/CMN with the S bit clear.
    op_not_touching_rd = bit_range(i, 21, 25) & 0b1100 == 0b1000
    if not bit(i, 20) and op_not_touching_rd:
        if bit(i, 21):
            return Decoded(
                "MoveToStatus",
                _handler("exec_arm_transfer_to_status", *_flags(i, 25, 22)),
            )
        return Decoded("MoveFromStatus", _handler("exec_arm_mrs", *_flags(i, 22)))
    return Decoded(
        "DataProcessing",
        _handler(
            "exec_arm_data_processing", bit_range(i, 21, 25), *_flags(i, 25, 20, 4)
        ),
    )


def _decode_single_transfer(i: int) -> Decoded:
    if bit(i, 25) and bit(i, 4):
        return _UNDEFINED
    return Decoded(
        "SingleDataTransfer",
        _handler(
            "exec_arm_ldr_str",
            *_flags(i, 20, 21, 24, 22, 25, 23),
            bit_range(i, 5, 7),
            *_flags(i, 4),
        ),
    )


def _decode_block_or_branch(i: int) -> Decoded:
    if bit(i, 25):
        return Decoded("BranchLink", _handler("exec_arm_b_bl", *_flags(i, 24)))
    return Decoded(
        "BlockDataTransfer",
        _handler("exec_arm_ldm_stm", *_flags(i, 20, 21, 22, 23, 24)),
    )


def _decode_coprocessor_or_swi(i: int) -> Decoded:
    # Coprocessor instructions are not implemented and decode as undefined.
    if bit(i, 25) and bit(i, 24):
        return Decoded("SoftwareInterrupt", "exec_arm_swi")
    return _UNDEFINED


def arm_decode(i: int) -> Decoded:
    """Classify a 32-bit ARM instruction."""
    if not 0 <= i <= 0xFFFFFFFF:
        raise ValueError(f"ARM instruction out of range: {i:#x}")
    match bit_range(i, 26, 28):
        case 0b00:
            return _decode_data_processing(i)
        case 0b01:
            return _decode_single_transfer(i)
        case 0b10:
            return _decode_block_or_branch(i)
        case _:
            return _decode_coprocessor_or_swi(i)