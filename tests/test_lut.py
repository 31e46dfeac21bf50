import io

import pytest

from armlut.arm import arm_decode
from armlut.lut import (
    arm_lut,
    generate_arm_lut,
    generate_thumb_lut,
    main,
    thumb_lut,
)
from armlut.thumb import thumb_decode


def test_thumb_lut_entries_match_decoder():
    table = thumb_lut()
    assert len(table) == 1024
    for i, entry in enumerate(table):
        assert entry == thumb_decode(i << 6)


def test_arm_lut_entries_match_decoder():
    table = arm_lut()
    assert len(table) == 4096
    for i, entry in enumerate(table):
        assert entry == arm_decode(((i & 0xFF0) << 16) | ((i & 0xF) << 4))


def test_arm_lut_swi_region():
    table = arm_lut()
    assert all(entry.handler == "exec_arm_swi" for entry in table[0xF00:0x1000])


def test_generated_thumb_text():
    buffer = io.StringIO()
    generate_thumb_lut(buffer)
    text = buffer.getvalue()
    lines = text.splitlines()
    assert lines[0] == "impl<I: MemoryInterface> Arm7tdmiCore<I> {"
    assert lines[1] == "   pub const THUMB_LUT: [ThumbInstructionInfo<I>; 1024] = ["
    assert lines[-2:] == ["    ];", "}"]
    assert text.count("ThumbInstructionInfo {") == 1024
    assert "/* 0x0 */" in text
    assert "/* 0x3ff */" in text
    assert "handler_fn: Arm7tdmiCore::exec_thumb_swi," in text


def test_generated_arm_text():
    buffer = io.StringIO()
    generate_arm_lut(buffer)
    text = buffer.getvalue()
    lines = text.splitlines()
    assert lines[1] == "    pub const ARM_LUT: [ArmInstructionInfo<I>; 4096] = ["
    assert lines[-2:] == ["    ];", "}"]
    assert text.count("        } ,") == 4096
    assert text.count("fmt: ArmFormat::") == 4096
    assert "/* 0xfff */" in text


def test_main_writes_both_tables(tmp_path):
    assert main([str(tmp_path)]) == 0
    thumb_buffer = io.StringIO()
    generate_thumb_lut(thumb_buffer)
    arm_buffer = io.StringIO()
    generate_arm_lut(arm_buffer)
    assert (tmp_path / "thumb_lut.rs").read_text(encoding="utf-8") == thumb_buffer.getvalue()
    assert (tmp_path / "arm_lut.rs").read_text(encoding="utf-8") == arm_buffer.getvalue()


def test_main_uses_out_dir_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("OUT_DIR", str(tmp_path))
    assert main([]) == 0
    assert sorted(p.name for p in tmp_path.iterdir()) == ["arm_lut.rs", "thumb_lut.rs"]


def test_main_without_output_directory(monkeypatch):
    monkeypatch.delenv("OUT_DIR", raising=False)
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2