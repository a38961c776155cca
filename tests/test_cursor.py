import pytest
import voxloader


def test_read_tag():
    cursor = voxloader.ByteCursor(b"MAINrest")

    assert cursor.read_tag() == "MAIN"
    assert cursor.offset == 4
    assert cursor.remaining == 4


def test_read_tag_non_ascii():
    # bytes map straight to code points instead of being decoded as UTF-8
    cursor = voxloader.ByteCursor(b"\xffAB\xc3")

    assert cursor.read_tag() == "\xffAB\xc3"


def test_read_u8():
    cursor = voxloader.ByteCursor(bytes([0, 7, 255]))

    assert [cursor.read_u8() for _ in range(3)] == [0, 7, 255]
    assert cursor.remaining == 0


def test_read_u32_byteorder():
    data = bytes([0x11, 0x22, 0x33, 0x44])

    assert voxloader.ByteCursor(data).read_u32("little") == 0x44332211
    assert voxloader.ByteCursor(data).read_u32("big") == 0x11223344


def test_read_u32_unsigned():
    cursor = voxloader.ByteCursor(b"\xff\xff\xff\xff")

    assert cursor.read_u32("little") == 0xFFFFFFFF


def test_read_u32_invalid_byteorder():
    cursor = voxloader.ByteCursor(b"\x00\x00\x00\x00")

    with pytest.raises(ValueError, match="Invalid byteorder"):
        cursor.read_u32("middle")


def test_truncated_read():
    cursor = voxloader.ByteCursor(b"\x01\x02\x03")

    with pytest.raises(voxloader.TruncatedInput) as exc_info:
        cursor.read_u32("little")

    assert exc_info.value.offset == 0
    assert exc_info.value.wanted == 4
    assert exc_info.value.available == 3
    # a failed read does not move the cursor
    assert cursor.offset == 0


def test_truncated_skip():
    cursor = voxloader.ByteCursor(b"\x00" * 8)
    cursor.skip(6)

    with pytest.raises(voxloader.TruncatedInput):
        cursor.skip(3)

    assert cursor.offset == 6


def test_empty_buffer():
    cursor = voxloader.ByteCursor(b"")

    with pytest.raises(voxloader.TruncatedInput):
        cursor.read_u8()
