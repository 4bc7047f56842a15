"""
Unit tests for the raw ESC/POS command builders.

Every expected value is written out as hex so it can be checked against the
command reference directly.
"""

import pytest

from escpos_encoder.escpos.commands import (
    CR,
    ESC_BOLD_OFF,
    ESC_BOLD_ON,
    ESC_DOUBLE_STRIKE_OFF,
    ESC_DOUBLE_STRIKE_ON,
    ESC_FONT_A,
    ESC_FONT_B,
    ESC_INIT_PRINTER,
    ESC_ITALIC_OFF,
    ESC_ITALIC_ON,
    ESC_UNDERLINE_DOUBLE,
    ESC_UNDERLINE_OFF,
    ESC_UNDERLINE_ON,
    FS_KANJI_OFF,
    FS_KANJI_ON,
    GS_CUT_FULL,
    GS_CUT_PARTIAL,
    LF,
    NEWLINE,
    cut_paper,
    print_barcode,
    print_qr_symbol,
    print_raster_image,
    select_character_mode,
    select_character_size,
    select_character_table,
    select_font,
    select_justification,
    select_qr_model,
    set_barcode_height,
    set_barcode_width,
    set_qr_error_level,
    set_qr_module_size,
    set_underline,
    store_qr_data,
    text_size_command,
)
from escpos_encoder.model.enums import (
    Alignment,
    CutType,
    QRErrorLevel,
    QRModel,
    Symbology,
    TextSize,
)


class TestTextFormatting:
    def test_constants(self) -> None:
        assert ESC_BOLD_ON == bytes.fromhex("1b4501")
        assert ESC_BOLD_OFF == bytes.fromhex("1b4500")
        assert ESC_DOUBLE_STRIKE_ON == bytes.fromhex("1b4701")
        assert ESC_DOUBLE_STRIKE_OFF == bytes.fromhex("1b4700")
        assert ESC_ITALIC_ON == bytes.fromhex("1b3401")
        assert ESC_ITALIC_OFF == bytes.fromhex("1b3400")
        assert ESC_UNDERLINE_OFF == bytes.fromhex("1b2d00")
        assert ESC_UNDERLINE_ON == bytes.fromhex("1b2d01")
        assert ESC_UNDERLINE_DOUBLE == bytes.fromhex("1b2d02")

    def test_underline_rejects_thickness(self) -> None:
        with pytest.raises(ValueError, match="0, 1 or 2"):
            set_underline(3)


class TestSizing:
    @pytest.mark.parametrize(
        "size,expected",
        [
            (TextSize.SMALL, "1b4d01" "1d2100"),
            (TextSize.NORMAL, "1b4d00" "1d2100"),
            (TextSize.WIDE, "1b4d00" "1d2110"),
            (TextSize.TALL, "1b4d00" "1d2101"),
            (TextSize.DOUBLE, "1b4d00" "1d2111"),
        ],
    )
    def test_text_size_command(self, size: TextSize, expected: str) -> None:
        assert text_size_command(size) == bytes.fromhex(expected)

    def test_fonts(self) -> None:
        assert ESC_FONT_A == b"\x1bM\x00"
        assert ESC_FONT_B == b"\x1bM\x01"
        with pytest.raises(ValueError):
            select_font(2)

    def test_character_size_bits(self) -> None:
        assert select_character_size(8, 8) == b"\x1d!\x77"
        assert select_character_size(3, 1) == b"\x1d!\x20"

    @pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (9, 1), (1, 9)])
    def test_character_size_range(self, width: int, height: int) -> None:
        with pytest.raises(ValueError):
            select_character_size(width, height)


class TestPositioningAndHardware:
    def test_newline(self) -> None:
        assert LF == b"\x0a"
        assert CR == b"\x0d"
        assert NEWLINE == b"\x0a\x0d"

    @pytest.mark.parametrize(
        "align,n", [(Alignment.LEFT, 0), (Alignment.CENTER, 1), (Alignment.RIGHT, 2)]
    )
    def test_justification(self, align: Alignment, n: int) -> None:
        assert select_justification(align) == b"\x1ba" + bytes([n])

    def test_initialize(self) -> None:
        assert ESC_INIT_PRINTER == bytes.fromhex("1b40")

    def test_cut(self) -> None:
        assert cut_paper(CutType.FULL) == GS_CUT_FULL == bytes.fromhex("1d5600")
        assert cut_paper(CutType.PARTIAL) == GS_CUT_PARTIAL == bytes.fromhex("1d5601")

    def test_character_table(self) -> None:
        assert select_character_table(0x11) == bytes.fromhex("1b7411")
        assert select_character_table(0xFF) == bytes.fromhex("1b74ff")
        with pytest.raises(ValueError):
            select_character_table(256)

    def test_two_byte_character_mode(self) -> None:
        assert FS_KANJI_ON == bytes.fromhex("1c26")
        assert FS_KANJI_OFF == bytes.fromhex("1c2e")
        assert select_character_mode(True) == FS_KANJI_ON
        assert select_character_mode(False) == FS_KANJI_OFF


class TestBarcodeCommands:
    def test_height_and_width(self) -> None:
        assert set_barcode_height(60) == bytes.fromhex("1d683c")
        assert set_barcode_width(3) == bytes.fromhex("1d7703")

    @pytest.mark.parametrize("height", [0, 256])
    def test_height_range(self, height: int) -> None:
        with pytest.raises(ValueError):
            set_barcode_height(height)

    @pytest.mark.parametrize("module", [1, 7])
    def test_width_range(self, module: int) -> None:
        with pytest.raises(ValueError):
            set_barcode_width(module)

    @pytest.mark.parametrize(
        "symbology,m",
        [
            (Symbology.UPCA, 65),
            (Symbology.UPCE, 66),
            (Symbology.EAN13, 67),
            (Symbology.EAN8, 68),
            (Symbology.CODE39, 69),
            (Symbology.CODA39, 69),
            (Symbology.ITF, 70),
            (Symbology.CODABAR, 71),
            (Symbology.CODE93, 72),
            (Symbology.CODE128, 73),
            (Symbology.GS1_128, 74),
            (Symbology.GS1_DATABAR_OMNI, 75),
            (Symbology.GS1_DATABAR_TRUNCATED, 76),
            (Symbology.GS1_DATABAR_LIMITED, 77),
            (Symbology.GS1_DATABAR_EXPANDED, 78),
            (Symbology.CODE128_AUTO, 79),
        ],
    )
    def test_type_codes(self, symbology: Symbology, m: int) -> None:
        assert print_barcode(symbology, b"12") == bytes([0x1D, 0x6B, m, 2]) + b"12"

    def test_data_limits(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            print_barcode(Symbology.CODE93, b"")
        with pytest.raises(ValueError, match="exceeds"):
            print_barcode(Symbology.CODE93, b"A" * 256)
        assert len(print_barcode(Symbology.CODE93, b"A" * 255)) == 4 + 255


class TestQRCommands:
    def test_model(self) -> None:
        assert select_qr_model(QRModel.MODEL_1) == bytes.fromhex("1d286b0400314131" "00")
        assert select_qr_model(QRModel.MODEL_2) == bytes.fromhex("1d286b0400314132" "00")

    def test_module_size(self) -> None:
        assert set_qr_module_size(6) == bytes.fromhex("1d286b0300314306")
        for size in (0, 9):
            with pytest.raises(ValueError):
                set_qr_module_size(size)

    @pytest.mark.parametrize(
        "level,n",
        [(QRErrorLevel.L, 0x30), (QRErrorLevel.M, 0x31), (QRErrorLevel.Q, 0x32), (QRErrorLevel.H, 0x33)],
    )
    def test_error_level(self, level: QRErrorLevel, n: int) -> None:
        assert set_qr_error_level(level) == bytes.fromhex("1d286b03003145") + bytes([n])

    def test_store_small(self) -> None:
        assert store_qr_data(b"hi") == bytes.fromhex("1d286b0500315030") + b"hi"

    def test_store_length_prefix_for_1000_bytes(self) -> None:
        payload = bytes(range(256)) * 3 + b"x" * 232
        command = store_qr_data(payload)
        assert command[:8] == bytes.fromhex("1d286beb03315030")
        assert command[8:] == payload
        p_l, p_h = command[3], command[4]
        assert p_l + 256 * p_h == len(payload) + 3

    def test_store_limits(self) -> None:
        with pytest.raises(ValueError):
            store_qr_data(b"")
        with pytest.raises(ValueError):
            store_qr_data(b"x" * 7090)
        assert len(store_qr_data(b"x" * 7089)) == 8 + 7089

    def test_print(self) -> None:
        assert print_qr_symbol() == bytes.fromhex("1d286b0300315130")


class TestRasterCommand:
    def test_header(self) -> None:
        data = b"\xff\x00" * 3
        assert print_raster_image(data, 2, 3) == bytes.fromhex("1d763000" "0200" "0300") + data

    def test_sixteen_bit_dimensions(self) -> None:
        data = bytes(300 * 2)
        command = print_raster_image(data, 300, 2)
        assert command[4:8] == bytes([0x2C, 0x01, 0x02, 0x00])

    def test_data_size_must_match(self) -> None:
        with pytest.raises(ValueError, match="expected 4"):
            print_raster_image(b"\x00", 2, 2)

    @pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (0x10000, 1), (1, 0x10000)])
    def test_dimension_range(self, width: int, height: int) -> None:
        with pytest.raises(ValueError):
            print_raster_image(b"", width, height)
