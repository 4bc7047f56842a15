"""
ESC/POS command builders for thermal and impact receipt printers.

This package contains the low-level byte sequences of the ESC/POS command
language. Builders are pure: they take already validated, typed arguments and
return ``bytes``. They raise plain ``ValueError`` for out-of-range numeric
parameters; the framers in escpos_encoder.barcodes / escpos_encoder.imaging
translate user input into these arguments and raise the package exceptions.

Module Structure:
    commands/
    ├── __init__.py             # This file (public API exports)
    ├── text_formatting.py      # Bold, double-strike, italic, underline
    ├── sizing.py               # Font A/B, character size
    ├── positioning.py          # LF, CR, justification
    ├── charset.py              # Character table and two-byte mode selection
    ├── barcode.py              # 1D barcodes (GS k function B)
    ├── qr.py                   # QR code (GS ( k)
    ├── graphics.py             # Raster bit image (GS v 0)
    └── hardware.py             # Initialize, cut

Usage:
    >>> from escpos_encoder.escpos.commands import ESC_BOLD_ON, ESC_BOLD_OFF
    >>> command = ESC_BOLD_ON + b"Total" + ESC_BOLD_OFF
"""

from escpos_encoder.escpos.commands.barcode import (
    BARCODE_TYPE_CODES,
    MAX_BARCODE_DATA,
    print_barcode,
    set_barcode_height,
    set_barcode_width,
)
from escpos_encoder.escpos.commands.charset import (
    FS_KANJI_OFF,
    FS_KANJI_ON,
    select_character_mode,
    select_character_table,
)
from escpos_encoder.escpos.commands.graphics import (
    MAX_RASTER_DIMENSION,
    print_raster_image,
)
from escpos_encoder.escpos.commands.hardware import (
    ESC_INIT_PRINTER,
    GS_CUT_FULL,
    GS_CUT_PARTIAL,
    cut_paper,
)
from escpos_encoder.escpos.commands.positioning import (
    CR,
    LF,
    NEWLINE,
    select_justification,
)
from escpos_encoder.escpos.commands.qr import (
    QR_MAX_DATA,
    print_qr_symbol,
    select_qr_model,
    set_qr_error_level,
    set_qr_module_size,
    store_qr_data,
)
from escpos_encoder.escpos.commands.sizing import (
    ESC_FONT_A,
    ESC_FONT_B,
    select_character_size,
    select_font,
    text_size_command,
)
from escpos_encoder.escpos.commands.text_formatting import (
    ESC_BOLD_OFF,
    ESC_BOLD_ON,
    ESC_DOUBLE_STRIKE_OFF,
    ESC_DOUBLE_STRIKE_ON,
    ESC_ITALIC_OFF,
    ESC_ITALIC_ON,
    ESC_UNDERLINE_DOUBLE,
    ESC_UNDERLINE_OFF,
    ESC_UNDERLINE_ON,
    set_double_strike,
    set_emphasized,
    set_italic,
    set_underline,
)

__all__ = [
    # Barcode
    "BARCODE_TYPE_CODES",
    "MAX_BARCODE_DATA",
    "print_barcode",
    "set_barcode_height",
    "set_barcode_width",
    # Character set
    "FS_KANJI_ON",
    "FS_KANJI_OFF",
    "select_character_table",
    "select_character_mode",
    # Graphics
    "MAX_RASTER_DIMENSION",
    "print_raster_image",
    # Hardware
    "ESC_INIT_PRINTER",
    "GS_CUT_FULL",
    "GS_CUT_PARTIAL",
    "cut_paper",
    # Positioning
    "CR",
    "LF",
    "NEWLINE",
    "select_justification",
    # QR
    "QR_MAX_DATA",
    "print_qr_symbol",
    "select_qr_model",
    "set_qr_error_level",
    "set_qr_module_size",
    "store_qr_data",
    # Sizing
    "ESC_FONT_A",
    "ESC_FONT_B",
    "select_character_size",
    "select_font",
    "text_size_command",
    # Text formatting
    "ESC_BOLD_OFF",
    "ESC_BOLD_ON",
    "ESC_DOUBLE_STRIKE_OFF",
    "ESC_DOUBLE_STRIKE_ON",
    "ESC_ITALIC_OFF",
    "ESC_ITALIC_ON",
    "ESC_UNDERLINE_DOUBLE",
    "ESC_UNDERLINE_OFF",
    "ESC_UNDERLINE_ON",
    "set_double_strike",
    "set_emphasized",
    "set_italic",
    "set_underline",
]
