"""
Printer control commands: initialization and paper cutting.

Reference: ESC/POS Application Programming Guide, ESC @ and GS V
"""

from typing import Final

from escpos_encoder.model.enums import CutType

__all__ = [
    "ESC_INIT_PRINTER",
    "GS_CUT_FULL",
    "GS_CUT_PARTIAL",
    "cut_paper",
]

ESC_INIT_PRINTER: Final[bytes] = b"\x1b@"
"""
Initialize printer.

Command: ESC @
Hex: 1B 40
Effect: Clears the print buffer and resets every mode (formatting,
        justification, character table) to the power-on defaults.
"""

GS_CUT_FULL: Final[bytes] = b"\x1dV\x00"
"""
Full cut.

Command: GS V 0
Hex: 1D 56 00
"""

GS_CUT_PARTIAL: Final[bytes] = b"\x1dV\x01"
"""
Partial cut (one point left uncut).

Command: GS V 1
Hex: 1D 56 01
"""


def cut_paper(cut: CutType) -> bytes:
    """Return the cut command for the requested cut type."""
    return GS_CUT_PARTIAL if cut is CutType.PARTIAL else GS_CUT_FULL
