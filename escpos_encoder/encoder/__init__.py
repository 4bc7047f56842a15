"""Encoder facade, command buffer and print state tracking."""

from escpos_encoder.encoder.buffer import CommandBuffer
from escpos_encoder.encoder.escpos_encoder import EscPosEncoder
from escpos_encoder.encoder.state_tracker import PrintStateTracker

__all__ = ["CommandBuffer", "EscPosEncoder", "PrintStateTracker"]
