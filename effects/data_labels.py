"""
DataLabelsEffect — telemetry values written next to their landmarks.
"""
from __future__ import annotations
from typing import List, Optional

from core.data_stream import DataStreamFormatter
from domain.models import DrawCommand, EffectFrame
from effects.base import Effect


class DataLabelsEffect(Effect):
    NAME = "DATA_LABELS"

    def __init__(self, formatter: Optional[DataStreamFormatter] = None) -> None:
        self._formatter = formatter or DataStreamFormatter()

    def compose(self, frame: EffectFrame) -> List[DrawCommand]:
        return list(self._formatter.labels(frame.snapshot, frame.controls.data_stream_options))
