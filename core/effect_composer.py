"""
EffectComposer — runs the enabled effects for one render tick.

Every effect returns draw commands; nothing here touches pixels, the
renderer does that afterwards.

Design decisions:
  - Landmarks come from injected LandmarkSlots, never from globals.
  - Effects run in a fixed order so later effects paint over earlier ones:
    face mesh, hands, pixelation, data labels, wink, mouth text,
    wrist circle, fingertip drawing.
  - Control changes with side effects (re-tokenising the quote, clearing
    drawings) go through apply(), under the same lock as compose().
"""
from __future__ import annotations
import logging
import threading
from dataclasses import fields
from typing import Any, Dict, List, Optional

from core.data_stream import DataStreamFormatter
from core.landmark_slots import LandmarkSlots
from domain.enums import DataStreamOption, VideoFilter
from domain.models import ControlState, DrawCommand, EffectFrame, FrameSnapshot
from effects.data_labels import DataLabelsEffect
from effects.fingertip_drawing import FingertipDrawingEffect
from effects.landmark_overlay import FaceMeshOverlay, HandOverlay
from effects.mouth_text import MouthTextEffect, TextMeasure
from effects.pixelation import FacePixelationEffect
from effects.wink import WinkEffect
from effects.wrist_circle import WristCircleEffect
from utils.colors import hex_to_rgb

logger = logging.getLogger(__name__)

_CONTROL_FIELDS = {f.name for f in fields(ControlState)}


class EffectComposer:
    """
    The single entry point for effect rendering.

    Usage
    -----
    composer = EffectComposer(slots)
    commands = composer.compose(now_ms, width, height)

    Parameters
    ----------
    slots : LandmarkSlots
        Latest face / hands results, written by the detection poller.
    controls : ControlState, optional
        Initial control values; a default ControlState otherwise.
    formatter : DataStreamFormatter, optional
        Shared by the telemetry panel and the on-canvas labels.
    """

    def __init__(
        self,
        slots: LandmarkSlots,
        controls: Optional[ControlState] = None,
        formatter: Optional[DataStreamFormatter] = None,
    ) -> None:
        self._slots = slots
        self._controls = controls or ControlState()
        self._formatter = formatter or DataStreamFormatter()
        self._lock = threading.RLock()

        # ---- overlays ----------------------------------------------------
        self._face_mesh  = FaceMeshOverlay()
        self._hands      = HandOverlay()
        self._pixelation = FacePixelationEffect()
        self._labels     = DataLabelsEffect(self._formatter)

        # ---- triggers ----------------------------------------------------
        self._wink         = WinkEffect()
        self._mouth_text   = MouthTextEffect()
        self._wrist_circle = WristCircleEffect()
        self._drawing      = FingertipDrawingEffect()

        self._mouth_text.progression.word_display_ms = self._controls.word_display_ms
        if self._controls.mouth_text_trigger:
            self._mouth_text.enable(self._controls.quote)

    # ------------------------------------------------------------------
    def compose(self, now_ms: int, width: int, height: int) -> List[DrawCommand]:
        """
        Draw commands for one tick, in painting order.
        Effects whose toggle is off are skipped and their state is not advanced.
        """
        with self._lock:
            c = self._controls
            frame = EffectFrame(
                snapshot=self._slots.snapshot(),
                controls=c,
                now_ms=now_ms,
                width=width,
                height=height,
            )

            commands: List[DrawCommand] = []
            if c.show_face:
                commands.extend(self._face_mesh.compose(frame))
            if c.show_hands:
                commands.extend(self._hands.compose(frame))
            if c.show_pixelation:
                commands.extend(self._pixelation.compose(frame))
            if c.show_data_on_visualization:
                commands.extend(self._labels.compose(frame))
            if c.wink_trigger:
                commands.extend(self._wink.compose(frame))
            if c.mouth_text_trigger:
                commands.extend(self._mouth_text.compose(frame))
            if c.wrist_circle_trigger:
                commands.extend(self._wrist_circle.compose(frame))
            if c.show_fingertip_drawing:
                commands.extend(self._drawing.compose(frame))
            return commands

    def telemetry(self, snapshot: Optional[FrameSnapshot] = None) -> Dict[str, str]:
        """Data-stream panel contents for the enabled options."""
        with self._lock:
            options = set(self._controls.data_stream_options)
        return self._formatter.telemetry(snapshot or self._slots.snapshot(), options)

    # ------------------------------------------------------------------
    def apply(self, **changes: Any) -> None:
        """
        Update control values.

        Side effects:
          - enabling the mouth-text trigger (or changing the quote while it
            is on) re-tokenises the quote and restarts from the first word;
          - turning the mouth-text or wink trigger off resets that effect;
          - turning fingertip drawing off clears all drawings;
          - word_display_ms is forwarded to the progression clock.
        Raises ValueError for unknown controls or invalid values.
        """
        unknown = set(changes) - _CONTROL_FIELDS
        if unknown:
            raise ValueError(f"Unknown control(s): {', '.join(sorted(unknown))}")

        if "drawing_color" in changes:
            hex_to_rgb(changes["drawing_color"])
        if "video_filter" in changes:
            changes["video_filter"] = VideoFilter(changes["video_filter"])
        if "data_stream_options" in changes:
            changes["data_stream_options"] = {DataStreamOption(o) for o in changes["data_stream_options"]}

        with self._lock:
            c = self._controls
            was_mouth_text = c.mouth_text_trigger
            was_drawing = c.show_fingertip_drawing

            if "word_display_ms" in changes:
                self._mouth_text.progression.word_display_ms = changes["word_display_ms"]

            for name, value in changes.items():
                setattr(c, name, value)

            if c.mouth_text_trigger and (not was_mouth_text or "quote" in changes):
                self._mouth_text.enable(c.quote)
            elif was_mouth_text and not c.mouth_text_trigger:
                self._mouth_text.reset()
            if c.wink_trigger is False:
                self._wink.reset()
            if was_drawing and not c.show_fingertip_drawing:
                self._drawing.clear()

        logger.debug("[CONTROLS] %s", changes)

    def set_option(self, option: DataStreamOption, enabled: bool) -> None:
        with self._lock:
            options = set(self._controls.data_stream_options)
            if enabled:
                options.add(DataStreamOption(option))
            else:
                options.discard(DataStreamOption(option))
            self._controls.data_stream_options = options

    def clear_drawing(self) -> None:
        self._drawing.clear()

    def set_text_measure(self, measure: TextMeasure) -> None:
        with self._lock:
            self._mouth_text.set_measure(measure)

    # ------------------------------------------------------------------
    @property
    def controls(self) -> ControlState:
        return self._controls

    @property
    def slots(self) -> LandmarkSlots:
        return self._slots

    @property
    def drawing(self) -> FingertipDrawingEffect:
        return self._drawing

    @property
    def mouth_text(self) -> MouthTextEffect:
        return self._mouth_text

    @property
    def wink(self) -> WinkEffect:
        return self._wink
