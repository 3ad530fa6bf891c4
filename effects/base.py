"""
Abstract base class for all visual effects.

Every effect must:
  - implement compose(frame) → list[DrawCommand]
  - override reset() if it keeps state between ticks
  - declare its NAME class attribute

EffectComposer only decides which effects run; what to draw is the
effect's business.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List

from domain.models import DrawCommand, EffectFrame


class Effect(ABC):
    """Base class for all effects."""

    # Override in subclasses for logging / registration
    NAME: str = "UNNAMED_EFFECT"

    @abstractmethod
    def compose(self, frame: EffectFrame) -> List[DrawCommand]:
        """
        Analyse one tick and return the draw commands for it.

        Parameters
        ----------
        frame : EffectFrame
            Snapshot, controls, timestamp and canvas size.

        Returns
        -------
        list[DrawCommand]
            Empty list when there is nothing to draw this tick.
        """

    def reset(self) -> None:
        """
        Reset internal state. Stateless effects keep this no-op.
        EffectComposer calls it for the wink and mouth-text effects when
        their trigger is switched off.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.NAME!r}>"
