"""
drag.py

Pointer interaction: picking links up, holding them at the pointer and
letting them go.
"""

import logging
from typing import Iterable, List, Optional

import numpy as np

from .link import PendulumLink


class DragController:
    """
    Overrides numeric integration of held links with the pointer direction.

    The controller remembers the last pointer it was given, so a host that
    only reports the pointer on press can still step a held link.
    """

    def __init__(self):
        self.pointer: Optional[np.ndarray] = None
        self._log = logging.getLogger(__name__)

    def update_pointer(self, pointer: Optional[np.ndarray]) -> None:
        if pointer is not None:
            self.pointer = np.asarray(pointer, dtype=float)

    def press(self, links: Iterable[PendulumLink], pointer: np.ndarray) -> List[PendulumLink]:
        """
        Starts dragging every link whose bob is under the pointer.

        Returns:
            The links that were picked up (possibly both, possibly none).
        """
        self.update_pointer(pointer)
        picked = [link for link in links if link.contains(self.pointer)]
        for link in picked:
            link.is_dragging = True
            self._log.debug("Drag started on %s link", link.role.value)
        return picked

    def release(self, links: Iterable[PendulumLink]) -> None:
        for link in links:
            if link.is_dragging:
                self._log.debug("Drag released on %s link", link.role.value)
            link.is_dragging = False

    def apply(
        self,
        link: PendulumLink,
        parent: np.ndarray,
        counterpart: Optional[PendulumLink] = None,
    ) -> None:
        """
        Points `link` at the pointer from `parent` and kills its motion.

        Args:
            link: The held link.
            parent: Pivot for the anchor, the anchor's position for the driven link.
            counterpart: Stopped as well. Only passed for the driven link.
        """
        if self.pointer is None:
            raise ValueError("pointer position is required while dragging")

        dx, dy = self.pointer - np.asarray(parent, dtype=float)
        link.angle = -(np.arctan2(dy, dx) - np.pi / 2)
        link.stop()

        if counterpart is not None:
            counterpart.stop()
