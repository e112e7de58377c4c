from __future__ import annotations

import logging
from typing import List

logger = logging.getLogger(__name__)


class Transcript:
    """
    Everything the talk "said", in order.

    Lines are kept in memory (for tests) and also go to logging.
    """

    def __init__(self) -> None:
        self.lines: List[str] = []

    def log(self, message: str) -> None:
        self.lines.append(message)
        logger.info(message)

    def section(self, title: str) -> List[str]:
        return [line for line in self.lines if line.startswith(f"[{title}]")]
