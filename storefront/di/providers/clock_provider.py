from typing import TYPE_CHECKING
from ...utils.clock import Clock, SystemClock

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ClockProvider:
    """Clock provider - the wall clock unless one was injected"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        if not container.has(Clock):
            container.register_singleton(Clock, SystemClock())
