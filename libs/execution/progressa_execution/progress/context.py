"""Engine capabilities the progress tracker depends on."""

from datetime import datetime
from typing import Any, Protocol


class ProgressContext(Protocol):
    """The slice of a workflow execution context a tracker writes through.

    Implementations must take ``now()`` from the engine's logical clock,
    never from the wall clock, and ``set_custom_status`` must overwrite the
    single per-execution custom status slot (``None`` clears it).
    """

    def now(self) -> datetime: ...

    def set_custom_status(self, status: Any | None) -> None: ...
