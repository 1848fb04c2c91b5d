"""Dependency container for temporal activities."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from progressa_common.config import Settings


@dataclass
class ActivityDependencies:
    """Container for basic dependencies needed by temporal activities.

    Activities are created by factories closing over this container so the
    worker decides which settings they run with.
    """

    settings: "Settings"
