from __future__ import annotations

"""Progress reporting for long comparison runs.

`run_comparison` reports one step per completed try. Scripts and notebooks
pass any object with these three methods; the package never prints.
"""

from typing import Optional, Protocol


class ProgressCallback(Protocol):
    def init(self, *, total: int, label: Optional[str] = None) -> None:
        """Called once before the first try with the number of tries requested."""
        ...

    def update(self, *, current: int, label: Optional[str] = None) -> None:
        """Called after each completed try; `current` counts tries done so far."""
        ...

    def finalize(self, *, label: Optional[str] = None) -> None:
        """Called exactly once, also when a try raised."""
        ...
