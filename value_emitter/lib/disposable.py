"""Shared disposable interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Disposable(Protocol):
    """Anything that holds a resource released by calling dispose()."""

    def dispose(self) -> None: ...
