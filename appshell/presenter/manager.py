#!/usr/bin/env python3
# appshell/presenter/manager.py
from __future__ import annotations

"""
Presenter registry.

Presenters are consulted newest first, so a presenter added from a config
script overrides the built-in behavior for the values it accepts.
"""

from typing import Any, Iterator, Optional, Protocol

from appshell.config.errors import InvalidArgumentError


class Presenter(Protocol):
    def can_present(self, value: Any) -> bool:  # pragma: no cover - signature only
        ...

    def present(self, value: Any) -> str:  # pragma: no cover - signature only
        ...


class PresenterManager:
    def __init__(self) -> None:
        self._presenters: list[Presenter] = []

    def add_presenter(self, presenter: Presenter) -> None:
        if not (hasattr(presenter, "can_present") and hasattr(presenter, "present")):
            raise InvalidArgumentError(f"Not a presenter: {presenter!r}")
        if presenter in self._presenters:
            self._presenters.remove(presenter)
        self._presenters.insert(0, presenter)

    def get_presenter(self, value: Any) -> Optional[Presenter]:
        for presenter in self._presenters:
            if presenter.can_present(value):
                return presenter
        return None

    def present(self, value: Any) -> str:
        presenter = self.get_presenter(value)
        return presenter.present(value) if presenter else repr(value)

    def __iter__(self) -> Iterator[Presenter]:
        return iter(self._presenters)

    def __len__(self) -> int:
        return len(self._presenters)
