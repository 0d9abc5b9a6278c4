#!/usr/bin/env python3
# appshell/presenter/__init__.py
from __future__ import annotations

from .manager import Presenter, PresenterManager

__all__ = ["Presenter", "PresenterManager"]
