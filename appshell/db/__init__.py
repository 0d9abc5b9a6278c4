#!/usr/bin/env python3
# appshell/db/__init__.py
from __future__ import annotations

"""
Package for database access.

Provides:
- Read-only connection to the documentation database (`connect_manual_db`).
"""


from .manual import connect_manual_db

__all__ = ["connect_manual_db"]
