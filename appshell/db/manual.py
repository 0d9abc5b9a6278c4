#!/usr/bin/env python3
# appshell/db/manual.py
from __future__ import annotations
"""
Documentation (manual) database access.

The manual is a prebuilt SQLite file, by default ~/.appshell/manual.db.
It is opened read-only; the shell never writes to it.
"""

import os
import sqlite3
from pathlib import Path
from typing import Optional, Union


def connect_manual_db(db_file: Union[str, os.PathLike]) -> Optional[sqlite3.Connection]:
    """Open the manual database, or return None if the file does not exist."""
    path = Path(db_file)
    if not path.is_file():
        return None
    conn = sqlite3.connect(f"{path.resolve().as_uri()}?mode=ro", uri=True)
    conn.row_factory = sqlite3.Row
    return conn
