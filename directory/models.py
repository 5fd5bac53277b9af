"""
directory/models.py -- Domain dataclass for the employee directory.

Pure data container with zero logic. Identifier assignment and mutation live
in directory/store.py.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Employee:
    """A single employee record.

    name, position and email are free-form strings; only presence is checked
    (at the API layer). id is None before EmployeeStore assigns one.
    """

    name: str
    position: str
    email: str
    id: Optional[int] = None
