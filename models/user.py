"""
models/user.py
--------------
Domain model for application users.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    A registered user (guest and/or property owner).

    Attributes:
        name: Display name.
        email: Unique login email.
        password: Password hash, produced by the auth layer.
        id: Database primary key (None for new records).
    """
    name: str
    email: str
    password: str
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
