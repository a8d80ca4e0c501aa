"""
User domain model.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class User:
    """
    User record kept by the user stores.

    Records are identified by `id`; `None` means the record has not been saved yet.
    Two records are equal only when both have the same non-null id. An unsaved
    record is equal only to itself.
    """
    id: Optional[int] = None
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)  # hash hasła, nigdy w repr
    is_admin: bool = False

    def __eq__(self, other):
        if not isinstance(other, User):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self):
        if self.id is None:
            return object.__hash__(self)
        return hash(self.id)
