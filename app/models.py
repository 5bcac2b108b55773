"""Domain model for employee records."""
from dataclasses import asdict, dataclass
from typing import Optional


@dataclass
class Employee:
    """A named individual with an email and a role.

    ``id`` is assigned by the record store on first save and is ``None``
    before that.
    """

    name: str
    email: str
    role: str
    id: Optional[int] = None

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data) -> "Employee":
        """Build an Employee from a dict or ``sqlite3.Row``-like mapping."""
        return cls(
            id=data["id"],
            name=data["name"],
            email=data["email"],
            role=data["role"],
        )
