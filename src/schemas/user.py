"""User domain object."""

from dataclasses import dataclass


@dataclass
class User:
    """Represents a user account on the mock server.

    Attributes:
        id: Unique user identifier
        username: Login name
        name: Display name
        is_admin: Whether the user can see every project
    """

    id: int
    username: str
    name: str = ""
    is_admin: bool = False
