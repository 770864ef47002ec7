"""Milestone domain object."""

from dataclasses import dataclass


@dataclass
class Milestone:
    """Represents a project milestone.

    Attributes:
        id: Milestone identifier, unique within the server
        title: Milestone title, matched exactly by issue queries
        description: Free-form description
        state: Milestone state ("active" or "closed")
    """

    id: int
    title: str
    description: str = ""
    state: str = "active"
