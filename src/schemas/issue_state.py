"""Issue state enumeration."""

from enum import Enum


class IssueState(str, Enum):
    """Lifecycle state of an issue. Any state may follow any other."""

    OPENED = "opened"
    CLOSED = "closed"
    REOPENED = "reopened"
    LOCKED = "locked"

    @classmethod
    def parse(cls, value) -> "IssueState | None":
        """Return the state named by value, or None if it names no state.

        Matching is exact and case-sensitive on the state's value.

        Examples:
            >>> IssueState.parse("closed")
            <IssueState.CLOSED: 'closed'>
            >>> IssueState.parse("Closed") is None
            True
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return None
        try:
            return cls(str(value))
        except ValueError:
            return None
