"""Issue query descriptor schema."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator

from schemas.issue_state import IssueState


class IssueQuery(BaseModel):
    """Optional filter, ordering and paging parameters for issue listings.

    Every field defaults to None, meaning "no constraint". Fields accept
    their snake_case name or the camelCase alias used by API clients
    (``createdAfter``, ``orderBy``, ``perPage``, ...).

    ``state`` and ``assignee_id`` are kept as given so that values which
    cannot be interpreted are ignored by the pipeline rather than rejected
    here.
    """

    state: IssueState | str | None = None
    milestone: str | None = None
    labels: str | None = None

    created_after: datetime | None = Field(default=None, alias="createdAfter")
    created_before: datetime | None = Field(default=None, alias="createdBefore")
    updated_after: datetime | None = Field(default=None, alias="updatedAfter")
    updated_before: datetime | None = Field(default=None, alias="updatedBefore")

    scope: str | None = None
    author_id: int | None = Field(default=None, alias="authorId")
    assignee_id: int | str | None = Field(default=None, alias="assigneeId")
    search: str | None = None

    per_page: int | None = Field(default=None, alias="perPage")
    order_by: str | None = Field(default=None, alias="orderBy")
    sort: str | None = None

    model_config = {"populate_by_name": True, "extra": "forbid"}

    @field_validator(
        "created_after", "created_before", "updated_after", "updated_before"
    )
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
