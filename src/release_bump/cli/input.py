"""Commit records read by the CLI.

The CLI accepts a JSON array of objects::

    [
      {"id": "4f2c...", "shortId": "4f2c1a0", "message": "feat: add x",
       "date": "2024-05-01T10:00:00Z"},
      {"id": "9b7e...", "message": "fix: handle y"}
    ]

``shortId`` defaults to ``id`` and ``date`` is optional.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from release_bump.core.commits import Commit
from release_bump.exceptions import CommitInputError


class CommitRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(min_length=1)
    short_id: str | None = Field(default=None, alias="shortId")
    message: str
    date: datetime | None = None

    def to_commit(self) -> Commit:
        return Commit(
            id=self.id,
            short_id=self.short_id or self.id,
            message=self.message,
            date=self.date,
        )


_RECORDS = TypeAdapter(list[CommitRecord])


def load_commits(text: str) -> list[Commit]:
    """Parse a JSON array of commit records.

    Args:
        text: JSON document

    Returns:
        Commits in document order

    Raises:
        CommitInputError: If the document is not a valid commit list
    """
    try:
        records = _RECORDS.validate_json(text)
    except ValidationError as e:
        raise CommitInputError(f"Invalid commit input: {e}") from e
    return [record.to_commit() for record in records]
