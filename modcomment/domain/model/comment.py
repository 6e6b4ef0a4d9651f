"""Comment entity.

Comments hang off a mod (the parent entity) and are soft deleted.
Field rules are not enforced on construction: a request is first mapped to
a ``Comment`` and then checked with ``validate_comment``.
"""

from datetime import datetime
from typing import Optional

from modcomment.domain.model.common import DomainModel


class Comment(DomainModel):
    """Comment entity.

    - id: empty for a new comment, the store assigns it on insert
    - parent_id: the mod the comment belongs to
    - author_id: the user who wrote it
    - created_at/updated_at/deleted_at: maintained by the repository
    """

    id: str = ""
    parent_id: str
    author_id: str
    text: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @property
    def is_new(self) -> bool:
        """Whether the comment has not been stored yet."""
        return self.id == ""

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
