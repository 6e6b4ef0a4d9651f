"""In-memory comment repository for testing."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from modcomment.domain.model.comment import Comment
from modcomment.domain.repository.comment import CommentRepository


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Keeps soft-deleted comments around so tests can inspect them.
    """

    def __init__(self) -> None:
        self._comments: dict[str, Comment] = {}
        self._last_tick: datetime | None = None

    def _now(self) -> datetime:
        """Strictly increasing clock, so creation order is never a tie."""
        now = datetime.now(timezone.utc)
        if self._last_tick is not None and now <= self._last_tick:
            now = self._last_tick + timedelta(microseconds=1)
        self._last_tick = now
        return now

    async def search_by_parent(self, parent_id: str) -> list[Comment]:
        """Find all live comments of a mod."""
        comments = [
            c
            for c in self._comments.values()
            if c.parent_id == parent_id and not c.is_deleted
        ]

        # Same order as the SQL repository
        comments.sort(key=lambda c: (c.created_at, c.id))

        return comments

    async def upsert(self, comment: Comment) -> Comment:
        """Insert a new comment or overwrite a live one."""
        now = self._now()

        if comment.is_new:
            saved = comment.model_copy(
                update={
                    "id": str(uuid4()),
                    "created_at": now,
                    "updated_at": now,
                    "deleted_at": None,
                }
            )
            self._comments[saved.id] = saved
            return saved

        existing = self._comments.get(comment.id)
        if existing is None or existing.is_deleted:
            return comment

        # Since comments are immutable, store an updated copy
        saved = existing.model_copy(
            update={
                "parent_id": comment.parent_id,
                "author_id": comment.author_id,
                "text": comment.text,
                "updated_at": now,
            }
        )
        self._comments[saved.id] = saved
        return saved

    async def soft_delete(self, comment_id: str) -> None:
        """Set deleted_at on a live comment."""
        comment = self._comments.get(comment_id)
        if comment and not comment.is_deleted:
            self._comments[comment_id] = comment.model_copy(
                update={"deleted_at": self._now()}
            )

    async def ensure_schema(self) -> None:
        """Nothing to provision."""
        pass

    def get_raw(self, comment_id: str) -> Comment | None:
        """Return a stored comment including soft-deleted ones."""
        return self._comments.get(comment_id)
