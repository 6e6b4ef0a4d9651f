"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List

from modcomment.domain.model.comment import Comment


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.

    Soft-deleted comments are invisible to every operation, and timestamps
    are set by the repository, never by callers.
    """

    @abstractmethod
    async def search_by_parent(self, parent_id: str) -> List[Comment]:
        """Find all live comments of a mod.

        Args:
            parent_id: The mod's UUID

        Returns:
            Comments ordered by creation time, empty if none match

        Raises:
            StorageError: If the query fails
        """
        pass

    @abstractmethod
    async def upsert(self, comment: Comment) -> Comment:
        """Insert a new comment or overwrite an existing one.

        A comment with an empty id is inserted and receives a generated id.
        Otherwise the live row with that id gets the comment's parent_id,
        author_id and text, and a fresh updated_at. A missing row is not an
        error; the comment is returned unchanged.

        Args:
            comment: The comment to save

        Returns:
            The saved comment

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    async def soft_delete(self, comment_id: str) -> None:
        """Mark a live comment as deleted.

        Deleting a missing or already deleted comment is a no-op.

        Args:
            comment_id: The comment's UUID

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    async def ensure_schema(self) -> None:
        """Create the backing storage if it does not exist yet.

        Called once at startup, never while serving requests.

        Raises:
            StorageError: If provisioning fails
        """
        pass
