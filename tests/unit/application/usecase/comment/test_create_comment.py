"""Unit tests for CreateCommentUseCase."""

import pytest

from modcomment.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from modcomment.domain.error import StorageError, ValidationError
from modcomment.domain.model import Comment, is_uuid4
from modcomment.domain.repository import CommentRepository
from tests.factories import MOD_ID, USER_ID
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class FailingCommentRepository(CommentRepository):
    """Repository whose writes always fail."""

    def __init__(self) -> None:
        self.calls = 0

    async def search_by_parent(self, parent_id: str) -> list[Comment]:
        return []

    async def upsert(self, comment: Comment) -> Comment:
        self.calls += 1
        raise StorageError("upsert", "connection refused")

    async def soft_delete(self, comment_id: str) -> None:
        pass

    async def ensure_schema(self) -> None:
        pass


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_returns_generated_id(self, unit_env):
        """A valid comment is stored and gets a fresh UUID v4."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)

        request = CreateCommentRequest(
            parent_id=MOD_ID,
            author_id=USER_ID,
            text="Good job!",
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert is_uuid4(response.id)

        stored = await comment_repo.search_by_parent(MOD_ID)
        assert [c.id for c in stored] == [response.id]
        assert stored[0].text == "Good job!"
        assert stored[0].author_id == USER_ID

    @pytest.mark.asyncio
    async def test_each_create_gets_a_new_id(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        request = CreateCommentRequest(parent_id=MOD_ID, author_id=USER_ID, text="hi")

        # Act
        first = await use_case.execute(request)
        second = await use_case.execute(request)

        # Assert
        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_malformed_parent_id_is_rejected(self, unit_env):
        """parent_id must be a UUID v4."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)

        request = CreateCommentRequest(
            parent_id="not-a-uuid",
            author_id=USER_ID,
            text="hi",
        )

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(request)

        assert exc_info.value.field == "parent_id"
        assert exc_info.value.rule == "uuid4"
        assert await comment_repo.search_by_parent(MOD_ID) == []

    @pytest.mark.asyncio
    async def test_missing_author_is_rejected(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        request = CreateCommentRequest(parent_id=MOD_ID, text="hi")

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(request)

        assert (exc_info.value.field, exc_info.value.rule) == ("author_id", "required")

    @pytest.mark.asyncio
    async def test_text_over_250_characters_is_rejected(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        request = CreateCommentRequest(
            parent_id=MOD_ID, author_id=USER_ID, text="x" * 251
        )

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(request)

        assert (exc_info.value.field, exc_info.value.rule) == ("text", "max")

    @pytest.mark.asyncio
    async def test_storage_failure_propagates(self):
        # Arrange
        repo = FailingCommentRepository()
        use_case = CreateCommentUseCase(comment_repository=repo)
        request = CreateCommentRequest(parent_id=MOD_ID, author_id=USER_ID, text="hi")

        # Act & Assert
        with pytest.raises(StorageError, match="upsert failed"):
            await use_case.execute(request)

        assert repo.calls == 1

    @pytest.mark.asyncio
    async def test_validation_failure_never_reaches_storage(self):
        # Arrange
        repo = FailingCommentRepository()
        use_case = CreateCommentUseCase(comment_repository=repo)
        request = CreateCommentRequest(parent_id=MOD_ID, author_id=USER_ID, text="")

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(request)

        assert repo.calls == 0
