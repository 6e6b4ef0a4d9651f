"""Unit tests for domain error translation."""

from sqlalchemy.exc import OperationalError

from modcomment.domain.error import NotFoundError, StorageError, ValidationError
from modcomment.interface.error import HTTP_STATUS, StatusCode, to_error_response


class TestToErrorResponse:
    """Tests for to_error_response."""

    def test_validation_error_is_invalid_argument(self):
        # Act
        body = to_error_response(ValidationError("text", "max"))

        # Assert
        assert body.code == StatusCode.INVALID_ARGUMENT
        assert body.field == "text"
        assert body.rule == "max"
        assert HTTP_STATUS[body.code] == 400

    def test_validation_field_uses_wire_name(self):
        body = to_error_response(ValidationError("parent_id", "uuid4"))

        assert body.field == "parentId"
        assert body.rule == "uuid4"

    def test_not_found_error(self):
        body = to_error_response(NotFoundError("Comment", "abc"))

        assert body.code == StatusCode.NOT_FOUND
        assert body.message == "Comment not found: abc"
        assert HTTP_STATUS[body.code] == 404

    def test_storage_error_hides_driver_message(self):
        # Arrange
        try:
            try:
                raise OperationalError("SELECT 1", {}, Exception("password=hunter2"))
            except OperationalError as e:
                raise StorageError("upsert", str(e)) from e
        except StorageError as e:
            error = e

        # Act
        body = to_error_response(error)

        # Assert
        assert body.code == StatusCode.INTERNAL
        assert body.message == "storage failure during upsert"
        assert "hunter2" not in body.message
        assert body.field is None
        assert HTTP_STATUS[body.code] == 500

    def test_unexpected_error_is_internal(self):
        body = to_error_response(RuntimeError("boom"))

        assert body.code == StatusCode.INTERNAL
        assert body.message == "internal error"
