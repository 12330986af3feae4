"""
Unit tests for post use cases (List, Create, Get, Update, Delete).
"""
from unittest.mock import AsyncMock

import pytest
from app.application.dto.post_dto import PostCreateRequest, PostUpdateRequest
from app.application.use_cases.post.create_post import CreatePostUseCase
from app.application.use_cases.post.delete_post import DeletePostUseCase
from app.application.use_cases.post.get_post import GetPostUseCase
from app.application.use_cases.post.list_posts import ListPostsUseCase
from app.application.use_cases.post.update_post import UpdatePostUseCase
from app.core.exceptions import NotFoundError, ValidationError
from app.domain.constants import PostFields
from app.domain.models.post import Author
from tests.factories import make_post

POST_ID = "65a000000000000000000001"


@pytest.fixture
def mock_post_repo():
    """Mock PostRepository with async methods."""
    return AsyncMock()


def _create_request(**overrides) -> PostCreateRequest:
    payload = {
        "title": "10 things",
        "content": "Lorem ipsum",
        "author": {"firstName": "Billy", "lastName": "Bob"},
    }
    payload.update(overrides)
    return PostCreateRequest.model_validate(payload)


class TestListPostsUseCase:
    """Tests for ListPostsUseCase"""

    @pytest.mark.asyncio
    async def test_list_empty(self, mock_post_repo):
        mock_post_repo.find_all.return_value = []
        result = await ListPostsUseCase(mock_post_repo).execute()
        assert result == []

    @pytest.mark.asyncio
    async def test_list_returns_shaped_posts(self, mock_post_repo):
        mock_post_repo.find_all.return_value = [
            make_post(post_id="65a000000000000000000001", title="First"),
            make_post(post_id="65a000000000000000000002", title="Second", first_name="Billy", last_name="Bob"),
        ]
        result = await ListPostsUseCase(mock_post_repo).execute()
        assert len(result) == 2
        assert result[0].id == "65a000000000000000000001"
        assert result[0].title == "First"
        assert result[0].author == "Lefty Lil"
        assert result[1].author == "Billy Bob"
        assert result[1].created == "2025-01-15T12:00:00.000Z"


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase"""

    @pytest.mark.asyncio
    async def test_create_success(self, mock_post_repo):
        mock_post_repo.insert.side_effect = lambda post: make_post(
            post_id=POST_ID,
            title=post.title,
            content=post.content,
            first_name=post.author.first_name,
            last_name=post.author.last_name,
            created=post.created,
        )
        result = await CreatePostUseCase(mock_post_repo).execute(_create_request())

        assert result.id == POST_ID
        assert result.title == "10 things"
        assert result.content == "Lorem ipsum"
        assert result.author == "Billy Bob"
        assert result.created

        inserted = mock_post_repo.insert.call_args.args[0]
        assert inserted.id is None
        assert inserted.created is not None

    @pytest.mark.asyncio
    async def test_create_allows_empty_content(self, mock_post_repo):
        mock_post_repo.insert.side_effect = lambda post: make_post(content=post.content)
        result = await CreatePostUseCase(mock_post_repo).execute(_create_request(content=""))
        assert result.content == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["title", "content", "author"])
    async def test_create_missing_field_raises(self, mock_post_repo, missing):
        payload = {
            "title": "10 things",
            "content": "Lorem ipsum",
            "author": {"firstName": "Billy", "lastName": "Bob"},
        }
        del payload[missing]
        with pytest.raises(ValidationError, match=f"Missing `{missing}`"):
            await CreatePostUseCase(mock_post_repo).execute(PostCreateRequest.model_validate(payload))
        mock_post_repo.insert.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_missing_author_last_name_raises(self, mock_post_repo):
        request = _create_request(author={"firstName": "Billy"})
        with pytest.raises(ValidationError, match="author.lastName"):
            await CreatePostUseCase(mock_post_repo).execute(request)
        mock_post_repo.insert.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_blank_title_raises(self, mock_post_repo):
        with pytest.raises(ValidationError):
            await CreatePostUseCase(mock_post_repo).execute(_create_request(title="   "))
        mock_post_repo.insert.assert_not_called()


class TestGetPostUseCase:
    """Tests for GetPostUseCase"""

    @pytest.mark.asyncio
    async def test_get_found(self, mock_post_repo):
        mock_post_repo.find_by_id.return_value = make_post(title="My Post")
        result = await GetPostUseCase(mock_post_repo).execute(POST_ID)
        assert result.id == POST_ID
        assert result.title == "My Post"

    @pytest.mark.asyncio
    async def test_get_not_found_raises(self, mock_post_repo):
        mock_post_repo.find_by_id.return_value = None
        with pytest.raises(NotFoundError, match="not found"):
            await GetPostUseCase(mock_post_repo).execute("nonexistent")


class TestUpdatePostUseCase:
    """Tests for UpdatePostUseCase"""

    @pytest.mark.asyncio
    async def test_update_all_fields(self, mock_post_repo):
        mock_post_repo.update_by_id.return_value = True
        mock_post_repo.find_by_id.return_value = make_post(
            title="cats cats cats", content="dogs dogs dogs", first_name="foo", last_name="bar"
        )
        request = PostUpdateRequest.model_validate({
            "id": POST_ID,
            "title": "cats cats cats",
            "content": "dogs dogs dogs",
            "author": {"firstName": "foo", "lastName": "bar"},
        })
        result = await UpdatePostUseCase(mock_post_repo).execute(POST_ID, request)

        assert result.title == "cats cats cats"
        assert result.author == "foo bar"
        post_id, fields = mock_post_repo.update_by_id.call_args.args
        assert post_id == POST_ID
        assert fields == {
            PostFields.TITLE: "cats cats cats",
            PostFields.CONTENT: "dogs dogs dogs",
            PostFields.AUTHOR: Author(first_name="foo", last_name="bar"),
        }

    @pytest.mark.asyncio
    async def test_update_only_supplied_fields(self, mock_post_repo):
        mock_post_repo.update_by_id.return_value = True
        mock_post_repo.find_by_id.return_value = make_post(title="New title")
        request = PostUpdateRequest.model_validate({"title": "New title"})
        await UpdatePostUseCase(mock_post_repo).execute(POST_ID, request)

        _, fields = mock_post_repo.update_by_id.call_args.args
        assert fields == {PostFields.TITLE: "New title"}

    @pytest.mark.asyncio
    async def test_update_mismatched_id_raises(self, mock_post_repo):
        request = PostUpdateRequest.model_validate({"id": "65a000000000000000000099", "title": "x"})
        with pytest.raises(ValidationError, match="must match"):
            await UpdatePostUseCase(mock_post_repo).execute(POST_ID, request)
        mock_post_repo.update_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_body_id_differs_only_in_case(self, mock_post_repo):
        mock_post_repo.update_by_id.return_value = True
        mock_post_repo.find_by_id.return_value = make_post(title="x")
        request = PostUpdateRequest.model_validate({"id": POST_ID, "title": "x"})
        result = await UpdatePostUseCase(mock_post_repo).execute(POST_ID.upper(), request)
        assert result.title == "x"
        mock_post_repo.update_by_id.assert_awaited_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [
        {"title": ""},
        {"title": None},
        {"content": None},
        {"author": None},
        {"author": {"firstName": "foo"}},
        {"author": {"firstName": "", "lastName": "bar"}},
    ])
    async def test_update_invalid_supplied_field_raises(self, mock_post_repo, payload):
        request = PostUpdateRequest.model_validate(payload)
        with pytest.raises(ValidationError):
            await UpdatePostUseCase(mock_post_repo).execute(POST_ID, request)
        mock_post_repo.update_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_not_found_raises(self, mock_post_repo):
        mock_post_repo.update_by_id.return_value = False
        request = PostUpdateRequest.model_validate({"title": "x"})
        with pytest.raises(NotFoundError):
            await UpdatePostUseCase(mock_post_repo).execute(POST_ID, request)
        mock_post_repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_deleted_before_read_raises(self, mock_post_repo):
        mock_post_repo.update_by_id.return_value = True
        mock_post_repo.find_by_id.return_value = None
        request = PostUpdateRequest.model_validate({"title": "x"})
        with pytest.raises(NotFoundError):
            await UpdatePostUseCase(mock_post_repo).execute(POST_ID, request)


class TestDeletePostUseCase:
    """Tests for DeletePostUseCase"""

    @pytest.mark.asyncio
    async def test_delete_calls_repository(self, mock_post_repo):
        result = await DeletePostUseCase(mock_post_repo).execute(POST_ID)
        assert result is None
        mock_post_repo.delete_by_id.assert_awaited_once_with(POST_ID)
