"""Unit tests for AddCommentUseCase and ListCommentsUseCase."""

import pytest

from bazaar.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
)
from bazaar.domain.error import NotFoundError
from bazaar.domain.service import PostService
from bazaar.domain.value import PostKind
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAddCommentUseCase:
    """Tests for AddCommentUseCase."""

    @pytest.mark.asyncio
    async def test_created_comment_shape(self, unit_env):
        """The created comment is returned with its author."""
        # Arrange
        use_case = await unit_env.get(AddCommentUseCase)
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post(make_user("seller")))
        buyer = make_user("buyer")

        # Act
        response = await use_case.execute(
            AddCommentRequest(
                kind=PostKind.TRADE,
                post_id=str(post.id),
                author=buyer,
                content="Would you take a lens in exchange?",
            )
        )

        # Assert
        body = response.model_dump(mode="json", by_alias=True)
        assert set(body) == {"commentId", "content", "createdAt", "author"}
        assert body["content"] == "Would you take a lens in exchange?"
        assert body["author"] == {"id": str(buyer.user_id), "username": "buyer"}

    @pytest.mark.asyncio
    async def test_malformed_post_id_is_not_found(self, unit_env):
        """Non-UUID post ids are reported as missing."""
        use_case = await unit_env.get(AddCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                AddCommentRequest(
                    kind=PostKind.TRADE,
                    post_id="12345",
                    author=make_user(),
                    content="hello",
                )
            )


class TestListCommentsUseCase:
    """Tests for ListCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_pagination_metadata(self, unit_env):
        """Pages report page, limit, total and total pages."""
        # Arrange
        add = await unit_env.get(AddCommentUseCase)
        list_comments = await unit_env.get(ListCommentsUseCase)
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(
            make_post(make_user("seller"), kind=PostKind.FORUM, title="Swap meet")
        )
        for i in range(5):
            await add.execute(
                AddCommentRequest(
                    kind=PostKind.FORUM,
                    post_id=str(post.id),
                    author=make_user(f"user{i}"),
                    content=f"comment {i}",
                )
            )

        # Act
        response = await list_comments.execute(
            ListCommentsRequest(kind=PostKind.FORUM, post_id=str(post.id), page=2, limit=2)
        )

        # Assert
        assert [c.content for c in response.comments] == ["comment 2", "comment 1"]
        assert response.pagination.model_dump(by_alias=True) == {
            "page": 2,
            "limit": 2,
            "total": 5,
            "totalPages": 3,
        }

    @pytest.mark.asyncio
    async def test_out_of_range_paging_is_clamped(self, unit_env):
        """Page below 1 and oversized limits are pulled into range."""
        # Arrange
        list_comments = await unit_env.get(ListCommentsUseCase)
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post(make_user("seller")))

        # Act
        response = await list_comments.execute(
            ListCommentsRequest(
                kind=PostKind.TRADE, post_id=str(post.id), page=0, limit=1000
            )
        )

        # Assert
        assert response.comments == []
        assert response.pagination.page == 1
        assert response.pagination.limit == 100
        assert response.pagination.total == 0
        assert response.pagination.total_pages == 0

    @pytest.mark.asyncio
    async def test_defaults_apply_without_paging(self, unit_env):
        """No page or limit means the first page of the default size."""
        # Arrange
        list_comments = await unit_env.get(ListCommentsUseCase)
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post(make_user("seller")))

        # Act
        response = await list_comments.execute(
            ListCommentsRequest(kind=PostKind.TRADE, post_id=str(post.id))
        )

        # Assert
        assert (response.pagination.page, response.pagination.limit) == (1, 20)
