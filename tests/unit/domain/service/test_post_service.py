"""Unit tests for PostService."""

import pytest
from pydantic import ValidationError

from board.adapter.counter import InMemoryLikeCounterGateway
from board.domain.model import Comment
from board.domain.repository import CommentRepository, PostRepository, TagRepository
from board.domain.service import (
    PostMutated,
    PostNotDeletable,
    PostNotFound,
    PostNotUpdatable,
    PostService,
)
from board.domain.value import PageRequest, PostFilter, PostId, UserName
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

KANE = UserName("kane")
ABEL = UserName("abel")


class TestCreatePost:
    """Tests for create_post method."""

    @pytest.mark.asyncio
    async def test_create_assigns_positive_id(self, unit_env):
        post_service = await unit_env.get(PostService)

        outcome = await post_service.create_post("Hello", "World", KANE, ["t1", "t2"])

        assert isinstance(outcome, PostMutated)
        assert outcome.post_id > 0

    @pytest.mark.asyncio
    async def test_get_returns_submitted_fields_and_tags(self, unit_env):
        post_service = await unit_env.get(PostService)
        outcome = await post_service.create_post("Hello", "World", KANE, ["t1", "t2"])

        detail = await post_service.get_post(outcome.post_id)

        assert detail.id == outcome.post_id
        assert detail.title == "Hello"
        assert detail.content == "World"
        assert detail.created_by == KANE
        assert detail.updated_by is None
        assert detail.tags == ["t1", "t2"]
        assert detail.comments == []
        assert detail.like_count == 0

    @pytest.mark.asyncio
    async def test_empty_title_is_rejected_before_any_write(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)

        with pytest.raises(ValidationError):
            await post_service.create_post("", "body", KANE, ["a"])

        assert await post_repo.count(PostFilter()) == 0

    @pytest.mark.asyncio
    async def test_create_without_tags(self, unit_env):
        post_service = await unit_env.get(PostService)

        outcome = await post_service.create_post("Untagged", "body", KANE)

        detail = await post_service.get_post(outcome.post_id)
        assert detail.tags == []


class TestUpdatePost:
    """Tests for update_post method."""

    @pytest.mark.asyncio
    async def test_owner_updates_fields(self, unit_env):
        post_service = await unit_env.get(PostService)
        created = await post_service.create_post("Old", "old body", KANE, ["a"])

        outcome = await post_service.update_post(
            created.post_id, "New", "new body", KANE, ["a", "b"]
        )

        assert isinstance(outcome, PostMutated)
        detail = await post_service.get_post(created.post_id)
        assert detail.title == "New"
        assert detail.content == "new body"
        assert detail.updated_by == KANE
        assert detail.updated_at is not None
        assert detail.tags == ["a", "b"]

    @pytest.mark.asyncio
    async def test_non_owner_is_rejected_without_changes(self, unit_env):
        post_service = await unit_env.get(PostService)
        created = await post_service.create_post("Mine", "body", KANE, ["a"])

        outcome = await post_service.update_post(
            created.post_id, "Hijacked", "evil", ABEL, ["x"]
        )

        assert outcome == PostNotUpdatable(post_id=created.post_id, actor=ABEL)
        detail = await post_service.get_post(created.post_id)
        assert detail.title == "Mine"
        assert detail.content == "body"
        assert detail.updated_by is None
        assert detail.tags == ["a"]

    @pytest.mark.asyncio
    async def test_missing_post_is_not_found(self, unit_env):
        post_service = await unit_env.get(PostService)

        outcome = await post_service.update_post(PostId(999), "t", "c", KANE)

        assert outcome == PostNotFound(post_id=PostId(999))

    @pytest.mark.asyncio
    async def test_omitted_tags_are_left_alone(self, unit_env):
        post_service = await unit_env.get(PostService)
        created = await post_service.create_post("Title", "body", KANE, ["a", "b"])

        await post_service.update_post(created.post_id, "Title 2", "body", KANE)

        detail = await post_service.get_post(created.post_id)
        assert detail.tags == ["a", "b"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("cleared", [None, []])
    async def test_none_or_empty_tags_clear_all(self, unit_env, cleared):
        post_service = await unit_env.get(PostService)
        tag_repo = await unit_env.get(TagRepository)
        created = await post_service.create_post("Title", "body", KANE, ["a", "b"])

        await post_service.update_post(created.post_id, "Title", "body", KANE, cleared)

        assert await tag_repo.find_by_post(created.post_id) == []

    @pytest.mark.asyncio
    async def test_reordered_tags_keep_exact_order(self, unit_env):
        post_service = await unit_env.get(PostService)
        created = await post_service.create_post("T", "c", KANE, ["t1", "t2", "t3"])

        await post_service.update_post(
            created.post_id, "T", "c", KANE, ["t3", "t2", "t1"]
        )

        detail = await post_service.get_post(created.post_id)
        assert detail.tags == ["t3", "t2", "t1"]


class TestDeletePost:
    """Tests for delete_post method."""

    @pytest.mark.asyncio
    async def test_owner_delete_cascades(self, unit_env):
        post_service = await unit_env.get(PostService)
        tag_repo = await unit_env.get(TagRepository)
        comment_repo = await unit_env.get(CommentRepository)
        created = await post_service.create_post("Doomed", "body", KANE, ["a"])
        await comment_repo.save(
            Comment(post_id=created.post_id, content="first!", created_by=ABEL)
        )

        outcome = await post_service.delete_post(created.post_id, KANE)

        assert isinstance(outcome, PostMutated)
        assert isinstance(await post_service.get_post(created.post_id), PostNotFound)
        assert await tag_repo.find_by_post(created.post_id) == []
        assert await comment_repo.find_by_post(created.post_id) == []

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        created = await post_service.create_post("Keep", "body", KANE)

        outcome = await post_service.delete_post(created.post_id, ABEL)

        assert outcome == PostNotDeletable(post_id=created.post_id, actor=ABEL)
        assert await post_repo.find_by_id(created.post_id) is not None

    @pytest.mark.asyncio
    async def test_missing_post_is_not_found(self, unit_env):
        post_service = await unit_env.get(PostService)

        outcome = await post_service.delete_post(PostId(42), KANE)

        assert outcome == PostNotFound(post_id=PostId(42))


class TestGetPost:
    """Tests for get_post method."""

    @pytest.mark.asyncio
    async def test_nonexistent_post_is_not_found(self, unit_env):
        post_service = await unit_env.get(PostService)

        assert await post_service.get_post(PostId(7)) == PostNotFound(
            post_id=PostId(7)
        )

    @pytest.mark.asyncio
    async def test_includes_comments_and_like_count(self, unit_env):
        post_service = await unit_env.get(PostService)
        comment_repo = await unit_env.get(CommentRepository)
        counter = await unit_env.get(InMemoryLikeCounterGateway)
        created = await post_service.create_post("Liked", "body", KANE)
        await comment_repo.save(
            Comment(post_id=created.post_id, content="one", created_by=ABEL)
        )
        await comment_repo.save(
            Comment(post_id=created.post_id, content="two", created_by=KANE)
        )
        await counter.increment(created.post_id, ABEL)
        await counter.increment(created.post_id, KANE)

        detail = await post_service.get_post(created.post_id)

        assert [c.content for c in detail.comments] == ["one", "two"]
        assert detail.like_count == 2


class TestFindPage:
    """Tests for find_page method."""

    async def seed(self, post_service: PostService) -> list[PostId]:
        """Ten posts: title1..title10 by kane1..kane10, tags 태그1..태그10."""
        ids = []
        for i in range(1, 11):
            outcome = await post_service.create_post(
                f"title{i}",
                f"content{i}",
                UserName(f"kane{i}"),
                [f"태그{i}", "공통"],
            )
            ids.append(outcome.post_id)
        return ids

    @pytest.mark.asyncio
    async def test_unfiltered_is_most_recent_first(self, unit_env):
        post_service = await unit_env.get(PostService)
        ids = await self.seed(post_service)

        page = await post_service.find_page(PageRequest(page_size=20))

        assert [s.id for s in page.items] == list(reversed(ids))
        assert page.total_elements == 10
        assert page.is_first and page.is_last

    @pytest.mark.asyncio
    async def test_title_substring_filter(self, unit_env):
        post_service = await unit_env.get(PostService)
        await self.seed(post_service)

        page = await post_service.find_page(
            PageRequest(page_size=5), PostFilter(title="title1")
        )

        # title1 and title10
        assert page.total_elements == 2
        assert [s.title for s in page.items] == ["title10", "title1"]

    @pytest.mark.asyncio
    async def test_title_filter_is_case_sensitive(self, unit_env):
        post_service = await unit_env.get(PostService)
        await post_service.create_post("Hello", "c", KANE)
        await post_service.create_post("say hello", "c", KANE)

        page = await post_service.find_page(PageRequest(), PostFilter(title="hello"))

        assert [s.title for s in page.items] == ["say hello"]

    @pytest.mark.asyncio
    async def test_author_filter_is_exact(self, unit_env):
        post_service = await unit_env.get(PostService)
        await self.seed(post_service)

        page = await post_service.find_page(
            PageRequest(), PostFilter(created_by=UserName("kane10"))
        )

        assert [s.created_by for s in page.items] == ["kane10"]

    @pytest.mark.asyncio
    async def test_tag_filter_returns_each_post_once(self, unit_env):
        post_service = await unit_env.get(PostService)
        await post_service.create_post("dup", "c", KANE, ["same", "same", "other"])
        await post_service.create_post("single", "c", KANE, ["same"])
        await post_service.create_post("none", "c", KANE, ["other"])

        page = await post_service.find_page(PageRequest(), PostFilter(tag="same"))

        assert [s.title for s in page.items] == ["single", "dup"]
        assert page.total_elements == 2

    @pytest.mark.asyncio
    async def test_summary_carries_first_tag(self, unit_env):
        post_service = await unit_env.get(PostService)
        await self.seed(post_service)

        page = await post_service.find_page(PageRequest(), PostFilter(tag="태그5"))

        assert len(page.items) == 1
        assert page.items[0].title == "title5"
        assert page.items[0].first_tag == "태그5"

    @pytest.mark.asyncio
    async def test_untagged_post_has_no_first_tag(self, unit_env):
        post_service = await unit_env.get(PostService)
        await post_service.create_post("bare", "c", KANE)

        page = await post_service.find_page(PageRequest())

        assert page.items[0].first_tag is None

    @pytest.mark.asyncio
    async def test_like_counts_use_one_batch_call(self, unit_env):
        post_service = await unit_env.get(PostService)
        counter = await unit_env.get(InMemoryLikeCounterGateway)
        ids = await self.seed(post_service)
        await counter.increment(ids[0], ABEL)
        await counter.increment(ids[0], KANE)
        await counter.increment(ids[9], ABEL)

        page = await post_service.find_page(PageRequest(page_size=10))

        assert len(counter.batch_calls) == 1
        assert set(counter.batch_calls[0]) == set(ids)
        likes = {s.id: s.like_count for s in page.items}
        assert likes[ids[0]] == 2
        assert likes[ids[9]] == 1
        assert all(likes[post_id] == 0 for post_id in ids[1:9])

    @pytest.mark.asyncio
    async def test_empty_page_skips_counter(self, unit_env):
        post_service = await unit_env.get(PostService)
        counter = await unit_env.get(InMemoryLikeCounterGateway)

        page = await post_service.find_page(PageRequest())

        assert page.items == []
        assert page.total_elements == 0
        assert counter.batch_calls == []

    @pytest.mark.asyncio
    async def test_pagination_slices_results(self, unit_env):
        post_service = await unit_env.get(PostService)
        ids = await self.seed(post_service)

        page = await post_service.find_page(PageRequest(page_number=1, page_size=4))

        assert [s.id for s in page.items] == list(reversed(ids))[4:8]
        assert page.total_pages == 3
        assert page.has_next
        assert not page.is_first
