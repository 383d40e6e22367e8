"""Tests for the posts screen view-model."""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Sequence

import pytest

from posts_mcp.application.viewmodel import (
    ClearForm,
    CreatePost,
    LoadPosts,
    Operation,
    PostsState,
    PostsViewModel,
    UpdateBody,
    UpdateId,
    UpdateTitle,
    UpdateUserId,
    parse_int,
    validate_draft,
)
from posts_mcp.domain import NetworkError, Post
from posts_mcp.shared.result import Failure, Result, Success
from tests.fakes import StubPostsRepository, drain


class RaisingPostsRepository(StubPostsRepository):
    """Repository whose fetch blows up instead of returning a Result."""

    async def fetch_all(self) -> Result[Sequence[Post], NetworkError]:
        self.fetch_calls += 1
        raise RuntimeError("connection pool exhausted")


def _fill_draft(vm: PostsViewModel, id: str = "1", user_id: str = "2",
                title: str = "T", body: str = "B") -> None:
    vm.dispatch(UpdateId(id))
    vm.dispatch(UpdateTitle(title))
    vm.dispatch(UpdateBody(body))
    vm.dispatch(UpdateUserId(user_id))


class TestDraftValidation:
    """Tests for draft parsing."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1", 1),
            ("-5", -5),
            ("+7", 7),
            ("007", 7),
            ("2147483647", 2147483647),
            ("-2147483648", -2147483648),
            ("2147483648", None),
            ("abc", None),
            ("", None),
            (" 1", None),
            ("1.0", None),
            ("1_000", None),
            ("12\n", None),
        ],
    )
    def test_parse_int(self, text: str, expected: int | None) -> None:
        """Test only plain 32-bit integers are accepted."""
        assert parse_int(text) == expected

    def test_valid_draft(self) -> None:
        """Test a complete draft builds a post."""
        state = PostsState(id="1", title="T", body="B", user_id="2")
        assert validate_draft(state) == Success(Post(id=1, title="T", body="B", user_id=2))

    @pytest.mark.parametrize(
        "draft,field",
        [
            ({"id": "abc"}, "id"),
            ({"user_id": "x"}, "user_id"),
            ({"title": "   "}, "title"),
            ({"body": ""}, "body"),
        ],
    )
    def test_invalid_draft_names_field(self, draft: dict[str, str], field: str) -> None:
        """Test the first bad field is reported."""
        base = {"id": "1", "title": "T", "body": "B", "user_id": "2"}
        state = PostsState(**{**base, **draft})

        result = validate_draft(state)

        assert isinstance(result, Failure)
        assert result.error.field == field


class TestDraftEvents:
    """Tests for synchronous draft transitions."""

    def test_initial_state(self, repository: StubPostsRepository) -> None:
        """Test the screen starts empty."""
        assert PostsViewModel(repository).state == PostsState()

    def test_update_events_set_fields_verbatim(self, repository: StubPostsRepository) -> None:
        """Test each update event targets its own field."""
        vm = PostsViewModel(repository)

        _fill_draft(vm, id="x1", user_id=" 9 ", title="Title", body="Body")

        assert vm.state == PostsState(id="x1", title="Title", body="Body", user_id=" 9 ")

    def test_last_update_wins(self, repository: StubPostsRepository) -> None:
        """Test repeated updates keep the latest text only."""
        vm = PostsViewModel(repository)

        vm.dispatch(UpdateTitle("x"))
        vm.dispatch(UpdateTitle("y"))

        assert vm.state == PostsState(title="y")

    @pytest.mark.asyncio
    async def test_clear_form_only_touches_drafts(self) -> None:
        """Test ClearForm leaves posts, loading flag and error alone."""
        repo = StubPostsRepository(fetch_result=Failure(NetworkError.SERVER_ERROR))
        vm = PostsViewModel(repo)
        vm.dispatch(LoadPosts())
        await vm.join()
        _fill_draft(vm)

        vm.dispatch(ClearForm())

        assert vm.state == PostsState(error=NetworkError.SERVER_ERROR)

    @pytest.mark.asyncio
    async def test_clear_form_keeps_loading_flag(self, sample_posts: list[Post]) -> None:
        """Test ClearForm during a load leaves is_loading set and posts alone."""
        repo = StubPostsRepository(fetch_result=Success(sample_posts))
        repo.fetch_gate = asyncio.Event()
        vm = PostsViewModel(repo)
        _fill_draft(vm)
        vm.dispatch(LoadPosts())

        vm.dispatch(ClearForm())

        assert vm.state == PostsState(is_loading=True)

        repo.fetch_gate.set()
        await vm.join()
        assert vm.state == PostsState(posts=tuple(sample_posts))

    def test_unsupported_event(self, repository: StubPostsRepository) -> None:
        """Test foreign objects are refused."""
        with pytest.raises(TypeError, match="Unsupported event"):
            PostsViewModel(repository).dispatch("LoadPosts")  # type: ignore[arg-type]


class TestLoadPosts:
    """Tests for LoadPosts."""

    @pytest.mark.asyncio
    async def test_loading_set_before_resolution(self, sample_posts: list[Post]) -> None:
        """Test loading flips synchronously and posts replace the list."""
        vm = PostsViewModel(StubPostsRepository(fetch_result=Success(sample_posts)))

        vm.dispatch(LoadPosts())

        assert vm.state.is_loading is True
        assert vm.state.posts == ()

        await vm.join()

        assert vm.state == PostsState(posts=tuple(sample_posts))

    @pytest.mark.asyncio
    async def test_failure_sets_error(self) -> None:
        """Test a failed load stores the error and keeps posts."""
        vm = PostsViewModel(StubPostsRepository(fetch_result=Failure(NetworkError.NO_INTERNET)))

        vm.dispatch(LoadPosts())
        await vm.join()

        assert vm.state.error is NetworkError.NO_INTERNET
        assert vm.state.is_loading is False
        assert vm.state.posts == ()

    @pytest.mark.asyncio
    async def test_new_load_clears_previous_error(self, sample_posts: list[Post]) -> None:
        """Test starting an operation resets the error."""
        repo = StubPostsRepository(fetch_result=Failure(NetworkError.UNAUTHORIZED))
        vm = PostsViewModel(repo)
        vm.dispatch(LoadPosts())
        await vm.join()

        repo.fetch_result = Success(sample_posts)
        vm.dispatch(LoadPosts())

        assert vm.state.error is None
        await vm.join()
        assert vm.state.posts == tuple(sample_posts)

    @pytest.mark.asyncio
    async def test_single_flight(self) -> None:
        """Test a second LoadPosts while one is running is dropped."""
        repo = StubPostsRepository()
        repo.fetch_gate = asyncio.Event()
        vm = PostsViewModel(repo)

        vm.dispatch(LoadPosts())
        vm.dispatch(LoadPosts())
        await drain()

        assert repo.fetch_calls == 1
        assert vm.in_flight == frozenset({Operation.LOAD})

        repo.fetch_gate.set()
        await vm.join()

        assert repo.fetch_calls == 1
        assert vm.in_flight == frozenset()
        assert vm.state.is_loading is False

    @pytest.mark.asyncio
    async def test_cancelled_load_releases_loading(self) -> None:
        """Test cancelling an in-flight load clears is_loading without an error."""
        repo = StubPostsRepository()
        repo.fetch_gate = asyncio.Event()
        vm = PostsViewModel(repo)
        vm.dispatch(LoadPosts())
        await drain()

        (task,) = [
            t for t in asyncio.all_tasks()
            if t.get_coro().__qualname__ == "PostsViewModel._run_load"
        ]
        task.cancel()
        await vm.join()

        assert task.cancelled()
        assert vm.in_flight == frozenset()
        assert vm.state == PostsState()

    @pytest.mark.asyncio
    async def test_raising_repository_reports_unknown(self) -> None:
        """Test a repository exception clears loading and records UNKNOWN."""
        repo = RaisingPostsRepository()
        vm = PostsViewModel(repo)

        vm.dispatch(LoadPosts())
        await vm.join()

        assert vm.in_flight == frozenset()
        assert vm.state == PostsState(error=NetworkError.UNKNOWN)

        vm.dispatch(LoadPosts())
        assert vm.state == PostsState(is_loading=True)
        await vm.join()

    def test_requires_running_loop(self, repository: StubPostsRepository) -> None:
        """Test dispatching outside the owner loop fails without touching state."""
        vm = PostsViewModel(repository)

        with pytest.raises(RuntimeError):
            vm.dispatch(LoadPosts())

        assert vm.state == PostsState()


class TestCreatePost:
    """Tests for CreatePost."""

    @pytest.mark.asyncio
    async def test_invalid_id_is_a_no_op(self, repository: StubPostsRepository) -> None:
        """Test a non-numeric id leaves state unchanged and skips the network."""
        vm = PostsViewModel(repository)
        _fill_draft(vm, id="abc")
        before = vm.state

        vm.dispatch(CreatePost())
        await vm.join()

        assert vm.state is before
        assert repository.created == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "draft",
        [{"user_id": "two"}, {"title": " "}, {"body": ""}],
    )
    async def test_other_invalid_drafts(
        self, repository: StubPostsRepository, draft: dict[str, str],
    ) -> None:
        """Test blank text or bad user id also abort silently."""
        vm = PostsViewModel(repository)
        _fill_draft(vm, **draft)
        before = vm.state

        vm.dispatch(CreatePost())

        assert vm.state is before
        assert repository.created == []

    @pytest.mark.asyncio
    async def test_success_appends_and_clears_form(self, sample_posts: list[Post]) -> None:
        """Test the created post is appended last and drafts are reset."""
        created = Post(id=101, title="T", body="B", user_id=2)
        repo = StubPostsRepository(
            fetch_result=Success(sample_posts), create_result=Success(created),
        )
        vm = PostsViewModel(repo)
        vm.dispatch(LoadPosts())
        await vm.join()
        _fill_draft(vm, id="1", user_id="2", title="T", body="B")

        vm.dispatch(CreatePost())

        assert vm.state.is_loading is True
        await vm.join()

        assert repo.created == [Post(id=1, title="T", body="B", user_id=2)]
        assert vm.state == PostsState(posts=(*sample_posts, created))

    @pytest.mark.asyncio
    async def test_failure_keeps_drafts(self) -> None:
        """Test a failed create stores the error and keeps the form."""
        repo = StubPostsRepository(create_result=Failure(NetworkError.PAYLOAD_TOO_LARGE))
        vm = PostsViewModel(repo)
        _fill_draft(vm)

        vm.dispatch(CreatePost())
        await vm.join()

        assert vm.state == PostsState(
            id="1", title="T", body="B", user_id="2",
            error=NetworkError.PAYLOAD_TOO_LARGE,
        )

    @pytest.mark.asyncio
    async def test_loading_held_until_last_operation(self, sample_posts: list[Post]) -> None:
        """Test is_loading stays set while another operation is running."""
        repo = StubPostsRepository(fetch_result=Success(sample_posts))
        repo.create_gate = asyncio.Event()
        vm = PostsViewModel(repo)
        _fill_draft(vm)

        vm.dispatch(CreatePost())
        vm.dispatch(LoadPosts())
        await drain()

        assert vm.state.posts == tuple(sample_posts)
        assert vm.state.is_loading is True

        repo.create_gate.set()
        await vm.join()

        assert vm.state.is_loading is False
        assert vm.state.posts[-1] == Post(id=1, title="T", body="B", user_id=2)


class TestSnapshots:
    """Tests for state ownership."""

    def test_previous_snapshot_is_untouched(self, repository: StubPostsRepository) -> None:
        """Test transitions replace the state instead of mutating it."""
        vm = PostsViewModel(repository)
        before = vm.state

        vm.dispatch(UpdateTitle("new"))

        assert before.title == ""
        assert vm.state is not before
        with pytest.raises(dataclasses.FrozenInstanceError):
            vm.state.title = "x"  # type: ignore[misc]

    @pytest.mark.asyncio
    async def test_listeners_receive_every_snapshot(self, sample_posts: list[Post]) -> None:
        """Test subscribers see loading and loaded states in order."""
        vm = PostsViewModel(StubPostsRepository(fetch_result=Success(sample_posts)))
        seen: list[PostsState] = []
        unsubscribe = vm.subscribe(seen.append)

        vm.dispatch(LoadPosts())
        await vm.join()
        unsubscribe()
        vm.dispatch(UpdateTitle("ignored"))

        assert [s.is_loading for s in seen] == [True, False]
        assert seen[-1].posts == tuple(sample_posts)
