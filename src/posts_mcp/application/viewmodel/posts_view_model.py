"""Posts View-Model.

Reducer for the posts screen: turns events and asynchronous results into
new state snapshots.

Scheduling: ``dispatch`` runs on the event loop that owns the screen.
Remote operations run as tasks on that same loop, so merging their
results into state is serialized with every other transition.

Overlapping operations: at most one operation per kind is in flight.
A LoadPosts or CreatePost dispatched while the same kind is still running
is dropped. ``is_loading`` stays true until the last in-flight operation
has completed.

Invalid drafts: CreatePost with an unusable draft leaves the state
untouched. The rejection is logged with the offending field.

Aborted operations: a cancelled operation only releases the loading flag.
One whose repository raised also records NetworkError.UNKNOWN.
"""
from __future__ import annotations

import asyncio
from dataclasses import replace
from enum import Enum
from typing import Any, Callable, Coroutine

from posts_mcp.application.viewmodel.events import (
    ClearForm,
    CreatePost,
    LoadPosts,
    PostsEvent,
    UpdateBody,
    UpdateId,
    UpdateTitle,
    UpdateUserId,
)
from posts_mcp.application.viewmodel.state import PostsState, validate_draft
from posts_mcp.domain import IPostsRepository, NetworkError, Post
from posts_mcp.shared.logging import get_logger
from posts_mcp.shared.result import Failure

logger = get_logger(__name__)

StateListener = Callable[[PostsState], None]


class Operation(str, Enum):
    """Kinds of remote operation the screen can start."""

    LOAD = "load"
    CREATE = "create"


class PostsViewModel:
    """Owner of the posts screen state.

    Example:
        >>> vm = PostsViewModel(repository)
        >>> vm.dispatch(UpdateTitle("Hello"))
        >>> vm.dispatch(LoadPosts())
        >>> await vm.join()
        >>> vm.state.posts
    """

    def __init__(self, repository: IPostsRepository) -> None:
        """Initialize view-model.

        Args:
            repository: Source of posts
        """
        self._repository = repository
        self._state = PostsState()
        self._listeners: list[StateListener] = []
        self._in_flight: dict[Operation, asyncio.Task[None]] = {}

    @property
    def state(self) -> PostsState:
        """Current state snapshot."""
        return self._state

    @property
    def in_flight(self) -> frozenset[Operation]:
        """Operations currently running."""
        return frozenset(self._in_flight)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called with every new snapshot.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, event: PostsEvent) -> None:
        """Apply an event.

        Args:
            event: One of the posts screen events

        Raises:
            TypeError: If event is not a posts screen event
        """
        if isinstance(event, LoadPosts):
            self._load_posts()
        elif isinstance(event, CreatePost):
            self._create_post()
        elif isinstance(event, UpdateId):
            self._set_state(replace(self._state, id=event.text))
        elif isinstance(event, UpdateTitle):
            self._set_state(replace(self._state, title=event.text))
        elif isinstance(event, UpdateBody):
            self._set_state(replace(self._state, body=event.text))
        elif isinstance(event, UpdateUserId):
            self._set_state(replace(self._state, user_id=event.text))
        elif isinstance(event, ClearForm):
            self._clear_form()
        else:
            raise TypeError(f"Unsupported event: {event!r}")

    async def join(self) -> None:
        """Wait until no operation is in flight.

        Cancelled or crashed operations have already been merged into
        state, so their exceptions are not re-raised here.
        """
        while self._in_flight:
            await asyncio.gather(*self._in_flight.values(), return_exceptions=True)

    # =========================================================================
    # Transitions
    # =========================================================================

    def _load_posts(self) -> None:
        self._start(Operation.LOAD, self._run_load)

    def _create_post(self) -> None:
        result = validate_draft(self._state)
        if isinstance(result, Failure):
            logger.info(
                "create_post_rejected",
                field=result.error.field,
                reason=result.error.message,
            )
            return

        post = result.value
        self._start(Operation.CREATE, lambda: self._run_create(post))

    def _clear_form(self) -> None:
        self._set_state(replace(self._state, id="", title="", body="", user_id=""))

    async def _run_load(self) -> None:
        try:
            result = await self._repository.fetch_all()
        except BaseException as e:
            self._abort(Operation.LOAD, e)
            raise
        self._finish(Operation.LOAD)
        result.on_success(self._on_posts_loaded).on_error(self._on_operation_failed)

    async def _run_create(self, post: Post) -> None:
        try:
            result = await self._repository.create(post)
        except BaseException as e:
            self._abort(Operation.CREATE, e)
            raise
        self._finish(Operation.CREATE)
        result.on_success(self._on_post_created).on_error(self._on_operation_failed)

    def _on_posts_loaded(self, posts: list[Post]) -> None:
        self._set_state(
            replace(self._state, posts=tuple(posts), is_loading=self._busy())
        )

    def _on_post_created(self, created: Post) -> None:
        self._set_state(
            replace(
                self._state,
                posts=(*self._state.posts, created),
                is_loading=self._busy(),
            )
        )
        self._clear_form()

    def _on_operation_failed(self, error: NetworkError) -> None:
        self._set_state(replace(self._state, error=error, is_loading=self._busy()))

    # =========================================================================
    # Helpers
    # =========================================================================

    def _start(
        self, operation: Operation, run: Callable[[], Coroutine[Any, Any, None]],
    ) -> None:
        """Flip to loading and run the operation unless it is already running."""
        if operation in self._in_flight:
            logger.info("operation_already_in_flight", operation=operation.value)
            return

        loop = asyncio.get_running_loop()
        self._set_state(replace(self._state, is_loading=True, error=None))
        logger.debug("operation_started", operation=operation.value)
        self._in_flight[operation] = loop.create_task(run())

    def _finish(self, operation: Operation) -> None:
        self._in_flight.pop(operation, None)
        logger.debug("operation_finished", operation=operation.value)

    def _abort(self, operation: Operation, exc: BaseException) -> None:
        """Drop an operation that ended without a result."""
        self._finish(operation)
        if isinstance(exc, asyncio.CancelledError):
            logger.info("operation_cancelled", operation=operation.value)
            self._set_state(replace(self._state, is_loading=self._busy()))
            return
        logger.error("operation_crashed", operation=operation.value, error=str(exc))
        self._set_state(
            replace(self._state, error=NetworkError.UNKNOWN, is_loading=self._busy())
        )

    def _busy(self) -> bool:
        return bool(self._in_flight)

    def _set_state(self, state: PostsState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
