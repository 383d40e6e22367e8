"""Posts API client.

Issues the two operations of the posts resource and classifies every
outcome into a Result. Nothing raised below this class reaches the caller.

Endpoints:
    GET  {base_url} - List posts
    POST {base_url} - Create a post
"""
from __future__ import annotations

import json
from typing import Callable, Mapping, TypeVar

from pydantic import ValidationError

from posts_mcp.domain.models import Post
from posts_mcp.domain.value_objects import NetworkError
from posts_mcp.infrastructure.api.schemas import PostSchema, post_list_adapter
from posts_mcp.infrastructure.http import (
    ITransport,
    TransportFault,
    TransportFaultKind,
    TransportResponse,
)
from posts_mcp.shared.logging import get_logger
from posts_mcp.shared.result import Failure, Result, Success

logger = get_logger(__name__)

T = TypeVar("T")

# Explicit status tables, checked before the 5xx range
FETCH_ALL_STATUS_ERRORS: Mapping[int, NetworkError] = {
    401: NetworkError.UNAUTHORIZED,
    408: NetworkError.REQUEST_TIMEOUT,
}

CREATE_STATUS_ERRORS: Mapping[int, NetworkError] = {
    401: NetworkError.UNAUTHORIZED,
    409: NetworkError.CONFLICT,
    408: NetworkError.REQUEST_TIMEOUT,
    413: NetworkError.PAYLOAD_TOO_LARGE,
}


def _decode_posts(body: bytes) -> list[Post]:
    return [schema.to_domain() for schema in post_list_adapter.validate_json(body)]


def _decode_post(body: bytes) -> Post:
    return PostSchema.model_validate_json(body).to_domain()


class PostsApiClient:
    """Client for the remote posts collection.

    Attributes:
        base_url: URL of the posts collection (``.../api/posts/``).

    Example:
        >>> client = PostsApiClient(transport, base_url="http://localhost:3000/api/posts/")
        >>> result = await client.fetch_all()
        >>> result.on_success(print).on_error(print)
    """

    def __init__(self, transport: ITransport, *, base_url: str) -> None:
        """Initialize client.

        Args:
            transport: Transport capability used for every request
            base_url: Posts collection URL
        """
        self._transport = transport
        self._base_url = base_url

    async def fetch_all(self) -> Result[list[Post], NetworkError]:
        """Fetch every post.

        Returns:
            Success(list[Post]) on 2xx with a well-formed body.
            Failure(NetworkError) otherwise.
        """
        logger.debug("posts_api_fetch_all_started", url=self._base_url)
        return await self._execute(
            operation="fetch_all",
            method="GET",
            body=None,
            decode=_decode_posts,
            status_errors=FETCH_ALL_STATUS_ERRORS,
        )

    async def create(self, post: Post) -> Result[Post, NetworkError]:
        """Create a post.

        The server is free to assign its own id; the returned post is
        what the server answered with.

        Args:
            post: Post to send

        Returns:
            Success(Post) with the created post on 2xx.
            Failure(NetworkError) otherwise.
        """
        logger.debug("posts_api_create_started", url=self._base_url, post_id=post.id)
        payload = json.dumps(post.to_dict()).encode("utf-8")
        return await self._execute(
            operation="create",
            method="POST",
            body=payload,
            decode=_decode_post,
            status_errors=CREATE_STATUS_ERRORS,
        )

    async def _execute(
        self,
        *,
        operation: str,
        method: str,
        body: bytes | None,
        decode: Callable[[bytes], T],
        status_errors: Mapping[int, NetworkError],
    ) -> Result[T, NetworkError]:
        try:
            response = await self._transport.perform_request(method, self._base_url, body)
            return self._handle_response(response, operation, decode, status_errors)

        except TransportFault as e:
            error = (
                NetworkError.NO_INTERNET
                if e.kind is TransportFaultKind.UNREACHABLE_HOST
                else NetworkError.UNKNOWN
            )
            logger.warning(
                "posts_api_transport_fault",
                operation=operation,
                fault=e.kind.value,
                error=error.value,
            )
            return Failure(error)
        except Exception:
            logger.exception("posts_api_unexpected_error", operation=operation)
            return Failure(NetworkError.UNKNOWN)

    def _handle_response(
        self,
        response: TransportResponse,
        operation: str,
        decode: Callable[[bytes], T],
        status_errors: Mapping[int, NetworkError],
    ) -> Result[T, NetworkError]:
        """Classify a response by status code, first match wins."""
        status = response.status_code

        if 200 <= status <= 299:
            try:
                value = decode(response.body)
            except ValidationError as e:
                logger.warning(
                    "posts_api_invalid_response",
                    operation=operation,
                    status_code=status,
                    error_count=e.error_count(),
                )
                return Failure(NetworkError.SERIALIZATION)

            logger.debug("posts_api_succeeded", operation=operation, status_code=status)
            return Success(value)

        error = NetworkError.from_status(status, status_errors)
        logger.warning(
            "posts_api_failed",
            operation=operation,
            status_code=status,
            error=error.value,
        )
        return Failure(error)
