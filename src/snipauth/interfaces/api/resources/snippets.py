"""Snippet API resources - ownership records and decisions against them."""

import falcon.asgi

from snipauth.application.services.snippet_service import SnippetService
from snipauth.domain.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from snipauth.interfaces.api.resources._body import current_user, get_str, read_object


class SnippetsResource:
    """POST /v1/snippets - register a snippet owned by the caller."""

    def __init__(self, snippet_service: SnippetService) -> None:
        self._service = snippet_service

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = current_user(req, resp)
        if not user:
            return

        try:
            body = await read_object(req)
            snippet_id = get_str(body, "id")
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except ValueError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            snippet = await self._service.register_snippet(user.user_id, snippet_id)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except ConflictError as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e)}
            return

        resp.media = {"id": snippet.id, "owner_id": snippet.owner_id}
        resp.status = falcon.HTTP_201


class SnippetResource:
    """DELETE /v1/snippets/{snippet_id} - remove a snippet and its grants."""

    def __init__(self, snippet_service: SnippetService) -> None:
        self._service = snippet_service

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        snippet_id: str,
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return

        try:
            await self._service.delete_snippet(user.user_id, snippet_id)
            resp.status = falcon.HTTP_204
        except NotFoundError as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
        except AuthorizationError as e:
            resp.status = falcon.HTTP_403
            resp.media = {"error": str(e)}


class SnippetCheckResource:
    """POST /v1/snippets/{snippet_id}/check - decide for the caller on a stored snippet."""

    def __init__(self, snippet_service: SnippetService) -> None:
        self._service = snippet_service

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        snippet_id: str,
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return

        try:
            body = await read_object(req)
            action = get_str(body, "action")
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except ValueError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        allowed = await self._service.is_allowed(user.user_id, snippet_id, action)
        resp.media = {"allowed": allowed}
        resp.status = falcon.HTTP_200
