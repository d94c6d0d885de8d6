"""Authorization API resources - decisions, grants and permission views."""

import falcon.asgi

from snipauth.application.dto.permission_dto import CheckPermissionInput, GrantPermissionInput
from snipauth.application.services.authorization_service import AuthorizationService
from snipauth.domain.exceptions import AuthorizationError, NotFoundError, ValidationError
from snipauth.interfaces.api.resources._body import current_user, get_flag, get_str, read_object


class PermissionCheckResource:
    """POST /v1/authorization/check - single access decision."""

    def __init__(self, authorization_service: AuthorizationService) -> None:
        self._service = authorization_service

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Decide for user_id (defaults to the caller) on resource_id owned by owner_id."""
        user = current_user(req, resp)
        if not user:
            return

        try:
            body = await read_object(req)
            request = CheckPermissionInput(
                user_id=get_str(body, "user_id") if "user_id" in body else user.user_id,
                resource_id=get_str(body, "resource_id"),
                owner_id=get_str(body, "owner_id"),
                action=get_str(body, "action"),
            )
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except ValueError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        allowed = await self._service.check_permission(request)
        resp.media = {"allowed": allowed}
        resp.status = falcon.HTTP_200


class PermissionsResource:
    """POST /v1/authorization/permissions - grant permission on a resource."""

    def __init__(self, authorization_service: AuthorizationService) -> None:
        self._service = authorization_service

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Grant flags to grantee_id. The caller is the requester."""
        user = current_user(req, resp)
        if not user:
            return

        try:
            body = await read_object(req)
            request = GrantPermissionInput(
                requester_id=user.user_id,
                owner_id=get_str(body, "owner_id"),
                grantee_id=get_str(body, "grantee_id"),
                resource_id=get_str(body, "resource_id"),
                can_read=get_flag(body, "can_read"),
                can_edit=get_flag(body, "can_edit"),
            )
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except ValueError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            view = await self._service.grant_permission(request)
            resp.media = view.to_dict()
            resp.status = falcon.HTTP_200
        except AuthorizationError as e:
            resp.status = falcon.HTTP_403
            resp.media = {"error": str(e)}
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}


class PermissionRevokeResource:
    """DELETE /v1/authorization/permissions/{resource_id}/{user_id} - revoke permission."""

    def __init__(self, authorization_service: AuthorizationService) -> None:
        self._service = authorization_service

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource_id: str,
        user_id: str,
    ) -> None:
        """Revoke grant of user_id on resource_id."""
        user = current_user(req, resp)
        if not user:
            return

        try:
            await self._service.revoke_permission(user_id, resource_id, user.user_id)
            resp.status = falcon.HTTP_204
        except NotFoundError:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Permission not found"}


class ResourcePermissionsResource:
    """GET /v1/authorization/resources/{resource_id}/permissions - grants on a resource."""

    def __init__(self, authorization_service: AuthorizationService) -> None:
        self._service = authorization_service

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        resource_id: str,
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return

        views = await self._service.get_resource_permissions(resource_id, user.user_id)
        resp.media = {"items": [v.to_dict() for v in views]}
        resp.status = falcon.HTTP_200


class UserPermissionsResource:
    """Grants held by a user.

    GET /v1/authorization/users/{user_id}/permissions
    GET /v1/authorization/users/{user_id}/resources?permission=read|edit
    """

    def __init__(self, authorization_service: AuthorizationService) -> None:
        self._service = authorization_service

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        if not current_user(req, resp):
            return

        views = await self._service.get_user_permissions(user_id)
        resp.media = {"items": [v.to_dict() for v in views]}
        resp.status = falcon.HTTP_200

    async def on_get_resources(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        if not current_user(req, resp):
            return

        level = req.get_param("permission", required=True)
        try:
            resource_ids = await self._service.get_resources_by_permission(user_id, level)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = {"items": resource_ids}
        resp.status = falcon.HTTP_200
