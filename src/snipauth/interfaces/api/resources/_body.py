"""Request body helpers shared by resources."""

from typing import Any

import falcon.asgi


def current_user(req: falcon.asgi.Request, resp: falcon.asgi.Response):
    """Return authenticated user, or set 401 on resp and return None."""
    user = getattr(req.context, "user", None)
    if not user:
        resp.status = falcon.HTTP_401
        resp.media = {"error": "Unauthorized"}
    return user


async def read_object(req: falcon.asgi.Request) -> dict[str, Any]:
    """Read JSON body, which must be an object."""
    body = await req.get_media()
    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object")
    return body


def get_str(body: dict[str, Any], key: str) -> str:
    """Required string field. Raises KeyError when missing."""
    value = body[key]
    if not isinstance(value, str):
        raise ValueError(f"Field '{key}' must be a string")
    return value


def get_flag(body: dict[str, Any], key: str) -> bool:
    """Optional boolean field, False when missing."""
    value = body.get(key, False)
    if not isinstance(value, bool):
        raise ValueError(f"Field '{key}' must be a boolean")
    return value
