"""Register snippet use case."""

import logging

from snipauth.domain.entities import Snippet
from snipauth.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)


class RegisterSnippetUseCase:
    """Record a new snippet with the requester as its owner."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, owner_id: str, snippet_id: str) -> Snippet:
        """Create the ownership record. Raises ConflictError for a taken id."""
        if not snippet_id:
            raise ValidationError("Snippet id must not be empty")

        async with self._uow_factory() as uow:
            snippet = await uow.snippets.create(Snippet(id=snippet_id, owner_id=owner_id))

        logger.info("Registered snippet %s for %s", snippet.id, snippet.owner_id)
        return snippet
