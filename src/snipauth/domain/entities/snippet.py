"""Snippet entity - the protected resource, as far as ownership goes."""

from dataclasses import dataclass


@dataclass
class Snippet:
    """Snippet with its single owner."""

    id: str
    owner_id: str
