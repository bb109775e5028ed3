"""Domain models for the password database tree."""

import hashlib
from dataclasses import dataclass, field
from typing import Generic, TypeVar
from uuid import UUID

from vault_sync.config import ATTACHMENT_DIGEST

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Pair(Generic[A, B]):
    """Two correlated values returned together."""

    first: A
    second: B


@dataclass(frozen=True)
class AttachmentRef:
    """A named reference from an entry into the database attachment table."""

    filename: str
    index: int


@dataclass(frozen=True)
class DatabaseAttachment:
    """A binary blob stored once in the database attachment table."""

    data: bytes
    protected: bool = False

    @property
    def digest(self) -> str:
        """Content fingerprint used to collapse identical attachments."""
        return hashlib.new(ATTACHMENT_DIGEST, self.data).hexdigest()


@dataclass(frozen=True)
class CustomIcon:
    """A user-managed icon image, keyed by uuid."""

    uuid: UUID
    data: bytes
    name: str = ""


@dataclass(frozen=True)
class Node:
    """A group or entry in the database tree."""

    uuid: UUID
    title: str
    is_group: bool = False
    children: tuple["Node", ...] = ()
    attachments: tuple[AttachmentRef, ...] = ()
    custom_icon: UUID | None = None
    history: tuple["Node", ...] = ()


@dataclass(frozen=True)
class Database:
    """A database snapshot: the node tree plus its attachment and icon tables."""

    root: Node
    attachments: tuple[DatabaseAttachment, ...] = ()
    custom_icons: dict[UUID, CustomIcon] = field(default_factory=dict)
    name: str = ""
