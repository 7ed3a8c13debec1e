"""Polls (https://dev.vk.com/reference/objects/poll)."""

from __future__ import annotations

from pydantic import Field

from vkwire.domain.scalars import OptWireInt64, WireInt64
from vkwire.objects.base import VkObject
from vkwire.objects.photo import Photo, PhotoSize


class PollAnswer(VkObject):
    id: WireInt64
    text: str
    votes: WireInt64
    rate: float


class GradientPoint(VkObject):
    position: float
    color: str


class PollBackground(VkObject):
    id: WireInt64
    type: str
    angle: OptWireInt64 = None
    color: str
    width: OptWireInt64 = None
    height: OptWireInt64 = None
    images: list[PhotoSize] | None = None
    points: list[GradientPoint | None] = []


class PollFriend(VkObject):
    id: WireInt64


class Poll(VkObject):
    id: WireInt64
    owner_id: WireInt64
    created: WireInt64
    question: str
    votes: WireInt64 = 0
    answers: list[PollAnswer]
    answer_ids: list[WireInt64] | None = None
    end_date: WireInt64
    anonymous: bool = False
    multiple: bool = False
    closed: bool = False
    is_board: bool = False
    can_edit: bool = False
    can_vote: bool = False
    can_report: bool = False
    can_share: bool = False
    # Absent at least in newsfeed attachments.
    author_id: OptWireInt64 = None
    photo: Photo | None = None
    background: PollBackground | None = None
    friends: list[PollFriend] = Field(default_factory=list)
