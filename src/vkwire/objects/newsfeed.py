"""Newsfeed (``newsfeed.get``).

Attachments here are undocumented and differ from wall attachments:
``album.id`` is a string, ``link.product.price.amount`` may be either.
"""

from __future__ import annotations

from vkwire.domain.scalars import OptWireInt64, OptWireStr, WireInt, WireInt64, WireStr
from vkwire.objects.account import UserRef
from vkwire.objects.base import VkObject
from vkwire.objects.document import Document
from vkwire.objects.photo import Album, Photo
from vkwire.objects.poll import Poll


class Counter(VkObject):
    count: WireInt64


class Price(VkObject):
    # Minor currency units; string or number depending on the method.
    amount: WireInt
    text: str | None = None


class Product(VkObject):
    price: Price


class Link(VkObject):
    url: str
    title: str | None = None
    caption: str | None = None
    description: str | None = None
    product: Product | None = None


class NewsAttachment(VkObject):
    type: str
    photo: Photo | None = None
    doc: Document | None = None
    poll: Poll | None = None
    album: Album | None = None
    link: Link | None = None
    photos_list: list[WireStr] | None = None


class PhotoSet(VkObject):
    count: WireInt64
    items: list[Photo] | None = None


class FriendItem(VkObject):
    user_id: WireInt64


class FriendSet(VkObject):
    count: WireInt64
    items: list[FriendItem] | None = None


class HistoryItem(VkObject):
    id: WireInt64
    owner_id: WireInt64
    from_id: WireInt64
    date: WireInt64
    post_type: str | None = None
    text: str | None = None
    attachments: list[NewsAttachment] | None = None


class NewsItem(VkObject):
    type: str
    # Positive for users, negative for communities.
    source_id: WireInt64
    date: WireInt64
    post_id: OptWireInt64 = None
    post_type: str | None = None
    final_post: OptWireStr = None
    copy_owner_id: OptWireInt64 = None
    copy_post_id: OptWireStr = None
    copy_post_date: OptWireStr = None
    copy_history: list[HistoryItem] | None = None
    text: str | None = None
    can_edit: OptWireInt64 = None
    can_delete: OptWireInt64 = None
    comments: Counter | None = None
    likes: Counter | None = None
    reposts: Counter | None = None
    attachments: list[NewsAttachment] | None = None
    photos: PhotoSet | None = None
    friends: FriendSet | None = None


class GroupRef(VkObject):
    id: WireInt64
    name: str
    screen_name: str | None = None


class NewsFeed(VkObject):
    items: list[NewsItem] = []
    profiles: list[UserRef] = []
    groups: list[GroupRef] = []
    # Older API versions page with new_offset, newer ones with next_from.
    new_offset: OptWireInt64 = None
    next_from: OptWireStr = None
