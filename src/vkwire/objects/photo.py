"""Photos and albums (https://dev.vk.com/reference/objects/photo)."""

from __future__ import annotations

from vkwire.domain.scalars import OptWireInt64, WireInt64
from vkwire.objects.base import VkObject


class PhotoSize(VkObject):
    type: str
    url: str
    width: WireInt64
    height: WireInt64


class Photo(VkObject):
    id: WireInt64
    owner_id: WireInt64
    album_id: OptWireInt64 = None
    date: OptWireInt64 = None
    text: str | None = None
    sizes: list[PhotoSize] = []
    access_key: str | None = None


class Album(VkObject):
    """Photo album.

    ``id`` is a number in ``photos.getAlbums`` but a string inside
    newsfeed attachments; both decode to ``int``.
    """

    id: WireInt64
    owner_id: WireInt64
    title: str
    description: str | None = None
    created: OptWireInt64 = None
    updated: OptWireInt64 = None
    size: OptWireInt64 = None
    thumb: Photo | None = None
