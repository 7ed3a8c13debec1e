"""Documents (https://dev.vk.com/reference/objects/doc)."""

from __future__ import annotations

from enum import IntEnum

from pydantic import Field

from vkwire.domain.scalars import WireInt64
from vkwire.objects.base import VkObject
from vkwire.objects.photo import PhotoSize


class DocumentType(IntEnum):
    """Document type codes. Unknown codes map to :attr:`OTHER`."""

    TEXT = 1
    ARCHIVE = 2
    GIF = 3
    IMAGE = 4
    AUDIO = 5
    VIDEO = 6
    EBOOK = 7
    OTHER = 8

    @classmethod
    def from_code(cls, code: int) -> DocumentType:
        try:
            return cls(code)
        except ValueError:
            return cls.OTHER


class PreviewPhoto(VkObject):
    sizes: list[PhotoSize]


class Graffiti(VkObject):
    src: str
    width: WireInt64
    height: WireInt64


class AudioMessage(VkObject):
    duration: WireInt64
    waveform: list[WireInt64]
    link_ogg: str
    link_mp3: str


class DocumentPreview(VkObject):
    photo: PreviewPhoto | None = None
    graffiti: Graffiti | None = None
    audio_msg: AudioMessage | None = None


class Document(VkObject):
    id: WireInt64
    owner_id: WireInt64
    title: str
    size: WireInt64
    ext: str
    url: str
    date: WireInt64
    type_code: WireInt64 = Field(alias="type")
    preview: DocumentPreview | None = None
    # Present when the document arrives as an attachment.
    access_key: str | None = None

    @property
    def kind(self) -> DocumentType:
        return DocumentType.from_code(self.type_code)
