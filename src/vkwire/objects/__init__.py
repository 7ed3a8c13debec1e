"""Record types for API objects.

Integer fields use the ``Wire*`` scalar types so that a value arriving
as ``777`` in one method and ``"777"`` in another decodes the same way,
while fractions and malformed strings still fail the decode.
"""

from vkwire.objects.account import Account, City, Country, UserRef
from vkwire.objects.document import Document, DocumentPreview, DocumentType
from vkwire.objects.newsfeed import HistoryItem, NewsAttachment, NewsFeed, NewsItem
from vkwire.objects.photo import Album, Photo, PhotoSize
from vkwire.objects.poll import GradientPoint, Poll, PollAnswer, PollBackground

__all__ = [
    "Account",
    "Album",
    "City",
    "Country",
    "Document",
    "DocumentPreview",
    "DocumentType",
    "GradientPoint",
    "HistoryItem",
    "NewsAttachment",
    "NewsFeed",
    "NewsItem",
    "Photo",
    "PhotoSize",
    "Poll",
    "PollAnswer",
    "PollBackground",
    "UserRef",
]
