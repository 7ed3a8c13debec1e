"""Account profile info (``account.getProfileInfo``)."""

from __future__ import annotations

from vkwire.domain.scalars import OptWireInt32, WireInt64
from vkwire.objects.base import VkObject


class UserRef(VkObject):
    id: WireInt64
    first_name: str
    last_name: str


class Country(VkObject):
    id: WireInt64
    title: str


class City(VkObject):
    id: WireInt64
    title: str


class Account(VkObject):
    first_name: str
    last_name: str
    maiden_name: str | None = None
    screen_name: str | None = None
    # 1 female, 2 male, 0 unspecified
    sex: OptWireInt32 = None
    # 0-8, see the API docs for the meaning of each code
    relation: OptWireInt32 = None
    relation_partner: UserRef | None = None
    relation_pending: OptWireInt32 = None
    relation_requests: list[UserRef] | None = None
    # D.M.YYYY, or D.M when the year is hidden
    bdate: str | None = None
    bdate_visibility: OptWireInt32 = None
    home_town: str | None = None
    country: Country | None = None
    city: City | None = None
    status: str | None = None
    phone: str | None = None
