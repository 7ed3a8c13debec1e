"""Mapping Python function names onto API method names.

The API names methods ``category.mixedCase``; Python code uses
``snake_case``. ``appWidgets.getAppImageUploadServer`` is therefore
reached as ``client.category("app_widgets").get_app_image_upload_server``.

Names that collide with Python keywords take a trailing underscore:
``photos.move`` is ``client.category("photos").move_``. The ``execute``
method has no category and is exposed directly on the clients.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from vkwire.domain.errors import InvalidMethodName

if TYPE_CHECKING:
    from collections.abc import Mapping

CATEGORIES: frozenset[str] = frozenset(
    {
        "account",
        "ads",
        "app_widgets",
        "apps",
        "auth",
        "board",
        "database",
        "docs",
        "fave",
        "friends",
        "gifts",
        "groups",
        "leads",
        "likes",
        "market",
        "messages",
        "newsfeed",
        "notes",
        "notifications",
        "orders",
        "pages",
        "photos",
        "places",
        "polls",
        "search",
        "secure",
        "stats",
        "status",
        "storage",
        "stories",
        "streaming",
        "users",
        "utils",
        "video",
        "wall",
        "widgets",
    }
)


def to_mixed_case(name: str) -> str:
    """``get_app_image_upload_server`` -> ``getAppImageUploadServer``.

    A trailing underscore used to dodge a keyword is dropped.
    """
    stripped = name.rstrip("_")
    if not stripped or not name.isidentifier():
        raise InvalidMethodName(f"not a method name: {name!r}")
    head, *rest = [part for part in stripped.split("_") if part]
    return head.lower() + "".join(part.capitalize() for part in rest)


def method_name(category: str, function: str) -> str:
    """Full API method name for *function* in *category*."""
    if category not in CATEGORIES:
        raise InvalidMethodName(f"unknown method category: {category!r}")
    return f"{to_mixed_case(category)}.{to_mixed_case(function)}"


class MethodCategory:
    """Attribute-style access to every method of one category.

    Each attribute is a callable ``(params=None, target=Any)`` forwarding
    to the owning client's ``call_method``. With an async client the
    callable returns an awaitable.
    """

    def __init__(self, client: Any, category: str) -> None:
        if category not in CATEGORIES:
            raise InvalidMethodName(f"unknown method category: {category!r}")
        self._client = client
        self._category = category

    @property
    def name(self) -> str:
        return self._category

    def __getattr__(self, function: str) -> Any:
        if function.startswith("__"):
            raise AttributeError(function)
        full_name = method_name(self._category, function)

        def call(params: Mapping[str, Any] | None = None, target: Any = Any) -> Any:
            return self._client.call_method(full_name, params, target)

        call.__name__ = function
        call.__qualname__ = f"{self._category}.{function}"
        return call

    def __repr__(self) -> str:
        return f"MethodCategory({self._category!r})"
