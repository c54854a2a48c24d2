"""Active and favorite namespace tracking.

Keeps the active namespace plus a bounded, most-recent-first list of
favorite namespaces, as stored in a context configuration file.
"""

from __future__ import annotations

import threading
from typing import Any, Protocol

import structlog

logger = structlog.get_logger(__name__)

# Number of favorite namespaces kept in the configuration
MAX_FAVORITES = 9

DEFAULT_NAMESPACE = "default"
ALL_NAMESPACES = "all"
BLANK_NAMESPACE = ""


class NamespaceValidator(Protocol):
    """Live connection able to tell whether a namespace exists."""

    def is_valid_namespace(self, namespace: str) -> bool: ...


class FavoriteNamespaces:
    """Active namespace and favorites of one context.

    Attributes:
        active: Active namespace. ``"all"`` (or empty) means all namespaces.
        lock_favorites: When set, favorites never change.
        favorites: Favorite namespaces, most recent first.

    Example:
        >>> ns = FavoriteNamespaces()
        >>> ns.set_active("kube-system")
        >>> ns.favorites
        ['kube-system', 'default']
    """

    def __init__(
        self,
        active: str = DEFAULT_NAMESPACE,
        *,
        lock_favorites: bool = False,
        favorites: list[str] | None = None,
    ) -> None:
        if active == BLANK_NAMESPACE:
            active = DEFAULT_NAMESPACE
        self.active = active
        self.lock_favorites = lock_favorites
        self.favorites = list(favorites) if favorites is not None else [DEFAULT_NAMESPACE]
        self._lock = threading.RLock()

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> FavoriteNamespaces:
        """Build from the ``namespace`` section of a context configuration."""
        data = data or {}
        return cls(
            active=data.get("active", DEFAULT_NAMESPACE),
            lock_favorites=bool(data.get("lockFavorites", False)),
            favorites=data.get("favorites"),
        )

    def to_dict(self) -> dict[str, Any]:
        with self._lock:
            return {
                "active": self.active,
                "lockFavorites": self.lock_favorites,
                "favorites": list(self.favorites),
            }

    @property
    def is_all_namespaces(self) -> bool:
        return self.active in (ALL_NAMESPACES, BLANK_NAMESPACE)

    def set_active(self, namespace: str) -> None:
        """Make ``namespace`` active and record it as the latest favorite.

        A blank namespace selects all namespaces.
        """
        with self._lock:
            if namespace == BLANK_NAMESPACE:
                namespace = ALL_NAMESPACES
            self.active = namespace
            if not self.lock_favorites:
                self._add_favorite(namespace)

    def merge(self, old: FavoriteNamespaces) -> None:
        """Append favorites from a previous configuration that are missing here."""
        with self._lock:
            if self.lock_favorites:
                return
            for namespace in old.favorites:
                if namespace not in self.favorites:
                    self.favorites.append(namespace)
            self._trim()

    def validate(self, conn: NamespaceValidator | None) -> None:
        """Drop favorites the live connection no longer knows about.

        Nothing is checked without a connection or when the active namespace
        itself is not valid there.
        """
        with self._lock:
            if conn is None or not conn.is_valid_namespace(self.active):
                return
            for namespace in list(self.favorites):
                if not conn.is_valid_namespace(namespace):
                    logger.debug(
                        "invalid_favorite_found",
                        namespace=namespace,
                        all_namespaces=self.is_all_namespaces,
                    )
                    self._remove_favorite(namespace)
            self._trim()

    def _add_favorite(self, namespace: str) -> None:
        if namespace in self.favorites:
            return
        self.favorites = [namespace, *self.favorites][:MAX_FAVORITES]

    def _remove_favorite(self, namespace: str) -> None:
        if self.lock_favorites:
            return
        if namespace in self.favorites:
            self.favorites.remove(namespace)

    def _trim(self) -> None:
        if len(self.favorites) > MAX_FAVORITES:
            logger.debug("favorites_trimmed", max=MAX_FAVORITES)
            self.favorites = self.favorites[:MAX_FAVORITES]
