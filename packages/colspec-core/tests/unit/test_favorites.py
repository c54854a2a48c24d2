"""Unit tests for favorite namespace tracking."""

from __future__ import annotations

from colspec_core.favorites import (
    ALL_NAMESPACES,
    DEFAULT_NAMESPACE,
    MAX_FAVORITES,
    FavoriteNamespaces,
)


class FakeConnection:
    """Connection that knows a fixed set of namespaces."""

    def __init__(self, *namespaces: str) -> None:
        self.namespaces = set(namespaces)

    def is_valid_namespace(self, namespace: str) -> bool:
        return namespace in self.namespaces


class TestConstruction:
    """Tests for defaults and (de)serialization."""

    def test_defaults(self) -> None:
        ns = FavoriteNamespaces()
        assert ns.active == DEFAULT_NAMESPACE
        assert ns.favorites == [DEFAULT_NAMESPACE]
        assert ns.lock_favorites is False

    def test_blank_active_means_default(self) -> None:
        assert FavoriteNamespaces("").active == DEFAULT_NAMESPACE

    def test_round_trip_through_dict(self) -> None:
        data = {"active": "kube-system", "lockFavorites": True, "favorites": ["a", "b"]}
        ns = FavoriteNamespaces.from_dict(data)
        assert ns.to_dict() == data

    def test_from_empty_dict(self) -> None:
        assert FavoriteNamespaces.from_dict(None).to_dict() == {
            "active": DEFAULT_NAMESPACE,
            "lockFavorites": False,
            "favorites": [DEFAULT_NAMESPACE],
        }


class TestSetActive:
    """Tests for set_active()."""

    def test_new_namespace_becomes_first_favorite(self) -> None:
        ns = FavoriteNamespaces()
        ns.set_active("kube-system")
        assert ns.active == "kube-system"
        assert ns.favorites == ["kube-system", DEFAULT_NAMESPACE]

    def test_known_favorite_is_not_duplicated(self) -> None:
        ns = FavoriteNamespaces(favorites=["a", "b"])
        ns.set_active("b")
        assert ns.favorites == ["a", "b"]

    def test_blank_selects_all_namespaces(self) -> None:
        ns = FavoriteNamespaces()
        ns.set_active("")
        assert ns.active == ALL_NAMESPACES
        assert ns.is_all_namespaces
        assert ns.favorites[0] == ALL_NAMESPACES

    def test_favorites_are_bounded(self) -> None:
        ns = FavoriteNamespaces()
        for i in range(MAX_FAVORITES + 3):
            ns.set_active(f"ns-{i}")

        assert len(ns.favorites) == MAX_FAVORITES
        assert ns.favorites[0] == f"ns-{MAX_FAVORITES + 2}"

    def test_locked_favorites_do_not_change(self) -> None:
        ns = FavoriteNamespaces(lock_favorites=True, favorites=["a"])
        ns.set_active("b")
        assert ns.active == "b"
        assert ns.favorites == ["a"]


class TestMerge:
    """Tests for merge()."""

    def test_appends_missing_favorites(self) -> None:
        ns = FavoriteNamespaces(favorites=["a", "b"])
        ns.merge(FavoriteNamespaces(favorites=["b", "c"]))
        assert ns.favorites == ["a", "b", "c"]

    def test_merge_trims(self) -> None:
        ns = FavoriteNamespaces(favorites=[f"new-{i}" for i in range(5)])
        ns.merge(FavoriteNamespaces(favorites=[f"old-{i}" for i in range(10)]))
        assert len(ns.favorites) == MAX_FAVORITES
        assert ns.favorites[:5] == [f"new-{i}" for i in range(5)]

    def test_locked_merge_is_noop(self) -> None:
        ns = FavoriteNamespaces(lock_favorites=True, favorites=["a"])
        ns.merge(FavoriteNamespaces(favorites=["b"]))
        assert ns.favorites == ["a"]


class TestValidate:
    """Tests for validate()."""

    def test_drops_unknown_favorites(self) -> None:
        ns = FavoriteNamespaces("default", favorites=["default", "gone", "kube-system"])
        ns.validate(FakeConnection("default", "kube-system"))
        assert ns.favorites == ["default", "kube-system"]

    def test_no_connection_is_noop(self) -> None:
        ns = FavoriteNamespaces(favorites=["gone"])
        ns.validate(None)
        assert ns.favorites == ["gone"]

    def test_invalid_active_namespace_skips_check(self) -> None:
        ns = FavoriteNamespaces("gone", favorites=["gone", "other"])
        ns.validate(FakeConnection("default"))
        assert ns.favorites == ["gone", "other"]

    def test_locked_favorites_survive_validation(self) -> None:
        ns = FavoriteNamespaces("default", lock_favorites=True, favorites=["default", "gone"])
        ns.validate(FakeConnection("default"))
        assert ns.favorites == ["default", "gone"]
