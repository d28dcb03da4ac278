"""Domain 엔티티/값 객체 테스트."""

from __future__ import annotations

from waste_guide.domain.entities import CachedEntry, CatalogItem, strip_markup
from waste_guide.domain.value_objects import CacheSnapshot, ItemDescription


class TestCatalogItem:
    def test_plain_notes(self) -> None:
        item = CatalogItem(
            id=1,
            title="Paint",
            notes="<p>Liquid paint is <b>hazardous</b>&nbsp;waste.</p><p>Dry paint &amp; cans: mixed waste.</p>",
        )

        assert item.plain_notes == "Liquid paint is hazardous waste. Dry paint & cans: mixed waste."

    def test_blank_notes(self) -> None:
        assert CatalogItem(id=1, title="Paint", notes="<p> </p>").plain_notes is None
        assert CatalogItem(id=1, title="Paint").plain_notes is None

    def test_strip_markup_collapses_whitespace(self) -> None:
        assert strip_markup("a<br/>b\n\n c") == "a b c"


class TestCachedEntry:
    def test_from_item_keeps_projection_fields(self) -> None:
        item = CatalogItem(id="x", title="Glass jar", synonyms=("Jam jar",), notes="n")

        assert CachedEntry.from_item(item) == CachedEntry(
            id="x", title="Glass jar", synonyms=("Jam jar",)
        )

    def test_from_item_rejects_missing_id_or_title(self) -> None:
        assert CachedEntry.from_item(CatalogItem(id=None, title="Glass jar")) is None
        assert CachedEntry.from_item(CatalogItem(id=1, title="")) is None


class TestCacheSnapshot:
    def test_expiry_boundary(self) -> None:
        """나이가 TTL을 넘어야 만료 (TTL과 같으면 아직 유효)."""
        snapshot = CacheSnapshot(entries=(), fetched_at=1000.0)

        assert snapshot.is_expired(1099.0, 100) is False
        assert snapshot.is_expired(1100.0, 100) is False
        assert snapshot.is_expired(1100.5, 100) is True

    def test_age_never_negative(self) -> None:
        snapshot = CacheSnapshot(entries=(), fetched_at=1000.0)

        assert snapshot.age_seconds(900.0) == 0.0


class TestItemDescription:
    def test_blank(self) -> None:
        assert ItemDescription().is_blank is True
        assert ItemDescription(name=" ", material="\t").is_blank is True
        assert ItemDescription(category="Electronics").is_blank is False

    def test_summary_skips_empty_fields(self) -> None:
        assert ItemDescription(name="Battery", category="Electronics").summary() == (
            "Battery, Electronics"
        )
