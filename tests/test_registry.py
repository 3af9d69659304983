"""
Tests registry des blocs — catalogue, variants, catégories.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from template_builder.blocks import BLOCK_CATALOG, BlockRegistry, Registry, default_registry
from template_builder.blocks.base import BlockMeta, BlockVariant
from template_builder.core import BlockType
from template_builder.errors import UnknownBlockType


@pytest.fixture
def registry():
    return default_registry()


def test_every_block_type_has_catalog_entry(registry):
    for block_type in BlockType:
        assert registry.get_block_meta(block_type) is not None, block_type


def test_catalog_has_no_duplicates():
    types = [m.type for m in BLOCK_CATALOG]
    assert len(types) == len(set(types)) == len(BlockType)


def test_default_variant_listed_in_variants(registry):
    for meta in registry.all_blocks():
        assert meta.default_variant in meta.variants, meta.type


def test_preset_types_resolve_default_variant(registry):
    expected = {
        "article-grid": "grid-1",
        "article-list": "list-1",
        "article-slider": "slider-1",
        "big-hero": "hero-classic",
    }
    for block_type, variant in expected.items():
        entry = registry.get_default_variant(block_type)
        assert entry is not None
        assert entry.id == variant
        assert entry.default_config


def test_article_grid_has_six_variants(registry):
    assert [v.id for v in registry.get_block_variants("article-grid")] == [f"grid-{i}" for i in range(1, 7)]


def test_lookup_accepts_enum_and_string(registry):
    assert registry.get_block_meta("big-hero") is registry.get_block_meta(BlockType.BIG_HERO)


def test_unknown_type_returns_none(registry):
    assert registry.get_block_meta("mystery") is None
    assert registry.get_variant("mystery", "v1") is None
    assert registry.get_block_variants("mystery") == []
    assert registry.default_variant_name("mystery") is None


def test_unknown_variant_returns_none(registry):
    assert registry.get_variant("article-grid", "grid-42") is None


def test_require_block_meta_raises(registry):
    with pytest.raises(UnknownBlockType, match="mystery"):
        registry.require_block_meta("mystery")


def test_has_data_source(registry):
    assert registry.has_data_source("article-grid") is True
    assert registry.has_data_source("spacer") is False


def test_blocks_by_category(registry):
    hero = [m.type for m in registry.blocks_by_category("hero")]
    assert BlockType.BIG_HERO in hero
    assert all(m.category == "hero" for m in registry.blocks_by_category("hero"))


def test_categories_cover_catalog(registry):
    ids = {c["id"] for c in registry.categories()}
    assert {m.category for m in registry.all_blocks()} <= ids


def test_display_name_language(registry):
    meta = registry.get_block_meta("article-grid")
    assert meta.display_name() == "Article Grid"
    assert meta.display_name("ar") == "شبكة المقالات"


def test_custom_registry_satisfies_protocol():
    meta = BlockMeta(type="heading", name="Title", category="layout", default_variant="h1", variants=["h1"])
    custom = BlockRegistry(catalog=[meta], presets={BlockType.HEADING: [BlockVariant(id="h1", name="H1", default_config={"level": 1})]})
    assert isinstance(custom, Registry)
    assert custom.get_default_variant("heading").default_config == {"level": 1}
    assert custom.get_block_meta("article-grid") is None
