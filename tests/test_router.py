"""
Tests router FastAPI — catalogue, résolution, validation, preview.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from fastapi.testclient import TestClient

from template_builder.api import create_app
from template_builder.core import BlockType, blank_template, new_block_from_type
from template_builder.persistence import to_payload


@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"


def test_catalog(client):
    r = client.get("/template-builder/catalog")
    assert r.status_code == 200
    data = r.json()
    assert len(data["blocks"]) == len(BlockType)
    assert {c["id"] for c in data["categories"]} >= {"articles", "hero", "layout"}
    grid = next(b for b in data["blocks"] if b["type"] == "article-grid")
    assert grid["default_variant"] == "grid-1"


def test_variants(client):
    r = client.get("/template-builder/catalog/article-grid/variants")
    assert r.status_code == 200
    data = r.json()
    assert data["defaultVariant"] == "grid-1"
    assert len(data["variants"]) == 6
    assert data["variants"][0]["default_config"]["grid"]["columns"]["desktop"] == 3


def test_variants_unknown_type(client):
    assert client.get("/template-builder/catalog/mystery/variants").status_code == 404


def test_resolve(client):
    r = client.post("/template-builder/resolve", json={
        "type": "article-grid", "variant": "grid-1", "overrides": {"card": {"style": "flat"}},
    })
    config = r.json()["config"]
    assert config["card"] == {"style": "flat"}
    assert config["image"]["aspectRatio"] == "16:9"


def test_resolve_unknown_variant(client):
    r = client.post("/template-builder/resolve", json={"type": "article-grid", "variant": "nope", "overrides": {"a": 1}})
    assert r.json() == {"config": {"a": 1}}


def test_validate_ok(client):
    assert client.post("/template-builder/validate", json=to_payload(blank_template())).json() == {"valid": True}


def test_validate_missing_sections(client):
    data = client.post("/template-builder/validate", json={"id": "t1"}).json()
    assert data["valid"] is False
    assert "sections" in data["error"]


def test_validate_bad_block(client):
    payload = {"id": "t1", "sections": [{"id": "s1", "blocks": [{"id": "b1", "type": "mystery", "variant": "v"}]}]}
    assert client.post("/template-builder/validate", json=payload).json()["valid"] is False


def test_preview(client):
    tpl = blank_template()
    tpl.sections[0].blocks.append(new_block_from_type("big-hero", "hero-classic"))
    r = client.post("/template-builder/preview", json=to_payload(tpl))
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert f'data-section-id="{tpl.sections[0].id}"' in r.text
    assert "Big Hero" in r.text


def test_preview_invalid(client):
    assert client.post("/template-builder/preview", json={"id": "t1"}).status_code == 422
