"""
Tests API — catalogue, génération, sessions d'édition, publication
DB SQLite en mémoire + client boutique mocké via dependency_overrides.
"""
import sys, os, json
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unittest.mock import patch, MagicMock
import pytest
import requests
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from advertorial.api.main import app
from advertorial.api.routes.products import get_shop_client
from advertorial.api.sessions import SESSIONS, open_session
from advertorial.database import get_db
from advertorial.errors import NotFoundError, PublishError
from advertorial.models import Base, BrandDefaults, ProductFacts
from advertorial.shop import PublishedPage


PRODUCT = {"id": "gid://shopify/Product/1", "title": "Glow Serum", "handle": "glow-serum"}


# ── Fixtures ──────────────────────────────────────────────────────────────

@pytest.fixture
def shop():
    s = MagicMock()
    s.list_products.return_value = [ProductFacts(**PRODUCT)]
    s.get_product.return_value = ProductFacts(**PRODUCT)
    s.get_brand.return_value = BrandDefaults(accent_color="#112233")
    s.create_page.return_value = PublishedPage(id="gid://shopify/Page/9", url="https://demo/pages/glow")
    return s


@pytest.fixture
def client(shop):
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(bind=engine)

    def _db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _db
    app.dependency_overrides[get_shop_client] = lambda: shop
    yield TestClient(app)
    app.dependency_overrides.clear()


def _template(client, **extra):
    r = client.post("/api/generate/template", json={"archetype_id": "editorial", "product": PRODUCT,
                                                      "angle": "Desire", **extra})
    assert r.status_code == 200
    return r.json()


def _fake_ai(text):
    async def call(system, user):
        return text
    return call


# ── Catalogue ─────────────────────────────────────────────────────────────

class TestCatalog:
    def test_health(self, client):
        assert client.get("/health").json()["status"] == "ok"

    def test_catalog(self, client):
        data = client.get("/api/catalog").json()
        assert len(data) == 23
        assert all("schema" in e and e["label"] for e in data)

    def test_archetypes(self, client):
        assert len(client.get("/api/archetypes").json()) == 11


class TestProducts:
    def test_liste(self, client):
        assert client.get("/api/products").json()[0]["handle"] == "glow-serum"

    def test_detail_gid(self, client, shop):
        r = client.get("/api/products/gid://shopify/Product/1")
        assert r.status_code == 200
        shop.get_product.assert_called_once_with("gid://shopify/Product/1")

    def test_introuvable(self, client, shop):
        shop.get_product.side_effect = NotFoundError("Produit introuvable : x")
        assert client.get("/api/products/x").status_code == 404

    def test_boutique_injoignable(self, client, shop):
        shop.list_products.side_effect = RuntimeError("down")
        assert client.get("/api/products").status_code == 502

    def test_detail_boutique_injoignable(self, client, shop):
        shop.get_product.side_effect = requests.ConnectionError("refused")
        r = client.get("/api/products/gid://shopify/Product/1")
        assert r.status_code == 502
        assert "injoignable" in r.json()["detail"]

    def test_marque(self, client):
        data = client.get("/api/brand").json()
        assert data["theme"]["accent_color"] == "#112233"


# ── Génération ────────────────────────────────────────────────────────────

class TestGenerate:
    def test_template(self, client):
        data = _template(client)
        assert data["session_id"]
        assert data["document"]["provenance"] == "editorial"
        assert data["document"]["blocks"][0]["block_type"] == "headline"
        assert '<div class="adv-content">' in data["html"]

    def test_template_theme(self, client):
        data = _template(client, theme={"accent_color": "#ff0000"})
        assert "#ff0000" in data["html"]

    def test_template_sans_produit(self, client):
        r = client.post("/api/generate/template", json={"archetype_id": "editorial"})
        assert r.status_code == 422

    def test_ai(self, client):
        text = json.dumps([{"type": "headline", "text": "Titre IA"}, {"type": "cta"}])
        with patch("advertorial.ai_generate._anthropic", new=_fake_ai(text)):
            r = client.post("/api/generate/ai", json={
                "brief": {"target_customer": "Femmes", "style_preset": "C"}, "product": PRODUCT})
        assert r.status_code == 200
        data = r.json()
        assert data["superseded"] is False
        assert data["document"]["title"] == "Titre IA"
        assert data["document"]["variant"] == "C"

    def test_ai_sans_preset(self, client):
        r = client.post("/api/generate/ai", json={"brief": {"target_customer": "Femmes"}, "product": PRODUCT})
        assert r.status_code == 400
        assert r.json()["detail"]["field"] == "style_preset"

    def test_ai_sans_produit(self, client):
        r = client.post("/api/generate/ai", json={"brief": {"target_customer": "x", "style_preset": "A"}})
        assert r.status_code == 400
        assert r.json()["detail"]["field"] == "product"

    def test_ai_reponse_malformee(self, client):
        with patch("advertorial.ai_generate._anthropic", new=_fake_ai("pas du json")):
            r = client.post("/api/generate/ai", json={
                "brief": {"target_customer": "x", "style_preset": "A"}, "product": PRODUCT})
        assert r.status_code == 502

    def test_ai_echecs_sans_session_orpheline(self, client):
        avant = len(SESSIONS)
        client.post("/api/generate/ai", json={"brief": {"target_customer": "x"}, "product": PRODUCT})
        client.post("/api/generate/ai", json={"brief": {"target_customer": "x", "style_preset": "A"}})
        with patch("advertorial.ai_generate._anthropic", new=_fake_ai("pas du json")):
            r = client.post("/api/generate/ai", json={
                "brief": {"target_customer": "x", "style_preset": "A"}, "product": PRODUCT})
        assert r.status_code == 502
        assert len(SESSIONS) == avant

    def test_ai_succes_enregistre_la_session(self, client):
        text = json.dumps([{"type": "headline", "text": "Titre IA"}])
        with patch("advertorial.ai_generate._anthropic", new=_fake_ai(text)):
            r = client.post("/api/generate/ai", json={
                "brief": {"target_customer": "x", "style_preset": "A"}, "product": PRODUCT})
        sid = r.json()["session_id"]
        assert sid in SESSIONS
        assert client.get(f"/api/sessions/{sid}").json()["document"]["title"] == "Titre IA"

    def test_ai_session_inconnue(self, client):
        r = client.post("/api/generate/ai", json={
            "brief": {"target_customer": "x", "style_preset": "A"}, "product": PRODUCT, "session_id": "nope"})
        assert r.status_code == 404


# ── Rendu + édition ───────────────────────────────────────────────────────

class TestEditor:
    def test_render_sans_session(self, client):
        r = client.post("/api/render", json={"blocks": [
            {"block_type": "headline", "id": "h1", "seed": {"text": "Bonjour"}},
            {"block_type": "divider", "id": "d1"},
        ]})
        data = r.json()
        assert "Bonjour" in data["html"]
        assert set(data["blocks"]) == {"h1", "d1"}

    def test_render_ids_dupliques(self, client):
        r = client.post("/api/render", json={"blocks": [
            {"block_type": "headline", "id": "x", "seed": {"text": "Premier"}},
            {"block_type": "headline", "id": "x", "seed": {"text": "Second"}},
        ]})
        data = r.json()
        assert len(data["blocks"]) == 2
        assert "x" in data["blocks"]
        assert "Premier" in data["blocks"]["x"]
        assert any("Second" in html for html in data["blocks"].values())

    def test_render_type_inconnu(self, client):
        r = client.post("/api/render", json={"blocks": [{"block_type": "carousel"}]})
        assert r.status_code == 422

    def test_insert_puis_update(self, client):
        sid = _template(client)["session_id"]
        r = client.post(f"/api/sessions/{sid}/apply", json={"op": "insert_after", "index": 0, "kind": "note"})
        new_id = r.json()["new_id"]
        assert r.json()["document"]["blocks"][1]["id"] == new_id
        r = client.post(f"/api/sessions/{sid}/apply", json={"op": "update", "id": new_id,
                                                            "patch": {"text": "Note éditée"}})
        assert "Note éditée" in r.json()["html"]

    def test_changement_type_refuse(self, client):
        data = _template(client)
        bid = data["document"]["blocks"][0]["id"]
        r = client.post(f"/api/sessions/{data['session_id']}/apply",
                        json={"op": "update", "id": bid, "patch": {"type": "text"}})
        assert r.status_code == 400

    def test_kind_inconnu(self, client):
        sid = _template(client)["session_id"]
        r = client.post(f"/api/sessions/{sid}/apply", json={"op": "insert_after", "kind": "carousel"})
        assert r.status_code == 400

    def test_operation_inconnue(self, client):
        sid = _template(client)["session_id"]
        assert client.post(f"/api/sessions/{sid}/apply", json={"op": "explode"}).status_code == 400

    def test_deplacement(self, client):
        data = _template(client)
        ids = [b["id"] for b in data["document"]["blocks"]]
        r = client.post(f"/api/sessions/{data['session_id']}/apply", json={"op": "move_down", "index": 0})
        assert [b["id"] for b in r.json()["document"]["blocks"]][:2] == [ids[1], ids[0]]

    def test_session_inconnue(self, client):
        assert client.post("/api/sessions/nope/apply", json={"op": "delete", "id": "x"}).status_code == 404

    def test_session_sans_document(self, client):
        s = open_session()
        r = client.post(f"/api/sessions/{s.session_id}/apply", json={"op": "delete", "id": "x"})
        assert r.status_code == 409

    def test_champs_requis(self, client):
        sid = _template(client)["session_id"]
        assert client.post(f"/api/sessions/{sid}/apply", json={"op": "insert_after"}).status_code == 400
        assert client.post(f"/api/sessions/{sid}/apply", json={"op": "duplicate"}).status_code == 400
        assert client.post(f"/api/sessions/{sid}/apply", json={"op": "update"}).status_code == 400
        assert client.post(f"/api/sessions/{sid}/apply", json={"op": "add_item", "id": "x"}).status_code == 400

    def test_new_id_absent_hors_insertion(self, client):
        data = _template(client)
        r = client.post(f"/api/sessions/{data['session_id']}/apply", json={"op": "duplicate", "index": 0})
        assert r.json()["new_id"] is None

    def test_apercu_bloc(self, client):
        data = _template(client)
        bid = data["document"]["blocks"][0]["id"]
        r = client.get(f"/api/sessions/{data['session_id']}/blocks/{bid}")
        assert "adv-headline" in r.json()["html"]
        assert client.get(f"/api/sessions/{data['session_id']}/blocks/zz").status_code == 404

    def test_theme(self, client):
        sid = _template(client)["session_id"]
        r = client.put(f"/api/sessions/{sid}/theme", json={"heading_size": 500, "accent_color": "#00ff00"})
        html = r.json()["html"]
        assert "#00ff00" in html
        assert "--adv-size-h1:      42px" in html

    def test_fermeture(self, client):
        sid = _template(client)["session_id"]
        assert client.delete(f"/api/sessions/{sid}").json()["ok"] is True
        assert client.get(f"/api/sessions/{sid}").status_code == 404


# ── Publication ───────────────────────────────────────────────────────────

class TestPublish:
    def test_publication(self, client, shop):
        sid = _template(client)["session_id"]
        r = client.post(f"/api/sessions/{sid}/publish", json={"shop": "demo.myshopify.com", "product": PRODUCT})
        assert r.status_code == 200
        rec = r.json()
        assert rec["shopify_page_url"] == "https://demo/pages/glow"
        detail = client.get(f"/api/advertorials/{rec['id']}").json()
        assert '<div class="adv-content">' in detail["content"]
        assert detail["blocks"][0]["type"] == "headline"
        assert len(client.get("/api/advertorials", params={"shop": "demo.myshopify.com"}).json()) == 1

    def test_titre_personnalise(self, client, shop):
        sid = _template(client)["session_id"]
        client.post(f"/api/sessions/{sid}/publish",
                    json={"shop": "demo", "product": PRODUCT, "title": "Mon titre"})
        assert shop.create_page.call_args[0][0] == "Mon titre"

    def test_echec_publication(self, client, shop):
        shop.create_page.side_effect = PublishError("Publication refusée : Handle pris")
        sid = _template(client)["session_id"]
        r = client.post(f"/api/sessions/{sid}/publish", json={"shop": "demo", "product": PRODUCT})
        assert r.status_code == 502
        assert client.get("/api/advertorials").json() == []
        assert client.get(f"/api/sessions/{sid}").status_code == 200

    def test_advertorial_introuvable(self, client):
        assert client.get("/api/advertorials/nope").status_code == 404

    def test_suppression_historique(self, client, shop):
        sid = _template(client)["session_id"]
        rec = client.post(f"/api/sessions/{sid}/publish", json={"shop": "demo", "product": PRODUCT}).json()
        assert client.delete(f"/api/advertorials/{rec['id']}").json()["ok"] is True
        assert client.get(f"/api/advertorials/{rec['id']}").status_code == 404
        assert client.get("/api/advertorials").json() == []
        assert client.delete(f"/api/advertorials/{rec['id']}").status_code == 404
