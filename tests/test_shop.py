"""
Tests client boutique — requests.post mocké, aucune requête réelle
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unittest.mock import patch, MagicMock
import pytest
import requests

from advertorial.errors import NotFoundError, PublishError
from advertorial.shop import ShopClient, page_handle


def _resp(data=None, errors=None, status=200):
    r = MagicMock()
    r.status_code = status
    body = {"data": data or {}}
    if errors:
        body["errors"] = errors
    r.json.return_value = body
    if status >= 400:
        r.raise_for_status.side_effect = requests.HTTPError(f"HTTP {status}")
    return r


@pytest.fixture
def client():
    return ShopClient(shop="demo.myshopify.com", token="shpat_test", api_version="2025-01")


class TestProduits:
    def test_liste(self, client):
        data = {"products": {"edges": [
            {"node": {"id": "gid://shopify/Product/1", "title": "Glow", "handle": "glow",
                      "description": "d", "featuredImage": {"url": "https://cdn/glow.jpg"}}},
            {"node": {"id": "gid://shopify/Product/2", "title": "Mist", "handle": "mist", "featuredImage": None}},
        ]}}
        with patch("advertorial.shop.requests.post", return_value=_resp(data)) as post:
            products = client.list_products()
        assert [p.handle for p in products] == ["glow", "mist"]
        assert products[0].image_url == "https://cdn/glow.jpg"
        assert products[1].image_url is None
        url = post.call_args[0][0]
        assert url == "https://demo.myshopify.com/admin/api/2025-01/graphql.json"
        assert post.call_args[1]["headers"]["X-Shopify-Access-Token"] == "shpat_test"

    def test_produit(self, client):
        data = {"product": {"id": "gid://shopify/Product/1", "title": "Glow", "handle": "glow"}}
        with patch("advertorial.shop.requests.post", return_value=_resp(data)):
            assert client.get_product("gid://shopify/Product/1").title == "Glow"

    def test_produit_introuvable(self, client):
        with patch("advertorial.shop.requests.post", return_value=_resp({"product": None})):
            with pytest.raises(NotFoundError):
                client.get_product("gid://shopify/Product/404")

    def test_produit_erreur_http_pas_introuvable(self, client):
        with patch("advertorial.shop.requests.post", return_value=_resp(status=500)):
            with pytest.raises(requests.HTTPError):
                client.get_product("gid://shopify/Product/1")

    def test_produit_boutique_injoignable(self, client):
        with patch("advertorial.shop.requests.post", side_effect=requests.ConnectionError("refused")):
            with pytest.raises(requests.ConnectionError):
                client.get_product("gid://shopify/Product/1")


class TestMarque:
    def test_couleur_primaire(self, client):
        data = {"shop": {"name": "Demo", "brand": {"colors": {"primary": [{"background": "#112233"}]}}}}
        with patch("advertorial.shop.requests.post", return_value=_resp(data)):
            brand = client.get_brand()
        assert brand.accent_color == "#112233"
        assert brand.to_theme().accent_color == "#112233"

    def test_sans_marque(self, client):
        with patch("advertorial.shop.requests.post", return_value=_resp({"shop": {"brand": None}})):
            assert client.get_brand().accent_color is None

    def test_erreur_reseau_defauts(self, client):
        with patch("advertorial.shop.requests.post", side_effect=requests.ConnectionError("down")):
            assert client.get_brand().accent_color is None


class TestPublication:
    def test_page_creee(self, client):
        data = {"pageCreate": {"page": {"id": "gid://shopify/Page/9", "onlineStoreUrl": "https://demo/pages/x"},
                               "userErrors": []}}
        with patch("advertorial.shop.requests.post", return_value=_resp(data)) as post:
            page = client.create_page("Why Glow Works!", "<p>x</p>")
        assert page.id == "gid://shopify/Page/9"
        assert page.url == "https://demo/pages/x"
        sent = post.call_args[1]["json"]["variables"]["page"]
        assert sent["handle"] == "why-glow-works"
        assert sent["body"] == "<p>x</p>"

    def test_user_errors(self, client):
        data = {"pageCreate": {"page": None, "userErrors": [{"field": ["handle"], "message": "Handle pris"}]}}
        with patch("advertorial.shop.requests.post", return_value=_resp(data)):
            with pytest.raises(PublishError, match="Handle pris"):
                client.create_page("Titre", "<p>x</p>")

    def test_erreurs_graphql(self, client):
        with patch("advertorial.shop.requests.post", return_value=_resp(errors=[{"message": "Access denied"}])):
            with pytest.raises(PublishError):
                client.create_page("Titre", "<p>x</p>")

    def test_timeout(self, client):
        with patch("advertorial.shop.requests.post", side_effect=requests.Timeout("lent")):
            with pytest.raises(PublishError):
                client.create_page("Titre", "<p>x</p>")

    def test_sans_page(self, client):
        with patch("advertorial.shop.requests.post", return_value=_resp({"pageCreate": {"userErrors": []}})):
            with pytest.raises(PublishError):
                client.create_page("Titre", "<p>x</p>")


class TestHandle:
    def test_slug(self):
        assert page_handle("Why Glow Serum Works!") == "why-glow-serum-works"

    def test_vide(self):
        assert page_handle("!!!") == "advertorial"

    def test_longueur(self):
        assert len(page_handle("a" * 80)) == 50
