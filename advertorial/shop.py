"""
Module SHOP — Produits, marque et publication de pages
Shopify Admin GraphQL API (requests)
"""
import logging, os, re
from typing import Any, Dict, List, Optional

import requests
from pydantic import BaseModel

from .errors import NotFoundError, PublishError
from .models import BrandDefaults, ProductFacts

log = logging.getLogger(__name__)

SHOP        = os.getenv("SHOPIFY_SHOP", "")
TOKEN       = os.getenv("SHOPIFY_ACCESS_TOKEN", "")
API_VERSION = os.getenv("SHOPIFY_API_VERSION", "2025-01")

_PRODUCTS_QUERY = """
query getProducts($first: Int!) {
  products(first: $first) {
    edges { node { id title handle description featuredImage { url } } }
  }
}"""

_PRODUCT_QUERY = """
query getProduct($id: ID!) {
  product(id: $id) { id title handle description featuredImage { url } }
}"""

_BRAND_QUERY = """
query getBrand {
  shop { name brand { colors { primary { background } } } }
}"""

_PAGE_CREATE = """
mutation pageCreate($page: PageCreateInput!) {
  pageCreate(page: $page) {
    page { id title handle onlineStoreUrl }
    userErrors { field message }
  }
}"""


class PublishedPage(BaseModel):
    id:  str
    url: str = ""


def page_handle(title: str) -> str:
    """'Why Glow Serum Works!' → 'why-glow-serum-works' (50 car. max)."""
    return re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")[:50] or "advertorial"


def _product(node: Dict[str, Any]) -> ProductFacts:
    return ProductFacts(
        id=node.get("id") or "",
        title=node.get("title") or "",
        handle=node.get("handle") or "",
        description=node.get("description") or "",
        image_url=(node.get("featuredImage") or {}).get("url"),
    )


class ShopClient:
    """Client Admin GraphQL d'une boutique. Aucun état hors configuration."""

    def __init__(self, shop: str = "", token: str = "", api_version: str = "", timeout: int = 15):
        self.shop        = shop or SHOP
        self.token       = token or TOKEN
        self.api_version = api_version or API_VERSION
        self.timeout     = timeout

    @property
    def endpoint(self) -> str:
        return f"https://{self.shop}/admin/api/{self.api_version}/graphql.json"

    def _graphql(self, query: str, variables: Optional[dict] = None) -> Dict[str, Any]:
        resp = requests.post(
            self.endpoint,
            json={"query": query, "variables": variables or {}},
            headers={"X-Shopify-Access-Token": self.token, "Content-Type": "application/json"},
            timeout=self.timeout,
        )
        resp.raise_for_status()
        body = resp.json()
        if body.get("errors"):
            raise requests.HTTPError(f"GraphQL : {body['errors']}")
        return body.get("data") or {}

    # ── Produits ──

    def list_products(self, first: int = 50) -> List[ProductFacts]:
        data = self._graphql(_PRODUCTS_QUERY, {"first": first})
        edges = ((data.get("products") or {}).get("edges")) or []
        return [_product(e["node"]) for e in edges if e.get("node")]

    def get_product(self, product_id: str) -> ProductFacts:
        """NotFoundError si la boutique répond sans produit ; les erreurs réseau/HTTP remontent telles quelles."""
        data = self._graphql(_PRODUCT_QUERY, {"id": product_id})
        node = data.get("product")
        if not node:
            raise NotFoundError(f"Produit introuvable : {product_id}")
        return _product(node)

    # ── Marque ──

    def get_brand(self) -> BrandDefaults:
        """Couleur/polices de marque ; défauts vides si la boutique ne les expose pas."""
        try:
            data = self._graphql(_BRAND_QUERY)
        except requests.RequestException as e:
            log.warning("Marque non récupérée : %s", e)
            return BrandDefaults()
        colors = (((data.get("shop") or {}).get("brand") or {}).get("colors") or {})
        primary = colors.get("primary") or []
        accent = primary[0].get("background") if primary and isinstance(primary[0], dict) else None
        return BrandDefaults(accent_color=accent)

    # ── Publication ──

    def create_page(self, title: str, html: str, handle: Optional[str] = None) -> PublishedPage:
        page = {"title": title, "handle": handle or page_handle(title), "body": html, "isPublished": True}
        try:
            data = self._graphql(_PAGE_CREATE, {"page": page})
        except requests.RequestException as e:
            raise PublishError(f"Publication impossible : {e}") from e
        result = data.get("pageCreate") or {}
        errors = result.get("userErrors") or []
        if errors:
            raise PublishError("Publication refusée : " + ", ".join(e.get("message", "?") for e in errors))
        created = result.get("page")
        if not created:
            raise PublishError("Publication impossible : aucune page retournée")
        return PublishedPage(id=created["id"], url=created.get("onlineStoreUrl") or "")
