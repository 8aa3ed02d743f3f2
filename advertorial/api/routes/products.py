"""
GET /api/products       — produits de la boutique
GET /api/products/{id}  — un produit (404 si inconnu, 502 si boutique injoignable)
GET /api/brand          — couleur/polices de marque
"""
import requests
from fastapi import APIRouter, Depends, HTTPException

from ...errors import NotFoundError
from ...shop import ShopClient

router = APIRouter(prefix="/api", tags=["Products"])


def get_shop_client() -> ShopClient:
    return ShopClient()


@router.get("/products")
def api_products(client: ShopClient = Depends(get_shop_client)):
    try:
        return [p.model_dump() for p in client.list_products()]
    except Exception as e:
        raise HTTPException(502, f"Boutique injoignable : {e}")


@router.get("/products/{product_id:path}")
def api_product(product_id: str, client: ShopClient = Depends(get_shop_client)):
    try:
        return client.get_product(product_id).model_dump()
    except NotFoundError as e:
        raise HTTPException(404, str(e))
    except requests.RequestException as e:
        raise HTTPException(502, f"Boutique injoignable : {e}")


@router.get("/brand")
def api_brand(client: ShopClient = Depends(get_shop_client)):
    brand = client.get_brand()
    return {**brand.model_dump(), "theme": brand.to_theme().model_dump()}
