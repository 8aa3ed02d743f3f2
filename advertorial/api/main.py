"""
ADVERTORIAL — FastAPI app
Démarrer : uvicorn advertorial.api.main:app --reload --port 8001
"""
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="ADVERTORIAL — Éditeur de pages advertorial", version="1.0.0", docs_url="/docs")

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])


@app.on_event("startup")
def startup():
    from ..database import init_db
    init_db()
    log.info("DB initialisée (SQLite)")


@app.get("/health")
def health():
    return {"status": "ok", "service": "advertorial", "version": "1.0.0"}


from .routes import catalog, products, generate, editor, publish

app.include_router(catalog.router)
app.include_router(products.router)
app.include_router(generate.router)
app.include_router(editor.router)
app.include_router(publish.router)
