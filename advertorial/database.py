"""SQLite — init + session + CRUD helpers"""
import json, os
from pathlib import Path
from typing import List, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from .models import AdvertorialDB, Base

DATA_DIR = Path(__file__).parent.parent / "data"

DB_PATH      = os.getenv("DB_PATH", str(DATA_DIR / "advertorial.db"))
ENGINE       = create_engine(f"sqlite:///{DB_PATH}", connect_args={"check_same_thread": False})
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=ENGINE)


def init_db():
    Path(DB_PATH).parent.mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind=ENGINE)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ── JSON helpers ──
def jl(s: str) -> list:
    try: return json.loads(s or "[]")
    except json.JSONDecodeError: return []

def jd(o) -> str:
    return json.dumps(o, ensure_ascii=False)


# ── Advertorial ──
def db_create_advertorial(db: Session, obj: AdvertorialDB) -> AdvertorialDB:
    db.add(obj); db.commit(); db.refresh(obj); return obj

def db_get_advertorial(db: Session, aid: str) -> Optional[AdvertorialDB]:
    return db.query(AdvertorialDB).filter_by(id=aid).first()

def db_list_advertorials(db: Session, shop: Optional[str] = None) -> List[AdvertorialDB]:
    q = db.query(AdvertorialDB)
    if shop:
        q = q.filter_by(shop=shop)
    return q.order_by(AdvertorialDB.created_at.desc()).all()

def db_delete_advertorial(db: Session, aid: str) -> bool:
    obj = db_get_advertorial(db, aid)
    if not obj:
        return False
    db.delete(obj); db.commit(); return True
