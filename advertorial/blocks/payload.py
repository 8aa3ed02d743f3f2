"""
Payload plat <-> bloc typé.

Un payload est un dict plat {"type": ..., "id": ..., <champs structure>, <champs seed>},
clés en snake_case ou camelCase. C'est la forme échangée avec le service IA,
l'éditeur (update) et la persistance (colonne blocks).

Deux modes :
  make_block / split_payload  → strict (templates internes : une faute de frappe doit casser)
  coerce_block / merge_payload → tolérant (réponse IA, saisie éditeur : on répare, on ne lève pas)
"""
import logging, re
from typing import Any, Dict, List, Literal, Optional, Tuple, Union, get_args, get_origin

from pydantic import BaseModel, ValidationError as SchemaError

from . import BLOCK_CLASSES, BaseBlock
from ..errors import KindChangeError, UnknownBlockType

log = logging.getLogger(__name__)

MAX_LIST_ITEMS = 12

_MISSING = object()
_RESERVED = {"type", "block_type", "id", "structure", "seed", "css_class"}


def _snake(key: str) -> str:
    return re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", key).lower()


def _block_class(kind: str) -> type:
    try:
        return BLOCK_CLASSES[kind]
    except KeyError:
        raise UnknownBlockType(kind) from None


def _parts(cls: type) -> Tuple[type, type]:
    """(classe structure, classe seed) d'une classe de bloc."""
    return cls.model_fields["structure"].annotation, cls.model_fields["seed"].annotation


def kind_of(raw: Dict[str, Any]) -> Optional[str]:
    """block_type normalisé d'un payload ("socialProof" → "social_proof"), None si absent."""
    kind = raw.get("block_type", raw.get("type"))
    if not isinstance(kind, str) or not kind.strip():
        return None
    return _snake(kind.strip()).replace("-", "_")


def _normalize(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Aplatit structure/seed imbriqués, retire les clés réservées, passe en snake_case."""
    flat: Dict[str, Any] = {}
    for nested in ("structure", "seed"):
        if isinstance(raw.get(nested), dict):
            flat.update(raw[nested])
    flat.update({k: v for k, v in raw.items() if k not in _RESERVED})
    return {_snake(k): v for k, v in flat.items() if isinstance(k, str) and _snake(k) not in _RESERVED}


def split_payload(kind: str, raw: Dict[str, Any]) -> Tuple[dict, dict, dict]:
    """Répartit un payload entre (structure, seed, clés inconnues)."""
    s_cls, d_cls = _parts(_block_class(kind))
    structure, seed, unknown = {}, {}, {}
    for key, value in _normalize(raw).items():
        if key in s_cls.model_fields:
            structure[key] = value
        elif key in d_cls.model_fields:
            seed[key] = value
        else:
            unknown[key] = value
    return structure, seed, unknown


def to_payload(block: BaseBlock) -> Dict[str, Any]:
    return {
        "type": block.block_type,
        "id": block.id,
        **block.structure.model_dump(),
        **block.seed.model_dump(),
    }


def make_block(kind: str, block_id: str = "", **fields) -> BaseBlock:
    """Construit un bloc depuis des champs plats. Strict : clé inconnue ou valeur invalide → ValueError."""
    cls = _block_class(kind)
    structure, seed, unknown = split_payload(kind, fields)
    if unknown:
        raise ValueError(f"Champs inconnus pour {kind} : {sorted(unknown)}")
    return cls(id=block_id, structure=structure, seed=seed)


# ── Coercion tolérante ──────────────────────────────────────────────────────

def _coerce_value(annotation: Any, value: Any) -> Any:
    """Ramène value au type annoté, ou _MISSING si irrécupérable (le défaut du champ s'applique)."""
    origin = get_origin(annotation)

    if origin is Union:
        if value is None:
            return None
        inner = [a for a in get_args(annotation) if a is not type(None)]
        return _coerce_value(inner[0], value)

    if origin is Literal:
        if isinstance(value, str):
            value = value.strip().lower()
        return value if value in get_args(annotation) else _MISSING

    if origin is list:
        if not isinstance(value, list):
            return _MISSING
        (item_type,) = get_args(annotation)
        items = [_coerce_value(item_type, v) for v in value]
        items = [v for v in items if v is not _MISSING and v is not None]
        if len(items) > MAX_LIST_ITEMS:
            log.info("Liste tronquée à %d éléments (%d reçus)", MAX_LIST_ITEMS, len(items))
        return items[:MAX_LIST_ITEMS]

    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return coerce_model(annotation, value) if isinstance(value, dict) else _MISSING

    if annotation is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in ("true", "false"):
            return value.strip().lower() == "true"
        return _MISSING

    if annotation is str:
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return _MISSING

    return value


def _coerce_fields(model_cls: type, raw: Dict[str, Any]) -> Dict[str, Any]:
    values = {}
    for name, field in model_cls.model_fields.items():
        if name not in raw:
            continue
        value = _coerce_value(field.annotation, raw[name])
        if value is _MISSING:
            log.debug("%s.%s invalide (%r) — défaut conservé", model_cls.__name__, name, raw[name])
            continue
        values[name] = value
    return values


def coerce_model(model_cls: type, raw: Dict[str, Any], drop_empty_lists: bool = False) -> BaseModel:
    """Instance valide de model_cls : champs absents ou invalides → valeurs par défaut."""
    raw = {_snake(k): v for k, v in raw.items() if isinstance(k, str)}
    values = _coerce_fields(model_cls, raw)
    if drop_empty_lists:
        values = {k: v for k, v in values.items() if v != []}
    try:
        return model_cls(**values)
    except SchemaError as e:
        bad = {err["loc"][0] for err in e.errors() if err["loc"]}
        log.debug("%s : champs rejetés %s", model_cls.__name__, sorted(map(str, bad)))
        return model_cls(**{k: v for k, v in values.items() if k not in bad})


def coerce_block(raw: Any) -> Optional[BaseBlock]:
    """
    Bloc valide à partir d'une entrée quelconque (typiquement un élément de réponse IA).
    Retourne None si l'entrée n'est pas un objet ou si son type est inconnu.
    Les listes vides reçoivent le contenu par défaut du bloc. L'id n'est PAS repris.
    """
    if not isinstance(raw, dict):
        return None
    kind = kind_of(raw)
    cls = BLOCK_CLASSES.get(kind)
    if cls is None:
        return None
    s_raw, d_raw, _ = split_payload(kind, raw)
    s_cls, d_cls = _parts(cls)
    return cls(
        structure=coerce_model(s_cls, s_raw),
        seed=coerce_model(d_cls, d_raw, drop_empty_lists=True),
    )


def _merge_part(part: BaseModel, raw: Dict[str, Any]) -> BaseModel:
    updates = _coerce_fields(type(part), raw)
    if not updates:
        return part.model_copy(deep=True)
    current = part.model_dump()
    try:
        return type(part).model_validate({**current, **updates})
    except SchemaError as e:
        bad = {err["loc"][0] for err in e.errors() if err["loc"]}
        log.debug("%s : mise à jour rejetée %s", type(part).__name__, sorted(map(str, bad)))
        return type(part).model_validate({**current, **{k: v for k, v in updates.items() if k not in bad}})


def merge_payload(block: BaseBlock, patch: Dict[str, Any]) -> BaseBlock:
    """
    Nouveau bloc = block + champs de patch (plat ou {"structure": .., "seed": ..}).
    "id" ignoré ; un "type" différent lève KindChangeError ; valeurs invalides ignorées.
    """
    kind = kind_of(patch)
    if kind is not None and kind != block.block_type:
        raise KindChangeError(block.block_type, kind)
    s_raw, d_raw, unknown = split_payload(block.block_type, patch)
    if unknown:
        log.debug("update %s : champs ignorés %s", block.block_type, sorted(unknown))
    return block.model_copy(update={
        "structure": _merge_part(block.structure, s_raw),
        "seed": _merge_part(block.seed, d_raw),
    })


def blocks_to_payloads(blocks: List[BaseBlock]) -> List[Dict[str, Any]]:
    return [to_payload(b) for b in blocks]
