"""
Opérations d'édition : reducers purs sur une séquence de blocs.
Chaque opération retourne une NOUVELLE liste ; ni la liste reçue ni ses blocs ne sont modifiés.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .blocks import BaseBlock
from .blocks.payload import MAX_LIST_ITEMS, coerce_model, merge_payload
from .catalog import create_block, new_block_id

log = logging.getLogger(__name__)

Blocks = List[BaseBlock]


def find_index(blocks: Sequence[BaseBlock], block_id: str) -> Optional[int]:
    for i, b in enumerate(blocks):
        if b.id == block_id:
            return i
    return None


def ensure_unique_ids(blocks: Sequence[BaseBlock]) -> Blocks:
    """Copie de la séquence où chaque id vide ou dupliqué est remplacé par un id frais."""
    seen: set = set()
    out = []
    for b in blocks:
        if not b.id or b.id in seen:
            b = b.model_copy(update={"id": new_block_id(seen | {x.id for x in blocks})})
        seen.add(b.id)
        out.append(b)
    return out


def insert_after(blocks: Sequence[BaseBlock], index: Optional[int], kind: str) -> Tuple[Blocks, str]:
    """Insère un bloc neuf de type kind après index. None ou ≥ len → fin ; -1 → début."""
    block = create_block(kind, existing=(b.id for b in blocks))
    out = list(blocks)
    pos = len(out) if index is None or index >= len(out) else max(index + 1, 0)
    out.insert(pos, block)
    return out, block.id


def move_up(blocks: Sequence[BaseBlock], index: int) -> Blocks:
    out = list(blocks)
    if 0 < index < len(out):
        out[index - 1], out[index] = out[index], out[index - 1]
    return out


def move_down(blocks: Sequence[BaseBlock], index: int) -> Blocks:
    out = list(blocks)
    if 0 <= index < len(out) - 1:
        out[index], out[index + 1] = out[index + 1], out[index]
    return out


def duplicate(blocks: Sequence[BaseBlock], index: int) -> Blocks:
    """Copie profonde du bloc index, id frais, insérée juste après."""
    out = list(blocks)
    if not 0 <= index < len(out):
        return out
    copy = out[index].model_copy(deep=True)
    copy.id = new_block_id(b.id for b in out)
    out.insert(index + 1, copy)
    return out


def delete(blocks: Sequence[BaseBlock], block_id: str) -> Blocks:
    return [b for b in blocks if b.id != block_id]


def update(blocks: Sequence[BaseBlock], block_id: str, patch: Dict[str, Any]) -> Blocks:
    """
    Fusionne patch (payload partiel) dans le bloc block_id.
    Id absent → séquence inchangée. Changement de type → KindChangeError.
    """
    i = find_index(blocks, block_id)
    out = list(blocks)
    if i is None:
        return out
    out[i] = merge_payload(out[i], patch)
    return out


def update_item(blocks: Sequence[BaseBlock], block_id: str, field: str, index: int,
                patch: Dict[str, Any]) -> Blocks:
    """Édite une entrée d'une liste imbriquée (témoignage, question FAQ, étape...) par son index."""
    i = find_index(blocks, block_id)
    out = list(blocks)
    if i is None:
        return out
    block = out[i]
    items = getattr(block.seed, field, None)
    if not isinstance(items, list) or not 0 <= index < len(items):
        log.debug("update_item ignoré : %s[%s] sur %s", field, index, block.block_type)
        return out
    current = items[index]
    items = list(items)
    if isinstance(current, str):
        value = patch.get("value") if isinstance(patch, dict) else patch
        if not isinstance(value, str):
            return out
        items[index] = value
    else:
        items[index] = coerce_model(type(current), {**current.model_dump(), **patch})
    out[i] = merge_payload(block, {field: [x if isinstance(x, str) else x.model_dump() for x in items]})
    return out


def add_item(blocks: Sequence[BaseBlock], block_id: str, field: str) -> Blocks:
    """Ajoute une entrée par défaut en fin de liste imbriquée (borné à MAX_LIST_ITEMS)."""
    i = find_index(blocks, block_id)
    out = list(blocks)
    if i is None:
        return out
    block = out[i]
    items = getattr(block.seed, field, None)
    if not isinstance(items, list) or len(items) >= MAX_LIST_ITEMS:
        return out
    annotation = type(block.seed).model_fields[field].annotation
    (item_type,) = getattr(annotation, "__args__", (str,))
    new_item = "New item" if item_type is str else item_type().model_dump()
    dumped = [x if isinstance(x, str) else x.model_dump() for x in items]
    out[i] = merge_payload(block, {field: dumped + [new_item]})
    return out


def remove_item(blocks: Sequence[BaseBlock], block_id: str, field: str, index: int) -> Blocks:
    i = find_index(blocks, block_id)
    out = list(blocks)
    if i is None:
        return out
    block = out[i]
    items = getattr(block.seed, field, None)
    if not isinstance(items, list) or not 0 <= index < len(items):
        return out
    dumped = [x if isinstance(x, str) else x.model_dump() for j, x in enumerate(items) if j != index]
    out[i] = merge_payload(block, {field: dumped})
    return out


OPERATIONS = {
    "insert_after": insert_after,
    "move_up":      move_up,
    "move_down":    move_down,
    "duplicate":    duplicate,
    "delete":       delete,
    "update":       update,
    "update_item":  update_item,
    "add_item":     add_item,
    "remove_item":  remove_item,
}
