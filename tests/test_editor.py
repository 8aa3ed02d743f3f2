"""
Tests éditeur — reducers purs : insertion, déplacement, duplication, suppression, mise à jour
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from advertorial import editor
from advertorial.blocks.payload import MAX_LIST_ITEMS, make_block
from advertorial.errors import KindChangeError, UnknownBlockType


@pytest.fixture
def blocks():
    return [
        make_block("headline", block_id="blk_a", text="A"),
        make_block("text", block_id="blk_b", content="B"),
        make_block("faq", block_id="blk_c", items=[{"question": "Q1", "answer": "R1"}]),
    ]


def _ids(bs):
    return [b.id for b in bs]


class TestInsert:
    def test_apres_index(self, blocks):
        out, new_id = editor.insert_after(blocks, 0, "divider")
        assert _ids(out) == ["blk_a", new_id, "blk_b", "blk_c"]
        assert out[1].block_type == "divider"

    def test_none_en_fin(self, blocks):
        out, new_id = editor.insert_after(blocks, None, "cta")
        assert out[-1].id == new_id

    def test_hors_bornes_en_fin(self, blocks):
        out, new_id = editor.insert_after(blocks, 99, "cta")
        assert out[-1].id == new_id

    def test_moins_un_en_tete(self, blocks):
        out, new_id = editor.insert_after(blocks, -1, "urgency_banner")
        assert out[0].id == new_id

    def test_liste_vide(self):
        out, new_id = editor.insert_after([], None, "headline")
        assert _ids(out) == [new_id]

    def test_id_unique(self, blocks):
        _, new_id = editor.insert_after(blocks, 0, "divider")
        assert new_id not in _ids(blocks)

    def test_kind_inconnu(self, blocks):
        with pytest.raises(UnknownBlockType):
            editor.insert_after(blocks, 0, "carousel")

    def test_entree_inchangee(self, blocks):
        before = _ids(blocks)
        editor.insert_after(blocks, 0, "divider")
        assert _ids(blocks) == before


class TestMove:
    def test_monter(self, blocks):
        assert _ids(editor.move_up(blocks, 1)) == ["blk_b", "blk_a", "blk_c"]

    def test_descendre(self, blocks):
        assert _ids(editor.move_down(blocks, 1)) == ["blk_a", "blk_c", "blk_b"]

    def test_monter_premier_noop(self, blocks):
        assert _ids(editor.move_up(blocks, 0)) == _ids(blocks)

    def test_descendre_dernier_noop(self, blocks):
        assert _ids(editor.move_down(blocks, 2)) == _ids(blocks)

    def test_hors_bornes_noop(self, blocks):
        assert _ids(editor.move_up(blocks, 7)) == _ids(blocks)
        assert _ids(editor.move_down(blocks, -3)) == _ids(blocks)


class TestDuplicateDelete:
    def test_dupliquer(self, blocks):
        out = editor.duplicate(blocks, 0)
        assert len(out) == 4
        assert out[1].seed.text == "A"
        assert out[1].id not in ("blk_a", "blk_b", "blk_c")
        assert out[1].model_dump(exclude={"id"}) == out[0].model_dump(exclude={"id"})
        assert _ids(out) == ["blk_a", out[1].id, "blk_b", "blk_c"]

    def test_copie_profonde(self, blocks):
        out = editor.duplicate(blocks, 2)
        out[3].seed.items[0].question = "modifiée"
        assert out[2].seed.items[0].question == "Q1"

    def test_dupliquer_hors_bornes(self, blocks):
        assert _ids(editor.duplicate(blocks, 9)) == _ids(blocks)

    def test_supprimer(self, blocks):
        assert _ids(editor.delete(blocks, "blk_b")) == ["blk_a", "blk_c"]

    def test_supprimer_inconnu(self, blocks):
        assert _ids(editor.delete(blocks, "blk_zz")) == _ids(blocks)


class TestUpdate:
    def test_fusion(self, blocks):
        out = editor.update(blocks, "blk_a", {"text": "Nouveau", "size": "small"})
        assert out[0].seed.text == "Nouveau"
        assert out[0].structure.size == "small"
        assert blocks[0].seed.text == "A"
        assert out[0].id == "blk_a"
        assert _ids(out) == _ids(blocks)
        assert [b.model_dump() for b in out[1:]] == [b.model_dump() for b in blocks[1:]]

    def test_fusion_ignore_id(self, blocks):
        out = editor.update(blocks, "blk_a", {"id": "blk_zz", "text": "Nouveau"})
        assert _ids(out) == _ids(blocks)
        assert out[0].seed.text == "Nouveau"

    def test_id_inconnu_noop(self, blocks):
        out = editor.update(blocks, "blk_zz", {"text": "x"})
        assert [b.model_dump() for b in out] == [b.model_dump() for b in blocks]

    def test_changement_type(self, blocks):
        with pytest.raises(KindChangeError):
            editor.update(blocks, "blk_a", {"type": "cta"})

    def test_ids_uniques(self):
        bs = [make_block("divider", block_id="x"), make_block("divider", block_id="x"), make_block("divider")]
        ids = _ids(editor.ensure_unique_ids(bs))
        assert ids[0] == "x"
        assert len(set(ids)) == 3
        assert all(ids)


class TestItems:
    def test_modifier_element(self, blocks):
        out = editor.update_item(blocks, "blk_c", "items", 0, {"answer": "R1 bis"})
        assert out[2].seed.items[0].question == "Q1"
        assert out[2].seed.items[0].answer == "R1 bis"

    def test_modifier_element_texte(self):
        bs = [make_block("feature_list", block_id="f", items=["un", "deux"])]
        out = editor.update_item(bs, "f", "items", 1, {"value": "trois"})
        assert out[0].seed.items == ["un", "trois"]

    def test_modifier_hors_bornes(self, blocks):
        out = editor.update_item(blocks, "blk_c", "items", 5, {"answer": "x"})
        assert out[2].seed.items[0].answer == "R1"

    def test_ajouter_element(self, blocks):
        out = editor.add_item(blocks, "blk_c", "items")
        assert len(out[2].seed.items) == 2
        assert len(blocks[2].seed.items) == 1

    def test_ajouter_borne(self):
        bs = [make_block("feature_list", block_id="f", items=[str(i) for i in range(MAX_LIST_ITEMS)])]
        out = editor.add_item(bs, "f", "items")
        assert len(out[0].seed.items) == MAX_LIST_ITEMS

    def test_ajouter_champ_non_liste(self, blocks):
        out = editor.add_item(blocks, "blk_a", "text")
        assert out[0].seed.text == "A"

    def test_retirer_element(self, blocks):
        out = editor.add_item(blocks, "blk_c", "items")
        out = editor.remove_item(out, "blk_c", "items", 0)
        assert len(out[2].seed.items) == 1
        assert out[2].seed.items[0].question != "Q1"


class TestOperations:
    def test_registre(self):
        assert set(editor.OPERATIONS) == {
            "insert_after", "move_up", "move_down", "duplicate", "delete",
            "update", "update_item", "add_item", "remove_item"}
