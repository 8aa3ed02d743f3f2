"""
Tests blocs — registre, catalogue, payloads stricts et coercion tolérante
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from advertorial.blocks import BLOCK_CLASSES, BLOCK_TYPES, HeadlineBlock
from advertorial.blocks.payload import (
    MAX_LIST_ITEMS, coerce_block, kind_of, make_block, merge_payload, split_payload, to_payload,
)
from advertorial.catalog import BLOCK_CATALOG, catalog_entry, create_block, new_block_id
from advertorial.errors import KindChangeError, UnknownBlockType


# ── Registre + catalogue ──────────────────────────────────────────────────

class TestRegistry:
    def test_23_kinds(self):
        assert len(BLOCK_TYPES) == 23

    def test_catalogue_couvre_tous_les_kinds(self):
        assert {e.block_type for e in BLOCK_CATALOG} == set(BLOCK_TYPES)

    def test_catalog_entry_inconnu(self):
        with pytest.raises(UnknownBlockType):
            catalog_entry("carousel")

    def test_catalog_entry_a_label_et_icone(self):
        e = catalog_entry("faq")
        assert e.label and e.icon

    @pytest.mark.parametrize("kind", BLOCK_TYPES)
    def test_create_block_defaults(self, kind):
        b = create_block(kind)
        assert b.block_type == kind
        assert b.id.startswith("blk_")
        assert isinstance(b, BLOCK_CLASSES[kind])

    def test_create_block_inconnu(self):
        with pytest.raises(UnknownBlockType):
            create_block("carousel")

    def test_new_block_id_evite_existants(self):
        taken = {new_block_id() for _ in range(50)}
        assert new_block_id(taken) not in taken

    def test_defaults_non_partages(self):
        a, b = create_block("faq"), create_block("faq")
        a.seed.items.clear()
        assert len(b.seed.items) > 0


# ── make_block (strict) ───────────────────────────────────────────────────

class TestMakeBlock:
    def test_repartit_structure_et_seed(self):
        b = make_block("headline", text="Bonjour", size="medium")
        assert b.structure.size == "medium"
        assert b.seed.text == "Bonjour"

    def test_camel_case_accepte(self):
        b = make_block("cta", buttonText="Go", buttonHref="/products/x")
        assert b.seed.button_text == "Go"
        assert b.seed.button_href == "/products/x"

    def test_champ_inconnu_leve(self):
        with pytest.raises(ValueError):
            make_block("headline", txt="typo")

    def test_kind_inconnu_leve(self):
        with pytest.raises(UnknownBlockType):
            make_block("carousel")

    def test_valeur_invalide_leve(self):
        with pytest.raises(ValueError):
            make_block("headline", size="huge")

    def test_split_payload_inconnus(self):
        s, d, unknown = split_payload("note", {"type": "note", "style": "info", "text": "x", "extra": 1})
        assert s == {"style": "info"}
        assert d == {"text": "x"}
        assert unknown == {"extra": 1}

    def test_to_payload_plat(self):
        b = make_block("note", block_id="blk_1", style="warning", text="Attention")
        p = to_payload(b)
        assert p["type"] == "note"
        assert p["id"] == "blk_1"
        assert p["style"] == "warning"
        assert p["text"] == "Attention"

    def test_kind_of_normalise(self):
        assert kind_of({"type": "socialProof"}) == "social_proof"
        assert kind_of({"type": "pros-cons"}) == "pros_cons"
        assert kind_of({"text": "x"}) is None


# ── coerce_block (réponse IA) ─────────────────────────────────────────────

class TestCoerceBlock:
    def test_non_objet_none(self):
        assert coerce_block("headline") is None
        assert coerce_block(None) is None
        assert coerce_block(["headline"]) is None

    def test_type_inconnu_none(self):
        assert coerce_block({"type": "carousel", "text": "x"}) is None

    def test_temoignage_sans_nom(self):
        b = coerce_block({"type": "testimonials", "testimonials": [{"quote": "Super produit"}]})
        item = b.seed.testimonials[0]
        assert item.quote == "Super produit"
        assert item.name == "[Customer Name]"
        assert item.detail == "Verified Buyer"

    def test_entrees_non_objet_ecartees(self):
        b = coerce_block({"type": "testimonials", "testimonials": ["bad", 42, {"quote": "ok"}]})
        assert len(b.seed.testimonials) == 1

    def test_literal_invalide_defaut(self):
        b = coerce_block({"type": "headline", "text": "Hi", "size": "HUGE"})
        assert b.structure.size == "large"
        assert b.seed.text == "Hi"

    def test_literal_casse_normalisee(self):
        b = coerce_block({"type": "headline", "size": " Medium "})
        assert b.structure.size == "medium"

    def test_nombres_convertis_en_texte(self):
        b = coerce_block({"type": "social_proof", "rating": 4.9, "review_count": 2847})
        assert b.seed.rating == "4.9"
        assert b.seed.review_count == "2847"

    def test_booleen_texte(self):
        b = coerce_block({"type": "testimonials", "show_stars": "false"})
        assert b.structure.show_stars is False

    def test_booleen_invalide_defaut(self):
        b = coerce_block({"type": "testimonials", "show_stars": "peut-être"})
        assert b.structure.show_stars is True

    def test_liste_tronquee(self):
        b = coerce_block({"type": "feature_list", "items": [f"item {i}" for i in range(40)]})
        assert len(b.seed.items) == MAX_LIST_ITEMS
        assert b.seed.items[0] == "item 0"

    def test_liste_vide_contenu_defaut(self):
        b = coerce_block({"type": "faq", "items": []})
        assert len(b.seed.items) > 0

    def test_liste_non_liste_defaut(self):
        b = coerce_block({"type": "stats", "stats": "73%"})
        assert len(b.seed.stats) == 2

    def test_id_non_repris(self):
        b = coerce_block({"type": "divider", "id": "blk_ia"})
        assert b.id == ""

    def test_structure_seed_imbriques(self):
        b = coerce_block({"type": "note", "structure": {"style": "info"}, "seed": {"text": "x"}})
        assert b.structure.style == "info"
        assert b.seed.text == "x"

    def test_block_type_accepte(self):
        b = coerce_block({"block_type": "divider"})
        assert b.block_type == "divider"

    def test_optional_null(self):
        b = coerce_block({"type": "headline", "subheadline": None})
        assert b.seed.subheadline is None

    def test_prix_imbriques(self):
        b = coerce_block({"type": "pricing_tiers", "tiers": [
            {"name": "Duo", "sale_price": 49, "highlight": "true", "features": ["A", None, 3]},
        ]})
        tier = b.seed.tiers[0]
        assert tier.sale_price == "49"
        assert tier.highlight is True
        assert tier.features == ["A", "3"]


# ── merge_payload (éditeur) ───────────────────────────────────────────────

class TestMergePayload:
    def _headline(self):
        return make_block("headline", block_id="blk_h", text="Avant")

    def test_fusion_partielle(self):
        b = merge_payload(self._headline(), {"text": "Après", "align": "center"})
        assert b.seed.text == "Après"
        assert b.structure.align == "center"
        assert b.structure.size == "large"

    def test_original_inchange(self):
        h = self._headline()
        merge_payload(h, {"text": "Après"})
        assert h.seed.text == "Avant"

    def test_id_ignore(self):
        b = merge_payload(self._headline(), {"id": "blk_autre", "text": "x"})
        assert b.id == "blk_h"

    def test_changement_de_type_refuse(self):
        with pytest.raises(KindChangeError):
            merge_payload(self._headline(), {"type": "text", "content": "x"})

    def test_meme_type_accepte(self):
        b = merge_payload(self._headline(), {"type": "headline", "text": "x"})
        assert isinstance(b, HeadlineBlock)

    def test_valeur_invalide_ignoree(self):
        b = merge_payload(self._headline(), {"size": "enorme", "text": "ok"})
        assert b.structure.size == "large"
        assert b.seed.text == "ok"
