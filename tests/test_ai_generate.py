"""
Tests générateur IA — réponses malformées, coercion, erreurs, liens produit
L'appel Claude est remplacé par un faux `call` asynchrone : aucun réseau.
"""
import sys, os, json, asyncio
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unittest.mock import patch
import pytest

from advertorial.ai_generate import (
    MAX_AI_BLOCKS, build_system_prompt, build_user_message, coerce_blocks, generate_with_ai, parse_blocks,
    validate_brief,
)
from advertorial.errors import GenerationError, ValidationError
from advertorial.models import AIBrief, ProductFacts, StylePreset


PRODUCT = ProductFacts(id="gid://shopify/Product/1", title="Glow Serum", handle="glow-serum",
                       description="Sérum vitamine C")
BRIEF = AIBrief(target_customer="Femmes 35-55", mechanism="Vitamine C stabilisée",
                proof="4.8/5 sur 2 000 avis", style_preset=StylePreset.CLINICAL)


def _fake(text):
    async def call(system, user):
        return text
    return call


def _run(brief=BRIEF, product=PRODUCT, text=None, call=None):
    return asyncio.run(generate_with_ai(brief, product, call=call or _fake(text)))


# ── Validation du brief ───────────────────────────────────────────────────

class TestValidateBrief:
    def test_sans_produit(self):
        with pytest.raises(ValidationError) as exc:
            validate_brief(BRIEF, None)
        assert exc.value.field == "product"

    def test_sans_cible_ni_mecanisme(self):
        with pytest.raises(ValidationError) as exc:
            validate_brief(AIBrief(style_preset=StylePreset.NEWS), PRODUCT)
        assert exc.value.field == "target_customer"

    def test_sans_preset(self):
        with pytest.raises(ValidationError) as exc:
            validate_brief(AIBrief(target_customer="x"), PRODUCT)
        assert exc.value.field == "style_preset"

    def test_validation_avant_appel(self):
        called = []

        async def call(system, user):
            called.append(1)
            return "[]"

        with pytest.raises(ValidationError):
            _run(brief=AIBrief(), call=call)
        assert called == []


# ── Prompt ────────────────────────────────────────────────────────────────

class TestPrompt:
    def test_system_contient_preset(self):
        assert "Clinical Editorial" in build_system_prompt(StylePreset.CLINICAL)
        assert "News Exposé" in build_system_prompt(StylePreset.NEWS)

    def test_user_contient_brief_et_handle(self):
        msg = build_user_message(BRIEF, PRODUCT)
        assert "Glow Serum" in msg
        assert "Femmes 35-55" in msg
        assert "glow-serum" in msg

    def test_images_limitees(self):
        brief = BRIEF.model_copy(update={"image_urls": [f"https://cdn/x{i}.jpg" for i in range(10)] + ["  "]})
        msg = build_user_message(brief, PRODUCT)
        assert "x5.jpg" in msg
        assert "x6.jpg" not in msg


# ── Parse ─────────────────────────────────────────────────────────────────

class TestParse:
    def test_json_simple(self):
        assert parse_blocks('[{"type": "divider"}]') == [{"type": "divider"}]

    def test_fences_markdown(self):
        assert parse_blocks('```json\n[{"type": "divider"}]\n```') == [{"type": "divider"}]

    def test_fences_sans_langage(self):
        assert parse_blocks('```\n[]\n```') == []

    @pytest.mark.parametrize("text", ["", "   ", None, 42])
    def test_vide(self, text):
        with pytest.raises(GenerationError):
            parse_blocks(text)

    def test_non_json(self):
        with pytest.raises(GenerationError):
            parse_blocks("Voici votre advertorial : [headline]")

    def test_json_tronque(self):
        with pytest.raises(GenerationError):
            parse_blocks('[{"type": "headline", "text": "Coupé')

    def test_objet_au_lieu_de_tableau(self):
        with pytest.raises(GenerationError):
            parse_blocks('{"blocks": []}')


# ── Coercion ──────────────────────────────────────────────────────────────

class TestCoerceBlocks:
    def test_ids_frais_uniques(self):
        blocks = coerce_blocks([{"type": "divider", "id": "same"}, {"type": "divider", "id": "same"}])
        assert blocks[0].id != blocks[1].id
        assert all(b.id.startswith("blk_") for b in blocks)

    def test_entrees_invalides_ecartees(self):
        blocks = coerce_blocks([{"type": "headline"}, "texte", None, {"type": "carousel"}, {"no": "type"}])
        assert [b.block_type for b in blocks] == ["headline"]

    def test_plafond_blocs(self):
        blocks = coerce_blocks([{"type": "divider"}] * (MAX_AI_BLOCKS + 10))
        assert len(blocks) == MAX_AI_BLOCKS


# ── generate_with_ai ──────────────────────────────────────────────────────

class TestGenerateWithAI:
    def test_document_complet(self):
        text = json.dumps([
            {"type": "urgency_banner", "text": "Stock limité", "style": "limited"},
            {"type": "headline", "text": "Les dermatologues adorent ce sérum", "size": "large"},
            {"type": "testimonials", "testimonials": [{"quote": "Bluffant"}]},
            {"type": "cta", "headline": "Essayez", "subtext": "Sans risque", "button_text": "Go"},
            {"type": "pricing_tiers", "tiers": [{"name": "1 flacon", "sale_price": 39}]},
        ])
        doc = _run(text=text)
        assert doc.provenance == "AI"
        assert doc.variant == "A"
        assert doc.title == "Les dermatologues adorent ce sérum"
        assert [b.block_type for b in doc.blocks] == [
            "urgency_banner", "headline", "testimonials", "cta", "pricing_tiers"]
        assert doc.blocks[2].seed.testimonials[0].name == "[Customer Name]"

    def test_liens_vers_produit(self):
        doc = _run(text='[{"type": "cta"}, {"type": "offer_box"}, {"type": "pricing_tiers"}]')
        cta, offer, pricing = doc.blocks
        assert cta.seed.button_href == "/products/glow-serum"
        assert offer.seed.button_href == "/products/glow-serum"
        assert pricing.seed.product_handle == "glow-serum"

    def test_lien_explicite_conserve(self):
        doc = _run(text='[{"type": "cta", "button_href": "https://autre.example.com"}]')
        assert doc.blocks[0].seed.button_href == "https://autre.example.com"

    def test_titre_sans_headline(self):
        doc = _run(text='[{"type": "text", "content": "x"}]')
        assert doc.title == "Glow Serum Advertorial"

    def test_tableau_vide(self):
        with pytest.raises(GenerationError):
            _run(text="[]")

    def test_aucun_bloc_exploitable(self):
        with pytest.raises(GenerationError):
            _run(text='[{"type": "carousel"}, "oops", 3]')

    def test_reponse_non_tableau(self):
        with pytest.raises(GenerationError):
            _run(text='{"type": "headline"}')

    def test_reponse_malformee(self):
        with pytest.raises(GenerationError):
            _run(text="Désolé, je ne peux pas.")

    def test_echec_transport_enveloppe(self):
        async def call(system, user):
            raise ConnectionError("réseau coupé")

        with pytest.raises(GenerationError):
            _run(call=call)

    def test_generation_error_propagee(self):
        async def call(system, user):
            raise GenerationError("timeout")

        with pytest.raises(GenerationError, match="timeout"):
            _run(call=call)

    def test_sans_cle_api(self):
        with patch.dict(os.environ, {"ANTHROPIC_API_KEY": ""}):
            with pytest.raises(GenerationError):
                asyncio.run(generate_with_ai(BRIEF, PRODUCT))

    def test_fences_acceptees(self):
        doc = _run(text='```json\n[{"type": "headline", "text": "Titre"}]\n```')
        assert doc.title == "Titre"
