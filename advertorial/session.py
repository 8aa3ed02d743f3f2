"""
Session d'édition : document courant + jeton de génération.

Une seule génération IA "courante" par session : lancer une génération invalide la précédente.
Une réponse tardive (jeton périmé) est ignorée, elle n'écrase jamais une saisie plus récente.
"""
import logging, uuid
from typing import Any, Optional, Tuple

from . import editor
from .ai_generate import Caller, generate_with_ai
from .errors import NoDocumentError
from .models import AIBrief, GeneratedDocument, ProductFacts
from .renderer import ThemeOptions, render_block, render_document

log = logging.getLogger(__name__)


class EditingSession:
    def __init__(self, document: Optional[GeneratedDocument] = None):
        self.session_id = str(uuid.uuid4())
        self.document = document
        self._generation = 0

    # ── Jeton de génération ──

    def begin_generation(self) -> int:
        self._generation += 1
        return self._generation

    def is_current(self, token: int) -> bool:
        return token == self._generation

    def accept(self, token: int, document: GeneratedDocument) -> bool:
        """Installe document si token est le dernier émis ; sinon l'ignore."""
        if not self.is_current(token):
            log.info("Session %s : génération %d périmée, ignorée", self.session_id, token)
            return False
        self.document = document
        return True

    async def generate_with_ai(self, brief: AIBrief, product: ProductFacts,
                               call: Optional[Caller] = None) -> Optional[GeneratedDocument]:
        """Génère puis installe le document ; None si une génération plus récente a été lancée entre-temps."""
        token = self.begin_generation()
        doc = await generate_with_ai(brief, product, call=call)
        if self.document is not None and self.document.theme is not None and doc.theme is None:
            doc.theme = self.document.theme
        return doc if self.accept(token, doc) else None

    # ── Édition ──

    def apply(self, op: str, *args: Any, **kwargs: Any) -> Tuple[str, Optional[str]]:
        """
        Applique une opération d'édition au document courant.
        Retourne (aperçu complet, id du bloc créé) ; l'id n'est renseigné que pour insert_after.
        """
        if self.document is None:
            raise NoDocumentError("Aucun document en cours d'édition")
        fn = editor.OPERATIONS.get(op)
        if fn is None:
            raise ValueError(f"Opération inconnue : {op}")
        result = fn(self.document.blocks, *args, **kwargs)
        blocks, new_id = result if isinstance(result, tuple) else (result, None)
        self.document = self.document.model_copy(update={"blocks": blocks})
        return self.preview(), new_id

    def set_theme(self, theme: Optional[ThemeOptions]) -> str:
        if self.document is None:
            raise NoDocumentError("Aucun document en cours d'édition")
        self.document = self.document.model_copy(update={"theme": theme})
        return self.preview()

    def preview(self) -> str:
        if self.document is None:
            return render_document([], None)
        return render_document(self.document.blocks, self.document.theme)

    def preview_block(self, block_id: str) -> str:
        if self.document is None:
            raise NoDocumentError("Aucun document en cours d'édition")
        i = editor.find_index(self.document.blocks, block_id)
        if i is None:
            raise KeyError(block_id)
        return render_block(self.document.blocks[i], self.document.theme)
