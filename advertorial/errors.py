"""Erreurs métier de l'advertorial builder."""


class AdvertorialError(Exception):
    """Base de toutes les erreurs métier."""


class ValidationError(AdvertorialError):
    """Requête de génération incomplète (produit, brief, preset)."""

    def __init__(self, field: str, message: str = ""):
        self.field = field
        super().__init__(message or f"Champ requis manquant : {field}")


class NotFoundError(AdvertorialError):
    """Produit (ou enregistrement) introuvable."""


class GenerationError(AdvertorialError):
    """Le service IA a échoué ou sa réponse est inexploitable."""


class PublishError(AdvertorialError):
    """La création de la page boutique a échoué."""


class UnknownBlockType(AdvertorialError, ValueError):
    """block_type absent du registre des blocs."""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"Type de bloc inconnu : {kind!r}")


class KindChangeError(AdvertorialError, ValueError):
    """Tentative de changer le type d'un bloc via update."""

    def __init__(self, current: str, requested: str):
        self.current, self.requested = current, requested
        super().__init__(f"Changement de type interdit : {current} → {requested} (supprimer puis insérer)")


class NoDocumentError(AdvertorialError, ValueError):
    """Opération d'édition sur une session sans document."""
