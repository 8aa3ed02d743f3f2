"""ADVERTORIAL — éditeur de pages advertorial par blocs (templates, génération IA, publication boutique)."""
