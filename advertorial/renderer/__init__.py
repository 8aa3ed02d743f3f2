"""Renderer : blocs + thème → HTML de page boutique."""
from .html import render_block, render_body, render_document, wrap_document, document_css
from .theme import ThemeOptions, ResolvedTheme, resolve_theme, clamp_size, css_variables

__all__ = [
    "render_block", "render_body", "render_document", "wrap_document", "document_css",
    "ThemeOptions", "ResolvedTheme", "resolve_theme", "clamp_size", "css_variables",
]
