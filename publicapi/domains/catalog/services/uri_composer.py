# publicapi/domains/catalog/services/uri_composer.py
"""
Composição de URIs absolutos para imagens do catálogo.

As imagens são guardadas com o host placeholder
`http://catalogbaseurltobereplaced` (ou como caminho relativo) e só ganham
o host real à saída, com base em CATALOG_BASE_URL.
"""

from __future__ import annotations

from urllib.parse import urlsplit

PLACEHOLDER_BASE_URL = "http://catalogbaseurltobereplaced"


class UriComposer:
    """Imutável; uma instância por processo."""

    def __init__(self, catalog_base_url: str) -> None:
        self._base_url = catalog_base_url.rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    def compose_pic_uri(self, uri_template: str | None) -> str | None:
        if not uri_template:
            return uri_template

        if uri_template.startswith(PLACEHOLDER_BASE_URL):
            return self._base_url + uri_template[len(PLACEHOLDER_BASE_URL) :]

        if urlsplit(uri_template).scheme:
            # já é absoluto noutro host
            return uri_template

        return f"{self._base_url}/{uri_template.lstrip('/')}"
