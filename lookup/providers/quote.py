"""
Quote providers.

AwesomeApiProvider is the upstream used by GET /cotacao; CotacaoServerProvider
is what the `client.quote` CLI uses to read that endpoint back.
"""
from typing import Optional

from lookup import settings
from .base import HttpProvider


class AwesomeApiProvider(HttpProvider):
    """Key is the currency pair, e.g. "USD-BRL"."""
    name = "AwesomeAPI"
    schema = "awesomeapi"

    def __init__(self, url_template: Optional[str] = None, **kwargs):
        super().__init__(url_template or settings.AWESOMEAPI_URL, **kwargs)

    def build_url(self, key: str) -> str:
        pair = (key or "").strip().upper()
        if not pair or "/" in pair:
            raise ValueError(f"invalid currency pair: {key!r}")
        return self.url_template.format(key=pair)


class CotacaoServerProvider(HttpProvider):
    """Reads our own GET /cotacao. The key is ignored; the server picks the pair."""
    name = "server"
    schema = "cotacao"

    def __init__(self, base_url: Optional[str] = None, **kwargs):
        base = (base_url or settings.API_BASE_URL).rstrip("/")
        super().__init__(f"{base}/cotacao", **kwargs)

    def build_url(self, key: str) -> str:
        return self.url_template
