"""
Address providers raced by GET /cep/{cep} and the `client.cep` CLI.
"""
from typing import List, Optional

import requests

from lookup import settings
from lookup.normalizers import norm_cep
from .base import HttpProvider


def _cep_digits(key: str) -> str:
    # raises ValueError for anything that is not 8 digits -> invalid_request
    return norm_cep(key).replace("-", "")


class BrasilApiProvider(HttpProvider):
    name = "BrasilAPI"
    schema = "brasilapi"

    def __init__(self, url_template: Optional[str] = None, **kwargs):
        super().__init__(url_template or settings.BRASILAPI_URL, **kwargs)

    def build_url(self, key: str) -> str:
        return self.url_template.format(key=_cep_digits(key))


class ViaCepProvider(HttpProvider):
    name = "ViaCEP"
    schema = "viacep"

    def __init__(self, url_template: Optional[str] = None, **kwargs):
        super().__init__(url_template or settings.VIACEP_URL, **kwargs)

    def build_url(self, key: str) -> str:
        return self.url_template.format(key=_cep_digits(key))


def default_cep_providers(session: Optional[requests.Session] = None) -> List[HttpProvider]:
    return [BrasilApiProvider(session=session), ViaCepProvider(session=session)]
