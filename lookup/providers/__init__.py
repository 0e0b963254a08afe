from .base import HttpProvider
from .cep import BrasilApiProvider, ViaCepProvider, default_cep_providers
from .quote import AwesomeApiProvider, CotacaoServerProvider

__all__ = [
    "HttpProvider",
    "BrasilApiProvider",
    "ViaCepProvider",
    "default_cep_providers",
    "AwesomeApiProvider",
    "CotacaoServerProvider",
]
