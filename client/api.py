from lookup import settings  # loads .env
from lookup.persistence import FileQuoteWriter
from lookup.providers import CotacaoServerProvider, default_cep_providers

API = settings.API_BASE_URL
BUDGET_S = settings.CLIENT_BUDGET_S
PERSIST_BUDGET_S = settings.CLIENT_PERSIST_BUDGET_S
CEP_BUDGET_S = settings.CEP_BUDGET_S
OUTPUT = settings.QUOTE_OUTPUT

def server_quote(base_url: str | None = None): return CotacaoServerProvider(base_url or API)
def file_writer(path: str | None = None):      return FileQuoteWriter(path or OUTPUT)
def cep_providers():                             return default_cep_providers()
