# lookup/settings.py
import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(PROJECT_ROOT / ".env")


def _seconds(name: str, default: str) -> float:
    return float(os.getenv(name, default))


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Storage
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./lookup.sqlite3")

# Upstream providers
QUOTE_PAIR = os.getenv("QUOTE_PAIR", "USD-BRL")
AWESOMEAPI_URL = os.getenv("AWESOMEAPI_URL", "https://economia.awesomeapi.com.br/json/last/{key}")
BRASILAPI_URL = os.getenv("BRASILAPI_URL", "https://brasilapi.com.br/api/cep/v1/{key}")
VIACEP_URL = os.getenv("VIACEP_URL", "https://viacep.com.br/ws/{key}/json")

# Deadlines (seconds)
FETCH_BUDGET_S = _seconds("FETCH_BUDGET_S", "0.2")      # /cotacao upstream fetch
PERSIST_BUDGET_S = _seconds("PERSIST_BUDGET_S", "0.01")  # /cotacao SQL insert
CEP_BUDGET_S = _seconds("CEP_BUDGET_S", "1.0")           # BrasilAPI vs ViaCEP race

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))

# Command-line clients
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8080")
CLIENT_BUDGET_S = _seconds("CLIENT_BUDGET_S", "0.3")
CLIENT_PERSIST_BUDGET_S = _seconds("CLIENT_PERSIST_BUDGET_S", "0.1")
QUOTE_OUTPUT = os.getenv("QUOTE_OUTPUT", "cotacao.txt")
