# lookup/normalizers/types.py
from typing import Any, Dict, Literal, Union
from pydantic import BaseModel, ConfigDict

# Upstream payload shapes we know how to map
Schema = Literal["brasilapi", "viacep", "awesomeapi", "cotacao"]

Payload = Dict[str, Any]


class Address(BaseModel):
    model_config = ConfigDict(frozen=True)

    cep: str                 # always "NNNNN-NNN"
    street: str = ""
    neighborhood: str = ""
    city: str
    state: str               # two-letter UF
    source: str              # provider that produced it


class Quote(BaseModel):
    model_config = ConfigDict(frozen=True)

    pair: str                # e.g. "USD-BRL"
    bid: str                 # decimal string as quoted upstream
    source: str


Record = Union[Address, Quote]
