# lookup/deps.py
"""
FastAPI dependencies for the upstream providers and the quote writer.
Tests swap them through `app.dependency_overrides`, like `get_db`.

Providers own a requests session each; the yield dependencies close them
once the request is done, the same way `get_db` closes its session.
"""
from typing import Iterator, List

from lookup.core import PersistenceCall
from lookup.db import SessionLocal
from lookup.persistence import SqlQuoteWriter
from lookup.providers import AwesomeApiProvider, HttpProvider, default_cep_providers


def get_quote_provider() -> Iterator[HttpProvider]:
    provider = AwesomeApiProvider()
    try:
        yield provider
    finally:
        provider.close()


def get_quote_writer() -> PersistenceCall:
    return SqlQuoteWriter(SessionLocal)


def get_cep_providers() -> Iterator[List[HttpProvider]]:
    providers = default_cep_providers()
    try:
        yield providers
    finally:
        for p in providers:
            p.close()
