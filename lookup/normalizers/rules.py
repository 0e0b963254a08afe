from decimal import Decimal, InvalidOperation
import re
from typing import Any, Optional

from .base import MalformedPayload, Normalizer, RecordNotFound
from .types import Address, Payload, Quote, Record, Schema


class RuleNormalizer(Normalizer):
    """
    Rule-based field mapping:
    takes a raw provider payload and produces the provider-agnostic
    record (Address or Quote), so callers never see upstream field names.
    """
    def normalize_record(self, kind: Schema, payload: Payload, source: str) -> Record:
        if not isinstance(payload, dict):
            raise MalformedPayload(f"{kind}: expected a JSON object, got {type(payload).__name__}")
        try:
            if kind == "brasilapi":
                return Address(
                    cep=norm_cep(payload.get("cep")),
                    street=clean_text(payload.get("street")),
                    neighborhood=clean_text(payload.get("neighborhood")),
                    city=clean_text(payload.get("city")),
                    state=norm_state(payload.get("state")),
                    source=source,
                )
            if kind == "viacep":
                # ViaCEP answers 200 with {"erro": true} for unknown CEPs
                if is_truthy_flag(payload.get("erro")):
                    raise RecordNotFound("CEP not found")
                return Address(
                    cep=norm_cep(payload.get("cep")),
                    street=clean_text(payload.get("logradouro")),
                    neighborhood=clean_text(payload.get("bairro")),
                    city=clean_text(payload.get("localidade")),
                    state=norm_state(payload.get("uf")),
                    source=source,
                )
            if kind == "awesomeapi":
                # {"USDBRL": {"code": "USD", "codein": "BRL", "bid": "5.43", ...}}
                entry = next((v for v in payload.values() if isinstance(v, dict)), None)
                if entry is None:
                    raise MalformedPayload("awesomeapi: no quote entry in payload")
                return Quote(
                    pair=norm_pair(entry.get("code"), entry.get("codein")),
                    bid=norm_bid(entry.get("bid")),
                    source=source,
                )
            if kind == "cotacao":
                return Quote(
                    pair=clean_text(payload.get("pair")) or "USD-BRL",
                    bid=norm_bid(payload.get("bid")),
                    source=source,
                )
        except MalformedPayload:
            raise
        # pydantic's ValidationError is a ValueError too
        except (ValueError, TypeError) as e:
            raise MalformedPayload(f"{kind}: {e}") from e
        raise ValueError(f"unknown schema: {kind!r}")


# --- Individual field helpers ---

def norm_cep(s: Optional[Any]) -> str:
    """Accept "01001000" or "01001-000"; return "01001-000". Raise ValueError otherwise."""
    if s is None:
        raise ValueError("missing CEP")
    digits = re.sub(r"[\s.-]", "", str(s))
    if not re.fullmatch(r"\d{8}", digits):
        raise ValueError(f"invalid CEP: {s!r}")
    return f"{digits[:5]}-{digits[5:]}"

def clean_text(s: Optional[Any]) -> str:
    """Trim and collapse whitespace; None becomes ""."""
    if s is None: return ""
    return re.sub(r"\s+", " ", str(s).strip())

def norm_state(s: Optional[Any]) -> str:
    t = clean_text(s).upper()
    if not re.fullmatch(r"[A-Z]{2}", t):
        raise ValueError(f"invalid state: {s!r}")
    return t

def norm_pair(code: Optional[Any], codein: Optional[Any]) -> str:
    a, b = clean_text(code).upper(), clean_text(codein).upper()
    if not a or not b:
        raise ValueError("quote entry without code/codein")
    return f"{a}-{b}"

def norm_bid(s: Optional[Any]) -> str:
    """Bid must be a non-empty decimal; keep the upstream string (no float rounding)."""
    t = clean_text(s)
    if not t:
        raise ValueError("bid is empty")
    try:
        Decimal(t)
    except InvalidOperation:
        raise ValueError(f"bid is not a number: {s!r}")
    return t

def is_truthy_flag(v: Optional[Any]) -> bool:
    if isinstance(v, bool): return v
    return str(v).strip().lower() in {"true", "1", "yes"} if v is not None else False
