from sqlalchemy import Column, DateTime, Integer, String, func
from .db import Base

# -----------------------------
# ORM models (tables)
# -----------------------------
class QuoteRow(Base):
    __tablename__ = "quotes"
    # One row per quote fetched and saved by GET /cotacao
    id         = Column(Integer, primary_key=True, autoincrement=True)
    pair       = Column(String(16), nullable=False, index=True)   # e.g. "USD-BRL"
    bid        = Column(String(32), nullable=False)               # kept as the provider's decimal string
    source     = Column(String(32), nullable=False)               # provider that produced the quote
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<QuoteRow(id={self.id}, pair={self.pair}, bid={self.bid}, source={self.source})>"
