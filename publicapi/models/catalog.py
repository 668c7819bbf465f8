# publicapi/models/catalog.py
"""
Modelos do catálogo: marcas, tipos e itens.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from publicapi.infra.base import Base, utcnow


class CatalogBrand(Base):
    __tablename__ = "catalog_brands"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)


class CatalogType(Base):
    __tablename__ = "catalog_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)


class CatalogItem(Base):
    __tablename__ = "catalog_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)

    # Caminho relativo ou com placeholder do host; o UriComposer torna-o absoluto
    picture_uri: Mapped[str | None] = mapped_column(String(500), nullable=True)

    catalog_type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("catalog_types.id"), nullable=False, index=True
    )
    catalog_brand_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("catalog_brands.id"), nullable=False, index=True
    )
    catalog_type = relationship(CatalogType)
    catalog_brand = relationship(CatalogBrand)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime, default=utcnow, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<CatalogItem {self.id} {self.name!r}>"
