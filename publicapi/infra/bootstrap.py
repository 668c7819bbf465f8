# publicapi/infra/bootstrap.py
import logging
from decimal import Decimal

from publicapi.core.logging import log_timing
from publicapi.domains.catalog.services.uri_composer import PLACEHOLDER_BASE_URL

log = logging.getLogger("pubapi.bootstrap")

SEED_BRANDS: list[tuple[int, str]] = [
    (1, "Azure"),
    (2, ".NET"),
    (3, "Visual Studio"),
    (4, "SQL Server"),
    (5, "Other"),
]

SEED_TYPES: list[tuple[int, str]] = [
    (1, "Mug"),
    (2, "T-Shirt"),
    (3, "Sheet"),
    (4, "USB Memory Stick"),
]

# (type, brand, name, price)
_SEED_ITEMS: list[tuple[int, int, str, str]] = [
    (2, 2, ".NET Bot Black Sweatshirt", "19.50"),
    (1, 2, ".NET Black & White Mug", "8.50"),
    (2, 5, "Prism White T-Shirt", "12.00"),
    (2, 2, ".NET Foundation Sweatshirt", "12.00"),
    (3, 5, "Roslyn Red Sheet", "8.50"),
    (2, 2, ".NET Blue Sweatshirt", "12.00"),
    (2, 5, "Roslyn Red T-Shirt", "12.00"),
    (2, 5, "Kudu Purple Sweatshirt", "8.50"),
    (1, 5, "Cup<T> White Mug", "12.00"),
    (3, 2, ".NET Foundation Sheet", "12.00"),
    (3, 2, "Cup<T> Sheet", "8.50"),
    (2, 5, "Prism White TShirt", "12.00"),
]


def seed_items() -> list[dict]:
    return [
        {
            "id": n,
            "catalog_type_id": id_type,
            "catalog_brand_id": id_brand,
            "name": name,
            "description": name,
            "price": Decimal(price),
            "picture_uri": f"{PLACEHOLDER_BASE_URL}/images/products/{n}.png",
        }
        for n, (id_type, id_brand, name, price) in enumerate(_SEED_ITEMS, start=1)
    ]


def ensure_catalog_seed(session_factory) -> dict[str, int]:
    """
    Garante que o catálogo tem dados de demonstração.

    Só insere quando não existe nenhum item; chamadas repetidas não
    duplicam nada. Deve ser chamado no startup da API.
    Retorna contagem de linhas criadas.
    """
    from publicapi.infra.uow import UoW
    from publicapi.repositories.catalog.write.catalog_write_repo import CatalogWriteRepository

    result = {"catalog_brands": 0, "catalog_types": 0, "catalog_items": 0}

    with session_factory() as db:
        uow = UoW(db)
        repo = CatalogWriteRepository(db)

        if not repo.is_empty():
            log.debug("Bootstrap: catalog already populated, skipping seed")
            return result

        with log_timing("seed_catalog", log, items=len(_SEED_ITEMS)):
            if not uow.catalog_brands.list_all():
                result["catalog_brands"] = repo.add_brands(SEED_BRANDS)
            if not uow.catalog_types.list_all():
                result["catalog_types"] = repo.add_types(SEED_TYPES)
            result["catalog_items"] = repo.add_items(seed_items())
            uow.commit()

    log.info(
        "Bootstrap: seeded %d brands, %d types, %d items",
        result["catalog_brands"],
        result["catalog_types"],
        result["catalog_items"],
    )
    return result
