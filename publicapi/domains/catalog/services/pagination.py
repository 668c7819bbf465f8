# publicapi/domains/catalog/services/pagination.py
from __future__ import annotations


def compute_page_count(total_items: int, page_size: int) -> int:
    """
    Número de páginas para `total_items` com páginas de `page_size`.

    Sem paginação (page_size <= 0) tudo cabe numa página: 1 se houver
    itens, 0 caso contrário.

    Exemplo:
        >>> compute_page_count(10, 3)
        4
    """
    if page_size > 0:
        return -(-total_items // page_size)
    return 1 if total_items > 0 else 0
