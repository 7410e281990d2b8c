"""
Filtrado en memoria de las vistas de menú (pública y de administración).

Trabaja sobre registros ya obtenidos, sin consultas adicionales: cambiar el
texto de búsqueda o la categoría seleccionada solo recalcula la lista.
"""
from typing import Iterable, List, Optional, Sequence, Union

ALL_CATEGORIES = "all"

PUBLIC_SEARCH_FIELDS = ("name", "name_ar", "description", "description_ar")
ADMIN_SEARCH_FIELDS = ("name", "name_ar")


def matches_search(record, query: Optional[str], fields: Sequence[str]) -> bool:
    """Subcadena sin distinguir mayúsculas en cualquiera de los campos; vacío = todo."""
    if not query:
        return True
    needle = query.casefold()
    for field in fields:
        value = getattr(record, field, None)
        if value and needle in value.casefold():
            return True
    return False


def matches_category(record, category_filter: Union[int, str, None]) -> bool:
    if category_filter is None or category_filter == "" or category_filter == ALL_CATEGORIES:
        return True
    return str(record.category_id) == str(category_filter)


def is_publicly_visible(record) -> bool:
    # Activo (publicado) y disponible (con existencias)
    return bool(record.is_active and record.is_available)


def active_categories(categories: Iterable) -> List:
    return [category for category in categories if category.is_active]


def filter_public_items(items: Iterable, category_filter: Union[int, str, None] = ALL_CATEGORIES, search: Optional[str] = "") -> List:
    return [
        item for item in items
        if is_publicly_visible(item)
        and matches_category(item, category_filter)
        and matches_search(item, search, PUBLIC_SEARCH_FIELDS)
    ]


def filter_admin_items(items: Iterable, search: Optional[str] = "") -> List:
    """El administrador ve todos los ítems, también los inactivos o agotados."""
    return [item for item in items if matches_search(item, search, ADMIN_SEARCH_FIELDS)]
