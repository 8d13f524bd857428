"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.infrastructure.config import get_settings
from storefront.infrastructure.persistence.json_store import JsonStore
from storefront.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork


@lru_cache
def json_store() -> JsonStore:
    return JsonStore(get_settings().store_path)


def unit_of_work_factory() -> UnitOfWorkFactory:
    store = json_store()
    return lambda: JsonUnitOfWork(store)


def default_currency() -> str:
    return get_settings().default_currency
