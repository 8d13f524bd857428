"""Order status and its transition table.

All lifecycle rules live in ``_TRANSITIONS`` so they can be read (and
tested) in one place, independently of the Order aggregate.
"""

from __future__ import annotations

from enum import Enum

from storefront.domain.exceptions import InvalidStatusTransitionError


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PREPARING = "PREPARING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    def can_transition_to(self, requested: OrderStatus) -> bool:
        return requested in _TRANSITIONS[self]

    def is_final(self) -> bool:
        return not _TRANSITIONS[self]

    def can_be_cancelled(self) -> bool:
        """Narrower than the table: a SHIPPED order cannot be recalled."""
        return self in _CANCELLABLE


_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.PREPARING, OrderStatus.CANCELLED}),
    OrderStatus.PREPARING: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}

_CANCELLABLE = frozenset({OrderStatus.PENDING, OrderStatus.CONFIRMED, OrderStatus.PREPARING})

_DESCRIPTIONS = {
    OrderStatus.PENDING: "Pendente",
    OrderStatus.CONFIRMED: "Confirmado",
    OrderStatus.PREPARING: "Preparando",
    OrderStatus.SHIPPED: "Enviado",
    OrderStatus.DELIVERED: "Entregue",
    OrderStatus.CANCELLED: "Cancelado",
}


def ensure_transition(current: OrderStatus, requested: OrderStatus) -> None:
    """Raise InvalidStatusTransitionError unless the table allows the move."""
    if not current.can_transition_to(requested):
        raise InvalidStatusTransitionError(current, requested)
