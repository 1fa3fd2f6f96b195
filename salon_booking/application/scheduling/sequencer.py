from __future__ import annotations

from collections.abc import Sequence

from salon_booking.application.scheduling.time_utils import add_minutes
from salon_booking.domain.entities.cart import CartItem


def sequence_cart_start_times(items: Sequence[CartItem], start_time: str) -> list[tuple[CartItem, str]]:
    """
    Chain cart items back to back from `start_time` in insertion order.
    The first item starts at `start_time`; each following item starts when
    the previous one ends.
    """
    cursor = start_time
    sequenced: list[tuple[CartItem, str]] = []
    for item in items:
        sequenced.append((item, cursor))
        cursor = add_minutes(cursor, item.service.duration)
    return sequenced
