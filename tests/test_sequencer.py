from __future__ import annotations

from salon_booking.application.scheduling.sequencer import sequence_cart_start_times
from salon_booking.domain.entities.cart import BookingSession, CartItem
from salon_booking.domain.entities.service import Service

HAIRCUT = Service(id="m1", title="Men's haircut", price=1500, duration=45, category="mens")
TRIM = Service(id="w2", title="Fringe trim", price=500, duration=30, category="womens")
COLOR = Service(id="c1", title="Coloring", price=4000, duration=120, category="coloring")


def test_items_are_chained_back_to_back():
    items = [CartItem(service=HAIRCUT), CartItem(service=TRIM)]
    result = sequence_cart_start_times(items, "11:00")

    assert [(item.service.id, start) for item, start in result] == [("m1", "11:00"), ("w2", "11:45")]


def test_insertion_order_is_kept():
    items = [CartItem(service=COLOR), CartItem(service=HAIRCUT), CartItem(service=TRIM)]
    result = sequence_cart_start_times(items, "9:30")

    assert [start for _, start in result] == ["9:30", "11:30", "12:15"]
    assert [item for item, _ in result] == items


def test_empty_cart():
    assert sequence_cart_start_times([], "10:00") == []


def test_session_totals_and_editing():
    session = BookingSession().add(HAIRCUT).add(TRIM)
    assert session.total_duration == 75
    assert session.total_price == 2000

    first_id = session.items[0].id
    session = session.remove(first_id)
    assert [item.service.id for item in session.items] == ["w2"]

    assert session.clear().items == ()
    assert session.select(None).selected_time is None
    assert session.reset() == BookingSession()
