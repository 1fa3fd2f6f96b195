from __future__ import annotations

from salon_booking.domain.entities.service import Service

SERVICE_CATALOG: dict[str, Service] = {
    # Men's
    "m1": Service(id="m1", title="Men's haircut", price=1500, duration=45, category="mens"),
    # Women's
    "w1": Service(id="w1", title="Women's haircut", price=2500, duration=60, category="womens"),
    "w2": Service(id="w2", title="Fringe trim", price=500, duration=15, category="womens"),
    # Kids
    "k1": Service(id="k1", title="Kids' haircut", price=1000, duration=40, category="kids"),
    # Coloring
    "c1": Service(id="c1", title="Single-tone coloring", price=4000, duration=120, category="coloring"),
    "c2": Service(id="c2", title="Complex coloring", price=7000, duration=240, category="coloring"),
    # Styling
    "s1": Service(id="s1", title="Hair styling", price=2000, duration=60, category="styling"),
}
