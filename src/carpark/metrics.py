"""Prometheus metrics for car park occupancy."""

from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram, generate_latest

# Create a custom registry to avoid conflicts with default metrics
REGISTRY = CollectorRegistry()

# Occupancy changes counter with time of day label
OCCUPANCY_CHANGES = Counter(
    "carpark_occupancy_changes_total",
    "Total number of cars parked in or removed from slots",
    ["slot_type", "change_type", "hour_of_day"],
    registry=REGISTRY,
)

# Slot count gauges
TOTAL_SLOTS = Gauge(
    "carpark_slots_total",
    "Total number of parking slots",
    ["slot_type"],
    registry=REGISTRY,
)

OCCUPIED_SLOTS = Gauge(
    "carpark_slots_occupied",
    "Number of occupied parking slots",
    ["slot_type"],
    registry=REGISTRY,
)

AVAILABLE_SLOTS = Gauge(
    "carpark_slots_available",
    "Number of unoccupied parking slots",
    ["slot_type"],
    registry=REGISTRY,
)

# Billable hours charged when a car leaves
BILLABLE_HOURS = Histogram(
    "carpark_billable_hours",
    "Billable hours charged for a stay",
    ["slot_type"],
    buckets=(0, 1, 2, 3, 4, 6, 8, 12, 24, 48),
    registry=REGISTRY,
)


def record_occupancy_change(slot_type: str, parked: bool, hour: int) -> None:
    """Record a car being parked or removed."""
    change_type = "parked" if parked else "removed"
    OCCUPANCY_CHANGES.labels(
        slot_type=slot_type,
        change_type=change_type,
        hour_of_day=str(hour).zfill(2),
    ).inc()


def update_slot_counts(slot_type: str, total: int, occupied: int) -> None:
    """Update slot count gauges for one slot type."""
    TOTAL_SLOTS.labels(slot_type=slot_type).set(total)
    OCCUPIED_SLOTS.labels(slot_type=slot_type).set(occupied)
    AVAILABLE_SLOTS.labels(slot_type=slot_type).set(total - occupied)


def record_billable_hours(slot_type: str, hours: int) -> None:
    """Record the billable hours of a finished stay."""
    BILLABLE_HOURS.labels(slot_type=slot_type).observe(hours)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest(REGISTRY)
