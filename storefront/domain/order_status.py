# storefront/domain/order_status.py
from storefront.domain.errors import InvalidStatusTransition, ValidationError

PENDING = "pending"
PROCESSING = "processing"
SHIPPED = "shipped"
COMPLETED = "completed"

STATUSES = (PENDING, PROCESSING, SHIPPED, COMPLETED)

#dozwolone przejscia - tylko jeden krok do przodu
TRANSITIONS = {
    PENDING: PROCESSING,
    PROCESSING: SHIPPED,
    SHIPPED: COMPLETED,
}


def check_transition(current: str, new: str) -> str:
    if new not in STATUSES:
        raise ValidationError(f"Unknown order status '{new}'")

    if TRANSITIONS.get(current) != new:
        raise InvalidStatusTransition(
            f"Cannot change order status from '{current}' to '{new}'"
        )

    return new
