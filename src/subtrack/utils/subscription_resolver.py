"""Utility for resolving subscription references to IDs."""

from subtrack.domain.errors import NotFoundError, ValidationError
from subtrack.domain.subscription import SubscriptionService


def resolve_subscription(service: SubscriptionService, reference: str) -> str:
    """Resolve a subscription ID, ID prefix or name to a subscription ID.

    Args:
        service: SubscriptionService instance
        reference: Full ID, unique ID prefix, or exact name (case-insensitive)

    Returns:
        Subscription ID

    Raises:
        NotFoundError: If nothing matches
        ValidationError: If the reference matches more than one subscription
    """
    reference = reference.strip()
    if service.get_subscription(reference) is not None:
        return reference

    subscriptions = service.list_subscriptions()

    by_name = [sub for sub in subscriptions if sub.name.lower() == reference.lower()]
    if len(by_name) == 1:
        return by_name[0].id

    by_prefix = [sub for sub in subscriptions if reference and sub.id.startswith(reference)]
    if len(by_prefix) == 1:
        return by_prefix[0].id

    if len(by_name) > 1 or len(by_prefix) > 1:
        raise ValidationError(f"'{reference}' matches more than one subscription; use its ID")
    raise NotFoundError(f"Subscription '{reference}' not found")
