"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


def subscription_not_found(subscription_id: str) -> str:
    """Return message for missing subscription."""
    return f"Subscription {subscription_id} not found"


def reorder_target_not_found(target_id: str) -> str:
    """Return message when a reorder target is not in the ordering."""
    return f"Cannot move relative to {target_id}: it is not in the current ordering"


def day_out_of_range(field_name: str, value: int) -> str:
    """Return message for a day field outside 1-31."""
    return f"{field_name} must be between 1 and 31, got {value}"


def unknown_choice(field_name: str, value: object, choices: list[str]) -> str:
    """Return message for a value that is not one of the allowed choices."""
    return f"Unknown {field_name} '{value}'. Expected one of: {', '.join(choices)}"
