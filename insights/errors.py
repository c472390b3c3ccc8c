"""Error taxonomy shared by the API client, mutation service and controller."""

from __future__ import annotations

from typing import Dict, Optional


class InsightsError(Exception):
    """Base class for every error the dashboard core raises."""


class FetchError(InsightsError):
    """The paired records/analytics load failed; nothing from it may be applied."""

    def __init__(self, detail: str, status_code: Optional[int] = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class MutationError(InsightsError):
    """A create, update or delete request was rejected or never completed."""

    def __init__(self, detail: str, status_code: Optional[int] = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class PropertyNotFoundError(MutationError):
    """The backend does not know the targeted property id."""


class FormValidationError(InsightsError):
    """Form input rejected locally before it could reach the network."""

    def __init__(self, errors: Dict[str, str]) -> None:
        message = "; ".join(f"{field}: {reason}" for field, reason in errors.items())
        super().__init__(message)
        self.errors = dict(errors)


__all__ = [
    "InsightsError",
    "FetchError",
    "MutationError",
    "PropertyNotFoundError",
    "FormValidationError",
]
