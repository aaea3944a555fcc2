"""Mapping of service outcomes to HTTP errors."""

from fastapi import HTTPException

from ..models.outcome import Outcome

STATUS_CODES = {
    Outcome.NOT_FOUND: 404,
    Outcome.AUTH_FAILED: 403,
    Outcome.CONFLICT: 409,
}


def raise_for_outcome(outcome: Outcome, details: dict[Outcome, str]) -> None:
    """Raise HTTPException for any outcome other than OK."""
    if outcome is Outcome.OK:
        return
    raise HTTPException(status_code=STATUS_CODES[outcome], detail=details[outcome])
