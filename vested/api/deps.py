from fastapi import HTTPException, status

from vested.models import Grant
from vested.schemas import GrantPayload
from vested.services.vesting import InvalidConfigurationError, build_grant


def get_grant(payload: GrantPayload) -> Grant:
    try:
        return build_grant(
            amount=payload.amount,
            grant_date=payload.grant_date,
            cliff_percentage=payload.cliff_percentage,
            cliff=payload.cliff,
            length=payload.length,
            interval=payload.interval,
        )
    except InvalidConfigurationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
