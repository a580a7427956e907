from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from guesser.core.deps import SerializedGuard, get_guard
from guesser.core.logging import get_security_logger
from guesser.core.rate_limit import rate_limiter

sec_logger = get_security_logger()

router = APIRouter(prefix="/guard", tags=["Guard"])


class GuessIn(BaseModel):
    guess: str


def _client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


@router.post("/match")
def match(
    request: Request,
    body: GuessIn,
    guard: SerializedGuard = Depends(get_guard),
):
    ip = _client_ip(request)

    # лимит проверяем до гварда, чтобы не тратить попытки
    if not rate_limiter.check(f"ip:{ip}"):
        sec_logger.warning(f"Rate limit hit on /guard/match ip={ip}")
        raise HTTPException(status_code=429, detail="Too many requests")

    if not guard.match(body.guess):
        # locked и wrong выглядят одинаково
        raise HTTPException(status_code=401, detail="Invalid guess")

    return {"matched": True, "remaining": guard.remaining()}


@router.get("/remaining")
def remaining(
    request: Request,
    guard: SerializedGuard = Depends(get_guard),
):
    ip = _client_ip(request)
    if not rate_limiter.check(f"ip:{ip}"):
        sec_logger.warning(f"Rate limit hit on /guard/remaining ip={ip}")
        raise HTTPException(status_code=429, detail="Too many requests")

    return {"remaining": guard.remaining()}
