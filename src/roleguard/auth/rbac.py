from typing import Any, Awaitable, Callable, Optional, Union

from fastapi import Depends, HTTPException, Request

from roleguard.auth.guards import (
    assert_can_assign_role,
    assert_can_modify_user,
    assert_founder,
)
from roleguard.auth.models import Actor, GuardErrorCode, GuardResult, TargetUser
from roleguard.utils.logging import logger

ActorProvider = Callable[..., Union[Optional[Actor], Awaitable[Optional[Actor]]]]

# Denials not listed here are authorization failures (403).
DENIAL_STATUS_CODES = {
    GuardErrorCode.ACTOR_REQUIRED: 401,
    GuardErrorCode.INVALID_ROLE: 400,
}


def status_code_for(code: Optional[GuardErrorCode]) -> int:
    return DENIAL_STATUS_CODES.get(code, 403)


def raise_for_denial(result: GuardResult) -> None:
    """Raise an HTTPException carrying the code and reason of a denied result.

    Allowed results pass through silently. The detail only exposes the
    enumerated code and the guard's reason text.
    """
    if result.allowed:
        return

    status_code = status_code_for(result.code)
    logger.info(f"Guard denied with {result.code.value}: {result.reason}")
    raise HTTPException(
        status_code=status_code,
        detail={"code": result.code.value, "message": result.reason},
    )


def check_role_assignment(
    actor: Optional[Actor], target_user: Optional[TargetUser], new_role: Any
) -> None:
    """Raise unless `actor` may assign `new_role` to `target_user`."""
    raise_for_denial(assert_can_assign_role(actor, target_user, new_role))


def require_founder(get_actor: ActorProvider) -> Callable:
    """FastAPI dependency factory: the actor resolved by `get_actor` must
    hold the founder role. Returns the actor.

    Usage:
        @router.put("/settings/{key}")
        async def update_setting(
            key: str,
            actor: Actor = Depends(require_founder(get_session_actor)),
        ):
    """

    async def _check(actor: Optional[Actor] = Depends(get_actor)) -> Actor:
        raise_for_denial(assert_founder(actor))
        logger.debug(f"Founder access granted to user {actor.id}")
        return actor

    return _check


def require_modifiable_user(
    get_actor: ActorProvider, user_id_param: str = "user_id"
) -> Callable:
    """FastAPI dependency factory: blocks an actor from mutating their own
    account through generic admin write endpoints.

    The target user id is read from the path parameters by name.
    """

    async def _check(
        request: Request,
        actor: Optional[Actor] = Depends(get_actor),
    ) -> Actor:
        target_user_id = request.path_params.get(user_id_param)
        if target_user_id is None:
            raise HTTPException(
                status_code=400, detail=f"Missing path parameter: {user_id_param}"
            )

        raise_for_denial(assert_can_modify_user(actor, target_user_id))
        logger.debug(f"User {actor.id} allowed to modify user {target_user_id}")
        return actor

    return _check
