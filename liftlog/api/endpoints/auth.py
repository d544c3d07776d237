"""Email-link sign-in and session lookup."""

from fastapi import APIRouter, Depends

from liftlog.api.deps import get_auth_service, get_current_user
from liftlog.schemas.common import SuccessResponse
from liftlog.schemas.user import EmailSignInRequest, SessionToken, UserRead
from liftlog.services.auth_service import AuthService

router = APIRouter()


@router.post("/signin/email", response_model=SuccessResponse, status_code=202)
async def sign_in_with_email(
    payload: EmailSignInRequest,
    auth: AuthService = Depends(get_auth_service),
):
    """Mail a one-shot sign-in link to the address."""
    await auth.request_sign_in(payload.email)
    return SuccessResponse()


@router.get("/callback/email", response_model=SessionToken)
async def email_callback(
    email: str,
    token: str,
    auth: AuthService = Depends(get_auth_service),
):
    """Target of the mailed link: exchanges the token for a session token."""
    return await auth.complete_sign_in(email, token)


@router.get("/session", response_model=UserRead)
async def current_session(user: UserRead = Depends(get_current_user)):
    return user
