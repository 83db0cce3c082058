from fastapi import APIRouter, Depends, status
from tinyapp.api.session import RequestSession
from tinyapp.result import unwrap
from tinyapp.schemas.user import RegisterRequest, LoginRequest, UserResponse
from tinyapp.state import AppState
from tinyapp.dependencies import get_session, get_state

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    session: RequestSession = Depends(get_session),
    state: AppState = Depends(get_state)
):
    """Create an account and log it in (400 on missing fields or taken email)"""
    user = state.users.create(payload.email, payload.password)
    session.user_id = user.id
    return UserResponse.model_validate(user)


@router.post("/login", response_model=UserResponse)
async def login(
    payload: LoginRequest,
    session: RequestSession = Depends(get_session),
    state: AppState = Depends(get_state)
):
    """Log in with email and password (403 on bad credentials)"""
    user = state.users.authenticate(payload.email, payload.password)
    session.user_id = user.id
    return UserResponse.model_validate(user)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(session: RequestSession = Depends(get_session)):
    """Forget the logged-in user; the visitor id is kept for analytics"""
    session.user_id = None


@router.get("/me", response_model=UserResponse)
async def read_current_user(
    session: RequestSession = Depends(get_session),
    state: AppState = Depends(get_state)
):
    """Current session user (401 when logged out)"""
    user_id = unwrap(state.gate.require_auth(session))
    return UserResponse.model_validate(state.users.get(user_id))
