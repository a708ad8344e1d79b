# /registration/api/users.py

from fastapi import APIRouter, Depends, Request

from registration.core.db import UserStore
from registration.schema.user import ErrorOut, MessageOut, RegisterRequest

router = APIRouter(tags=["users"])


def get_store(request: Request) -> UserStore:
    return request.app.state.store


@router.post(
    "/register",
    status_code=201,
    response_model=MessageOut,
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
async def register_user(payload: RegisterRequest, store: UserStore = Depends(get_store)):
    # DuplicateEmailError / PersistenceError are mapped by the app's exception handlers
    await store.insert(payload)
    return MessageOut(message="User registered successfully!")
