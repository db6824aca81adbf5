from typing import Optional
from fastapi import APIRouter, Depends, status
from ..src import auth_manager
from ..models import models
from ..config.storage import UserStore, get_user_store

auth_user_router = APIRouter(tags=["user Authentication"]) # create a router for user


@auth_user_router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=models.message_response)
async def user_signup(data: Optional[models.credentials] = None, store: UserStore = Depends(get_user_store)):
    return await auth_manager.signup(data, store)

@auth_user_router.post("/login", status_code=status.HTTP_200_OK, response_model=models.message_response) # login using email and password
async def user_login(data: Optional[models.credentials] = None, store: UserStore = Depends(get_user_store)):
    return await auth_manager.login(data, store)
