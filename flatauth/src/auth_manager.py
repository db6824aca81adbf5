from fastapi import HTTPException, status
import traceback
from typing import Optional
from ..models import models
from ..config.storage import UserStore
from ..helper.errors import ValidationError, ConflictError, AuthError
from ..helper.utils import setup_logging, utc_timestamp

logger = setup_logging() # initialize logger

MISSING_FIELDS = "Email and password are required."


def find_user(users, email: str) -> Optional[models.user_record]:
    # exact, case-sensitive match; first record wins
    for user in users:
        if isinstance(user, models.user_record) and user.email == email:
            return user
    return None


def require_credentials(data: Optional[models.credentials]):
    if data is None or not data.email or not data.password:
        raise ValidationError(MISSING_FIELDS)
    return data.email, data.password


async def signup(data: Optional[models.credentials], store: UserStore):
    """Registers a new user in the flat-file store.
Steps performed:
- Checks that both email and password are present.
- Loads every record and rejects the request if the email is already registered.
- Appends the new record with the current timestamp and rewrites the whole file.
Args:
    data (models.credentials): email and password from the request body.
    store (UserStore): the user store to read from and write to.
Returns:
    dict: {"message": "Signup successful!"}
Raises:
    ValidationError: 400 when email or password is missing.
    ConflictError: 409 when the email is already registered.
    HTTPException: 500 on any unexpected error."""
    try:
        email, password = require_credentials(data)

        users = store.load()
        if find_user(users, email):
            logger.warning(f"Signup attempt with existing email: {email}")
            raise ConflictError("Email already registered.")

        new_user = models.user_record(email=email, password=password, timestamp=utc_timestamp()) # stored as plaintext
        users.append(new_user)
        store.save(users)

        logger.info(f"User signed up: {email}")
        return {"message": "Signup successful!"}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating new user: {traceback.format_exc()}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


async def login(data: Optional[models.credentials], store: UserStore):
    """Checks an email/password pair against the flat-file store.
Args:
    data (models.credentials): email and password from the request body.
    store (UserStore): the user store to read from.
Returns:
    dict: {"message": "Login successful!"}
Raises:
    ValidationError: 400 when email or password is missing.
    AuthError: 401 when the email is unknown or the password does not match.
    HTTPException: 500 on any unexpected error."""
    try:
        email, password = require_credentials(data)

        user = find_user(store.load(), email)
        if not user:
            logger.warning(f"login attempt with unknown email: {email}")
            raise AuthError("Invalid credentials. User not found.")

        if user.password != password:
            logger.warning(f"login attempt with incorrect password: {email}")
            raise AuthError("Invalid credentials. Password incorrect.")

        logger.info(f"User logged in: {email}")
        return {"message": "Login successful!"}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"login attempt failed: {traceback.format_exc()}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
