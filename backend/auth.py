import logging
from datetime import datetime, timedelta, timezone

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from backend.config import ACCESS_TOKEN_EXPIRE_MINUTES, ALGORITHM, SECRET_KEY
from backend.database import get_db
from backend.models import User

logger = logging.getLogger("workouts.auth")

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Authorization: bearer <token>; the scheme name is matched case-insensitively
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/user/login")


def get_password_hash(password):
    return pwd_context.hash(password)


def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: timedelta | None = None):
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def token_for(user: User) -> str:
    return create_access_token(data={"sub": str(user.id)})


def decode_access_token(token: str) -> int:
    """Return the user id carried by a token, raising JWTError when it is unusable."""
    payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    subject = payload.get("sub")
    if subject is None:
        raise JWTError("token has no subject")
    try:
        return int(subject)
    except (TypeError, ValueError):
        raise JWTError("malformed subject %r" % subject)


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
):
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Request is not authorized",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        user_id = decode_access_token(token)
    except JWTError as e:
        logger.warning("rejected token: %s", e)
        raise credentials_exception

    user = db.get(User, user_id)
    if user is None:
        logger.warning("token refers to unknown user %s", user_id)
        raise credentials_exception
    return user
