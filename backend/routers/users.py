import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.auth import get_password_hash, token_for, verify_password
from backend.database import get_db
from backend.models import User
from backend.schemas import UserCreate, UserLogin, UserToken

router = APIRouter(prefix="/api/user", tags=["users"])
logger = logging.getLogger("workouts.users")


@router.post("/signup", response_model=UserToken, status_code=201)
def signup(user: UserCreate, db: Session = Depends(get_db)):
    email = user.email.lower()
    if db.query(User).filter(User.email == email).first():
        raise HTTPException(status_code=400, detail="Email already registered")

    db_user = User(email=email, hashed_password=get_password_hash(user.password))
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        # lost a race with a concurrent signup for the same address
        db.rollback()
        raise HTTPException(status_code=400, detail="Email already registered")
    db.refresh(db_user)

    logger.info("user %s signed up", db_user.id)
    return {"email": db_user.email, "token": token_for(db_user)}


@router.post("/login", response_model=UserToken)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    if not credentials.email or not credentials.password:
        raise HTTPException(status_code=400, detail="All fields must be filled")

    user = db.query(User).filter(User.email == credentials.email.strip().lower()).first()
    if not user or not verify_password(credentials.password, user.hashed_password):
        logger.warning("failed login for %s", credentials.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    logger.info("user %s logged in", user.id)
    return {"email": user.email, "token": token_for(user)}
