import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from backend.auth import get_current_user
from backend.database import get_db
from backend.models import User, Workout
from backend.schemas import WorkoutCreate, WorkoutResponse, WorkoutUpdate

logger = logging.getLogger("workouts.api")


def no_user():
    """Requester for the open API: nobody, so queries are not owner-scoped."""
    return None


def _scoped(db: Session, user: User | None):
    query = db.query(Workout)
    if user is not None:
        query = query.filter(Workout.user_id == user.id)
    return query


def _get_owned_workout(db: Session, user: User | None, workout_id: str) -> Workout:
    # Malformed ids, missing records and other users' records all look the same
    try:
        pk = int(workout_id)
    except ValueError:
        pk = None
    workout = None
    if pk is not None:
        workout = _scoped(db, user).filter(Workout.id == pk).first()
    if workout is None:
        raise HTTPException(status_code=404, detail="No such workout")
    return workout


def build_router(auth_enabled: bool = True) -> APIRouter:
    """Workout CRUD routes; with ``auth_enabled`` every route requires a bearer token
    and only sees the requester's own workouts."""
    requester = get_current_user if auth_enabled else no_user
    router = APIRouter(prefix="/api/workouts", tags=["workouts"])

    @router.get("", response_model=list[WorkoutResponse])
    def list_workouts(
        user: User | None = Depends(requester),
        db: Session = Depends(get_db)
    ):
        return _scoped(db, user).order_by(Workout.created_at.desc(), Workout.id.desc()).all()

    @router.post("", response_model=WorkoutResponse, status_code=201)
    def create_workout(
        workout: WorkoutCreate,
        user: User | None = Depends(requester),
        db: Session = Depends(get_db)
    ):
        db_workout = Workout(
            title=workout.title,
            reps=workout.reps,
            load=workout.load,
            user_id=user.id if user is not None else None,
        )
        db.add(db_workout)
        db.commit()
        db.refresh(db_workout)
        logger.info("created workout %s (%r) for user %s", db_workout.id, db_workout.title, db_workout.user_id)
        return db_workout

    @router.get("/{workout_id}", response_model=WorkoutResponse)
    def get_workout(
        workout_id: str,
        user: User | None = Depends(requester),
        db: Session = Depends(get_db)
    ):
        return _get_owned_workout(db, user, workout_id)

    @router.put("/{workout_id}", response_model=WorkoutResponse)
    def update_workout(
        workout_id: str,
        update_data: WorkoutUpdate,
        user: User | None = Depends(requester),
        db: Session = Depends(get_db)
    ):
        workout = _get_owned_workout(db, user, workout_id)
        changes = update_data.model_dump(exclude_unset=True)
        for field, value in changes.items():
            setattr(workout, field, value)
        db.commit()
        db.refresh(workout)
        logger.info("updated workout %s: %s", workout.id, sorted(changes))
        return workout

    @router.delete("/{workout_id}", status_code=204)
    def delete_workout(
        workout_id: str,
        user: User | None = Depends(requester),
        db: Session = Depends(get_db)
    ):
        workout = _get_owned_workout(db, user, workout_id)
        db.delete(workout)
        db.commit()
        logger.info("deleted workout %s", workout_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
