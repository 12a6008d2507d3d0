from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from supercoach.api.workouts import router as workouts_router
from supercoach.api.goals import router as goals_router
from supercoach.api.progress import router as progress_router
from supercoach.api.exercises import router as exercises_router
from supercoach.api.coach import router as coach_router
from supercoach.core.log_config import configure_logging
from supercoach.db import Base, engine
from supercoach.models.workout import Workout  # noqa: F401  (import ensures table is registered)
from supercoach.models.goal import Goal  # noqa: F401


configure_logging()

app = FastAPI(title="SuperCoach")

# Allow CORS for local frontend
origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create DB tables (workouts, goals) on startup
Base.metadata.create_all(bind=engine)

app.include_router(workouts_router)
app.include_router(goals_router)
app.include_router(progress_router)
app.include_router(exercises_router)
app.include_router(coach_router)


@app.get("/")
def root():
    return {"message": "SuperCoach backend is running"}
