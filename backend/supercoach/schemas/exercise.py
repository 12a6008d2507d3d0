from enum import Enum
from typing import Optional

from pydantic import BaseModel


class Difficulty(str, Enum):
    beginner = "Beginner"
    intermediate = "Intermediate"
    advanced = "Advanced"


class ExerciseRead(BaseModel):
    id: str
    name: str
    instructions: str
    image_url: Optional[str] = None
    equipment: list[str]
    target_muscles: list[str]
    difficulty: Difficulty
