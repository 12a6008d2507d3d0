"""AI coach: prompt templates and a small Gemini REST client.

The model is treated as an opaque text-in/text-out service. Prompts are
filled here, posted to `generateContent`, and the text parts of the first
candidate are returned as-is.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Optional

import httpx

from supercoach.core.config import settings
from supercoach.core.constants import EXERCISE_LIBRARY

logger = logging.getLogger(__name__)


WORKOUT_PLAN_PROMPT = """You are a personal trainer. Generate a workout plan based on the user's fitness goal, fitness level, available equipment, and preferred duration.

Fitness Goal: {fitness_goal}
Fitness Level: {fitness_level}
Equipment Available: {equipment_available}
Preferred Duration: {preferred_duration}

Workout Plan:"""

FEEDBACK_PROMPT = """You are an AI SuperCoach, providing personalized feedback on workouts.

Analyze the workout log, RPE, exercises, and user notes, and provide concrete advice for future workouts, always considering the fitness goals and level of the user.

Fitness Goals: {fitness_goals}
Fitness Level: {level}
Workout Log: {workout_log}

Provide the feedback in a concise and actionable manner.
"""


class CoachError(Exception):
    """The model could not produce an answer."""


class CoachNotConfigured(CoachError):
    """No API key is configured."""


def exercise_name(exercise_id: str, fallback: Optional[str] = None) -> str:
    for ex in EXERCISE_LIBRARY:
        if ex["id"] == exercise_id:
            return ex["name"]
    return fallback or "Unknown Exercise"


def _format_set(i: int, s: Mapping) -> str:
    line = f"  Set {i}: {s.get('reps', 0)} reps"
    if s.get("weight"):
        line += f" at {s['weight']}kg"
    if s.get("rpe"):
        line += f", RPE {s['rpe']}"
    return line


def format_workout_log(workout: Mapping) -> str:
    """Render a workout (as a dict) into the plain-text log the model reads.

    Example:
        Date: 2024-01-05
        Duration: 45 min
        Overall RPE: 7

        Exercises:
        Squat:
          Set 1: 5 reps at 100kg, RPE 8

        Overall Notes: None
    """
    blocks = []
    for ex in workout.get("exercises") or []:
        lines = [f"{exercise_name(ex.get('exercise_id', ''), ex.get('exercise_name'))}:"]
        lines += [_format_set(i, s) for i, s in enumerate(ex.get("sets") or [], start=1)]
        if ex.get("notes"):
            lines.append(f"  Notes: {ex['notes']}")
        blocks.append("\n".join(lines))

    header = (
        f"Date: {workout.get('date')}\n"
        f"Duration: {workout.get('duration_minutes') or 'N/A'} min\n"
        f"Overall RPE: {workout.get('overall_effort') or 'N/A'}"
    )
    exercises = "\n\n".join(blocks)
    notes = workout.get("notes") or "None"
    return f"{header}\n\nExercises:\n{exercises}\n\nOverall Notes: {notes}"


def build_plan_prompt(
    fitness_goal: str,
    fitness_level: str,
    equipment_available: str,
    preferred_duration: str,
) -> str:
    return WORKOUT_PLAN_PROMPT.format(
        fitness_goal=fitness_goal,
        fitness_level=fitness_level,
        equipment_available=equipment_available,
        preferred_duration=preferred_duration,
    )


def build_feedback_prompt(workout_log: str, fitness_goals: str, level: str) -> str:
    return FEEDBACK_PROMPT.format(
        workout_log=workout_log, fitness_goals=fitness_goals, level=level
    )


def _extract_text(payload) -> str:
    """Text parts of the first candidate; '' when the body has another shape."""
    if not isinstance(payload, Mapping):
        return ""
    candidates = payload.get("candidates")
    if not isinstance(candidates, Sequence) or isinstance(candidates, str) or not candidates:
        return ""
    first = candidates[0]
    content = first.get("content") if isinstance(first, Mapping) else None
    parts = content.get("parts") if isinstance(content, Mapping) else None
    if not isinstance(parts, Sequence) or isinstance(parts, str):
        return ""
    return "".join(
        p["text"] for p in parts if isinstance(p, Mapping) and isinstance(p.get("text"), str)
    ).strip()


class CoachClient:
    """Posts prompts to the Gemini `generateContent` endpoint.

    Pass `http_client` to reuse a connection pool (or a mock transport in
    tests); otherwise a short-lived client is opened per request.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.gemini_api_key
        self.model = model or settings.gemini_model
        self.base_url = (base_url or settings.gemini_base_url).rstrip("/")
        self.timeout = timeout or settings.gemini_timeout_s
        self.http_client = http_client

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def _post(self, client: httpx.Client, body: dict) -> httpx.Response:
        url = f"{self.base_url}/models/{self.model}:generateContent"
        return client.post(url, params={"key": self.api_key}, json=body)

    def generate(self, prompt: str) -> str:
        if not self.configured:
            raise CoachNotConfigured("GEMINI_API_KEY is not set; AI features are unavailable")

        body = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
        try:
            if self.http_client is not None:
                r = self._post(self.http_client, body)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    r = self._post(client, body)
            r.raise_for_status()
            data = r.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.exception("Gemini request failed (model=%s)", self.model)
            raise CoachError(f"model request failed: {e}") from e

        text = _extract_text(data)
        if not text:
            logger.error("Gemini returned no text (model=%s)", self.model)
            raise CoachError("model returned an empty response")
        return text

    def workout_plan(self, **kwargs) -> str:
        return self.generate(build_plan_prompt(**kwargs))

    def feedback(self, workout: Mapping, fitness_goals: str, level: str) -> str:
        prompt = build_feedback_prompt(format_workout_log(workout), fitness_goals, level)
        return self.generate(prompt)


def get_coach() -> CoachClient:
    """FastAPI dependency; override in tests."""
    return CoachClient()
