"""Shared application constants.

Centralizes values used by the progress aggregation, the goal pages and the
exercise library so they can be documented and adjusted in one place.
"""

# Number of monthly buckets in the workout-frequency chart
DEFAULT_MONTHS_BACK = 6

# Upper bound accepted by the API for the monthly window
MAX_MONTHS_BACK = 36

# A trend line needs at least this many points
MIN_TREND_POINTS = 2

# Display value when there is no weight data
NOT_AVAILABLE = "N/A"

# Goal status labels used by the proportion chart, in display order
GOAL_STATUS_LABELS = {
    "completed": "Completed",
    "in_progress": "In Progress",
    "pending": "Pending",
}

# Effort is rated on the RPE scale
RPE_MIN = 1
RPE_MAX = 10

EXERCISE_LIBRARY = [
    {
        "id": "1",
        "name": "Push Up",
        "instructions": (
            "1. Start in a plank position. 2. Lower your body until your chest "
            "nearly touches the floor. 3. Push back up to the starting position."
        ),
        "image_url": "/images/push-up.png",
        "equipment": ["Bodyweight"],
        "target_muscles": ["Chest", "Shoulders", "Triceps"],
        "difficulty": "Beginner",
    },
    {
        "id": "2",
        "name": "Squat",
        "instructions": (
            "1. Stand with your feet shoulder-width apart. 2. Lower your hips as "
            "if sitting in a chair. 3. Keep your chest up and back straight. "
            "4. Return to the starting position."
        ),
        "image_url": "/images/squat.png",
        "equipment": ["Bodyweight", "Barbell", "Dumbbells"],
        "target_muscles": ["Quads", "Glutes", "Hamstrings"],
        "difficulty": "Beginner",
    },
    {
        "id": "3",
        "name": "Plank",
        "instructions": (
            "1. Hold a push-up position with your forearms on the ground. "
            "2. Keep your body in a straight line from head to heels. "
            "3. Engage your core."
        ),
        "image_url": "/images/plank.png",
        "equipment": ["Bodyweight"],
        "target_muscles": ["Core", "Abs"],
        "difficulty": "Beginner",
    },
    {
        "id": "4",
        "name": "Bicep Curl",
        "instructions": (
            "1. Stand or sit holding dumbbells with an underhand grip. "
            "2. Curl the weights up towards your shoulders. 3. Lower slowly."
        ),
        "image_url": "/images/bicep-curl.png",
        "equipment": ["Dumbbells", "Barbell"],
        "target_muscles": ["Biceps"],
        "difficulty": "Beginner",
    },
    {
        "id": "5",
        "name": "Lunge",
        "instructions": (
            "1. Step forward with one leg. 2. Lower your hips until both knees "
            "are bent at a 90-degree angle. 3. Push back to the starting "
            "position. Repeat with the other leg."
        ),
        "image_url": "/images/lunge.png",
        "equipment": ["Bodyweight", "Dumbbells"],
        "target_muscles": ["Quads", "Glutes", "Hamstrings"],
        "difficulty": "Intermediate",
    },
    {
        "id": "6",
        "name": "Deadlift",
        "instructions": (
            "1. Stand with feet hip-width apart, barbell over midfoot. 2. Hinge "
            "at hips, slight knee bend, grip bar outside knees. 3. Keep back "
            "straight, chest up. 4. Lift by extending hips and knees, keeping "
            "bar close to body. 5. Lower by reversing motion."
        ),
        "image_url": "/images/deadlift.png",
        "equipment": ["Barbell"],
        "target_muscles": ["Back", "Glutes", "Hamstrings", "Core"],
        "difficulty": "Advanced",
    },
]
