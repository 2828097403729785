"""Four-week plan content and its Enneagram personalizations."""

import copy
from typing import Any, Dict, List, Optional

from steadyday.personality import EnneagramType


def _habit(habit_id: str, name: str, description: str, frequency: str = "daily") -> Dict[str, Any]:
    return {
        "id": habit_id,
        "name": name,
        "description": description,
        "frequency": frequency,
        "completed": False,
    }


BASE_WEEKS: List[Dict[str, Any]] = [
    {
        "week_number": 1,
        "theme": "Foundation and Self-Knowledge",
        "goals": [
            "Establish a basic morning routine",
            "Start tracking mood every day",
            "Identify your main ADHD challenges",
        ],
        "habits": [
            _habit(
                "morning-routine",
                "Morning Routine",
                "Wake up at the same time and do 3 basic actions: drink water, make the bed, plan the day",
            ),
            _habit("mood-tracking", "Mood Tracking", "Log mood, energy and focus once a day"),
            _habit("mindfulness", "Mindfulness", "5 minutes of conscious breathing or meditation"),
        ],
    },
    {
        "week_number": 2,
        "theme": "Organization and Structure",
        "goals": [
            "Set up a task organization system",
            "Create an organized physical space",
            "Set healthy boundaries",
        ],
        "habits": [
            _habit("task-planning", "Task Planning", "Plan the 3 main tasks of the day the night before"),
            _habit("declutter", "Space Organization", "Tidy one small area of the house for 15 minutes"),
            _habit(
                "digital-boundaries",
                "Digital Boundaries",
                "Set times to check social media (at most twice a day)",
            ),
        ],
    },
    {
        "week_number": 3,
        "theme": "Energy and Physical Wellbeing",
        "goals": [
            "Add regular movement",
            "Improve sleep quality",
            "Establish regular eating habits",
        ],
        "habits": [
            _habit("exercise", "Daily Movement", "20 minutes of walking, dancing or light exercise"),
            _habit("sleep-routine", "Sleep Routine", "Go to bed at the same time, no screens 1 hour before"),
            _habit("hydration", "Hydration", "Drink at least 6 glasses of water during the day"),
        ],
    },
    {
        "week_number": 4,
        "theme": "Connection and Growth",
        "goals": [
            "Strengthen important relationships",
            "Develop communication skills",
            "Plan your next growth steps",
        ],
        "habits": [
            _habit(
                "social-connection",
                "Social Connection",
                "Have a meaningful conversation with someone important",
            ),
            _habit("gratitude", "Gratitude", "Write down 3 things you are grateful for"),
            _habit(
                "learning",
                "Learning",
                "Spend 15 minutes learning something new about ADHD or personal growth",
            ),
        ],
    },
]

# Extra week 2 habit and extra week 3 goal per type
PERSONALIZATIONS: Dict[EnneagramType, Dict[str, Any]] = {
    EnneagramType.PERFECTIONIST: {
        "habit": _habit(
            "progress-celebration",
            "Celebrate Progress",
            "Notice and celebrate small progress, even when it is not perfect",
        ),
        "goal": "Practice self-compassion and accept 'good enough'",
    },
    EnneagramType.HELPER: {
        "habit": _habit("self-care", "Self-Care", "Do something just for you, without helping anyone"),
        "goal": "Set healthy boundaries and prioritize your own needs",
    },
    EnneagramType.ACHIEVER: {
        "habit": _habit("rest-time", "Rest Time", "15 minutes of rest with no productivity or goals"),
        "goal": "Balance achievement with personal wellbeing",
    },
    EnneagramType.INDIVIDUALIST: {
        "habit": _habit(
            "creative-expression",
            "Creative Expression",
            "Spend time on a creative activity you enjoy",
        ),
        "goal": "Connect routine tasks to your personal values",
    },
    EnneagramType.INVESTIGATOR: {
        "habit": _habit(
            "social-interaction",
            "Social Interaction",
            "Have at least one meaningful social interaction",
        ),
        "goal": "Balance time alone with the social connection you need",
    },
    EnneagramType.LOYALIST: {
        "habit": _habit(
            "confidence-building",
            "Confidence Building",
            "Make one small independent decision without seeking approval",
        ),
        "goal": "Build self-confidence and reduce anxiety",
    },
    EnneagramType.ENTHUSIAST: {
        "habit": _habit("single-focus", "Single Focus", "Spend 25 uninterrupted minutes on a single task"),
        "goal": "Build focus and finish the projects you start",
    },
    EnneagramType.CHALLENGER: {
        "habit": _habit(
            "vulnerability-practice",
            "Vulnerability Practice",
            "Share a feeling or difficulty with someone you trust",
            frequency="weekly",
        ),
        "goal": "Balance strength with vulnerability and self-care",
    },
    EnneagramType.PEACEMAKER: {
        "habit": _habit(
            "priority-action",
            "Priority Action",
            "Finish the most important task of the day, even a small one",
        ),
        "goal": "Build momentum and personal assertiveness",
    },
}

if set(PERSONALIZATIONS) != set(EnneagramType):
    raise RuntimeError("PERSONALIZATIONS must cover every EnneagramType")


def generate_plan(enneagram_type: Optional[int] = None) -> Dict[str, Any]:
    """
    Build the four plan weeks.

    Args:
        enneagram_type: Optional type 1-9. Adds one habit to week 2 and one
            goal to week 3. Unknown types get the base plan.

    Returns:
        dict with "weeks": list of week dicts (fresh copies, safe to mutate)
    """
    weeks = copy.deepcopy(BASE_WEEKS)
    for week in weeks:
        week["reflections"] = None

    if enneagram_type:
        try:
            personalization = PERSONALIZATIONS[EnneagramType(enneagram_type)]
        except ValueError:
            personalization = None
        if personalization:
            weeks[1]["habits"].append(copy.deepcopy(personalization["habit"]))
            weeks[2]["goals"].append(personalization["goal"])

    return {"weeks": weeks}


def habit_ids(weeks: List[Dict[str, Any]]) -> List[str]:
    """Every habit id in plan order."""
    return [habit["id"] for week in weeks for habit in week.get("habits", [])]
