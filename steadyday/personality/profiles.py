"""Static Enneagram type profiles with ADHD-oriented growth tips."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Union

from . import EnneagramType


@dataclass(frozen=True)
class TypeProfile:
    type: EnneagramType
    name: str
    description: str
    strengths: List[str]
    challenges: List[str]
    growth_tips: List[str]
    advice: str

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["type"] = int(self.type)
        return d


PROFILES: Dict[EnneagramType, TypeProfile] = {
    EnneagramType.PERFECTIONIST: TypeProfile(
        type=EnneagramType.PERFECTIONIST,
        name="The Perfectionist",
        description="You strive for perfection and have a strong sense of right and wrong. "
        "You are organized, responsible and hold high standards.",
        strengths=[
            "Natural organization",
            "Attention to detail",
            "Sense of responsibility",
            "Drive for continuous improvement",
            "Integrity and ethics",
        ],
        challenges=[
            "Procrastination through perfectionism",
            "Excessive self-criticism",
            "Difficulty delegating",
            "Mental rigidity",
            "Impatience with mistakes",
        ],
        growth_tips=[
            "Apply the 'good enough' rule to less important tasks",
            "Set realistic deadlines and keep them, even when it is not perfect",
            "Use mindfulness techniques to quiet self-criticism",
            "Celebrate small progress every day",
            "Take regular breaks to avoid burnout",
        ],
        advice="Remember: 'good enough' beats perfect and late. Focus on progress, not perfection.",
    ),
    EnneagramType.HELPER: TypeProfile(
        type=EnneagramType.HELPER,
        name="The Helper",
        description="You are naturally empathetic and focused on helping others. "
        "You easily notice what other people need.",
        strengths=[
            "Natural empathy",
            "Interpersonal skills",
            "Motivation to help",
            "Intuition about others' needs",
            "Ability to build connections",
        ],
        challenges=[
            "Neglecting your own needs",
            "Difficulty saying no",
            "Procrastinating on personal tasks",
            "Depending on others' approval",
            "Burnout from overcommitment",
        ],
        growth_tips=[
            "Schedule time for your own needs every day",
            "Practice saying no kindly but firmly",
            "Use reminders to take care of yourself",
            "Set clear boundaries in relationships",
            "Celebrate your own achievements, not only the help you give",
        ],
        advice="Set aside 15 minutes today just for you. Your needs matter too!",
    ),
    EnneagramType.ACHIEVER: TypeProfile(
        type=EnneagramType.ACHIEVER,
        name="The Achiever",
        description="You are goal-oriented and strongly motivated to reach success and recognition.",
        strengths=[
            "Results orientation",
            "Energy and motivation",
            "Adaptability",
            "Natural leadership",
            "Efficiency with tasks",
        ],
        challenges=[
            "Burnout from too many activities",
            "Difficulty relaxing",
            "Excessive focus on image",
            "Impatience with slow processes",
            "Neglecting relationships for work",
        ],
        growth_tips=[
            "Schedule rest as if it were an important goal",
            "Practice activities that are not about results",
            "Use the Pomodoro technique to keep your energy sustainable",
            "Celebrate the process, not only the final results",
            "Spend time with people without an agenda",
        ],
        advice="How about scheduling a break with no goal at all? Resting is productive too.",
    ),
    EnneagramType.INDIVIDUALIST: TypeProfile(
        type=EnneagramType.INDIVIDUALIST,
        name="The Individualist",
        description="You are creative, sensitive and seek authenticity. "
        "You have a rich emotional life and appreciate beauty.",
        strengths=[
            "Creativity and originality",
            "Emotional depth",
            "Authenticity",
            "Aesthetic sensitivity",
            "Capacity for innovation",
        ],
        challenges=[
            "Mood swings affecting productivity",
            "Procrastinating when not inspired",
            "Comparing yourself to others",
            "Difficulty with routine tasks",
            "Tendency toward melancholy",
        ],
        growth_tips=[
            "Build routines that include creative elements",
            "Use your mood as a signal to adjust activities",
            "Set small daily goals regardless of inspiration",
            "Practice gratitude to balance melancholy",
            "Connect mundane tasks to your deeper values",
        ],
        advice="Connect your tasks to your personal values. It can boost your motivation.",
    ),
    EnneagramType.INVESTIGATOR: TypeProfile(
        type=EnneagramType.INVESTIGATOR,
        name="The Investigator",
        description="You are observant, curious and seek to understand the world "
        "through knowledge and analysis.",
        strengths=[
            "Analytical ability",
            "Independence",
            "Intellectual curiosity",
            "Objectivity",
            "Capacity for deep concentration",
        ],
        challenges=[
            "Excessive social isolation",
            "Procrastinating through over-research",
            "Difficulty making decisions",
            "Avoiding action in favor of planning",
            "Neglecting physical needs",
        ],
        growth_tips=[
            "Set time limits on research before acting",
            "Schedule regular social contact",
            "Use timeboxing to avoid analysis paralysis",
            "Practice deciding with 'enough' information",
            "Include basic physical care in your daily routine",
        ],
        advice="Set a time limit for research. Sometimes 'enough' information beats perfect information.",
    ),
    EnneagramType.LOYALIST: TypeProfile(
        type=EnneagramType.LOYALIST,
        name="The Loyalist",
        description="You value security and loyalty. You are responsible and look for "
        "guidance and support in reliable systems.",
        strengths=[
            "Loyalty and reliability",
            "Ability to anticipate problems",
            "Teamwork",
            "Responsibility",
            "Preparation and planning",
        ],
        challenges=[
            "Anxiety and excessive worry",
            "Procrastinating for fear of being wrong",
            "Difficulty trusting yourself",
            "Paralysis from imagining worst cases",
            "Over-reliance on external approval",
        ],
        growth_tips=[
            "Practice breathing techniques to manage anxiety",
            "Keep a list of 'evidence' of your competence",
            "Set small goals to build self-confidence",
            "Use mindfulness to stay in the present",
            "Build a reliable support network",
        ],
        advice="Trust yourself! You have made good decisions before. List your recent wins.",
    ),
    EnneagramType.ENTHUSIAST: TypeProfile(
        type=EnneagramType.ENTHUSIAST,
        name="The Enthusiast",
        description="You are optimistic, versatile and seek varied experiences. "
        "You have high energy and many interests.",
        strengths=[
            "Optimism and energy",
            "Creativity and innovation",
            "Adaptability",
            "Ability to motivate others",
            "Seeing possibilities",
        ],
        challenges=[
            "Difficulty focusing on one task",
            "Procrastinating on boring tasks",
            "Starting many projects without finishing",
            "Impatience with details",
            "Avoiding negative emotions",
        ],
        growth_tips=[
            "Use the Pomodoro technique to stay focused",
            "Limit the number of parallel projects",
            "Gamify boring tasks to make them interesting",
            "Practice mindfulness to accept difficult emotions",
            "Set rewards for finishing less enjoyable tasks",
        ],
        advice="Focus on one task at a time today. Use a timer to work in smaller blocks.",
    ),
    EnneagramType.CHALLENGER: TypeProfile(
        type=EnneagramType.CHALLENGER,
        name="The Challenger",
        description="You are assertive, confident and seek control. You have strong energy and like to lead.",
        strengths=[
            "Natural leadership",
            "Determination and persistence",
            "Quick decision making",
            "Protecting the vulnerable",
            "Energy and intensity",
        ],
        challenges=[
            "Impatience with slow processes",
            "Difficulty delegating",
            "Burnout from intensity",
            "Conflict from excessive assertiveness",
            "Neglecting your own vulnerabilities",
        ],
        growth_tips=[
            "Practice patience with breathing exercises",
            "Build delegation skills gradually",
            "Schedule time for vulnerability and reflection",
            "Use your energy in bursts with planned breaks",
            "Practice active listening to improve relationships",
        ],
        advice="Practice delegating one small task today. You don't have to do everything alone.",
    ),
    EnneagramType.PEACEMAKER: TypeProfile(
        type=EnneagramType.PEACEMAKER,
        name="The Peacemaker",
        description="You seek harmony and peace. You are empathetic, steady and easily see multiple perspectives.",
        strengths=[
            "Mediation skills",
            "Empathy and understanding",
            "Emotional stability",
            "Holistic view",
            "Creating harmonious environments",
        ],
        challenges=[
            "Procrastinating to avoid conflict",
            "Difficulty prioritizing",
            "Tendency toward inertia",
            "Neglecting your own needs",
            "Difficulty making decisions",
        ],
        growth_tips=[
            "Use body doubling to keep momentum",
            "Set clear priorities with visual methods",
            "Build routines made of small daily actions",
            "Practice assertiveness in low-stakes situations",
            "Use timers to create a healthy sense of urgency",
        ],
        advice="Find your most important task and start with it, even for just 10 minutes.",
    ),
}

if set(PROFILES) != set(EnneagramType):
    raise RuntimeError("PROFILES must cover every EnneagramType")


def get_profile(type_number: Union[int, EnneagramType]) -> TypeProfile:
    """Profile for a type number; unknown numbers fall back to type 1."""
    try:
        return PROFILES[EnneagramType(type_number)]
    except ValueError:
        return PROFILES[EnneagramType.PERFECTIONIST]


def get_advice(type_number: Union[int, EnneagramType]) -> str:
    return get_profile(type_number).advice
