"""
Pydantic models for SteadyDay API request/response types.

Request bodies are validated here so that handlers only ever see values
from the closed enumerations.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, Field

from steadyday.mood import EnergyLevel, FocusLevel, MoodLevel


# =============================================================================
# Enums
# =============================================================================


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class TimeOfDay(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"


class SessionType(str, Enum):
    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"


class MessageType(str, Enum):
    GENERAL = "general"
    ROUTINE = "routine"
    TASK = "task"
    MOOD = "mood"
    ENNEAGRAM = "enneagram"


class PlanStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    PAUSED = "paused"


# =============================================================================
# Status Models
# =============================================================================


class HealthCheck(BaseModel):
    """Health check response."""

    status: str = Field(default="healthy", description="Overall system status")
    version: str = Field(..., description="API version")
    timestamp: datetime = Field(default_factory=datetime.now, description="Check timestamp")
    database: str = Field(default="ok", description="Database status")


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str = Field(..., description="Human readable error")
    code: str = Field(..., description="Machine readable error code")


# =============================================================================
# Tasks
# =============================================================================


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, description="What to do")
    description: str | None = Field(None, description="Details")
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM, description="Task priority")
    estimated_minutes: int | None = Field(None, ge=1, description="Estimated time to complete")
    due_date: str | None = Field(None, description="Due date (ISO format)")
    category: str | None = Field(None, description="Grouping label")


class TaskStatusUpdate(BaseModel):
    status: TaskStatus = Field(..., description="New status")
    actual_minutes: int | None = Field(None, ge=0, description="Time actually spent")


class SubtaskCreate(BaseModel):
    title: str = Field(..., min_length=1, description="Subtask title")


# =============================================================================
# Mood & Focus
# =============================================================================


class MoodCreate(BaseModel):
    mood: MoodLevel
    energy: EnergyLevel
    focus: FocusLevel
    notes: str | None = None


class FocusSessionCreate(BaseModel):
    duration: int = Field(..., gt=0, description="Session length in minutes")
    session_type: SessionType = Field(..., description="work, short_break or long_break")
    task_id: str | None = Field(None, description="Task worked on, if any")


# =============================================================================
# Routines
# =============================================================================


class RoutineItem(BaseModel):
    id: str | None = Field(None, description="Existing item id; omitted for new items")
    title: str = Field(..., min_length=1)
    estimated_minutes: int | None = Field(None, ge=1)
    order: int = Field(..., ge=0, description="Position in the routine")


class RoutineCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: str | None = None
    time_of_day: TimeOfDay
    tasks: list[RoutineItem] = Field(default_factory=list)
    color: str | None = None
    icon: str | None = None


class RoutineUpdate(BaseModel):
    name: str | None = None
    description: str | None = None
    tasks: list[RoutineItem] | None = None
    is_active: bool | None = None
    color: str | None = None
    icon: str | None = None


class RoutineExecute(BaseModel):
    completed_task_ids: list[str] = Field(default_factory=list)
    notes: str | None = None


# =============================================================================
# Plans
# =============================================================================


class PlanCreate(BaseModel):
    enneagram_type: int | None = Field(
        None, ge=1, le=9, description="Personalize for this type; defaults to the stored quiz result"
    )


class PlanStatusUpdate(BaseModel):
    status: PlanStatus


class WeekProgress(BaseModel):
    week_number: int = Field(..., ge=1, le=4)
    reflections: str = Field(..., description="What went well and what to change")


class HabitTrack(BaseModel):
    completed: bool
    notes: str | None = None


# =============================================================================
# Personality
# =============================================================================


class QuizSubmit(BaseModel):
    answers: list[int] = Field(..., min_length=1, description="Likert answers (1-5) in question order")
    wing: int | None = Field(None, ge=1, le=9)


class ResultSave(BaseModel):
    type: int = Field(..., ge=1, le=9)
    wing: int | None = Field(None, ge=1, le=9)
    answers: list[Annotated[int, Field(ge=1, le=5)]] | None = None


# =============================================================================
# Chat
# =============================================================================


class ChatMessageCreate(BaseModel):
    message: str = Field(..., min_length=1)
    type: MessageType = Field(default=MessageType.GENERAL, description="Conversation topic")
