"""
Community module data models.

Friday events and the suggestions members leave for them.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field


DEFAULT_EVENT_TIME = "18:00"


class Event(BaseModel):
    """A scheduled gathering."""

    id: str = Field(..., description="Event ID (UUID)")
    title: str = Field(..., description="Event title")
    description: str = Field(default="", description="Event description")
    event_date: date = Field(..., description="Day of the event")
    event_time: str = Field(..., description="Start time, HH:MM")
    location_name: str = Field(..., description="Where it happens")
    location_lat: Optional[float] = Field(None, description="Latitude for the map")
    location_lng: Optional[float] = Field(None, description="Longitude for the map")
    created_by: str = Field(..., description="Creator's identity")
    created_at: datetime
    updated_at: datetime


class CreateEventRequest(BaseModel):
    """Request to create an event. Date and time default to next Friday evening."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(default="", max_length=5000)
    event_date: Optional[date] = None
    event_time: Optional[str] = Field(None, pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    location_name: str = Field(..., min_length=1, max_length=500)
    location_lat: Optional[float] = Field(None, ge=-90, le=90)
    location_lng: Optional[float] = Field(None, ge=-180, le=180)


class EventSuggestion(BaseModel):
    """An idea for an upcoming event."""

    id: str = Field(..., description="Suggestion ID (UUID)")
    user_id: str = Field(..., description="Author's identity")
    user_name: str = Field(..., description="Author name at the time of posting")
    suggestion: str = Field(..., description="Suggestion text")
    created_at: datetime
    updated_at: datetime


class CreateSuggestionRequest(BaseModel):
    """Request to post a suggestion."""

    suggestion: str = Field(..., max_length=2000)


class EventListResponse(BaseModel):
    """API response for the event list."""

    events: list[Event] = Field(..., description="Events, soonest first")
    total: int


class SuggestionListResponse(BaseModel):
    """API response for the suggestion list."""

    suggestions: list[EventSuggestion] = Field(..., description="Suggestions, newest first")
    total: int
