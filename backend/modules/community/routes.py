"""
Community API endpoints.

Events and suggestions. Admitted members only.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_community_service
from api.middleware.auth import require_member
from modules.access.models import Member

from .interfaces import ICommunityService
from .models import (
    CreateEventRequest,
    CreateSuggestionRequest,
    Event,
    EventListResponse,
    EventSuggestion,
    SuggestionListResponse,
)

router = APIRouter()


@router.get("/events", response_model=EventListResponse)
async def list_events(
    member: Member = Depends(require_member),
    service: ICommunityService = Depends(get_community_service),
) -> EventListResponse:
    """List events, soonest first."""
    events = await service.list_events()
    return EventListResponse(events=events, total=len(events))


@router.post("/events", response_model=Event, status_code=201)
async def create_event(
    request: CreateEventRequest,
    member: Member = Depends(require_member),
    service: ICommunityService = Depends(get_community_service),
) -> Event:
    """
    Create an event.

    Without a date the event lands on next Friday; without a time, 18:00.
    """
    return await service.create_event(member.profile, request)


@router.delete("/events/{event_id}", status_code=204)
async def delete_event(
    event_id: str,
    member: Member = Depends(require_member),
    service: ICommunityService = Depends(get_community_service),
) -> None:
    """Delete an event. Creator or administrator only."""
    await service.delete_event(member.profile, event_id)


@router.get("/suggestions", response_model=SuggestionListResponse)
async def list_suggestions(
    member: Member = Depends(require_member),
    service: ICommunityService = Depends(get_community_service),
) -> SuggestionListResponse:
    """List suggestions, newest first."""
    suggestions = await service.list_suggestions()
    return SuggestionListResponse(suggestions=suggestions, total=len(suggestions))


@router.post("/suggestions", response_model=EventSuggestion, status_code=201)
async def create_suggestion(
    request: CreateSuggestionRequest,
    member: Member = Depends(require_member),
    service: ICommunityService = Depends(get_community_service),
) -> EventSuggestion:
    """Post a suggestion for upcoming events."""
    return await service.create_suggestion(member.profile, request.suggestion)


@router.delete("/suggestions/{suggestion_id}", status_code=204)
async def delete_suggestion(
    suggestion_id: str,
    member: Member = Depends(require_member),
    service: ICommunityService = Depends(get_community_service),
) -> None:
    """Delete a suggestion. Author or administrator only."""
    await service.delete_suggestion(member.profile, suggestion_id)
