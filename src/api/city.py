"""City API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from src.api.schemas import (
    ConsequenceInfo,
    CreateVillagerRequest,
    EventInfo,
    NudgeRequest,
    NudgeResponse,
    RelationshipInfo,
    VillagerInfo,
)
from src.core.city import ButterflyCity
from src.core.logging import get_logger
from src.core.nudge.models import NudgeError
from src.core.villager.registry import VillagerNotFoundError

logger = get_logger(__name__)

router = APIRouter(prefix="/city", tags=["city"])


def get_city(request: Request) -> ButterflyCity:
    """City instance (dependency injection)"""
    city: ButterflyCity = request.app.state.city
    return city


@router.post("/villagers", response_model=VillagerInfo)
def create_villager(
    request: CreateVillagerRequest,
    city: ButterflyCity = Depends(get_city),
) -> VillagerInfo:
    villager = city.create_villager(request.name, request.traits, request.mood)
    logger.info("Villager created via API: %s", villager.villager_id)
    return VillagerInfo(**villager.to_dict())


@router.get("/villagers", response_model=list[VillagerInfo])
def list_villagers(city: ButterflyCity = Depends(get_city)) -> list[VillagerInfo]:
    return [VillagerInfo(**v.to_dict()) for v in city.villagers]


@router.get("/villagers/{villager_id}", response_model=VillagerInfo)
def get_villager(
    villager_id: str,
    city: ButterflyCity = Depends(get_city),
) -> VillagerInfo:
    try:
        villager = city.get_villager(villager_id)
    except VillagerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return VillagerInfo(**villager.to_dict())


@router.get(
    "/villagers/{villager_id}/relationships",
    response_model=list[RelationshipInfo],
)
def get_relationships(
    villager_id: str,
    city: ButterflyCity = Depends(get_city),
) -> list[RelationshipInfo]:
    try:
        summary = city.relationship_summary(villager_id)
    except VillagerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return [RelationshipInfo(**entry) for entry in summary]


@router.post("/nudges", response_model=NudgeResponse)
def run_nudge(
    request: NudgeRequest,
    city: ButterflyCity = Depends(get_city),
) -> NudgeResponse:
    """
    Nudge

    Participants are given in rule order: gossip takes
    (gossiper, listener, subject), group_event takes (host, *attendees).
    """
    try:
        result = city.run_nudge(request.kind, request.villager_ids, request.event_kind)
    except VillagerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except NudgeError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return NudgeResponse(
        kind=request.kind.value,
        consequences=[ConsequenceInfo(**c.to_dict()) for c in result.consequences],
    )


@router.get("/events", response_model=list[EventInfo])
def list_events(
    limit: Optional[int] = Query(default=None, ge=1),
    event_type: Optional[str] = Query(default=None, alias="type"),
    city: ButterflyCity = Depends(get_city),
) -> list[EventInfo]:
    """Event log, oldest first. `type` filters, `limit` keeps the newest N."""
    if event_type is not None:
        events = city.get_events_by_type(event_type)
        if limit is not None:
            events = events[-limit:]
    elif limit is not None:
        events = city.get_recent_events(limit)
    else:
        events = city.get_all_events()
    return [EventInfo(**e.to_dict()) for e in events]
