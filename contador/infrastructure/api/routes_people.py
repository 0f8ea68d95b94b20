"""Roster API — list, add, increment."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from contador.application.use_cases.manage_people import (
    AddPersonUseCase,
    IncrementPersonUseCase,
    ListPeopleUseCase,
)
from contador.infrastructure.api.dependencies import (
    get_add_person_uc,
    get_increment_person_uc,
    get_list_people_uc,
)
from contador.infrastructure.api.errors import json_response
from contador.infrastructure.api.schemas import CountOut, PersonOut, parse_add_person

router = APIRouter(tags=["people"])


@router.get("/people", response_model=list[PersonOut])
async def list_people(uc: ListPeopleUseCase = Depends(get_list_people_uc)) -> JSONResponse:
    """Return the whole roster, in insertion order. May be empty."""
    people = await uc.execute()
    return json_response([p.to_dict() for p in people])


@router.post("/person", response_model=PersonOut)
async def add_person(
    request: Request,
    uc: AddPersonUseCase = Depends(get_add_person_uc),
) -> JSONResponse:
    """Add a counter. Body: ``{"name": "..."}``."""
    body = parse_add_person(await request.body())
    person = await uc.execute(body.name)
    return json_response(person.to_dict())


@router.post("/person/{person_id}/increment", response_model=CountOut)
async def increment_person(
    person_id: str,
    uc: IncrementPersonUseCase = Depends(get_increment_person_uc),
) -> JSONResponse:
    count = await uc.execute(person_id)
    return json_response({"count": count})
