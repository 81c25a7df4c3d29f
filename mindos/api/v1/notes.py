"""Note CRUD endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from mindos.core.dependencies import get_note_service
from mindos.core.exceptions import NotFoundError, ValidationError
from mindos.schemas.common import ErrorMessage
from mindos.schemas.notes import NoteCreateRequest, NoteResponse
from mindos.services.note_service import NoteService

router = APIRouter(tags=["notes"], responses={500: {"model": ErrorMessage}})


@router.get("/notes", response_model=list[NoteResponse])
def list_notes(service: NoteService = Depends(get_note_service)) -> list[NoteResponse]:
    return [NoteResponse.from_record(note) for note in service.list_notes()]


@router.get("/notes/{note_id}", response_model=NoteResponse, responses={404: {"model": ErrorMessage}})
def get_note(note_id: int, service: NoteService = Depends(get_note_service)) -> NoteResponse:
    try:
        note = service.get_note(note_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return NoteResponse.from_record(note)


@router.post(
    "/notes",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorMessage}},
)
def create_note(payload: NoteCreateRequest, service: NoteService = Depends(get_note_service)) -> NoteResponse:
    try:
        note = service.create_note(title=payload.title, content=payload.content)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return NoteResponse.from_record(note)


@router.delete("/notes/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_note(note_id: int, service: NoteService = Depends(get_note_service)) -> Response:
    service.delete_note(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
