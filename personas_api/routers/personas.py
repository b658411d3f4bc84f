from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from personas_api.core.config import get_settings
from personas_api.core.problems import validation_problem
from personas_api.schemas.person import PersonPayload, person_to_dict
from personas_api.services.person_service import (
    DuplicateDocumentError,
    PersonNotFoundError,
    PersonService,
    PersonValidationError,
)

router = APIRouter(tags=["personas"])


def _get_person_service(request: Request) -> PersonService:
    svc = getattr(getattr(request.app, "state", None), "person_service", None)
    if not svc:
        raise RuntimeError("PersonService nao configurado")
    return svc


def _not_found() -> Response:
    return Response(status_code=404)


def _duplicate_response(exc: DuplicateDocumentError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=get_settings().duplicate_document_status)


@router.get("/listar_personas")
def list_persons(request: Request):
    svc = _get_person_service(request)
    return [person_to_dict(entity) for entity in svc.list_persons()]


@router.get("/persona/{person_id}")
def get_person(person_id: int, request: Request):
    svc = _get_person_service(request)
    try:
        entity = svc.get_person(person_id)
    except PersonNotFoundError:
        return _not_found()
    return person_to_dict(entity)


@router.post("/registrar_persona", status_code=201)
def register_person(payload: PersonPayload, request: Request):
    svc = _get_person_service(request)
    try:
        entity = svc.register(payload)
    except PersonValidationError as exc:
        return validation_problem(exc.errors)
    except DuplicateDocumentError as exc:
        return _duplicate_response(exc)
    return JSONResponse(
        person_to_dict(entity),
        status_code=201,
        headers={"Location": f"/persona/{entity.id}"},
    )


@router.put("/editar_persona/{person_id}", status_code=204)
def edit_person(person_id: int, payload: PersonPayload, request: Request):
    svc = _get_person_service(request)
    try:
        svc.edit(person_id, payload)
    except PersonNotFoundError:
        return _not_found()
    except PersonValidationError as exc:
        return validation_problem(exc.errors)
    except DuplicateDocumentError as exc:
        return _duplicate_response(exc)
    return Response(status_code=204)


@router.delete("/eliminar_persona/{person_id}")
def delete_person(person_id: int, request: Request):
    svc = _get_person_service(request)
    try:
        entity = svc.remove(person_id)
    except PersonNotFoundError:
        return _not_found()
    return person_to_dict(entity)
