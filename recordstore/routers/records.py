from __future__ import annotations

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from recordstore.repositories.json_storage import decode_record
from recordstore.services.record_service import RecordService

router = APIRouter(prefix="/records", tags=["records"])


def _get_record_service(request: Request) -> RecordService:
    svc = getattr(getattr(request.app, "state", None), "record_service", None)
    if not svc:
        raise RuntimeError("RecordService not configured")
    return svc


@router.get("")
def list_records(request: Request):
    svc = _get_record_service(request)
    return [record.to_payload() for record in svc.list()]


@router.get("/{record_id:path}")
def get_record(record_id: str, request: Request):
    svc = _get_record_service(request)
    return svc.get(record_id).to_payload()


@router.post("")
async def create_record(request: Request):
    svc = _get_record_service(request)
    # Same codec as the loader: structural errors surface as 400, not 422.
    record = decode_record(await request.body())
    created = svc.create(record)
    return JSONResponse(created.to_payload(), status_code=201)


@router.put("/{record_id:path}", status_code=204)
async def replace_record(record_id: str, request: Request):
    svc = _get_record_service(request)
    record = decode_record(await request.body())
    svc.replace(record_id, record)
    return Response(status_code=204)


@router.delete("/{record_id:path}", status_code=204)
def delete_record(record_id: str, request: Request):
    svc = _get_record_service(request)
    svc.delete(record_id)
    return Response(status_code=204)
