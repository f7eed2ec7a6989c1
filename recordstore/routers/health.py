from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
def health(request: Request):
    repository = request.app.state.repository
    return {"ok": True, "records": repository.count()}
