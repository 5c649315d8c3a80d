from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])

@router.get("/health")
def health(request: Request):
    return {"status": "ok", "env": request.app.state.settings.app_env}
