from fastapi import APIRouter

route = APIRouter(tags=["health"])


@route.get("/health")
def health():
    return {"ok": True}
