from fastapi import APIRouter
from fastapi.responses import JSONResponse
from storefront.health.service import health_cms_info

router = APIRouter(prefix="/health", tags=["Health"])

@router.get("")
def health_root():
    return {"ok": True}

@router.get("/cms")
def health_cms():
    return JSONResponse(health_cms_info())
