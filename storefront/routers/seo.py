# storefront/routers/seo.py
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse
from sqlmodel import Session

from storefront.core.errors import failure_message
from storefront.database import get_session
from storefront.repositories.product_repo import ProductRepository
from storefront.services.export_service import ExportService

router = APIRouter(tags=["SEO"])

exporter = ExportService(ProductRepository())


def _base_url(request: Request) -> str:
    return str(request.base_url).rstrip("/")


@router.get("/sitemap.xml", response_class=Response, include_in_schema=False)
@failure_message("Failed to generate sitemap")
def sitemap(
    request: Request,
    session: Session = Depends(get_session),
):
    return Response(
        content=exporter.sitemap_xml(session, _base_url(request)),
        media_type="application/xml",
    )


@router.get("/robots.txt", response_class=PlainTextResponse, include_in_schema=False)
def robots(request: Request):
    return PlainTextResponse(ExportService.robots_txt(_base_url(request)))
