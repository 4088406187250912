from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from creational.catalog.sections import (
    PatternSection,
    SectionNotFoundError,
    TocEntry,
    get_section,
    render_document,
    table_of_contents,
)
from creational.core.dependencies import get_settings

router = APIRouter(
    prefix="/patterns",
    tags=["Pattern Catalog"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[TocEntry])
def get_table_of_contents():
    """Table of contents: the four sections and their variants, with anchors."""
    return table_of_contents()


@router.get("/document", response_class=PlainTextResponse)
def get_document(settings=Depends(get_settings)):
    """The whole catalog as a single Markdown document."""
    return PlainTextResponse(render_document(settings.docs_title), media_type="text/markdown")


@router.get("/{slug}", response_model=PatternSection)
def get_pattern_section(slug: str):
    try:
        return get_section(slug)
    except SectionNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
