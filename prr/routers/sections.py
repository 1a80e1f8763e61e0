"""
Section Router - PRR Platform
prr/routers/sections.py
"""

from typing import List

from fastapi import APIRouter, Depends, status

from prr.config import settings
from prr.core.dependencies import get_section_repository
from prr.models.catalog import Section, SectionCreate
from prr.repositories.section_repository import SectionRepository

router = APIRouter(prefix=f"{settings.API_V1_PREFIX}/sections", tags=["Sections"])


@router.post(
    "",
    response_model=Section,
    status_code=status.HTTP_201_CREATED,
    summary="Create a section",
)
async def create_section(
    payload: SectionCreate,
    repo: SectionRepository = Depends(get_section_repository),
) -> Section:
    return repo.create(payload)


@router.get("", response_model=List[Section], summary="List sections")
async def list_sections(
    repo: SectionRepository = Depends(get_section_repository),
) -> List[Section]:
    return repo.list_all()
