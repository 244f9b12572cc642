"""
Testimonial endpoints for API v1.

Anyone may submit a testimonial; it stays hidden until an
administrator approves it.  Only approved testimonials are listed
publicly.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from agency_site_api.app.core.security import require_admin
from agency_site_api.app.schemas.testimonial import TestimonialCreate, TestimonialRead, TestimonialUpdate
from agency_site_api.app.services.testimonial_service import TestimonialService

router = APIRouter()

NOT_FOUND = "Testimonial not found"


@router.get("/", response_model=List[TestimonialRead])
async def list_approved_testimonials(
    featured: bool = Query(False, description="Only featured testimonials"),
    limit: Optional[int] = Query(None, ge=1, le=100),
    min_rating: Optional[int] = Query(None, ge=1, le=5, alias="minRating"),
) -> List[TestimonialRead]:
    return await TestimonialService.get_approved_testimonials(
        featured_only=featured, limit=limit, min_rating=min_rating
    )


@router.get("/stats")
async def testimonial_stats(current_user: dict = Depends(require_admin)) -> Dict[str, Any]:
    """Counts, average rating and rating distribution (admin only)."""
    return await TestimonialService.get_testimonial_stats()


@router.get("/all", response_model=List[TestimonialRead])
async def list_all_testimonials(current_user: dict = Depends(require_admin)) -> List[TestimonialRead]:
    return await TestimonialService.get_all_testimonials()


@router.get("/rating/{rating}", response_model=List[TestimonialRead])
async def list_testimonials_by_rating(
    rating: int,
    current_user: dict = Depends(require_admin),
    approved_only: bool = Query(False, alias="approvedOnly"),
) -> List[TestimonialRead]:
    return await TestimonialService.get_testimonials_by_rating(rating, approved_only=approved_only)


@router.get("/{testimonial_id}", response_model=TestimonialRead)
async def get_testimonial(
    testimonial_id: str,
    current_user: dict = Depends(require_admin),
) -> TestimonialRead:
    testimonial = await TestimonialService.get_testimonial(testimonial_id)
    if testimonial is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return testimonial


@router.post("/", response_model=TestimonialRead, status_code=status.HTTP_201_CREATED)
async def create_testimonial(data: TestimonialCreate) -> TestimonialRead:
    """Submit a testimonial.  It is stored unapproved."""
    return await TestimonialService.create_testimonial(data)


@router.patch("/{testimonial_id}", response_model=TestimonialRead)
async def update_testimonial(
    testimonial_id: str,
    data: TestimonialUpdate,
    current_user: dict = Depends(require_admin),
) -> TestimonialRead:
    testimonial = await TestimonialService.update_testimonial(testimonial_id, data)
    if testimonial is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return testimonial


@router.post("/{testimonial_id}/toggle-approval", response_model=TestimonialRead)
async def toggle_testimonial_approval(
    testimonial_id: str,
    current_user: dict = Depends(require_admin),
) -> TestimonialRead:
    testimonial = await TestimonialService.toggle_testimonial_approval(testimonial_id)
    if testimonial is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return testimonial


@router.post("/{testimonial_id}/toggle-featured", response_model=TestimonialRead)
async def toggle_testimonial_featured(
    testimonial_id: str,
    current_user: dict = Depends(require_admin),
) -> TestimonialRead:
    testimonial = await TestimonialService.toggle_testimonial_featured(testimonial_id)
    if testimonial is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return testimonial


@router.delete("/{testimonial_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_testimonial(
    testimonial_id: str,
    current_user: dict = Depends(require_admin),
) -> None:
    if not await TestimonialService.delete_testimonial(testimonial_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return None
