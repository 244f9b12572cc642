"""
Tests for the content services: service catalogue, portfolio projects
and testimonials.
"""

import pytest

from agency_site_api.app.schemas import testimonial as testimonial_schemas
from agency_site_api.app.schemas.project import ProjectCreate, ProjectUpdate
from agency_site_api.app.schemas.service import ServiceCreate, ServiceUpdate
from agency_site_api.app.services import testimonial_service
from agency_site_api.app.services.catalog_service import CatalogService, next_sort_order
from agency_site_api.app.services.project_service import ProjectService


def service_payload(title: str, category: str = "development", **extra) -> ServiceCreate:
    return ServiceCreate(title=title, description=f"{title} description", icon="code", category=category, **extra)


def project_payload(title: str, category: str = "web-app", **extra) -> ProjectCreate:
    return ProjectCreate(
        title=title,
        description=f"{title} description",
        short_description=title,
        category=category,
        **extra,
    )


def make_testimonial(name: str, rating: int, **extra):
    return testimonial_schemas.TestimonialCreate(
        client_name=name,
        client_title="CTO",
        client_company="Acme",
        testimonial="Great work",
        rating=rating,
        **extra,
    )


def test_next_sort_order():
    assert next_sort_order([]) == 1
    assert next_sort_order([{"sort_order": 3}, {"sort_order": 1}]) == 4
    assert next_sort_order([{"sort_order": -5}]) == 1


# --- services --------------------------------------------------------------


@pytest.mark.asyncio
async def test_create_service_defaults():
    first = await CatalogService.create_service(service_payload("Web"))
    second = await CatalogService.create_service(service_payload("Cloud", category="cloud"))

    assert first.is_active is True
    assert first.sort_order == 1
    assert second.sort_order == 2
    assert (await CatalogService.get_service(first.id)).title == "Web"


@pytest.mark.asyncio
async def test_active_services_sorted_and_filtered():
    await CatalogService.create_service(service_payload("Late", sort_order=5))
    await CatalogService.create_service(service_payload("Early", sort_order=1))
    await CatalogService.create_service(service_payload("Hidden", sort_order=0, is_active=False))
    await CatalogService.create_service(service_payload("Design", category="design", sort_order=2))

    active = await CatalogService.get_active_services()
    assert [s.title for s in active] == ["Early", "Design", "Late"]

    design = await CatalogService.get_active_services("design")
    assert [s.title for s in design] == ["Design"]

    everything = await CatalogService.get_all_services()
    assert [s.title for s in everything] == ["Hidden", "Early", "Design", "Late"]


@pytest.mark.asyncio
async def test_update_toggle_and_delete_service():
    service = await CatalogService.create_service(service_payload("Web"))

    updated = await CatalogService.update_service(service.id, ServiceUpdate(title="Web Apps"))
    assert updated.title == "Web Apps"
    assert updated.description == "Web description"

    toggled = await CatalogService.toggle_service_status(service.id)
    assert toggled.is_active is False

    assert await CatalogService.delete_service(service.id) is True
    assert await CatalogService.get_service(service.id) is None
    assert await CatalogService.update_service(service.id, ServiceUpdate(title="x")) is None
    assert await CatalogService.toggle_service_status(service.id) is None
    assert await CatalogService.delete_service(service.id) is False


@pytest.mark.asyncio
async def test_reorder_services():
    a = await CatalogService.create_service(service_payload("A"))
    b = await CatalogService.create_service(service_payload("B"))
    c = await CatalogService.create_service(service_payload("C"))

    reordered = await CatalogService.reorder_services([c.id, a.id, b.id])

    assert [s.title for s in reordered] == ["C", "A", "B"]
    assert [s.sort_order for s in reordered] == [0, 1, 2]


@pytest.mark.asyncio
async def test_reorder_with_unknown_id_changes_nothing():
    a = await CatalogService.create_service(service_payload("A"))

    with pytest.raises(ValueError):
        await CatalogService.reorder_services(["missing", a.id])

    assert (await CatalogService.get_service(a.id)).sort_order == 1


# --- projects --------------------------------------------------------------


@pytest.mark.asyncio
async def test_create_project_defaults():
    project = await ProjectService.create_project(project_payload("Shop", technologies=["React"]))

    assert project.status == "completed"
    assert project.featured is False
    assert project.is_public is True
    assert project.sort_order == 1


@pytest.mark.asyncio
async def test_public_projects_combine_category_and_featured():
    await ProjectService.create_project(project_payload("Web featured", featured=True, sort_order=2))
    await ProjectService.create_project(project_payload("Web plain", sort_order=1))
    await ProjectService.create_project(project_payload("Api featured", category="api", featured=True))
    await ProjectService.create_project(project_payload("Private", featured=True, is_public=False))

    public = await ProjectService.get_public_projects()
    assert [p.title for p in public] == ["Web plain", "Web featured", "Api featured"]

    web_featured = await ProjectService.get_public_projects(category="web-app", featured_only=True)
    assert [p.title for p in web_featured] == ["Web featured"]

    assert len(await ProjectService.get_public_projects(limit=1)) == 1
    assert [p.title for p in await ProjectService.get_featured_projects()] == ["Web featured", "Api featured"]


@pytest.mark.asyncio
async def test_public_projects_tie_broken_by_completion_time():
    await ProjectService.create_project(project_payload("Older", sort_order=1, completed_at=1_000))
    await ProjectService.create_project(project_payload("Newer", sort_order=1, completed_at=2_000))

    projects = await ProjectService.get_public_projects()

    assert [p.title for p in projects] == ["Newer", "Older"]


@pytest.mark.asyncio
async def test_project_toggles_update_and_delete():
    project = await ProjectService.create_project(project_payload("Shop"))

    assert (await ProjectService.toggle_project_featured(project.id)).featured is True
    assert (await ProjectService.toggle_project_public(project.id)).is_public is False
    assert await ProjectService.get_public_projects() == []

    updated = await ProjectService.update_project(project.id, ProjectUpdate(status="archived"))
    assert updated.status == "archived"

    assert await ProjectService.delete_project(project.id) is True
    assert await ProjectService.toggle_project_featured(project.id) is None
    assert await ProjectService.update_project(project.id, ProjectUpdate(title="x")) is None


@pytest.mark.asyncio
async def test_projects_by_technology_and_categories():
    await ProjectService.create_project(project_payload("One", technologies=["React", "Python"]))
    await ProjectService.create_project(project_payload("Two", category="api", technologies=["Python"]))
    await ProjectService.create_project(project_payload("Three", technologies=["Vue"]))
    await ProjectService.create_project(
        project_payload("Hidden", category="api", technologies=["Python"], is_public=False)
    )

    python = await ProjectService.get_projects_by_technology("Python")
    assert [p.title for p in python] == ["One", "Two"]
    assert await ProjectService.get_projects_by_technology("python") == []

    categories = await ProjectService.get_project_categories()
    assert categories == [{"category": "web-app", "count": 2}, {"category": "api", "count": 1}]


# --- testimonials ----------------------------------------------------------


@pytest.mark.asyncio
async def test_new_testimonials_need_approval():
    service = testimonial_service.TestimonialService
    created = await service.create_testimonial(make_testimonial("Ann", 5))

    assert created.approved is False
    assert await service.get_approved_testimonials() == []

    approved = await service.toggle_testimonial_approval(created.id)
    assert approved.approved is True
    assert [t.client_name for t in await service.get_approved_testimonials()] == ["Ann"]


@pytest.mark.asyncio
async def test_approved_testimonials_filters():
    service = testimonial_service.TestimonialService
    await service.create_testimonial(make_testimonial("Low", 3, approved=True, sort_order=1))
    await service.create_testimonial(make_testimonial("Top", 5, approved=True, featured=True, sort_order=1))
    await service.create_testimonial(make_testimonial("Mid", 4, approved=True, sort_order=0))

    ordered = await service.get_approved_testimonials()
    assert [t.client_name for t in ordered] == ["Mid", "Top", "Low"]

    assert [t.client_name for t in await service.get_approved_testimonials(featured_only=True)] == ["Top"]
    assert [t.client_name for t in await service.get_approved_testimonials(min_rating=4)] == ["Mid", "Top"]
    assert len(await service.get_approved_testimonials(limit=2)) == 2


def test_rating_must_be_between_one_and_five():
    with pytest.raises(ValueError):
        make_testimonial("Ann", 6)
    with pytest.raises(ValueError):
        make_testimonial("Ann", 0)


@pytest.mark.asyncio
async def test_testimonial_stats():
    service = testimonial_service.TestimonialService
    stats = await service.get_testimonial_stats()
    assert stats["averageRating"] == 0
    assert stats["total"] == 0

    await service.create_testimonial(make_testimonial("A", 5, approved=True, featured=True))
    await service.create_testimonial(make_testimonial("B", 5, approved=True))
    await service.create_testimonial(make_testimonial("C", 4))

    stats = await service.get_testimonial_stats()

    assert stats["total"] == 3
    assert stats["approved"] == 2
    assert stats["featured"] == 1
    assert stats["pending"] == 1
    assert stats["averageRating"] == 4.7
    assert stats["ratingDistribution"] == {"5": 2, "4": 1, "3": 0, "2": 0, "1": 0}


@pytest.mark.asyncio
async def test_testimonials_by_rating_and_delete():
    service = testimonial_service.TestimonialService
    kept = await service.create_testimonial(make_testimonial("A", 5, approved=True))
    await service.create_testimonial(make_testimonial("B", 5))
    await service.create_testimonial(make_testimonial("C", 3))

    assert len(await service.get_testimonials_by_rating(5)) == 2
    assert len(await service.get_testimonials_by_rating(5, approved_only=True)) == 1

    assert await service.delete_testimonial(kept.id) is True
    assert await service.get_testimonial(kept.id) is None
    assert await service.toggle_testimonial_featured(kept.id) is None
