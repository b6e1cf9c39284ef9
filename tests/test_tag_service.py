import pytest
from sqlalchemy import func, select

from folio.shared.models import ProjectTag, Tag
from folio.shared.repositories import ProjectRepository
from folio.shared.services.tag_service import TagReconciler, normalize_tag_names


async def _project(session, title="Demo"):
    return await ProjectRepository(session).create(title=title, description="d")


async def _linked_names(session, project_id):
    names = await TagReconciler.for_projects(session).links.names_by_owner([project_id])
    return set(names.get(project_id, []))


def test_normalize_tag_names_trims_and_dedupes():
    assert normalize_tag_names([" AI ", "", "   ", "AI", "Web Dev"]) == ["AI", "Web Dev"]


async def test_reconcile_creates_tags_and_links(session):
    project = await _project(session)
    reconciler = TagReconciler.for_projects(session)

    applied = await reconciler.reconcile(project.id, ["AI", "Web Dev"])

    assert applied == ["AI", "Web Dev"]
    tags = {t.name: t.slug for t in (await session.execute(select(Tag))).scalars()}
    assert tags == {"AI": "ai", "Web Dev": "web-dev"}
    assert await _linked_names(session, project.id) == {"AI", "Web Dev"}


async def test_reconcile_is_insert_only(session):
    project = await _project(session)
    reconciler = TagReconciler.for_projects(session)

    await reconciler.reconcile(project.id, ["python"])
    await reconciler.reconcile(project.id, ["python", "sql"])

    assert await _linked_names(session, project.id) == {"python", "sql"}
    links = await session.scalar(select(func.count()).select_from(ProjectTag))
    assert links == 2


async def test_replace_leaves_exactly_the_new_set(session):
    project = await _project(session)
    reconciler = TagReconciler.for_projects(session)

    await reconciler.reconcile(project.id, ["a", "b"])
    await reconciler.replace(project.id, ["b", "c"])

    assert await _linked_names(session, project.id) == {"b", "c"}
    # orphan "a" is kept
    names = set((await session.execute(select(Tag.name))).scalars())
    assert names == {"a", "b", "c"}


async def test_existing_tags_are_shared_between_projects(session):
    first = await _project(session, "First")
    second = await _project(session, "Second")
    reconciler = TagReconciler.for_projects(session)

    await reconciler.reconcile(first.id, ["AI"])
    await reconciler.reconcile(second.id, ["AI"])

    assert await session.scalar(select(func.count()).select_from(Tag)) == 1
    assert await _linked_names(session, second.id) == {"AI"}


async def test_case_variant_reuses_tag_owning_the_slug(session):
    first = await _project(session, "First")
    second = await _project(session, "Second")
    reconciler = TagReconciler.for_projects(session)

    await reconciler.reconcile(first.id, ["AI"])
    applied = await reconciler.reconcile(second.id, ["ai"])

    assert applied == ["AI"]
    assert await session.scalar(select(func.count()).select_from(Tag)) == 1
    assert await _linked_names(session, second.id) == {"AI"}


async def test_clear_removes_all_links(session):
    project = await _project(session)
    reconciler = TagReconciler.for_projects(session)
    await reconciler.reconcile(project.id, ["a", "b", "c"])

    removed = await reconciler.clear(project.id)

    assert removed == 3
    assert await _linked_names(session, project.id) == set()


async def test_failure_propagates(session, monkeypatch):
    project = await _project(session)
    reconciler = TagReconciler.for_projects(session)

    async def broken_add(owner_id, tag_id):
        raise RuntimeError("link table unavailable")

    monkeypatch.setattr(reconciler.links, "add", broken_add)

    with pytest.raises(RuntimeError):
        await reconciler.reconcile(project.id, ["AI"])
