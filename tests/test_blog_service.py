import pytest
from sqlalchemy import func, select

from folio.shared.core.exceptions import BlogPostNotFoundError, ConflictError, ValidationError
from folio.shared.models import BlogPost, PostStatus, RelatedContent
from folio.shared.models.tag import TAG_NAME_MAX_LENGTH
from folio.shared.repositories import BlogPostRepository
from folio.shared.services.blog_service import BlogService
from folio.shared.services.project_service import ProjectService
from folio.shared.services.tag_service import TagReconciler


async def _post(service, title="Hello World", status=PostStatus.PUBLISHED, **kwargs):
    return await service.create_post(title=title, content="Body", status=status, **kwargs)


async def test_create_computes_strict_slug(session):
    post = await _post(BlogService(session), title=" Hello, World! ")

    assert post["slug"] == "hello-world"
    assert post["title"] == "Hello, World!"
    assert post["views"] == 0


async def test_title_slug_collision_is_a_conflict(session):
    service = BlogService(session)
    await _post(service, title="Hello World")

    with pytest.raises(ConflictError) as exc_info:
        await _post(service, title="hello   world!")

    assert exc_info.value.details == {"slug": "hello-world"}
    assert await session.scalar(select(func.count()).select_from(BlogPost)) == 1


async def test_title_without_slug_characters_is_rejected(session):
    with pytest.raises(ValidationError):
        await _post(BlogService(session), title="!!!")


@pytest.mark.parametrize("title,content,field", [("", "Body", "title"), ("Title", "  ", "content")])
async def test_required_fields(session, title, content, field):
    with pytest.raises(ValidationError) as exc_info:
        await BlogService(session).create_post(title=title, content=content)
    assert exc_info.value.details == {"field": field}


async def test_update_keeps_own_slug_and_views(session):
    service = BlogService(session)
    post = await _post(service)
    await service.get_published_post(post["slug"])

    updated = await service.update_post(post["id"], title="Hello World", content="Edited", tags=["news"])

    assert updated["slug"] == "hello-world"
    assert updated["content"] == "Edited"
    assert updated["tags"] == ["news"]
    row = await service.repo.get_for_update(post["id"])
    assert row.views == 1


async def test_update_cannot_take_another_posts_slug(session):
    service = BlogService(session)
    await _post(service, title="First")
    second = await _post(service, title="Second")

    with pytest.raises(ConflictError):
        await service.update_post(second["id"], title="First", content="Body")


async def test_published_detail_counts_views(session):
    service = BlogService(session)
    post = await _post(service)

    first = await service.get_published_post("hello-world")
    second = await service.get_published_post("hello-world")

    assert first["views"] == 1
    assert second["views"] == 2
    assert post["id"] == second["id"]


async def test_drafts_are_hidden_from_public_reads(session):
    service = BlogService(session)
    await _post(service, title="Draft", status=PostStatus.DRAFT)
    await _post(service, title="Live")

    public = await service.list_posts()
    everything = await service.list_posts(published_only=False)

    assert [p["slug"] for p in public] == ["live"]
    assert {p["slug"] for p in everything} == {"draft", "live"}
    with pytest.raises(BlogPostNotFoundError):
        await service.get_published_post("draft")


async def test_related_content(session):
    service = BlogService(session)
    project = await ProjectService(session).create_project(title="Demo", description="d")
    older = await _post(service, title="Older")

    post = await _post(
        service,
        title="Newer",
        related_project_ids=[project["id"], project["id"]],
        related_post_ids=[older["id"]],
    )

    assert post["related_projects"] == [{"id": project["id"], "title": "Demo", "image_url": None}]
    assert post["related_posts"] == [{"id": older["id"], "title": "Older", "slug": "older"}]
    assert await session.scalar(select(func.count()).select_from(RelatedContent)) == 2

    updated = await service.update_post(post["id"], title="Newer", content="Body", related_post_ids=[older["id"]])
    assert updated["related_projects"] == []


async def test_unknown_related_ids_are_rejected(session):
    service = BlogService(session)
    with pytest.raises(ValidationError):
        await _post(service, related_project_ids=[999])
    with pytest.raises(ValidationError):
        await _post(service, related_post_ids=[999])
    assert await session.scalar(select(func.count()).select_from(BlogPost)) == 0


async def test_delete_post(session):
    service = BlogService(session)
    post = await _post(service, tags=["news"])

    await service.delete_post(post["id"])

    with pytest.raises(BlogPostNotFoundError):
        await service.get_post(post["id"])
    with pytest.raises(BlogPostNotFoundError):
        await service.delete_post(post["id"])


async def test_public_detail_hides_related_drafts(session):
    service = BlogService(session)
    draft = await _post(service, title="Secret Draft", status=PostStatus.DRAFT)
    live = await _post(service, title="Live Older")

    await _post(service, title="Newer", related_post_ids=[draft["id"], live["id"]])

    public = await service.get_published_post("newer")
    assert public["related_posts"] == [{"id": live["id"], "title": "Live Older", "slug": "live-older"}]

    admin = await service.get_post(public["id"])
    assert {p["slug"] for p in admin["related_posts"]} == {"secret-draft", "live-older"}


async def test_over_long_tag_is_rejected_before_writing(session):
    with pytest.raises(ValidationError) as exc_info:
        await _post(BlogService(session), tags=["x" * (TAG_NAME_MAX_LENGTH + 1)])

    assert exc_info.value.details == {"field": "tags"}
    assert await session.scalar(select(func.count()).select_from(BlogPost)) == 0


async def test_failed_update_leaves_post_unchanged(session, monkeypatch):
    service = BlogService(session)
    post = await _post(service, tags=["news"])
    await session.commit()

    async def broken_reconcile(self, content_id, names):
        raise RuntimeError("tag store unavailable")

    monkeypatch.setattr(TagReconciler, "reconcile", broken_reconcile)
    with pytest.raises(RuntimeError):
        await service.update_post(post["id"], title="Changed", content="Edited", tags=["other"])
    monkeypatch.undo()

    row = await service.repo.get_for_update(post["id"])
    assert row.title == "Hello World"
    assert row.slug == "hello-world"
    assert row.content == "Body"
    assert (await service.get_post(post["id"]))["tags"] == ["news"]


async def test_slug_taken_between_check_and_insert(session, monkeypatch):
    service = BlogService(session)
    await _post(service)

    async def slug_looks_free(self, slug):
        return None

    monkeypatch.setattr(BlogPostRepository, "get_by_slug", slug_looks_free)
    with pytest.raises(ConflictError) as exc_info:
        await _post(service, title="Hello world")

    assert exc_info.value.details == {"slug": "hello-world"}
    assert await session.scalar(select(func.count()).select_from(BlogPost)) == 1


async def test_other_constraint_failures_are_not_reported_as_slug_conflicts(session, monkeypatch):
    service = BlogService(session)

    async def unchecked_related(self, project_ids, post_ids, post_id=None):
        return list(project_ids), list(post_ids)

    monkeypatch.setattr(BlogService, "_check_related", unchecked_related)
    with pytest.raises(ConflictError) as exc_info:
        await _post(service, related_project_ids=[999])

    assert exc_info.value.details == {}
    assert "title" not in exc_info.value.message
    assert await session.scalar(select(func.count()).select_from(BlogPost)) == 0
