from sqlalchemy import func, select

from folio.shared.models import BlogPost, Project, Tag


async def _category(client, headers, name="Web"):
    response = await client.post("/api/admin/categories", headers=headers, json={"name": name})
    assert response.status_code == 201
    return response.json()


# ═══════════════════════════════════════════════════════════════════════════════
# CATEGORIES
# ═══════════════════════════════════════════════════════════════════════════════


async def test_category_crud(client, admin_headers):
    category = await _category(client, admin_headers, "Machine Learning")
    assert category["slug"] == "machine-learning"

    response = await client.put(
        f"/api/admin/categories/{category['id']}",
        headers=admin_headers,
        json={"name": "Data Science", "description": "Models"},
    )
    assert response.status_code == 200
    assert response.json()["slug"] == "data-science"
    assert response.json()["description"] == "Models"

    response = await client.get("/api/admin/categories", headers=admin_headers)
    assert [c["name"] for c in response.json()] == ["Data Science"]


async def test_duplicate_category_conflicts(client, admin_headers):
    await _category(client, admin_headers, "Web Dev")

    response = await client.post("/api/admin/categories", headers=admin_headers, json={"name": "web dev"})

    assert response.status_code == 409
    assert response.json()["details"] == {"slug": "web-dev"}


async def test_category_requires_name(client, admin_headers):
    response = await client.post("/api/admin/categories", headers=admin_headers, json={"name": "  "})
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "name"}


async def test_deleting_category_keeps_content(client, admin_headers):
    category = await _category(client, admin_headers)
    created = await client.post(
        "/api/admin/projects",
        headers=admin_headers,
        json={"title": "Site", "description": "d", "category_id": category["id"]},
    )
    project_id = created.json()["id"]

    response = await client.delete(f"/api/admin/categories/{category['id']}", headers=admin_headers)
    assert response.status_code == 200

    project = (await client.get(f"/api/admin/projects/{project_id}", headers=admin_headers)).json()
    assert project["category_id"] is None
    assert project["category_name"] is None


async def test_categories_are_admin_only(client, user_headers):
    response = await client.get("/api/admin/categories", headers=user_headers)
    assert response.status_code == 403


# ═══════════════════════════════════════════════════════════════════════════════
# PROJECTS
# ═══════════════════════════════════════════════════════════════════════════════


async def test_create_project_with_tags(client, database, admin_headers, admin_user):
    category = await _category(client, admin_headers)

    response = await client.post(
        "/api/admin/projects",
        headers=admin_headers,
        json={
            "title": "Portfolio",
            "description": "My site",
            "category_id": category["id"],
            "tags": ["AI", "Web Dev"],
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Project created successfully"

    projects = (await client.get("/api/projects")).json()
    assert len(projects) == 1
    assert projects[0]["id"] == body["id"]
    assert projects[0]["category_name"] == "Web"
    assert projects[0]["created_by"] == admin_user.id
    assert sorted(projects[0]["tags"]) == ["AI", "Web Dev"]

    async with database.session() as s:
        slugs = (await s.execute(select(Tag.slug).order_by(Tag.slug))).scalars().all()
    assert slugs == ["ai", "web-dev"]


async def test_project_tags_as_comma_separated_string(client, admin_headers):
    response = await client.post(
        "/api/admin/projects",
        headers=admin_headers,
        json={"title": "Tool", "description": "d", "tags": "cli, python"},
    )
    project_id = response.json()["id"]

    project = (await client.get(f"/api/admin/projects/{project_id}", headers=admin_headers)).json()
    assert sorted(project["tags"]) == ["cli", "python"]


async def test_update_project_replaces_tags(client, admin_headers):
    created = await client.post(
        "/api/admin/projects",
        headers=admin_headers,
        json={"title": "Tool", "description": "d", "tags": ["old"]},
    )
    project_id = created.json()["id"]

    response = await client.put(
        f"/api/admin/projects/{project_id}",
        headers=admin_headers,
        json={"title": "Tool v2", "description": "d2", "tags": ["new"]},
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Project updated successfully"}
    project = (await client.get(f"/api/admin/projects/{project_id}", headers=admin_headers)).json()
    assert project["title"] == "Tool v2"
    assert project["tags"] == ["new"]


async def test_project_validation(client, admin_headers, database):
    response = await client.post("/api/admin/projects", headers=admin_headers, json={"description": "d"})
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "title"}

    response = await client.post(
        "/api/admin/projects",
        headers=admin_headers,
        json={"title": "T", "description": "d", "category_id": 42},
    )
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "category_id"}

    async with database.session() as s:
        assert await s.scalar(select(func.count()).select_from(Project)) == 0


async def test_public_project_limit(client, admin_headers):
    for title in ("One", "Two", "Three"):
        await client.post("/api/admin/projects", headers=admin_headers, json={"title": title, "description": "d"})

    response = await client.get("/api/projects", params={"limit": 2})
    assert response.status_code == 200
    assert len(response.json()) == 2

    response = await client.get("/api/projects", params={"limit": 0})
    assert response.status_code == 400


async def test_delete_project(client, admin_headers):
    created = await client.post(
        "/api/admin/projects", headers=admin_headers, json={"title": "Gone", "description": "d"}
    )
    project_id = created.json()["id"]

    response = await client.delete(f"/api/admin/projects/{project_id}", headers=admin_headers)
    assert response.json() == {"message": "Project deleted successfully"}

    response = await client.delete(f"/api/admin/projects/{project_id}", headers=admin_headers)
    assert response.status_code == 404


async def test_project_writes_are_admin_only(client, user_headers):
    response = await client.post(
        "/api/admin/projects", headers=user_headers, json={"title": "T", "description": "d"}
    )
    assert response.status_code == 403
    assert response.json()["error"] == "Access denied. Admin only."


# ═══════════════════════════════════════════════════════════════════════════════
# BLOG POSTS
# ═══════════════════════════════════════════════════════════════════════════════


async def _publish(client, headers, title="Hello World", **fields):
    payload = {"title": title, "content": "Body", "status": "published", **fields}
    response = await client.post("/api/blog-posts", headers=headers, json=payload)
    assert response.status_code == 201
    return response.json()


async def test_create_post_sets_author_and_slug(client, admin_headers, admin_user):
    post = await _publish(client, admin_headers, title="Hello, World!", tags=["news"], keywords="python, fastapi")

    assert post["slug"] == "hello-world"
    assert post["author_id"] == admin_user.id
    assert post["author"] == "admin"
    assert post["tags"] == ["news"]
    assert post["keywords"] == ["python", "fastapi"]
    assert post["views"] == 0
    assert post["related_posts"] == []


async def test_public_detail_counts_views(client, admin_headers):
    await _publish(client, admin_headers)

    first = await client.get("/api/blog-posts/hello-world")
    second = await client.get("/api/blog-posts/hello-world")

    assert first.status_code == 200
    assert first.json()["views"] == 1
    assert second.json()["views"] == 2


async def test_drafts_are_not_public(client, admin_headers):
    draft = await client.post(
        "/api/blog-posts",
        headers=admin_headers,
        json={"title": "Secret", "content": "Body"},
    )
    assert draft.json()["status"] == "draft"
    await _publish(client, admin_headers, title="Public")

    public = (await client.get("/api/blog-posts")).json()
    assert [p["slug"] for p in public] == ["public"]
    assert (await client.get("/api/blog-posts/secret")).status_code == 404

    everything = (await client.get("/api/admin/blog-posts", headers=admin_headers)).json()
    assert {p["slug"] for p in everything} == {"secret", "public"}

    detail = await client.get(f"/api/admin/blog-posts/{draft.json()['id']}", headers=admin_headers)
    assert detail.status_code == 200
    assert detail.json()["views"] == 0


async def test_duplicate_title_conflicts(client, admin_headers, database):
    await _publish(client, admin_headers)

    response = await client.post(
        "/api/blog-posts",
        headers=admin_headers,
        json={"title": "hello world", "content": "Other"},
    )

    assert response.status_code == 409
    assert response.json()["details"] == {"slug": "hello-world"}
    async with database.session() as s:
        assert await s.scalar(select(func.count()).select_from(BlogPost)) == 1


async def test_update_and_delete_post(client, admin_headers):
    post = await _publish(client, admin_headers)

    response = await client.put(
        f"/api/blog-posts/{post['id']}",
        headers=admin_headers,
        json={"title": "Hello Again", "content": "New body", "status": "draft"},
    )
    assert response.status_code == 200
    assert response.json()["slug"] == "hello-again"
    assert response.json()["status"] == "draft"

    response = await client.delete(f"/api/blog-posts/{post['id']}", headers=admin_headers)
    assert response.json() == {"message": "Blog post deleted successfully"}
    assert (await client.get(f"/api/admin/blog-posts/{post['id']}", headers=admin_headers)).status_code == 404


async def test_post_with_related_content(client, admin_headers):
    created = await client.post(
        "/api/admin/projects", headers=admin_headers, json={"title": "Demo", "description": "d"}
    )
    project_id = created.json()["id"]
    older = await _publish(client, admin_headers, title="Older")

    post = await _publish(
        client,
        admin_headers,
        title="Newer",
        related_project_ids=[project_id],
        related_post_ids=[older["id"]],
    )

    detail = (await client.get("/api/blog-posts/newer")).json()
    assert detail["related_projects"] == [{"id": project_id, "title": "Demo", "image_url": None}]
    assert detail["related_posts"] == [{"id": older["id"], "title": "Older", "slug": "older"}]
    assert post["id"] == detail["id"]


async def test_blog_writes_are_admin_only(client, user_headers):
    response = await client.post(
        "/api/blog-posts", headers=user_headers, json={"title": "Mine", "content": "Body"}
    )
    assert response.status_code == 403

    response = await client.post("/api/blog-posts", json={"title": "Mine", "content": "Body"})
    assert response.status_code == 401


async def test_over_long_project_tag_is_a_validation_error(client, admin_headers, database):
    response = await client.post(
        "/api/admin/projects",
        headers=admin_headers,
        json={"title": "T", "description": "d", "tags": ["a" * 101]},
    )
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
    assert response.json()["details"] == {"field": "tags"}

    async with database.session() as s:
        assert await s.scalar(select(func.count()).select_from(Project)) == 0
        assert await s.scalar(select(func.count()).select_from(Tag)) == 0
