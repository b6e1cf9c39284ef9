"""
RelatedContent Repository

Links from a blog post to projects and to other posts.

Common Operations:
==================
- replace()                  → Make a post's links exactly the given targets
- related_projects_by_blog() → {blog_id: [{id, title, image_url}, ...]}
- related_posts_by_blog()    → {blog_id: [{id, title, slug}, ...]}
"""

from collections import defaultdict
from typing import Any, Iterable, Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.shared.models.blog_post import BlogPost, RelatedContent
from folio.shared.models.enums import PostStatus
from folio.shared.models.project import Project


class RelatedContentRepository:
    """Repository for RelatedContent rows."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def replace(
        self,
        blog_id: int,
        project_ids: Iterable[int] = (),
        post_ids: Iterable[int] = (),
        relevance_score: float = 1.0,
    ) -> None:
        """
        Delete a post's existing links and insert the given ones.

        Each row sets exactly one of project_id / related_blog_id.
        """
        await self.session.execute(delete(RelatedContent).where(RelatedContent.blog_id == blog_id))

        rows: list[dict[str, Any]] = [
            {"blog_id": blog_id, "project_id": pid, "related_blog_id": None, "relevance_score": relevance_score}
            for pid in dict.fromkeys(project_ids)
        ]
        rows += [
            {"blog_id": blog_id, "project_id": None, "related_blog_id": bid, "relevance_score": relevance_score}
            for bid in dict.fromkeys(post_ids)
        ]
        if rows:
            await self.session.execute(insert(RelatedContent), rows)

    async def related_projects_by_blog(self, blog_ids: Iterable[int]) -> dict[int, list[dict[str, Any]]]:
        """
        Distinct related project summaries per post, highest relevance first.

        SQL Generated:
            SELECT DISTINCT related_content.blog_id, projects.id, projects.title,
                   projects.image_url, related_content.relevance_score
            FROM related_content JOIN projects ON projects.id = related_content.project_id
            WHERE related_content.blog_id IN (...)
        """
        ids = list(blog_ids)
        if not ids:
            return {}

        result = await self.session.execute(
            select(
                RelatedContent.blog_id,
                Project.id,
                Project.title,
                Project.image_url,
                RelatedContent.relevance_score,
            )
            .distinct()
            .join(Project, Project.id == RelatedContent.project_id)
            .where(RelatedContent.blog_id.in_(ids))
            .order_by(RelatedContent.relevance_score.desc(), Project.id)
        )
        related: dict[int, list[dict[str, Any]]] = defaultdict(list)
        for blog_id, project_id, title, image_url, _score in result.all():
            related[blog_id].append({"id": project_id, "title": title, "image_url": image_url})
        return dict(related)

    async def related_posts_by_blog(
        self,
        blog_ids: Iterable[int],
        status: Optional[PostStatus] = None,
    ) -> dict[int, list[dict[str, Any]]]:
        """
        Related post summaries per post, highest relevance first.

        Public reads pass status=PUBLISHED so linked drafts stay hidden.
        """
        ids = list(blog_ids)
        if not ids:
            return {}

        query = (
            select(
                RelatedContent.blog_id,
                BlogPost.id,
                BlogPost.title,
                BlogPost.slug,
            )
            .join(BlogPost, BlogPost.id == RelatedContent.related_blog_id)
            .where(RelatedContent.blog_id.in_(ids))
            .order_by(RelatedContent.relevance_score.desc(), BlogPost.id)
        )
        if status is not None:
            query = query.where(BlogPost.status == status)
        result = await self.session.execute(query)
        related: dict[int, list[dict[str, Any]]] = defaultdict(list)
        for blog_id, post_id, title, slug in result.all():
            related[blog_id].append({"id": post_id, "title": title, "slug": slug})
        return dict(related)
