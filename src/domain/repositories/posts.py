"""Post service interface."""

from __future__ import annotations

from src.domain.models.posts import PendingPost, Post, PostUpdate

from .base import CrudService


class PostService(CrudService[Post, PendingPost, PostUpdate]):
    """Data-access interface for Post records.

    update() replaces every mutable field and bumps updated_at.
    """

    entity_name = "Post"
    record_model = Post
    create_model = PendingPost
    update_model = PostUpdate
