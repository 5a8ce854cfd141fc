from __future__ import annotations

import structlog
from flask import render_template, request, jsonify, abort

from postpage.extensions import limiter
from postpage.repositories.blog import get_published_post_by_slug
from postpage.services.posts import build_post_detail

from postpage.blueprints.blog import bp

logger = structlog.get_logger(__name__)


@bp.get("/blog/<slug>")
@limiter.limit("120 per minute")
def post_detail(slug: str):
    """Individual blog post page"""
    post = get_published_post_by_slug(slug)
    if not post:
        logger.info("post_not_found", slug=slug)
        abort(404)

    detail = build_post_detail(post)
    logger.debug("post_rendered", slug=slug, images=len(detail.images))

    if request.args.get("format") == "json":
        return jsonify({
            "status": "ok",
            "page": "post",
            "post": detail.model_dump(mode="json"),
        })
    return render_template("blog_post.html", post=detail)
