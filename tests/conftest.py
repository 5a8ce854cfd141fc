"""Test configuration and fixtures for the post page application."""

from datetime import datetime, timezone
from typing import Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient
from sqlalchemy.pool import StaticPool

from postpage import create_app
from postpage.extensions import db
from postpage.models import Profile, Post, PostImage, POST_STATUS_PUBLISHED


@pytest.fixture
def app() -> Generator[Flask, None, None]:
    """Create and configure a test Flask application."""
    # Use in-memory SQLite for each test
    test_config = {
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        'SQLALCHEMY_ENGINE_OPTIONS': {
            'poolclass': StaticPool,
            'connect_args': {'check_same_thread': False}
        },
        'SECRET_KEY': 'test-secret-key',
        'SITE_NAME': 'Test Site',
        'RATELIMIT_ENABLED': False,  # Disable rate limiting for tests
    }

    app = create_app(test_config)

    with app.app_context():
        db.create_all()
        yield app

        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def runner(app: Flask):
    """Create a test CLI runner."""
    return app.test_cli_runner()


@pytest.fixture
def test_profile(app: Flask):
    """Create an author profile with an avatar."""
    profile = Profile(
        display_name='Jane Writer',
        avatar_url='https://cdn.example.com/avatars/jane.png',
    )
    db.session.add(profile)
    db.session.commit()
    db.session.refresh(profile)
    yield profile


@pytest.fixture
def test_post(app: Flask, test_profile: Profile):
    """Create a published post with a featured image."""
    post = Post(
        title='Test Post',
        slug='test-post',
        description='Test post description',
        content='<p>This is a <strong>test</strong> post.</p>',
        featured_image_url='https://cdn.example.com/posts/featured.jpg',
        status=POST_STATUS_PUBLISHED,
        author_id=test_profile.id,
        created_at=datetime(2024, 3, 5, tzinfo=timezone.utc),
    )
    db.session.add(post)
    db.session.commit()
    db.session.refresh(post)
    yield post


@pytest.fixture
def test_post_images(app: Flask, test_post: Post):
    """Attach images to the test post in insertion order [3, 1, None, 1]."""
    images = [
        PostImage(post_id=test_post.id, image_url='https://cdn.example.com/i/three.jpg', alt_text='three', order_index=3),
        PostImage(post_id=test_post.id, image_url='https://cdn.example.com/i/one-a.jpg', alt_text='one-a', order_index=1),
        PostImage(post_id=test_post.id, image_url='https://cdn.example.com/i/none.jpg', alt_text='none', order_index=None),
        PostImage(post_id=test_post.id, image_url='https://cdn.example.com/i/one-b.jpg', alt_text='one-b', order_index=1),
    ]
    for image in images:
        db.session.add(image)
        # Commit one by one so ids follow list order
        db.session.commit()
    yield images


@pytest.fixture
def make_post(app: Flask, test_profile: Profile):
    """Factory for posts with arbitrary fields."""
    def _make(**kwargs) -> Post:
        fields = {
            'title': 'Another Post',
            'slug': 'another-post',
            'description': 'Another description',
            'content': '<p>Body</p>',
            'status': POST_STATUS_PUBLISHED,
            'author_id': test_profile.id,
            'created_at': datetime(2024, 1, 1, tzinfo=timezone.utc),
        }
        fields.update(kwargs)
        post = Post(**fields)
        db.session.add(post)
        db.session.commit()
        db.session.refresh(post)
        return post

    return _make
