"""Shared pytest fixtures for fashion dashboard tests."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from fashion_dashboard.db.schema import Base, ContentRecord


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


def make_record(**overrides) -> ContentRecord:
    """Build a ContentRecord with sensible defaults."""
    values = {
        "category": "Style Principles",
        "url": "https://example.com/post",
        "source": "Instagram",
        "time_spent_minutes": 5.0,
        "upvotes": 10,
        "views": 100,
        "engagement_score": 0.5,
        "content_type": "Video",
        "difficulty_level": "Beginner",
        "trending_score": 0.5,
    }
    values.update(overrides)
    return ContentRecord(**values)


SAMPLE_ROWS = [
    {
        "category": "Understanding Sustainable Fashion",
        "url": "https://www.instagram.com/p/abc",
        "source": "Instagram",
        "time_spent_minutes": 12.5,
        "upvotes": 340,
        "views": 5000,
        "engagement_score": 0.91,
        "content_type": "Carousel",
        "difficulty_level": "Beginner",
        "trending_score": 0.80,
    },
    {
        "category": "Style Principles",
        "url": "https://www.tiktok.com/@x/video/1",
        "source": "TikTok",
        "time_spent_minutes": 3.0,
        "upvotes": 1200,
        "views": 40000,
        "engagement_score": 0.91,
        "content_type": "Video",
        "difficulty_level": "Intermediate",
        "trending_score": 0.95,
    },
    {
        "category": "Fashion History",
        "url": "https://example.substack.com/p/history",
        "source": "Substack",
        "time_spent_minutes": 20.0,
        "upvotes": 85,
        "views": 1500,
        "engagement_score": 0.42,
        "content_type": "Article",
        "difficulty_level": "Advanced",
        "trending_score": 0.30,
    },
    {
        "category": "Style Principles",
        "url": "https://www.instagram.com/p/def",
        "source": "Instagram",
        "time_spent_minutes": 7.5,
        "upvotes": 410,
        "views": 9000,
        "engagement_score": 0.77,
        "content_type": "Video",
        "difficulty_level": "Beginner",
        "trending_score": 0.60,
    },
    {
        "category": "Capsule Wardrobes",
        "url": "https://www.tiktok.com/@y/video/2",
        "source": "TikTok",
        "time_spent_minutes": 1.5,
        "upvotes": 55,
        "views": 800,
        "engagement_score": 0.15,
        "content_type": "Video",
        "difficulty_level": "Beginner",
        "trending_score": 0.10,
    },
]


@pytest.fixture
def seeded_session(session):
    """Session with the SAMPLE_ROWS dataset loaded."""
    session.add_all([make_record(**row) for row in SAMPLE_ROWS])
    session.commit()
    return session
