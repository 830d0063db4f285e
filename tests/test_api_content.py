"""Tests for content API endpoint."""

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from conftest import SAMPLE_ROWS, make_record
from fashion_dashboard.db.schema import Base


def create_test_app_and_client(with_schema: bool = True):
    """Create app with test database and return (client, engine)."""
    from fashion_dashboard.api.app import create_app, get_db_session

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    if with_schema:
        Base.metadata.create_all(engine)

    app = create_app()

    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db
    client = TestClient(app)

    return client, engine


def setup_test_data(engine) -> None:
    """Load SAMPLE_ROWS into the test database."""
    with Session(engine) as db_session:
        db_session.add_all([make_record(**row) for row in SAMPLE_ROWS])
        db_session.commit()


class TestGetContentEndpoint:
    """Test GET /api/data."""

    def test_returns_all_rows(self):
        """No parameters returns every row."""
        client, engine = create_test_app_and_client()
        setup_test_data(engine)

        response = client.get("/api/data")
        assert response.status_code == 200
        assert len(response.json()) == len(SAMPLE_ROWS)

    def test_returns_frontend_keys(self):
        """Rows use the CSV-style keys the dashboard reads."""
        client, engine = create_test_app_and_client()
        setup_test_data(engine)

        item = client.get("/api/data").json()[0]
        for key in (
            "Category",
            "URL",
            "Source",
            "Time_Spent_Minutes",
            "Upvotes",
            "Views",
            "Engagement_Score",
            "Content_Type",
            "Difficulty_Level",
            "Trending_Score",
            "id",
            "created_at",
            "updated_at",
        ):
            assert key in item

    def test_ordered_by_engagement_then_trending(self):
        """First row has the highest engagement, ties by trending."""
        client, engine = create_test_app_and_client()
        setup_test_data(engine)

        data = client.get("/api/data").json()
        keys = [(row["Engagement_Score"], row["Trending_Score"]) for row in data]
        assert keys == sorted(keys, reverse=True)

    def test_search_and_source_filter(self):
        """search=fashion AND source=Instagram returns the single match."""
        client, engine = create_test_app_and_client()
        setup_test_data(engine)

        data = client.get("/api/data", params={"search": "fashion", "source": "Instagram"}).json()
        assert len(data) == 1
        assert data[0]["Category"] == "Understanding Sustainable Fashion"

    def test_camel_case_filter_params(self):
        """contentType and difficultyLevel are accepted."""
        client, engine = create_test_app_and_client()
        setup_test_data(engine)

        data = client.get(
            "/api/data", params={"contentType": "Video", "difficultyLevel": "Intermediate"}
        ).json()
        assert [row["Source"] for row in data] == ["TikTok"]

    def test_all_filter_values(self):
        """category=All and source=All do not filter."""
        client, engine = create_test_app_and_client()
        setup_test_data(engine)

        data = client.get("/api/data", params={"category": "All", "source": "All"}).json()
        assert len(data) == len(SAMPLE_ROWS)

    def test_limit_and_offset(self):
        """limit/offset page through the ordered rows."""
        client, engine = create_test_app_and_client()
        setup_test_data(engine)

        full = client.get("/api/data").json()
        page = client.get("/api/data", params={"limit": 2, "offset": 1}).json()
        assert [row["id"] for row in page] == [row["id"] for row in full[1:3]]

    def test_no_match_returns_empty_list(self):
        """Zero matches is 200 with an empty list."""
        client, engine = create_test_app_and_client()
        setup_test_data(engine)

        response = client.get("/api/data", params={"source": "Pinterest"})
        assert response.status_code == 200
        assert response.json() == []

    def test_non_numeric_limit_rejected(self):
        """limit=abc is a validation error, not coerced."""
        client, _ = create_test_app_and_client()
        response = client.get("/api/data", params={"limit": "abc"})
        assert response.status_code == 422

    def test_non_numeric_offset_rejected(self):
        """offset=1.5 is a validation error."""
        client, _ = create_test_app_and_client()
        response = client.get("/api/data", params={"limit": 5, "offset": "1.5"})
        assert response.status_code == 422

    def test_zero_limit_rejected(self):
        """limit must be at least 1."""
        client, _ = create_test_app_and_client()
        assert client.get("/api/data", params={"limit": 0}).status_code == 422

    def test_negative_offset_rejected(self):
        """offset must be non-negative."""
        client, _ = create_test_app_and_client()
        assert client.get("/api/data", params={"limit": 5, "offset": -1}).status_code == 422

    def test_oversized_limit_rejected(self):
        """A limit beyond a 64-bit integer is a validation error."""
        client, _ = create_test_app_and_client()
        response = client.get("/api/data", params={"limit": "99999999999999999999"})
        assert response.status_code == 422

    def test_oversized_offset_rejected(self):
        """An offset beyond a 64-bit integer is a validation error."""
        client, _ = create_test_app_and_client()
        response = client.get("/api/data", params={"limit": 5, "offset": str(2**63)})
        assert response.status_code == 422

    def test_largest_limit_accepted(self):
        """The largest 64-bit limit returns every row."""
        client, engine = create_test_app_and_client()
        setup_test_data(engine)

        response = client.get("/api/data", params={"limit": str(2**63 - 1)})
        assert response.status_code == 200
        assert len(response.json()) == len(SAMPLE_ROWS)

    def test_store_unavailable_returns_500(self):
        """Missing table surfaces as a server error."""
        client, _ = create_test_app_and_client(with_schema=False)

        response = client.get("/api/data")
        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to load data from database"


class TestHealthEndpoint:
    """Test GET /health."""

    def test_health(self):
        """Health check answers ok."""
        client, _ = create_test_app_and_client()
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
