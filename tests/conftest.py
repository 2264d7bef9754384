"""
Test fixtures and configuration
"""
import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a fresh SQLite file per test"""
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'songs.db'}",
        GREETING="Welcome to the song server!",
    )


@pytest.fixture
def client(test_settings):
    """Test client fixture; entering the context runs the lifespan"""
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client


@pytest.fixture
def sample_song_data():
    """Sample song data for testing"""
    return {
        "title": "Imagine",
        "artist": "John Lennon",
        "genre": "Rock",
    }


@pytest.fixture
def add_song(client):
    """Insert a song through the API and return the response body"""
    def _add(title, artist, genre):
        response = client.post(
            "/songs/new",
            json={"title": title, "artist": artist, "genre": genre}
        )
        assert response.status_code == 200
        return response.json()
    return _add
