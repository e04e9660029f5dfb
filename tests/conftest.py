"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag every test under tests/unit as "unit"
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------

USERS_API = """\
@JSON(encoder: .iso8601)
protocol Users {
    @GET("/users/:id")
    func getUser(@Path id: String) -> User

    @POST("/users")
    @Headers(["X-Client": "ios"])
    func createUser(@Field("e-mail") email: String, @Query page: Int) -> User
}
"""


@pytest.fixture
def users_api_source() -> bytes:
    """Return a small annotated Swift protocol."""
    return USERS_API.encode("utf-8")


@pytest.fixture
def users_api_file(tmp_path: Path, users_api_source: bytes) -> Path:
    path = tmp_path / "Users.swift"
    path.write_bytes(users_api_source)
    return path
