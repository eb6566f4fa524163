from fastapi.testclient import TestClient

from app.models.user import User
from tests.fixtures.factories import DEFAULT_PASSWORD


def login(client: TestClient, user: User, password: str = DEFAULT_PASSWORD) -> None:
    response = client.post(
        "/auth/login",
        json={"username": user.username, "password": password},
    )
    assert response.status_code == 200, response.text


def graphql(client: TestClient, query: str, variables: dict | None = None) -> dict:
    response = client.post(
        "/graphql", json={"query": query, "variables": variables or {}}
    )
    assert response.status_code == 200, response.text
    return response.json()
