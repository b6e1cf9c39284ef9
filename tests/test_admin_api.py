from sqlalchemy import select

from conftest import PASSWORD, create_user
from folio.shared.models import UserRole, UserSettings


async def test_dashboard_counts_users_by_role(client, database, admin_headers, regular_user):
    await create_user(database, "carol", "carol@example.com")

    response = await client.get("/api/admin/dashboard", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {
        "message": "Welcome to admin dashboard",
        "statistics": {"total_users": 3, "admin_count": 1, "user_count": 2},
    }


async def test_dashboard_is_admin_only(client, user_headers):
    response = await client.get("/api/admin/dashboard", headers=user_headers)
    assert response.status_code == 403


async def test_list_users_hides_password(client, admin_headers, regular_user):
    response = await client.get("/api/admin/users", headers=admin_headers)

    assert response.status_code == 200
    users = response.json()
    assert [u["username"] for u in users] == ["admin", "bob"]
    assert all("password" not in u for u in users)


async def test_create_user_with_role(client, admin_headers):
    response = await client.post(
        "/api/admin/users",
        headers=admin_headers,
        json={"username": "editor", "email": "editor@example.com", "password": PASSWORD, "role": "admin"},
    )
    assert response.status_code == 201
    user_id = response.json()["id"]

    response = await client.get(f"/api/admin/users/{user_id}", headers=admin_headers)
    assert response.json()["role"] == "admin"

    login = await client.post("/api/auth/login", json={"email": "editor@example.com", "password": PASSWORD})
    assert login.status_code == 200


async def test_create_duplicate_user_conflicts(client, admin_headers, regular_user):
    response = await client.post(
        "/api/admin/users",
        headers=admin_headers,
        json={"username": "bobby", "email": "bob@example.com", "password": PASSWORD},
    )
    assert response.status_code == 409
    assert response.json()["code"] == "CONFLICT"


async def test_update_user(client, admin_headers, regular_user):
    response = await client.put(
        f"/api/admin/users/{regular_user.id}",
        headers=admin_headers,
        json={"username": "robert", "password": "new-password"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["username"] == "robert"
    assert body["email"] == "bob@example.com"

    login = await client.post("/api/auth/login", json={"email": "bob@example.com", "password": "new-password"})
    assert login.status_code == 200
    assert login.json()["user"]["username"] == "robert"


async def test_update_user_to_taken_email(client, admin_headers, admin_user, regular_user):
    response = await client.put(
        f"/api/admin/users/{regular_user.id}",
        headers=admin_headers,
        json={"email": "admin@example.com"},
    )
    assert response.status_code == 409


async def test_change_role(client, admin_headers, regular_user, token_issuer):
    response = await client.put(
        f"/api/admin/users/{regular_user.id}/role",
        headers=admin_headers,
        json={"role": "admin"},
    )
    assert response.status_code == 200
    assert response.json() == {"message": "User role updated successfully"}

    response = await client.get(f"/api/admin/users/{regular_user.id}", headers=admin_headers)
    assert response.json()["role"] == UserRole.ADMIN.value


async def test_change_role_rejects_unknown_role(client, admin_headers, regular_user):
    response = await client.put(
        f"/api/admin/users/{regular_user.id}/role",
        headers=admin_headers,
        json={"role": "superuser"},
    )
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "role"}


async def test_delete_user_removes_settings(client, database, admin_headers, regular_user, user_headers):
    await client.get("/api/user/settings", headers=user_headers)

    response = await client.delete(f"/api/admin/users/{regular_user.id}", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "User deleted successfully"}

    response = await client.get(f"/api/admin/users/{regular_user.id}", headers=admin_headers)
    assert response.status_code == 404
    async with database.session() as s:
        assert await s.scalar(select(UserSettings).where(UserSettings.user_id == regular_user.id)) is None


async def test_missing_user(client, admin_headers):
    response = await client.get("/api/admin/users/999", headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"
