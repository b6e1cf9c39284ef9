from pathlib import Path

from sqlalchemy import select

from folio.shared.models import ContactMessage, MessageStatus


async def test_contact_message_is_stored_unread(client, database):
    response = await client.post(
        "/api/contact",
        json={"name": "Dana", "email": "dana@example.com", "message": "Hi there"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "unread"
    assert body["name"] == "Dana"

    async with database.session() as s:
        stored = await s.scalar(select(ContactMessage).where(ContactMessage.id == body["id"]))
    assert stored.status == MessageStatus.UNREAD
    assert stored.message == "Hi there"


async def test_contact_rejects_invalid_email(client):
    response = await client.post(
        "/api/contact",
        json={"name": "Dana", "email": "dana", "message": "Hi"},
    )
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "email"}


async def test_contact_rejects_blank_message(client):
    response = await client.post(
        "/api/contact",
        json={"name": "Dana", "email": "dana@example.com", "message": "   "},
    )
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "message"}


async def test_upload_image(client, app_settings, user_headers):
    response = await client.post(
        "/api/upload",
        headers=user_headers,
        files={"file": ("cover.PNG", b"\x89PNG fake image", "image/png")},
    )

    assert response.status_code == 200
    url = response.json()["url"]
    assert url.startswith("/uploads/")
    assert url.endswith(".png")

    stored = Path(app_settings.UPLOAD_DIR) / url.rsplit("/", 1)[1]
    assert stored.read_bytes() == b"\x89PNG fake image"

    served = await client.get(url)
    assert served.status_code == 200
    assert served.content == b"\x89PNG fake image"


async def test_upload_rejects_disallowed_extension(client, user_headers):
    response = await client.post(
        "/api/upload",
        headers=user_headers,
        files={"file": ("script.sh", b"echo hi", "text/plain")},
    )
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


async def test_upload_rejects_svg(client, app_settings, user_headers):
    assert ".svg" not in app_settings.ALLOWED_UPLOAD_EXTENSIONS

    response = await client.post(
        "/api/upload",
        headers=user_headers,
        files={"file": ("logo.svg", b"<svg><script>alert(1)</script></svg>", "image/svg+xml")},
    )
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
    upload_dir = Path(app_settings.UPLOAD_DIR)
    assert not upload_dir.exists() or list(upload_dir.iterdir()) == []


async def test_upload_rejects_large_file(client, app_settings, user_headers):
    response = await client.post(
        "/api/upload",
        headers=user_headers,
        files={"file": ("big.jpg", b"x" * (app_settings.MAX_UPLOAD_BYTES + 1), "image/jpeg")},
    )
    assert response.status_code == 400
    upload_dir = Path(app_settings.UPLOAD_DIR)
    assert not upload_dir.exists() or list(upload_dir.iterdir()) == []


async def test_upload_requires_login(client):
    response = await client.post(
        "/api/upload",
        files={"file": ("cover.png", b"data", "image/png")},
    )
    assert response.status_code == 401
