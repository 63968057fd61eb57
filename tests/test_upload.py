import io
import os

from .conftest import auth_headers, register_user


def test_register_with_picture(client, settings):
    files = {"picture": ("me.jpg", io.BytesIO(b"fakeimagebytes"), "image/jpeg")}
    response = register_user(client, email="pic@x.com", files=files)
    assert response.status_code == 201

    picture_path = response.json()["picture_path"]
    assert picture_path.endswith(".jpg")
    assert picture_path != "me.jpg"
    assert os.listdir(settings.upload_dir) == [picture_path]

    served = client.get(f"/assets/{picture_path}")
    assert served.status_code == 200
    assert served.content == b"fakeimagebytes"


def test_same_filename_does_not_overwrite(client, user_a, headers, settings):
    paths = []
    for content in (b"one", b"two"):
        files = {"picture": ("same.png", io.BytesIO(content), "image/png")}
        response = client.post(
            "/posts",
            data={"user_id": str(user_a["user_id"]), "description": "pic"},
            files=files,
            headers=headers,
        )
        assert response.status_code == 201
        paths.append(response.json()["picture_path"])

    assert paths[0] != paths[1]
    assert sorted(os.listdir(settings.upload_dir)) == sorted(paths)


def test_upload_oversized_file(client, user_a, headers, settings):
    big_data = io.BytesIO(b"0" * (settings.max_file_size + 1))
    response = client.post(
        "/posts",
        data={"user_id": str(user_a["user_id"]), "description": "big"},
        files={"picture": ("big.jpg", big_data, "image/jpeg")},
        headers=headers,
    )
    assert response.status_code == 413
    assert response.json() == {"message": "File too large"}
    assert os.listdir(settings.upload_dir) == []


def test_duplicate_registration_discards_picture(client, settings):
    assert register_user(client, email="dup@x.com").status_code == 201
    files = {"picture": ("me.jpg", io.BytesIO(b"bytes"), "image/jpeg")}
    response = register_user(client, email="dup@x.com", files=files)
    assert response.status_code == 400
    assert os.listdir(settings.upload_dir) == []


def test_post_picture_is_stored(client, user_a, settings):
    headers = auth_headers(client, "a@x.com")
    files = {"picture": ("beach.PNG", io.BytesIO(b"\x89PNG"), "image/png")}
    post = client.post(
        "/posts",
        data={"user_id": str(user_a["user_id"]), "description": "beach"},
        files=files,
        headers=headers,
    ).json()
    assert post["picture_path"].endswith(".png")
    stored = os.path.join(settings.upload_dir, post["picture_path"])
    with open(stored, "rb") as f:
        assert f.read() == b"\x89PNG"
