"""End-to-end tests for the HTTP surface."""

import base64
import io

from PIL import Image

from resizer.utils.copy_fallback import PLACEHOLDER_DESCRIPTION


def _image_file(data: bytes, name: str = "photo.png"):
    return {"image": (name, data, "image/png")}


def test_index_serves_form(client):
    res = client.get("/")

    assert res.status_code == 200
    assert "text/html" in res.headers["content-type"]
    assert 'id="uploadForm"' in res.text


def test_healthz(client):
    assert client.get("/healthz").json() == {"status": "ok"}


def test_missing_inputs_is_400(client):
    res = client.post("/resize", data={"productName": "   ", "resizeWidth": "500"})

    assert res.status_code == 400
    assert "error" in res.json()


def test_long_name_is_400_without_image(client, fake_llm):
    res = client.post("/resize", data={"productName": "x" * 101})

    assert res.status_code == 400
    assert "100 characters" in res.json()["error"]
    assert fake_llm.prompts == []


def test_long_name_is_400_with_image(client, png_bytes, store):
    res = client.post("/resize", data={"productName": "x" * 101}, files=_image_file(png_bytes))

    assert res.status_code == 400
    assert len(store) == 0


def test_name_of_exactly_100_chars_is_accepted(client):
    res = client.post("/resize", data={"productName": "y" * 100})

    assert res.status_code == 200


def test_image_only(client, png_bytes, fake_llm):
    res = client.post(
        "/resize",
        data={"resizeWidth": "600", "resizeHeight": "400"},
        files=_image_file(png_bytes),
    )

    assert res.status_code == 200
    body = res.json()
    assert body["description"] is None
    assert body["imageId"]
    preview = Image.open(io.BytesIO(base64.b64decode(body["previewBase64"])))
    assert preview.size == (1000, 1000)
    assert preview.format == "JPEG"
    assert fake_llm.prompts == []


def test_name_only(client):
    res = client.post("/resize", data={"productName": "Gaming Mouse"})

    assert res.status_code == 200
    assert res.json() == {
        "description": ["Spec one — benefit one.", "Spec two — benefit two."],
        "imageId": None,
        "previewBase64": None,
    }


def test_name_and_image(client, png_bytes, fake_llm):
    fake_llm.response = "not json at all"

    res = client.post("/resize", data={"productName": "Gaming Mouse"}, files=_image_file(png_bytes))

    body = res.json()
    assert body["description"] == ["not json at all"]
    assert body["imageId"] and body["previewBase64"]


def test_download_exactly_once(client, png_bytes):
    res = client.post("/resize", data={"productName": "Trail Running Shoe"}, files=_image_file(png_bytes))
    body = res.json()

    first = client.get(f"/download/{body['imageId']}")
    assert first.status_code == 200
    assert first.headers["content-type"] == "image/jpeg"
    assert first.headers["content-disposition"] == 'attachment; filename="trail-running-shoe.jpg"'
    assert first.content == base64.b64decode(body["previewBase64"])

    second = client.get(f"/download/{body['imageId']}")
    assert second.status_code == 404
    assert second.headers["content-type"].startswith("text/plain")
    assert "already downloaded" in second.text


def test_download_filename_from_upload(client, png_bytes):
    body = client.post("/resize", files=_image_file(png_bytes, name="Summer Dress.PNG")).json()

    res = client.get(f"/download/{body['imageId']}")
    assert res.headers["content-disposition"] == 'attachment; filename="summer-dress.jpg"'


def test_download_expires_after_ten_minutes(client, png_bytes, clock):
    body = client.post("/resize", files=_image_file(png_bytes)).json()
    clock.advance(10 * 60)

    assert client.get(f"/download/{body['imageId']}").status_code == 404


def test_unknown_download_is_404(client):
    assert client.get("/download/nope").status_code == 404


def test_rate_limit_applies_to_named_requests_only(client, png_bytes):
    for _ in range(10):
        assert client.post("/resize", data={"productName": "Kettle"}).status_code == 200

    limited = client.post("/resize", data={"productName": "Kettle"})
    assert limited.status_code == 429
    assert "Try again later" in limited.json()["error"]

    image_only = client.post("/resize", files=_image_file(png_bytes))
    assert image_only.status_code == 200


def test_ai_failure_degrades_to_placeholder(client, fake_llm):
    fake_llm.error = ConnectionError("network down")

    res = client.post("/resize", data={"productName": "Blender"})

    assert res.status_code == 200
    assert res.json()["description"] == PLACEHOLDER_DESCRIPTION


def test_undecodable_image_is_500(client, store):
    res = client.post("/resize", files={"image": ("broken.png", b"garbage bytes", "image/png")})

    assert res.status_code == 500
    assert res.json()["error"]
    assert len(store) == 0


def test_failed_image_skips_copy_generation(client, fake_llm, store):
    res = client.post(
        "/resize",
        data={"productName": "Kettle"},
        files={"image": ("broken.png", b"garbage", "image/png")},
    )

    assert res.status_code == 500
    assert "cannot identify image file" in res.json()["error"]
    assert fake_llm.prompts == []
    assert len(store) == 0


def test_name_length_counts_utf16_units(client):
    assert client.post("/resize", data={"productName": "\U0001F600" * 50}).status_code == 200
    assert client.post("/resize", data={"productName": "é" * 100}).status_code == 200

    res = client.post("/resize", data={"productName": "\U0001F600" * 51})
    assert res.status_code == 400
    assert "100 characters" in res.json()["error"]
