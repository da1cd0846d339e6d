import httpx
import pytest

from media_relay.config.settings import config

AUDIO_BYTES = b"ID3\x03\x00\x00\x00fake-mp3-frames"


@pytest.mark.asyncio
async def test_vocal_remover_without_file(client, upstream):
    response = await client.post("/api/vocal-remover", data={"note": "no file here"})

    assert response.status_code == 400
    assert "Missing audio file" in response.json()["error"]
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_vocal_remover_with_json_body(client, upstream):
    response = await client.post("/api/vocal-remover", json={"file": "abc"})

    assert response.status_code == 400
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_vocal_remover_ignores_unknown_field(client, upstream):
    response = await client.post(
        "/api/vocal-remover",
        files={"track": ("song.mp3", AUDIO_BYTES, "audio/mpeg")},
    )

    assert response.status_code == 400
    assert upstream.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize("field_name", ["file", "audio", "audio_file", "upload"])
async def test_vocal_remover_accepts_field_aliases(client, upstream, field_name):
    upstream.respond_with(httpx.Response(200, json={"status": "queued"}))

    response = await client.post(
        "/api/vocal-remover",
        files={field_name: ("song.mp3", AUDIO_BYTES, "audio/mpeg")},
    )

    assert response.status_code == 200
    assert response.json() == {"status": "queued"}


@pytest.mark.asyncio
async def test_vocal_remover_forwards_file_under_each_field(client, upstream):
    upstream.respond_with(httpx.Response(200, json={}))

    await client.post(
        "/api/vocal-remover",
        files={"audio": ("song.mp3", AUDIO_BYTES, "audio/mpeg")},
    )

    sent = upstream.last
    assert str(sent.url) == config.vocal_remover.url
    assert sent.headers["content-type"].startswith("multipart/form-data; boundary=")
    assert sent.headers["x-rapidapi-host"] == config.vocal_remover.host
    assert sent.headers["x-rapidapi-key"] == config.vocal_remover.key

    body = sent.content
    for field_name in config.vocal_remover.forward_fields:
        assert f'name="{field_name}"; filename="song.mp3"'.encode() in body
    assert body.count(AUDIO_BYTES) == len(config.vocal_remover.forward_fields)
    assert body.count(b"Content-Type: audio/mpeg") == len(config.vocal_remover.forward_fields)


@pytest.mark.asyncio
async def test_vocal_remover_json_passthrough(client, upstream):
    upstream.respond_with(
        httpx.Response(200, json={"vocals": "https://cdn/v.mp3", "instrumental": "https://cdn/i.mp3"})
    )

    response = await client.post("/api/vocal-remover", files={"file": ("a.wav", AUDIO_BYTES, "audio/wav")})

    assert response.status_code == 200
    assert response.json() == {"vocals": "https://cdn/v.mp3", "instrumental": "https://cdn/i.mp3"}


@pytest.mark.asyncio
async def test_vocal_remover_parses_json_sent_as_text(client, upstream):
    upstream.respond_with(
        httpx.Response(200, content=b'{"job": 7}', headers={"Content-Type": "text/plain"})
    )

    response = await client.post("/api/vocal-remover", files={"file": ("a.wav", AUDIO_BYTES, "audio/wav")})

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {"job": 7}


@pytest.mark.asyncio
async def test_vocal_remover_plain_text_passthrough(client, upstream):
    upstream.respond_with(
        httpx.Response(200, content=b"processing started", headers={"Content-Type": "text/html"})
    )

    response = await client.post("/api/vocal-remover", files={"file": ("a.wav", AUDIO_BYTES, "audio/wav")})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "processing started"


@pytest.mark.asyncio
async def test_vocal_remover_echoes_upstream_error(client, upstream):
    upstream.respond_with(httpx.Response(413, text="File too large"))

    response = await client.post("/api/vocal-remover", files={"file": ("a.wav", AUDIO_BYTES, "audio/wav")})

    assert response.status_code == 413
    assert response.json() == {"error": f"{config.vocal_remover.name} error: File too large"}


@pytest.mark.asyncio
async def test_vocal_remover_network_failure(client, upstream):
    def refuse(request):
        raise httpx.ConnectError("no route to host", request=request)

    upstream.respond_with(refuse)

    response = await client.post("/api/vocal-remover", files={"file": ("a.wav", AUDIO_BYTES, "audio/wav")})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error", "message": "no route to host"}
