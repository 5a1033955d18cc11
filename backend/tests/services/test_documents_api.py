"""Document API — metadata registration guarded by the file validators.

Invariants:
    - Extension outside the document allow-list → 400 on original_name
    - Unregistered MIME type → 400 on mime_type
    - Size above 10 MiB → 400 on size; exactly 10 MiB accepted
    - PUT edits descriptive fields; file name, type and size stay as registered
"""

MB = 1024 * 1024
DOC = {
    "original_name": "Weekly Plan.PDF",
    "mime_type": "application/pdf",
    "size": 1536,
    "category": "weekly-plan",
    "tags": "planning, week 1",
}


async def test_register_document(client):
    res = await client.post("/api/v1/documents", json=DOC)
    assert res.status_code == 201, res.text
    body = res.json()
    assert body["title"] == "Weekly Plan.PDF"
    assert body["size_display"] == "1.5 KB"
    assert body["tags"] == ["planning", "week 1"]
    assert body["category"] == "weekly-plan"


async def test_extension_rejected(client):
    res = await client.post("/api/v1/documents", json={**DOC, "original_name": "virus.exe"})
    assert res.status_code == 400
    assert res.json()["error"]["context"]["field"] == "original_name"


async def test_mime_type_rejected(client):
    res = await client.post("/api/v1/documents", json={**DOC, "mime_type": "image/png"})
    assert res.status_code == 400
    assert res.json()["error"]["context"]["field"] == "mime_type"


async def test_size_ceiling(client):
    res = await client.post("/api/v1/documents", json={**DOC, "size": 10 * MB})
    assert res.status_code == 201
    res = await client.post("/api/v1/documents", json={**DOC, "size": 10 * MB + 1})
    assert res.status_code == 400
    assert res.json()["error"]["context"]["field"] == "size"


async def test_list_and_delete(client):
    created = (await client.post("/api/v1/documents", json=DOC)).json()
    await client.post("/api/v1/documents", json={
        **DOC, "original_name": "policy.docx", "title": "Safeguarding Policy",
        "mime_type": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "category": "policy",
    })

    res = await client.get("/api/v1/documents", params={"category": "policy"})
    assert [d["title"] for d in res.json()["documents"]] == ["Safeguarding Policy"]
    res = await client.get("/api/v1/documents", params={"search": "weekly"})
    assert res.json()["total"] == 1

    assert (await client.delete(f"/api/v1/documents/{created['id']}")).status_code == 200
    assert (await client.get("/api/v1/documents")).json()["total"] == 1


async def test_update_document(client):
    created = (await client.post(
        "/api/v1/documents", json={**DOC, "description": "Week one"},
    )).json()
    res = await client.put(f"/api/v1/documents/{created['id']}", json={
        "title": "Plan for week 1",
        "category": "training",
        "tags": "onboarding",
        "description": None,
    })
    assert res.status_code == 200, res.text
    body = res.json()
    assert body["title"] == "Plan for week 1"
    assert body["category"] == "training"
    assert body["tags"] == ["onboarding"]
    assert body["description"] is None
    assert body["original_name"] == "Weekly Plan.PDF"
    assert body["size"] == 1536


async def test_update_document_rejects_unknown_category(client):
    created = (await client.post("/api/v1/documents", json=DOC)).json()
    res = await client.put(
        f"/api/v1/documents/{created['id']}", json={"category": "secret"},
    )
    assert res.status_code == 400


async def test_update_missing_document_is_404(client):
    res = await client.put(
        "/api/v1/documents/00000000-0000-0000-0000-000000000000", json={"title": "x"},
    )
    assert res.status_code == 404
