"""
End-to-end double-blind workflow over HTTP: two participants, one prompt,
from first draft to mutual acknowledgment.
"""

from fastapi.testclient import TestClient

from tests.helpers import hdr, setup_pair


def _view(client: TestClient, prompt_id, user) -> dict:
    r = client.get(f"/prompts/{prompt_id}", headers=hdr(user))
    assert r.status_code == 200
    return r.json()


def test_double_blind_lifecycle(db_session, client: TestClient):
    alex, sam, prompt = setup_pair(db_session)

    assert _view(client, prompt.id, alex)["status"] == "incomplete"

    r = client.post(f"/prompts/{prompt.id}/draft", headers=hdr(alex), json={"content": "alex draft"})
    assert r.json()["status"] == "incomplete"

    # sam cannot see an unsubmitted draft, only that a response exists
    sam_view = _view(client, prompt.id, sam)
    assert sam_view["partner_response"]["is_submitted"] is False
    assert sam_view["partner_response"]["content"] is None

    r = client.post(f"/prompts/{prompt.id}/submit", headers=hdr(alex), json={"content": "alex answer"})
    assert r.json()["status"] == "pending_partner"
    alex_response_id = r.json()["my_response"]["id"]

    sam_view = _view(client, prompt.id, sam)
    assert sam_view["status"] == "locked"
    assert sam_view["partner_response"]["is_submitted"] is True
    assert sam_view["partner_response"]["content"] is None

    r = client.post(f"/prompts/{prompt.id}/submit", headers=hdr(sam), json={"content": "sam answer"})
    assert r.json()["status"] == "ready_for_review"
    assert r.json()["partner_response"]["content"] == "alex answer"
    sam_response_id = r.json()["my_response"]["id"]

    alex_view = _view(client, prompt.id, alex)
    assert alex_view["status"] == "ready_for_review"
    assert alex_view["partner_response"]["content"] == "sam answer"

    r = client.post(f"/responses/{sam_response_id}/acknowledge", headers=hdr(alex))
    assert r.status_code == 200
    assert r.json()["prompt"]["status"] == "ready_for_review"
    assert _view(client, prompt.id, sam)["status"] == "ready_for_review"
    assert _view(client, prompt.id, sam)["partner_response"]["has_partner_acknowledgment"] is True

    r = client.post(f"/responses/{alex_response_id}/acknowledge", headers=hdr(sam))
    assert r.status_code == 200
    assert r.json()["prompt"]["status"] == "done"
    assert _view(client, prompt.id, alex)["status"] == "done"

    r = client.get("/prompts", headers=hdr(alex))
    assert [v["status"] for v in r.json()] == ["done"]
