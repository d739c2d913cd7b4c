from datetime import datetime, timedelta, timezone

import pytest

from lostfound.crud import missing_items as missing_crud
from lostfound.models.missing_item import MissingItem


@pytest.fixture
def report_missing(client):
    def report_missing(**overrides):
        body = {
            "name": "Calculator",
            "description": "TI-84 with a purple sticker",
            "building": "Math Building",
            "room": "101",
            "dateLost": "2026-10-01T10:00:00Z",
            "reporterName": "Alice",
            "reporterEmail": "alice@inst.edu",
        }
        body.update(overrides)
        return client.post("/missing-items", json=body)

    return report_missing


def age_report(session, report_id, days):
    report = session.get(MissingItem, report_id)
    report.created_at = datetime.now(timezone.utc) - timedelta(days=days)
    session.add(report)
    session.commit()


def test_report_missing_item(client, report_missing):
    response = report_missing(urgent=True)

    assert response.status_code == 201
    data = response.json()
    assert data["urgent"] is True
    assert data["isFound"] is False
    assert data["archivedAt"] is None
    assert [report["id"] for report in client.get("/missing-items").json()] == [data["id"]]


def test_report_rejects_non_institutional_email(client, report_missing):
    response = report_missing(reporterEmail="alice@yahoo.com")

    assert response.status_code == 400
    assert client.get("/missing-items").json() == []


def test_get_and_delete_report(client, report_missing):
    report = report_missing().json()

    assert client.get(f"/missing-items/{report['id']}").status_code == 200
    assert client.delete(f"/missing-items/{report['id']}").status_code == 204
    assert client.get(f"/missing-items/{report['id']}").status_code == 404
    assert client.delete(f"/missing-items/{report['id']}").status_code == 404


def test_mark_found(client, report_missing, found_item):
    report = report_missing().json()

    response = client.put(f"/missing-items/{report['id']}/found", json={"foundItemId": found_item["id"]})

    assert response.status_code == 200
    assert response.json()["isFound"] is True
    assert response.json()["foundItemId"] == found_item["id"]


def test_mark_found_with_unknown_item(client, report_missing):
    report = report_missing().json()

    response = client.put(f"/missing-items/{report['id']}/found", json={"foundItemId": "nope"})

    assert response.status_code == 400
    assert client.get(f"/missing-items/{report['id']}").json()["isFound"] is False


def test_mark_found_unknown_report(client, found_item):
    response = client.put("/missing-items/nope/found", json={"foundItemId": found_item["id"]})

    assert response.status_code == 404


def test_auto_archive_moves_only_stale_unmatched_reports(client, session, report_missing, found_item):
    stale = report_missing(name="Old scarf").json()
    matched = report_missing(name="Old backpack").json()
    fresh = report_missing(name="New phone").json()
    age_report(session, stale["id"], days=8)
    age_report(session, matched["id"], days=8)
    client.put(f"/missing-items/{matched['id']}/found", json={"foundItemId": found_item["id"]})

    response = client.post("/missing-items/auto-archive")

    assert response.status_code == 200
    assert response.json() == {"archivedCount": 1, "archivedIds": [stale["id"]]}

    active_ids = {report["id"] for report in client.get("/missing-items").json()}
    assert active_ids == {matched["id"], fresh["id"]}


def test_auto_archive_is_idempotent(client, session, report_missing):
    stale = report_missing().json()
    age_report(session, stale["id"], days=30)

    first = client.post("/missing-items/auto-archive").json()
    archived_at = client.get(f"/missing-items/{stale['id']}").json()["archivedAt"]
    second = client.post("/missing-items/auto-archive").json()

    assert first["archivedCount"] == 1
    assert second == {"archivedCount": 0, "archivedIds": []}
    assert client.get(f"/missing-items/{stale['id']}").json()["archivedAt"] == archived_at


def test_auto_archive_threshold(session, client, report_missing):
    report = report_missing().json()
    now = datetime.now(timezone.utc)

    assert missing_crud.auto_archive(session, now=now + timedelta(days=6)) == []
    assert missing_crud.auto_archive(session, now=now + timedelta(days=8)) == [report["id"]]


def test_archive_listing_is_admin_only(client, session, report_missing, admin):
    stale = report_missing().json()
    age_report(session, stale["id"], days=10)
    client.post("/missing-items/auto-archive")

    assert client.get("/missing-items/archive").status_code == 401

    response = client.get("/missing-items/archive", headers={"X-User-Id": admin["id"]})
    assert response.status_code == 200
    assert [report["id"] for report in response.json()] == [stale["id"]]
    assert response.json()[0]["archivedAt"] is not None
