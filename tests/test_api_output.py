"""Tests for API output formatting and input validation."""

from __future__ import annotations

from fastapi.testclient import TestClient

from page_packer.api import app

client = TestClient(app)


def test_pack_returns_placements_and_free_space() -> None:
    request = {
        "canvas": {"width": 4, "height": 4},
        "items": [{"width": 2, "height": 2, "id": "A"}],
    }

    response = client.post("/pack", json=request)

    assert response.status_code == 200
    data = response.json()

    assert data["placements"] == [{"x": 0, "y": 0, "width": 2, "height": 2, "payload": "A"}]
    assert data["unplaced"] == []
    assert data["free_rects"] == [
        {"x": 2, "y": 0, "width": 2, "height": 4},
        {"x": 0, "y": 2, "width": 4, "height": 2},
    ]
    assert data["used_area"] == 4
    assert data["canvas_area"] == 16
    assert data["fill_rate"] == 0.25
    assert data["free_cells"] == 12


def test_pack_expands_quantity_and_reports_unplaced() -> None:
    request = {
        "canvas": {"width": 3, "height": 3},
        "items": [
            {"width": 1, "height": 1, "id": "cell", "quantity": 3},
            {"width": 3, "height": 3, "id": "big"},
            {"width": 4, "height": 1, "payload": {"note": "too wide"}},
        ],
    }

    response = client.post("/pack", json=request)

    assert response.status_code == 200
    data = response.json()

    assert [p["payload"] for p in data["placements"]] == ["cell_0001", "cell_0002", "cell_0003"]
    assert [(p["x"], p["y"]) for p in data["placements"]] == [(0, 0), (1, 0), (2, 0)]
    assert data["unplaced"] == [
        {"width": 3, "height": 3, "payload": "big"},
        {"width": 4, "height": 1, "payload": {"note": "too wide"}},
    ]


def test_missing_canvas_returns_422() -> None:
    response = client.post("/pack", json={"items": [{"width": 1, "height": 1}]})

    assert response.status_code == 422


def test_non_positive_size_returns_422() -> None:
    request = {
        "canvas": {"width": 3, "height": 3},
        "items": [{"width": 0, "height": 1}],
    }

    response = client.post("/pack", json=request)

    assert response.status_code == 422


def test_health() -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_oversized_canvas_returns_422(monkeypatch) -> None:
    monkeypatch.delenv("PAGE_PACKER_MAX_CANVAS_CELLS", raising=False)
    request = {
        "canvas": {"width": 65, "height": 64},
        "items": [{"width": 1, "height": 1}, {"width": 1, "height": 1}],
    }

    response = client.post("/pack", json=request)

    assert response.status_code == 422
    assert "above the limit of 4096" in response.json()["detail"]


def test_canvas_limit_read_from_env(monkeypatch) -> None:
    monkeypatch.setenv("PAGE_PACKER_MAX_CANVAS_CELLS", "100")
    items = [{"width": 1, "height": 1}]

    ok = client.post("/pack", json={"canvas": {"width": 10, "height": 10}, "items": items})
    too_big = client.post("/pack", json={"canvas": {"width": 11, "height": 10}, "items": items})

    assert ok.status_code == 200
    assert ok.json()["free_cells"] == 99
    assert too_big.status_code == 422
