def test_analyse_returns_summary(client):
    resp = client.post("/api/analyse", json={
        "items": [
            {"name": "Chicken Rice", "price": 3.5},
            {"name": "Fish Soup", "price": 5.0},
        ]
    })

    assert resp.status_code == 200
    data = resp.get_json()
    assert data["cheapest"] == [{"name": "chicken rice", "price": 3.5, "calories": [550, 700]}]
    assert data["most_expensive"] == [{"name": "fish soup", "price": 5.0, "calories": [250, 380]}]
    assert data["healthiest"]["name"] == "fish soup"
    assert data["most_filling"]["name"] == "chicken rice"
    assert len(data["follow_up_questions"]) == 3


def test_analyse_rejects_empty_items(client):
    resp = client.post("/api/analyse", json={"items": []})

    assert resp.status_code == 400
    data = resp.get_json()
    assert data["error"] == "Invalid payload"
    assert data["issues"]
    assert data["issues"][0]["loc"] == ["items"]


def test_analyse_rejects_negative_price(client):
    resp = client.post("/api/analyse", json={"items": [{"name": "laksa", "price": -2}]})

    assert resp.status_code == 400
    issues = resp.get_json()["issues"]
    assert issues[0]["loc"] == ["items", 0, "price"]


def test_analyse_rejects_missing_items_key(client):
    resp = client.post("/api/analyse", json={"dishes": []})
    assert resp.status_code == 400


def test_analyse_rejects_non_json_body(client):
    resp = client.post("/api/analyse", data="not json", content_type="text/plain")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Invalid payload"
