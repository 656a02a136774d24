def test_health(client):
    assert client.get("/health").json() == {"ok": True, "destinations": 3}


def test_countries(client):
    countries = client.get("/api/countries").json()
    assert len(countries) == 10
    spain = client.get("/api/countries/ES").json()
    assert "Barcelona" in spain["cities"]
    res = client.get("/api/countries/XX")
    assert res.status_code == 404
    assert res.json() == {"message": "Country not found"}


def test_destinations(client):
    names = [d["name"] for d in client.get("/api/destinations").json()]
    assert names == ["Barcelona", "Tokyo", "Santorini"]
    tokyo = client.get("/api/destinations/2").json()
    assert tokyo["pricePerPerson"] == 1850
    assert tokyo["budgetMatch"] == 82
    assert client.get("/api/destinations/42").status_code == 404


def test_search_by_name_or_country(client):
    res = client.post("/api/destinations/search", json={"destination": "greece"})
    assert [d["name"] for d in res.json()] == ["Santorini"]


def test_search_by_budget_sorts_by_match(client):
    res = client.post("/api/destinations/search", json={"budget": 3000, "travelers": 2})
    # 1200 * 2 and 1450 * 2 fit, 1850 * 2 does not
    assert [d["name"] for d in res.json()] == ["Barcelona", "Santorini"]
    res = client.post("/api/destinations/search", json={"budget": 2000})
    assert [d["name"] for d in res.json()] == ["Barcelona", "Santorini", "Tokyo"]


def test_search_by_trip_type(client):
    res = client.post("/api/destinations/search", json={"tripType": "beach"})
    assert [d["name"] for d in res.json()] == ["Barcelona", "Santorini"]


def test_search_rejects_bad_params(client):
    res = client.post("/api/destinations/search", json={"budget": -5})
    assert res.status_code == 400
    body = res.json()
    assert body["message"] == "Invalid search parameters"
    assert body["errors"][0]["loc"] == ["budget"]


def test_hotels(client):
    hotels = client.get("/api/destinations/1/hotels").json()
    assert len(hotels) == 4
    assert all(h["destinationName"] == "Barcelona" and h["country"] == "Spain" for h in hotels)
    assert len(client.get("/api/hotels").json()) == 4
    assert client.get("/api/destinations/2/hotels").json() == []
    arts = client.get("/api/hotels/1").json()
    assert arts["name"] == "Hotel Arts Barcelona"
    assert arts["discountInfo"] == "15% off for your dates"
    assert client.get("/api/hotels/99").status_code == 404


def test_attractions(client):
    attractions = client.get("/api/destinations/1/attractions").json()
    assert [a["name"] for a in attractions][:2] == ["Sagrada Familia", "Park Güell"]
    assert attractions[0]["destinationName"] == "Barcelona"
    assert len(client.get("/api/attractions").json()) == 5
    assert client.get("/api/attractions/3").json()["type"] == "Tour"
    assert client.get("/api/attractions/99").status_code == 404


def test_tour_guides(client):
    guides = client.get("/api/tour-guides").json()
    assert [g["name"] for g in guides] == ["Elena Gomez", "Akira Tanaka", "Dimitris Papadopoulos"]
    assert client.get("/api/tour-guides/2").json()["languages"] == ["Japanese", "English", "Mandarin"]
    assert client.get("/api/tour-guides/9").status_code == 404
    assert len(client.get("/api/tour-guides/1/reviews").json()) == 2
    assert len(client.get("/api/tour-guides/1/photos").json()) == 3
    assert client.get("/api/tour-guides/3/photos").json() == []


def test_create_tour_guide_with_review_and_photo(client):
    res = client.post("/api/tour-guides", json={
        "name": "Marta Silva", "location": "Lisbon, Portugal", "bio": "Fado and tiles.",
        "imageUrl": "https://example.com/marta.jpg", "rating": 4.6, "reviewCount": 12,
        "specialties": ["Music"], "languages": ["Portuguese", "English"],
        "pricePerDay": 150, "yearsExperience": 4, "toursCompleted": 90,
        "certifications": [], "contactEmail": "marta@example.com", "contactPhone": "+351 900 000 000",
    })
    assert res.status_code == 201
    guide_id = res.json()["id"]
    assert guide_id == 4

    review = client.post(f"/api/tour-guides/{guide_id}/reviews", json={
        "reviewerName": "Ana", "reviewerImage": "https://example.com/ana.jpg", "rating": 5,
        "comment": "Lovely evening in Alfama.", "date": "2024-05-01", "tourLocation": "Lisbon",
    })
    assert review.status_code == 201
    assert review.json()["tourGuideId"] == guide_id

    photo = client.post(f"/api/tour-guides/{guide_id}/photos", json={
        "imageUrl": "https://example.com/alfama.jpg", "location": "Alfama, Lisbon", "date": "2024-05-01",
    })
    assert photo.status_code == 201
    assert [p["location"] for p in client.get(f"/api/tour-guides/{guide_id}/photos").json()] == ["Alfama, Lisbon"]


def test_create_tour_guide_missing_fields(client):
    res = client.post("/api/tour-guides", json={"name": "Nobody"})
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid request"
