from datetime import date, timedelta


def _create_author(client, name="Jane Doe", birth_date="1980-01-01"):
    return client.post("/api/v1/authors", json={"name": name, "birthDate": birth_date})


def _create_book(client, author_ids, title="Go", status="UNPUBLISHED", price=1000):
    return client.post(
        "/api/v1/books",
        json={"title": title, "price": price, "status": status, "authorIds": author_ids},
    )


def test_create_author(client):
    res = _create_author(client)

    assert res.status_code == 201
    body = res.get_json()
    assert body["name"] == "Jane Doe"
    assert body["birthDate"] == "1980-01-01"
    assert isinstance(body["id"], int)
    assert body["createdAt"] == body["updatedAt"]
    assert res.headers["Location"].endswith(f"/api/v1/authors/{body['id']}")


def test_created_author_is_readable_at_location(client):
    res = _create_author(client)

    fetched = client.get(res.headers["Location"])

    assert fetched.status_code == 200
    assert fetched.get_json()["id"] == res.get_json()["id"]


def test_create_author_with_blank_name_is_rejected(client):
    res = _create_author(client, name="   ")

    assert res.status_code == 400
    body = res.get_json()
    assert body["message"] == "Validation failed"
    assert "name: must not be blank" in body["details"]


def test_create_author_with_future_birth_date_is_rejected(client):
    tomorrow = (date.today() + timedelta(days=1)).isoformat()

    res = _create_author(client, birth_date=tomorrow)

    assert res.status_code == 400
    assert any(d.startswith("birthDate:") for d in res.get_json()["details"])


def test_create_author_with_today_as_birth_date_is_accepted(client):
    assert _create_author(client, birth_date=date.today().isoformat()).status_code == 201


def test_create_author_without_body_lists_missing_fields(client):
    res = client.post("/api/v1/authors")

    assert res.status_code == 400
    details = res.get_json()["details"]
    assert "name: Missing data for required field." in details
    assert "birthDate: Missing data for required field." in details


def test_update_author(client):
    author_id = _create_author(client).get_json()["id"]

    res = client.put(f"/api/v1/authors/{author_id}", json={"name": "Hanako", "birthDate": "1990-05-15"})

    assert res.status_code == 200
    body = res.get_json()
    assert body["id"] == author_id
    assert body["name"] == "Hanako"
    assert body["birthDate"] == "1990-05-15"
    assert body["updatedAt"] >= body["createdAt"]


def test_update_unknown_author_returns_404(client):
    res = client.put("/api/v1/authors/999", json={"name": "Hanako", "birthDate": "1990-05-15"})

    assert res.status_code == 404
    assert res.get_json() == {"message": "Author not found: 999", "details": []}


def test_update_author_validates_before_lookup(client):
    res = client.put("/api/v1/authors/999", json={"name": "", "birthDate": "1990-05-15"})

    assert res.status_code == 400


def test_delete_author(client):
    author_id = _create_author(client).get_json()["id"]

    assert client.delete(f"/api/v1/authors/{author_id}").status_code == 204
    assert client.delete(f"/api/v1/authors/{author_id}").status_code == 404
    assert client.get(f"/api/v1/authors/{author_id}").status_code == 404


def test_delete_author_keeps_their_books(client):
    keep = _create_author(client, name="Keep").get_json()["id"]
    gone = _create_author(client, name="Gone").get_json()["id"]
    book_id = _create_book(client, [keep, gone]).get_json()["id"]

    client.delete(f"/api/v1/authors/{gone}")

    res = client.get(f"/api/v1/books/{book_id}")
    assert res.status_code == 200
    assert res.get_json()["authorIds"] == [keep]


def test_list_books_of_author_without_books(client):
    author_id = _create_author(client).get_json()["id"]

    res = client.get(f"/api/v1/authors/{author_id}/books")

    assert res.status_code == 200
    assert res.get_json() == []


def test_list_books_of_author(client):
    author_id = _create_author(client).get_json()["id"]
    co_author_id = _create_author(client, name="Co").get_json()["id"]
    _create_book(client, [author_id, co_author_id], title="Book 1", status="PUBLISHED")
    _create_book(client, [author_id], title="Book 2", status="UNPUBLISHED")

    res = client.get(f"/api/v1/authors/{author_id}/books")

    assert res.status_code == 200
    books = res.get_json()
    assert [b["title"] for b in books] == ["Book 1", "Book 2"]
    assert [b["status"] for b in books] == ["PUBLISHED", "UNPUBLISHED"]
    assert books[0]["authorIds"] == sorted([author_id, co_author_id])


def test_list_books_of_author_filtered_by_status(client):
    author_id = _create_author(client).get_json()["id"]
    _create_book(client, [author_id], title="Published", status="PUBLISHED")
    _create_book(client, [author_id], title="Draft", status="UNPUBLISHED")

    res = client.get(f"/api/v1/authors/{author_id}/books?status=PUBLISHED")

    assert res.status_code == 200
    assert [b["title"] for b in res.get_json()] == ["Published"]


def test_list_books_with_unknown_status_is_rejected(client):
    author_id = _create_author(client).get_json()["id"]

    res = client.get(f"/api/v1/authors/{author_id}/books?status=DRAFT")

    assert res.status_code == 400
    assert any(d.startswith("status:") for d in res.get_json()["details"])


def test_list_books_of_unknown_author_returns_404(client):
    res = client.get("/api/v1/authors/999/books")

    assert res.status_code == 404
    assert res.get_json()["message"] == "Author not found: 999"


HUGE_ID = 10**20


def test_out_of_range_author_id_is_not_found(client):
    assert client.get(f"/api/v1/authors/{HUGE_ID}").status_code == 404
    res = client.put(f"/api/v1/authors/{HUGE_ID}", json={"name": "Hanako", "birthDate": "1990-05-15"})
    assert res.status_code == 404
    assert client.delete(f"/api/v1/authors/{HUGE_ID}").status_code == 404
    assert client.get(f"/api/v1/authors/{HUGE_ID}/books").status_code == 404


def test_author_timestamps_carry_utc_offset(client):
    author_id = _create_author(client).get_json()["id"]

    res = client.put(f"/api/v1/authors/{author_id}", json={"name": "Hanako", "birthDate": "1990-05-15"})

    body = res.get_json()
    assert body["createdAt"].endswith("+00:00")
    assert body["updatedAt"].endswith("+00:00")
