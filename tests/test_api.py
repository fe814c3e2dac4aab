import uuid
from datetime import date, timedelta

from models.author import AuthorRecord


def register_author(client, name="Test Author", date_of_birth="1990-01-01"):
    response = client.post("/api/authors", json={"name": name, "dateOfBirth": date_of_birth})
    assert response.status_code == 201
    return response.get_json()["data"]


def register_book(client, author_ids, **overrides):
    payload = {"title": "Test Book", "price": 1500, "authorIds": author_ids, "status": "UNPUBLISHED"}
    payload.update(overrides)
    return client.post("/api/books", json=payload)


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "database": "ok"}


class TestAuthorsEndpoints:
    def test_register_and_list(self, client):
        author = register_author(client)
        assert author["name"] == "Test Author"
        assert author["dateOfBirth"] == "1990-01-01"

        response = client.get("/api/authors")
        assert response.status_code == 200
        assert response.get_json() == {"data": [author]}

    def test_get_by_id(self, client):
        author = register_author(client)

        assert client.get(f"/api/authors/{author['id']}").get_json()["data"] == author
        assert client.get(f"/api/authors/{uuid.uuid4()}").status_code == 404

    def test_get_by_id_requires_hyphenated_id(self, client):
        author = register_author(client)
        author_id = uuid.UUID(author["id"])

        for spelling in [author_id.hex, author_id.urn]:
            response = client.get(f"/api/authors/{spelling}")
            assert response.status_code == 404
            assert response.get_json()["message"] == "The specified author does not exist."

    def test_register_missing_fields_returns_field_errors(self, client):
        response = client.post("/api/authors", json={})
        body = response.get_json()

        assert response.status_code == 400
        assert body["error"] == "VALIDATION_ERROR"
        assert body["message"] == "Invalid input."
        assert set(body["details"]) == {"name", "dateOfBirth"}

    def test_register_future_birth_date_is_rejected(self, client):
        tomorrow = (date.today() + timedelta(days=1)).isoformat()
        response = client.post("/api/authors", json={"name": "Test", "dateOfBirth": tomorrow})

        assert response.status_code == 400
        assert "dateOfBirth" in response.get_json()["details"]

    def test_register_too_long_name_is_rejected(self, client):
        response = client.post("/api/authors", json={"name": "a" * 256, "dateOfBirth": "1990-01-01"})
        assert response.status_code == 400
        assert "name" in response.get_json()["details"]

    def test_update(self, client):
        author = register_author(client)

        response = client.put(
            f"/api/authors/{author['id']}", json={"name": "Renamed", "dateOfBirth": "1970-07-07"}
        )
        assert response.status_code == 200
        assert response.get_json()["data"] == {"id": author["id"], "name": "Renamed", "dateOfBirth": "1970-07-07"}

    def test_update_unknown_author_returns_404(self, client):
        for author_id in ["not-a-uuid", str(uuid.uuid4())]:
            response = client.put(f"/api/authors/{author_id}", json={"name": "X", "dateOfBirth": "1990-01-01"})
            body = response.get_json()
            assert response.status_code == 404
            assert body["error"] == "NOT_FOUND"
            assert body["message"] == "The specified author does not exist."

    def test_malformed_json_returns_400(self, client):
        response = client.post("/api/authors", data="{not json", content_type="application/json")
        assert response.status_code == 400
        assert response.get_json()["error"] == "BAD_REQUEST"


class TestBooksEndpoints:
    def test_register_and_list(self, client):
        author = register_author(client)

        response = register_book(client, [author["id"]])
        assert response.status_code == 201
        book = response.get_json()["data"]
        assert book["title"] == "Test Book"
        assert book["price"] == 1500
        assert book["authorIds"] == [author["id"]]
        assert book["status"] == "UNPUBLISHED"

        assert client.get("/api/books").get_json() == {"data": [book]}
        assert client.get(f"/api/books/{book['id']}").get_json() == {"data": book}

    def test_register_with_unknown_author_returns_400(self, client):
        response = register_book(client, [str(uuid.uuid4())])
        body = response.get_json()

        assert response.status_code == 400
        assert body["error"] == "DOMAIN_VALIDATION_ERROR"
        assert body["message"] == "Some of the specified authors do not exist."

    def test_register_with_non_hyphenated_author_id_returns_400(self, client):
        author = register_author(client)
        author_id = uuid.UUID(author["id"])

        for spelling in [author_id.hex, author_id.urn]:
            response = register_book(client, [spelling])
            body = response.get_json()
            assert response.status_code == 400
            assert body["error"] == "DOMAIN_VALIDATION_ERROR"
            assert body["message"] == "Author ID format is invalid."
        assert client.get("/api/books").get_json() == {"data": []}

    def test_register_with_price_above_max_returns_400(self, client):
        author = register_author(client)

        response = register_book(client, [author["id"]], price=1_000_001)
        assert response.status_code == 400
        assert response.get_json()["message"] == "Price must be 1,000,000 or less."

    def test_register_with_invalid_fields_returns_field_errors(self, client):
        response = register_book(client, [], price=-1, status="DRAFT", title="")
        details = response.get_json()["details"]

        assert response.status_code == 400
        assert {"title", "price", "authorIds", "status"} <= set(details)

    def test_register_with_non_integer_price_is_rejected(self, client):
        author = register_author(client)
        response = register_book(client, [author["id"]], price="100")
        assert response.status_code == 400
        assert "price" in response.get_json()["details"]

    def test_update(self, client):
        a1, a2 = register_author(client, "One"), register_author(client, "Two")
        book = register_book(client, [a1["id"]]).get_json()["data"]

        response = client.put(
            f"/api/books/{book['id']}",
            json={"title": "Second Edition", "price": 2000, "authorIds": [a1["id"], a2["id"]], "status": "PUBLISHED"},
        )
        assert response.status_code == 200
        updated = response.get_json()["data"]
        assert updated["title"] == "Second Edition"
        assert sorted(updated["authorIds"]) == sorted([a1["id"], a2["id"]])
        assert updated["status"] == "PUBLISHED"

    def test_published_book_cannot_be_unpublished(self, client):
        author = register_author(client)
        book = register_book(client, [author["id"]], status="PUBLISHED").get_json()["data"]

        response = client.put(
            f"/api/books/{book['id']}",
            json={"title": "Test Book", "price": 1500, "authorIds": [author["id"]], "status": "UNPUBLISHED"},
        )
        assert response.status_code == 400
        assert response.get_json()["message"] == "A published book cannot be unpublished."
        assert client.get(f"/api/books/{book['id']}").get_json()["data"]["status"] == "PUBLISHED"

    def test_update_unknown_book_returns_404(self, client):
        author = register_author(client)
        payload = {"title": "T", "price": 1, "authorIds": [author["id"]], "status": "UNPUBLISHED"}

        for book_id in ["not-a-uuid", str(uuid.uuid4())]:
            response = client.put(f"/api/books/{book_id}", json=payload)
            assert response.status_code == 404
            assert response.get_json()["message"] == "The specified book does not exist."

    def test_books_by_author(self, client):
        a1, a2 = register_author(client, "One"), register_author(client, "Two")
        first = register_book(client, [a1["id"]], title="First").get_json()["data"]
        second = register_book(client, [a1["id"], a2["id"]], title="Second").get_json()["data"]

        by_a1 = client.get(f"/api/books/author/{a1['id']}").get_json()["data"]
        by_a2 = client.get(f"/api/books/author/{a2['id']}").get_json()["data"]
        assert {b["id"] for b in by_a1} == {first["id"], second["id"]}
        assert [b["id"] for b in by_a2] == [second["id"]]
        assert client.get(f"/api/books/author/{uuid.uuid4()}").get_json() == {"data": []}

    def test_books_by_malformed_author_id_returns_404(self, client):
        response = client.get("/api/books/author/not-a-uuid")
        assert response.status_code == 404

    def test_book_paths_require_hyphenated_ids(self, client):
        author = register_author(client)
        book = register_book(client, [author["id"]]).get_json()["data"]

        response = client.get(f"/api/books/{uuid.UUID(book['id']).hex}")
        assert response.status_code == 404
        assert response.get_json()["message"] == "The specified book does not exist."

        response = client.get(f"/api/books/author/{uuid.UUID(author['id']).urn}")
        assert response.status_code == 404
        assert response.get_json()["message"] == "The specified author does not exist."


class TestErrorHandling:
    def test_messages_follow_configured_locale(self, app, client):
        app.config["MESSAGE_LOCALE"] = "ja"

        response = client.put(f"/api/books/{uuid.uuid4()}", json={})
        assert response.status_code == 400
        assert response.get_json()["message"] == "入力値にエラーがあります。"

        response = client.get(f"/api/authors/{uuid.uuid4()}")
        assert response.get_json()["message"] == "指定された著者は存在しません。"

    def test_corrupted_data_returns_500_without_leaking_details(self, client, session):
        session.add(AuthorRecord(id=str(uuid.uuid4()), name="", birth_date=date(1990, 1, 1)))
        session.commit()

        response = client.get("/api/authors")
        body = response.get_json()
        assert response.status_code == 500
        assert body["error"] == "INTERNAL_ERROR"
        assert body["message"] == "A server error occurred."

    def test_unknown_route_returns_404_envelope(self, client):
        response = client.get("/api/nothing-here")
        body = response.get_json()
        assert response.status_code == 404
        assert body == {"error": "NOT_FOUND", "message": "The requested resource was not found.", "status": 404}

    def test_method_not_allowed(self, client):
        response = client.delete("/api/authors")
        body = response.get_json()
        assert response.status_code == 405
        assert body["error"] == "METHOD_NOT_ALLOWED"
        assert body["message"] == "The method is not allowed for this resource."

    def test_non_json_body_returns_415(self, client):
        response = client.post("/api/authors", data="x", content_type="text/plain")
        body = response.get_json()
        assert response.status_code == 415
        assert body["error"] == "UNSUPPORTED_MEDIA_TYPE"
        assert body["message"] == "The request body must be JSON."

    def test_http_errors_follow_configured_locale(self, app, client):
        app.config["MESSAGE_LOCALE"] = "ja"

        response = client.post("/api/authors", data="x", content_type="text/plain")
        assert response.status_code == 415
        assert response.get_json()["message"] == "リクエストボディはJSONである必要があります。"

        response = client.get("/api/nothing-here")
        assert response.get_json()["message"] == "指定されたリソースは存在しません。"
