"""Tests for /api/v1/lists."""

from uuid import uuid4

import pytest

pytestmark = pytest.mark.integration

LISTS = "/api/v1/lists"


@pytest.fixture
def sci_fi(client, alice) -> dict:
    response = client.post(LISTS, json={"name": "Sci-Fi"}, headers=alice["headers"])
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateList:
    def test_creates_empty_list(self, client, alice):
        response = client.post(
            LISTS,
            json={"name": "  Sci-Fi  "},
            headers=alice["headers"],
        )

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Sci-Fi"
        assert body["owner_id"] == alice["user"]["id"]
        assert body["books"] == body["likes"] == body["comments"] == []
        assert body["like_count"] == 0

    def test_blank_name(self, client, alice):
        response = client.post(LISTS, json={"name": "   "}, headers=alice["headers"])

        assert response.status_code == 400
        assert response.json() == {
            "detail": "Name is required",
            "code": "VALIDATION_ERROR",
        }

    def test_missing_name(self, client, alice):
        response = client.post(LISTS, json={}, headers=alice["headers"])

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_name_too_long(self, client, alice):
        response = client.post(
            LISTS,
            json={"name": "x" * 201},
            headers=alice["headers"],
        )

        assert response.status_code == 400


class TestReadLists:
    def test_get_list(self, client, sci_fi):
        response = client.get(f"{LISTS}/{sci_fi['id']}")

        assert response.status_code == 200
        assert response.json() == sci_fi

    def test_get_missing_list(self, client):
        response = client.get(f"{LISTS}/{uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"detail": "List not found", "code": "LIST_NOT_FOUND"}

    def test_malformed_id_is_not_found(self, client):
        response = client.get(f"{LISTS}/not-a-uuid")

        assert response.status_code == 404
        assert response.json()["code"] == "INVALID_IDENTIFIER"

    def test_list_all_newest_first(self, client, alice, bob):
        client.post(LISTS, json={"name": "First"}, headers=alice["headers"])
        client.post(LISTS, json={"name": "Second"}, headers=bob["headers"])

        response = client.get(LISTS)

        assert response.status_code == 200
        assert [b["name"] for b in response.json()] == ["Second", "First"]

    def test_list_all_empty(self, client):
        assert client.get(LISTS).json() == []

    def test_my_lists(self, client, alice, bob, sci_fi):
        client.post(LISTS, json={"name": "Bob's"}, headers=bob["headers"])

        response = client.get(f"{LISTS}/me", headers=alice["headers"])

        assert response.status_code == 200
        assert [b["id"] for b in response.json()] == [sci_fi["id"]]

    def test_lists_by_owner(self, client, alice, sci_fi):
        response = client.get(f"{LISTS}/owner/{alice['user']['id']}")

        assert [b["id"] for b in response.json()] == [sci_fi["id"]]

    def test_lists_by_unknown_owner_is_empty(self, client):
        assert client.get(f"{LISTS}/owner/{uuid4()}").json() == []


class TestDeleteList:
    def test_owner_deletes(self, client, alice, sci_fi):
        response = client.delete(f"{LISTS}/{sci_fi['id']}", headers=alice["headers"])

        assert response.status_code == 204
        assert client.get(f"{LISTS}/{sci_fi['id']}").status_code == 404

    def test_other_user_forbidden(self, client, bob, sci_fi):
        response = client.delete(f"{LISTS}/{sci_fi['id']}", headers=bob["headers"])

        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"
        assert client.get(f"{LISTS}/{sci_fi['id']}").status_code == 200

    def test_missing_list(self, client, alice):
        response = client.delete(f"{LISTS}/{uuid4()}", headers=alice["headers"])

        assert response.status_code == 404

    def test_requires_authentication(self, client, sci_fi):
        assert client.delete(f"{LISTS}/{sci_fi['id']}").status_code == 401


class TestBooks:
    def test_add_book_returns_all_books_newest_first(self, client, alice, sci_fi):
        url = f"{LISTS}/{sci_fi['id']}/books"
        client.post(url, json={"title": "Dune"}, headers=alice["headers"])

        response = client.post(
            url,
            json={"title": "Hyperion"},
            headers=alice["headers"],
        )

        assert response.status_code == 201
        books = response.json()
        assert [b["title"] for b in books] == ["Hyperion", "Dune"]
        assert books[0]["name"] == "alice"
        assert books[0]["user_id"] == alice["user"]["id"]

    def test_duplicate_titles_allowed(self, client, alice, sci_fi):
        url = f"{LISTS}/{sci_fi['id']}/books"
        client.post(url, json={"title": "Dune"}, headers=alice["headers"])

        response = client.post(url, json={"title": "Dune"}, headers=alice["headers"])

        assert [b["title"] for b in response.json()] == ["Dune", "Dune"]

    def test_any_user_may_add_books(self, client, bob, sci_fi):
        response = client.post(
            f"{LISTS}/{sci_fi['id']}/books",
            json={"title": "Dune"},
            headers=bob["headers"],
        )

        assert response.status_code == 201
        entry = response.json()[0]
        assert entry["name"] == "bob"
        assert entry["user_id"] == bob["user"]["id"]

    def test_title_too_long(self, client, alice, sci_fi):
        response = client.post(
            f"{LISTS}/{sci_fi['id']}/books",
            json={"title": "x" * 501},
            headers=alice["headers"],
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_empty_title(self, client, alice, sci_fi):
        response = client.post(
            f"{LISTS}/{sci_fi['id']}/books",
            json={"title": ""},
            headers=alice["headers"],
        )

        assert response.status_code == 400

    def test_missing_list(self, client, alice):
        response = client.post(
            f"{LISTS}/{uuid4()}/books",
            json={"title": "Dune"},
            headers=alice["headers"],
        )

        assert response.status_code == 404

    def test_books_show_up_in_list(self, client, alice, sci_fi):
        client.post(
            f"{LISTS}/{sci_fi['id']}/books",
            json={"title": "Dune"},
            headers=alice["headers"],
        )

        body = client.get(f"{LISTS}/{sci_fi['id']}").json()

        assert [b["title"] for b in body["books"]] == ["Dune"]


class TestLikes:
    def test_like_and_unlike(self, client, bob, sci_fi):
        url = f"{LISTS}/{sci_fi['id']}/likes"

        liked = client.put(url, headers=bob["headers"])
        assert liked.status_code == 200
        assert [like["user_id"] for like in liked.json()] == [bob["user"]["id"]]
        assert client.get(f"{LISTS}/{sci_fi['id']}").json()["like_count"] == 1

        unliked = client.delete(url, headers=bob["headers"])
        assert unliked.status_code == 200
        assert unliked.json() == []

    def test_like_twice(self, client, bob, sci_fi):
        url = f"{LISTS}/{sci_fi['id']}/likes"
        client.put(url, headers=bob["headers"])

        response = client.put(url, headers=bob["headers"])

        assert response.status_code == 400
        assert response.json() == {
            "detail": "List already liked",
            "code": "LIST_ALREADY_LIKED",
        }

    def test_unlike_without_like(self, client, bob, sci_fi):
        response = client.delete(
            f"{LISTS}/{sci_fi['id']}/likes",
            headers=bob["headers"],
        )

        assert response.status_code == 400
        assert response.json() == {
            "detail": "List has not yet been liked",
            "code": "LIST_NOT_LIKED",
        }

    def test_owner_may_like_own_list(self, client, alice, sci_fi):
        response = client.put(
            f"{LISTS}/{sci_fi['id']}/likes",
            headers=alice["headers"],
        )

        assert response.status_code == 200

    def test_like_missing_list(self, client, bob):
        response = client.put(f"{LISTS}/{uuid4()}/likes", headers=bob["headers"])

        assert response.status_code == 404


class TestComments:
    def test_add_comment(self, client, bob, sci_fi):
        response = client.post(
            f"{LISTS}/{sci_fi['id']}/comments",
            json={"text": "Great picks"},
            headers=bob["headers"],
        )

        assert response.status_code == 201
        (comment,) = response.json()
        assert comment["text"] == "Great picks"
        assert comment["name"] == "bob"
        assert comment["user_id"] == bob["user"]["id"]
        assert comment["id"]

    def test_new_comment_comes_first(self, client, alice, bob, sci_fi):
        url = f"{LISTS}/{sci_fi['id']}/comments"
        client.post(url, json={"text": "first"}, headers=bob["headers"])

        response = client.post(url, json={"text": "second"}, headers=alice["headers"])

        assert [c["text"] for c in response.json()] == ["second", "first"]

    def test_empty_text(self, client, bob, sci_fi):
        response = client.post(
            f"{LISTS}/{sci_fi['id']}/comments",
            json={"text": "   "},
            headers=bob["headers"],
        )

        assert response.status_code == 400

    def test_author_deletes_comment(self, client, alice, bob, sci_fi):
        url = f"{LISTS}/{sci_fi['id']}/comments"
        client.post(url, json={"text": "keep"}, headers=alice["headers"])
        comment_id = client.post(
            url,
            json={"text": "remove"},
            headers=bob["headers"],
        ).json()[0]["id"]

        response = client.delete(f"{url}/{comment_id}", headers=bob["headers"])

        assert response.status_code == 200
        assert [c["text"] for c in response.json()] == ["keep"]

    def test_list_owner_cannot_delete_others_comment(self, client, alice, bob, sci_fi):
        url = f"{LISTS}/{sci_fi['id']}/comments"
        comment_id = client.post(
            url,
            json={"text": "mine"},
            headers=bob["headers"],
        ).json()[0]["id"]

        response = client.delete(f"{url}/{comment_id}", headers=alice["headers"])

        assert response.status_code == 403
        assert response.json()["detail"] == "User not authorized"
        remaining = client.get(f"{LISTS}/{sci_fi['id']}").json()["comments"]
        assert [c["id"] for c in remaining] == [comment_id]

    def test_delete_missing_comment(self, client, bob, sci_fi):
        response = client.delete(
            f"{LISTS}/{sci_fi['id']}/comments/{uuid4()}",
            headers=bob["headers"],
        )

        assert response.status_code == 404
        assert response.json() == {
            "detail": "Comment does not exist",
            "code": "COMMENT_NOT_FOUND",
        }

    def test_delete_comment_malformed_id(self, client, bob, sci_fi):
        response = client.delete(
            f"{LISTS}/{sci_fi['id']}/comments/not-a-uuid",
            headers=bob["headers"],
        )

        assert response.status_code == 404
