"""Tests for the server-rendered contact pages."""
from contact_manager import config


class TestHomeAndPrivacy:
    def test_home_lists_contacts_and_count(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert "You have 3 contacts." in resp.text
        assert "John Doe" in resp.text
        assert resp.context["contact_count"] == 3
        assert len(resp.context["contacts"]) == 3

    def test_home_with_empty_store(self, client, store):
        for contact in store.list_all():
            store.delete(contact.id)

        resp = client.get("/")
        assert resp.status_code == 200
        assert "You have 0 contacts." in resp.text
        assert "No contacts yet." in resp.text

    def test_privacy(self, client):
        resp = client.get("/privacy")
        assert resp.status_code == 200
        assert "Privacy Policy" in resp.text


class TestContactList:
    def test_index_sorted_by_last_then_first_name(self, client):
        resp = client.get("/contacts")
        assert resp.status_code == 200
        names = [c.full_name for c in resp.context["contacts"]]
        assert names == ["John Doe", "Bob Johnson", "Jane Smith"]
        assert resp.text.index("John Doe") < resp.text.index("Bob Johnson") < resp.text.index("Jane Smith")

    def test_index_without_message(self, client):
        resp = client.get("/contacts")
        assert resp.context["message"] is None
        assert "alert-success" not in resp.text


class TestDetails:
    def test_details_existing_contact(self, client):
        resp = client.get("/contacts/1")
        assert resp.status_code == 200
        assert resp.context["contact"].id == 1
        assert "john.doe@example.com" in resp.text

    def test_details_missing_contact_renders_404_page(self, client):
        resp = client.get("/contacts/999")
        assert resp.status_code == 404
        assert "Error 404" in resp.text
        assert "Contact not found" in resp.text
        assert "Request ID" in resp.text

    def test_non_numeric_id_renders_404_page(self, client, store, ann_lee):
        resp = client.get("/contacts/abc")
        assert resp.status_code == 404
        assert resp.headers["content-type"].startswith("text/html")
        assert "Error 404" in resp.text
        assert "Contact not found" in resp.text

        resp = client.post("/contacts/abc/edit", data=ann_lee, follow_redirects=False)
        assert resp.status_code == 404
        assert "Error 404" in resp.text
        assert store.count() == 3

    def test_unknown_route_renders_404_page(self, client):
        resp = client.get("/nowhere")
        assert resp.status_code == 404
        assert "Error 404" in resp.text


class TestAdd:
    def test_add_form(self, client):
        resp = client.get("/contacts/add")
        assert resp.status_code == 200
        assert "Add Contact" in resp.text
        assert 'action="/contacts/add"' in resp.text

    def test_add_valid_redirects_with_message(self, client, store, ann_lee):
        resp = client.post("/contacts/add", data=ann_lee, follow_redirects=False)

        assert resp.status_code == 303
        assert resp.headers["location"] == "/contacts"
        assert config.FLASH_COOKIE in resp.headers["set-cookie"]
        assert store.count() == 4
        assert store.get_by_id(4).full_name == "Ann Lee"
        assert store.get_by_id(4).organization is None

    def test_add_message_shown_once(self, client, ann_lee):
        resp = client.post("/contacts/add", data=ann_lee)

        assert resp.status_code == 200
        assert resp.context["message"] == "Contact 'Ann Lee' was successfully added."
        assert "successfully added" in resp.text

        again = client.get("/contacts")
        assert again.context["message"] is None

    def test_add_invalid_rerenders_form_with_field_errors(self, client, store, ann_lee):
        ann_lee["last_name"] = ""

        resp = client.post("/contacts/add", data=ann_lee, follow_redirects=False)

        assert resp.status_code == 200
        assert resp.context["errors"] == {"last_name": "Please enter a last name."}
        assert 'data-field="last_name"' in resp.text
        assert 'value="Ann"' in resp.text
        assert store.count() == 3

    def test_add_ignores_submitted_id(self, client, store, ann_lee):
        ann_lee["id"] = "1"
        client.post("/contacts/add", data=ann_lee)

        assert store.get_by_id(1).full_name == "John Doe"
        assert store.get_by_id(4).full_name == "Ann Lee"


class TestEdit:
    def test_edit_form_prefilled(self, client):
        resp = client.get("/contacts/1/edit")
        assert resp.status_code == 200
        assert resp.context["contact_id"] == 1
        assert 'value="john.doe@example.com"' in resp.text
        assert 'action="/contacts/1/edit"' in resp.text

    def test_edit_form_missing_contact(self, client):
        assert client.get("/contacts/999/edit").status_code == 404

    def test_edit_valid_updates_and_redirects(self, client, store):
        data = {
            "first_name": "Jonathan",
            "last_name": "Doe",
            "phone": "555-1234",
            "email": "john.doe@example.com",
            "organization": "",
        }

        resp = client.post("/contacts/1/edit", data=data)

        assert resp.status_code == 200
        assert resp.context["message"] == "Contact 'Jonathan Doe' was successfully updated."
        assert store.get_by_id(1).first_name == "Jonathan"
        assert store.get_by_id(1).organization is None

    def test_edit_invalid_leaves_store_untouched(self, client, store):
        data = {"first_name": "Jonathan", "last_name": "Doe", "phone": "nope", "email": "john.doe@example.com"}

        resp = client.post("/contacts/1/edit", data=data, follow_redirects=False)

        assert resp.status_code == 200
        assert resp.context["errors"] == {"phone": "Please enter a valid phone number."}
        assert store.get_by_id(1).first_name == "John"

    def test_edit_missing_contact_is_404(self, client, store, ann_lee):
        resp = client.post("/contacts/999/edit", data=ann_lee, follow_redirects=False)
        assert resp.status_code == 404
        assert store.count() == 3


class TestDelete:
    def test_delete_confirmation_page(self, client):
        resp = client.get("/contacts/2/delete")
        assert resp.status_code == 200
        assert "Jane Smith" in resp.text
        assert 'action="/contacts/2/delete"' in resp.text

    def test_delete_confirmation_missing_contact(self, client):
        assert client.get("/contacts/999/delete").status_code == 404

    def test_delete_removes_and_reports_name(self, client, store):
        resp = client.post("/contacts/2/delete")

        assert resp.status_code == 200
        assert resp.context["message"] == "Contact 'Jane Smith' was successfully deleted."
        assert store.get_by_id(2) is None
        assert store.count() == 2

    def test_delete_missing_contact_redirects_without_message(self, client, store):
        resp = client.post("/contacts/999/delete", follow_redirects=False)

        assert resp.status_code == 303
        assert resp.headers["location"] == "/contacts"
        assert "set-cookie" not in resp.headers
        assert store.count() == 3
