# tests/api/v1/test_vendor.py

from sqlalchemy.exc import IntegrityError
from starlette.datastructures import FormData, UploadFile
from starlette.testclient import TestClient

from vendor_api.core.config import settings
from vendor_api.crud import crud_store
from vendor_api.models import Store, StorePrice, Venue, VenuePrice
from tests.utils.vendor import create_bare_store, create_category, create_user

URL = "/api/v1/vendor"
DEFAULT_PFP = settings.DEFAULT_PROFILE_PICTURE


def _store_form(**overrides) -> dict:
    data = {
        "operation": "createStore",
        "user_id": "7",
        "store_category_id": "2",
        "storeName": "Acme Catering",
        "store_price_min": "500",
        "store_price_max": "2000",
    }
    data.update(overrides)
    return {key: value for key, value in data.items() if value is not None}


def _venue_form(**overrides) -> dict:
    data = {
        "operation": "createVenue",
        "user_id": "7",
        "venue_title": "Harbour Hall",
        "venue_owner": "K. Boateng",
        "venue_location": "Accra",
        "venue_price_min": "1000",
        "venue_price_max": "5000",
        "venue_price_description": "Per day",
        "venue_capacity": "150",
    }
    data.update(overrides)
    return {key: value for key, value in data.items() if value is not None}


def test_unknown_operation(test_client: TestClient):
    response = test_client.get(URL, params={"operation": "dropTables"})

    assert response.status_code == 400
    assert response.json()["status"] == "error"
    assert response.json()["message"] == "Invalid action."


def test_missing_operation(test_client: TestClient):
    response = test_client.post(URL, data={"user_id": "1"})

    assert response.json()["message"] == "Invalid action."


def test_errors_can_be_sent_with_http_200(test_client: TestClient, monkeypatch):
    monkeypatch.setattr(settings, "ERRORS_AS_HTTP_200", True)

    response = test_client.get(URL, params={"operation": "dropTables"})

    assert response.status_code == 200
    assert response.json()["status"] == "error"


# --- Profile ---


def test_get_user_info_not_found(test_client: TestClient, db_session):
    response = test_client.get(URL, params={"operation": "getUserInfo", "user_id": "999"})

    assert response.status_code == 404
    assert response.json() == {"status": "error", "message": "User not found"}


def test_get_user_info_requires_user_id(test_client: TestClient):
    response = test_client.get(URL, params={"operation": "getUserInfo"})

    assert response.status_code == 400
    assert response.json()["message"] == "User ID is required."


def test_get_user_info_substitutes_default_picture(test_client: TestClient, db_session):
    user = create_user(db_session)

    response = test_client.get(URL, params={"operation": "getUserInfo", "user_id": user.id})

    assert response.status_code == 200
    content = response.json()
    assert content["status"] == "success"
    assert content["user"]["user_id"] == user.id
    assert content["user"]["user_firstName"] == "Ada"
    assert content["user"]["user_pfp"] == DEFAULT_PFP

    # The substitution is never written back.
    db_session.refresh(user)
    assert user.profile_picture is None


def test_update_user_pfp_round_trip(test_client: TestClient, db_session, blob_store):
    user = create_user(db_session)

    response = test_client.post(
        URL,
        data={"operation": "updateUserPfp", "user_id": str(user.id)},
        files={"profile_picture": ("me.png", b"\x89PNG fake", "image/png")},
    )

    assert response.status_code == 200
    content = response.json()
    assert content["status"] == "success"
    assert content["message"] == "Profile picture updated successfully"
    pfp_path = content["pfp_path"]
    assert pfp_path.startswith("uploads/profile_pictures/")
    assert pfp_path.endswith("_me.png")
    assert blob_store.exists(pfp_path)

    info = test_client.get(URL, params={"operation": "getUserInfo", "user_id": user.id})
    assert info.json()["user"]["user_pfp"] == pfp_path


def test_update_user_pfp_keeps_dotted_filename(test_client: TestClient, db_session, blob_store):
    user = create_user(db_session)

    response = test_client.post(
        URL,
        data={"operation": "updateUserPfp", "user_id": str(user.id)},
        files={"profile_picture": ("party..2024.png", b"png", "image/png")},
    )

    assert response.status_code == 200
    pfp_path = response.json()["pfp_path"]
    assert pfp_path.endswith("_party..2024.png")
    assert blob_store.exists(pfp_path)


def test_uploaded_form_is_closed_after_dispatch(
    test_client: TestClient, db_session, monkeypatch
):
    user = create_user(db_session)
    closed = []
    close = FormData.close

    async def recording_close(form):
        uploads = [value for value in form.values() if isinstance(value, UploadFile)]
        closed.append([upload.filename for upload in uploads])
        await close(form)

    monkeypatch.setattr(FormData, "close", recording_close)

    response = test_client.post(
        URL,
        data={"operation": "updateUserPfp", "user_id": str(user.id)},
        files={"profile_picture": ("me.png", b"png", "image/png")},
    )

    assert response.status_code == 200
    assert closed == [["me.png"]]


def test_update_user_pfp_unknown_user(test_client: TestClient, db_session, blob_store):
    response = test_client.post(
        URL,
        data={"operation": "updateUserPfp", "user_id": "404"},
        files={"profile_picture": ("me.png", b"bytes", "image/png")},
    )

    assert response.status_code == 404
    assert response.json()["message"] == "User not found"
    # The blob written for the failed update is removed again.
    assert list((blob_store.root / "profile_pictures").iterdir()) == []


def test_update_user_pfp_requires_file(test_client: TestClient, db_session):
    user = create_user(db_session)

    response = test_client.post(
        URL, data={"operation": "updateUserPfp", "user_id": str(user.id)}
    )

    assert response.status_code == 400
    assert response.json()["message"] == "User ID and profile picture are required."


# --- Stores ---


def test_get_store_categories(test_client: TestClient, db_session):
    create_category(db_session, type="Catering", category_id=1)
    create_category(db_session, type="Photography", category_id=2)

    response = test_client.get(URL, params={"operation": "getStoreCategories"})

    assert response.status_code == 200
    assert response.json() == {
        "status": "success",
        "categories": [
            {"id": 1, "type": "Catering"},
            {"id": 2, "type": "Photography"},
        ],
    }


def test_create_store_then_list(test_client: TestClient, db_session):
    create_user(db_session, user_id=7)
    create_category(db_session, type="Catering", category_id=2)

    response = test_client.post(URL, data=_store_form())

    assert response.status_code == 200
    content = response.json()
    assert content["status"] == "success"
    assert content["message"] == "Store created successfully!"
    assert "store_id" in content

    response = test_client.get(URL, params={"operation": "getStores", "user_id": "7"})

    assert response.status_code == 200
    stores = response.json()["stores"]
    assert len(stores) == 1
    store = stores[0]
    assert store["id"] == content["store_id"]
    assert store["storeName"] == "Acme Catering"
    assert store["storeCategory"] == "Catering"
    assert store["profilePicture"] == DEFAULT_PFP
    assert store["coverPhoto"] is None
    assert store["store_status"] == "active"
    assert store["prices"] == [
        {"title": None, "min": 500, "max": 2000, "description": ""}
    ]


def test_create_store_with_pictures(test_client: TestClient, db_session, blob_store):
    create_user(db_session, user_id=7)
    create_category(db_session, category_id=2)

    response = test_client.post(
        URL,
        data=_store_form(),
        files={
            "coverPhoto": ("cover.jpg", b"cover", "image/jpeg"),
            "profilePicture": ("logo.png", b"logo", "image/png"),
        },
    )
    assert response.status_code == 200

    store = test_client.get(
        URL, params={"operation": "getStores", "user_id": "7"}
    ).json()["stores"][0]

    assert store["coverPhoto"].startswith("uploads/cover_photos/")
    assert store["coverPhoto"].endswith("_cover.jpg")
    assert store["profilePicture"].startswith("uploads/profile_pictures/")
    assert blob_store.exists(store["coverPhoto"])
    assert blob_store.exists(store["profilePicture"])


def test_create_store_requires_category(test_client: TestClient, db_session):
    create_user(db_session, user_id=7)

    response = test_client.post(URL, data=_store_form(store_category_id=None))

    assert response.status_code == 400
    assert response.json()["message"] == "Store category ID is required"
    assert db_session.query(Store).count() == 0
    assert db_session.query(StorePrice).count() == 0


def test_create_store_blank_category_counts_as_missing(test_client: TestClient, db_session):
    response = test_client.post(URL, data=_store_form(store_category_id=""))

    assert response.json()["message"] == "Store category ID is required"


def test_create_store_reports_each_missing_field(test_client: TestClient, db_session):
    response = test_client.post(
        URL, data=_store_form(user_id=None, store_category_id=None)
    )

    assert response.status_code == 400
    assert response.json()["errors"] == [
        "User ID is missing",
        "Store category ID is required",
    ]


def test_create_store_unknown_category_is_a_constraint_violation(
    test_client: TestClient, db_session, blob_store
):
    create_user(db_session, user_id=7)

    response = test_client.post(
        URL,
        data=_store_form(store_category_id="99"),
        files={"coverPhoto": ("cover.jpg", b"cover", "image/jpeg")},
    )

    assert response.status_code == 409
    assert response.json() == {
        "status": "error",
        "message": "Database constraint violated",
    }
    assert db_session.query(Store).count() == 0
    assert list((blob_store.root / "cover_photos").iterdir()) == []


def test_create_store_rolls_back_when_price_insert_fails(
    test_client: TestClient, db_session, monkeypatch
):
    create_user(db_session, user_id=7)
    create_category(db_session, category_id=2)

    def failing_price(**kwargs):
        raise IntegrityError("INSERT INTO tbl_store_price", kwargs, Exception("fk"))

    monkeypatch.setattr(crud_store.store, "price_model", failing_price)

    response = test_client.post(URL, data=_store_form())

    assert response.status_code == 409
    assert db_session.query(Store).count() == 0
    assert db_session.query(StorePrice).count() == 0


def test_get_stores_for_user_without_stores(test_client: TestClient, db_session):
    create_user(db_session, user_id=3)

    response = test_client.get(URL, params={"operation": "getStores", "user_id": "3"})

    assert response.status_code == 200
    assert response.json() == {"status": "success", "stores": []}


def test_store_without_prices_is_listed_once(test_client: TestClient, db_session):
    create_user(db_session, user_id=7)
    category = create_category(db_session, category_id=2)
    create_bare_store(db_session, user_id=7, category_id=category.id)

    stores = test_client.get(
        URL, params={"operation": "getStores", "user_id": "7"}
    ).json()["stores"]

    assert len(stores) == 1
    assert stores[0]["storeName"] == "No Prices"
    assert stores[0]["prices"] == []


# --- Venues ---


def test_create_venue_then_list(test_client: TestClient, db_session, blob_store):
    create_user(db_session, user_id=7)

    response = test_client.post(
        URL,
        data=_venue_form(),
        files={"venue_profile_picture": ("hall.png", b"hall", "image/png")},
    )

    assert response.status_code == 200
    content = response.json()
    assert content["message"] == "Venue created successfully!"

    response = test_client.get(URL, params={"operation": "getVenues", "user_id": "7"})

    venues = response.json()["venues"]
    assert len(venues) == 1
    venue = venues[0]
    assert venue["venue_id"] == content["venue_id"]
    assert venue["venue_title"] == "Harbour Hall"
    assert venue["venue_owner"] == "K. Boateng"
    assert venue["venue_status"] == "available"
    assert venue["venue_type"] == "internal"
    assert venue["venue_capacity"] == 150
    assert venue["venue_price_min"] == 1000
    assert venue["venue_price_max"] == 5000
    assert venue["venue_price_description"] == "Per day"
    assert venue["venue_price_title"] is None
    assert venue["venue_profile_picture"].startswith("uploads/venue_profile_pictures/")
    assert blob_store.exists(venue["venue_profile_picture"])
    assert venue["venue_cover_photo"] is None


def test_create_venue_without_picture_uses_default(test_client: TestClient, db_session):
    create_user(db_session, user_id=7)

    test_client.post(URL, data=_venue_form(venue_status="booked", venue_type="external"))

    venue = test_client.get(
        URL, params={"operation": "getVenues", "user_id": "7"}
    ).json()["venues"][0]
    assert venue["venue_profile_picture"] == DEFAULT_PFP
    assert venue["venue_status"] == "booked"
    assert venue["venue_type"] == "external"


def test_create_venue_requires_user_id(test_client: TestClient, db_session):
    response = test_client.post(URL, data=_venue_form(user_id=None))

    assert response.status_code == 400
    assert response.json()["message"] == "User ID is missing"
    assert db_session.query(Venue).count() == 0


def test_create_venue_rolls_back_when_price_insert_fails(
    test_client: TestClient, db_session, monkeypatch
):
    from vendor_api.crud import crud_venue

    create_user(db_session, user_id=7)

    def failing_price(**kwargs):
        raise IntegrityError("INSERT INTO tbl_venue_price", kwargs, Exception("fk"))

    monkeypatch.setattr(crud_venue.venue, "price_model", failing_price)

    response = test_client.post(URL, data=_venue_form())

    assert response.status_code == 409
    assert db_session.query(Venue).count() == 0
    assert db_session.query(VenuePrice).count() == 0


def test_get_venues_pairs_each_venue_with_its_own_price(test_client: TestClient, db_session):
    create_user(db_session, user_id=1)
    create_user(db_session, user_id=2)

    first = test_client.post(URL, data=_venue_form(user_id="1", venue_price_min="10")).json()
    # A second price row on the first venue shifts the price ids away from
    # the venue ids.
    db_session.add(VenuePrice(venue_id=first["venue_id"], min=20, max=30, capacity=5))
    db_session.commit()
    test_client.post(URL, data=_venue_form(user_id="2", venue_price_min="777"))

    venues = test_client.get(
        URL, params={"operation": "getVenues", "user_id": "2"}
    ).json()["venues"]

    assert len(venues) == 1
    assert venues[0]["venue_price_min"] == 777


def test_get_venues_for_user_without_venues(test_client: TestClient, db_session):
    response = test_client.get(URL, params={"operation": "getVenues", "user_id": "5"})

    assert response.status_code == 200
    assert response.json() == {"status": "success", "venues": []}
