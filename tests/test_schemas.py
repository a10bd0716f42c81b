# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Tests for resource schemas.
"""

import json

import pytest

from androidpublisher.client.multipart import build_multipart_related
from androidpublisher.schemas import (
    ExternallyHostedApk,
    InAppProduct,
    Listing,
    Price,
    ProductPurchase,
    SubscriptionPurchase,
    Track,
    TrackRelease,
    VoidedPurchasesListResponse,
)
from androidpublisher.schemas.base import to_wire_name
from androidpublisher.schemas.enums import (
    AcknowledgementState,
    PurchaseState,
    TrackReleaseStatus,
    VoidedReason,
)


class TestWireNames:
    """Test suite for python to wire name conversion."""

    @pytest.mark.parametrize(
        "name, wire_name",
        [
            ("id", "id"),
            ("expiry_time_seconds", "expiryTimeSeconds"),
            ("certificate_base64s", "certificateBase64s"),
            ("file_sha256_base64", "fileSha256Base64"),
        ],
    )
    def test_to_wire_name(self, name: str, wire_name: str) -> None:
        assert to_wire_name(name) == wire_name

    def test_fields_accept_both_names(self) -> None:
        """Models are populated from wire names and python names alike."""
        by_alias = ExternallyHostedApk.model_validate({"certificateBase64s": ["AA=="]})
        by_name = ExternallyHostedApk(certificate_base64s=["AA=="])

        assert by_alias == by_name
        assert by_name.to_dict() == {"certificateBase64s": ["AA=="]}


class TestNullStripping:
    """Test suite for absent field handling."""

    def test_unset_fields_are_not_serialized(self) -> None:
        listing = Listing(language="en-US", title="Example")

        assert json.loads(listing.to_json()) == {"language": "en-US", "title": "Example"}

    def test_round_trip_keeps_non_null_fields(self) -> None:
        """Parsing a stripped document reproduces the original fields."""
        product = InAppProduct(
            sku="coins_100",
            default_price=Price(currency="EUR", price_micros="990000"),
            prices={"DE": Price(currency="EUR", price_micros="990000")},
        )

        parsed = InAppProduct.model_validate_json(product.to_json())

        assert parsed == product
        assert parsed.to_dict() == product.to_dict()
        assert "status" not in product.to_dict()

    def test_unknown_fields_are_ignored(self) -> None:
        listing = Listing.model_validate({"title": "x", "somethingNew": True})

        assert listing.title == "x"
        assert listing.to_dict() == {"title": "x"}


class TestEnums:
    """Test suite for enumerated fields."""

    def test_known_codes_decode(self) -> None:
        purchase = ProductPurchase.model_validate_json(
            b'{"purchaseState": 0, "acknowledgementState": 1, "purchaseTimeMillis": "1700000000000"}'
        )

        assert purchase.purchase_state == PurchaseState.PURCHASED
        assert purchase.acknowledgement_state == AcknowledgementState.ACKNOWLEDGED
        assert purchase.purchase_time_millis == "1700000000000"

    def test_unknown_codes_are_kept(self) -> None:
        """Codes added by the server later still decode."""
        purchase = ProductPurchase.model_validate_json(b'{"purchaseState": 42}')

        assert purchase.purchase_state == 42
        assert json.loads(purchase.to_json()) == {"purchaseState": 42}

    def test_enums_serialize_as_numbers(self) -> None:
        purchase = ProductPurchase(purchase_state=PurchaseState.PENDING)

        assert purchase.to_dict() == {"purchaseState": 2}

    def test_release_status_is_a_string(self) -> None:
        track = Track(
            track="beta",
            releases=[TrackRelease(status=TrackReleaseStatus.IN_PROGRESS, user_fraction=0.1)],
        )

        assert track.to_dict() == {
            "track": "beta",
            "releases": [{"status": "inProgress", "userFraction": 0.1}],
        }

    def test_nested_list_response(self) -> None:
        response = VoidedPurchasesListResponse.model_validate(
            {
                "pageInfo": {"totalResults": 1, "resultPerPage": 1, "startIndex": 0},
                "tokenPagination": {"nextPageToken": "next"},
                "voidedPurchases": [{"orderId": "GPA.1", "voidedReason": 7}],
            }
        )

        assert response.token_pagination is not None
        assert response.token_pagination.next_page_token == "next"
        assert response.voided_purchases is not None
        assert response.voided_purchases[0].voided_reason == VoidedReason.CHARGEBACK

    def test_subscription_purchase(self) -> None:
        subscription = SubscriptionPurchase.model_validate(
            {"autoRenewing": True, "expiryTimeMillis": "1700000000000", "paymentState": 1}
        )

        assert subscription.auto_renewing is True
        assert subscription.expiry_time_millis == "1700000000000"
        assert subscription.payment_state == 1


class TestMultipartRelated:
    """Test suite for multipart/related encoding."""

    def test_layout(self) -> None:
        body, content_type = build_multipart_related(
            b'{"a":1}', b"DATA", "application/octet-stream", boundary="xyz"
        )

        assert content_type == 'multipart/related; boundary="xyz"'
        assert body == (
            b"--xyz\r\n"
            b"Content-Type: application/json\r\n"
            b"Content-Length: 7\r\n\r\n"
            b'{"a":1}\r\n'
            b"--xyz\r\n"
            b"Content-Type: application/octet-stream\r\n"
            b"Content-Length: 4\r\n\r\n"
            b"DATA\r\n"
            b"--xyz--"
        )

    def test_random_boundary(self) -> None:
        _, first = build_multipart_related(b"{}", b"", "text/plain")
        _, second = build_multipart_related(b"{}", b"", "text/plain")

        assert first != second
