"""Unit tests for hpworld.models.schema."""

from __future__ import annotations

from hpworld.models.schema import CouponRequest, FormData


class TestFormDataInterests:
    def test_single_string_is_one_element_set(self):
        assert FormData(interests="Printers").interests == ["Printers"]

    def test_missing_or_empty_interest_means_none(self):
        assert FormData().interests == []
        assert FormData(interests=None).interests == []
        assert FormData(interests="").interests == []

    def test_blank_entries_are_dropped(self):
        assert FormData(interests=["", "Printers", "  "]).interests == ["Printers"]

    def test_duplicates_removed_in_first_seen_order(self):
        data = FormData(interests=["Accessories", "Printers", "Accessories"])
        assert data.interests == ["Accessories", "Printers"]


class TestFormDataWire:
    def test_accepts_camel_case_payload(self):
        data = FormData.model_validate({"name": "A", "mobile": "9876543210", "ageGroup": "60+", "pinCode": "123456"})
        assert data.age_group == "60+"
        assert data.pin_code == "123456"

    def test_none_values_become_empty_strings(self):
        data = FormData.model_validate({"name": "A", "mobile": "9876543210", "email": None})
        assert data.email == ""

    def test_to_wire_uses_camel_case(self, valid_form):
        wire = valid_form.to_wire()
        assert wire["ageGroup"] == "18-35"
        assert wire["referredBy"] == ""
        assert "age_group" not in wire


class TestCouponRequest:
    def test_serialises_with_service_field_names(self):
        request = CouponRequest(
            channel_id="WEB",
            request_id="1",
            campaign_id="C100182",
            issuer_mobile_no="9876543210",
            program_id="81",
        )
        assert request.model_dump(by_alias=True) == {
            "channelID": "WEB",
            "requestID": "1",
            "campaignID": "C100182",
            "issuerMobileNo": "9876543210",
            "programID": "81",
        }
