import pytest
from app.models.submission import SubmissionRequest, REQUIRED_FIELDS

@pytest.mark.unit
class TestSubmissionRequest:
    def test_complete_payload(self, valid_payload):
        submission = SubmissionRequest.from_payload(valid_payload)
        assert submission.has_required_fields()
        assert submission.has_valid_contact()
        assert submission.image is None

    @pytest.mark.parametrize("field", REQUIRED_FIELDS)
    def test_missing_field(self, valid_payload, field):
        del valid_payload[field]
        assert not SubmissionRequest.from_payload(valid_payload).has_required_fields()

    @pytest.mark.parametrize("value", ["", None, False, 0])
    def test_falsy_agreement(self, valid_payload, value):
        valid_payload["agreeTerms"] = value
        assert not SubmissionRequest.from_payload(valid_payload).has_required_fields()

    @pytest.mark.parametrize("payload", [[], [1, 2], "text", 42, None])
    def test_non_object_payload_is_empty(self, payload):
        submission = SubmissionRequest.from_payload(payload)
        assert not submission.has_required_fields()

    def test_unknown_keys_ignored(self, valid_payload):
        valid_payload["honeypot"] = "x"
        submission = SubmissionRequest.from_payload(valid_payload)
        assert not hasattr(submission, "honeypot")

    @pytest.mark.parametrize("contact", [
        "a@b.com",
        "first.last+tag@sub.example.org",
        "用户@例子.中国",
    ])
    def test_valid_contacts(self, valid_payload, contact):
        valid_payload["contactInfo"] = contact
        assert SubmissionRequest.from_payload(valid_payload).has_valid_contact()

    @pytest.mark.parametrize("contact", [
        "plainaddress",
        "a@b",
        "a b@c.com",
        "a@b .com",
        "a@@b.com",
        "@b.com",
        "a@b.com\n",
        "a@b.",
    ])
    def test_invalid_contacts(self, valid_payload, contact):
        valid_payload["contactInfo"] = contact
        assert not SubmissionRequest.from_payload(valid_payload).has_valid_contact()

    def test_non_string_contact(self, valid_payload):
        valid_payload["contactInfo"] = 12345
        assert not SubmissionRequest.from_payload(valid_payload).has_valid_contact()
