"""Tests for discount code issuance, validation and single use."""

import pytest
from storefront.discount.code import DiscountCode, format_code
from storefront.discount.registry import DiscountCodeRegistry
from storefront.exceptions import StateError, ValidationError
from structlog.testing import capture_logs


@pytest.fixture()
def registry():
    return DiscountCodeRegistry()


class TestGenerate:
    def test_codes_are_sequential_and_zero_padded(self, registry):
        assert registry.generate() == "UNIBLOX-0001"
        assert registry.generate() == "UNIBLOX-0002"
        assert registry.size() == 2

    def test_generated_code_is_fresh(self, registry):
        code = registry.generate()
        record = registry.details_of(code)
        assert record.id == 1
        assert record.discount_percent == 10
        assert record.is_used is False
        assert record.created_at is not None

    def test_format_code_widens_past_four_digits(self):
        assert format_code(12345) == "UNIBLOX-12345"


class TestValidity:
    def test_unknown_code_is_invalid(self, registry):
        assert registry.is_valid("INVALID-CODE") is False
        assert registry.details_of("INVALID-CODE") is None

    def test_non_string_code_is_invalid(self, registry):
        registry.generate()
        assert registry.is_valid(None) is False
        assert registry.is_valid(1) is False

    def test_fresh_code_is_valid(self, registry):
        code = registry.generate()
        assert registry.is_valid(code) is True

    def test_used_code_is_invalid(self, registry):
        code = registry.generate()
        registry.mark_used(code)
        assert registry.is_valid(code) is False
        assert registry.details_of(code).is_used is True


class TestMarkUsed:
    def test_marking_twice_keeps_code_used(self, registry):
        code = registry.generate()
        registry.mark_used(code)
        registry.mark_used(code)
        assert registry.details_of(code).is_used is True
        assert registry.available() == 0

    def test_unknown_code_rejected(self, registry):
        with pytest.raises(ValidationError):
            registry.mark_used("UNIBLOX-9999")

    def test_record_reports_first_use_only(self):
        record = DiscountCode.issue(1)
        assert record.mark_used() is True
        assert record.mark_used() is False


class TestTriggerCheck:
    @pytest.mark.parametrize("count", [0, 1, 2, 4, 5, 7])
    def test_no_code_off_milestone(self, registry, count):
        assert registry.trigger_check(count, 3) is None
        assert registry.size() == 0

    @pytest.mark.parametrize("count", [3, 6, 9])
    def test_code_on_milestone(self, registry, count):
        code = registry.trigger_check(count, 3)
        assert code == "UNIBLOX-0001"
        assert registry.is_valid(code)

    def test_threshold_of_one_fires_on_every_order(self, registry):
        codes = [registry.trigger_check(count, 1) for count in range(1, 4)]
        assert codes == ["UNIBLOX-0001", "UNIBLOX-0002", "UNIBLOX-0003"]

    def test_threshold_below_one_rejected(self, registry):
        with pytest.raises(ValidationError):
            registry.trigger_check(3, 0)


class TestForceGenerate:
    def test_fails_when_condition_not_met(self, registry):
        with pytest.raises(StateError) as exc_info:
            registry.force_generate(0, 3)

        assert exc_info.value.code == "condition_not_met"
        assert exc_info.value.message == "Discount code generation condition not met"
        assert registry.size() == 0

    def test_succeeds_on_milestone(self, registry):
        assert registry.force_generate(3, 3) == "UNIBLOX-0001"

    def test_logged_as_plain_generation(self, registry):
        with capture_logs() as logs:
            registry.force_generate(3, 3)

        assert [entry["event"] for entry in logs] == ["Discount code generated"]

    def test_milestone_issue_is_logged(self, registry):
        with capture_logs() as logs:
            registry.trigger_check(3, 3)

        assert [entry["event"] for entry in logs] == [
            "Discount code generated",
            "Discount code issued for order milestone",
        ]


class TestCounts:
    def test_available_counts_unused_codes(self, registry):
        first = registry.generate()
        registry.generate()
        registry.generate()
        registry.mark_used(first)

        assert registry.size() == 3
        assert len(registry) == 3
        assert registry.available() == 2
        assert [record.code for record in registry.all()] == ["UNIBLOX-0001", "UNIBLOX-0002", "UNIBLOX-0003"]
