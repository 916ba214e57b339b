"""Unit tests for request schema validation"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from splitbill.schemas.bill import AdjustmentUpdate, BillCreate
from splitbill.schemas.item import (MAX_QUANTITY, ItemCreate, ItemUpdate,
                                    SplitUpdate)
from splitbill.schemas.participant import ParticipantCreate
from splitbill.schemas.user import UserCreate


class TestBillCreate:
    def test_blank_title_means_default(self):
        assert BillCreate(title="   ").title is None

    def test_title_is_stripped(self):
        assert BillCreate(title="  Lunch ").title == "Lunch"


class TestAdjustmentUpdate:
    """Test discount/tip/tax input"""

    def test_blank_strings_are_unset(self):
        adjustments = AdjustmentUpdate(tip_percent="", tax_amount="  ")

        assert adjustments.tip_percent is None
        assert adjustments.tax_amount is None

    def test_numbers_become_decimals(self):
        adjustments = AdjustmentUpdate(tip_percent="12.5", discount_amount=3)

        assert adjustments.tip_percent == Decimal("12.5")
        assert adjustments.discount_amount == Decimal("3")

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            AdjustmentUpdate(tip_amount="-1")

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            AdjustmentUpdate(tax_percent="abc")

    def test_discount_percent_above_hundred_rejected(self):
        with pytest.raises(ValidationError):
            AdjustmentUpdate(discount_percent="101")


class TestParticipantCreate:
    def test_names_are_trimmed(self):
        assert ParticipantCreate(names=[" Ann ", "Bo"]).names == ["Ann", "Bo"]

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            ParticipantCreate(names=["Ann", "  "])

    def test_empty_list_rejected(self):
        with pytest.raises(ValidationError):
            ParticipantCreate(names=[])


class TestItemCreate:
    """Test item input"""

    def test_defaults_to_quantity_one(self):
        item = ItemCreate(name="Soup", price="12.50")

        assert item.quantity == 1
        assert item.price == Decimal("12.50")

    def test_price_below_one_rejected(self):
        with pytest.raises(ValidationError):
            ItemCreate(name="Mint", price="0.50")

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError):
            ItemCreate(name="Soup", price="5", quantity=0)

    def test_quantity_upper_bound(self):
        assert ItemCreate(name="Rice", price="1", quantity=MAX_QUANTITY).quantity == MAX_QUANTITY

        with pytest.raises(ValidationError):
            ItemCreate(name="Rice", price="1", quantity=MAX_QUANTITY + 1)
        with pytest.raises(ValidationError):
            ItemCreate(name="Rice", price="9999999999.99", quantity=9 * 10 ** 18)

    def test_too_many_decimals_rejected(self):
        with pytest.raises(ValidationError):
            ItemCreate(name="Soup", price="5.001")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            ItemCreate(name=" ", price="5")


class TestItemUpdate:
    def test_no_changes_rejected(self):
        with pytest.raises(ValidationError, match="No changes"):
            ItemUpdate()

    def test_partial(self):
        update = ItemUpdate(quantity=3)

        assert update.model_dump(exclude_none=True) == {"quantity": 3}

    def test_quantity_upper_bound(self):
        with pytest.raises(ValidationError):
            ItemUpdate(quantity=MAX_QUANTITY + 1)


class TestSplitUpdate:
    def test_string_keys_become_ids(self):
        """Test JSON object keys are parsed as participant ids"""
        split = SplitUpdate.model_validate({"weights": {"1": "2", "7": 1}})

        assert split.weights == {1: Decimal("2"), 7: Decimal("1")}

    def test_negative_weight_rejected(self):
        with pytest.raises(ValidationError):
            SplitUpdate(weights={1: "-1"})

    def test_empty_clears(self):
        assert SplitUpdate().weights == {}


class TestUserCreate:
    def test_email_lowercased(self):
        user = UserCreate(email="Ann@Example.COM", username="ann", password="secret1")

        assert user.email == "ann@example.com"

    def test_short_password_rejected(self):
        with pytest.raises(ValidationError):
            UserCreate(email="ann@example.com", username="ann", password="123")

    def test_bad_username_rejected(self):
        with pytest.raises(ValidationError):
            UserCreate(email="ann@example.com", username="ann smith", password="secret1")
