"""Tests for the quote calculator."""

import pytest

from app.core.exceptions import FormValidationError
from app.models import Package, PackagePaymentMethod, PaymentMethod
from app.services.quote import apply_discount, calculate_quote, validate_discount


@pytest.fixture
def package():
    return Package(id="pkg-1", event_type_id="et-1", name="Essencial", price=3000.0)


@pytest.fixture
def link():
    return PackagePaymentMethod(id="ppm-1", package_id="pkg-1", payment_method_id="pm-1", final_price=2850.0)


@pytest.mark.parametrize("base", [0.0, 1.0, 99.9, 2850.0, 12345.67])
@pytest.mark.parametrize("discount", [0, 0.5, 10, 33.3, 100])
def test_discount_never_exceeds_base(base, discount):
    """final = b * (1 - d/100) and never goes above the base price."""
    final = apply_discount(base, discount)
    assert final == pytest.approx(base * (1 - discount / 100))
    assert final <= base


@pytest.mark.parametrize("discount", [0.01, 5, 50, 100])
def test_positive_discount_strictly_lowers_price(discount):
    assert apply_discount(1000.0, discount) < 1000.0


def test_zero_discount_keeps_price():
    assert apply_discount(1000.0, 0) == 1000.0


@pytest.mark.parametrize("discount", [-0.1, -10, 100.01, 150, float("nan"), float("inf")])
def test_discount_out_of_range_is_rejected(discount):
    with pytest.raises(FormValidationError) as exc:
        validate_discount(discount)
    assert "discount_percentage" in exc.value.errors


def test_quote_uses_link_final_price(package, link):
    """Base price comes from the package/payment-method link, not the package."""
    quote = calculate_quote(package, link, 10)
    assert quote.package_price == 3000.0
    assert quote.base_price == 2850.0
    assert quote.discount_amount == pytest.approx(285.0)
    assert quote.final_price == pytest.approx(2565.0)
    assert quote.adjusted_price == quote.final_price
    assert quote.payment_method_id == "pm-1"


def test_quote_ignores_payment_method_discount(package, link):
    """The generic payment method discount never enters the quote."""
    method = PaymentMethod(id="pm-1", name="PIX", discount_percentage=50)
    priced = link.model_copy(update={"payment_method": method})
    assert calculate_quote(package, priced, 0).final_price == 2850.0


def test_quote_without_link_zeroes_prices(package):
    quote = calculate_quote(package, None, 10)
    assert quote.package_price == 3000.0
    assert quote.final_price == 0
    assert quote.adjusted_price == 0
    assert quote.discount_amount == 0
    assert quote.payment_method_id is None


def test_quote_with_link_of_another_package_zeroes_prices(package):
    other = PackagePaymentMethod(id="ppm-9", package_id="pkg-2", payment_method_id="pm-1", final_price=999.0)
    quote = calculate_quote(package, other, 0)
    assert quote.final_price == 0
    assert quote.payment_method_id is None


def test_quote_without_package():
    quote = calculate_quote(None, None, 0)
    assert quote.package_price == 0
    assert quote.final_price == 0
