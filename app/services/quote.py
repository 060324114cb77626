"""
Controle Fotógrafo - Quote Calculator
Preço final a partir do preço do par (pacote, forma de pagamento) e do desconto
"""
from typing import Optional

from pydantic import BaseModel

from app.core.exceptions import FormValidationError
from app.models import Package, PackagePaymentMethod


class Quote(BaseModel):
    package_price: float = 0
    payment_method_id: Optional[str] = None
    base_price: float = 0
    discount_percentage: float = 0
    discount_amount: float = 0
    final_price: float = 0
    adjusted_price: float = 0


def validate_discount(discount_percentage: float) -> float:
    if discount_percentage is None:
        return 0
    if not 0 <= discount_percentage <= 100:
        raise FormValidationError({"discount_percentage": "Desconto deve estar entre 0 e 100%"})
    return discount_percentage


def apply_discount(base_price: float, discount_percentage: float) -> float:
    """final = base - base * desconto / 100 (sem arredondamento)"""
    discount_percentage = validate_discount(discount_percentage)
    return base_price - base_price * discount_percentage / 100


def calculate_quote(
    package: Optional[Package],
    link: Optional[PackagePaymentMethod],
    discount_percentage: float = 0
) -> Quote:
    """
    Calcula o orçamento.

    O preço base é sempre o final_price do vínculo pacote/forma de
    pagamento; PaymentMethod.discount_percentage não entra no cálculo.
    Sem vínculo válido para o pacote, os preços voltam a zero e a forma
    de pagamento é descartada.
    """
    discount_percentage = validate_discount(discount_percentage)
    package_price = float(package.price) if package else 0

    if package is None or link is None or link.package_id != package.id:
        return Quote(package_price=package_price, discount_percentage=discount_percentage)

    base = float(link.final_price)
    final = apply_discount(base, discount_percentage)
    discount_amount = base - final
    return Quote(
        package_price=package_price,
        payment_method_id=link.payment_method_id,
        base_price=base,
        discount_percentage=discount_percentage,
        discount_amount=discount_amount,
        final_price=final,
        adjusted_price=final,
    )
