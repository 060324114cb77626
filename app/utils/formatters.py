"""
Controle Fotógrafo - Formatters
Formatação de CPF, WhatsApp, moeda e datas no padrão brasileiro
"""
import re
from datetime import date, datetime
from typing import Iterable, Optional, Union


def only_digits(value: Optional[str]) -> str:
    """Remove tudo que não for dígito"""
    return re.sub(r"\D", "", value or "")


def format_cpf(value: Optional[str]) -> str:
    """Máscara de CPF (###.###.###-##), aplicada também a entradas parciais"""
    digits = only_digits(value)[:11]
    if len(digits) <= 3:
        return digits
    if len(digits) <= 6:
        return f"{digits[:3]}.{digits[3:]}"
    if len(digits) <= 9:
        return f"{digits[:3]}.{digits[3:6]}.{digits[6:]}"
    return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"


def format_whatsapp(value: Optional[str]) -> str:
    """Máscara de celular com DDD: (##) #####-####"""
    digits = only_digits(value)[:11]
    if not digits:
        return ""
    if len(digits) <= 2:
        return digits
    if len(digits) <= 7:
        return f"({digits[:2]}) {digits[2:]}"
    return f"({digits[:2]}) {digits[2:7]}-{digits[7:]}"


def format_currency(value) -> str:
    """Formata valor para moeda brasileira"""
    if value is None:
        return "R$ 0,00"
    return f"R$ {float(value):,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")


def parse_date(value: Union[str, date, datetime, None]) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip().replace("Z", "+00:00")
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def format_date(value: Union[str, date, datetime, None]) -> str:
    """Data no formato dd/mm/aaaa (vazio se não informada)"""
    parsed = parse_date(value)
    if parsed is None:
        # Texto fora do padrão ISO é mantido como veio
        return "" if value is None else str(value)
    return parsed.strftime("%d/%m/%Y")


def bullet_list(items: Iterable[str]) -> str:
    return "\n".join(f"• {item}" for item in items)
