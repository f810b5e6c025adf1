"""
Ошибки платёжных драйверов.

Транспортные ошибки httpx здесь не оборачиваются, до вызывающего доходят как есть.
"""
from typing import Any, Dict, Optional


class PaymentError(Exception):
    def __init__(self, message: str, *, provider: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.details = details or {}


class UnknownCurrency(PaymentError, LookupError):
    """Буквенного кода валюты нет в таблице ISO 4217."""

    def __init__(self, code: str, *, provider: Optional[str] = None):
        super().__init__(f"Unknown currency code: {code!r}", provider=provider, details={"currency": code})
        self.code = code


class GatewayRejected(PaymentError):
    """Шлюз ответил, но операцию отклонил."""

    def __init__(self, message: str, *, provider: Optional[str] = None, error_code: Optional[str] = None):
        super().__init__(message, provider=provider, details={"error_code": error_code})
        self.error_code = error_code
