"""Настройка pytest.

Окружение выставляется до первого импорта gateway_connect.settings.
"""
import os

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("TINKOFF_MERCHANT_ID", "TestTerminal")
os.environ.setdefault("TINKOFF_SECRET_KEY", "test-secret")

import pytest


class FakeMerchantAPI:
    """Замена TinkoffMerchantAPI: запоминает payload-ы init, подписывает предсказуемо."""

    def __init__(self, error="", payment_id="13660", payment_url="https://securepay.tinkoff.ru/new/abc", error_code=""):
        self._error = error
        self._error_code = error_code
        self._payment_id = payment_id
        self._payment_url = payment_url
        self.error = ""
        self.error_code = ""
        self.payment_id = ""
        self.payment_url = ""
        self.calls = []

    def init(self, payload):
        self.calls.append(dict(payload))
        self.error = self._error
        self.error_code = self._error_code
        if not self._error:
            self.payment_id = self._payment_id
            self.payment_url = self._payment_url

    def gen_token(self, fields):
        return "|".join(f"{k}={fields[k]}" for k in sorted(fields))


@pytest.fixture
def fake_client():
    return FakeMerchantAPI()


@pytest.fixture
def config():
    return {
        "merchant_id": "TestTerminal",
        "secret_key": "test-secret",
        "api_url": "https://securepay.tinkoff.ru/v2",
    }
