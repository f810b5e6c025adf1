import hashlib
import json

import httpx
import pytest

from gateway_connect.providers.tinkoff.client import TinkoffMerchantAPI


def _api(handler):
    http = httpx.Client(transport=httpx.MockTransport(handler))
    return TinkoffMerchantAPI("TestTerminal", "test-secret", "https://securepay.tinkoff.ru/v2/", http_client=http)


def test_gen_token_follows_gateway_rules():
    api = TinkoffMerchantAPI("TestTerminal", "test-secret", "https://securepay.tinkoff.ru/v2")
    fields = {
        "TerminalKey": "TestTerminal",
        "Amount": 19200,
        "OrderId": "21090",
        "Description": "Подарочная карта на 1000 рублей",
        "Receipt": {"Email": "a@test.ru", "Items": []},
    }
    # значения по порядку ключей, Password подмешан, вложенные объекты пропущены
    expected = hashlib.sha256(
        "19200Подарочная карта на 1000 рублей21090test-secretTestTerminal".encode("utf-8")
    ).hexdigest()
    assert api.gen_token(fields) == expected
    assert "Password" not in fields


def test_gen_token_renders_booleans_lowercase():
    api = TinkoffMerchantAPI("T", "pw", "https://x")
    expected = hashlib.sha256("pwtrue".encode("utf-8")).hexdigest()
    assert api.gen_token({"Success": True}) == expected


def test_init_success():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={
            "Success": True,
            "ErrorCode": "0",
            "TerminalKey": "TestTerminal",
            "Status": "NEW",
            "PaymentId": 13660,
            "OrderId": "21050",
            "Amount": 100000,
            "PaymentURL": "https://securepay.tinkoff.ru/new/fU1ppgqa",
        })

    api = _api(handler)
    payload = {"OrderId": "21050", "Amount": 100000, "Currency": "643", "Description": "x"}
    resp = api.init(payload)

    assert captured["url"] == "https://securepay.tinkoff.ru/v2/Init"
    body = captured["body"]
    assert body["TerminalKey"] == "TestTerminal"
    assert body["Token"] == api.gen_token({k: v for k, v in body.items() if k != "Token"})
    assert "Token" not in payload

    assert api.error == ""
    assert api.payment_id == "13660"
    assert api.payment_url == "https://securepay.tinkoff.ru/new/fU1ppgqa"
    assert api.status == "NEW"
    assert resp.is_ok


def test_init_error_uses_details():
    def handler(request):
        return httpx.Response(200, json={
            "Success": False,
            "ErrorCode": "204",
            "Message": "Неверный токен.",
            "Details": "Проверьте пару TerminalKey/SecretKey.",
        })

    api = _api(handler)
    api.init({"OrderId": "1", "Amount": 100})
    assert api.error == "Проверьте пару TerminalKey/SecretKey."
    assert api.error_code == "204"
    assert api.payment_id == ""
    assert api.payment_url == ""


def test_init_error_falls_back_to_message_and_code():
    replies = iter([
        {"Success": False, "ErrorCode": "9999", "Message": "Внутренняя ошибка"},
        {"Success": False, "ErrorCode": 8},
    ])

    def handler(request):
        return httpx.Response(200, json=next(replies))

    api = _api(handler)
    api.init({"OrderId": "1"})
    assert api.error == "Внутренняя ошибка"
    api.init({"OrderId": "1"})
    assert api.error == "Error code 8"
    assert api.error_code == "8"


def test_init_resets_previous_outcome():
    replies = iter([
        {"Success": True, "ErrorCode": "0", "PaymentId": "1", "PaymentURL": "https://pay/1"},
        {"Success": False, "ErrorCode": "3", "Details": "nope"},
    ])

    def handler(request):
        return httpx.Response(200, json=next(replies))

    api = _api(handler)
    api.init({"OrderId": "1"})
    assert api.payment_url == "https://pay/1"
    assert api.error_code == ""
    api.init({"OrderId": "2"})
    assert api.error == "nope"
    assert api.error_code == "3"
    assert api.payment_url == ""


def test_init_http_error_propagates():
    def handler(request):
        return httpx.Response(502, text="Bad Gateway")

    api = _api(handler)
    with pytest.raises(httpx.HTTPStatusError):
        api.init({"OrderId": "1"})


def test_init_transport_error_propagates():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    api = _api(handler)
    with pytest.raises(httpx.ConnectError):
        api.init({"OrderId": "1"})
