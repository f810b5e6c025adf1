from gateway_connect.utils.http import client


def test_default_timeout_from_settings():
    with client() as c:
        assert c.timeout.read == 15


def test_explicit_zero_timeout_is_kept():
    with client(0) as c:
        assert c.timeout.read == 0
