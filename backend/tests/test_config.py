import pytest

from config import parse_addr, parse_origins


@pytest.mark.parametrize('addr,expected', [
    (':8080', ('0.0.0.0', 8080)),
    ('127.0.0.1:5000', ('127.0.0.1', 5000)),
    ('localhost:1', ('localhost', 1)),
])
def test_parse_addr(addr, expected):
    assert parse_addr(addr) == expected


@pytest.mark.parametrize('addr', ['', '8080', 'host:', 'host:http', ':0', ':70000'])
def test_parse_addr_rejects(addr):
    with pytest.raises(ValueError):
        parse_addr(addr)


def test_parse_origins():
    assert parse_origins('*') == '*'
    assert parse_origins('') == '*'
    assert parse_origins('http://a, http://b') == ['http://a', 'http://b']
