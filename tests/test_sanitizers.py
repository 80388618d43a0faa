import pytest

from src.sanitizers import sanitize_email, sanitize_string


@pytest.mark.parametrize(
    'raw,expected',
    [
        ('  a@b.com  ', 'a@b.com'),
        ('a b@c.com', 'ab@c.com'),
        ('jöhn@example.com', 'jhn@example.com'),
        ("o'brien+tag@[10.0.0.1]", "o'brien+tag@[10.0.0.1]"),
        ('<script>@x.io', 'script@x.io'),
        ('(),:;"\\', ''),
    ],
)
def test_sanitize_email(raw, expected):
    assert sanitize_email(raw) == expected


@pytest.mark.parametrize(
    'raw,expected',
    [
        ('  Acme  ', 'Acme'),
        ('<b>Acme</b> Goods', 'Acme Goods'),
        ('Acme\x00\x07 Ltd', 'Acme Ltd'),
        ('Acme <unclosed', 'Acme'),
        ('Deals < 5 Dollars Shop', 'Deals < 5 Dollars Shop'),
        ('a <b>bold</b> < c', 'a bold < c'),
        ('<script></script>', ''),
        ("O'Brien & Sons", "O'Brien & Sons"),
        ('Ünïcode Shop', 'Ünïcode Shop'),
    ],
)
def test_sanitize_string(raw, expected):
    assert sanitize_string(raw) == expected
