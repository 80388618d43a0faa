import re

_EMAIL_DISALLOWED = re.compile(r"[^A-Za-z0-9!#$%&'*+\-=?^_`{|}~@.\[\]]")
_TAG = re.compile(r'<(?!\s)[^>]*>?')
_CONTROL = re.compile(r'[\x00-\x1f\x7f]')


def sanitize_email(value: str) -> str:
    return _EMAIL_DISALLOWED.sub('', value.strip())


def sanitize_string(value: str) -> str:
    # '<' before whitespace is text; an unclosed tag swallows the rest
    value = _TAG.sub('', value.strip())
    return _CONTROL.sub('', value).strip()
