import re

CEP_RE = re.compile(r'\d{8}', re.ASCII)


def only_digits(value: str) -> str:
    return ''.join(ch for ch in (value or '') if ch in '0123456789')


def is_valid_cep(value: str) -> bool:
    """True when value is exactly 8 ASCII digits (no dash, no spaces)."""
    return CEP_RE.fullmatch(value or '') is not None


def format_cep(value: str) -> str:
    # 01310100 -> 01310-100; anything else is returned untouched
    if not is_valid_cep(value):
        return value or ''
    return f"{value[:5]}-{value[5:]}"
