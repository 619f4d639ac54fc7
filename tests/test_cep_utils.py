from utils.cep import only_digits, is_valid_cep, format_cep


def test_only_digits():
    assert only_digits("01310-100") == "01310100"
    assert only_digits(" 70.040-010 ") == "70040010"
    assert only_digits(None) == ""


def test_is_valid_cep_requires_exactly_eight_digits():
    assert is_valid_cep("01310100")
    assert not is_valid_cep("1234567")
    assert not is_valid_cep("123456789")
    assert not is_valid_cep("01310-100")
    assert not is_valid_cep("0131010a")
    assert not is_valid_cep("")


def test_format_cep():
    assert format_cep("01310100") == "01310-100"
    assert format_cep("123") == "123"
    assert format_cep("") == ""
