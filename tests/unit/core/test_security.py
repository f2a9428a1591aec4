from src.shop.core.security import hash_password, verify_password


def test_hash_is_salted():
    assert hash_password("pw") != hash_password("pw")


def test_verify_round_trip():
    stored = hash_password("correct horse")

    assert verify_password("correct horse", stored)
    assert not verify_password("wrong", stored)


def test_verify_rejects_unsalted_value():
    assert not verify_password("pw", "pw")
