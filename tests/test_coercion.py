from decimal import Decimal

from http_builder.coercion import coerce_to_string


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def __str__(self):
        return f"({self.x},{self.y})"


def test_coerce_to_string():
    assert coerce_to_string(None) == ""
    assert coerce_to_string("text") == "text"
    assert coerce_to_string(3) == "3"
    assert coerce_to_string(1.5) == "1.5"
    assert coerce_to_string(Decimal("2.50")) == "2.50"
    assert coerce_to_string(True) == "true"
    assert coerce_to_string(False) == "false"
    assert coerce_to_string(b"raw") == "raw"
    assert coerce_to_string(bytearray(b"raw")) == "raw"


def test_coerce_custom_str():
    assert coerce_to_string(Point(1, 2)) == "(1,2)"
