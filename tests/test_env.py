import pytest

from ctredit.env import Env, Value, ValueType


def test_set_and_get():
    env = Env()
    env.set("x", Value(ValueType.INT, 3))
    assert env.get("x") == Value(ValueType.INT, 3)
    assert "x" in env
    assert len(env) == 1


def test_missing_is_none():
    env = Env()
    assert env.get("nope") is None
    assert "nope" not in env


def test_replace_keeps_order_and_size():
    env = Env()
    env.set("a", Value(ValueType.INT, 1))
    env.set("b", Value(ValueType.STRING, "s"))
    env.set("a", Value(ValueType.FLOAT, 2.5))
    assert list(env) == ["a", "b"]
    assert len(env) == 2
    assert env.get("a") == Value(ValueType.FLOAT, 2.5)


def test_clear():
    env = Env()
    env.set("a", Value(ValueType.NONE))
    env.clear()
    assert len(env) == 0
    assert env.get("a") is None


def test_float_accepts_int():
    value = Value(ValueType.FLOAT, 2)
    assert value.data == 2.0
    assert isinstance(value.data, float)


def test_none_value():
    assert Value(ValueType.NONE).data is None


@pytest.mark.parametrize(
    "kind, data",
    [
        (ValueType.INT, "1"),
        (ValueType.INT, 1.5),
        (ValueType.INT, True),
        (ValueType.STRING, 3),
        (ValueType.FLOAT, "x"),
        (ValueType.NONE, 0),
    ],
)
def test_mismatched_value(kind, data):
    with pytest.raises(TypeError):
        Value(kind, data)