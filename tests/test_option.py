import copy
import pickle

import pytest

from bart import IllegalStateError, Option


def test_empty_is_singleton():
    a = Option.empty()
    b = Option.ofNullable(None)
    assert a is b
    assert a == b
    assert a.is_absent()
    assert not a.is_present()

def test_empty_survives_copy_and_pickle():
    empty = Option.empty()
    assert copy.copy(empty) is empty
    assert copy.deepcopy(empty) is empty
    assert pickle.loads(pickle.dumps(empty)) is empty

def test_present_accessors():
    opt = Option.of(5)
    assert opt.is_present()
    assert not opt.is_absent()
    assert opt.get() == 5
    assert opt.getOrElse(7) == 5
    assert opt.getOrNone() == 5
    assert opt.getOrCall(lambda: 7) == 5

def test_absent_accessors():
    opt = Option.empty()
    assert opt.getOrElse("b") == "b"
    assert opt.getOrNone() is None
    assert opt.getOrCall(lambda: "c") == "c"
    with pytest.raises(IllegalStateError, match="nonexistent value"):
        opt.get()

def test_get_or_else_returns_default_unchanged():
    default = ["x"]
    assert Option.empty().getOrElse(default) is default
    assert Option.of("a").getOrElse("b") == "a"

def test_present_cannot_hold_none():
    with pytest.raises(ValueError):
        Option.of(None)
    with pytest.raises(ValueError):
        Option(None)

def test_accessors_are_repeatable():
    present = Option.of("v")
    absent = Option.empty()
    for _ in range(3):
        assert present.get() == "v"
        assert present.getOrElse("d") == "v"
        assert present.getOrNone() == "v"
        assert present.is_present()
        assert absent.getOrElse("d") == "d"
        assert absent.getOrNone() is None
        assert absent.is_absent()

def test_map_present():
    assert Option.of(5).map(lambda x: x * 2) == Option.of(10)
    assert Option.of(5).map(lambda x: x * 2).get() == 10

def test_map_to_none_yields_empty():
    assert Option.of(5).map(lambda x: None) is Option.empty()

def test_map_does_not_mutate_receiver():
    opt = Option.of(5)
    mapped = opt.map(lambda x: x + 1)
    assert opt.get() == 5
    assert mapped is not opt

def test_map_absent_never_calls_mapper():
    calls = []
    def mapper(x):
        calls.append(x)
        return x * 2

    result = Option.empty().map(mapper)
    assert result is Option.empty()
    assert calls == []

def test_equality():
    assert Option.of(3) == Option.of(3)
    assert Option.of(3) != Option.of(4)
    assert Option.empty() != Option.of(3)
    assert Option.of(3) != Option.empty()
    assert hash(Option.of("a")) == hash(Option.of("a"))

def test_present_holding_falsy_values():
    for value in (0, '', [], False):
        opt = Option.ofNullable(value)
        assert opt.is_present()
        assert opt.get() == value

def test_if_present_and_if_absent():
    seen = []
    Option.of(1).if_present(seen.append).if_absent(lambda: seen.append('absent'))
    Option.empty().if_present(seen.append).if_absent(lambda: seen.append('absent'))
    assert seen == [1, 'absent']

def test_transform():
    assert Option.of(3).transform([1], lambda target, v: target + [v]) == [1, 3]
    assert Option.empty().transform([1], lambda target, v: target + [v]) == [1]

def test_repr():
    assert repr(Option.of(5)) == 'Option(5)'
    assert repr(Option.of('a')) == "Option('a')"
    assert repr(Option.empty()) == 'Option(Empty)'

def test_illegal_state_error_message():
    with pytest.raises(IllegalStateError) as exc_info:
        Option.empty().get()
    assert exc_info.value.message == "Trying to get a nonexistent value."

def test_second_absent_cannot_be_constructed():
    with pytest.raises(ValueError, match="already exists"):
        Option(None, False)
    with pytest.raises(ValueError):
        Option(3, False)
