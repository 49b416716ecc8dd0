from cmarklib.results import Err, Ok, ResultGroup


def test_push_and_len():
    group = ResultGroup()
    group.push(Ok(1))
    group.push(Err("bad"))
    assert len(group) == 2


def test_pop_order():
    group = ResultGroup([Ok(1), Err("bad")])
    assert group.pop() == Err("bad")
    assert group.pop() == Ok(1)
    assert group.pop() is None


def test_str_concatenates():
    a, b = Ok(1), Err("bad")
    assert str(ResultGroup([a, b])) == str(a) + str(b)


def test_ok_and_err_values():
    assert Ok(3).value == 3
    assert Err("x").error == "x"
    assert Ok(3) == Ok(3)
    assert Ok(3) != Err(3)


def test_group_copies_input():
    items = [Ok(1)]
    group = ResultGroup(items)
    items.append(Ok(2))
    assert len(group) == 1