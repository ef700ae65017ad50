import pytest

from minobjects.dict_join import DictJoin


def test_object_has_two_inlets():
    obj = DictJoin()
    obj.dictionary({"a": 1}, 1)
    with pytest.raises(ValueError):
        obj.dictionary({"a": 1}, 2)
    assert len(DictJoin.INLETS) == 2


def test_left_inlet_joins_and_sends():
    output = []
    obj = DictJoin(on_output=output.append)
    obj.dictionary({"b": 2, "c": 3}, 1)
    obj.dictionary({"a": 1, "b": 20}, 0)
    assert output == [{"b": 2, "c": 3, "a": 1}]


def test_initial_dictionary_used_as_right():
    output = []
    obj = DictJoin({"x": "y"}, output.append)
    obj.dictionary({"z": 0})
    assert output == [{"x": "y", "z": 0}]


def test_bang_resends_last_result():
    output = []
    obj = DictJoin(on_output=output.append)
    assert obj.bang() == {}
    obj.dictionary({"k": [1, 2]}, 0)
    again = obj.bang()
    assert again == {"k": [1, 2]}
    assert output[-1] == output[-2]


def test_right_inlet_sends_nothing():
    output = []
    obj = DictJoin(on_output=output.append)
    obj.dictionary({"k": 1}, 1)
    assert output == []
    assert obj.right == {"k": 1}


def test_non_mapping_rejected():
    obj = DictJoin()
    with pytest.raises(TypeError):
        obj.dictionary(["not", "a", "dict"], 0)


def test_result_is_independent_copy():
    output = []
    obj = DictJoin({"list": [1]}, output.append)
    obj.dictionary({}, 0)
    output[0]["list"].append(2)
    assert obj.bang() == {"list": [1]}