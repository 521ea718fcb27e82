from dataclasses import dataclass, field
from typing import List, Optional

import pytest

from imtools import datautil


@dataclass(frozen=True)
class A:
    id: str
    num: int


ARR1 = [A("1", 1), A("2", 2), A("3", 3), A("4", 4), A("5", 5)]
ARR2 = [A("2", 2), A("4", 3), A("5", 3)]


def test_slice_sub_func():
    assert datautil.slice_sub_func(ARR1, ARR2, lambda a: a.id) == [A("1", 1), A("3", 3)]


def test_slice_sub():
    assert datautil.slice_sub(ARR1, ARR2) == [A("1", 1), A("3", 3), A("4", 4), A("5", 5)]


def test_slice_sub_removes_duplicates_and_keeps_a_when_b_empty():
    assert datautil.slice_sub([1, 1, 2, 3], [3]) == [1, 2]
    assert datautil.slice_sub([1, 1, 2], []) == [1, 1, 2]


def test_slice_sub_any_and_convert_pre():
    assert datautil.slice_sub_any([1, 2, 3], ["2"], int) == [1, 3]
    assert datautil.slice_sub_convert_pre(["1", "2", "3"], [2], int) == ["1", "3"]


def test_slice_any_sub_keeps_duplicates():
    assert datautil.slice_any_sub([1, 1, 2, 3], [3], lambda x: x) == [1, 1, 2]


def test_distinct():
    assert datautil.distinct([1, 1, 1, 4, 4, 5, 2, 3, 3, 3, 6]) == [1, 4, 5, 2, 3, 6]


def test_distinct_any_and_comparable():
    items = [A("1", 1), A("1", 2), A("2", 3)]
    assert datautil.distinct_any(items, lambda a: a.id) == [A("1", 1), A("2", 3)]
    assert datautil.distinct_any_get_comparable(items, lambda a: a.id) == ["1", "2"]


def test_delete():
    arr = list(range(10))
    assert datautil.delete(arr, 0, 1, -1, -2) == [2, 3, 4, 5, 6, 7]
    assert datautil.delete(arr) == arr
    assert datautil.delete(arr, 1) == [0, 2, 3, 4, 5, 6, 7, 8, 9]
    assert datautil.delete(arr, -1) == list(range(9))
    assert datautil.delete(arr, 10) == arr


def test_delete_far_negative_index_raises():
    with pytest.raises(IndexError):
        datautil.delete([1, 2], -5)


def test_index_of():
    assert datautil.index_of(3, *range(10)) == 3
    assert datautil.index_of(42, 1, 2) == -1


def test_delete_elems():
    assert datautil.delete_elems([1, 2, 1, 3], 1) == [2, 1, 3]
    assert datautil.delete_elems([1, 2, 1, 3, 2], 1, 1, 2) == [3, 2]
    assert datautil.delete_elems([1, 2]) == [1, 2]


def test_contain_and_contains():
    assert datautil.contain(2, 1, 2, 3) is True
    assert datautil.contain(4, 1, 2, 3) is False
    assert datautil.contains([1, 2, 3], 9, 3) is True
    assert datautil.contains([1, 2, 3], 9) is False


def test_duplicate():
    assert datautil.duplicate([1, 2, 1]) is True
    assert datautil.duplicate([1, 2, 3]) is False
    assert datautil.duplicate_any(ARR2, lambda a: a.num) is True


def test_slice_to_map():
    @dataclass
    class Item:
        id: str
        name: str

    items = [Item("111", "111"), Item("222", "222"), Item("333", "333")]
    result = datautil.slice_to_map(items, lambda item: item.id)
    assert result == {"111": items[0], "222": items[1], "333": items[2]}


def test_slice_to_map_variants():
    assert datautil.slice_to_map_any([1, 2], lambda x: (x, x * 10)) == {1: 10, 2: 20}
    assert datautil.slice_to_map_ok_any([1, 2, 3], lambda x: (x, str(x), x != 2)) == {1: "1", 3: "3"}
    assert datautil.slice_set_any(ARR1, lambda a: a.num % 2) == {0, 1}
    assert datautil.slice_set([1, 1, 2]) == {1, 2}


def test_filter_map_and_convert():
    assert datautil.filter_map([1, 2, 3, 4], lambda x: (x * 2, x % 2 == 0)) == [4, 8]
    assert datautil.convert([1, 2], str) == ["1", "2"]


def test_has_key():
    assert datautil.has_key(None, "a") is False
    assert datautil.has_key({"a": 1}, "a") is True
    assert datautil.has_key({"a": 1}, "b") is False


def test_min_max():
    assert datautil.min_of(3, 1, 2) == 1
    assert datautil.max_of(3, 1, 2) == 3
    with pytest.raises(ValueError):
        datautil.min_of()
    with pytest.raises(ValueError):
        datautil.max_of()


def test_between_variants():
    assert datautil.between(2, 1, 3) is True
    assert datautil.between(1, 1, 3) is False
    assert datautil.between_eq(3, 1, 3) is True
    assert datautil.between_leq(1, 1, 3) is True
    assert datautil.between_leq(3, 1, 3) is False
    assert datautil.between_req(3, 1, 3) is True
    assert datautil.between_req(1, 1, 3) is False


def test_paginate():
    items = list(range(10))
    assert datautil.paginate(items, 1, 3) == [0, 1, 2]
    assert datautil.paginate(items, 4, 3) == [9]
    assert datautil.paginate(items, 5, 3) == []
    assert datautil.paginate(items, 0, 3) == []
    assert datautil.paginate(items, 1, 0) == []


def test_both_exist():
    arr1 = [1, 1, 1, 4, 4, 5, 2, 3, 3, 3, 6]
    arr2 = [6, 1, 3]
    arr3 = [5, 1, 3, 6]
    assert sorted(datautil.both_exist(arr1, arr2, arr3)) == [1, 3, 6]
    assert datautil.both_exist() == []
    assert datautil.both_exist([1, 2], []) == []


def test_complete():
    ids = list(range(1, 9))
    items = [{"id": i, "value": str(i * 1000)} for i in ids]
    items = datautil.delete(items, -1)
    ids = datautil.delete(ids, -1)
    assert datautil.complete(ids, datautil.convert(items, lambda item: item["id"])) is True
    assert datautil.complete([1, 2], [1, 3]) is False


def test_sort_values():
    arr = [1, 1, 1, 4, 4, 5, 2, 3, 3, 3, 6]
    assert datautil.sort_values(arr, False) == [6, 5, 4, 4, 3, 3, 3, 2, 1, 1, 1]
    assert arr == [6, 5, 4, 4, 3, 3, 3, 2, 1, 1, 1]
    assert datautil.sort_values([3, 1, 2], True) == [1, 2, 3]


def test_sort_any():
    items = [A("b", 2), A("a", 1), A("c", 3)]
    datautil.sort_any(items, lambda x, y: x.num > y.num)
    assert [a.id for a in items] == ["c", "b", "a"]


def test_choose_and_equal():
    assert datautil.choose(True, "a", "b") == "a"
    assert datautil.choose(False, "a", "b") == "b"
    assert datautil.equal([1, 2], [1, 2]) is True
    assert datautil.equal([1, 2], [2, 1]) is False
    assert datautil.equal([1], [1, 1]) is False


def test_single():
    assert sorted(datautil.single([1, 2, 2, 3], [3, 4])) == [1, 2, 4]


def test_keys_values():
    mapping = {"a": 1, "b": 2}
    assert sorted(datautil.keys(mapping)) == ["a", "b"]
    assert sorted(datautil.values(mapping)) == [1, 2]


def test_order():
    items = [A("x", 1), A("y", 2), A("z", 3), A("y", 4)]
    result = datautil.order(["y", "x"], items, lambda a: a.id)
    assert result == [A("y", 2), A("y", 4), A("x", 1), A("z", 3)]
    assert datautil.order([], items, lambda a: a.id) == items


def test_unique_join():
    assert datautil.unique_join("a", "b") == '["a","b"]'
    assert datautil.unique_join("a,b") != datautil.unique_join("a", "b")


@dataclass
class Req:
    group_id: str = ""
    group_name: str = ""
    notification: str = ""
    introduction: str = ""
    count: int = 0
    owner_user_id: str = ""


@pytest.mark.parametrize(
    "req, resp, want",
    [
        (
            Req("groupID", "groupName", "notification", "introduction", 123, "ownerUserID"),
            Req("ID", "Name", "notification", "introduction", 456, "ownerUserID"),
            Req("groupID", "groupName", "notification", "introduction", 123, "ownerUserID"),
        ),
        (
            Req("groupID", "groupName", "", "", 123, "ownerUserID"),
            Req("ID", "Name", "notification", "introduction", 456, "ownerUserID"),
            Req("groupID", "groupName", "notification", "introduction", 123, "ownerUserID"),
        ),
    ],
)
def test_struct_field_not_nil_replace(req, resp, want):
    datautil.struct_field_not_nil_replace(resp, req)
    assert resp == want


@dataclass
class Req11:
    group_id: Optional[str] = None
    group_name: Optional[str] = None
    count: Optional[int] = None


@dataclass
class Req1:
    re: List[Req] = field(default_factory=list)
    re1: Optional[Req] = None
    re2: Req11 = field(default_factory=Req11)


def test_struct_field_not_nil_replace_nested():
    r = Req("groupID1", "groupName2", "1", "1", 123, "ownerUserID1")
    req = Req1(
        re=[
            Req("groupID1", "groupName2", "1", "1", 123, "ownerUserID1"),
            Req("groupID2", "groupName2", "2", "2", 456, "ownerUserID2"),
        ],
        re1=r,
        re2=Req11(r.group_id, r.group_name, r.count),
    )
    resp = Req1()
    datautil.struct_field_not_nil_replace(resp, req)
    assert resp == Req1(
        re=[
            Req("groupID1", "groupName2", "1", "1", 123, "ownerUserID1"),
            Req("groupID2", "groupName2", "2", "2", 456, "ownerUserID2"),
        ],
        re1=r,
        re2=Req11("groupID1", "groupName2", 123),
    )


def test_struct_field_not_nil_replace_list_keeps_dest_values():
    dest = Req1(re=[Req("keep", "name", "n", "i", 1, "o")])
    src = Req1(re=[Req("", "new", "", "", 0, "")])
    datautil.struct_field_not_nil_replace(dest, src)
    assert dest.re == [Req("keep", "new", "n", "i", 1, "o")]


def test_batch():
    assert datautil.batch(str, None) is None
    assert datautil.batch(str, [1, 2]) == ["1", "2"]


def test_switch_options():
    assert datautil.get_switch_from_options(None, "a") is True
    assert datautil.get_switch_from_options({}, "a") is True
    assert datautil.get_switch_from_options({"a": False}, "a") is False
    options = {}
    datautil.set_switch_from_options(options, "a", False)
    assert options == {"a": False}


def test_copy_struct_fields():
    @dataclass
    class Target:
        group_id: str = ""
        count: int = 0

    target = Target()
    datautil.copy_struct_fields(target, Req(group_id="g", count=5, group_name="n"))
    assert target == Target("g", 5)

    mapping = {}
    datautil.copy_struct_fields(mapping, {"x": 1})
    assert mapping == {"x": 1}


def test_copy_and_shuffle_slice():
    original = list(range(20))
    copied = datautil.copy_slice(original)
    assert copied == original and copied is not original
    shuffled = datautil.shuffle_slice(original)
    assert sorted(shuffled) == original
    assert original == list(range(20))


def test_get_elem_by_index():
    assert datautil.get_elem_by_index([10, 20, 30], 1) == 20
    with pytest.raises(IndexError):
        datautil.get_elem_by_index([10, 20, 30], 3)
    with pytest.raises(IndexError):
        datautil.get_elem_by_index([10, 20, 30], -1)