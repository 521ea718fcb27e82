"""Helpers for lists, sets and mappings: differences, de-duplication, paging and merging."""

from __future__ import annotations

import copy
import dataclasses
import functools
import random
from collections import Counter
from collections.abc import Callable, Hashable, Iterable, Mapping, MutableMapping, Sequence
from typing import Any, TypeVar

from imtools.jsonutil import json_marshal

__all__ = [
    "slice_sub_funcs",
    "slice_sub_func",
    "slice_sub",
    "slice_sub_any",
    "slice_sub_convert_pre",
    "slice_any_sub",
    "distinct_any",
    "distinct_any_get_comparable",
    "distinct",
    "delete",
    "index_any",
    "index_of",
    "delete_elems",
    "contain",
    "contains",
    "duplicate_any",
    "duplicate",
    "slice_to_map_ok_any",
    "slice_to_map_any",
    "slice_to_map",
    "slice_set_any",
    "slice_set",
    "filter_map",
    "convert",
    "has_key",
    "min_of",
    "max_of",
    "between",
    "between_eq",
    "between_leq",
    "between_req",
    "paginate",
    "both_exist_any",
    "both_exist",
    "complete",
    "keys",
    "values",
    "sort_values",
    "sort_any",
    "choose",
    "equal",
    "single",
    "order",
    "unique_join",
    "struct_field_not_nil_replace",
    "batch",
    "get_switch_from_options",
    "set_switch_from_options",
    "copy_struct_fields",
    "copy_slice",
    "shuffle_slice",
    "get_elem_by_index",
]

T = TypeVar("T")
V = TypeVar("V")
K = TypeVar("K", bound=Hashable)
E = TypeVar("E", bound=Hashable)

_MISSING = object()


def slice_sub_funcs(
    a: Sequence[T], b: Sequence[V], fna: Callable[[T], K], fnb: Callable[[V], K]
) -> list[T]:
    """Items of a whose key is not a key of b, without repeated keys.

    When b is empty, a is returned unchanged (duplicates included).
    """
    if not b:
        return list(a)
    excluded = {fnb(item) for item in b}
    seen: set[K] = set()
    result = []
    for item in a:
        key = fna(item)
        if key in seen or key in excluded:
            continue
        result.append(item)
        seen.add(key)
    return result


def slice_sub_func(a: Sequence[T], b: Sequence[T], fn: Callable[[T], K]) -> list[T]:
    """a minus b, comparing items by fn, without repeated keys."""
    return slice_sub_funcs(a, b, fn, fn)


def slice_sub(a: Sequence[E], b: Sequence[E]) -> list[E]:
    """a minus b, without duplicates."""
    return slice_sub_func(a, b, lambda item: item)


def slice_sub_any(a: Sequence[E], b: Sequence[T], fn: Callable[[T], E]) -> list[E]:
    """a minus the items of b converted by fn."""
    return slice_sub(a, convert(b, fn))


def slice_sub_convert_pre(a: Sequence[T], b: Sequence[E], fn: Callable[[T], E]) -> list[T]:
    """Items of a whose converted value is not in b, without repeated values."""
    return slice_sub_funcs(a, b, fn, lambda item: item)


def slice_any_sub(a: Iterable[T], b: Iterable[T], fn: Callable[[T], K]) -> list[T]:
    """Items of a whose key is not a key of b; duplicates are kept."""
    excluded = {fn(item) for item in b}
    return [item for item in a if fn(item) not in excluded]


def distinct_any(items: Iterable[T], fn: Callable[[T], K]) -> list[T]:
    """First item for each key, in order."""
    seen: set[K] = set()
    result = []
    for item in items:
        key = fn(item)
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result


def distinct_any_get_comparable(items: Iterable[T], fn: Callable[[T], K]) -> list[K]:
    """Distinct keys of the items, in order of first appearance."""
    return list(dict.fromkeys(fn(item) for item in items))


def distinct(items: Iterable[E]) -> list[E]:
    """Items without duplicates, in order of first appearance."""
    return list(dict.fromkeys(items))


def delete(items: Sequence[T], *args: int) -> list[T]:
    """Copy of items without the given indexes; negative indexes count from the end."""
    size = len(items)
    if not args:
        return list(items)
    if len(args) == 1:
        index = args[0]
        if index < 0:
            index += size
        if index >= size:
            return list(items)
        if index < 0:
            raise IndexError(f"index {args[0]} out of range for length {size}")
        return list(items[:index]) + list(items[index + 1 :])
    removed = {index + size if index < 0 else index for index in args}
    return [item for position, item in enumerate(items) if position not in removed]


def index_any(element: T, items: Iterable[T], fn: Callable[[T], K]) -> int:
    """Position of the first item with the same key as element, or -1."""
    key = fn(element)
    return next((position for position, item in enumerate(items) if fn(item) == key), -1)


def index_of(element: E, *args: E) -> int:
    """Position of element among args, or -1."""
    return next((position for position, item in enumerate(args) if item == element), -1)


def delete_elems(items: Iterable[E], *args: E) -> list[E]:
    """Copy of items with one occurrence removed for each value given."""
    pending = Counter(args)
    result = []
    for item in items:
        if pending[item] > 0:
            pending[item] -= 1
            continue
        result.append(item)
    return result


def contain(element: E, *args: E) -> bool:
    """Whether element is one of args."""
    return index_of(element, *args) >= 0


def contains(items: Iterable[E], *args: E) -> bool:
    """Whether any of args is in items."""
    present = set(items)
    return any(arg in present for arg in args)


def duplicate_any(items: Iterable[T], fn: Callable[[T], K]) -> bool:
    """Whether two items share a key."""
    seen: set[K] = set()
    for item in items:
        key = fn(item)
        if key in seen:
            return True
        seen.add(key)
    return False


def duplicate(items: Iterable[E]) -> bool:
    """Whether any item appears twice."""
    return duplicate_any(items, lambda item: item)


def slice_to_map_ok_any(
    items: Iterable[T], fn: Callable[[T], tuple[K, V, bool]]
) -> dict[K, V]:
    """Map built from (key, value, keep) triples; later keys win."""
    result: dict[K, V] = {}
    for item in items:
        key, value, keep = fn(item)
        if keep:
            result[key] = value
    return result


def slice_to_map_any(items: Iterable[T], fn: Callable[[T], tuple[K, V]]) -> dict[K, V]:
    """Map built from (key, value) pairs; later keys win."""
    return dict(fn(item) for item in items)


def slice_to_map(items: Iterable[T], fn: Callable[[T], K]) -> dict[K, T]:
    """Map from each item's key to the item; later items win."""
    return {fn(item): item for item in items}


def slice_set_any(items: Iterable[T], fn: Callable[[T], K]) -> set[K]:
    """Set of the items' keys."""
    return {fn(item) for item in items}


def slice_set(items: Iterable[E]) -> set[E]:
    """Set of the items."""
    return set(items)


def filter_map(items: Iterable[T], fn: Callable[[T], tuple[V, bool]]) -> list[V]:
    """Converted values of the items fn chooses to keep."""
    result = []
    for item in items:
        value, keep = fn(item)
        if keep:
            result.append(value)
    return result


def convert(items: Iterable[T], fn: Callable[[T], V]) -> list[V]:
    """Each item converted by fn."""
    return [fn(item) for item in items]


def has_key(mapping: Mapping[K, Any] | None, key: K) -> bool:
    """Whether the mapping exists and holds key."""
    return mapping is not None and key in mapping


def min_of(*args: Any) -> Any:
    """Smallest of the arguments; at least one is required."""
    if not args:
        raise ValueError("min_of requires at least one value")
    return min(args)


def max_of(*args: Any) -> Any:
    """Largest of the arguments; at least one is required."""
    if not args:
        raise ValueError("max_of requires at least one value")
    return max(args)


def between(data: Any, left: Any, right: Any) -> bool:
    """left < data < right."""
    return left < data < right


def between_eq(data: Any, left: Any, right: Any) -> bool:
    """left <= data <= right."""
    return left <= data <= right


def between_leq(data: Any, left: Any, right: Any) -> bool:
    """left <= data < right."""
    return left <= data < right


def between_req(data: Any, left: Any, right: Any) -> bool:
    """left < data <= right."""
    return left < data <= right


def paginate(items: Sequence[T], page_number: int, show_number: int) -> list[T]:
    """Items of a 1-based page; empty for invalid or out-of-range pages."""
    if page_number <= 0 or show_number <= 0:
        return []
    start = (page_number - 1) * show_number
    if start >= len(items):
        return []
    return list(items[start : start + show_number])


def both_exist_any(groups: Sequence[Sequence[T]], fn: Callable[[T], K]) -> list[T]:
    """Items whose key is present in every group (intersection).

    Results follow the order of the group with the fewest distinct keys.
    """
    if not groups:
        return []
    indexed: list[dict[K, T]] = []
    smallest = 0
    for position, group in enumerate(groups):
        if not group:
            return []
        by_key: dict[K, T] = {}
        for item in group:
            by_key[fn(item)] = item
        indexed.append(by_key)
        if len(by_key) < len(indexed[smallest]):
            smallest = position
    others = [by_key for position, by_key in enumerate(indexed) if position != smallest]
    return [
        item
        for key, item in indexed[smallest].items()
        if all(key in by_key for by_key in others)
    ]


def both_exist(*args: Sequence[E]) -> list[E]:
    """Values present in every sequence."""
    return both_exist_any(args, lambda item: item)


def complete(a: Iterable[E], b: Iterable[E]) -> bool:
    """Whether a and b hold the same values, ignoring order and duplicates."""
    return not single(a, b)


def keys(mapping: Mapping[K, Any]) -> list[K]:
    """Keys of the mapping."""
    return list(mapping)


def values(mapping: Mapping[Any, V]) -> list[V]:
    """Values of the mapping."""
    return list(mapping.values())


def sort_values(items: list[T], asc: bool) -> list[T]:
    """Sort items in place, ascending or descending, and return them."""
    items.sort(reverse=not asc)
    return items


def sort_any(items: list[T], less: Callable[[T, T], bool]) -> None:
    """Sort items in place using a less-than function."""

    def compare(left: T, right: T) -> int:
        if less(left, right):
            return -1
        if less(right, left):
            return 1
        return 0

    items.sort(key=functools.cmp_to_key(compare))


def choose(condition: bool, a: T, b: T) -> T:
    """a when condition holds, otherwise b."""
    return a if condition else b


def equal(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Whether both sequences hold equal items in the same order."""
    return len(a) == len(b) and all(x == y for x, y in zip(a, b))


def single(a: Iterable[E], b: Iterable[E]) -> list[E]:
    """Values found in exactly one of a and b (symmetric difference)."""
    counts: dict[E, int] = {}
    for value in distinct(a):
        counts[value] = counts.get(value, 0) + 1
    for value in distinct(b):
        counts[value] = counts.get(value, 0) + 1
    return [value for value, count in counts.items() if count == 1]


def order(keys_order: Sequence[K], items: Sequence[T], fn: Callable[[T], K]) -> list[T]:
    """Items arranged by the order of their keys in keys_order.

    Items whose keys are not listed follow, grouped by key.
    """
    if not keys_order or not items:
        return list(items)
    grouped: dict[K, list[T]] = {}
    for item in items:
        grouped.setdefault(fn(item), []).append(item)
    result: list[T] = []
    for key in keys_order:
        result.extend(grouped.pop(key, []))
    for rest in grouped.values():
        result.extend(rest)
    return result


def unique_join(*args: str) -> str:
    """Join strings unambiguously as a JSON array."""
    return json_marshal(list(args)).decode("utf-8")


def _field_names(obj: Any) -> list[str] | None:
    if isinstance(obj, type):
        return None
    if dataclasses.is_dataclass(obj):
        return [field.name for field in dataclasses.fields(obj)]
    if hasattr(obj, "__dict__"):
        return list(vars(obj))
    return None


def _is_zero(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (bool, int, float, complex)):
        return value == 0
    if isinstance(value, (str, bytes, bytearray, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    names = _field_names(value)
    if names is not None:
        return all(_is_zero(getattr(value, name)) for name in names)
    return False


def _merge_struct_list(dest_items: Sequence[Any], src_items: Sequence[Any]) -> list[Any]:
    merged_items = []
    for position, item in enumerate(src_items):
        merged = copy.copy(item)
        previous = dest_items[position] if position < len(dest_items) else None
        if previous is not None:
            for name in _field_names(merged) or []:
                if _is_zero(getattr(merged, name)) and hasattr(previous, name):
                    setattr(merged, name, getattr(previous, name))
        merged_items.append(merged)
    return merged_items


def struct_field_not_nil_replace(dest: Any, src: Any) -> None:
    """Copy the non-empty fields of src onto dest.

    List fields are taken from src; lists of objects are copied item by item,
    keeping dest's values where the src item's field is empty.
    """
    names = _field_names(dest)
    if names is None:
        raise TypeError(f"cannot replace fields of {type(dest).__name__}")
    for name in names:
        src_value = getattr(src, name, _MISSING)
        if src_value is _MISSING:
            continue
        dest_value = getattr(dest, name)
        if isinstance(src_value, list) and (dest_value is None or isinstance(dest_value, list)):
            if src_value and all(_field_names(item) is not None for item in src_value):
                setattr(dest, name, _merge_struct_list(dest_value or [], src_value))
            else:
                setattr(dest, name, src_value)
        elif not _is_zero(src_value):
            setattr(dest, name, src_value)


def batch(fn: Callable[[T], V], items: Iterable[T] | None) -> list[V] | None:
    """Each item converted by fn; None stays None."""
    if items is None:
        return None
    return [fn(item) for item in items]


def get_switch_from_options(options: Mapping[str, bool] | None, key: str) -> bool:
    """A switch is on unless the options explicitly turn it off."""
    if options is None:
        return True
    return options.get(key, True)


def set_switch_from_options(options: MutableMapping[str, bool] | None, key: str, value: bool) -> None:
    """Set a switch in the options; nothing is kept when there are no options."""
    if options is not None:
        options[key] = value


def copy_struct_fields(dest: Any, src: Any) -> None:
    """Copy the fields or entries of src onto the same-named fields of dest."""
    if isinstance(src, Mapping):
        source = dict(src)
    else:
        names = _field_names(src)
        if names is None:
            raise TypeError(f"cannot copy from {type(src).__name__}")
        source = {name: getattr(src, name) for name in names}
    if isinstance(dest, MutableMapping):
        dest.update(source)
        return
    targets = _field_names(dest)
    if targets is None:
        raise TypeError(f"cannot copy into {type(dest).__name__}")
    for name in targets:
        if name in source:
            setattr(dest, name, source[name])


def copy_slice(items: Iterable[T]) -> list[T]:
    """Shallow copy of the items as a new list."""
    return list(items)


def shuffle_slice(items: Iterable[T]) -> list[T]:
    """Shuffled copy of the items; the input is left as it was."""
    shuffled = copy_slice(items)
    random.shuffle(shuffled)
    return shuffled


def get_elem_by_index(array: Sequence[int], index: int) -> int:
    """Item at a non-negative index, raising IndexError when out of range."""
    if index < 0 or index >= len(array):
        raise IndexError(f"index out of range: index={index}, array={list(array)}")
    return array[index]