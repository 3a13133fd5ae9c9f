from jellyset.primitive import PrimitiveSet, difference, intersection, union


def test_add_ignores_duplicates():
    s = PrimitiveSet()
    s.add("a", "b")
    s.add("b", "c")
    assert s.size() == 3
    assert set(s.list()) == {"a", "b", "c"}


def test_add_and_remove_without_items_noop():
    s = PrimitiveSet("a")
    s.add()
    s.remove()
    assert s.size() == 1


def test_remove_ignores_absent_items():
    s = PrimitiveSet("a", "b")
    s.remove("b", "zzz")
    assert set(s.list()) == {"a"}


def test_has_requires_all_items():
    s = PrimitiveSet("a", "b")
    assert s.has("a") is True
    assert s.has("a", "b") is True
    assert s.has("a", "c") is False


def test_has_without_items_is_false():
    assert PrimitiveSet("a").has() is False
    assert PrimitiveSet().has() is False


def test_mixed_element_types():
    s = PrimitiveSet(1, "1", (1, 2))
    assert s.size() == 3
    assert s.has(1, "1", (1, 2))


def test_list_is_snapshot():
    s = PrimitiveSet("a")
    items = s.list()
    items.append("b")
    assert s.size() == 1


def test_copy_is_independent():
    s = PrimitiveSet("a")
    clone = s.copy()
    clone.add("b")
    assert s.size() == 1
    assert clone.size() == 2


def test_foreach_stops_on_truthy_callback():
    s = PrimitiveSet("a", "b", "c")
    seen = []

    def visit(item):
        seen.append(item)
        return True

    s.foreach(visit)
    assert len(seen) == 1


def test_foreach_visits_everything():
    s = PrimitiveSet("a", "b", "c")
    seen = []
    s.foreach(lambda item: seen.append(item))
    assert set(seen) == {"a", "b", "c"}


def test_merge_then_separate_is_not_undo():
    s = PrimitiveSet("a", "b")
    other = PrimitiveSet("b", "c")
    s.merge(other)
    assert set(s.list()) == {"a", "b", "c"}
    s.separate(other)
    assert set(s.list()) == {"a"}


def test_helpers_without_sets_are_empty():
    assert union().size() == 0
    assert difference().size() == 0
    assert intersection().size() == 0


def test_union():
    result = union(PrimitiveSet("a", "b"), PrimitiveSet("b", "c"), PrimitiveSet())
    assert set(result.list()) == {"a", "b", "c"}


def test_difference_first_minus_rest():
    result = difference(
        PrimitiveSet("a", "b", "c", "d"),
        PrimitiveSet("b"),
        PrimitiveSet("d", "x"),
    )
    assert set(result.list()) == {"a", "c"}


def test_intersection_present_in_all():
    result = intersection(
        PrimitiveSet("a", "b", "c", "d"),
        PrimitiveSet("c", "d", "e"),
        PrimitiveSet("d", "c"),
    )
    assert set(result.list()) == {"c", "d"}


def test_helpers_return_new_sets():
    a = PrimitiveSet("a")
    b = PrimitiveSet("b")
    result = union(a, b)
    result.add("z")
    assert a.size() == 1
    assert b.size() == 1
    assert difference(a).size() == 1
    difference(a).add("q")
    assert a.size() == 1
