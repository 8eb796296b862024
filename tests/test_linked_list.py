from algoset.linked_list import ListNode, from_values, merge_two_lists, to_values


def test_round_trip():
    values = [5, 1, 4, 1, 9]
    assert to_values(from_values(values)) == values


def test_empty_round_trip():
    assert from_values([]) is None
    assert to_values(None) == []


def test_node_defaults_and_iteration():
    node = ListNode()
    assert node.val == 0
    assert node.next is None
    assert list(ListNode(1, ListNode(2))) == [1, 2]


def test_merge_source_example():
    a = [1, 3, 5]
    b = [2, 4, 6]
    merged = merge_two_lists(from_values(a), from_values(b))
    assert to_values(merged) == sorted(a + b)


def test_merge_with_empty_lists():
    head = from_values([1, 2])
    assert merge_two_lists(None, head) is head
    assert merge_two_lists(head, None) is head
    assert merge_two_lists(None, None) is None


def test_merge_ties_take_second_list_first():
    first = ListNode(1)
    second = ListNode(1)
    merged = merge_two_lists(first, second)
    assert merged is second
    assert merged.next is first


def test_merge_reuses_nodes():
    a = from_values([1, 4, 7])
    b = from_values([2, 3, 8, 9])
    originals = set()
    for head in (a, b):
        node = head
        while node is not None:
            originals.add(id(node))
            node = node.next
    merged = merge_two_lists(a, b)
    seen = set()
    node = merged
    while node is not None:
        seen.add(id(node))
        node = node.next
    assert seen == originals


def test_merge_uneven_lengths_is_sorted():
    a = [-3, 0, 0, 10, 20, 30]
    b = [0, 5]
    assert to_values(merge_two_lists(from_values(a), from_values(b))) == sorted(a + b)