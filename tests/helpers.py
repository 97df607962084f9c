"""番兵付きチェーンを直接辿って不変条件を確認するヘルパー"""


def walk_chain(container):
    """番兵の次から None まで辿ってノード一覧を返す（循環なら失敗）"""
    nodes = []
    seen = set()
    node = container._head.next
    while node is not None:
        assert id(node) not in seen, "cycle in chain"
        seen.add(id(node))
        nodes.append(node)
        node = node.next
    return nodes


def assert_queue_invariants(q):
    nodes = walk_chain(q)
    assert len(q) >= 0
    assert len(nodes) == len(q)
    if len(q) == 0:
        assert q._head.next is None
        assert q._tail is q._head
    else:
        assert nodes[-1] is q._tail
        assert q._tail.next is None


def assert_stack_invariants(s):
    nodes = walk_chain(s)
    assert len(s) >= 0
    assert len(nodes) == len(s)
    if len(s) == 0:
        assert s._head.next is None
