from types import MappingProxyType

from i18next_checker.tree import Branch, Leaf, flatten, iter_leaf_paths, prune, to_node, to_plain


def test_flatten_nested_object():
    result = flatten({"common": {"save": "保存", "cancel": "取消"}, "auth": {"login": "登录"}})
    assert result == {"common.save", "common.cancel", "auth.login"}


def test_flatten_deep_nesting():
    assert flatten({"level1": {"level2": {"level3": {"key": "value"}}}}) == {"level1.level2.level3.key"}


def test_flatten_empty_tree():
    assert flatten({}) == set()


def test_flatten_with_prefix():
    assert flatten({"key": "value"}, "prefix") == {"prefix.key"}


def test_lists_are_leaves():
    result = flatten({"items": ["item1", "item2"], "nested": {"arr": [1, 2, {"x": 1}]}})
    assert result == {"items", "nested.arr"}


def test_scalars_of_any_type_are_leaves():
    tree = {"none": None, "count": 42, "ratio": 0.5, "active": False, "nested": {"also_none": None}}
    assert flatten(tree) == {"none", "count", "ratio", "active", "nested.also_none"}


def test_special_key_names_kept_verbatim():
    tree = {"key-with-dash": "v", "key_with_underscore": "v", "key.with.dot": "v", "key@special#chars": "v"}
    assert flatten(tree) == set(tree)


def test_empty_nested_object_contributes_nothing():
    assert flatten({"a": {}, "b": "x"}) == {"b"}


def test_flatten_accepts_branch_nodes():
    tree = Branch({"a": Branch({"b": Leaf("x")}), "c": Leaf(None)})
    assert flatten(tree) == {"a.b", "c"}


def test_node_round_trip_preserves_order():
    data = {"z": {"y": 1, "a": [1, 2]}, "b": None}
    node = to_node(data)
    assert isinstance(node, Branch)
    assert isinstance(node.children["z"].children["a"], Leaf)
    plain = to_plain(node)
    assert plain == data
    assert list(plain) == ["z", "b"]
    assert list(plain["z"]) == ["y", "a"]


def test_iter_leaf_paths_is_depth_first():
    tree = {"b": "1", "a": {"y": "2", "x": "3"}, "c": "4"}
    assert list(iter_leaf_paths(tree)) == ["b", "a.y", "a.x", "c"]


def test_prune_collapses_emptied_ancestors():
    tree = {"a": {"used": "x", "dead": {"leaf": "y"}}}
    cleaned, removed = prune(tree, {"a.used"})
    assert cleaned == {"a": {"used": "x"}}
    assert removed == ["a.dead.leaf"]


def test_prune_drops_whole_branch_when_nothing_used():
    cleaned, removed = prune({"used": {"k1": "v"}, "unused": {"k3": "v", "k4": "v"}}, {"used.k1"})
    assert cleaned == {"used": {"k1": "v"}}
    assert removed == ["unused.k3", "unused.k4"]


def test_prune_does_not_mutate_input():
    tree = {"a": {"b": "1", "c": "2"}}
    prune(tree, set())
    assert tree == {"a": {"b": "1", "c": "2"}}


def test_prune_keeps_list_leaves_when_used():
    cleaned, removed = prune({"items": ["a", "b"], "other": [1]}, {"items"})
    assert cleaned == {"items": ["a", "b"]}
    assert removed == ["other"]


def test_prune_drops_existing_empty_objects_silently():
    cleaned, removed = prune({"empty": {}, "k": "v"}, {"k"})
    assert cleaned == {"k": "v"}
    assert removed == []


def test_prune_branch_returns_branch():
    cleaned, removed = prune(Branch({"a": Leaf(1), "b": Leaf(2)}), {"b"})
    assert isinstance(cleaned, Branch)
    assert to_plain(cleaned) == {"b": 2}
    assert removed == ["a"]


def test_prune_result_relates_to_flatten():
    tree = {
        "common": {"save": "s", "cancel": "c", "extra": {"deep": "d", "deeper": {"x": None}}},
        "list": [1, 2],
        "flag": True,
    }
    used = {"common.save", "list", "not.defined"}
    cleaned, removed = prune(tree, used)
    original = flatten(tree)
    assert flatten(cleaned) <= used & original
    assert sorted(removed) == sorted(original - used)
    assert len(removed) == len(set(removed))


def test_read_only_mappings_are_accepted():
    tree = MappingProxyType({"a": {"b": "x"}, "c": "y"})
    assert flatten(tree) == {"a.b", "c"}
    cleaned, removed = prune(tree, {"c"})
    assert cleaned == {"c": "y"}
    assert removed == ["a.b"]
