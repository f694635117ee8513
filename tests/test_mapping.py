"""Tests for the Hepburn table and mapping tree construction."""
import pytest

from romakana.base import ConfigurationError, MappingConfigError
from romakana.hepburn import hepburn_table
from romakana.mapping import MappingTree, TrieNode, apply_custom_mapping, build_mapping_tree


class TestHepburnTable:
    """Test the generated base table."""

    @pytest.mark.parametrize("romaji,kana", [
        ("a", "あ"),
        ("ka", "か"),
        ("shi", "し"),
        ("sha", "しゃ"),
        ("chi", "ち"),
        ("cho", "ちょ"),
        ("tsu", "つ"),
        ("fu", "ふ"),
        ("ji", "じ"),
        ("ja", "じゃ"),
        ("kya", "きゃ"),
        ("wo", "を"),
        ("wi", "うぃ"),
        ("fa", "ふぁ"),
        ("tha", "てゃ"),
        ("n", "ん"),
        ("n'", "ん"),
        ("xn", "ん"),
        ("kka", "っか"),
        ("tte", "って"),
        ("cchi", "っち"),
        ("xtsu", "っ"),
        ("ltu", "っ"),
        ("lca", "ヵ"),
        ("xya", "ゃ"),
        ("-", "ー"),
        (".", "。"),
        ("“", "『"),
    ])
    def test_entries(self, romaji, kana):
        assert hepburn_table()[romaji] == kana

    def test_double_n_is_not_sokuon(self):
        """'nn' must not become っん."""
        table = hepburn_table()
        assert not any(seq.startswith("nn") for seq in table)

    def test_table_is_memoized(self):
        assert hepburn_table() is hepburn_table()


class TestMappingTree:
    """Test MappingTree insert/lookup semantics."""

    def test_insert_and_lookup(self):
        tree = MappingTree.from_table({"ka": "か", "kya": "きゃ"})
        assert tree.lookup("ka") == "か"
        assert tree.lookup("kya") == "きゃ"
        assert tree.lookup("k") is None
        assert tree.lookup("ky") is None
        assert tree.lookup("x") is None
        assert len(tree) == 2
        assert "ka" in tree
        assert "k" not in tree

    def test_insert_keeps_children(self):
        """Overwriting a value leaves longer sequences intact."""
        tree = MappingTree.from_table({"n": "ん", "na": "な"})
        tree.insert("n", "N")
        assert tree.lookup("n") == "N"
        assert tree.lookup("na") == "な"

    def test_set_leaf_drops_children(self):
        tree = MappingTree.from_table({"n": "ん", "na": "な"})
        tree.set_leaf("n", "ん")
        assert tree.find("n").is_leaf
        assert tree.lookup("na") is None

    def test_entries_round_trip(self):
        table = {"a": "あ", "ka": "か", "kya": "きゃ"}
        assert dict(MappingTree.from_table(table).entries()) == table

    def test_copy_is_independent(self):
        tree = MappingTree.from_table({"ka": "か"}).freeze()
        clone = tree.copy()
        clone.insert("ka", "カ")
        assert tree.lookup("ka") == "か"
        assert not clone.frozen

    @pytest.mark.parametrize("sequence,value", [
        ("", "x"),
        (None, "x"),
        (1, "x"),
        ("ka", None),
        ("ka", 3),
    ])
    def test_malformed_entries_rejected(self, sequence, value):
        """Malformed entries raise instead of corrupting the tree."""
        tree = MappingTree()
        with pytest.raises(MappingConfigError) as excinfo:
            tree.insert(sequence, value)
        assert isinstance(excinfo.value, ConfigurationError)
        assert excinfo.value.sequence == sequence
        assert len(tree) == 0

    def test_frozen_tree_rejects_changes(self):
        tree = MappingTree.from_table({"ka": "か"}).freeze()
        with pytest.raises(MappingConfigError):
            tree.insert("ki", "き")
        with pytest.raises(MappingConfigError):
            tree.set_leaf("ka", "カ")

    def test_node_repr(self):
        node = TrieNode("ん")
        node.children["a"] = TrieNode("な")
        assert "ん" in repr(node)
        assert "'a'" in repr(node)


class TestBuildMappingTree:
    """Test overlays applied by build_mapping_tree."""

    def test_base_tree(self, hepburn_tree):
        assert hepburn_tree.frozen
        assert hepburn_tree.lookup("ka") == "か"
        assert hepburn_tree.lookup("nn") is None
        assert len(hepburn_tree) == len(hepburn_table())

    def test_ime_overlay(self, ime_tree):
        """IME mode lets a doubled or space-terminated n finish as ん."""
        assert ime_tree.lookup("nn") == "ん"
        assert ime_tree.lookup("n ") == "ん"
        assert ime_tree.find("nn").is_leaf
        assert ime_tree.lookup("na") == "な"

    def test_obsolete_kana_overlay(self):
        tree = build_mapping_tree(hepburn_table(), use_obsolete_kana=True)
        assert tree.lookup("wi") == "ゐ"
        assert tree.lookup("we") == "ゑ"
        assert tree.lookup("wa") == "わ"

    def test_custom_dict_overrides(self):
        tree = build_mapping_tree(hepburn_table(), custom_kana_mapping={"wa": "WA_OVERRIDE", "zz": "Z"})
        assert tree.lookup("wa") == "WA_OVERRIDE"
        assert tree.lookup("zz") == "Z"
        assert tree.lookup("zza") == "っざ"

    def test_custom_transform(self):
        def add_entry(tree):
            tree.insert("qq", "?!")
            return tree

        tree = build_mapping_tree(hepburn_table(), custom_kana_mapping=add_entry)
        assert tree.lookup("qq") == "?!"
        assert tree.frozen

    def test_custom_transform_must_return_tree(self):
        with pytest.raises(MappingConfigError):
            build_mapping_tree(hepburn_table(), custom_kana_mapping=lambda tree: {"a": "b"})

    def test_custom_mapping_with_empty_sequence(self):
        with pytest.raises(MappingConfigError):
            build_mapping_tree(hepburn_table(), custom_kana_mapping={"": "x"})

    def test_overlays_do_not_touch_source_tree(self, hepburn_tree):
        apply_custom_mapping(hepburn_tree, {"ka": "KA"})
        assert hepburn_tree.lookup("ka") == "か"
