"""
Unit tests for the word trie.
"""

from worddict.trie import Trie


class TestInsertLookup:
    def test_lookup_stored_word(self):
        trie = Trie()
        trie.insert("hello", "a greeting")
        assert trie.lookup("hello") == "a greeting"

    def test_last_write_wins(self):
        trie = Trie()
        trie.insert("cat", "feline")
        trie.insert("cat", "animal")
        assert trie.lookup("cat") == "animal"
        assert len(trie) == 1

    def test_prefix_is_not_a_match(self):
        trie = Trie()
        trie.insert("cats", "more than one cat")
        assert trie.lookup("cat") is None
        assert trie.is_prefix("cat")
        assert "cat" not in trie

    def test_longer_word_is_not_a_match(self):
        trie = Trie()
        trie.insert("cat", "feline")
        assert trie.lookup("cats") is None
        assert not trie.is_prefix("cats")

    def test_empty_string_key(self):
        trie = Trie()
        assert trie.lookup("") is None
        trie.insert("", "nothing")
        assert trie.lookup("") == "nothing"
        assert trie.root.is_terminal

    def test_empty_meaning(self):
        trie = Trie()
        trie.insert("blank", "")
        assert trie.lookup("blank") == ""
        assert "blank" in trie

    def test_missing_word_on_empty_trie(self):
        trie = Trie()
        assert trie.lookup("python") is None
        assert len(trie) == 0

    def test_unicode_and_repeated_characters(self):
        trie = Trie()
        trie.insert("café", "coffee house")
        trie.insert("aaa", "three a's")
        trie.insert("日本", "Japan")
        assert trie.lookup("café") == "coffee house"
        assert trie.lookup("cafe") is None
        assert trie.lookup("aaa") == "three a's"
        assert trie.lookup("aa") is None
        assert trie.lookup("日本") == "Japan"

    def test_no_case_normalization(self):
        trie = Trie()
        trie.insert("Go", "a board game")
        assert trie.lookup("go") is None


class TestStructure:
    def test_shared_prefix_reuses_nodes(self):
        trie = Trie()
        trie.insert("car", "vehicle")
        trie.insert("cart", "wagon")
        node = trie.root.children["c"].children["a"].children["r"]
        assert node.is_terminal
        assert list(node.children) == ["t"]
        assert len(trie.root.children) == 1
        assert len(trie) == 2

    def test_every_leaf_is_terminal(self):
        trie = Trie()
        for word in ["go", "gopher", "golang", "rust", "r"]:
            trie.insert(word, word.upper())

        stack = [trie.root]
        while stack:
            node = stack.pop()
            if not node.children:
                assert node.is_terminal
            stack.extend(node.children.values())

    def test_lookup_does_not_create_nodes(self):
        trie = Trie()
        trie.insert("go", "a language")
        trie.lookup("gopher")
        trie.is_prefix("xyz")
        assert list(trie.root.children) == ["g"]
        assert list(trie.root.children["g"].children) == ["o"]
        assert trie.root.children["g"].children["o"].children == {}
