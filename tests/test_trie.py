import pytest

from algolab.trie import Trie


@pytest.fixture
def trie():
    t = Trie()
    for word in ["ayush", "harris"]:
        t.insert(word)
    return t


def test_inserted_words_are_found(trie):
    assert trie.search("ayush") is True
    assert trie.search("harris") is True


def test_missing_word_is_not_found(trie):
    assert trie.search("madhav") is False


def test_prefix_alone_is_not_a_word(trie):
    assert trie.search("ayu") is False
    trie.insert("ayu")
    assert trie.search("ayu") is True
    assert trie.search("ayush") is True


def test_longer_word_than_inserted_is_not_found(trie):
    assert trie.search("harrison") is False


def test_empty_trie_finds_nothing():
    assert Trie().search("a") is False


@pytest.mark.parametrize("word", ["Ayush", "a b", "x1"])
def test_non_lowercase_letters_are_rejected(trie, word):
    with pytest.raises(ValueError):
        trie.insert(word)
    with pytest.raises(ValueError):
        trie.search(word)