from agrobench.records import HEADER
from agrobench.trie import Trie, load_trie


def build(*words):
    trie = Trie()
    for word in words:
        trie.insert(word)
    return trie


def test_contains_is_case_insensitive():
    trie = build("Bahia")
    assert "bahia" in trie
    assert "BAHIA" in trie
    assert "bah" not in trie
    assert "bahias" not in trie


def test_non_string_not_contained():
    assert 5 not in build("soja")


def test_words_in_alphabet_order():
    trie = build("soja", "milho", "mandioca")
    assert trie.words() == sorted(["soja", "milho", "mandioca"])


def test_space_sorts_after_letters():
    trie = build("a b", "ab")
    assert trie.words() == ["ab", "a b"]


def test_unsupported_characters_are_skipped():
    trie = build("são paulo")
    assert "so paulo" in trie
    assert trie.words() == ["so paulo"]


def test_duplicates_stored_once():
    trie = build("soja", "SOJA", "Soja")
    assert trie.words() == ["soja"]


def test_words_with_prefix():
    trie = build("bahia", "bananas", "soja")
    assert trie.words_with_prefix("ba") == ["bahia", "bananas"]
    assert trie.words_with_prefix("soja") == ["soja"]


def test_words_with_prefix_keeps_typed_prefix():
    trie = build("bahia")
    result = trie.words_with_prefix("BA")
    assert len(result) == 1
    assert result[0].startswith("BA")
    assert result[0].lower() == "bahia"


def test_words_with_missing_prefix():
    assert build("soja").words_with_prefix("mi") == []


def test_empty_prefix_lists_everything():
    trie = build("milho", "soja")
    assert trie.words_with_prefix("") == trie.words()


def test_load_trie_columns(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text(
        HEADER + "\n"
        "1;2000;SP;Soja;1;1;1;1;1\n"
        "2;2001;MG;Cafe;1;1;1;1;1\n"
        "3;2002;SP;Milho;1;1;1;1;1\n",
        encoding="utf-8",
    )
    states = load_trie(path, 2)
    crops = load_trie(path, 3)
    assert states.words() == ["mg", "sp"]
    assert crops.words() == ["cafe", "milho", "soja"]
    assert "ID" not in load_trie(path, 0)


def test_load_trie_column_out_of_range(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text(HEADER + "\n1;2000;SP;Soja;1;1;1;1;1\n", encoding="utf-8")
    assert load_trie(path, 12).words() == []