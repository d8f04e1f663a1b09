import threading
import unittest

from turbotext.lazy import Once, once
from turbotext.textio import text_function, to_bytes
from turbotext.trie import Trie, encode_table, invert_table


class TestTrie(unittest.TestCase):
    def setUp(self):
        self.trie = Trie({"n": "н", "nj": "њ", "っ": "x", "っきゃ": "kkya"})

    def test_translate_longest_first(self):
        assert self.trie.translate("konj") == "koњ"
        assert self.trie.translate("っきゃっき") == "kkyaxき"

    def test_translate_does_not_rescan(self):
        trie = Trie({"a": "b", "b": "c"})
        assert trie.translate("ab") == "bc"

    def test_translate_no_match_returns_input(self):
        text = "xyz"
        assert self.trie.translate(text) is text

    def test_empty_table(self):
        assert Trie({}).translate("abc") == "abc"
        assert Trie({"": "x"}).translate("abc") == "abc"

    def test_bytes_table(self):
        trie = Trie(encode_table({"é": "e", "ß": "ss"}))
        assert trie.translate("straße café".encode("utf-8")) == b"strasse cafe"

    def test_invert_table_last_wins(self):
        assert invert_table({"ς": "Σ", "σ": "Σ", "a": "A"}) == {"Σ": "σ", "A": "a"}


class TestOnce(unittest.TestCase):
    def test_factory_runs_once(self):
        calls = []

        @once
        def table():
            calls.append(1)
            return {"a": 1}

        assert isinstance(table, Once)
        assert calls == []
        assert table() is table()
        assert calls == [1]

    def test_concurrent_first_use(self):
        calls = []
        barrier = threading.Barrier(8)

        def build():
            calls.append(1)
            return object()

        table = Once(build)
        results = []

        def worker():
            barrier.wait()
            results.append(table())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert calls == [1]
        assert len({id(result) for result in results}) == 1


class TestTextFunction(unittest.TestCase):
    def test_to_bytes(self):
        assert to_bytes("é") == b"\xc3\xa9"
        assert to_bytes(bytearray(b"ab")) == b"ab"
        with self.assertRaises(TypeError) as ctx:
            to_bytes(3)
        assert str(ctx.exception) == "expected str or bytes, not int"

    def test_str_in_str_out(self):
        @text_function
        def double(data, suffix=b""):
            assert isinstance(data, bytes)
            assert isinstance(suffix, bytes)
            return data + data + suffix

        assert double("é") == "éé"
        assert double(b"a", suffix="!") == b"aa!"
        assert double("a", "ж") == "aaж"

    def test_returns_text_false(self):
        @text_function(returns_text=False)
        def raw(data):
            return data

        assert raw("é") == b"\xc3\xa9"

    def test_non_bytes_result_passes_through(self):
        @text_function
        def size(data):
            return len(data)

        assert size("é") == 2

    def test_wrong_type(self):
        @text_function
        def identity(data):
            return data

        with self.assertRaises(TypeError):
            identity(None)


if __name__ == "__main__":
    unittest.main()
