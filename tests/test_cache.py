import threading
import unittest

from termcells.cache import LRUCache
from termcells.errors import CellsError


class TestLRUCache(unittest.TestCase):
    def test_get_put(self):
        cache = LRUCache(2)
        self.assertIsNone(cache.get("a"))
        cache.put("a", 1)
        self.assertEqual(cache.get("a"), 1)
        self.assertEqual((cache.hits, cache.misses), (1, 1))

    def test_evicts_least_recently_used(self):
        cache = LRUCache(2)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.get("a")
        cache.put("c", 3)
        self.assertIn("a", cache)
        self.assertNotIn("b", cache)
        self.assertIn("c", cache)
        self.assertEqual(len(cache), 2)

    def test_put_existing_key_refreshes(self):
        cache = LRUCache(2)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.put("a", 10)
        cache.put("c", 3)
        self.assertEqual(cache.get("a"), 10)
        self.assertNotIn("b", cache)

    def test_clear(self):
        cache = LRUCache(4)
        cache.put("a", 1)
        cache.get("a")
        cache.clear()
        self.assertEqual(len(cache), 0)
        self.assertEqual(cache.hits, 0)

    def test_invalid_capacity(self):
        with self.assertRaises(CellsError) as ctx:
            LRUCache(0)
        self.assertEqual(ctx.exception.code, "E004")

    def test_concurrent_puts_stay_bounded(self):
        cache = LRUCache(50)

        def worker(offset):
            for i in range(500):
                cache.put(offset * 1000 + i, i)
                cache.get(offset * 1000 + i // 2)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(len(cache), 50)


if __name__ == "__main__":
    unittest.main()
