"""Unit tests for cache stores."""

import unittest
from unittest.mock import MagicMock, patch

from feed_cache.services.db import FirestoreStore
from feed_cache.services.store import MemoryStore

FEED = {
    "url": "http://example.com/rss",
    "title": "Example",
    "link": "http://example.com/",
    "entries": [{"id": "1", "title": "One", "link": "l1", "summary": "", "published": None}],
}


class TestMemoryStore(unittest.TestCase):
    def setUp(self):
        self.store = MemoryStore()

    def test_write_then_read(self):
        self.assertFalse(self.store.exists(FEED["url"]))
        self.assertIsNone(self.store.read(FEED["url"]))
        self.store.write(FEED["url"], FEED)
        self.assertTrue(self.store.exists(FEED["url"]))
        self.assertEqual(self.store.read(FEED["url"]), FEED)

    def test_values_are_copied(self):
        feed = {"url": "u", "title": "", "link": "", "entries": []}
        self.store.write("u", feed)
        feed["entries"].append({"id": "x"})
        self.store.read("u")["entries"].append({"id": "y"})
        self.assertEqual(self.store.read("u")["entries"], [])

    def test_delete_and_clear(self):
        self.store.write("a", FEED)
        self.store.write("b", FEED)
        self.assertTrue(self.store.delete("a"))
        self.assertFalse(self.store.delete("a"))
        self.store.clear()
        self.assertFalse(self.store.exists("b"))


class TestFirestoreStore(unittest.TestCase):
    def setUp(self):
        patcher = patch("feed_cache.services.db.firestore.Client")
        self.mock_client = patcher.start()
        self.addCleanup(patcher.stop)
        self.collection = self.mock_client.return_value.collection.return_value
        self.store = FirestoreStore("test-project", collection="feeds")

    def test_connects_to_collection(self):
        self.mock_client.assert_called_once_with(project="test-project")
        self.mock_client.return_value.collection.assert_called_once_with("feeds")

    def test_get_id_is_deterministic(self):
        url = "http://example.com/rss"
        self.assertEqual(self.store.get_id(url), self.store.get_id(url))
        self.assertEqual(len(self.store.get_id(url)), 32)  # MD5 is 32 hex chars

    def test_exists(self):
        snap = MagicMock()
        snap.exists = True
        self.collection.document.return_value.get.return_value = snap

        self.assertTrue(self.store.exists(FEED["url"]))
        self.collection.document.assert_called_with(self.store.get_id(FEED["url"]))

    def test_read_missing_returns_none(self):
        snap = MagicMock()
        snap.exists = False
        self.collection.document.return_value.get.return_value = snap
        self.assertIsNone(self.store.read(FEED["url"]))

    def test_read_returns_feed(self):
        snap = MagicMock()
        snap.exists = True
        snap.to_dict.return_value = {"url": FEED["url"], "feed": FEED}
        self.collection.document.return_value.get.return_value = snap
        self.assertEqual(self.store.read(FEED["url"]), FEED)

    def test_read_document_without_feed_returns_none(self):
        snap = MagicMock()
        snap.exists = True
        snap.to_dict.return_value = {"url": FEED["url"]}
        self.collection.document.return_value.get.return_value = snap
        self.assertIsNone(self.store.read(FEED["url"]))

    def test_write_sets_document(self):
        self.store.write(FEED["url"], FEED)
        ref = self.collection.document.return_value
        self.assertTrue(ref.set.called)
        doc = ref.set.call_args[0][0]
        self.assertEqual(doc["url"], FEED["url"])
        self.assertEqual(doc["feed"], FEED)
        self.assertIn("cached_at", doc)


if __name__ == "__main__":
    unittest.main()
