from requests.exceptions import Timeout

from pytests.rest_basetest import RiakBaseTest
from riak_rest_util.buckets.index_search import IndexType
from riak_rest_util.exceptions import \
    IndexSearchError, \
    TransportUnavailable, \
    UnexpectedStatus
from riak_rest_util.link import Link


class IndexSearchTests(RiakBaseTest):
    def setUp(self):
        super(IndexSearchTests, self).setUp()
        self.duplicate_keys = {"keys": ["a", "b", "a", "c", "b"]}

    def test_dedupe_keeps_first_occurrence(self):
        self.queue_response(200, self.duplicate_keys)
        links = self.bucket.index_search("field", IndexType.BIN, "value",
                                         dedupe=True)
        self.assertEqual([link.get_key() for link in links],
                         ["a", "b", "c"])

    def test_without_dedupe_returns_every_key(self):
        self.queue_response(200, self.duplicate_keys)
        links = self.bucket.index_search("field", IndexType.BIN, "value")
        self.assertEqual([link.get_key() for link in links],
                         ["a", "b", "a", "c", "b"])

    def test_results_are_bound_links(self):
        self.queue_response(200, {"keys": ["user%2F1", "jane+doe"]})
        links = self.bucket.index_search("email", IndexType.BIN, "x")
        self.assertEqual(links, [Link("bucket1", "user/1"),
                                 Link("bucket1", "jane doe")])
        for link in links:
            self.assertIsNone(link.tag)
            self.assertEqual(link.get_tag(), "bucket1")
            self.assertIs(link.client, self.client)

    def test_exact_match_path(self):
        self.server.add_index_entry("bucket1", "age_int", 32, "john")
        self.server.add_index_entry("bucket1", "age_int", 40, "jane")
        links = self.bucket.index_search("age", IndexType.INT, 32)
        self.assertEqual(self.last_request()["url"],
                         "http://127.0.0.1:8098/riak/bucket1"
                         "/index/age_int/32")
        self.assertEqual([link.key for link in links], ["john"])

    def test_range_path(self):
        for age, name in [(20, "kid"), (32, "john"), (40, "jane"),
                          (70, "old")]:
            self.server.add_index_entry("bucket1", "age_int", age, name)
        links = self.bucket.index_search("age", IndexType.INT, 30, 50)
        self.assertTrue(self.last_request()["url"].endswith(
            "/riak/bucket1/index/age_int/30/50"))
        self.assertEqual([link.key for link in links], ["john", "jane"])

    def test_binary_range_is_quoted(self):
        self.server.add_index_entry("bucket1", "name_bin", "a b", "k1")
        self.bucket.index_search("name", IndexType.BIN, "a b", "a c")
        self.assertTrue(self.last_request()["url"].endswith(
            "/index/name_bin/a%20b/a%20c"))

    def test_empty_result(self):
        links = self.bucket.index_search("age", IndexType.INT, 1)
        self.assertEqual(links, [])

    def test_invalid_index_type(self):
        self.assertRaises(ValueError, self.bucket.index_search,
                          "age", "float", 1)
        self.assertEqual(self.server.requests, [])

    def test_bad_status(self):
        self.queue_response(400, "bad request")
        with self.assertRaises(IndexSearchError) as ctx:
            self.bucket.index_search("age", IndexType.INT, 1)
        self.assertIsInstance(ctx.exception, UnexpectedStatus)
        self.assertEqual(ctx.exception.status, 400)

    def test_missing_keys_field(self):
        self.queue_response(200, {"results": []})
        self.assertRaises(UnexpectedStatus, self.bucket.index_search,
                          "age", IndexType.INT, 1)

    def test_no_response(self):
        self.server.responses.append(Timeout("timed out"))
        with self.assertRaises(TransportUnavailable) as ctx:
            self.bucket.index_search("age", IndexType.INT, 1)
        self.assertIsInstance(ctx.exception, IndexSearchError)

    def test_non_string_keys(self):
        for keys in [[None], ["a", 1], [["a"]]]:
            self.queue_response(200, {"keys": keys})
            with self.assertRaises(IndexSearchError) as ctx:
                self.bucket.index_search("age", IndexType.INT, 1)
            self.assertIsInstance(ctx.exception, UnexpectedStatus)
