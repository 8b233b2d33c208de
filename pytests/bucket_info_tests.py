from requests.exceptions import ConnectionError

from pytests.rest_basetest import RiakBaseTest
from riak_rest_util.exceptions import \
    KeyListError, \
    TransportUnavailable, \
    UnexpectedStatus


class BucketKeysTests(RiakBaseTest):
    def test_get_keys(self):
        for key in ["k1", "k 2", "k/3"]:
            self.bucket.new_object(key, {"v": key}).store()
        self.assertEqual(sorted(self.bucket.get_keys()),
                         sorted(["k1", "k 2", "k/3"]))
        self.assertTrue(self.last_request()["url"].endswith(
            "/riak/bucket1?props=false&keys=true"))

    def test_get_keys_no_dedupe(self):
        self.queue_response(200, {"keys": ["a", "a%20b", "a"]})
        self.assertEqual(self.bucket.get_keys(), ["a", "a b", "a"])

    def test_empty_bucket(self):
        self.assertEqual(self.bucket.get_keys(), [])

    def test_bad_status(self):
        self.queue_response(503, "unavailable")
        with self.assertRaises(KeyListError) as ctx:
            self.bucket.get_keys()
        self.assertIsInstance(ctx.exception, UnexpectedStatus)
        self.assertIn("Error listing bucket keys.", str(ctx.exception))

    def test_no_response(self):
        self.server.responses.append(ConnectionError("refused"))
        with self.assertRaises(KeyListError) as ctx:
            self.bucket.get_keys()
        self.assertIsInstance(ctx.exception, TransportUnavailable)

    def test_missing_keys_field(self):
        self.queue_response(200, {"props": {}})
        with self.assertRaises(KeyListError) as ctx:
            self.bucket.get_keys()
        self.assertIsInstance(ctx.exception, UnexpectedStatus)
        self.assertEqual(ctx.exception.status, 200)

    def test_undecodable_body(self):
        self.queue_response(200, "keys: a, b")
        self.assertRaises(KeyListError, self.bucket.get_keys)

    def test_non_string_keys(self):
        self.queue_response(200, {"keys": ["a", None, 3]})
        with self.assertRaises(KeyListError) as ctx:
            self.bucket.get_keys()
        self.assertIsInstance(ctx.exception, UnexpectedStatus)
