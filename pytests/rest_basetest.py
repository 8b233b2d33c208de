import json
import logging
import unittest
from urllib.parse import parse_qs, quote_plus, unquote, urlsplit

from requests.structures import CaseInsensitiveDict

from riak_rest_util.rest_client import RiakClient


class FakeResponse(object):
    def __init__(self, status_code, body=b"", headers=None):
        if isinstance(body, (dict, list)):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode()
        self.status_code = status_code
        self.content = body
        self.headers = CaseInsensitiveDict(headers or dict())

    def json(self):
        return json.loads(self.content)


class FakeRiakServer(object):
    """
    In-memory stand-in for requests.Session, serving the subset of the
    HTTP interface used by riak_rest_util.
    Canned replies queued in 'responses' are served first; an exception
    instance in that queue is raised instead.
    """
    def __init__(self, prefix="riak"):
        self.prefix = prefix
        self.props = dict()
        self.objects = dict()
        self.indexes = dict()
        self.requests = list()
        self.responses = list()
        self.key_counter = 0

    def add_index_entry(self, bucket, index, value, key):
        self.indexes.setdefault((bucket, index), list()).append((value, key))

    def request(self, method, url, headers=None, timeout=None,
                params=None, data=None):
        self.requests.append({"method": method, "url": url,
                              "headers": headers, "data": data})
        if self.responses:
            response = self.responses.pop(0)
            if isinstance(response, Exception):
                raise response
            return response

        split_url = urlsplit(url)
        query = dict((k, v[0]) for k, v in parse_qs(split_url.query).items())
        path = [unquote(seg) for seg in split_url.path.strip("/").split("/")]
        if path == ["ping"]:
            return FakeResponse(200, "OK")
        if path[0] != self.prefix or len(path) < 2:
            return FakeResponse(404, "not found")

        bucket = path[1]
        if len(path) == 2:
            return self.__bucket_request(method, bucket, query, headers,
                                         data)
        if path[2] == "index" and len(path) in (5, 6):
            return self.__index_request(bucket, path[3], path[4:])
        if len(path) == 3:
            return self.__object_request(method, bucket, path[2], headers,
                                         data)
        return FakeResponse(404, "not found")

    def __bucket_request(self, method, bucket, query, headers, data):
        if method == "GET" and query.get("props") == "true":
            return FakeResponse(200, {"props": self.props.get(bucket, {})},
                                {"Content-Type": "application/json"})
        if method == "GET" and query.get("keys") == "true":
            keys = [quote_plus(key) for (b_name, key) in self.objects
                    if b_name == bucket]
            return FakeResponse(200, {"keys": keys},
                                {"Content-Type": "application/json"})
        if method == "PUT":
            self.props.setdefault(bucket, dict()).update(
                json.loads(data)["props"])
            return FakeResponse(204)
        if method == "POST":
            self.key_counter += 1
            key = "generated_%s" % self.key_counter
            response = self.__object_request("PUT", bucket, key, headers,
                                             data)
            response.status_code = 201
            response.headers["Location"] = "/%s/%s/%s" % (self.prefix,
                                                          bucket, key)
            return response
        return FakeResponse(405, "method not allowed")

    def __index_request(self, bucket, index, bounds):
        entries = self.indexes.get((bucket, index), list())
        if len(bounds) == 1:
            keys = [key for value, key in entries if str(value) == bounds[0]]
        else:
            if index.endswith("_int"):
                start, end = int(bounds[0]), int(bounds[1])
            else:
                start, end = bounds
            keys = [key for value, key in entries if start <= value <= end]
        return FakeResponse(200, {"keys": [quote_plus(k) for k in keys]},
                            {"Content-Type": "application/json"})

    def __object_request(self, method, bucket, key, headers, data):
        headers = CaseInsensitiveDict(headers or dict())
        if method == "GET":
            if (bucket, key) not in self.objects:
                return FakeResponse(404, "not found")
            return self.__object_response(200, bucket, key)
        if method == "PUT":
            if isinstance(data, str):
                data = data.encode()
            self.objects[(bucket, key)] = {
                "data": data,
                "content_type": headers.get("Content-Type"),
                "link": headers.get("Link")}
            return self.__object_response(200, bucket, key)
        if method == "DELETE":
            if self.objects.pop((bucket, key), None) is None:
                return FakeResponse(404, "not found")
            return FakeResponse(204)
        return FakeResponse(405, "method not allowed")

    def __object_response(self, status, bucket, key):
        stored = self.objects[(bucket, key)]
        headers = {"X-Riak-Vclock": "a85hYGBgzGDKBVIcypz/fgaUHjmTwZTImMfKsMKK"}
        if stored["content_type"]:
            headers["Content-Type"] = stored["content_type"]
        if stored["link"]:
            headers["Link"] = stored["link"]
        return FakeResponse(status, stored["data"], headers)


class RiakBaseTest(unittest.TestCase):
    def setUp(self):
        self.log = logging.getLogger("test")
        self.server = FakeRiakServer()
        self.client = RiakClient(host="127.0.0.1", port=8098,
                                 client_id="py_test_client")
        self.client.session = self.server
        self.bucket = self.client.bucket("bucket1")

    def tearDown(self):
        self.client.buckets.clear()

    def last_request(self):
        return self.server.requests[-1]

    def queue_response(self, status_code, body=b"", headers=None):
        self.server.responses.append(FakeResponse(status_code, body,
                                                  headers))
