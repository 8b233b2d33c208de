import json
import re
from urllib.parse import unquote_plus

from riak_rest_util.exceptions import \
    ObjectStatusError, \
    ObjectTransportError, \
    raise_for_response
from riak_rest_util.link import Link


class RiakObject(object):
    """
    Handle over a single key of a bucket. Holds the data, the content
    type, the links and the vclock of the last response.
    """
    JSON_CONTENT_TYPE = "text/json"

    # </riak/bucket/key>; riaktag="tag". The prefix may hold several segments
    LINK_HEADER_RE = re.compile(
        r'</([^>]+?)/([^/>]+)/([^/>]+)>;\s*riaktag="([^"]*)"')

    def __init__(self, client, bucket, key=None):
        self.client = client
        self.bucket = bucket
        self.key = key
        self.jsonize = True
        self.content_type = self.JSON_CONTENT_TYPE
        self.data = None
        self.links = list()
        self.vclock = None
        self.headers = dict()
        self.status = None
        self._exists = False

    def __str__(self):
        return "%s/%s" % (self.bucket.name, self.key)

    def get_bucket(self):
        return self.bucket

    def get_key(self):
        return self.key

    def get_data(self):
        return self.data

    def set_data(self, data):
        self.data = data
        return self

    def get_content_type(self):
        return self.content_type

    def set_content_type(self, content_type):
        self.content_type = content_type
        return self

    def get_vclock(self):
        return self.vclock

    def exists(self):
        return self._exists

    def get_links(self):
        return list(self.links)

    def add_link(self, obj, tag=None):
        """
        :param obj: RiakObject or Link to point to
        :param tag: Link tag. Defaults to the target bucket name
        :return: self
        """
        new_link = self.__to_link(obj, tag)
        if new_link not in self.links:
            self.links.append(new_link)
        return self

    def remove_link(self, obj, tag=None):
        old_link = self.__to_link(obj, tag)
        self.links = [link for link in self.links if link != old_link]
        return self

    def __to_link(self, obj, tag):
        if isinstance(obj, Link):
            return obj
        link = Link(obj.bucket.name, obj.key, tag)
        link.client = self.client
        return link

    def clear(self):
        self.headers = dict()
        self.links = list()
        self.data = None
        self.vclock = None
        self.status = None
        self._exists = False
        return self

    def populate(self, response, expected_statuses):
        """
        Load the object state from an HTTP response. Never raises.
        The object 'exists' only if the status is expected, is not 404,
        and the body could be decoded.
        :param response: requests.Response object (or None)
        :param expected_statuses: Iterable of accepted status codes
        :return None:
        """
        self.clear()
        if response is None:
            return

        self.status = response.status_code
        self.headers = dict(response.headers)
        if self.status not in expected_statuses or self.status == 404:
            return

        self.vclock = response.headers.get("X-Riak-Vclock")
        self.content_type = response.headers.get("Content-Type",
                                                 self.content_type)
        if "Link" in response.headers:
            self.__populate_links(response.headers["Link"])

        if self.jsonize:
            try:
                self.data = json.loads(response.content)
            except (TypeError, ValueError):
                self.data = None
                return
        else:
            self.data = response.content
        self._exists = True

    def __populate_links(self, link_header):
        for match in self.LINK_HEADER_RE.finditer(link_header):
            prefix, bucket, key, tag = map(unquote_plus, match.groups())
            if prefix != self.client.prefix:
                continue
            link = Link(bucket, key, tag)
            link.client = self.client
            self.links.append(link)

    def reload(self, r=None):
        """
        GET :: /<prefix>/<bucket>/<key>?r=<r>
        :param r: R-value of the request (defaults to the bucket's R)
        :return: self
        """
        r = self.bucket.get_r(r)
        api = self.client.build_rest_path(self.bucket, self.key,
                                          params={"r": r})
        _, _, response = self.client.request(api, self.client.GET)
        raise_for_response(response, (200, 404),
                           ObjectTransportError, ObjectStatusError,
                           "Error reading object %s" % self)
        self.populate(response, (200, 404))
        return self

    def store(self, w=None, dw=None):
        """
        PUT :: /<prefix>/<bucket>/<key>?w=<w>&dw=<dw>&returnbody=true
        POST :: /<prefix>/<bucket>?w=<w>&dw=<dw>&returnbody=true
        :param w: W-value of the request (defaults to the bucket's W)
        :param dw: DW-value of the request (defaults to the bucket's DW)
        :return: self
        """
        params = {"w": self.bucket.get_w(w),
                  "dw": self.bucket.get_dw(dw),
                  "returnbody": "true"}
        method = self.client.PUT if self.key is not None \
            else self.client.POST
        api = self.client.build_rest_path(self.bucket, self.key,
                                          params=params)

        headers = self.client.create_headers(self.content_type)
        if self.vclock:
            headers["X-Riak-Vclock"] = self.vclock
        if self.links:
            headers["Link"] = ", ".join(
                link.to_link_header(self.client) for link in self.links)

        if self.jsonize:
            content = json.dumps(self.data)
        else:
            content = self.data

        _, _, response = self.client.request(api, method, headers=headers,
                                             data=content)
        raise_for_response(response, (200, 201),
                           ObjectTransportError, ObjectStatusError,
                           "Error storing object %s" % self)
        if self.key is None and "Location" in response.headers:
            self.key = unquote_plus(
                response.headers["Location"].rstrip("/").split("/")[-1])
        self.populate(response, (200, 201))
        return self

    def delete(self, rw=None):
        """
        DELETE :: /<prefix>/<bucket>/<key>[?rw=<rw>]
        :param rw: RW-value of the request, server default if not given
        :return: self
        """
        params = None
        if rw is not None:
            params = {"rw": rw}
        api = self.client.build_rest_path(self.bucket, self.key,
                                          params=params)
        _, _, response = self.client.request(api, self.client.DELETE)
        raise_for_response(response, (204, 404),
                           ObjectTransportError, ObjectStatusError,
                           "Error deleting object %s" % self)
        self.clear()
        return self
