import logging
import uuid

import requests
from requests.utils import quote
from urllib.parse import urlencode


class RiakRestConnection(object):
    DELETE = "DELETE"
    GET = "GET"
    POST = "POST"
    PUT = "PUT"

    @staticmethod
    def quote_segment(value):
        """
        Quote a single path segment, '/' included
        """
        return quote(str(value), safe="")

    @staticmethod
    def generate_client_id():
        return "py_%s" % uuid.uuid4().hex[:16]

    def set_server_values(self, host, port, prefix, client_id=None):
        self.host = host
        self.port = port
        self.prefix = prefix.strip("/")
        self.client_id = client_id or self.generate_client_id()
        self.log = logging.getLogger("rest_api")

    def set_endpoint_urls(self):
        self.base_url = "http://{0}:{1}".format(self.host, self.port)
        self.ping_url = self.base_url + "/ping"

    def __init__(self):
        """
        Contains the place-holders. Need to be initialized by the
        implementing client
        """
        self.host = None
        self.port = None
        self.prefix = None
        self.client_id = None
        self.timeout = 30

        self.base_url = None
        self.ping_url = None

        # Shared requests.Session (if any)
        self.session = None

        self.log = logging.getLogger("rest_api")

    def create_headers(self, content_type=None):
        headers = {'X-Riak-ClientId': self.client_id,
                   'Accept': '*/*'}
        if content_type:
            headers['Content-Type'] = content_type
        return headers

    def build_rest_path(self, bucket=None, key=None, params=None):
        """
        Build the URL of a bucket or key resource
        :param bucket: Bucket name (or object exposing 'name')
        :param key: Key within the bucket
        :param params: Dict of query string parameters
        :return: Complete URL
        """
        api = f"{self.base_url}/{self.prefix}"
        if bucket is not None:
            bucket_name = getattr(bucket, "name", bucket)
            api += f"/{self.quote_segment(bucket_name)}"
            if key is not None:
                api += f"/{self.quote_segment(key)}"
        if params:
            api += "?" + urlencode(params)
        return api

    def build_index_path(self, bucket, index, start, end=None):
        """
        GET :: /<prefix>/<bucket>/index/<index>/<start>[/<end>]
        """
        bucket_name = getattr(bucket, "name", bucket)
        api = f"{self.base_url}/{self.prefix}" \
            + f"/{self.quote_segment(bucket_name)}/index" \
            + f"/{self.quote_segment(index)}/{self.quote_segment(start)}"
        if end is not None:
            api += f"/{self.quote_segment(end)}"
        return api

    def request(self, api, method='GET', params=None, headers=None,
                data=None, timeout=None, session=None):
        """
        Issue a single HTTP request. No retries are done here.
        :param api: Complete URL
        :param method: HTTP method
        :param params: Query string params (dict)
        :param headers: Headers to send. Defaults to create_headers()
        :param data: Request body
        :param timeout: Request timeout in seconds
        :param session: requests.Session to use
        :return: (status, content, response). 'response' is None if the
                 request never got a response
        """
        session = session or self.session or requests.Session()
        headers = headers or self.create_headers()
        timeout = timeout or self.timeout
        request_args = {
            "method": method,
            "url": api,
            "headers": headers,
            "timeout": timeout,
        }
        if params:
            request_args["params"] = params
        if data is not None:
            request_args["data"] = data

        self.log.debug("%s %s" % (method, api))
        try:
            response = session.request(**request_args)
        except requests.exceptions.Timeout as errt:
            self.log.error("Timeout Error: {0}".format(errt))
            return False, None, None
        except requests.exceptions.ConnectionError as errc:
            self.log.error("Error Connecting {0}".format(errc))
            return False, None, None
        except requests.exceptions.RequestException as err:
            self.log.error("Something else: {0}".format(err))
            return False, None, None

        status = 200 <= response.status_code < 300
        content = response.content
        try:
            content = response.json()
        except ValueError:
            pass
        if not status:
            self.log.debug("%s %s returned %s"
                           % (method, api, response.status_code))
        return status, content, response
