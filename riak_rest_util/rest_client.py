from riak_rest_util.buckets.bucket import Bucket
from riak_rest_util.config import ClientInputParser
from riak_rest_util.connection import RiakRestConnection


class RiakClient(RiakRestConnection):
    """
    Entry point to the store's HTTP interface. Holds the client wide
    R/W/DW defaults and hands out Bucket objects.
    """
    def __init__(self, host="127.0.0.1", port=8098, prefix="riak",
                 client_id=None, r=2, w=2, dw=2, timeout=30):
        super(RiakClient, self).__init__()

        self.set_server_values(host, port, prefix, client_id)
        self.set_endpoint_urls()
        self.timeout = timeout
        self.r = r
        self.w = w
        self.dw = dw
        self.buckets = dict()

    @classmethod
    def from_config(cls, ini_file):
        """
        Build a client from the [client] section of an ini file
        """
        client_input = ClientInputParser.parse_from_file(ini_file)
        return cls(**client_input.client_kwargs())

    def get_r(self):
        """
        R-value used when neither the call nor the bucket sets one
        """
        return self.r

    def set_r(self, r):
        self.r = r
        return self

    def get_w(self):
        return self.w

    def set_w(self, w):
        self.w = w
        return self

    def get_dw(self):
        return self.dw

    def set_dw(self, dw):
        self.dw = dw
        return self

    def get_client_id(self):
        return self.client_id

    def set_client_id(self, client_id):
        self.client_id = client_id
        return self

    def bucket(self, name):
        """
        :param name: Bucket name
        :return: Bucket object, the same one for repeated calls
        """
        if name not in self.buckets:
            self.buckets[name] = Bucket(self, name)
        return self.buckets[name]

    def is_alive(self):
        """
        GET :: /ping
        """
        _, _, response = self.request(self.ping_url, self.GET)
        return response is not None and response.status_code == 200
