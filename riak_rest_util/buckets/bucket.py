import logging

from riak_rest_util.buckets.bucket_info import BucketInfo
from riak_rest_util.buckets.bucket_properties import BucketPropertiesAPI
from riak_rest_util.buckets.index_search import IndexSearchAPI
from riak_rest_util.buckets.quorum import Quorum, QuorumSpec
from riak_rest_util.riak_object import RiakObject


class Bucket(BucketPropertiesAPI, BucketInfo, IndexSearchAPI):
    """
    Access and change information about a bucket, and create or
    retrieve the objects stored in it.
    Built by RiakClient.bucket(name).
    """
    def __init__(self, client, name):
        super(Bucket, self).__init__()
        self.client = client
        self.name = name
        self.quorum = QuorumSpec()
        self.log = logging.getLogger("bucket")

    def __str__(self):
        return self.name

    def get_name(self):
        return self.name

    def get_r(self, r=None):
        """
        :param r: Call-site R-value, wins if given
        :return: 'r', else this bucket's R, else the client's R
        """
        return self.quorum.resolve(Quorum.R, r, self.client.get_r())

    def set_r(self, r):
        """
        R-value used by get() / get_binary() calls that do not pass one
        """
        self.quorum.set(Quorum.R, r)
        return self

    def get_w(self, w=None):
        return self.quorum.resolve(Quorum.W, w, self.client.get_w())

    def set_w(self, w):
        self.quorum.set(Quorum.W, w)
        return self

    def get_dw(self, dw=None):
        return self.quorum.resolve(Quorum.DW, dw, self.client.get_dw())

    def set_dw(self, dw):
        self.quorum.set(Quorum.DW, dw)
        return self

    def new_object(self, key, data=None):
        """
        Create a new object that will be stored as JSON
        :param key: Name of the key
        :param data: Data to store
        :return: RiakObject
        """
        obj = RiakObject(self.client, self, key)
        obj.set_data(data)
        obj.set_content_type(RiakObject.JSON_CONTENT_TYPE)
        obj.jsonize = True
        return obj

    def new_binary(self, key, data, content_type="text/json"):
        """
        Create a new object that will be stored as plain text / binary
        """
        obj = RiakObject(self.client, self, key)
        obj.set_data(data)
        obj.set_content_type(content_type)
        obj.jsonize = False
        return obj

    def get(self, key, r=None):
        """
        Retrieve a JSON encoded object
        :param key: Name of the key
        :param r: R-value of the request (defaults to the bucket's R)
        :return: RiakObject
        """
        obj = RiakObject(self.client, self, key)
        obj.jsonize = True
        return obj.reload(self.get_r(r))

    def get_binary(self, key, r=None):
        obj = RiakObject(self.client, self, key)
        obj.jsonize = False
        return obj.reload(self.get_r(r))
