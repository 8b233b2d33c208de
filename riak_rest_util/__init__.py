from riak_rest_util.buckets import Bucket, IndexType, Quorum, QuorumSpec
from riak_rest_util.link import Link
from riak_rest_util.rest_client import RiakClient
from riak_rest_util.riak_object import RiakObject

__all__ = ["Bucket", "IndexType", "Link", "Quorum", "QuorumSpec",
           "RiakClient", "RiakObject"]
