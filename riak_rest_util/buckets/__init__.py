from riak_rest_util.buckets.bucket import Bucket
from riak_rest_util.buckets.index_search import IndexType
from riak_rest_util.buckets.quorum import Quorum, QuorumSpec

__all__ = ["Bucket", "IndexType", "Quorum", "QuorumSpec"]
