from urllib.parse import unquote_plus

from riak_rest_util.exceptions import \
    IndexSearchStatusError, \
    IndexSearchTransportError, \
    raise_for_response
from riak_rest_util.link import Link
from riak_rest_util.riak_object import RiakObject


class IndexType(object):
    INT = "int"
    BIN = "bin"

    ALL = (INT, BIN)


class IndexSearchAPI(object):
    def index_search(self, index_name, index_type, start_or_exact, end=None,
                     dedupe=False):
        """
        GET :: /<prefix>/<bucket>/index/<index_name>_<index_type>/<start>[/<end>]
        Range query if 'end' is given, exact match otherwise.
        The whole result set comes back in one response.
        :param index_name: Name of the secondary index
        :param index_type: IndexType.INT or IndexType.BIN
        :param start_or_exact: Range start, or the exact value to match
        :param end: Range end (inclusive)
        :param dedupe: Drop repeated keys, keeping the first occurrence
        :return: List of Link objects, one per matching key
        """
        if index_type not in IndexType.ALL:
            raise ValueError("Invalid index type '%s'" % index_type)

        msg = "Error searching index."
        index = f"{index_name}_{index_type}"
        api = self.client.build_index_path(self, index, start_or_exact, end)
        _, _, response = self.client.request(api, self.client.GET)
        raise_for_response(response, (200,), IndexSearchTransportError,
                           IndexSearchStatusError, msg)

        obj = RiakObject(self.client, self, None)
        obj.populate(response, (200,))
        data = obj.get_data()
        if not obj.exists() or not isinstance(data, dict) \
                or not isinstance(data.get("keys"), list) \
                or not all(isinstance(key, str) for key in data["keys"]):
            raise IndexSearchStatusError(msg, status=obj.status,
                                         content=data)

        links = list()
        seen_keys = set()
        for key in data["keys"]:
            key = unquote_plus(key)
            if dedupe:
                if key in seen_keys:
                    continue
                seen_keys.add(key)
            link = Link(self.name, key)
            link.client = self.client
            links.append(link)
        self.log.debug("Bucket %s: %s returned %s keys"
                       % (self.name, index, len(links)))
        return links
