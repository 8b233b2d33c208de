from urllib.parse import unquote_plus

from riak_rest_util.exceptions import \
    KeyListStatusError, \
    KeyListTransportError, \
    raise_for_response
from riak_rest_util.riak_object import RiakObject


class BucketInfo(object):
    def get_keys(self):
        """
        GET :: /<prefix>/<bucket>?props=false&keys=true
        Walks every key of the bucket on the server side, so it is slow
        :return: List of decoded keys
        """
        msg = "Error listing bucket keys."
        params = {"props": "false", "keys": "true"}
        api = self.client.build_rest_path(self, params=params)
        _, _, response = self.client.request(api, self.client.GET)
        raise_for_response(response, (200,), KeyListTransportError,
                           KeyListStatusError, msg)

        obj = RiakObject(self.client, self, None)
        obj.populate(response, (200,))
        data = obj.get_data()
        if not obj.exists() or not isinstance(data, dict) \
                or not isinstance(data.get("keys"), list) \
                or not all(isinstance(key, str) for key in data["keys"]):
            raise KeyListStatusError(msg, status=obj.status, content=data)
        return [unquote_plus(key) for key in data["keys"]]
