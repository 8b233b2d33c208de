import json

from riak_rest_util.exceptions import \
    BucketPropertyStatusError, \
    BucketPropertyTransportError, \
    raise_for_response
from riak_rest_util.riak_object import RiakObject


class BucketPropertiesAPI(object):
    """
    Bucket level metadata. The server owns the properties: nothing is
    cached and every call is a full round-trip.
    Expects 'client' and 'name' to be set by the implementing class.
    """
    N_VAL = "n_val"
    ALLOW_MULT = "allow_mult"

    def get_properties(self):
        """
        GET :: /<prefix>/<bucket>?props=true&keys=false
        :return: Dict of all bucket properties, as returned by the server
        """
        msg = "Error getting bucket properties."
        params = {"props": "true", "keys": "false"}
        api = self.client.build_rest_path(self, params=params)
        _, _, response = self.client.request(api, self.client.GET)
        raise_for_response(response, (200,), BucketPropertyTransportError,
                           BucketPropertyStatusError, msg)

        # Use a RiakObject to decode the response
        obj = RiakObject(self.client, self, None)
        obj.populate(response, (200,))
        data = obj.get_data()
        if not obj.exists() or not isinstance(data, dict) \
                or not isinstance(data.get("props"), dict):
            self.log.error("Bucket %s: properties missing in response"
                           % self.name)
            raise BucketPropertyStatusError(msg, status=obj.status,
                                            content=data)
        return data["props"]

    def set_properties(self, props):
        """
        PUT :: /<prefix>/<bucket>
        Properties not present in 'props' are left untouched by the server
        :param props: Dict of property_name: value
        :return None:
        """
        api = self.client.build_rest_path(self)
        headers = self.client.create_headers("application/json")
        content = json.dumps({"props": props})
        _, _, response = self.client.request(api, self.client.PUT,
                                             headers=headers, data=content)
        raise_for_response(response, (204,), BucketPropertyTransportError,
                           BucketPropertyStatusError,
                           "Error setting bucket properties.")
        self.log.debug("Bucket %s: updated properties %s"
                       % (self.name, list(props.keys())))

    def get_property(self, key):
        """
        :param key: Property name
        :return: Property value, None if the server does not report it
        """
        return self.get_properties().get(key)

    def set_property(self, key, value):
        return self.set_properties({key: value})

    def get_n_val(self):
        return self.get_property(self.N_VAL)

    def set_n_val(self, n_val):
        """
        Number of replicas written for each object in this bucket.
        Set once before writing any data and never change it afterwards.
        """
        return self.set_property(self.N_VAL, n_val)

    def get_allow_multiples(self):
        # Older servers report the flag as the string "true" / "false"
        value = self.get_property(self.ALLOW_MULT)
        return value is True or value == "true"

    def set_allow_multiples(self, allow):
        """
        If True, conflicting writes are kept as siblings and
        returned to the client
        """
        return self.set_property(self.ALLOW_MULT, allow)
