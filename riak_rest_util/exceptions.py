class RiakRestError(Exception):
    """
    Base class for every failure raised by riak_rest_util.
    :param msg: Operation specific message
    :param status: HTTP status of the response, None if nothing came back
    :param content: Decoded body of the response, if any
    """
    def __init__(self, msg, status=None, content=None):
        super(RiakRestError, self).__init__(msg)
        self.status = status
        self.content = content

    def __str__(self):
        msg = super(RiakRestError, self).__str__()
        if self.status is not None:
            msg = "%s (status: %s)" % (msg, self.status)
        return msg


class TransportUnavailable(RiakRestError):
    # No response at all (connection refused, timeout, ...)
    pass


class UnexpectedStatus(RiakRestError):
    # Response received with a status outside the accepted set,
    # or with a body that does not decode to the expected shape
    pass


class BucketPropertyError(RiakRestError):
    pass


class BucketPropertyTransportError(BucketPropertyError, TransportUnavailable):
    pass


class BucketPropertyStatusError(BucketPropertyError, UnexpectedStatus):
    pass


class KeyListError(RiakRestError):
    pass


class KeyListTransportError(KeyListError, TransportUnavailable):
    pass


class KeyListStatusError(KeyListError, UnexpectedStatus):
    pass


class IndexSearchError(RiakRestError):
    pass


class IndexSearchTransportError(IndexSearchError, TransportUnavailable):
    pass


class IndexSearchStatusError(IndexSearchError, UnexpectedStatus):
    pass


class ObjectError(RiakRestError):
    pass


class ObjectTransportError(ObjectError, TransportUnavailable):
    pass


class ObjectStatusError(ObjectError, UnexpectedStatus):
    pass


def raise_for_response(response, accepted, transport_error, status_error,
                       msg):
    """
    Raise the right error variant if the response cannot be used.
    :param response: requests.Response object or None
    :param accepted: Iterable of accepted HTTP status codes
    :param transport_error: Exception class raised for a missing response
    :param status_error: Exception class raised for an unexpected status
    :param msg: Message used for both error variants
    :return None:
    """
    if response is None:
        raise transport_error(msg)
    if response.status_code not in accepted:
        raise status_error(msg, status=response.status_code)
