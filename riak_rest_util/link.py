from urllib.parse import quote_plus


class Link(object):
    """
    Link from one stored object to another: target bucket, target key
    and an optional tag. Without a tag (None or "") the bucket name is
    used.
    Must have 'client' set before calling get() / get_binary().
    """
    def __init__(self, bucket, key, tag=None):
        self.bucket = bucket
        self.key = key
        self.tag = tag
        self.client = None

    def __repr__(self):
        return "Link(%r, %r, %r)" % (self.bucket, self.key, self.tag)

    def __eq__(self, other):
        if not isinstance(other, Link):
            return NotImplemented
        return self.is_equal(other)

    def __hash__(self):
        return hash((self.bucket, self.key, self.get_tag()))

    def get(self, r=None):
        """
        Retrieve the object this link points to
        :param r: R-value to use
        :return: RiakObject
        """
        return self.client.bucket(self.bucket).get(self.key, r)

    def get_binary(self, r=None):
        return self.client.bucket(self.bucket).get_binary(self.key, r)

    def get_bucket(self):
        return self.bucket

    def set_bucket(self, name):
        self.bucket = name
        return self

    def get_key(self):
        return self.key

    def set_key(self, key):
        self.key = key
        return self

    def get_tag(self):
        if not self.tag:
            return self.bucket
        return self.tag

    def set_tag(self, tag):
        self.tag = tag
        return self

    def to_link_header(self, client=None):
        """
        Render this link as a single 'Link' header fragment
        :param client: Client providing the URL prefix.
                       Defaults to the link's own client
        :return: </prefix/bucket/key>; riaktag="tag"
        """
        client = client or self.client
        return '</%s/%s/%s>; riaktag="%s"' % (client.prefix,
                                              quote_plus(self.bucket),
                                              quote_plus(self.key),
                                              quote_plus(self.get_tag()))

    def is_equal(self, link):
        return self.bucket == link.bucket \
            and self.key == link.key \
            and self.get_tag() == link.get_tag()
