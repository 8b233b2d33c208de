class Quorum(object):
    R = "r"
    W = "w"
    DW = "dw"

    ALL = (R, W, DW)


class QuorumSpec(object):
    """
    Per-bucket R/W/DW overrides.

    A value is resolved from three tiers: the call-site value, then the
    bucket override held here, then the client default passed in as the
    floor. None means 'not set' at any tier. Values are passed through
    as-is; range checks are left to the server.
    """
    def __init__(self, r=None, w=None, dw=None):
        self.r = r
        self.w = w
        self.dw = dw

    def __repr__(self):
        return "QuorumSpec(r=%s, w=%s, dw=%s)" % (self.r, self.w, self.dw)

    def get(self, kind):
        self.__validate_kind(kind)
        return getattr(self, kind)

    def set(self, kind, value):
        self.__validate_kind(kind)
        setattr(self, kind, value)
        return self

    def resolve(self, kind, explicit, floor):
        """
        :param kind: One of Quorum.R / Quorum.W / Quorum.DW
        :param explicit: Value given at the call-site (or None)
        :param floor: Client wide default for 'kind'
        :return: Effective value
        """
        if explicit is not None:
            return explicit
        override = self.get(kind)
        if override is not None:
            return override
        return floor

    @staticmethod
    def __validate_kind(kind):
        if kind not in Quorum.ALL:
            raise ValueError("Invalid quorum kind '%s'" % kind)
