class Enum(tuple):
    """Ordered set of string tags: members are the tags themselves

    strategy = Enum(["poweroftwo", "baseline"])
    strategy.baseline == "baseline"
    """

    def __new__(cls, names):
        names = tuple(names)
        if len(set(names)) != len(names):
            raise ValueError("Duplicate enumeration tags: {}".format(names))
        return super(Enum, cls).__new__(cls, names)

    def __getattr__(self, name):
        if name in self:
            return name
        raise AttributeError(name)

    def __call__(self, name):
        """Tag lookup (case insensitive)"""
        lname = str(name).lower()
        for tag in self:
            if tag.lower() == lname:
                return tag
        raise ValueError("'{}' is not one of {}".format(name, list(self)))
