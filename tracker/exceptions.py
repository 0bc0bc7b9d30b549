class RepositoryError(Exception):
    """A read or write against the wins store failed."""

    def __init__(self, reason):
        super().__init__(reason)
        self.reason = reason
