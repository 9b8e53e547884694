class NotFoundError(ValueError):
    """Raised when an update or delete targets an id that is not stored.

    Subclasses ValueError so UI handlers that already catch ValueError
    surface it like any other rejected input.
    """

    def __init__(self, kind: str, entity_id: str):
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} not found: {entity_id}")
