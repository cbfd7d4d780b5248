class DuplicateEntryError(Exception):
    """Raised by repositories when a storage-level unique constraint is violated"""

    def __init__(self, constraint: str):
        self.constraint = constraint
        super().__init__(f"Duplicate entry violates {constraint}")
