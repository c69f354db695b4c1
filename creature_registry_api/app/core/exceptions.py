"""Domain errors raised by the service and repository layers."""


class CreatureRegistryError(Exception):
    """Base class for all registry errors."""


class CreatureNotFoundError(CreatureRegistryError):
    """Raised when an operation targets an identifier with no stored creature."""

    def __init__(self, creature_id):
        self.creature_id = creature_id
        super().__init__(f"Creature {creature_id} not found")


class CreatureConflictError(CreatureRegistryError):
    """Raised when a create or rename would duplicate an existing name."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Creature with name '{name}' already exists")


class CreatureWriteRejectedError(CreatureConflictError):
    """Raised when the store refuses an update that did not change the name."""

    def __init__(self, creature_id, reason):
        self.name = None
        self.creature_id = creature_id
        self.reason = reason
        CreatureRegistryError.__init__(self, f"Update of creature {creature_id} rejected: {reason}")


class PersistenceError(CreatureRegistryError):
    """Raised when the backing store fails for reasons other than absence.

    Wraps lower-level driver exceptions (lost connection, locked or
    corrupt database file) so that upper layers depend only on this
    module.  Requests that hit it are failed, not retried.
    """
