class TypedrillError(Exception):
    pass


class ValidationError(TypedrillError):
    pass


class InsufficientDataError(TypedrillError):
    pass


class StorageError(TypedrillError):
    pass
