class CatalogueError(Exception):
    pass


class ValidationError(CatalogueError):
    """Bad user input in the add/edit form."""


class RecordIndexError(ValidationError):
    """An absolute record index outside the catalogue."""


class CatalogueIOError(CatalogueError):
    """Loading or saving the catalogue file failed."""
