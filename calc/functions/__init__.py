from . import aggregate, elementary  # noqa: F401  (registers the catalog)
