class UriError(Exception):
    ...
