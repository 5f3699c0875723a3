class Meta2PngError(Exception):
    """Base class for every error raised while converting a metadata file."""


class EmptyInputError(Meta2PngError, ValueError):
    pass


class MalformedColorError(Meta2PngError, ValueError):
    pass


class IndexOutOfRangeError(Meta2PngError, IndexError):
    pass


class MetadataError(Meta2PngError, ValueError):
    pass
