class IngestionError(Exception):
    """Base class for every failure that aborts a file load."""


class UnsupportedFileType(IngestionError):
    def __init__(self, filename: str, extension: str):
        self.filename = filename
        self.extension = extension
        super().__init__(f"Unsupported file type: '{extension or filename}'")


class XmlParseError(IngestionError):
    pass


class JsonSyntaxError(IngestionError):
    pass


class UnsupportedJsonStructure(IngestionError):
    pass


class DelimitedParseError(IngestionError):
    pass
