"""Exceptions raised while converting a scene into a Level."""


class LevelConversionError(ValueError):
    """Base class: any of these aborts the whole conversion."""


class SceneParseError(LevelConversionError):
    def __init__(self, message, line_no=None):
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no


class UnknownIdentifierError(LevelConversionError, KeyError):
    """A prop id, resource path or objective code missing from its table."""

    def __init__(self, category, value):
        super().__init__(f"Unknown {category}: {value!r}")
        self.category = category
        self.value = value

    # KeyError.__str__ would repr() the message
    __str__ = LevelConversionError.__str__


class RecordNotFoundError(LevelConversionError, LookupError):
    def __init__(self, description):
        super().__init__(f"No record found: {description}")
        self.description = description


class RecordFieldError(LevelConversionError):
    def __init__(self, record, field):
        super().__init__(f"[{record.kind}] record is missing field {field!r}")
        self.record = record
        self.field = field


class MalformedLiteralError(LevelConversionError):
    def __init__(self, expected, value):
        super().__init__(f"Malformed {expected} literal: {value!r}")
        self.expected = expected
        self.value = value
