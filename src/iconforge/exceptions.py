"""Exception hierarchy for iconforge."""


class IconForgeError(Exception):
    """Base exception for all iconforge errors."""

    pass


class ManifestError(IconForgeError):
    """Errors related to manifest or icon document parsing."""

    pass


class ManifestParseError(ManifestError):
    """A manifest or icon file is not well-formed XML."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse '{path}': {reason}")


class SourceError(IconForgeError):
    """Errors related to resolving icon sources."""

    pass


class SourceNotFoundError(SourceError):
    """An icon source path or glob could not be resolved."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read source '{path}': {reason}")


class FormatError(IconForgeError):
    """Errors related to output format selection."""

    pass


class UnknownFormatError(FormatError):
    """Requested output format is not supported."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown output format '{name}'")


class CodecError(IconForgeError):
    """Errors raised while encoding font binaries."""

    pass


class FontEncodeError(CodecError):
    """A font codec failed to produce its output."""

    def __init__(self, format_name: str, reason: str) -> None:
        self.format_name = format_name
        self.reason = reason
        super().__init__(f"Failed to generate {format_name}: {reason}")
