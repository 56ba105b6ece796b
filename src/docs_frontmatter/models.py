"""Data models for converted documentation pages."""

from dataclasses import dataclass

API_TYPES = frozenset(
    {
        "module",
        "class",
        "function",
        "exception",
        "property",
        "method",
        "attribute",
    }
)


@dataclass(frozen=True)
class HardcodedMetadata:
    """Metadata for a page whose author supplied the whole front matter."""

    hardcoded_frontmatter: str

    def __post_init__(self) -> None:
        """Reject an empty front matter payload.

        Raises:
            ValueError: If the payload is empty.
        """
        if not self.hardcoded_frontmatter:
            msg = "hardcoded_frontmatter must not be empty"
            raise ValueError(msg)


@dataclass(frozen=True)
class ApiSymbolMetadata:
    """Metadata for a page documenting a single API symbol."""

    api_name: str
    api_type: str

    def __post_init__(self) -> None:
        """Validate the symbol name and kind.

        Raises:
            ValueError: If the name is empty or the kind is not recognised.
        """
        if not self.api_name:
            msg = "api_name must not be empty"
            raise ValueError(msg)
        if self.api_type not in API_TYPES:
            msg = f"Unknown api_type {self.api_type!r} for {self.api_name}"
            raise ValueError(msg)


@dataclass(frozen=True)
class UnnamedMetadata:
    """Metadata for a page with no API symbol and no hardcoded header."""


PageMetadata = HardcodedMetadata | ApiSymbolMetadata | UnnamedMetadata


def page_metadata(
    api_name: str | None = None,
    api_type: str | None = None,
    hardcoded_frontmatter: str | None = None,
) -> PageMetadata:
    """Build the metadata case matching a converter's optional fields.

    Args:
        api_name: Fully qualified symbol name, if the page documents one.
        api_type: Kind of the symbol; required together with ``api_name``.
        hardcoded_frontmatter: Raw front matter supplied by the page author.

    Returns:
        The single metadata case the fields describe.

    Raises:
        ValueError: If the fields describe more than one case or only half
            of an API symbol.
    """
    if hardcoded_frontmatter and api_name:
        msg = f"Page for {api_name} cannot carry both api_name and hardcoded_frontmatter"
        raise ValueError(msg)
    if (api_name or api_type) and not (api_name and api_type):
        msg = "api_name and api_type must be given together"
        raise ValueError(msg)
    if hardcoded_frontmatter:
        return HardcodedMetadata(hardcoded_frontmatter)
    if api_name and api_type:
        return ApiSymbolMetadata(api_name, api_type)
    return UnnamedMetadata()


@dataclass
class PageResult:
    """A documentation page after conversion to Markdown."""

    body: str
    metadata: PageMetadata
    is_release_notes: bool = False


@dataclass(frozen=True)
class PackageDescriptor:
    """The documentation package a batch of pages belongs to."""

    title: str
    version_without_patch: str
    has_separate_release_notes: bool = False
