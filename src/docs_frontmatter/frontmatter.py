"""Front matter headers for converted API documentation pages."""

import dataclasses
import logging
from collections.abc import Iterable

from docs_frontmatter.models import (
    ApiSymbolMetadata,
    HardcodedMetadata,
    PackageDescriptor,
    PageResult,
)

logger = logging.getLogger(__name__)


def last_identifier_part(identifier: str) -> str:
    """Return the last dot-delimited segment of a fully qualified name.

    Args:
        identifier: Name such as ``qiskit.circuit.Measure``.

    Returns:
        The final segment, e.g. ``Measure``.
    """
    return identifier.rsplit(".", 1)[-1]


class FrontMatterAnnotator:
    """Prepends the matching front matter header to each page of a package."""

    DELIMITER = "---"
    API_DESCRIPTION_PREFIX = "API reference for "
    API_TOC_MIN_HEADING_LEVEL = 1
    RELEASE_NOTES_TOC_MAX_HEADING_LEVEL = 2

    def __init__(self, package: PackageDescriptor) -> None:
        """Initialise annotator for one documentation package.

        Args:
            package: Package shared by every page in the batch.
        """
        self.package = package

    def render_header(self, page: PageResult) -> str | None:
        """Render the front matter block for a page.

        Hardcoded metadata wins over an API symbol, which wins over the
        release notes flag.

        Args:
            page: Converted page to classify.

        Returns:
            Header block framed by ``---`` lines, or None when the page
            matches no rule.
        """
        match = self._classify(page)
        return match[1] if match else None

    def annotate_page(self, page: PageResult) -> PageResult:
        """Return a copy of the page with its header prepended.

        Args:
            page: Converted page.

        Returns:
            New page with the header, or the same page when no rule matches.
        """
        match = self._classify(page)
        if match is None:
            logger.debug("No front matter for page (passthrough)")
            return page
        case, header = match
        logger.debug("Added %s front matter", case)
        return dataclasses.replace(page, body=f"{header}\n\n{page.body}")

    def annotate(self, pages: Iterable[PageResult]) -> list[PageResult]:
        """Annotate a batch of pages without modifying the inputs.

        Args:
            pages: Pages of this package, in order.

        Returns:
            Pages in the same order, annotated where a rule matches.
        """
        pages = list(pages)
        results = [self.annotate_page(page) for page in pages]
        annotated = sum(1 for before, after in zip(pages, results) if before is not after)
        logger.info(
            "Added front matter to %d of %d pages for %s",
            annotated,
            len(results),
            self.package.title,
        )
        return results

    def annotate_in_place(self, pages: list[PageResult]) -> None:
        """Prepend headers by replacing ``body`` on each matching page.

        Calling this twice on the same pages prepends a second header.

        Args:
            pages: Pages of this package; mutated in place.
        """
        for page, annotated in zip(pages, self.annotate(pages)):
            page.body = annotated.body

    def _classify(self, page: PageResult) -> tuple[str, str] | None:
        """Select the rule a page matches and render its header.

        Args:
            page: Converted page to classify.

        Returns:
            Tuple of the matched case label and the framed header, or None
            when the page matches no rule.
        """
        metadata = page.metadata
        if isinstance(metadata, HardcodedMetadata):
            return "hardcoded", self._frame(metadata.hardcoded_frontmatter)
        if isinstance(metadata, ApiSymbolMetadata):
            header = self._frame(self._format_fields(self._api_fields(metadata)))
            return f"API ({metadata.api_name})", header
        if page.is_release_notes:
            return "release notes", self._frame(self._format_fields(self._release_notes_fields()))
        return None

    def _api_fields(self, metadata: ApiSymbolMetadata) -> list[tuple[str, object]]:
        """Build the header fields for an API reference page.

        Args:
            metadata: Symbol the page documents.

        Returns:
            Ordered key/value pairs for the header.
        """
        return [
            ("title", last_identifier_part(metadata.api_name)),
            ("description", f"{self.API_DESCRIPTION_PREFIX}{metadata.api_name}"),
            ("in_page_toc_min_heading_level", self.API_TOC_MIN_HEADING_LEVEL),
            ("python_api_type", metadata.api_type),
            ("python_api_name", metadata.api_name),
        ]

    def _release_notes_fields(self) -> list[tuple[str, object]]:
        """Build the header fields for the package's release notes page.

        The version appears only when release notes are kept per version.

        Returns:
            Ordered key/value pairs for the header.
        """
        title = self.package.title
        if self.package.has_separate_release_notes:
            versioned = f"{title} {self.package.version_without_patch}"
            page_title = f"{versioned} release notes"
            description = f"Changes made in {versioned}"
        else:
            page_title = f"{title} release notes"
            description = f"Changes made to {title}"
        return [
            ("title", page_title),
            ("description", description),
            ("in_page_toc_max_heading_level", self.RELEASE_NOTES_TOC_MAX_HEADING_LEVEL),
        ]

    @staticmethod
    def _format_fields(fields: list[tuple[str, object]]) -> str:
        """Format header fields as ``key: value`` lines.

        Args:
            fields: Ordered key/value pairs.

        Returns:
            Newline-joined lines, values emitted verbatim.
        """
        return "\n".join(f"{key}: {value}" for key, value in fields)

    def _frame(self, content: str) -> str:
        """Wrap header content between delimiter lines.

        Args:
            content: Header lines without delimiters.

        Returns:
            Header block framed by ``---`` lines.
        """
        return f"{self.DELIMITER}\n{content}\n{self.DELIMITER}"


def add_front_matter(pages: list[PageResult], package: PackageDescriptor) -> None:
    """Prepend front matter to every matching page of one package, in place.

    Args:
        pages: Converted pages of the package.
        package: Package the pages belong to.
    """
    FrontMatterAnnotator(package).annotate_in_place(pages)
