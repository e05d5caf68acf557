"""
Statistics Service
==================

Provides statistics and node details following Single Responsibility Principle.
Only handles summarizing analysis results; it never re-walks the document.
"""

import logging
from typing import Dict, List, Optional, Tuple

from core.raw_element import RawElement
from core.settings import (
    REFERENCE_COUNT_BUCKETS,
    SNIPPET_MAX_LENGTH,
    TYPE_FAMILIES,
)
from services.component_service import ComponentAnalysis, ComponentRecord
from services.hierarchy_service import HierarchyAnalysis

logger = logging.getLogger(__name__)


class StatisticsService:
    """
    Service responsible for dashboard statistics and element details.

    Follows SRP: Only handles statistics and reporting.
    """

    def get_type_summary(self, analysis: HierarchyAnalysis) -> List[Tuple[str, int]]:
        """
        Get named element types sorted by count.

        Args:
            analysis: Named hierarchy analysis

        Returns:
            (type, count) pairs, most frequent first, ties by type name
        """
        return sorted(
            analysis.counts_by_type.items(),
            key=lambda item: (-item[1], item[0]),
        )

    def get_overview(
        self,
        analysis: HierarchyAnalysis,
        components: ComponentAnalysis
    ) -> Dict[str, int]:
        """
        Get headline numbers of a document.

        Args:
            analysis: Named hierarchy analysis
            components: Component analysis

        Returns:
            Overview dictionary
        """
        return {
            "total_named": analysis.total_named,
            "named_types": len(analysis.counts_by_type),
            "max_depth": analysis.max_depth,
            "relationships": components.relationship_count,
            "components": len(components.components),
            "ports": len(components.ports),
            "connectors": len(components.connectors),
        }

    def format_statistics_table(
        self,
        analysis: HierarchyAnalysis,
        components: ComponentAnalysis
    ) -> str:
        """
        Format statistics as readable table.

        Args:
            analysis: Named hierarchy analysis
            components: Component analysis

        Returns:
            Formatted table string
        """
        overview = self.get_overview(analysis, components)

        lines = []
        lines.append("=" * 80)
        lines.append("Named Element Statistics")
        lines.append("=" * 80)
        lines.append(f"{'Total Named Elements':<40} {overview['total_named']:<12}")
        lines.append(f"{'Named Element Types':<40} {overview['named_types']:<12}")
        lines.append(f"{'Max Tree Depth':<40} {overview['max_depth']:<12}")
        lines.append(f"{'Component Relationships':<40} {overview['relationships']:<12}")
        lines.append(f"{'Ports / Connectors':<40} {overview['ports']} / {overview['connectors']}")
        lines.append("-" * 80)
        lines.append(f"{'Element Type':<60} {'Count':<10}")
        lines.append("-" * 80)

        for tag, count in self.get_type_summary(analysis):
            lines.append(f"{tag:<60} {count:<10}")

        lines.append("=" * 80)

        return "\n".join(lines)

    def filter_by_type_family(
        self,
        components: List[ComponentRecord],
        family: str
    ) -> List[ComponentRecord]:
        """
        Filter components whose tag contains a type family marker.

        Args:
            components: Component records
            family: One of the TYPE_FAMILIES keys (e.g. "PORT")

        Returns:
            Matching records in original order
        """
        if family not in TYPE_FAMILIES:
            logger.warning("Unknown type family %r", family)
            return []
        return [record for record in components if family in record.tag]

    def get_reference_bucket(self, count: int) -> str:
        """Get the reference-count bucket label for a count."""
        for label, low, high in REFERENCE_COUNT_BUCKETS:
            if count >= low and (high is None or count <= high):
                return label
        return REFERENCE_COUNT_BUCKETS[0][0]

    def filter_by_reference_count(
        self,
        components: List[ComponentRecord],
        bucket: str
    ) -> List[ComponentRecord]:
        """
        Filter components by reference-count bucket ("0", "1-10", ...).

        Args:
            components: Component records
            bucket: Bucket label

        Returns:
            Matching records in original order
        """
        return [
            record for record in components
            if self.get_reference_bucket(len(record.references)) == bucket
        ]

    def find_related_components(
        self,
        name: str,
        components: ComponentAnalysis
    ) -> List[ComponentRecord]:
        """
        Find components referencing an element by name.

        A reference points at the element when its value equals the name or
        is a path whose last segment is the name.

        Args:
            name: Element identity
            components: Component analysis

        Returns:
            Referencing components in document order
        """
        if not name:
            return []
        suffix = "/" + name
        return [
            record for record in components.components
            if any(ref.value == name or ref.value.endswith(suffix) for ref in record.references)
        ]

    def format_xml_snippet(
        self,
        element: Optional[RawElement],
        max_length: int = SNIPPET_MAX_LENGTH
    ) -> str:
        """
        Render an element and its direct children as an XML-like snippet.

        Args:
            element: Source element
            max_length: Truncation length

        Returns:
            Snippet text, "..." appended when truncated
        """
        if element is None:
            return ""

        def open_tag(node: RawElement) -> str:
            attributes = node.attributes
            if not attributes:
                return f"<{node.tag}"
            rendered = " ".join(f'{name}="{value}"' for name, value in attributes.items())
            return f"<{node.tag} {rendered}"

        if not element.children:
            snippet = open_tag(element) + "/>"
        else:
            lines = [open_tag(element) + ">"]
            for child in element.children:
                child_text = child.text
                if child_text:
                    lines.append(f"  {open_tag(child)}>{child_text}</{child.tag}>")
                else:
                    lines.append(f"  {open_tag(child)}/>")
            lines.append(f"</{element.tag}>")
            snippet = "\n".join(lines)

        if len(snippet) > max_length:
            return snippet[:max_length] + "..."
        return snippet
