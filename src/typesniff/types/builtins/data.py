# topmark:header:start
#
#   project      : TypeSniff
#   file         : data.py
#   file_relpath : src/typesniff/types/builtins/data.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Data sets and documents.

Exports:
    TYPES: GML 3.2 and WFS 2.0 feature collections, ISO 19139 metadata records
        and Atom feeds. These are usually detected from sampled local files.

Notes:
    - The generic ``gml-featurecollection`` type has a lower priority than the
      WFS 2.0 flavour so a WFS response wins when both match.
"""

from __future__ import annotations

from typesniff.types.base import TestObjectType

TYPES: list[TestObjectType] = [
    TestObjectType(
        id="wfs20-featurecollection",
        label="WFS 2.0 feature collection",
        description="GML data wrapped in a WFS 2.0 FeatureCollection",
        detection_expression=(
            "boolean(/*[local-name() = 'FeatureCollection' and "
            "namespace-uri() = 'http://www.opengis.net/wfs/2.0'])"
        ),
        priority=200,
        parent="gml-featurecollection",
        filename_extensions=(".gml", ".xml"),
        mime_types=("application/gml+xml; version=3.2",),
    ),
    TestObjectType(
        id="gml-featurecollection",
        label="GML 3.2 feature collection",
        description="Data set encoded as a GML 3.2 FeatureCollection",
        detection_expression=(
            "boolean(/*[local-name() = 'FeatureCollection' and "
            "namespace-uri() = 'http://www.opengis.net/gml/3.2'])"
        ),
        priority=150,
        label_expression=(
            "string(/*/*[local-name() = 'name' and "
            "namespace-uri() = 'http://www.opengis.net/gml/3.2'])"
        ),
        filename_extensions=(".gml", ".xml"),
        mime_types=("application/gml+xml",),
    ),
    TestObjectType(
        id="iso19139-metadata",
        label="ISO 19139 metadata record",
        description="Metadata record encoded according to ISO/TS 19139",
        detection_expression=(
            "boolean(/*[local-name() = 'MD_Metadata' and "
            "namespace-uri() = 'http://www.isotc211.org/2005/gmd'])"
        ),
        priority=180,
        label_expression=(
            "string(//*[local-name() = 'identificationInfo']//*[local-name() = 'title']"
            "/*[local-name() = 'CharacterString'])"
        ),
        filename_extensions=(".xml",),
        mime_types=("application/xml",),
    ),
    TestObjectType(
        id="atom-feed",
        label="Atom feed",
        description="Atom syndication feed (e.g. a pre-defined download service)",
        detection_expression=(
            "boolean(/*[local-name() = 'feed' and "
            "namespace-uri() = 'http://www.w3.org/2005/Atom'])"
        ),
        priority=120,
        label_expression="string(/*/*[local-name() = 'title'])",
        description_expression="string(/*/*[local-name() = 'subtitle'])",
        uri_detection_expression=r"(?i)\.atom(\?|$)",
        filename_extensions=(".atom", ".xml"),
        mime_types=("application/atom+xml",),
    ),
]
